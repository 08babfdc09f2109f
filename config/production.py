import os

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

ROSTER_PATH = os.getenv("ROSTER_PATH", "")
WORKBOOK_PATH = os.getenv("WORKBOOK_PATH", "")

WINDOW_DAYS = int(os.getenv("WINDOW_DAYS", "14"))
EMAIL_DOMAIN = os.getenv("EMAIL_DOMAIN", "tint.edu")
ID_PREFIX = os.getenv("ID_PREFIX", "TIG")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

DEBUG = False
