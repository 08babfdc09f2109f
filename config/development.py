import os

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Roster text blob and attendance workbook read at startup
ROSTER_PATH = os.getenv("ROSTER_PATH", "data/roster.txt")
WORKBOOK_PATH = os.getenv("WORKBOOK_PATH", "data/punches.csv")

WINDOW_DAYS = int(os.getenv("WINDOW_DAYS", "14"))
EMAIL_DOMAIN = os.getenv("EMAIL_DOMAIN", "tint.edu")
ID_PREFIX = os.getenv("ID_PREFIX", "TIG")

LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

DEBUG = True
