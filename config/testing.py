SECRET_KEY = "test-secret"

ROSTER_PATH = ""
WORKBOOK_PATH = ""

WINDOW_DAYS = 14
EMAIL_DOMAIN = "tint.edu"
ID_PREFIX = "TIG"

LOG_LEVEL = "WARNING"

DEBUG = False
TESTING = True
