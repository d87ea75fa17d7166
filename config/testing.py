UTC_OFFSET_MINUTES = 210
OFFSET_NAME = "Asia/Tehran"

STANDARD_ENTRY = "06:00"
STANDARD_EXIT = "14:00"

DEBUG = False
TESTING = True
LOG_LEVEL = "WARNING"
