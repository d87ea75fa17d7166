import os

# Iran Standard Time (+03:30). Override only if the deployment region changes.
UTC_OFFSET_MINUTES = int(os.getenv("UTC_OFFSET_MINUTES", "210"))
OFFSET_NAME = os.getenv("OFFSET_NAME", "Asia/Tehran")

# Official entry/exit used when a report does not pick its own.
STANDARD_ENTRY = os.getenv("STANDARD_ENTRY", "06:00")
STANDARD_EXIT = os.getenv("STANDARD_EXIT", "14:00")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")
