import os

UTC_OFFSET_MINUTES = int(os.getenv("UTC_OFFSET_MINUTES", "210"))
OFFSET_NAME = os.getenv("OFFSET_NAME", "Asia/Tehran")

STANDARD_ENTRY = os.getenv("STANDARD_ENTRY", "06:00")
STANDARD_EXIT = os.getenv("STANDARD_EXIT", "14:00")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")
