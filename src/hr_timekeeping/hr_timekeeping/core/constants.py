"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

# Iran Standard Time, UTC+03:30, no daylight saving.
TEHRAN_OFFSET_MINUTES = 210
TEHRAN_ZONE_NAME = "Asia/Tehran"

DEFAULT_STANDARD_ENTRY = "06:00"
DEFAULT_STANDARD_EXIT = "14:00"

DEFAULT_UPCOMING_HOLIDAYS = 5

MS_PER_MINUTE = 60_000
