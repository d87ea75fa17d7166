"""HR timekeeping package.

Pure calendar and attendance time accounting used by the Persian HR system:
Jalali/Gregorian conversion, Tehran local time, interval durations,
lateness/earliness and per-person monthly rollups.
"""
