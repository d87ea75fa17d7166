"""Leap-year rules and month lengths for both calendars."""

from __future__ import annotations

from ..common.validators import require_int
from ..core.exceptions import InvalidDateError

# Jalali year 1 shifted onto the 33-year arithmetic cycle.
JALALI_EPOCH_SHIFT = 1595

_GREGORIAN_MONTH_DAYS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


def jalali_days_before_year(year: int) -> int:
    """Days from the arithmetic epoch to Farvardin 1 of ``year``.

    Eight leap years per 33-year cycle, placed by ``((y % 33) + 3) // 4``.
    """
    shifted = year + JALALI_EPOCH_SHIFT
    return 365 * shifted + (shifted // 33) * 8 + ((shifted % 33) + 3) // 4


def is_jalali_leap_year(year: int) -> bool:
    require_int(year, "year", InvalidDateError)
    return jalali_days_before_year(year + 1) - jalali_days_before_year(year) == 366


def is_gregorian_leap_year(year: int) -> bool:
    require_int(year, "year", InvalidDateError)
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def _check_month(month) -> int:
    require_int(month, "month", InvalidDateError)
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {month}")
    return month


def days_in_jalali_month(year: int, month: int) -> int:
    month = _check_month(month)
    if month <= 6:
        return 31
    if month <= 11:
        return 30
    return 30 if is_jalali_leap_year(year) else 29


def days_in_gregorian_month(year: int, month: int) -> int:
    month = _check_month(month)
    if month == 2 and is_gregorian_leap_year(year):
        return 29
    return _GREGORIAN_MONTH_DAYS[month - 1]
