"""Table-free Jalali <-> Gregorian conversion.

Both directions count days on a shared proleptic axis: the Jalali side uses
the 33-year arithmetic leap cycle, the Gregorian side the 400/100/4 rule.
"""

from __future__ import annotations

from ..core.exceptions import InvalidDateError
from .leap import (
    days_in_gregorian_month,
    days_in_jalali_month,
    is_gregorian_leap_year,
    is_jalali_leap_year,
    jalali_days_before_year,
    JALALI_EPOCH_SHIFT,
)
from .model import GregorianDate, JalaliDate

__all__ = [
    "days_in_gregorian_month",
    "days_in_jalali_month",
    "gregorian_to_jalali",
    "is_gregorian_leap_year",
    "is_jalali_leap_year",
    "jalali_range_to_gregorian",
    "jalali_to_gregorian",
    "jalali_to_gregorian_string",
]

_JALALI_TO_AXIS = -355668
_GREGORIAN_TO_AXIS = 355666

# Cumulative Gregorian day counts before each month of a common year.
_DAYS_BEFORE_GREGORIAN_MONTH = (0, 31, 59, 90, 120, 151, 181, 212, 243, 273, 304, 334)


def _jalali_day_of_year_offset(month: int) -> int:
    if month <= 6:
        return (month - 1) * 31
    return 186 + (month - 7) * 30


def jalali_to_gregorian(value: JalaliDate) -> GregorianDate:
    if not isinstance(value, JalaliDate):
        raise InvalidDateError(f"Expected JalaliDate, got {value!r}")

    days = _JALALI_TO_AXIS + jalali_days_before_year(value.year) + _jalali_day_of_year_offset(value.month) + value.day

    year = 400 * (days // 146097)
    days %= 146097
    if days > 36524:
        days -= 1
        year += 100 * (days // 36524)
        days %= 36524
        if days >= 365:
            days += 1
    year += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        year += (days - 1) // 365
        days = (days - 1) % 365

    day = days + 1
    month = 1
    while day > days_in_gregorian_month(year, month):
        day -= days_in_gregorian_month(year, month)
        month += 1
    return GregorianDate(year, month, day)


def gregorian_to_jalali(value: GregorianDate) -> JalaliDate:
    if not isinstance(value, GregorianDate):
        raise InvalidDateError(f"Expected GregorianDate, got {value!r}")

    # Leap days of the current year only count once February is over.
    counted = value.year + 1 if value.month > 2 else value.year
    days = (
        _GREGORIAN_TO_AXIS
        + 365 * value.year
        + (counted + 3) // 4
        - (counted + 99) // 100
        + (counted + 399) // 400
        + value.day
        + _DAYS_BEFORE_GREGORIAN_MONTH[value.month - 1]
    )

    year = -JALALI_EPOCH_SHIFT + 33 * (days // 12053)
    days %= 12053
    year += 4 * (days // 1461)
    days %= 1461
    if days > 365:
        year += (days - 1) // 365
        days = (days - 1) % 365

    if days < 186:
        month, day = 1 + days // 31, 1 + days % 31
    else:
        month, day = 7 + (days - 186) // 30, 1 + (days - 186) % 30
    return JalaliDate(year, month, day)


def jalali_to_gregorian_string(value: JalaliDate) -> str:
    """Gregorian ``YYYY-MM-DD`` for a Jalali picker value (day-range filters)."""
    return jalali_to_gregorian(value).iso()


def jalali_range_to_gregorian(start: JalaliDate, end: JalaliDate) -> tuple[GregorianDate, GregorianDate]:
    if start > end:
        raise InvalidDateError(f"Range start {start} is after range end {end}")
    return jalali_to_gregorian(start), jalali_to_gregorian(end)
