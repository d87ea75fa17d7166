from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from ..common.validators import require_int
from ..core.exceptions import InvalidDateError
from .leap import days_in_gregorian_month, days_in_jalali_month

PERSIAN_MONTHS = (
    "فروردین",
    "اردیبهشت",
    "خرداد",
    "تیر",
    "مرداد",
    "شهریور",
    "مهر",
    "آبان",
    "آذر",
    "دی",
    "بهمن",
    "اسفند",
)


def _check_components(year, month, day) -> None:
    require_int(year, "year", InvalidDateError)
    require_int(month, "month", InvalidDateError)
    require_int(day, "day", InvalidDateError)
    if year < 1:
        raise InvalidDateError(f"year must be >= 1, got {year}")
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {month}")


@dataclass(frozen=True, order=True)
class JalaliDate:
    """Persian solar calendar date. Ordering follows the natural day order."""

    year: int
    month: int
    day: int

    def __post_init__(self):
        _check_components(self.year, self.month, self.day)
        limit = days_in_jalali_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            raise InvalidDateError(f"day must be in 1..{limit} for {self.year}/{self.month}, got {self.day}")

    @property
    def month_name(self) -> str:
        return PERSIAN_MONTHS[self.month - 1]

    def iso(self) -> str:
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return f"{self.year:04d}/{self.month:02d}/{self.day:02d}"


@dataclass(frozen=True, order=True)
class GregorianDate:
    year: int
    month: int
    day: int

    def __post_init__(self):
        _check_components(self.year, self.month, self.day)
        limit = days_in_gregorian_month(self.year, self.month)
        if not 1 <= self.day <= limit:
            raise InvalidDateError(f"day must be in 1..{limit} for {self.year}-{self.month}, got {self.day}")

    @classmethod
    def from_date(cls, value: date) -> "GregorianDate":
        return cls(value.year, value.month, value.day)

    def to_date(self) -> date:
        return date(self.year, self.month, self.day)

    def iso(self) -> str:
        """``YYYY-MM-DD``, the storage layer's day filter format."""
        return f"{self.year:04d}-{self.month:02d}-{self.day:02d}"

    def __str__(self) -> str:
        return self.iso()


def jalali_month_name(month: int) -> str:
    require_int(month, "month", InvalidDateError)
    if not 1 <= month <= 12:
        raise InvalidDateError(f"month must be in 1..12, got {month}")
    return PERSIAN_MONTHS[month - 1]
