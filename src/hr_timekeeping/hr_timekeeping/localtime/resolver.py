from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from ..calendar.converter import gregorian_to_jalali, jalali_to_gregorian
from ..calendar.model import GregorianDate, JalaliDate
from ..common.datetime_utils import InstantLike, now_utc, parse_instant
from ..common.validators import require_hour_minute, require_int
from ..core.constants import TEHRAN_OFFSET_MINUTES, TEHRAN_ZONE_NAME
from ..core.exceptions import InvalidDateError, InvalidTimeError

CalendarDate = Union[JalaliDate, GregorianDate]


@dataclass(frozen=True)
class UtcOffsetPolicy:
    """Fixed civil-time offset. No zone database, no seasonal shift."""

    name: str
    offset_minutes: int

    def __post_init__(self):
        require_int(self.offset_minutes, "offset_minutes", InvalidTimeError)
        if not -14 * 60 <= self.offset_minutes <= 14 * 60:
            raise InvalidTimeError(f"UTC offset out of range: {self.offset_minutes} minutes")

    @property
    def offset(self) -> timedelta:
        return timedelta(minutes=self.offset_minutes)


TEHRAN = UtcOffsetPolicy(name=TEHRAN_ZONE_NAME, offset_minutes=TEHRAN_OFFSET_MINUTES)


@dataclass(frozen=True)
class LocalParts:
    date: GregorianDate
    hour: int
    minute: int

    @property
    def jalali(self) -> JalaliDate:
        return gregorian_to_jalali(self.date)

    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class LocalTimeResolver:
    """Bridges local civil date+time and absolute UTC instants."""

    def __init__(self, policy: UtcOffsetPolicy = TEHRAN):
        self._policy = policy

    @property
    def policy(self) -> UtcOffsetPolicy:
        return self._policy

    def to_instant(self, value: CalendarDate, hour: int, minute: int) -> datetime:
        if isinstance(value, JalaliDate):
            value = jalali_to_gregorian(value)
        elif not isinstance(value, GregorianDate):
            raise InvalidDateError(f"Expected JalaliDate or GregorianDate, got {value!r}")
        hour, minute = require_hour_minute(hour, minute)

        try:
            wall = datetime(value.year, value.month, value.day, hour, minute, tzinfo=timezone.utc)
            return wall - self._policy.offset
        except (ValueError, OverflowError) as exc:
            raise InvalidDateError(f"{value} {hour:02d}:{minute:02d} is outside the supported range") from exc

    def to_local_parts(self, instant: InstantLike) -> LocalParts:
        utc = parse_instant(instant)
        if utc is None:
            raise InvalidTimeError("Cannot resolve a missing instant")
        try:
            wall = utc + self._policy.offset
        except OverflowError as exc:
            raise InvalidTimeError(f"{utc.isoformat()} is outside the supported range") from exc
        return LocalParts(date=GregorianDate(wall.year, wall.month, wall.day), hour=wall.hour, minute=wall.minute)

    def local_date(self, instant: InstantLike) -> GregorianDate:
        return self.to_local_parts(instant).date

    def jalali_date(self, instant: InstantLike) -> JalaliDate:
        return gregorian_to_jalali(self.local_date(instant))

    def today_jalali(self, now: Optional[datetime] = None) -> JalaliDate:
        return self.jalali_date(now or now_utc())


_default = LocalTimeResolver()


def to_instant(value: CalendarDate, hour: int, minute: int) -> datetime:
    return _default.to_instant(value, hour, minute)


def to_local_parts(instant: InstantLike) -> LocalParts:
    return _default.to_local_parts(instant)
