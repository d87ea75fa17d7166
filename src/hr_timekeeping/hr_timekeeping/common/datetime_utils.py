from __future__ import annotations

import math
from datetime import datetime, timedelta, timezone
from typing import Optional, Union

from ..core.constants import MS_PER_MINUTE
from ..core.exceptions import InvalidTimeError

InstantLike = Union[datetime, str, int, float, None]


def parse_instant(value: InstantLike) -> Optional[datetime]:
    """Normalize a raw timestamp into an aware UTC datetime.

    Accepts ISO-8601 strings (``Z`` or explicit offset), epoch milliseconds
    and datetimes. Naive datetimes and offset-less strings are taken as UTC,
    which is how the storage layer serializes them.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, bool):
        raise InvalidTimeError(f"Not a timestamp: {value!r}")
    elif isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError) as exc:
            raise InvalidTimeError(f"Epoch value out of range: {value!r}") from exc
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            dt = datetime.fromisoformat(text)
        except ValueError as exc:
            raise InvalidTimeError(f"Not an ISO-8601 timestamp: {value!r}") from exc
    else:
        raise InvalidTimeError(f"Not a timestamp: {value!r}")

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def to_iso(instant: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SS.mmmZ``."""
    utc = instant.astimezone(timezone.utc)
    return utc.strftime("%Y-%m-%dT%H:%M:%S.") + f"{utc.microsecond // 1000:03d}Z"


def to_epoch_ms(instant: datetime) -> int:
    utc = instant.astimezone(timezone.utc)
    delta = utc - datetime(1970, 1, 1, tzinfo=timezone.utc)
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def now_utc() -> datetime:
    """Current UTC time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now(timezone.utc)


def round_minutes(delta: timedelta) -> int:
    """Whole minutes in ``delta``, halves rounded up (as the report pages do)."""
    ms = (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000
    return math.floor(ms / MS_PER_MINUTE + 0.5)
