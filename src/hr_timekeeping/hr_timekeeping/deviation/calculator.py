from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import InstantLike, parse_instant, round_minutes
from ..common.validators import require_hour_minute
from ..core.exceptions import InvalidTimeError
from ..localtime.resolver import LocalTimeResolver


@dataclass(frozen=True)
class StandardTime:
    """Expected clock time (official entry or exit) for a report."""

    hour: int
    minute: int = 0

    def __post_init__(self):
        require_hour_minute(self.hour, self.minute)

    @classmethod
    def parse(cls, value: str) -> "StandardTime":
        """Build from an ``HH:MM`` string (settings/env format)."""
        text = (value or "").strip()
        hour, sep, minute = text.partition(":")
        if not sep or not hour.isdigit() or not minute.isdigit():
            raise InvalidTimeError(f"Expected HH:MM, got {value!r}")
        return cls(int(hour), int(minute))

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"


class DeviationCalculator:
    """Minutes between an actual event and the standard time of the same local day."""

    def __init__(self, resolver: Optional[LocalTimeResolver] = None):
        self._resolver = resolver or LocalTimeResolver()

    def reference(self, actual: datetime, standard: StandardTime) -> datetime:
        parts = self._resolver.to_local_parts(actual)
        return self._resolver.to_instant(parts.date, standard.hour, standard.minute)

    def lateness(self, actual: InstantLike, standard: StandardTime) -> int:
        instant = parse_instant(actual)
        if instant is None:
            return 0
        return max(0, round_minutes(instant - self.reference(instant, standard)))

    def earliness(self, actual: InstantLike, standard: StandardTime) -> int:
        instant = parse_instant(actual)
        if instant is None:
            return 0
        return max(0, round_minutes(self.reference(instant, standard) - instant))
