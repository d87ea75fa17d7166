from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..common.datetime_utils import InstantLike, parse_instant
from ..core.enums import IntervalState


@dataclass(frozen=True)
class AttendanceInterval:
    """An entry/exit (or exit/return) pair; either end may be missing.

    A reversed pair (end before start) is kept as-is so it can be reported,
    see ``is_reversed``.
    """

    start: Optional[datetime] = None
    end: Optional[datetime] = None

    @classmethod
    def from_raw(cls, start: InstantLike, end: InstantLike) -> "AttendanceInterval":
        return cls(start=parse_instant(start), end=parse_instant(end))

    @property
    def state(self) -> IntervalState:
        if self.start is not None and self.end is not None:
            return IntervalState.COMPLETE
        if self.start is not None:
            return IntervalState.OPEN_EXIT
        if self.end is not None:
            return IntervalState.OPEN_ENTRY
        return IntervalState.EMPTY

    @property
    def is_reversed(self) -> bool:
        return self.state == IntervalState.COMPLETE and self.end < self.start

    @property
    def anchor(self) -> Optional[datetime]:
        """The instant that places the interval on a calendar day."""
        return self.start if self.start is not None else self.end
