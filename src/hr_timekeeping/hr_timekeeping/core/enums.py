from __future__ import annotations

from enum import Enum


class IntervalState(str, Enum):
    """Completeness of an entry/exit pair."""

    COMPLETE = "COMPLETE"
    OPEN_ENTRY = "OPEN_ENTRY"
    OPEN_EXIT = "OPEN_EXIT"
    EMPTY = "EMPTY"


class RecordKind(str, Enum):
    """Which input collection a rolled-up record came from."""

    ATTENDANCE = "ATTENDANCE"
    SHORT_LEAVE = "SHORT_LEAVE"
