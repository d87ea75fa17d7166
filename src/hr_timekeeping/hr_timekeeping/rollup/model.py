from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

from ..common.datetime_utils import InstantLike, parse_instant
from ..common.validators import require_non_empty
from ..core.enums import RecordKind
from ..intervals.model import AttendanceInterval


@dataclass(frozen=True)
class AttendanceRow:
    """One daily entry/exit record as read from the commute log."""

    personnel_code: str
    entry_time: Optional[InstantLike] = None
    exit_time: Optional[InstantLike] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "AttendanceRow":
        return cls(
            personnel_code=require_non_empty(row.get("personnel_code"), "personnel_code"),
            entry_time=parse_instant(row.get("entry_time")),
            exit_time=parse_instant(row.get("exit_time")),
        )

    @property
    def interval(self) -> AttendanceInterval:
        return AttendanceInterval.from_raw(self.entry_time, self.exit_time)


@dataclass(frozen=True)
class ShortLeaveRow:
    """An hourly leave: exit first, return (``entry_time``) later."""

    personnel_code: str
    exit_time: Optional[InstantLike] = None
    entry_time: Optional[InstantLike] = None
    reason: Optional[str] = None

    @classmethod
    def from_mapping(cls, row: Mapping[str, Any]) -> "ShortLeaveRow":
        return cls(
            personnel_code=require_non_empty(row.get("personnel_code"), "personnel_code"),
            exit_time=parse_instant(row.get("exit_time")),
            entry_time=parse_instant(row.get("entry_time")),
            reason=row.get("reason"),
        )

    @property
    def interval(self) -> AttendanceInterval:
        return AttendanceInterval.from_raw(self.exit_time, self.entry_time)


@dataclass(frozen=True)
class PersonAggregate:
    personnel_code: str
    distinct_working_days: int = 0
    total_late_minutes: int = 0
    total_early_leave_minutes: int = 0
    total_short_leave_minutes: int = 0
    missing_entry_count: int = 0
    missing_exit_count: int = 0
    open_short_leave_count: int = 0


@dataclass(frozen=True)
class SkippedRecord:
    """A record excluded from the totals, kept so it can be shown to the user."""

    personnel_code: str
    kind: RecordKind
    interval: AttendanceInterval
    reason: str


@dataclass(frozen=True)
class RollupResult:
    aggregates: list[PersonAggregate] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)

    def for_person(self, personnel_code: str) -> Optional[PersonAggregate]:
        for a in self.aggregates:
            if a.personnel_code == personnel_code:
                return a
        return None
