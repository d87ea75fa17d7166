from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional

from ..calendar.model import GregorianDate
from ..core.enums import IntervalState, RecordKind
from ..core.exceptions import NegativeDurationError, ValidationError
from ..deviation.calculator import DeviationCalculator, StandardTime
from ..intervals import duration
from ..intervals.model import AttendanceInterval
from ..localtime.resolver import LocalTimeResolver
from .model import AttendanceRow, PersonAggregate, RollupResult, ShortLeaveRow, SkippedRecord

logger = logging.getLogger(__name__)

EMPTY_RECORD_REASON = "Record has neither entry nor exit time"


@dataclass
class _PersonState:
    aggregate: PersonAggregate
    seen_days: set[GregorianDate] = field(default_factory=set)


class MonthlyRollup:
    """Folds attendance and short-leave rows into one aggregate per person.

    Every run starts from empty state; nothing is carried between calls.
    """

    def __init__(
        self,
        *,
        resolver: Optional[LocalTimeResolver] = None,
        deviation: Optional[DeviationCalculator] = None,
    ):
        self._resolver = resolver or LocalTimeResolver()
        self._deviation = deviation or DeviationCalculator(self._resolver)

    def run(
        self,
        attendance: Iterable[AttendanceRow],
        short_leaves: Iterable[ShortLeaveRow] = (),
        *,
        standard_entry: StandardTime,
        standard_exit: StandardTime,
    ) -> RollupResult:
        people: dict[str, _PersonState] = {}
        skipped: list[SkippedRecord] = []

        for row in attendance:
            state = self._person(people, row.personnel_code)
            interval = self._interval(row, RecordKind.ATTENDANCE, skipped)
            if interval is None:
                continue
            reason = self._rejection(interval)
            if reason:
                skipped.append(self._skip(row.personnel_code, RecordKind.ATTENDANCE, interval, reason))
                continue

            day = self._resolver.local_date(interval.anchor)
            a = state.aggregate
            if day not in state.seen_days:
                state.seen_days.add(day)
                a = replace(a, distinct_working_days=a.distinct_working_days + 1)

            a = replace(
                a,
                total_late_minutes=a.total_late_minutes + self._deviation.lateness(interval.start, standard_entry),
                total_early_leave_minutes=a.total_early_leave_minutes
                + self._deviation.earliness(interval.end, standard_exit),
                missing_entry_count=a.missing_entry_count + int(interval.start is None),
                missing_exit_count=a.missing_exit_count + int(interval.end is None),
            )
            state.aggregate = a

        for row in short_leaves:
            state = self._person(people, row.personnel_code)
            interval = self._interval(row, RecordKind.SHORT_LEAVE, skipped)
            if interval is None:
                continue
            kind = duration.classify(interval)
            a = state.aggregate

            if kind in (IntervalState.OPEN_EXIT, IntervalState.OPEN_ENTRY):
                state.aggregate = replace(a, open_short_leave_count=a.open_short_leave_count + 1)
                continue

            reason = self._rejection(interval)
            if reason:
                skipped.append(self._skip(row.personnel_code, RecordKind.SHORT_LEAVE, interval, reason))
                continue

            state.aggregate = replace(
                a,
                total_short_leave_minutes=a.total_short_leave_minutes + duration.minutes(interval),
            )

        result = RollupResult(aggregates=[s.aggregate for s in people.values()], skipped=skipped)
        logger.debug("Rollup finished: %d people, %d skipped records", len(result.aggregates), len(skipped))
        return result

    @staticmethod
    def _person(people: dict[str, _PersonState], personnel_code: str) -> _PersonState:
        state = people.get(personnel_code)
        if not state:
            state = _PersonState(aggregate=PersonAggregate(personnel_code=personnel_code))
            people[personnel_code] = state
        return state

    @classmethod
    def _interval(cls, row, kind: RecordKind, skipped: list[SkippedRecord]) -> Optional[AttendanceInterval]:
        try:
            return row.interval
        except ValidationError as exc:
            skipped.append(cls._skip(row.personnel_code, kind, AttendanceInterval(), str(exc)))
            return None

    @staticmethod
    def _rejection(interval: AttendanceInterval) -> Optional[str]:
        if interval.state == IntervalState.EMPTY:
            return EMPTY_RECORD_REASON
        result = duration.minutes(interval)
        if isinstance(result, NegativeDurationError):
            return str(result)
        return None

    @staticmethod
    def _skip(personnel_code: str, kind: RecordKind, interval: AttendanceInterval, reason: str) -> SkippedRecord:
        logger.warning("Skipping %s record of %s: %s", kind.value, personnel_code, reason)
        return SkippedRecord(personnel_code=personnel_code, kind=kind, interval=interval, reason=reason)
