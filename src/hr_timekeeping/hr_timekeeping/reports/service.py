from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Optional

import pandas as pd

from ..calendar.converter import jalali_range_to_gregorian
from ..calendar.model import JalaliDate
from ..core.enums import RecordKind
from ..core.exceptions import NegativeDurationError, ValidationError
from ..deviation.calculator import DeviationCalculator, StandardTime
from ..intervals import duration
from ..intervals.model import AttendanceInterval
from ..localtime.resolver import LocalTimeResolver
from ..rollup.model import AttendanceRow, RollupResult, ShortLeaveRow, SkippedRecord
from ..rollup.service import MonthlyRollup
from .repository import CommuteLogSource

logger = logging.getLogger(__name__)

COMMUTE_COLUMNS = {
    "full_name": "نام پرسنل",
    "personnel_code": "کد",
    "department": "واحد",
    "date": "تاریخ",
    "entry": "ورود",
    "exit": "خروج",
    "guard_name": "شیفت کاری",
    "lateness": "تاخیر",
    "early_leave": "تعجیل",
}

SUMMARY_COLUMNS = {
    "full_name": "نام پرسنل",
    "personnel_code": "کد",
    "working_days": "روز کاری",
    "late": "مجموع تاخیر",
    "early_leave": "مجموع تعجیل",
    "short_leave": "مجموع مرخصی ساعتی",
}


@dataclass(frozen=True)
class ReportData:
    rows: list[dict] = field(default_factory=list)
    short_leaves: list[dict] = field(default_factory=list)
    summary: list[dict] = field(default_factory=list)
    skipped: list[SkippedRecord] = field(default_factory=list)

    def to_frame(self) -> pd.DataFrame:
        """Per-record sheet with the export's Persian headers."""
        return pd.DataFrame(self.rows, columns=list(COMMUTE_COLUMNS)).rename(columns=COMMUTE_COLUMNS)

    def summary_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.summary, columns=list(SUMMARY_COLUMNS)).rename(columns=SUMMARY_COLUMNS)


class CommuteReportService:
    def __init__(
        self,
        source: CommuteLogSource,
        *,
        resolver: Optional[LocalTimeResolver] = None,
        deviation: Optional[DeviationCalculator] = None,
        rollup: Optional[MonthlyRollup] = None,
    ):
        self._source = source
        self._resolver = resolver or LocalTimeResolver()
        self._deviation = deviation or DeviationCalculator(self._resolver)
        self._rollup = rollup or MonthlyRollup(resolver=self._resolver, deviation=self._deviation)

    def build_report(
        self,
        *,
        start: JalaliDate,
        end: JalaliDate,
        standard_entry: StandardTime,
        standard_exit: StandardTime,
        personnel_code: Optional[str] = None,
    ) -> ReportData:
        g_start, g_end = jalali_range_to_gregorian(start, end)
        query = {"start_date": g_start.iso(), "end_date": g_end.iso(), "personnel_code": personnel_code}

        skipped: list[SkippedRecord] = []
        names: dict[str, str] = {}

        attendance: list[tuple[AttendanceRow, Mapping[str, Any]]] = []
        for raw in self._source.get_commute_rows(**query):
            row = self._parse(AttendanceRow, raw, RecordKind.ATTENDANCE, skipped)
            if row:
                attendance.append((row, raw))
                self._remember_name(names, row.personnel_code, raw)

        leaves: list[tuple[ShortLeaveRow, Mapping[str, Any]]] = []
        for raw in self._source.get_short_leave_rows(**query):
            row = self._parse(ShortLeaveRow, raw, RecordKind.SHORT_LEAVE, skipped)
            if row:
                leaves.append((row, raw))
                self._remember_name(names, row.personnel_code, raw)

        result = self._rollup.run(
            [r for r, _ in attendance],
            [r for r, _ in leaves],
            standard_entry=standard_entry,
            standard_exit=standard_exit,
        )

        return ReportData(
            rows=[self._commute_row(r, raw, standard_entry, standard_exit) for r, raw in attendance],
            short_leaves=[self._short_leave_row(r, raw) for r, raw in leaves],
            summary=self._summary(result, names),
            skipped=skipped + result.skipped,
        )

    @staticmethod
    def _remember_name(names: dict[str, str], personnel_code: str, raw: Mapping[str, Any]) -> None:
        # A later row may carry the name an earlier row left blank.
        if not names.get(personnel_code):
            names[personnel_code] = raw.get("full_name") or ""

    @staticmethod
    def _parse(row_type, raw: Mapping[str, Any], kind: RecordKind, skipped: list[SkippedRecord]):
        try:
            return row_type.from_mapping(raw)
        except ValidationError as exc:
            code = str(raw.get("personnel_code") or "")
            logger.warning("Skipping unreadable %s row of %s: %s", kind.value, code or "?", exc)
            skipped.append(SkippedRecord(personnel_code=code, kind=kind, interval=AttendanceInterval(), reason=str(exc)))
            return None

    def _date_label(self, interval: AttendanceInterval) -> str:
        if interval.anchor is None:
            return duration.NO_VALUE
        return str(self._resolver.jalali_date(interval.anchor))

    def _time_label(self, instant) -> str:
        if instant is None:
            return duration.NO_VALUE
        return self._resolver.to_local_parts(instant).hhmm()

    def _commute_row(
        self,
        row: AttendanceRow,
        raw: Mapping[str, Any],
        standard_entry: StandardTime,
        standard_exit: StandardTime,
    ) -> dict:
        interval = row.interval
        valid = not interval.is_reversed
        lateness = self._deviation.lateness(interval.start, standard_entry) if valid else None
        early = self._deviation.earliness(interval.end, standard_exit) if valid else None
        return {
            "personnel_code": row.personnel_code,
            "full_name": raw.get("full_name") or "",
            "department": raw.get("department") or "",
            "guard_name": raw.get("guard_name") or "",
            "date": self._date_label(interval),
            "entry": self._time_label(interval.start),
            "exit": self._time_label(interval.end),
            "lateness_minutes": lateness,
            "early_leave_minutes": early,
            "lateness": duration.format_duration(lateness) if valid else duration.INVALID_LABEL,
            "early_leave": duration.format_duration(early) if valid else duration.INVALID_LABEL,
            "valid": valid,
        }

    def _short_leave_row(self, row: ShortLeaveRow, raw: Mapping[str, Any]) -> dict:
        interval = row.interval
        minutes = duration.minutes(interval)
        return {
            "personnel_code": row.personnel_code,
            "full_name": raw.get("full_name") or "",
            "date": self._date_label(interval),
            "exit": self._time_label(interval.start),
            "return": self._time_label(interval.end),
            "state": duration.classify(interval).value,
            "minutes": None if isinstance(minutes, NegativeDurationError) else minutes,
            "duration": duration.describe(interval),
            "reason": row.reason or "",
        }

    @staticmethod
    def _summary(result: RollupResult, names: dict[str, str]) -> list[dict]:
        summary = []
        for a in sorted(result.aggregates, key=lambda x: x.personnel_code):
            summary.append(
                {
                    "personnel_code": a.personnel_code,
                    "full_name": names.get(a.personnel_code, ""),
                    "working_days": a.distinct_working_days,
                    "late_minutes": a.total_late_minutes,
                    "early_leave_minutes": a.total_early_leave_minutes,
                    "short_leave_minutes": a.total_short_leave_minutes,
                    "late": duration.format_duration(a.total_late_minutes),
                    "early_leave": duration.format_duration(a.total_early_leave_minutes),
                    "short_leave": duration.format_duration(a.total_short_leave_minutes),
                    "missing_entries": a.missing_entry_count,
                    "missing_exits": a.missing_exit_count,
                    "open_short_leaves": a.open_short_leave_count,
                }
            )
        return summary
