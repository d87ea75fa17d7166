from __future__ import annotations

from src.hr_timekeeping.hr_timekeeping.calendar.model import JalaliDate
from src.hr_timekeeping.hr_timekeeping.core.enums import RecordKind
from src.hr_timekeeping.hr_timekeeping.deviation.calculator import StandardTime
from src.hr_timekeeping.hr_timekeeping.reports.service import CommuteReportService


class FakeCommuteSource:
    def __init__(self, commute_rows=(), short_leave_rows=()):
        self._commute_rows = list(commute_rows)
        self._short_leave_rows = list(short_leave_rows)
        self.last_args = None

    def get_commute_rows(self, *, start_date, end_date, personnel_code=None):
        self.last_args = {"start_date": start_date, "end_date": end_date, "personnel_code": personnel_code}
        return self._commute_rows

    def get_short_leave_rows(self, *, start_date, end_date, personnel_code=None):
        return self._short_leave_rows


def build(source, **kwargs):
    svc = CommuteReportService(source)
    return svc.build_report(
        start=JalaliDate(1403, 2, 1),
        end=JalaliDate(1403, 2, 31),
        standard_entry=StandardTime(6, 0),
        standard_exit=StandardTime(14, 0),
        **kwargs,
    )


def test_report_forwards_gregorian_filters():
    source = FakeCommuteSource()

    build(source, personnel_code="1001")

    assert source.last_args == {"start_date": "2024-04-20", "end_date": "2024-05-20", "personnel_code": "1001"}


def test_report_rows_and_summary():
    source = FakeCommuteSource(
        commute_rows=[
            {
                "personnel_code": "1001",
                "full_name": "Ali",
                "department": "Security",
                "guard_name": "Shift A",
                "entry_time": "2024-05-01T02:40:00.000Z",
                "exit_time": "2024-05-01T10:35:00.000Z",
            }
        ],
        short_leave_rows=[
            {
                "personnel_code": "1001",
                "exit_time": "2024-05-01T07:30:00.000Z",
                "entry_time": "2024-05-01T08:00:00.000Z",
                "reason": "bank",
            },
            {"personnel_code": "1001", "exit_time": "2024-05-01T09:00:00.000Z", "entry_time": None},
        ],
    )

    report = build(source)

    row = report.rows[0]
    assert row["date"] == "1403/02/12"
    assert (row["entry"], row["exit"]) == ("06:10", "14:05")
    assert row["lateness_minutes"] == 10
    assert row["early_leave_minutes"] == 0
    assert row["lateness"] == "۱۰ دقیقه"
    assert row["early_leave"] == "---"

    assert report.short_leaves[0]["minutes"] == 30
    assert report.short_leaves[0]["reason"] == "bank"
    assert report.short_leaves[1]["duration"] == "در حال انجام"

    summary = report.summary[0]
    assert summary["full_name"] == "Ali"
    assert summary["working_days"] == 1
    assert summary["late_minutes"] == 10
    assert summary["short_leave_minutes"] == 30
    assert summary["open_short_leaves"] == 1
    assert report.skipped == []


def test_summary_sorted_by_personnel_code():
    source = FakeCommuteSource(
        commute_rows=[
            {"personnel_code": "2002", "entry_time": "2024-05-01T02:30:00Z", "exit_time": "2024-05-01T10:30:00Z"},
            {"personnel_code": "1001", "entry_time": "2024-05-01T02:30:00Z", "exit_time": "2024-05-01T10:30:00Z"},
        ]
    )

    report = build(source)

    assert [s["personnel_code"] for s in report.summary] == ["1001", "2002"]


def test_bad_rows_are_listed_not_fatal():
    source = FakeCommuteSource(
        commute_rows=[
            {"personnel_code": "1001", "entry_time": "not-a-time", "exit_time": None},
            {"personnel_code": "1001", "entry_time": "2024-05-01T10:30:00Z", "exit_time": "2024-05-01T02:30:00Z"},
            {"personnel_code": "1001", "entry_time": "2024-05-02T02:30:00Z", "exit_time": "2024-05-02T10:30:00Z"},
        ]
    )

    report = build(source)

    assert len(report.rows) == 2
    assert report.rows[0]["lateness"] == "نامعتبر"
    assert report.rows[0]["valid"] is False
    assert report.summary[0]["working_days"] == 1
    assert [s.kind for s in report.skipped] == [RecordKind.ATTENDANCE, RecordKind.ATTENDANCE]


def test_frames_use_export_headers():
    source = FakeCommuteSource(
        commute_rows=[
            {
                "personnel_code": "1001",
                "full_name": "Ali",
                "entry_time": "2024-05-01T02:40:00Z",
                "exit_time": "2024-05-01T10:30:00Z",
            }
        ]
    )

    report = build(source)
    frame = report.to_frame()
    summary = report.summary_frame()

    assert list(frame.columns) == ["نام پرسنل", "کد", "واحد", "تاریخ", "ورود", "خروج", "شیفت کاری", "تاخیر", "تعجیل"]
    assert frame.iloc[0]["کد"] == "1001"
    assert summary.iloc[0]["روز کاری"] == 1


def test_summary_name_taken_from_later_row_when_first_is_blank():
    source = FakeCommuteSource(
        commute_rows=[
            {"personnel_code": "1001", "entry_time": "2024-05-01T02:30:00Z", "exit_time": "2024-05-01T10:30:00Z"},
            {
                "personnel_code": "1001",
                "full_name": "Ali",
                "entry_time": "2024-05-02T02:30:00Z",
                "exit_time": "2024-05-02T10:30:00Z",
            },
        ]
    )

    report = build(source)

    assert report.summary[0]["full_name"] == "Ali"
