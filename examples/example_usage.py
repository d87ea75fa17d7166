"""Example: a monthly commute report computed without any web layer.

The in-memory source stands in for the database handlers that normally
supply the raw rows.
"""

import importlib

from config import get_settings_module

from src.hr_timekeeping.hr_timekeeping.calendar.model import JalaliDate
from src.hr_timekeeping.hr_timekeeping.container import build_container


class InMemorySource:
    def get_commute_rows(self, *, start_date, end_date, personnel_code=None):
        return [
            {
                "personnel_code": "1001",
                "full_name": "Reza",
                "entry_time": "2024-05-01T02:40:00.000Z",
                "exit_time": "2024-05-01T10:35:00.000Z",
            }
        ]

    def get_short_leave_rows(self, *, start_date, end_date, personnel_code=None):
        return [
            {
                "personnel_code": "1001",
                "exit_time": "2024-05-01T07:30:00.000Z",
                "entry_time": "2024-05-01T08:00:00.000Z",
                "reason": "bank",
            }
        ]


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(settings=settings)
    report = container.report_service(InMemorySource()).build_report(
        start=JalaliDate(1403, 2, 1),
        end=JalaliDate(1403, 2, 31),
        standard_entry=container.standard_entry,
        standard_exit=container.standard_exit,
    )
    print(report.summary_frame())


if __name__ == "__main__":
    main()
