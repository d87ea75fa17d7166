from datetime import datetime, timedelta, timezone

import pytest

from src.hr_timekeeping.hr_timekeeping.common.datetime_utils import parse_instant, to_epoch_ms, to_iso
from src.hr_timekeeping.hr_timekeeping.core.enums import IntervalState
from src.hr_timekeeping.hr_timekeeping.core.exceptions import InvalidTimeError, NegativeDurationError, ValidationError
from src.hr_timekeeping.hr_timekeeping.intervals import duration
from src.hr_timekeeping.hr_timekeeping.intervals.model import AttendanceInterval

T = datetime(2024, 5, 1, 7, 30, tzinfo=timezone.utc)


def test_ninety_minutes():
    assert duration.minutes(AttendanceInterval(T, T + timedelta(minutes=90))) == 90


def test_zero_length_interval():
    assert duration.minutes(AttendanceInterval(T, T)) == 0


@pytest.mark.parametrize(
    "interval, expected",
    [
        (AttendanceInterval(T, T + timedelta(hours=1)), IntervalState.COMPLETE),
        (AttendanceInterval(T, None), IntervalState.OPEN_EXIT),
        (AttendanceInterval(None, T), IntervalState.OPEN_ENTRY),
        (AttendanceInterval(None, None), IntervalState.EMPTY),
    ],
)
def test_classify(interval, expected):
    assert duration.classify(interval) == expected


@pytest.mark.parametrize("interval", [AttendanceInterval(T, None), AttendanceInterval(None, T), AttendanceInterval()])
def test_minutes_of_open_intervals_is_none(interval):
    assert duration.minutes(interval) is None


def test_reversed_interval_returns_tagged_error():
    interval = AttendanceInterval(T, T - timedelta(minutes=5))
    result = duration.minutes(interval)

    assert isinstance(result, NegativeDurationError)
    assert result.start == T
    assert interval.is_reversed is True


def test_minutes_round_half_up():
    assert duration.minutes(AttendanceInterval(T, T + timedelta(minutes=89, seconds=30))) == 90
    assert duration.minutes(AttendanceInterval(T, T + timedelta(minutes=89, seconds=29))) == 89


def test_from_raw_parses_iso_and_epoch():
    interval = AttendanceInterval.from_raw("2024-05-01T07:30:00.000Z", to_epoch_ms(T) + 45 * 60_000)
    assert interval.start == T
    assert duration.minutes(interval) == 45


def test_decompose():
    assert duration.decompose(135) == (2, 15)
    assert duration.decompose(59) == (0, 59)
    with pytest.raises(ValidationError):
        duration.decompose(-1)


def test_format_compact_drops_zero_parts():
    assert duration.format_duration(135) == "۲ ساعت و ۱۵ دقیقه"
    assert duration.format_duration(120) == "۲ ساعت"
    assert duration.format_duration(12) == "۱۲ دقیقه"
    assert duration.format_duration(0) == "---"
    assert duration.format_duration(None) == "---"


def test_format_full():
    assert duration.format_duration(30, compact=False) == "۰ ساعت و ۳۰ دقیقه"


def test_describe_labels():
    assert duration.describe(AttendanceInterval(T, T + timedelta(minutes=30))) == "۰ ساعت و ۳۰ دقیقه"
    assert duration.describe(AttendanceInterval(T, T - timedelta(minutes=1))) == "نامعتبر"
    assert duration.describe(AttendanceInterval(T, None)) == "در حال انجام"
    assert duration.describe(AttendanceInterval(None, T)) == "ورود ثبت شده"
    assert duration.describe(AttendanceInterval()) == "---"


def test_parse_instant_normalizes_to_utc():
    tehran = timezone(timedelta(minutes=210))
    assert parse_instant(datetime(2024, 5, 1, 11, 0, tzinfo=tehran)) == T
    assert parse_instant("2024-05-01T11:00:00+03:30") == T
    assert parse_instant(datetime(2024, 5, 1, 7, 30)) == T
    assert parse_instant(None) is None


@pytest.mark.parametrize("value", ["yesterday", "", True, object()])
def test_parse_instant_rejects_garbage(value):
    with pytest.raises(InvalidTimeError):
        parse_instant(value)


def test_iso_rendering():
    assert to_iso(T) == "2024-05-01T07:30:00.000Z"


@pytest.mark.parametrize("value", ["2024-05-01T07:30:00.12Z", "2024-05-01T07:30:00.1234Z", "2024-05-01T07:30Z"])
def test_parse_instant_accepts_any_fraction_width(value):
    assert parse_instant(value).replace(microsecond=0) == T
