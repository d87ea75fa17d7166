from __future__ import annotations

import math
from typing import Optional, Union

from ..common.datetime_utils import round_minutes
from ..common.persian import to_persian_digits
from ..core.enums import IntervalState
from ..core.exceptions import NegativeDurationError, ValidationError
from .model import AttendanceInterval

Minutes = Union[int, None, NegativeDurationError]

NO_VALUE = "---"
INVALID_LABEL = "نامعتبر"
IN_PROGRESS_LABEL = "در حال انجام"
ENTRY_ONLY_LABEL = "ورود ثبت شده"
HOURS_WORD = "ساعت"
MINUTES_WORD = "دقیقه"
JOINER = " و "


def classify(interval: AttendanceInterval) -> IntervalState:
    return interval.state


def minutes(interval: AttendanceInterval) -> Minutes:
    """Elapsed minutes of a complete interval.

    Returns ``None`` for open or empty intervals and a ``NegativeDurationError``
    instance (not raised) when the end precedes the start.
    """
    if interval.state != IntervalState.COMPLETE:
        return None
    if interval.end < interval.start:
        return NegativeDurationError(interval.start, interval.end)
    return round_minutes(interval.end - interval.start)


def decompose(total_minutes: Union[int, float]) -> tuple[int, int]:
    if total_minutes < 0:
        raise ValidationError(f"Cannot decompose a negative duration: {total_minutes}")
    hours = math.floor(total_minutes / 60)
    remainder = math.floor(total_minutes % 60 + 0.5)
    return hours, remainder


def format_duration(total_minutes: Optional[Union[int, float]], *, compact: bool = True) -> str:
    """Render minutes as "H ساعت و M دقیقه" with Persian numerals.

    ``compact`` drops zero parts and renders nothing-to-show as ``---``;
    otherwise both parts are always written.
    """
    if total_minutes is None or (compact and total_minutes <= 0):
        return NO_VALUE
    hours, remainder = decompose(total_minutes)
    hours_text = f"{to_persian_digits(hours)} {HOURS_WORD}"
    minutes_text = f"{to_persian_digits(remainder)} {MINUTES_WORD}"
    if not compact:
        return hours_text + JOINER + minutes_text

    parts = []
    if hours > 0:
        parts.append(hours_text)
    if remainder > 0:
        parts.append(minutes_text)
    return JOINER.join(parts) or NO_VALUE


def describe(interval: AttendanceInterval) -> str:
    """Row label for a short-leave table cell."""
    state = interval.state
    if state == IntervalState.OPEN_EXIT:
        return IN_PROGRESS_LABEL
    if state == IntervalState.OPEN_ENTRY:
        return ENTRY_ONLY_LABEL
    if state == IntervalState.EMPTY:
        return NO_VALUE

    result = minutes(interval)
    if isinstance(result, NegativeDurationError):
        return INVALID_LABEL
    return format_duration(result, compact=False)
