from __future__ import annotations

from ..core.exceptions import InvalidTimeError, ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_int(value, field_name: str, error=ValidationError) -> int:
    # bool is an int subclass; a checkbox value is never a calendar field.
    if isinstance(value, bool) or not isinstance(value, int):
        raise error(f"{field_name} must be an integer, got {value!r}")
    return value


def require_hour_minute(hour, minute) -> tuple[int, int]:
    hour = require_int(hour, "hour", InvalidTimeError)
    minute = require_int(minute, "minute", InvalidTimeError)
    if not 0 <= hour <= 23:
        raise InvalidTimeError(f"hour must be in 0..23, got {hour}")
    if not 0 <= minute <= 59:
        raise InvalidTimeError(f"minute must be in 0..59, got {minute}")
    return hour, minute
