from __future__ import annotations

_PERSIAN_DIGITS = str.maketrans("0123456789", "۰۱۲۳۴۵۶۷۸۹")


def to_persian_digits(value) -> str:
    if value is None:
        return ""
    return str(value).translate(_PERSIAN_DIGITS)
