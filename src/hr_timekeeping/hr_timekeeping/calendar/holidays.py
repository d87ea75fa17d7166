from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

from ..core.constants import DEFAULT_UPCOMING_HOLIDAYS
from .model import JalaliDate


@dataclass(frozen=True)
class Holiday:
    date: JalaliDate
    description: str
    is_holiday: bool = True


def _h(year: int, month: int, day: int, description: str) -> Holiday:
    return Holiday(date=JalaliDate(year, month, day), description=description)


# Official holidays for Persian year 1403
HOLIDAYS_1403: tuple[Holiday, ...] = (
    _h(1403, 1, 1, "جشن نوروز/جشن سال نو"),
    _h(1403, 1, 2, "عیدنوروز"),
    _h(1403, 1, 3, "عید نوروز"),
    _h(1403, 1, 4, "عید نوروز"),
    _h(1403, 1, 12, "روز جمهوری اسلامی ایران"),
    _h(1403, 1, 13, "روز طبیعت"),
    _h(1403, 1, 22, "عید سعید فطر"),
    _h(1403, 1, 23, "تعطیل به مناسبت عید سعید فطر"),
    _h(1403, 1, 25, "شهادت امام جعفر صادق (ع)"),
    _h(1403, 3, 14, "رحلت حضرت امام خمینی"),
    _h(1403, 3, 15, "قیام خونین 15 خرداد"),
    _h(1403, 4, 5, "عید سعید غدیر خم"),
    _h(1403, 4, 25, "تاسوعای حسینی"),
    _h(1403, 4, 26, "عاشورای حسینی"),
    _h(1403, 6, 4, "اربعین حسینی"),
    _h(1403, 6, 12, "رحلت رسول اکرم و شهادت امام حسن مجتبی (ع)"),
    _h(1403, 6, 14, "شهادت امام رضا (ع)"),
    _h(1403, 6, 22, "شهادت امام حسن عسکری و آغاز امامت حضرت ولیعصر (عج)"),
    _h(1403, 7, 1, "ولادت رسول اکرم و امام جعفر صادق (ع)"),
    _h(1403, 11, 3, "ولادت امام علی (ع)"),
    _h(1403, 11, 17, "مبعث رسول اکرم (ص)"),
    _h(1403, 11, 22, "پیروزی انقلاب اسلامی ایران"),
    _h(1403, 12, 5, "ولادت حضرت قائم (عج)"),
    _h(1403, 12, 29, "روز ملی شدن صنعت نفت ایران"),
)


def holidays_by_month(holidays: Iterable[Holiday]) -> list[int]:
    """Holiday count per Jalali month, index 0 is Farvardin."""
    counts = [0] * 12
    for h in holidays:
        if h.is_holiday:
            counts[h.date.month - 1] += 1
    return counts


def upcoming_holidays(
    holidays: Sequence[Holiday],
    today: JalaliDate,
    *,
    limit: int = DEFAULT_UPCOMING_HOLIDAYS,
) -> list[Holiday]:
    """Holidays on or after ``today`` in calendar order, at most ``limit``."""
    ahead = sorted((h for h in holidays if h.date >= today), key=lambda h: h.date)
    return ahead[:limit]


def is_holiday(value: JalaliDate, holidays: Iterable[Holiday]) -> bool:
    return any(h.is_holiday and h.date == value for h in holidays)
