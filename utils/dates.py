"""
Picker-aware calendar arithmetic.

One "picker unit" is one full panel: a month for the day picker, a year
(twelve months) for the month picker and a decade for the year picker.
Every function is pure and works on ``datetime.date`` values.
"""

from __future__ import annotations

import calendar as cal
from datetime import date
from typing import Iterable

from core.types import Picker

MONTH_GROUP_COUNT = 12
YEAR_GROUP_COUNT = 10


def js_weekday(d: date) -> int:
    """Day of week with Sunday = 0 … Saturday = 6."""
    return (d.weekday() + 1) % 7


def timestamp(d: date) -> int:
    """Numeric key of a date, used to look panels up."""
    return d.toordinal()


def week_days(start: int) -> list[int]:
    """Return the seven day numbers rotated to begin at *start*."""
    week = list(range(7))
    return week[start:] + week[:start]


def add_months(d: date, months: int) -> date:
    """Shift *d* by *months*, clamping the day to the target month's length."""
    total = (d.year * 12 + d.month - 1) + months
    year, month = total // 12, total % 12 + 1
    return d.replace(year=year, month=month, day=min(d.day, cal.monthrange(year, month)[1]))


def add_by_picker(d: date, n: int, picker: Picker | str) -> date:
    """Move *d* forward by *n* panels of the given granularity."""
    picker = Picker(picker)
    if picker is Picker.DAY:
        return add_months(d, n)
    if picker is Picker.MONTH:
        return add_months(d, n * MONTH_GROUP_COUNT)
    return add_months(d, n * YEAR_GROUP_COUNT * MONTH_GROUP_COUNT)


def sub_by_picker(d: date, n: int, picker: Picker | str) -> date:
    return add_by_picker(d, -n, picker)


def compare_by_picker(left: date, right: date, picker: Picker | str) -> bool:
    """Same day, same month or same year depending on *picker*."""
    picker = Picker(picker)
    if picker is Picker.DAY:
        return left == right
    if picker is Picker.MONTH:
        return (left.year, left.month) == (right.year, right.month)
    return left.year == right.year


def base_of(d: date, picker: Picker | str) -> date:
    """Normalise *d* to the first date of the panel that contains it."""
    picker = Picker(picker)
    if picker is Picker.DAY:
        return date(d.year, d.month, 1)
    if picker is Picker.MONTH:
        return date(d.year, 1, 1)
    return date(d.year // YEAR_GROUP_COUNT * YEAR_GROUP_COUNT, 1, 1)


def sort_dates(dates: Iterable[date]) -> list[date]:
    return sorted(dates)
