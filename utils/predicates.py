"""
Pure predicates that classify a date for display.
"""

from __future__ import annotations

from datetime import date
from typing import Iterable, Sequence

from core.types import DisabledRules, Mode, Picker
from utils.dates import compare_by_picker


def is_between(d: date, rng: Sequence[date]) -> bool:
    """Inclusive membership in a sorted ``[start, end]`` pair, compared by day."""
    if len(rng) != 2:
        return False
    return rng[0] <= d <= rng[1]


def is_disabled(d: date, rules: DisabledRules) -> bool:
    if rules.min_date is not None and d < rules.min_date:
        return True
    if rules.max_date is not None and d > rules.max_date:
        return True
    if any(d == disabled for disabled in rules.dates):
        return True
    return any(is_between(d, r) for r in rules.ranges)


def is_active(
    d: date,
    mode: Mode | str,
    picker: Picker | str,
    *,
    date_value: date | None = None,
    dates: Sequence[date] = (),
    range_value: Sequence[date] = (),
) -> bool:
    """Whether *d* matches the selection at the picker's granularity."""
    mode = Mode(mode)
    if mode is Mode.DATE:
        return date_value is not None and compare_by_picker(d, date_value, picker)
    if mode is Mode.MULTIPLE:
        return any(compare_by_picker(d, other, picker) for other in dates)
    if mode is Mode.RANGE:
        return any(compare_by_picker(d, other, picker) for other in range_value)
    raise ValueError(f"unknown selection mode: {mode!r}")


def is_weekend(day: int, weekends: Iterable[int]) -> bool:
    return day in weekends


def is_today(d: date, picker: Picker | str, today: date) -> bool:
    return compare_by_picker(d, today, picker)


# ── Multiple-selection helpers ──────────────────────────


def includes_date(d: date, dates: Iterable[date]) -> bool:
    return any(d == other for other in dates)


def toggle_date(d: date, dates: Sequence[date]) -> tuple[date, ...]:
    """Remove *d* if present (keeping the order of the rest), otherwise append it."""
    if includes_date(d, dates):
        return tuple(other for other in dates if other != d)
    return (*dates, d)
