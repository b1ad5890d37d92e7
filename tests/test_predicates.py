from __future__ import annotations

from datetime import date

import pytest

from core.types import DisabledRules, Mode, Picker
from utils.predicates import (
    is_active,
    is_between,
    is_disabled,
    is_today,
    is_weekend,
    toggle_date,
)


def test_min_and_max_bound_the_enabled_days() -> None:
    rules = DisabledRules(min_date=date(2025, 6, 10), max_date=date(2025, 6, 20))

    disabled = [day for day in range(1, 31) if is_disabled(date(2025, 6, day), rules)]

    assert disabled == list(range(1, 10)) + list(range(21, 31))


def test_explicit_dates_and_inclusive_ranges_are_disabled() -> None:
    rules = DisabledRules(
        dates=(date(2025, 6, 4),),
        ranges=((date(2025, 6, 10), date(2025, 6, 12)),),
    )

    assert is_disabled(date(2025, 6, 4), rules)
    assert is_disabled(date(2025, 6, 10), rules)
    assert is_disabled(date(2025, 6, 12), rules)
    assert not is_disabled(date(2025, 6, 13), rules)
    assert not is_disabled(date(2025, 6, 5), rules)


def test_is_between_is_inclusive_and_needs_two_points() -> None:
    rng = [date(2025, 6, 10), date(2025, 6, 12)]

    assert is_between(date(2025, 6, 10), rng)
    assert is_between(date(2025, 6, 11), rng)
    assert is_between(date(2025, 6, 12), rng)
    assert not is_between(date(2025, 6, 13), rng)
    assert not is_between(date(2025, 6, 10), rng[:1])


def test_is_active_per_mode() -> None:
    d = date(2025, 6, 10)

    assert is_active(d, Mode.DATE, Picker.DAY, date_value=d)
    assert not is_active(d, Mode.DATE, Picker.DAY)
    assert is_active(d, Mode.MULTIPLE, Picker.DAY, dates=[date(2025, 1, 1), d])
    assert is_active(d, Mode.RANGE, Picker.DAY, range_value=[date(2025, 6, 1), d])
    assert not is_active(date(2025, 6, 5), Mode.RANGE, Picker.DAY, range_value=[date(2025, 6, 1), d])


def test_is_active_respects_picker_granularity() -> None:
    cell = date(2025, 6, 1)

    assert is_active(cell, "date", "month", date_value=date(2025, 6, 17))
    assert is_active(cell, "date", "year", date_value=date(2025, 12, 31))
    assert not is_active(cell, "date", "day", date_value=date(2025, 6, 17))


def test_unknown_mode_is_rejected() -> None:
    with pytest.raises(ValueError):
        is_active(date(2025, 6, 1), "week", Picker.DAY)


def test_weekend_and_today() -> None:
    assert is_weekend(0, (0, 6))
    assert not is_weekend(3, (0, 6))
    assert is_today(date(2025, 6, 1), Picker.MONTH, date(2025, 6, 15))
    assert not is_today(date(2025, 6, 1), Picker.DAY, date(2025, 6, 15))


def test_toggle_date_twice_restores_contents_and_order() -> None:
    original = (date(2025, 6, 3), date(2025, 6, 1))
    extra = date(2025, 6, 2)

    toggled = toggle_date(extra, original)
    assert toggled == (date(2025, 6, 3), date(2025, 6, 1), extra)
    assert toggle_date(extra, toggled) == original


def test_toggle_date_keeps_insertion_order() -> None:
    dates = (date(2025, 6, 3), date(2025, 6, 1), date(2025, 6, 2))

    assert toggle_date(date(2025, 6, 3), dates) == (date(2025, 6, 1), date(2025, 6, 2))
