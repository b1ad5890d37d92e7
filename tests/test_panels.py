from __future__ import annotations

from datetime import date

import pytest

from core.types import DisabledRules, Picker
from panels.builder import build_panel, build_panels
from panels.composer import (
    CellPredicates,
    compose_window,
    label_kind,
    panel_rows,
    panel_title_dates,
    weekday_header,
)
from utils.dates import timestamp, week_days
from utils.predicates import is_disabled


def _compose(base: date, picker: Picker, *, week_start: int = 0, **options):
    panels = build_panels([base], picker)
    return compose_window([base], panels, picker, week=week_days(week_start), **options)[0]


# ── Builder ─────────────────────────────────────────────


@pytest.mark.parametrize(
    ("base", "expected"),
    [
        (date(2024, 2, 1), 29),
        (date(2023, 2, 1), 28),
        (date(1900, 2, 1), 28),
        (date(2000, 2, 1), 29),
        (date(2025, 6, 1), 30),
        (date(2025, 7, 1), 31),
    ],
)
def test_day_panel_has_one_cell_per_day(base: date, expected: int) -> None:
    panel = build_panel(base, Picker.DAY)

    assert panel.number_of_cells == expected
    assert [c.date for c in panel.cells] == list(range(1, expected + 1))


def test_month_panel_is_the_twelve_months_of_its_year() -> None:
    panel = build_panel(date(2024, 1, 1), Picker.MONTH)

    assert panel.number_of_cells == 12
    assert [c.value for c in panel.cells] == [date(2024, m, 1) for m in range(1, 13)]


def test_year_panel_enumerates_the_decade() -> None:
    panel = build_panel(date(2020, 1, 1), "year")

    assert panel.number_of_cells == 10
    assert [c.year for c in panel.cells] == list(range(2020, 2030))


def test_panels_are_cached_by_identity() -> None:
    assert build_panel(date(2025, 6, 1), Picker.DAY) is build_panel(date(2025, 6, 1), "day")


def test_build_panels_includes_both_neighbours() -> None:
    panels = build_panels([date(2025, 6, 1), date(2025, 7, 1)], Picker.DAY)

    assert sorted(panels) == [
        timestamp(date(2025, 5, 1)),
        timestamp(date(2025, 6, 1)),
        timestamp(date(2025, 7, 1)),
        timestamp(date(2025, 8, 1)),
    ]


# ── Composer ────────────────────────────────────────────


def test_thirty_day_month_with_monday_weeks() -> None:
    # June 2025 starts on a Sunday and ends on a Monday.
    panel = _compose(date(2025, 6, 1), Picker.DAY, week_start=1)

    assert len(panel.before) == 6
    assert [c.value for c in panel.before] == [date(2025, 5, d) for d in range(26, 32)]
    assert len(panel.active) == 30
    assert [c.value for c in panel.after] == [date(2025, 7, d) for d in range(1, 7)]
    assert len(panel.cells) == 42


def test_short_grid_gets_a_padding_week_unless_trimmed() -> None:
    # September 2025 starts on a Monday and ends on a Tuesday.
    padded = _compose(date(2025, 9, 1), Picker.DAY, week_start=1)
    trimmed = _compose(date(2025, 9, 1), Picker.DAY, week_start=1, trim_weeks=True)

    assert len(padded.before) == 0
    assert len(padded.after) == 12
    assert len(padded.cells) == 42

    last_weekday = trimmed.active[-1].weekday
    assert len(trimmed.after) == 7 - last_weekday == 5
    assert len(trimmed.cells) == 35


def test_month_ending_on_week_boundary() -> None:
    # February 2015 fills exactly four Sunday-first weeks.
    padded = _compose(date(2015, 2, 1), Picker.DAY)
    trimmed = _compose(date(2015, 2, 1), Picker.DAY, trim_weeks=True)

    assert len(padded.before) == 0
    assert len(padded.after) == 14
    assert trimmed.after == ()
    assert len(trimmed.cells) == 28


def test_weekday_positions_follow_week_start() -> None:
    panel = _compose(date(2025, 6, 1), Picker.DAY, week_start=1)

    assert panel.active[0].day == 0
    assert panel.active[0].weekday == 7
    assert panel.active[1].weekday == 1


def test_year_panel_pads_one_year_each_side() -> None:
    panel = _compose(date(2020, 1, 1), Picker.YEAR)

    assert [c.year for c in panel.before] == [2019]
    assert [c.year for c in panel.active] == list(range(2020, 2030))
    assert [c.year for c in panel.after] == [2030]
    assert all(c.is_external for c in panel.before + panel.after)


def test_month_panel_has_no_padding() -> None:
    panel = _compose(date(2024, 1, 1), Picker.MONTH)

    assert panel.before == ()
    assert panel.after == ()
    assert len(panel.active) == 12


def test_cells_are_decorated_by_predicates() -> None:
    rules = DisabledRules(min_date=date(2025, 6, 10), max_date=date(2025, 6, 20))
    predicates = CellPredicates(
        active=lambda d: d == date(2025, 6, 12),
        between=lambda d: date(2025, 6, 12) <= d <= date(2025, 6, 14),
        disabled=lambda d: is_disabled(d, rules),
        today=lambda d: d == date(2025, 6, 15),
    )
    panel = _compose(date(2025, 6, 1), Picker.DAY, weekends=(0, 6), predicates=predicates)
    by_day = {c.date: c for c in panel.active}

    assert [c.date for c in panel.active if not c.is_disabled] == list(range(10, 21))
    assert by_day[12].is_active
    assert [c.date for c in panel.active if c.is_between] == [12, 13, 14]
    assert [c.date for c in panel.active if c.is_today] == [15]
    assert by_day[1].is_weekend and by_day[7].is_weekend and not by_day[2].is_weekend
    assert not any(c.is_external for c in panel.active)


def test_external_cells_are_decorated_but_never_today() -> None:
    predicates = CellPredicates(active=lambda d: True, today=lambda d: True)
    panel = _compose(date(2025, 6, 1), Picker.DAY, week_start=1, predicates=predicates)

    assert all(c.is_active and c.is_interactive for c in panel.before)
    assert not any(c.is_today for c in panel.before + panel.after)


def test_disable_external_makes_padding_inert() -> None:
    predicates = CellPredicates(active=lambda d: True, between=lambda d: True)
    panel = _compose(
        date(2025, 6, 1), Picker.DAY, week_start=1, predicates=predicates, disable_external=True
    )

    externals = panel.before + panel.after
    assert len(externals) == 12
    assert all(c.is_external and not c.is_interactive for c in externals)
    assert not any(c.is_active or c.is_between for c in externals)
    assert all(c.is_active for c in panel.active)


def test_rows_and_headings() -> None:
    day_panel = _compose(date(2025, 6, 1), Picker.DAY, week_start=1)
    year_panel = _compose(date(2020, 1, 1), Picker.YEAR)

    rows = panel_rows(day_panel, Picker.DAY)
    assert len(rows) == 6 and all(len(r) == 7 for r in rows)
    assert [len(r) for r in panel_rows(year_panel, Picker.YEAR)] == [3, 3, 3, 3]

    header = weekday_header([day_panel])
    assert [c.day for c in header] == [1, 2, 3, 4, 5, 6, 0]
    assert weekday_header([]) == []

    assert panel_title_dates(day_panel, Picker.DAY) == (date(2025, 6, 1),)
    assert panel_title_dates(year_panel, Picker.YEAR) == (date(2020, 1, 1), date(2029, 1, 1))
    assert label_kind("month").value == "month-short"
