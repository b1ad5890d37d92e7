"""
Panel window composition.

Turns the raw panels of a window into what each visible panel renders:
leading external cells borrowed from the previous panel, the panel's own
cells, and trailing external cells borrowed from the next one.

    Day picker   – leading cells fill the first week, trailing cells fill the
                   last; untrimmed grids are always six weeks (42 cells).
    Month picker – twelve months, no padding.
    Year picker  – the decade plus one year on either side (4 × 3 grid).
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Callable, Mapping, Sequence

from core.types import ComposedPanel, DateCell, DateInfo, LabelKind, PanelData, Picker
from utils.dates import YEAR_GROUP_COUNT, add_by_picker, sub_by_picker, timestamp
from utils.predicates import is_weekend

DAYS_IN_WEEK = 7
MAX_WEEKS = 6
GROUP_ROW_LENGTH = 3

DatePredicate = Callable[[date], bool]


def _never(_: date) -> bool:
    return False


@dataclass(frozen=True)
class CellPredicates:
    """Decoration callbacks bound to the current selection and rules."""

    active: DatePredicate = _never
    between: DatePredicate = _never
    disabled: DatePredicate = _never
    today: DatePredicate = _never


def decorate(
    info: DateInfo,
    *,
    week: Sequence[int],
    weekends: Sequence[int],
    predicates: CellPredicates,
    external: bool = False,
    inert: bool = False,
) -> DateCell:
    """Build a DateCell; *inert* external cells skip selection decoration."""
    plain = external and inert
    return DateCell(
        value=info.value,
        year=info.year,
        month=info.month,
        date=info.date,
        day=info.day,
        weekday=list(week).index(info.day) + 1,
        is_weekend=is_weekend(info.day, weekends),
        is_active=False if plain else predicates.active(info.value),
        is_between=False if plain else predicates.between(info.value),
        is_disabled=predicates.disabled(info.value),
        is_today=False if external else predicates.today(info.value),
        is_external=external,
        is_interactive=not plain,
    )


def panel_cells(
    panel: PanelData,
    *,
    start: int = 1,
    end: int | None = None,
    **options,
) -> list[DateCell]:
    """Decorate the 1-based, inclusive slice ``start..end`` of *panel*."""
    end = panel.number_of_cells if end is None else end
    return [decorate(info, **options) for info in panel.cells[max(start, 1) - 1 : end]]


def compose_window(
    base_dates: Sequence[date],
    panels: Mapping[int, PanelData],
    picker: Picker | str,
    *,
    week: Sequence[int],
    weekends: Sequence[int] = (),
    predicates: CellPredicates = CellPredicates(),
    trim_weeks: bool = False,
    disable_external: bool = False,
) -> list[ComposedPanel]:
    """Compose every visible panel of a window.

    *panels* must hold each base date and its two neighbours, keyed by
    ``timestamp`` (see ``panels.builder.build_panels``).
    """
    picker = Picker(picker)
    common = {"week": week, "weekends": weekends, "predicates": predicates}
    external = {**common, "external": True, "inert": disable_external}

    composed: list[ComposedPanel] = []
    for base_date in base_dates:
        panel = panels[timestamp(base_date)]
        active = panel_cells(panel, **common)

        if picker is Picker.MONTH:
            composed.append(ComposedPanel(base_date=base_date, active=tuple(active)))
            continue

        previous = panels[timestamp(sub_by_picker(base_date, 1, picker))]
        following = panels[timestamp(add_by_picker(base_date, 1, picker))]

        if picker is Picker.DAY:
            lead = active[0].weekday - 1
            before = panel_cells(previous, start=previous.number_of_cells - lead + 1, **external)

            tail = DAYS_IN_WEEK - active[-1].weekday
            if not trim_weeks:
                if tail == 0:
                    tail = DAYS_IN_WEEK
                if len(before) + len(active) + tail < DAYS_IN_WEEK * MAX_WEEKS:
                    tail += DAYS_IN_WEEK
            after = panel_cells(following, end=tail, **external)
        else:
            before = panel_cells(previous, start=YEAR_GROUP_COUNT, **external)
            after = panel_cells(following, end=1, **external)

        composed.append(
            ComposedPanel(
                base_date=base_date,
                before=tuple(before),
                active=tuple(active),
                after=tuple(after),
            )
        )
    return composed


# ── Layout helpers ──────────────────────────────────────


def panel_rows(panel: ComposedPanel, picker: Picker | str) -> list[list[DateCell]]:
    """Split a composed panel into display rows (weeks, or rows of three)."""
    size = DAYS_IN_WEEK if Picker(picker) is Picker.DAY else GROUP_ROW_LENGTH
    cells = list(panel.cells)
    return [cells[i : i + size] for i in range(0, len(cells), size)]


def weekday_header(window: Sequence[ComposedPanel]) -> list[DateCell]:
    """First week of the first panel, for weekday column labels."""
    if not window:
        return []
    first = window[0]
    return list(first.before + first.active)[:DAYS_IN_WEEK]


def panel_title_dates(panel: ComposedPanel, picker: Picker | str) -> tuple[date, ...]:
    """Raw dates a panel heading shows.

    Day pickers title by the panel's month, month pickers by its year, and
    year pickers by the first and last year of the decade.
    """
    first = panel.active[0].value
    if Picker(picker) is Picker.YEAR:
        return first, panel.active[-1].value
    return (first,)


def label_kind(picker: Picker | str) -> LabelKind:
    picker = Picker(picker)
    if picker is Picker.DAY:
        return LabelKind.DAY_NUMERIC
    if picker is Picker.MONTH:
        return LabelKind.MONTH_SHORT
    return LabelKind.YEAR_NUMERIC
