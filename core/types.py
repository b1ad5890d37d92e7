"""
Shared enums and value types.

Everything here is immutable: panel data is cached and shared between
queries, and cells are rebuilt on every recomputation instead of mutated.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum


class Picker(str, Enum):
    """What a single cell represents."""

    DAY = "day"
    MONTH = "month"
    YEAR = "year"


class Mode(str, Enum):
    """Shape of the committed selection."""

    DATE = "date"
    MULTIPLE = "multiple"
    RANGE = "range"


class LabelKind(str, Enum):
    """Which part of a cell's date the formatter should print."""

    DAY_NUMERIC = "day-numeric"
    MONTH_SHORT = "month-short"
    YEAR_NUMERIC = "year-numeric"


# ── Ranges & rules ──────────────────────────────────────


@dataclass(frozen=True)
class ObjectRange:
    """A possibly incomplete range: in-progress anchor or hover preview."""

    start: date | None = None
    end: date | None = None

    def points(self) -> list[date]:
        return [d for d in (self.start, self.end) if d is not None]

    def merged(self, other: ObjectRange) -> ObjectRange:
        """Return a copy with every endpoint *other* defines taken from it."""
        return ObjectRange(
            start=other.start if other.start is not None else self.start,
            end=other.end if other.end is not None else self.end,
        )


@dataclass(frozen=True)
class DisabledRules:
    min_date: date | None = None
    max_date: date | None = None
    dates: tuple[date, ...] = ()
    ranges: tuple[tuple[date, date], ...] = ()


# ── Panel data ──────────────────────────────────────────


@dataclass(frozen=True)
class DateInfo:
    """A raw calendar date split into the parts the grid needs.

    ``day`` is the day of week with Sunday = 0.
    """

    value: date
    year: int
    month: int
    date: int
    day: int


@dataclass(frozen=True)
class PanelData:
    base_date: date
    number_of_cells: int
    cells: tuple[DateInfo, ...]


@dataclass(frozen=True)
class DateCell:
    """A decorated cell, ready to be rendered by the presentation layer."""

    value: date
    year: int
    month: int
    date: int
    day: int
    weekday: int
    is_weekend: bool = False
    is_active: bool = False
    is_between: bool = False
    is_external: bool = False
    is_disabled: bool = False
    is_today: bool = False
    is_interactive: bool = True


@dataclass(frozen=True)
class ComposedPanel:
    """One visible panel: padding from its neighbours around its own cells."""

    base_date: date
    before: tuple[DateCell, ...] = ()
    active: tuple[DateCell, ...] = ()
    after: tuple[DateCell, ...] = ()

    @property
    def cells(self) -> tuple[DateCell, ...]:
        return self.before + self.active + self.after
