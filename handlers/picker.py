"""
DatePicker: the surface the presentation layer talks to.

Queries:   window(), window_start, weekday_header(), label_kind
Commands:  on_cell_click(), on_cell_hover(), next(), prev(), jump_to()
Drill:     drill() opens a coarser single-date picker, close_drill() lands
           the parent window on the date chosen there.

The caller owns the committed selection: every click returns a
SelectionResult, and the picker mirrors committed values so the next
window() reflects them.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from core.config import PickerConfig
from core.logger import get_logger
from core.types import ComposedPanel, DateCell, LabelKind, Mode, Picker
from handlers.pagination import Pagination, initial_start_date
from panels.builder import build_panels
from panels.composer import CellPredicates, compose_window, label_kind, weekday_header
from states.selection import Outcome, SelectionResult, SelectionState, click, hover
from utils.predicates import is_active, is_between, is_disabled, is_today

logger = get_logger(__name__)

CellFormatter = Callable[[DateCell, str], str]


def reshape_selection(selection: Any, mode: Mode | str) -> Any:
    """Convert a committed selection to the shape *mode* expects.

    date → a single date or None, multiple → a tuple of dates,
    range → a sorted ``(start, end)`` pair or ``()``.
    """
    mode = Mode(mode)
    if selection is None:
        dates: list[date] = []
    elif isinstance(selection, date):
        dates = [selection]
    else:
        dates = list(selection)

    if mode is Mode.DATE:
        return dates[0] if dates else None
    if mode is Mode.MULTIPLE:
        return tuple(dates)
    if mode is Mode.RANGE:
        return (min(dates), max(dates)) if dates else ()
    raise ValueError(f"unknown selection mode: {mode!r}")


class DatePicker:
    def __init__(self, config: PickerConfig, selection: Any = None) -> None:
        self.config = config
        self.selection = selection
        self.state = SelectionState()
        self.pagination = Pagination(
            config.picker, config.page_size, initial_start_date(config, selection)
        )
        self.drilled: DatePicker | None = None

    # ── Queries ─────────────────────────────────────────

    @property
    def window_start(self) -> date:
        return self.pagination.start

    @property
    def base_dates(self) -> list[date]:
        return self.pagination.base_dates

    @property
    def label_kind(self) -> LabelKind:
        return label_kind(self.config.picker)

    def predicates(self) -> CellPredicates:
        """Predicates bound to the current selection, rules and interaction state."""
        config = self.config
        rules = config.disabled_rules
        committed = self._committed_range()
        active_range = self.state.active_range(committed)
        preview_range = self.state.preview_range() if config.hover_range else []
        today = config.clock()

        def active(d: date) -> bool:
            return is_active(
                d,
                config.mode,
                config.picker,
                date_value=self.selection if config.mode is Mode.DATE else None,
                dates=tuple(self.selection or ()) if config.mode is Mode.MULTIPLE else (),
                range_value=active_range,
            )

        def between(d: date) -> bool:
            in_range = config.mode is Mode.RANGE and is_between(d, active_range)
            return in_range or is_between(d, preview_range)

        return CellPredicates(
            active=active,
            between=between,
            disabled=lambda d: is_disabled(d, rules),
            today=lambda d: is_today(d, config.picker, today),
        )

    def window(self) -> list[ComposedPanel]:
        """Compose every visible panel of the current window."""
        base_dates = self.base_dates
        return compose_window(
            base_dates,
            build_panels(base_dates, self.config.picker),
            self.config.picker,
            week=self.config.week,
            weekends=self.config.weekends,
            predicates=self.predicates(),
            trim_weeks=self.config.trim_weeks,
            disable_external=self.config.disable_external,
        )

    def weekday_header(self) -> list[DateCell]:
        if self.config.picker is not Picker.DAY:
            return []
        return weekday_header(self.window())

    def format_cell(self, cell: DateCell, formatter: CellFormatter) -> str:
        """Label *cell* with a caller-supplied formatter and the configured locale."""
        return formatter(cell, self.config.locale)

    # ── Commands ────────────────────────────────────────

    def on_cell_click(self, cell: DateCell) -> SelectionResult:
        if cell.is_disabled or not cell.is_interactive:
            return SelectionResult.unchanged()

        if cell.is_external:
            self.pagination.jump_to(cell.value)

        transition = click(self.state, cell, self.config, self.selection)
        self.state = transition.state
        result = transition.result

        if result.outcome is Outcome.COMMIT:
            self._store(result.value)
        elif result.outcome is Outcome.CLEAR:
            self._store(() if self.config.mode is Mode.RANGE else None)
        return result

    def on_cell_hover(self, cell: DateCell) -> SelectionResult:
        self.state = hover(self.state, cell, self.config)
        return SelectionResult.unchanged()

    def next(self) -> date:
        return self.pagination.next()

    def prev(self) -> date:
        return self.pagination.prev()

    def jump_to(self, target: date) -> date:
        return self.pagination.jump_to(target)

    # ── External changes ────────────────────────────────

    def set_selection(self, selection: Any) -> None:
        """Replace the committed selection from outside; drops any in-progress range."""
        self._store(selection)

    def set_mode(self, mode: Mode | str) -> Any:
        """Switch selection mode, reshaping the committed selection to match.

        Returns the reshaped selection so the caller can persist it.
        """
        self.config = self.config.evolve(mode=mode)
        self._store(reshape_selection(self.selection, self.config.mode))
        logger.debug("Mode switched to %s, selection now %s", self.config.mode.value, self.selection)
        return self.selection

    def set_picker(self, picker: Picker | str) -> None:
        self.config = self.config.evolve(picker=picker)
        self.pagination = Pagination(self.config.picker, self.config.page_size, self.window_start)
        self.state = SelectionState()

    # ── Drill-down ──────────────────────────────────────

    def drill(self, picker: Picker | str) -> DatePicker:
        """Open a single-date picker of a coarser granularity over this window."""
        config = self.config.evolve(picker=picker, mode=Mode.DATE)
        self.drilled = DatePicker(config)
        self.drilled.jump_to(self.window_start)
        logger.debug("Drilled into %s picker at %s", config.picker.value, self.window_start)
        return self.drilled

    def close_drill(self, chosen: date | None = None) -> date:
        """Close the drilled picker, moving the window to *chosen* when given."""
        self.drilled = None
        if chosen is not None:
            return self.jump_to(chosen)
        return self.window_start

    # ── Internals ───────────────────────────────────────

    def _committed_range(self) -> tuple[date, ...]:
        if self.config.mode is not Mode.RANGE or not self.selection:
            return ()
        return tuple(self.selection)

    def _store(self, selection: Any) -> None:
        self.selection = selection
        self.state = SelectionState()
