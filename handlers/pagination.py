"""
Window pagination.

The window is ``columns × rows`` consecutive panels. Only its start date is
tracked; base dates are re-derived from it, so next/prev always move by one
full page of picker units.
"""

from __future__ import annotations

from datetime import date
from typing import Any

from core.config import PickerConfig
from core.logger import get_logger
from core.types import Picker
from panels.builder import build_panel
from utils.dates import add_by_picker, base_of, sub_by_picker
from utils.predicates import is_disabled

logger = get_logger(__name__)


def default_start_date(config: PickerConfig) -> date:
    """First of the current month, or one page earlier if that panel is fully disabled."""
    start = config.clock().replace(day=1)
    panel = build_panel(base_of(start, config.picker), config.picker)
    rules = config.disabled_rules

    if all(is_disabled(info.value, rules) for info in panel.cells):
        fallback = sub_by_picker(start, config.page_size, config.picker)
        logger.warning("Panel of %s is fully disabled, starting at %s instead", start, fallback)
        return fallback
    return start


def initial_start_date(config: PickerConfig, selection: Any = None) -> date:
    """Where the window opens: the committed selection if any, else the default."""
    if isinstance(selection, date):
        return selection
    if selection:
        return selection[0]
    return default_start_date(config)


class Pagination:
    """Tracks the start of the visible window for one picker."""

    def __init__(self, picker: Picker | str, page_size: int, start: date) -> None:
        if page_size < 1:
            raise ValueError(f"page size must be at least 1, got {page_size}")
        self.picker = Picker(picker)
        self.page_size = page_size
        self.start = start

    @property
    def base_dates(self) -> list[date]:
        base = base_of(self.start, self.picker)
        return [add_by_picker(base, i, self.picker) for i in range(self.page_size)]

    def next(self) -> date:
        self.start = add_by_picker(self.start, self.page_size, self.picker)
        logger.debug("Window moved forward to %s", self.start)
        return self.start

    def prev(self) -> date:
        self.start = sub_by_picker(self.start, self.page_size, self.picker)
        logger.debug("Window moved back to %s", self.start)
        return self.start

    def jump_to(self, target: date) -> date:
        """Start the window at *target*; disabled rules are not consulted."""
        self.start = target
        logger.debug("Window jumped to %s", self.start)
        return self.start
