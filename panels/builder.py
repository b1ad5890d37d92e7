"""
Panel enumeration.

A panel is identified by its base date and picker; building one is pure, so
results are memoised and shared. Cached PanelData is frozen and never
changes once created.
"""

from __future__ import annotations

import calendar as cal
from datetime import date
from functools import lru_cache
from typing import Iterable

from core.logger import get_logger
from core.types import DateInfo, PanelData, Picker
from utils.dates import (
    MONTH_GROUP_COUNT,
    YEAR_GROUP_COUNT,
    add_by_picker,
    add_months,
    js_weekday,
    sub_by_picker,
    timestamp,
)

logger = get_logger(__name__)


def parse_date(d: date) -> DateInfo:
    return DateInfo(value=d, year=d.year, month=d.month, date=d.day, day=js_weekday(d))


@lru_cache(maxsize=512)
def _build_panel(base_date: date, picker: Picker) -> PanelData:
    logger.debug("Building %s panel for %s", picker.value, base_date)

    if picker is Picker.DAY:
        count = cal.monthrange(base_date.year, base_date.month)[1]
        values = [base_date.replace(day=i) for i in range(1, count + 1)]
    elif picker is Picker.MONTH:
        count = MONTH_GROUP_COUNT
        values = [add_months(base_date, i) for i in range(count)]
    else:
        count = YEAR_GROUP_COUNT
        values = [add_months(base_date, i * 12) for i in range(count)]

    return PanelData(
        base_date=base_date,
        number_of_cells=count,
        cells=tuple(parse_date(v) for v in values),
    )


def build_panel(base_date: date, picker: Picker | str) -> PanelData:
    """Enumerate every date of the panel starting at *base_date*."""
    return _build_panel(base_date, Picker(picker))


def build_panels(base_dates: Iterable[date], picker: Picker | str) -> dict[int, PanelData]:
    """Panels for a window of base dates plus the neighbour on either side.

    Keyed by ``timestamp(base_date)``; the neighbours supply external padding.
    """
    base_dates = list(base_dates)
    if not base_dates:
        return {}

    picker = Picker(picker)
    keys = [
        sub_by_picker(base_dates[0], 1, picker),
        *base_dates,
        add_by_picker(base_dates[-1], 1, picker),
    ]
    return {timestamp(d): build_panel(d, picker) for d in keys}
