"""
Selection state machine.

The transient interaction state (range anchor and hover preview) is an
immutable value: ``click`` and ``hover`` take the current state and return
the next one, so the caller threads it explicitly between events.

    date      – a click selects the date, or clears it when already selected
    multiple  – a click toggles the date in the selection
    range     – anchor mode:        click start → click end → commit
                hover-preview mode: hover → click anchors the preview →
                                    hover → click commits the preview
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from enum import Enum
from typing import Any, Sequence

from core.config import PickerConfig
from core.logger import get_logger
from core.types import DateCell, Mode, ObjectRange
from utils.dates import compare_by_picker, sort_dates
from utils.predicates import toggle_date

logger = get_logger(__name__)

# Stands in for a missing endpoint in the candidate range handed to validators.
PLACEHOLDER_DATE = date.min


class Outcome(str, Enum):
    COMMIT = "commit"
    CLEAR = "clear"
    UNCHANGED = "unchanged"


@dataclass(frozen=True)
class SelectionResult:
    """What a click asks the caller to do with its committed selection."""

    outcome: Outcome
    value: Any = None

    @classmethod
    def commit(cls, value: Any) -> SelectionResult:
        return cls(Outcome.COMMIT, value)

    @classmethod
    def clear(cls) -> SelectionResult:
        return cls(Outcome.CLEAR)

    @classmethod
    def unchanged(cls) -> SelectionResult:
        return cls(Outcome.UNCHANGED)

    @property
    def changed(self) -> bool:
        return self.outcome is not Outcome.UNCHANGED


@dataclass(frozen=True)
class SelectionState:
    anchor: ObjectRange = ObjectRange()
    preview: ObjectRange = ObjectRange()

    @property
    def is_anchored(self) -> bool:
        return self.anchor.start is not None

    def active_range(self, committed: Sequence[date] = ()) -> list[date]:
        """Sorted range to highlight: the in-progress one, else the committed one."""
        if not self.is_anchored:
            return sort_dates(committed)
        preview = self.preview.points()
        return sort_dates(preview if len(preview) == 2 else self.anchor.points())

    def preview_range(self) -> list[date]:
        points = self.preview.points()
        return sort_dates(points) if len(points) == 2 else []


@dataclass(frozen=True)
class Transition:
    state: SelectionState
    result: SelectionResult


# ── Helpers ─────────────────────────────────────────────


def _is_valid(config: PickerConfig, candidate: ObjectRange) -> bool:
    if config.validate_range is None:
        return True
    full = ObjectRange(
        start=candidate.start if candidate.start is not None else PLACEHOLDER_DATE,
        end=candidate.end if candidate.end is not None else PLACEHOLDER_DATE,
    )
    return bool(config.validate_range(full))


def _commit_range(state: SelectionState, config: PickerConfig, candidate: ObjectRange) -> Transition:
    if not _is_valid(config, candidate):
        logger.warning("Range %s rejected by validator", candidate)
        return Transition(state, SelectionResult.unchanged())

    points = sort_dates(candidate.points())
    if len(points) == 1:
        points = points * 2
    logger.debug("Committing range %s – %s", points[0], points[1])
    return Transition(SelectionState(), SelectionResult.commit(tuple(points)))


def _as_dates(selection: Any) -> tuple[date, ...]:
    if selection is None:
        return ()
    if isinstance(selection, date):
        return (selection,)
    return tuple(selection)


# ── Mode handlers ───────────────────────────────────────


def _click_date(state: SelectionState, value: date, config: PickerConfig, selection: Any) -> Transition:
    if selection is None or not compare_by_picker(value, selection, config.picker):
        return Transition(state, SelectionResult.commit(value))
    return Transition(state, SelectionResult.clear())


def _click_multiple(state: SelectionState, value: date, selection: Any) -> Transition:
    return Transition(state, SelectionResult.commit(toggle_date(value, _as_dates(selection))))


def _click_range(state: SelectionState, value: date, config: PickerConfig, selection: Any) -> Transition:
    hover_range = config.hover_range

    if hover_range is not None:
        if not state.is_anchored:
            preview = state.preview if state.preview.start is not None else hover_range(value)
            logger.debug("Anchoring preview %s", preview)
            return Transition(
                SelectionState(anchor=preview, preview=preview),
                SelectionResult.unchanged(),
            )
        return _commit_range(state, config, state.preview)

    if state.is_anchored:
        return _commit_range(state, config, ObjectRange(start=state.anchor.start, end=value))

    committed = _as_dates(selection)
    if not config.always_range and len(committed) == 2:
        start, end = committed
        if value != start and value == end:
            return Transition(state, SelectionResult.commit((value, value)))
        if value == start and value == end:
            return Transition(state, SelectionResult.clear())

    logger.debug("Anchoring range at %s", value)
    return Transition(SelectionState(anchor=ObjectRange(start=value)), SelectionResult.unchanged())


# ── Public API ──────────────────────────────────────────


def click(state: SelectionState, cell: DateCell, config: PickerConfig, selection: Any = None) -> Transition:
    """Apply a cell click to *selection* under the configured mode.

    Clicks on disabled or inert cells change nothing.
    """
    if cell.is_disabled or not cell.is_interactive:
        return Transition(state, SelectionResult.unchanged())

    mode = config.mode
    if mode is Mode.DATE:
        return _click_date(state, cell.value, config, selection)
    if mode is Mode.MULTIPLE:
        return _click_multiple(state, cell.value, selection)
    if mode is Mode.RANGE:
        return _click_range(state, cell.value, config, selection)
    raise ValueError(f"unknown selection mode: {mode!r}")


def hover(state: SelectionState, cell: DateCell, config: PickerConfig) -> SelectionState:
    """Update the hover preview for a pointer entering *cell*."""
    if cell.is_disabled or cell.is_external or config.mode is not Mode.RANGE:
        return state

    value = cell.value
    hover_range = config.hover_range

    if hover_range is not None:
        anchor = state.anchor.start
        if anchor is None:
            computed = hover_range(value)
        elif value > anchor:
            computed = ObjectRange(start=hover_range(anchor).start, end=hover_range(value).end)
        else:
            # Hovering before the anchor: flip so start stays on the anchor side.
            computed = ObjectRange(start=hover_range(anchor).end, end=hover_range(value).start)
        return SelectionState(anchor=state.anchor, preview=state.preview.merged(computed))

    if state.is_anchored:
        return SelectionState(anchor=state.anchor, preview=ObjectRange(start=state.anchor.start, end=value))
    return state
