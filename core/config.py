"""
Centralised configuration.

Process-wide defaults are loaded from the environment (or a .env file) via
pydantic-settings; every variable is optional and prefixed with DATEPICKER_:

    DATEPICKER_LOG_LEVEL        – Logging verbosity            (default: INFO)
    DATEPICKER_PICKER           – day / month / year           (default: day)
    DATEPICKER_MODE             – date / multiple / range      (default: date)
    DATEPICKER_COLUMNS          – Panels per row               (default: 1)
    DATEPICKER_ROWS             – Panel rows                   (default: 1)
    DATEPICKER_WEEK_START_DAY   – 0 (Sunday) … 6 (Saturday)    (default: 0)
    DATEPICKER_WEEKENDS         – Comma-separated day numbers  (default: 0,6)
    DATEPICKER_TRIM_WEEKS       – Drop padding weeks           (default: false)
    DATEPICKER_DISABLE_EXTERNAL – Inert neighbour cells        (default: false)
    DATEPICKER_ALWAYS_RANGE     – Disable end-date shortcut    (default: true)
    DATEPICKER_LOCALE           – Tag handed to formatters     (default: en-US)

PickerConfig is the validated configuration of one picker instance. It
rejects contract violations (zero columns, unknown picker, inverted bounds)
when it is built, never later during panel computation.
"""

from __future__ import annotations

from datetime import date
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.types import DisabledRules, Mode, ObjectRange, Picker


def _parse_day_numbers(value: int | str | list[int] | list[str] | tuple[int, ...]) -> list[int]:
    if isinstance(value, int):
        return [value]
    if isinstance(value, str):
        return [int(v.strip()) for v in value.split(",") if v.strip()]
    return [int(v) for v in value]


def _check_day_numbers(value: list[int] | tuple[int, ...]) -> None:
    for day in value:
        if not 0 <= day <= 6:
            raise ValueError(f"day of week must be within 0..6, got {day}")


class Settings(BaseSettings):
    log_level: str = "INFO"
    picker: Picker = Picker.DAY
    mode: Mode = Mode.DATE
    columns: int = 1
    rows: int = 1
    week_start_day: int = 0
    weekends: str | list[int] = [0, 6]
    trim_weeks: bool = False
    disable_external: bool = False
    always_range: bool = True
    locale: str = "en-US"

    model_config = SettingsConfigDict(
        env_prefix="DATEPICKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Accept comma-separated WEEKENDS like "0,6"
    @field_validator("weekends", mode="before")
    @classmethod
    def _parse_weekends(cls, value: str | list[int] | list[str]) -> list[int]:
        days = _parse_day_numbers(value)
        _check_day_numbers(days)
        return days


settings = Settings()


class PickerConfig(BaseModel):
    """Validated, immutable configuration of a single picker."""

    model_config = ConfigDict(frozen=True)

    picker: Picker = Picker.DAY
    mode: Mode = Mode.DATE
    columns: int = Field(default=1, ge=1)
    rows: int = Field(default=1, ge=1)
    week_start_day: int = Field(default=0, ge=0, le=6)
    weekends: tuple[int, ...] = ()
    disabled: tuple[date | tuple[date, date], ...] = ()
    min_date: date | None = None
    max_date: date | None = None
    trim_weeks: bool = False
    disable_external: bool = False
    always_range: bool = True
    locale: str = "en-US"

    hover_range: Callable[[date], ObjectRange] | None = None
    validate_range: Callable[[ObjectRange], bool] | None = None
    clock: Callable[[], date] = date.today

    @field_validator("weekends", mode="before")
    @classmethod
    def _parse_weekends(cls, value: Any) -> Any:
        if isinstance(value, (int, str, list, tuple)):
            return tuple(_parse_day_numbers(value))
        return value

    @field_validator("weekends")
    @classmethod
    def _check_weekends(cls, value: tuple[int, ...]) -> tuple[int, ...]:
        _check_day_numbers(value)
        return value

    @field_validator("disabled")
    @classmethod
    def _check_disabled_ranges(
        cls, value: tuple[date | tuple[date, date], ...]
    ) -> tuple[date | tuple[date, date], ...]:
        for item in value:
            if isinstance(item, tuple) and item[0] > item[1]:
                raise ValueError(f"disabled range starts after it ends: {item[0]} > {item[1]}")
        return value

    @model_validator(mode="after")
    def _check_bounds(self) -> PickerConfig:
        if self.min_date and self.max_date and self.min_date > self.max_date:
            raise ValueError(f"min_date {self.min_date} is after max_date {self.max_date}")
        return self

    # ── Derived values ──────────────────────────────────

    @property
    def page_size(self) -> int:
        """Number of panels visible at once."""
        return self.columns * self.rows

    @property
    def week(self) -> tuple[int, ...]:
        days = tuple(range(7))
        return days[self.week_start_day:] + days[: self.week_start_day]

    @property
    def disabled_rules(self) -> DisabledRules:
        return DisabledRules(
            min_date=self.min_date,
            max_date=self.max_date,
            dates=tuple(d for d in self.disabled if not isinstance(d, tuple)),
            ranges=tuple(r for r in self.disabled if isinstance(r, tuple)),
        )

    # ── Construction helpers ────────────────────────────

    @classmethod
    def from_settings(cls, source: Settings | None = None, **overrides: Any) -> PickerConfig:
        """Build a config from the environment defaults, then apply *overrides*."""
        source = source or settings
        values: dict[str, Any] = {
            "picker": source.picker,
            "mode": source.mode,
            "columns": source.columns,
            "rows": source.rows,
            "week_start_day": source.week_start_day,
            "weekends": source.weekends,
            "trim_weeks": source.trim_weeks,
            "disable_external": source.disable_external,
            "always_range": source.always_range,
            "locale": source.locale,
        }
        values.update(overrides)
        return cls(**values)

    def evolve(self, **changes: Any) -> PickerConfig:
        """Return a re-validated copy with *changes* applied."""
        values = dict(self)
        values.update(changes)
        return type(self)(**values)
