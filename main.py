"""
Demo entry point.

Builds a picker from the environment defaults and logs the composition of
the current window, one line per panel.
"""

from __future__ import annotations

from core.config import PickerConfig, settings
from core.logger import configure_logging, get_logger
from handlers.picker import DatePicker

logger = get_logger(__name__)


def main() -> None:
    configure_logging()
    config = PickerConfig.from_settings()
    picker = DatePicker(config)

    logger.info(
        "Starting %s picker (%s mode, %dx%d) at %s",
        config.picker.value,
        config.mode.value,
        config.columns,
        config.rows,
        picker.window_start,
    )

    for panel in picker.window():
        disabled = sum(cell.is_disabled for cell in panel.active)
        logger.info(
            "Panel %s: %d before, %d active (%d disabled), %d after",
            panel.base_date,
            len(panel.before),
            len(panel.active),
            disabled,
            len(panel.after),
        )

    logger.info("Labels use %s formatting for locale %s", picker.label_kind.value, settings.locale)


if __name__ == "__main__":
    main()
