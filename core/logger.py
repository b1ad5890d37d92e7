"""
Logging for the picker engine.

Modules log through named loggers; the root handler is installed lazily
the first time one is requested, at ``DATEPICKER_LOG_LEVEL``. Entry points
may call ``configure_logging`` themselves to pick a different level.

    from core.logger import get_logger
    logger = get_logger(__name__)
    logger.debug("Window recomputed from %s", start)
"""

from __future__ import annotations

import logging
import sys

from core.config import settings

_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
_DATE_FORMAT = "%H:%M:%S"

_handler: logging.Handler | None = None


def configure_logging(level: str | None = None) -> logging.Handler:
    """Install the stdout handler on the root logger and set its level.

    Repeated calls only adjust the level; the handler is added once.
    """
    global _handler
    if _handler is None:
        _handler = logging.StreamHandler(sys.stdout)
        _handler.setFormatter(logging.Formatter(_FORMAT, datefmt=_DATE_FORMAT))
        logging.getLogger().addHandler(_handler)

    logging.getLogger().setLevel((level or settings.log_level).upper())
    return _handler


def get_logger(name: str) -> logging.Logger:
    if _handler is None:
        configure_logging()
    return logging.getLogger(name)
