"""Logging setup for Padcalc.

Every module logs under the ``padcalc`` hierarchy (``padcalc.app``,
``padcalc.controller``, ...). The CLI configures that hierarchy once per run
from ``--log-level`` / ``--log-file`` and tears it down on exit.
"""

import logging
import sys
from datetime import datetime
from typing import Optional

LOGGER_NAME = "padcalc"

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class StructuredFormatter(logging.Formatter):
    """One line per record: ISO timestamp, level, component, message."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).isoformat(timespec="milliseconds")
        # "padcalc.controller" -> "controller"
        component = record.name.partition(".")[2] or record.name
        line = f"{timestamp} [{record.levelname}] {component}: {record.getMessage()}"
        if record.exc_info:
            line += "\n" + self.formatException(record.exc_info)
        return line


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Attach stderr (and optionally file) handlers to the ``padcalc`` logger.

    Calling it again replaces the previous handlers, so repeated CLI runs in
    one process do not duplicate output.

    Raises:
        ValueError: If ``level`` is not one of LOG_LEVELS
    """
    level = level.upper()
    if level not in LOG_LEVELS:
        raise ValueError(f"Unknown log level: {level!r}")

    logger = logging.getLogger(LOGGER_NAME)
    shutdown_logging()
    logger.setLevel(level)
    logger.propagate = False

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode="a", encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
    return logger


def shutdown_logging() -> None:
    """Detach and close every handler on the ``padcalc`` logger."""
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def get_logger(component: str) -> logging.Logger:
    """Return the logger for one component, e.g. ``get_logger("app")``."""
    return logging.getLogger(f"{LOGGER_NAME}.{component}")
