"""
Rich-enhanced logging configuration for itemreport.

Library modules only create loggers under the ``itemreport`` namespace;
handlers are installed by the application (the CLI) through
``configure_logging()``.

Usage:
    from itemreport.logging import configure_logging

    configure_logging(level="debug")
"""

import logging
import sys
from typing import Literal

from rich.console import Console
from rich.logging import RichHandler

# All package loggers live under this name
MODULE_LOGGER_NAME = "itemreport"

# Type alias for log levels
LogLevel = Literal["debug", "info", "warning", "error", "critical"]

LOG_LEVELS: tuple[str, ...] = ("debug", "info", "warning", "error", "critical")


def _get_log_level(level: LogLevel | int) -> int:
    """Convert level string to logging constant."""
    if isinstance(level, int):
        return level

    level_map = {
        "debug": logging.DEBUG,
        "info": logging.INFO,
        "warning": logging.WARNING,
        "error": logging.ERROR,
        "critical": logging.CRITICAL,
    }
    return level_map.get(level.lower(), logging.WARNING)


def configure_logging(
    level: LogLevel | int = "warning",
    use_rich: bool = True,
    console: Console | None = None,
    show_time: bool = False,
) -> logging.Logger:
    """Configure logging for the itemreport package.

    Logs go to stderr so they never mix with a report written to stdout.

    Args:
        level: Log level.
        use_rich: Use a RichHandler; otherwise a plain stream handler.
        console: Rich console to log to (defaults to a stderr console).
        show_time: Show timestamps in rich output.

    Returns:
        The configured package logger.
    """
    log_level = _get_log_level(level)

    logger = logging.getLogger(MODULE_LOGGER_NAME)
    logger.setLevel(log_level)

    # Remove existing handlers to avoid duplicates
    logger.handlers.clear()

    handler: logging.Handler
    if use_rich:
        handler = RichHandler(
            level=log_level,
            console=console or Console(stderr=True),
            show_time=show_time,
            show_path=False,
            markup=False,
        )
    else:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(log_level)
        handler.setFormatter(
            logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")
        )

    logger.addHandler(handler)
    logger.propagate = False
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    """Return the package logger or one of its children.

    Args:
        name: Child logger name (e.g. "cli"); a full dotted module name
            under the package is accepted as well.
    """
    if not name:
        return logging.getLogger(MODULE_LOGGER_NAME)
    if name == MODULE_LOGGER_NAME or name.startswith(MODULE_LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{MODULE_LOGGER_NAME}.{name}")
