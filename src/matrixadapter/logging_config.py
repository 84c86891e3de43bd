"""
Logging Configuration
Sets up the package logger for the console demo.
"""
from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Optional, TextIO

if TYPE_CHECKING:
    from matrixadapter.config import DemoSettings

LOGGER_NAME = "matrixadapter"

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_DATEFMT = '%H:%M:%S'


def _reset_handlers(logger: logging.Logger) -> None:
    """Remove and close handlers left over from an earlier setup."""
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Route the 'matrixadapter' logger to the demo's console and an optional file.

    Calling it again replaces the previous handlers, so log lines are never duplicated.

    Args:
        level: Logging level for the logger and every handler.
        log_file: Optional path; the file is truncated and written as UTF-8.
        stream: Console stream for log lines (defaults to sys.stdout), so they
            interleave with the rendered matrices.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)
    _reset_handlers(logger)

    formatter = logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT)
    handlers: list[logging.Handler] = [logging.StreamHandler(stream if stream is not None else sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    logger.debug("Logging to %d handler(s) at level %s.", len(handlers), logging.getLevelName(level))
    return logger


def configure_from_settings(settings: DemoSettings, stream: Optional[TextIO] = None) -> logging.Logger:
    """Apply the log level and log file chosen on the command line."""
    return setup_logging(level=settings.log_level, log_file=settings.log_file, stream=stream)
