"""Logging setup shared by the scoring services and the CLI."""

from __future__ import annotations

import logging
import sys
from typing import TextIO

LOGGER_NAME = "career_fit"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_handler: logging.Handler | None = None


def _resolve_level(level: str | int | None) -> int:
    if level is None:
        return logging.INFO
    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(level.strip().upper())
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(
    level: str | int | None = None,
    stream: TextIO | None = None,
    format_string: str = LOG_FORMAT,
    date_format: str = DATE_FORMAT,
) -> logging.Logger:
    """Configure the `career_fit` logger and return it.

    Args:
        level: Level name ("DEBUG", "INFO", ...) or numeric level.
               Unknown names fall back to INFO.
        stream: Destination stream; stderr when omitted.
        format_string: Format string for log records.
        date_format: Format string for `%(asctime)s`.

    Returns:
        The package logger. Calling this again only updates the level;
        the handler is installed once until `reset_logging()`.
    """
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    log_level = _resolve_level(level)
    logger.setLevel(log_level)

    if _handler is None:
        logger.handlers.clear()
        _handler = logging.StreamHandler(stream or sys.stderr)
        _handler.setFormatter(logging.Formatter(format_string, datefmt=date_format))
        logger.addHandler(_handler)
        logger.propagate = False

    _handler.setLevel(log_level)
    return logger


def get_logger(name: str) -> logging.Logger:
    """Return the `career_fit.<name>` child logger."""
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def reset_logging() -> None:
    """Drop the installed handler (used by tests)."""
    global _handler

    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers.clear()
    logger.setLevel(logging.NOTSET)
    logger.propagate = True
    _handler = None
