"""Logging configuration for Spaceline."""

import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional, TextIO, Union
from .settings import LOG_LEVELS, get_settings

DEFAULT_FORMAT = (
    "%(asctime)s - %(name)s - %(levelname)s - "
    "[%(filename)s:%(lineno)d] - %(message)s"
)


class LogLevel(str, Enum):
    """Level names accepted on the command line."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def resolve_level(level: Union[str, LogLevel]) -> int:
    """
    Turn a level name into its logging constant.

    Raises:
        ValueError: If the name is not one of LOG_LEVELS
    """
    name = getattr(level, "value", level).upper()
    if name not in LOG_LEVELS:
        raise ValueError(f"unknown log level {level!r}, expected one of {', '.join(LOG_LEVELS)}")
    return logging.getLevelName(name)


def _handler(handler: logging.Handler, level: int, format_string: str) -> logging.Handler:
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(format_string))
    return handler


def setup_logging(
    level: Optional[Union[str, LogLevel]] = None,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Configure the "spaceline" logger.

    Console output goes to stderr unless another stream is given; stdout
    carries the ticket table.

    Args:
        level: Level name (DEBUG, INFO, WARNING, ERROR, CRITICAL), case-insensitive
        log_file: Optional file path for file logging
        format_string: Optional custom format string
        stream: Console stream (defaults to sys.stderr at call time)
    """
    settings = get_settings()
    log_level = resolve_level(level or settings.log_level)
    log_file_path = log_file or settings.log_file
    format_string = format_string or DEFAULT_FORMAT

    root_logger = logging.getLogger("spaceline")
    root_logger.setLevel(log_level)

    for old in list(root_logger.handlers):
        root_logger.removeHandler(old)
        old.close()

    root_logger.addHandler(
        _handler(logging.StreamHandler(stream or sys.stderr), log_level, format_string)
    )
    if log_file_path:
        root_logger.addHandler(
            _handler(logging.FileHandler(log_file_path, encoding="utf-8"), log_level, format_string)
        )

    root_logger.propagate = False


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the "spaceline" tree, setting logging up on first use."""
    if not logging.getLogger("spaceline").handlers:
        setup_logging()

    if name.startswith("spaceline"):
        return logging.getLogger(name)
    return logging.getLogger(f"spaceline.{name}")
