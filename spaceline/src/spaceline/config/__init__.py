"""Configuration module for Spaceline."""

from .settings import LOG_LEVELS, Settings, get_settings, reset_settings
from .logging import LogLevel, resolve_level, setup_logging, get_logger

__all__ = [
    "LOG_LEVELS",
    "Settings",
    "get_settings",
    "reset_settings",
    "LogLevel",
    "resolve_level",
    "setup_logging",
    "get_logger",
]
