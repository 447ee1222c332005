"""Error logging utilities for ticket generation."""

import traceback
from typing import Any, Dict, Optional
from spaceline.config.logging import get_logger

logger = get_logger(__name__)


def log_error(
    error: Exception,
    context: Optional[Dict[str, Any]] = None,
    operation: Optional[str] = None,
    log_level: str = "error",
    with_traceback: bool = True,
) -> None:
    """
    Log an error with its type, message, context and traceback.

    Args:
        error: The exception that occurred
        context: Additional context dictionary (e.g., {'row_count': -1})
        operation: Description of the operation being performed
        log_level: Logging level ('debug', 'warning', 'error', 'critical')
        with_traceback: Attach the traceback; expected user errors pass False
    """
    error_type = type(error).__name__

    context_parts = []
    if operation:
        context_parts.append(f"Operation: {operation}")
    if context:
        context_str = ", ".join(f"{k}={v}" for k, v in context.items())
        context_parts.append(f"Context: {context_str}")

    error_msg = f"[{error_type}] {error}"
    if context_parts:
        error_msg += " | " + " | ".join(context_parts)

    exc_info = error if with_traceback else None
    level = log_level.lower()
    if level == "critical":
        logger.critical(error_msg, exc_info=exc_info)
    elif level == "warning":
        logger.warning(error_msg, exc_info=exc_info)
    elif level == "debug":
        logger.debug(error_msg, exc_info=exc_info)
    else:
        logger.error(error_msg, exc_info=exc_info)

    if with_traceback:
        formatted = "".join(
            traceback.format_exception(type(error), error, error.__traceback__)
        )
        logger.debug(f"Full traceback for {error_type}:\n{formatted}")
