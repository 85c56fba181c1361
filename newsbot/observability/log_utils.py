"""
Structured logging helpers for the chat and backfill pipelines.

Context values are summarized before logging: embedding vectors are reduced
to their dimension, similarity scores are rounded and long text such as
article content is truncated. Exception details from NewsBotException are
merged into the record so provider and storage failures carry their context.

Dependencies: logging (stdlib), newsbot.core.exceptions
System role: Logging helper functions
"""

import logging
from typing import Any

from newsbot.core.exceptions import NewsBotException

# LogRecord attributes that extra= must not overwrite
_RESERVED_KEYS = frozenset(vars(logging.makeLogRecord({}))) | {"message", "asctime"}


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Convert a context value to a short string for logging.

    Args:
        value: Value to convert
        max_length: Maximum length before truncating

    Returns:
        str: Loggable representation
    """
    try:
        if value is None:
            return "None"
        if isinstance(value, str):
            val_str = value
        elif isinstance(value, bool):
            val_str = str(value)
        elif isinstance(value, float):
            val_str = f"{value:.4f}"
        elif isinstance(value, (list, tuple)):
            if value and all(isinstance(item, float) for item in value):
                val_str = f"vector(dim={len(value)})"
            else:
                val_str = f"{type(value).__name__}({len(value)} items)"
        elif isinstance(value, dict):
            val_str = f"dict({len(value)} keys)"
        else:
            val_str = str(value)

        if len(val_str) > max_length:
            return val_str[:max_length] + f"... (truncated, {len(val_str)} total)"
        return val_str
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"


def _safe_context(context: dict[str, Any]) -> dict[str, str]:
    return {
        (f"ctx_{key}" if key in _RESERVED_KEYS else key): safe_log_value(val)
        for key, val in context.items()
    }


def log_with_context(
    logger: logging.Logger,
    level: int,
    message: str,
    **context,
) -> None:
    """
    Log a message with summarized context passed as record extras.

    Args:
        logger: Logger instance
        level: Log level (logging.INFO, etc.)
        message: Log message
        **context: Arbitrary key-value context
    """
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context,
) -> None:
    """
    Log an exception with its traceback and context.

    Details of a NewsBotException are added under their own keys; explicit
    context wins on a key clash.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    merged: dict[str, Any] = dict(exc.details) if isinstance(exc, NewsBotException) else {}
    merged.update(context)

    safe_context = _safe_context(merged)
    safe_context.update({
        "error_type": type(exc).__name__,
        "error_msg": exc.message if isinstance(exc, NewsBotException) else str(exc),
    })
    logger.exception(message, extra=safe_context)
