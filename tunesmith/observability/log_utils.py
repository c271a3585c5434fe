"""
Structured logging helpers.

Provider payloads and webhook bodies are arbitrary JSON, so context values
are reduced to short strings before they reach a log record: containers are
summarized by size, raw bytes by length, long strings truncated.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any, Mapping

MAX_LOG_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_LOG_VALUE_LENGTH) -> str:
    """
    Render ``value`` as a bounded, exception-free string for logging.

    Args:
        value: Any value, typically part of a provider payload
        max_length: Longest string kept before truncation

    Returns:
        str: Log-safe representation
    """
    if value is None:
        return "None"
    if isinstance(value, (bytes, bytearray)):
        return f"<{len(value)} bytes>"
    if isinstance(value, Mapping):
        return f"dict({len(value)} keys)"
    if isinstance(value, (list, tuple, set, frozenset)):
        return f"{type(value).__name__}({len(value)} items)"
    try:
        text = value if isinstance(value, str) else str(value)
    except Exception as e:
        return f"<unable to log: {type(e).__name__}>"
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def _safe_context(context: Mapping[str, Any]) -> dict[str, str]:
    return {key: safe_log_value(value) for key, value in context.items()}


def log_with_context(logger: logging.Logger, level: int, message: str, **context: Any) -> None:
    """Log ``message`` at ``level`` with sanitized ``extra`` fields."""
    logger.log(level, message, extra=_safe_context(context))


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context: Any,
) -> None:
    """
    Log an exception with its traceback and sanitized context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception being reported
        **context: Extra fields (IDs, URLs, counts)
    """
    extra = _safe_context(context)
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(str(exc))
    logger.error(message, exc_info=exc, extra=extra)
