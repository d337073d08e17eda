"""
Helpers for logging failures with structured context.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_VALUE_LENGTH = 500


def safe_log_value(value: Any, max_length: int = MAX_VALUE_LENGTH) -> str:
    """
    Render a value for a log record's `extra`.

    Sequences and mappings (page lists, embeddings, exception details) are
    reduced to their sizes; long text such as chunk content or model output
    is truncated.
    """
    if value is None:
        return "None"
    if isinstance(value, (list, tuple)):
        return f"{type(value).__name__}({len(value)} items)"
    if isinstance(value, dict):
        return f"dict({len(value)} keys)"

    text = value if isinstance(value, str) else str(value)
    if len(text) > max_length:
        return f"{text[:max_length]}... (truncated, {len(text)} total)"
    return text


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: BaseException,
    **context,
) -> None:
    """
    Log an exception at ERROR with traceback and context.

    Scalar entries of `exc.details` (set by application exceptions) are
    added to the record next to the caller's context.

    Args:
        logger: Logger instance
        message: Log message
        exc: Exception instance
        **context: Additional context
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    for key, val in getattr(exc, "details", {}).items():
        if isinstance(val, (str, int, float, bool)):
            extra.setdefault(f"error_{key}", safe_log_value(val))
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = safe_log_value(getattr(exc, "message", str(exc)))
    logger.error(message, exc_info=exc, extra=extra)
