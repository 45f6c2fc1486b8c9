"""
Logging utilities for structured error logs.

Batch arguments (id lists, email lists, friend pairs) can be large, so
context values are rendered compactly before they are attached to a
record.

Dependencies: logging (stdlib)
System role: Logging helper functions
"""

import logging
from typing import Any

MAX_INLINE_ITEMS = 10


def safe_log_value(value: Any, max_length: int = 500) -> str:
    """
    Render a context value for a log record.

    Short collections are shown in full; longer ones as a count with the
    first few items. Strings longer than ``max_length`` are cut.

    Args:
        value: Value to render
        max_length: Maximum rendered length

    Returns:
        str: Rendered value
    """
    if isinstance(value, (list, tuple, set, frozenset)):
        items = list(value)
        if len(items) > MAX_INLINE_ITEMS:
            head = ", ".join(repr(i) for i in items[:3])
            rendered = f"{len(items)} items [{head}, ...]"
        else:
            rendered = repr(items)
    else:
        rendered = str(value)

    if len(rendered) > max_length:
        return f"{rendered[:max_length]}... ({len(rendered)} chars)"
    return rendered


def log_exception_with_context(
    logger: logging.Logger,
    message: str,
    exc: Exception,
    **context: Any,
) -> None:
    """
    Log a failed operation at error level.

    The record gets ``error_type`` and ``error_msg`` plus every context
    value rendered with ``safe_log_value``.

    Args:
        logger: Logger instance
        message: Log message; the exception text is appended
        exc: Exception that ended the operation
        **context: Operation arguments worth keeping
    """
    extra = {key: safe_log_value(val) for key, val in context.items()}
    extra["error_type"] = type(exc).__name__
    extra["error_msg"] = str(exc)
    logger.error(f"{message}: {exc}", extra=extra)
