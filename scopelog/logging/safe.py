"""Null-safe logging helpers.

Every helper accepts a logger that may be None and returns it unchanged, so
call sites can chain without checking for a logger first:

    >>> safe_log_information(logger, "Loaded configuration", context=get_context())

``message`` may be a string or a zero-argument callable; the callable is only
invoked when the level is enabled.
"""

from typing import Optional, TypeVar

from scopelog.context.store import ContextStore

from .formatter import MessageLike, log_message
from .levels import LevelLike, Severity

SinkT = TypeVar("SinkT")


def safe_log(
    sink: Optional[SinkT],
    level: LevelLike,
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message at the given level, with optional context and exception.

    Args:
        sink: Logger to write to (may be None)
        level: Severity of the message
        message: Message text, or a zero-argument callable producing it
        context: Store whose entries should be appended to the message
        error: Exception to record alongside the message

    Returns:
        The sink passed in, unchanged
    """
    if sink is None:
        return None

    log_message(sink, level, message, context=context, error=error)  # type: ignore[arg-type]
    return sink


def safe_log_trace(
    sink: Optional[SinkT],
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message with the level set to TRACE."""
    return safe_log(sink, Severity.TRACE, message, context=context, error=error)


def safe_log_debug(
    sink: Optional[SinkT],
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message with the level set to DEBUG."""
    return safe_log(sink, Severity.DEBUG, message, context=context, error=error)


def safe_log_information(
    sink: Optional[SinkT],
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message with the level set to INFORMATION."""
    return safe_log(sink, Severity.INFORMATION, message, context=context, error=error)


def safe_log_warning(
    sink: Optional[SinkT],
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message with the level set to WARNING."""
    return safe_log(sink, Severity.WARNING, message, context=context, error=error)


def safe_log_error(
    sink: Optional[SinkT],
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message with the level set to ERROR."""
    return safe_log(sink, Severity.ERROR, message, context=context, error=error)


def safe_log_critical(
    sink: Optional[SinkT],
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> Optional[SinkT]:
    """Log a message with the level set to CRITICAL."""
    return safe_log(sink, Severity.CRITICAL, message, context=context, error=error)
