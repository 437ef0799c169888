"""Decides what text is passed to a logger, and whether to call it at all.

Contextual information is appended to the message text only as a fallback.
When records are enriched out of band (see ``ContextualFilter``), switch the
fallback off with ``set_append_contextual_information(False)`` so the context
does not appear twice.
"""

import logging
from typing import Callable, Optional, Tuple, Union

from scopelog.context.store import ContextStore

from .levels import LevelLike, is_none_level, to_level

Sink = Union[logging.Logger, logging.LoggerAdapter]
MessageLike = Union[str, Callable[[], Optional[str]], None]

_append_contextual_information = True


def set_append_contextual_information(enabled: bool) -> None:
    """Set whether contextual information is appended to message text.

    Args:
        enabled: True to append context to messages (the default)
    """
    global _append_contextual_information
    _append_contextual_information = bool(enabled)


def get_append_contextual_information() -> bool:
    """Get whether contextual information is appended to message text."""
    return _append_contextual_information


def format_message(message: Optional[str], context: Optional[ContextStore] = None) -> str:
    """Append the formatted context to a message.

    Args:
        message: Message text (None is treated as an empty message)
        context: Store whose entries should be appended, if any

    Returns:
        The message, followed by a line break and the formatted context when
        appending is enabled and the context has entries
    """
    text = message if message is not None else ""

    if not _append_contextual_information or context is None:
        return text

    contextual_information = context.format()
    if not contextual_information.strip():
        return text

    return f"{text}\r\n{contextual_information}"


def _resolve(message: MessageLike) -> Optional[str]:
    if callable(message):
        return message()
    return message


def build_message(
    sink: Optional[Sink],
    level: LevelLike,
    message: MessageLike,
    context: Optional[ContextStore] = None,
) -> Tuple[bool, str]:
    """Decide whether to log and build the final message text.

    The enabled check happens before a lazily-produced message is evaluated,
    so the producer is only called when the message will be written.

    Args:
        sink: Logger to check, may be None
        level: Severity of the message
        message: Message text, or a zero-argument callable producing it
        context: Store whose entries should be appended, if any

    Returns:
        Tuple of (should_emit, final_message); final_message is empty when
        should_emit is False
    """
    if sink is None or is_none_level(level):
        return False, ""

    if not sink.isEnabledFor(to_level(level)):
        return False, ""

    return True, format_message(_resolve(message), context)


def log_message(
    sink: Optional[Sink],
    level: LevelLike,
    message: MessageLike,
    context: Optional[ContextStore] = None,
    error: Optional[BaseException] = None,
) -> bool:
    """Write a message, with contextual information, to a logger.

    Args:
        sink: Logger to write to; None is ignored
        level: Severity of the message
        message: Message text, or a zero-argument callable producing it
        context: Store whose entries should be appended, if any
        error: Exception to record alongside the message

    Returns:
        True if the message was passed to the logger
    """
    should_emit, text = build_message(sink, level, message, context)
    if not should_emit:
        return False

    if error is None:
        sink.log(to_level(level), text)
    else:
        sink.log(to_level(level), text, exc_info=error)
    return True
