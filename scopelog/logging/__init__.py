"""Context-aware logging helpers built on the standard library logging module."""

import logging
from typing import Optional

from scopelog.context.propagation import get_context, peek_context

from .formatter import (
    build_message,
    format_message,
    get_append_contextual_information,
    log_message,
    set_append_contextual_information,
)
from .levels import TRACE, Severity
from .operation import OperationScope, begin_operation
from .safe import (
    safe_log,
    safe_log_critical,
    safe_log_debug,
    safe_log_error,
    safe_log_information,
    safe_log_trace,
    safe_log_warning,
)


class ContextLoggerAdapter(logging.LoggerAdapter):
    """LoggerAdapter that appends the current flow's context to every message.

    It also merges the adapter's extra fields (such as ``component``) with the
    extra fields of each call, the call's values taking precedence.
    """

    def process(self, msg, kwargs):
        """Process log call, merging adapter extra with call extra."""
        extra = kwargs.get("extra", {})
        kwargs["extra"] = {**self.extra, **extra}
        return msg, kwargs

    def log(self, level, msg, *args, **kwargs):
        """Log a message, appending contextual information to its text."""
        if self.isEnabledFor(level):
            msg, kwargs = self.process(msg, kwargs)
            msg = self._append_context(msg, escape=bool(args))
            self.logger.log(level, msg, *args, **kwargs)

    def trace(self, msg, *args, **kwargs):
        """Log a message with severity TRACE."""
        self.log(TRACE, msg, *args, **kwargs)

    def _append_context(self, msg, escape: bool) -> str:
        store = peek_context()
        if store is None:
            store = get_context()

        contextual_information = format_message("", store)
        if escape:
            # The message is %-formatted with args later on.
            contextual_information = contextual_information.replace("%", "%%")
        return f"{msg}{contextual_information}"


def get_logger(name: str, component: Optional[str] = None) -> ContextLoggerAdapter:
    """Get a logger that appends the current context to every message.

    Args:
        name: Logger name (typically __name__)
        component: Optional component identifier to inject into all records

    Returns:
        ContextLoggerAdapter wrapping logging.getLogger(name)

    Example:
        >>> logger = get_logger(__name__, component="orders")
        >>> with log_context(OrderId=42):
        ...     logger.info("Order accepted")
        # Order accepted
        #
        # [ORDERID:42]
    """
    extra = {"component": component} if component else {}
    return ContextLoggerAdapter(logging.getLogger(name), extra)


__all__ = [
    "ContextLoggerAdapter",
    "get_logger",
    "Severity",
    "TRACE",
    # Formatting
    "format_message",
    "build_message",
    "log_message",
    "set_append_contextual_information",
    "get_append_contextual_information",
    # Convenience wrappers
    "safe_log",
    "safe_log_trace",
    "safe_log_debug",
    "safe_log_information",
    "safe_log_warning",
    "safe_log_error",
    "safe_log_critical",
    # Operation scopes
    "OperationScope",
    "begin_operation",
]
