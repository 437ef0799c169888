"""Contextual logging: ambient key/value context appended to log messages.

Attach context to the current execution flow and it follows the call chain,
including into asyncio tasks, without being passed through every function:

    >>> from scopelog import get_context, get_logger, log_context
    >>> logger = get_logger(__name__)
    >>> with log_context(RequestId="7f3a"):
    ...     logger.info("Handling request")

Operation scopes bracket a unit of work with start and end messages:

    >>> with begin_operation(logger, Severity.INFORMATION, "rebuilding the index"):
    ...     rebuild_index()
"""

from scopelog.context import (
    ContextStore,
    TransientScope,
    clear_context,
    clear_log_context,
    get_context,
    get_log_context,
    log_context,
    peek_context,
    pop_log_context,
    propagate_context_to_thread,
    push_log_context,
    start_scope,
)
from scopelog.exceptions import ArgumentValidationError
from scopelog.logging import (
    ContextLoggerAdapter,
    OperationScope,
    Severity,
    begin_operation,
    build_message,
    format_message,
    get_append_contextual_information,
    get_logger,
    log_message,
    safe_log,
    safe_log_critical,
    safe_log_debug,
    safe_log_error,
    safe_log_information,
    safe_log_trace,
    safe_log_warning,
    set_append_contextual_information,
)

__version__ = "1.0.0"

__all__ = [
    "ContextStore",
    "TransientScope",
    "get_context",
    "peek_context",
    "clear_context",
    "propagate_context_to_thread",
    "start_scope",
    "log_context",
    "push_log_context",
    "pop_log_context",
    "get_log_context",
    "clear_log_context",
    "ArgumentValidationError",
    "ContextLoggerAdapter",
    "get_logger",
    "Severity",
    "format_message",
    "build_message",
    "log_message",
    "set_append_contextual_information",
    "get_append_contextual_information",
    "safe_log",
    "safe_log_trace",
    "safe_log_debug",
    "safe_log_information",
    "safe_log_warning",
    "safe_log_error",
    "safe_log_critical",
    "OperationScope",
    "begin_operation",
]
