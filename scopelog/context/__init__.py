"""Ambient contextual information propagated along an execution flow."""

from .helpers import (
    clear_log_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
    start_scope,
)
from .host import (
    HOST_KEYS,
    HOST_VARIABLES,
    host_environment,
    read_host_information,
    reset_host_environment,
    set_host_environment,
)
from .propagation import clear_context, get_context, peek_context, propagate_context_to_thread
from .scope import ScopeSnapshot, TransientScope
from .store import EMPTY_MARKER, NULL_MARKER, ContextStore, encode_value

__all__ = [
    # Store
    "ContextStore",
    "ScopeSnapshot",
    "encode_value",
    "NULL_MARKER",
    "EMPTY_MARKER",
    # Propagation
    "get_context",
    "peek_context",
    "clear_context",
    "propagate_context_to_thread",
    # Scopes
    "TransientScope",
    "start_scope",
    "log_context",
    "push_log_context",
    "pop_log_context",
    "get_log_context",
    "clear_log_context",
    # Host seeding
    "HOST_KEYS",
    "HOST_VARIABLES",
    "read_host_information",
    "set_host_environment",
    "reset_host_environment",
    "host_environment",
]
