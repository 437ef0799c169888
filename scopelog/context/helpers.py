"""Convenience helpers for scoped contextual information.

These operate on the store bound to the current execution flow and wrap
every temporary change in a ``TransientScope`` so it is reverted afterwards,
even if an exception occurs.
"""

from typing import Any, Dict, Optional

from .propagation import clear_context, get_context, peek_context
from .scope import TransientScope
from .store import ContextStore


def start_scope(store: Optional[ContextStore] = None) -> TransientScope:
    """Start a scope over a store (the current flow's store by default).

    Args:
        store: Store to guard; None means get_context()

    Returns:
        Scope that reverts the store to its current state on release
    """
    return TransientScope(store if store is not None else get_context())


def get_log_context() -> Dict[str, str]:
    """Get a copy of the current flow's contextual information.

    Does not create a store when none is bound yet.

    Returns:
        Dictionary of current context entries
    """
    store = peek_context()
    return store.as_dict() if store is not None else {}


def push_log_context(**fields: Any) -> TransientScope:
    """Add fields to the current flow's context until the returned scope is popped.

    Args:
        **fields: Key-value pairs to add to the logging context

    Returns:
        Scope to pass to pop_log_context() to restore the previous state

    Example:
        >>> scope = push_log_context(RunId="abc123", Source="acme-corp")
        >>> # ... do work, all logs will include RunId and Source ...
        >>> pop_log_context(scope)
    """
    scope = start_scope()
    scope.context.update(fields)
    return scope


def pop_log_context(scope: Optional[TransientScope]) -> None:
    """Restore the logging context to the state captured by push_log_context().

    Args:
        scope: Scope returned from push_log_context(); None is ignored
    """
    if scope is not None:
        scope.release()


def clear_log_context() -> None:
    """Drop the current flow's store.

    This is primarily useful for testing.
    """
    clear_context()


class log_context:
    """Context manager for scoped logging context.

    Adds the fields on entry and reverts them on exit, even if an exception
    occurs.

    Example:
        >>> with log_context(RunId="abc123", Source="acme-corp"):
        ...     logger.info("Processing source")  # includes RunId and Source
        ... # context automatically restored on exit
    """

    def __init__(self, **fields: Any):
        """Initialize context manager with fields to add.

        Args:
            **fields: Key-value pairs to add to the logging context
        """
        self.fields = fields
        self.scope: Optional[TransientScope] = None

    def __enter__(self) -> ContextStore:
        """Enter the context manager, adding the fields."""
        self.scope = push_log_context(**self.fields)
        return self.scope.context

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the context manager, restoring previous context."""
        pop_log_context(self.scope)
        self.scope = None
        return False  # Don't suppress exceptions
