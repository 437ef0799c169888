"""Scope guard that reverts a logging context to an earlier snapshot."""

from typing import TYPE_CHECKING, Optional, Tuple

if TYPE_CHECKING:
    from .store import ContextStore

ScopeSnapshot = Tuple[Tuple[str, str], ...]


class TransientScope:
    """Reverts the contextual information held in a store when released.

    The snapshot is taken as soon as the scope is created. Anything added,
    changed or removed afterwards is undone by ``release()``, which runs at
    most once. Use it as a context manager so the release happens on every
    exit path:

    Example:
        >>> with store.start_scope() as scope:
        ...     scope.context.set("OrderId", 42)
        ...     logger.info("Processing order")
        ... # OrderId is gone again here
    """

    def __init__(self, context: "ContextStore"):
        """Initialize the scope and capture the snapshot.

        Args:
            context: The store to revert on release
        """
        self._context = context
        self._snapshot: Optional[ScopeSnapshot] = context.snapshot()
        self._released = False

    @property
    def context(self) -> "ContextStore":
        """The store guarded by this scope."""
        return self._context

    @property
    def released(self) -> bool:
        """Whether the snapshot has already been restored."""
        return self._released

    def release(self) -> None:
        """Restore the snapshot taken when the scope started."""
        if self._released:
            return
        self._released = True
        snapshot, self._snapshot = self._snapshot, None
        self._context.restore(snapshot)

    def __enter__(self):
        """Enter the scope."""
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        """Exit the scope, restoring the snapshot."""
        self.release()
        return False  # Don't suppress exceptions
