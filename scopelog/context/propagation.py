"""Binding of one context store per logical execution flow.

The current store lives in a ``ContextVar``, so it follows the call chain of a
thread, an asyncio task, or anything run under a copied ``contextvars``
context. The binding also carries an immutable snapshot of the store's
entries, which is re-published in the owning flow every time the store
changes. Because ``contextvars`` are copied when a task is created (or when
``propagate_context_to_thread`` wraps a function), a child flow inherits the
entries as they were at that moment. When the child first asks for its store
it receives a new store built from that snapshot, never the parent's live
instance, so later changes do not travel in either direction.

Plain ``threading.Thread`` targets do not inherit ``contextvars``; wrap them
with ``propagate_context_to_thread()`` to carry the caller's context across.
"""

import asyncio
import contextvars
import threading
import weakref
from typing import Any, Callable, NamedTuple, Optional

from .scope import ScopeSnapshot
from .store import ContextStore


class _Binding(NamedTuple):
    flow: object
    store: ContextStore
    version: int
    snapshot: ScopeSnapshot


# Context variable holding the store bound to the current execution flow
_binding_var: contextvars.ContextVar[Optional[_Binding]] = contextvars.ContextVar(
    "scopelog_context", default=None
)

# Flow tokens are plain objects compared by identity; thread idents and task
# ids can be reused once the thread or task is gone, tokens cannot.
_thread_flows = threading.local()
_task_flows: "weakref.WeakKeyDictionary[asyncio.Task, object]" = weakref.WeakKeyDictionary()
_task_flows_lock = threading.Lock()


def _current_flow() -> object:
    """Get the token identifying the running execution flow."""
    try:
        task = asyncio.current_task()
    except RuntimeError:
        task = None

    if task is not None:
        with _task_flows_lock:
            flow = _task_flows.get(task)
            if flow is None:
                flow = _task_flows[task] = object()
        return flow

    flow = getattr(_thread_flows, "flow", None)
    if flow is None:
        flow = _thread_flows.flow = object()
    return flow


def _bind(flow: object, store: ContextStore) -> None:
    version, snapshot = store.versioned_snapshot()
    _binding_var.set(_Binding(flow, store, version, snapshot))


def _publish(store: ContextStore) -> None:
    """Re-publish the snapshot after the owning flow changed its store."""
    binding = _binding_var.get()
    if binding is None or binding.store is not store:
        return
    flow = _current_flow()
    if binding.flow is flow:
        _bind(flow, store)


def _branch(binding: _Binding) -> ContextStore:
    """Create a store holding the entries inherited through a binding."""
    store = ContextStore(parent=binding.store)
    store.restore(binding.snapshot)
    return store


def get_context(parent: Optional[ContextStore] = None) -> ContextStore:
    """Get the context store for the current execution flow.

    Creates and binds a store on first use. The new store copies the entries
    of ``parent`` when one is given, otherwise it is seeded with host
    information. A flow that inherited a binding from another flow gets a
    store holding the entries as they were when it was scheduled. Repeated
    calls within the same flow return the same instance.

    Args:
        parent: Store to inherit from when a new store has to be created

    Returns:
        The store bound to the current flow
    """
    flow = _current_flow()
    binding = _binding_var.get()

    if binding is not None:
        if binding.flow is flow:
            if binding.version != binding.store.version:
                # Changed through a reference held by another flow.
                _bind(flow, binding.store)
            return binding.store
        store = _branch(binding)
    else:
        store = ContextStore(parent=parent)

    store._on_change = _publish
    _bind(flow, store)
    return store


def peek_context() -> Optional[ContextStore]:
    """Get the store visible to the current flow without binding one.

    In a flow that has not created its own store yet, this is an unbound
    copy of the inherited entries; callers must only read it.

    Returns:
        The bound store, a copy of the inherited entries, or None
    """
    binding = _binding_var.get()
    if binding is None:
        return None
    if binding.flow is _current_flow():
        return binding.store
    return _branch(binding)


def clear_context() -> None:
    """Unbind the current flow's store; the next get_context() creates a new one."""
    _binding_var.set(None)


def propagate_context_to_thread(target_func: Callable, *args: Any, **kwargs: Any) -> Callable:
    """Wrap a function so it runs with the caller's logging context.

    contextvars are not copied into new threads, so this captures the current
    context now and runs ``target_func`` inside it later. The worker sees the
    entries as they were when the wrapper was created and branches its own
    store on first access, so its changes stay in the worker.

    Usage:
        >>> thread = threading.Thread(
        ...     target=propagate_context_to_thread(worker_function, arg1, arg2)
        ... )
        >>> thread.start()

    Args:
        target_func: Function to run in the other thread
        *args: Positional arguments for target_func
        **kwargs: Keyword arguments for target_func

    Returns:
        Zero-argument callable suitable as a thread target or executor job
    """
    captured = contextvars.copy_context()

    def wrapper():
        # A Context can only be entered by one thread at a time.
        return captured.copy().run(target_func, *args, **kwargs)

    return wrapper
