"""Tests for scope guards and the scoped context helpers."""

import pytest

from scopelog.context import (
    ContextStore,
    TransientScope,
    clear_log_context,
    get_context,
    get_log_context,
    log_context,
    pop_log_context,
    push_log_context,
    start_scope,
)


class TestTransientScope:
    """Snapshot on start, restore on release."""

    def test_scope_round_trip(self):
        store = ContextStore(environ={})
        store.set("a", "1")
        entries = store.snapshot()

        scope = store.start_scope()
        store.set("x", "1")
        store.set("a", "changed")
        scope.release()

        assert store.snapshot() == entries

    def test_scope_exposes_store(self):
        store = ContextStore(environ={})
        scope = TransientScope(store)

        assert scope.context is store

    def test_removed_keys_come_back(self):
        store = ContextStore(environ={})
        store.set("a", "1")

        with store.start_scope():
            store.unset("a")
            assert store.get("a") is None

        assert store.get("a") == "1"

    def test_release_is_effective_once(self):
        store = ContextStore(environ={})
        scope = store.start_scope()
        store.set("x", "1")
        scope.release()

        store.set("y", "2")
        scope.release()

        assert scope.released is True
        assert store.as_dict() == {"y": "2"}

    def test_restored_on_exception(self):
        store = ContextStore(environ={})

        with pytest.raises(ValueError):
            with store.start_scope() as scope:
                scope.context.set("x", "1")
                raise ValueError("Test exception")

        assert store.get("x") is None

    def test_nested_scopes(self):
        store = ContextStore(environ={})

        with store.start_scope():
            store.set("outer", "1")
            with store.start_scope():
                store.set("inner", "1")
                assert store.as_dict() == {"outer": "1", "inner": "1"}
            assert store.as_dict() == {"outer": "1"}

        assert len(store) == 0

    def test_start_scope_defaults_to_current_store(self):
        scope = start_scope()

        assert scope.context is get_context()


class TestScopedHelpers:
    """push/pop and the log_context context manager."""

    def test_empty_context(self):
        """Context starts empty and nothing is bound by reading it."""
        assert get_log_context() == {}

    def test_push_single_field(self):
        scope = push_log_context(RunId="abc123")
        assert get_log_context() == {"RunId": "abc123"}
        pop_log_context(scope)
        assert get_log_context() == {}

    def test_nested_push_and_pop(self):
        scope1 = push_log_context(RunId="abc123")
        scope2 = push_log_context(Source="acme-corp")
        assert get_log_context() == {"RunId": "abc123", "Source": "acme-corp"}

        pop_log_context(scope2)
        assert get_log_context() == {"RunId": "abc123"}

        pop_log_context(scope1)
        assert get_log_context() == {}

    def test_push_overrides_then_restores(self):
        scope1 = push_log_context(RunId="abc123")
        scope2 = push_log_context(runid="xyz789")
        assert get_log_context() == {"RunId": "xyz789"}

        pop_log_context(scope2)
        assert get_log_context() == {"RunId": "abc123"}

        pop_log_context(scope1)

    def test_pop_none_is_ignored(self):
        pop_log_context(None)

    def test_context_manager_basic(self):
        with log_context(RunId="abc123", Attempt=2) as store:
            assert store is get_context()
            assert get_log_context() == {"RunId": "abc123", "Attempt": "2"}

        assert get_log_context() == {}

    def test_context_manager_exception(self):
        with pytest.raises(ValueError):
            with log_context(RunId="abc123"):
                raise ValueError("Test exception")

        assert get_log_context() == {}

    def test_context_manager_keeps_prior_entries(self):
        get_context().set("Base", "1")

        with log_context(RunId="abc123"):
            assert get_log_context() == {"Base": "1", "RunId": "abc123"}

        assert get_log_context() == {"Base": "1"}

    def test_clear_log_context(self):
        push_log_context(RunId="abc123")
        assert get_log_context() != {}

        clear_log_context()
        assert get_log_context() == {}

    def test_get_log_context_returns_copy(self):
        scope = push_log_context(RunId="abc123")

        context = get_log_context()
        context["Source"] = "modified"

        assert get_log_context() == {"RunId": "abc123"}
        pop_log_context(scope)
