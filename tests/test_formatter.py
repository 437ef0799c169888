"""Tests for message formatting and the enabled-level decision."""

import logging
from unittest.mock import Mock

import pytest

from scopelog.context import ContextStore
from scopelog.logging import (
    Severity,
    build_message,
    format_message,
    get_append_contextual_information,
    log_message,
    set_append_contextual_information,
)
from tests.helpers import make_logger


@pytest.fixture
def store():
    store = ContextStore(environ={})
    store.set("KEY", "VALUE")
    return store


class TestFormatMessage:
    """Appending contextual information to the message text."""

    def test_no_context_returns_message(self):
        assert format_message("MSG", None) == "MSG"

    def test_empty_context_returns_message(self):
        assert format_message("MSG", ContextStore(environ={})) == "MSG"

    def test_context_is_appended_after_line_break(self, store):
        assert format_message("MSG", store) == "MSG" + "\r\n" + store.format()
        assert format_message("MSG", store) == "MSG\r\n\r\n[KEY:VALUE]"

    def test_absent_message_becomes_empty(self):
        assert format_message(None, None) == ""

    def test_absent_message_with_context(self, store):
        assert format_message(None, store) == "\r\n\r\n[KEY:VALUE]"

    def test_flag_off_returns_bare_message(self, store):
        set_append_contextual_information(False)

        assert get_append_contextual_information() is False
        assert format_message("MSG", store) == "MSG"

    def test_flag_defaults_to_on(self):
        assert get_append_contextual_information() is True


class TestBuildMessage:
    """Enabled check before lazy evaluation."""

    def test_enabled_level_builds_message(self, store):
        logger, _ = make_logger(logging.DEBUG)

        assert build_message(logger, Severity.ERROR, "MSG", store) == (
            True,
            "MSG\r\n\r\n[KEY:VALUE]",
        )

    def test_disabled_level_does_not_invoke_provider(self):
        logger, handler = make_logger(logging.ERROR)
        provider = Mock(return_value="expensive")

        should_emit, text = build_message(logger, Severity.DEBUG, provider)

        assert should_emit is False
        assert text == ""
        assert provider.call_count == 0

    def test_enabled_level_invokes_provider_once(self):
        logger, _ = make_logger(logging.DEBUG)
        provider = Mock(return_value="lazy")

        assert build_message(logger, Severity.INFORMATION, provider) == (True, "lazy")
        assert provider.call_count == 1

    def test_provider_returning_none_gives_empty_message(self):
        logger, _ = make_logger()

        assert build_message(logger, Severity.ERROR, lambda: None) == (True, "")

    def test_none_level_is_never_emitted(self):
        logger, _ = make_logger(Severity.TRACE)
        provider = Mock(return_value="never")

        assert build_message(logger, Severity.NONE, provider) == (False, "")
        assert provider.call_count == 0

    def test_none_sink_is_never_emitted(self):
        assert build_message(None, Severity.CRITICAL, "MSG") == (False, "")

    def test_uses_sink_enabled_check(self):
        sink = Mock()
        sink.isEnabledFor.return_value = False

        build_message(sink, Severity.WARNING, "MSG")

        sink.isEnabledFor.assert_called_once_with(logging.WARNING)


class TestLogMessage:
    """Dispatching to the logger."""

    def test_dispatches_message_and_level(self, store):
        logger, handler = make_logger()

        assert log_message(logger, Severity.WARNING, "MSG", store) is True

        assert handler.last.levelno == logging.WARNING
        assert handler.last_message == "MSG\r\n\r\n[KEY:VALUE]"
        assert handler.last_exception is None

    def test_dispatches_exception(self):
        logger, handler = make_logger()
        error = RuntimeError("EXCEPTION")

        log_message(logger, Severity.ERROR, "MSG", error=error)

        assert handler.last_exception is error

    def test_disabled_level_is_not_dispatched(self):
        logger, handler = make_logger(logging.WARNING)

        assert log_message(logger, Severity.INFORMATION, "MSG") is False
        assert handler.records == []

    def test_trace_level_is_supported(self):
        logger, handler = make_logger(Severity.TRACE)

        log_message(logger, Severity.TRACE, "MSG")

        assert handler.last.levelname == "TRACE"

    def test_percent_signs_are_not_interpreted(self):
        logger, handler = make_logger()
        store = ContextStore(environ={})
        store.set("Progress", "50%")

        log_message(logger, Severity.INFORMATION, "100% done", store)

        assert handler.last_message == "100% done\r\n\r\n[PROGRESS:50%]"

    def test_plain_int_levels_are_accepted(self):
        logger, handler = make_logger()

        log_message(logger, logging.INFO, "MSG")

        assert handler.last.levelno == logging.INFO
