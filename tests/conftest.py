"""Shared fixtures: every test starts with no bound context and no host entries."""

import pytest

from scopelog.context import clear_context, reset_host_environment, set_host_environment
from scopelog.logging import set_append_contextual_information

from tests.helpers import make_logger


@pytest.fixture(autouse=True)
def clean_context():
    """Clear the flow context, host environment and append flag around each test."""
    clear_context()
    set_host_environment({})
    set_append_contextual_information(True)
    yield
    clear_context()
    reset_host_environment()
    set_append_contextual_information(True)


@pytest.fixture
def recording_logger():
    """Isolated logger at DEBUG plus the handler recording its output."""
    return make_logger()
