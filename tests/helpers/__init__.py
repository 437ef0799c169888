"""Test helper utilities for scopelog tests."""

from .recording import RecordingHandler, make_logger

__all__ = ["RecordingHandler", "make_logger"]
