"""Utility functions for time handling and argument validation."""

from .timestamps import (
    elapsed_milliseconds,
    ensure_utc,
    format_duration_ms,
    format_timestamp,
    monotonic_start,
    utc_now,
)
from .validation import is_blank, require_not_none, require_text

__all__ = [
    # Timestamps
    "utc_now",
    "ensure_utc",
    "format_timestamp",
    "monotonic_start",
    "elapsed_milliseconds",
    "format_duration_ms",
    # Validation
    "is_blank",
    "require_not_none",
    "require_text",
]
