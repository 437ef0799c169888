"""Timestamp and duration utilities.

This module provides utilities for working with operation timings:
- Getting current UTC time
- Measuring elapsed time from a monotonic start point
- Formatting durations and timestamps for log lines
"""

import time
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    """Get current UTC time as timezone-aware datetime.

    Returns:
        Current UTC time with timezone info

    Example:
        >>> now = utc_now()
        >>> now.tzinfo == timezone.utc
        True
    """
    return datetime.now(timezone.utc)


def ensure_utc(dt: Optional[datetime]) -> Optional[datetime]:
    """Ensure a datetime is timezone-aware and in UTC.

    If the datetime is timezone-naive, it's treated as UTC.

    Args:
        dt: Datetime to convert (can be None)

    Returns:
        Timezone-aware datetime in UTC, or None if input is None
    """
    if dt is None:
        return None

    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)

    return dt.astimezone(timezone.utc)


def format_timestamp(dt: datetime, include_milliseconds: bool = True) -> str:
    """Format a datetime as ISO 8601 string in UTC.

    Args:
        dt: Datetime to format
        include_milliseconds: Whether to include milliseconds in output

    Returns:
        ISO 8601 formatted string with 'Z' suffix

    Example:
        >>> from datetime import datetime, timezone
        >>> dt = datetime(2025, 11, 4, 12, 0, 0, tzinfo=timezone.utc)
        >>> format_timestamp(dt, include_milliseconds=False)
        '2025-11-04T12:00:00Z'
    """
    dt_utc = ensure_utc(dt)
    if dt_utc is None:
        return ""

    if include_milliseconds:
        # 2025-11-04T10:30:00.123Z
        return dt_utc.strftime("%Y-%m-%dT%H:%M:%S.%f")[:-3] + "Z"
    return dt_utc.strftime("%Y-%m-%dT%H:%M:%SZ")


def monotonic_start() -> float:
    """Capture a start point for elapsed-time measurement.

    Returns:
        Value of the monotonic performance counter, in seconds
    """
    return time.perf_counter()


def elapsed_milliseconds(start: float) -> float:
    """Compute milliseconds elapsed since a monotonic start point.

    Args:
        start: Value previously returned by monotonic_start()

    Returns:
        Elapsed milliseconds, never negative
    """
    return max(0.0, (time.perf_counter() - start) * 1000.0)


def format_duration_ms(milliseconds: float) -> str:
    """Format a millisecond duration with thousands separators and no decimals.

    Args:
        milliseconds: Duration in milliseconds

    Returns:
        Formatted duration such as '1,234ms'

    Example:
        >>> format_duration_ms(1234.4)
        '1,234ms'
    """
    return f"{max(0.0, milliseconds):,.0f}ms"
