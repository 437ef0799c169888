"""Unit tests for timestamp and duration utilities."""

import time
from datetime import datetime, timedelta, timezone

import pytest

from scopelog.utils.timestamps import (
    elapsed_milliseconds,
    ensure_utc,
    format_duration_ms,
    format_timestamp,
    monotonic_start,
    utc_now,
)


class TestUtcNow:
    """Tests for utc_now function."""

    def test_utc_now_returns_utc_datetime(self):
        """Test that utc_now returns a timezone-aware datetime in UTC."""
        now = utc_now()

        assert now.tzinfo == timezone.utc
        assert isinstance(now, datetime)

    def test_utc_now_is_recent(self):
        """Test that utc_now returns a recent timestamp."""
        before = datetime.now(timezone.utc)
        now = utc_now()
        after = datetime.now(timezone.utc)

        assert before <= now <= after


class TestEnsureUtc:
    """Tests for ensure_utc function."""

    def test_ensure_utc_with_none(self):
        """Test that ensure_utc returns None for None input."""
        assert ensure_utc(None) is None

    def test_ensure_utc_with_naive_datetime(self):
        """Test that naive datetimes are treated as UTC."""
        naive = datetime(2025, 11, 4, 12, 0, 0)

        result = ensure_utc(naive)

        assert result.tzinfo == timezone.utc
        assert result.hour == 12

    def test_ensure_utc_with_other_timezone(self):
        """Test that aware datetimes are converted to UTC."""
        eastern = timezone(timedelta(hours=-5))
        dt = datetime(2025, 11, 4, 7, 0, 0, tzinfo=eastern)

        result = ensure_utc(dt)

        assert result.tzinfo == timezone.utc
        assert result.hour == 12


class TestFormatTimestamp:
    """Tests for format_timestamp function."""

    def test_format_timestamp_basic(self):
        """Test formatting with milliseconds."""
        dt = datetime(2025, 11, 4, 10, 30, 0, 123456, tzinfo=timezone.utc)

        assert format_timestamp(dt) == "2025-11-04T10:30:00.123Z"

    def test_format_timestamp_without_milliseconds(self):
        """Test formatting without milliseconds."""
        dt = datetime(2025, 11, 4, 10, 30, 0, 123456, tzinfo=timezone.utc)

        assert format_timestamp(dt, include_milliseconds=False) == "2025-11-04T10:30:00Z"

    def test_format_timestamp_converts_to_utc(self):
        """Test that non-UTC datetimes are converted."""
        plus_two = timezone(timedelta(hours=2))
        dt = datetime(2025, 11, 4, 12, 0, 0, tzinfo=plus_two)

        assert format_timestamp(dt, include_milliseconds=False) == "2025-11-04T10:00:00Z"


class TestDurations:
    """Tests for elapsed time measurement and formatting."""

    def test_elapsed_milliseconds_is_non_negative(self):
        start = monotonic_start()

        assert elapsed_milliseconds(start) >= 0

    def test_elapsed_milliseconds_measures_sleep(self):
        start = monotonic_start()
        time.sleep(0.02)

        assert elapsed_milliseconds(start) >= 15

    def test_elapsed_milliseconds_clamps_future_start(self):
        assert elapsed_milliseconds(monotonic_start() + 10) == 0.0

    @pytest.mark.parametrize(
        "milliseconds,expected",
        [
            (0, "0ms"),
            (0.4, "0ms"),
            (12.6, "13ms"),
            (999, "999ms"),
            (1234.4, "1,234ms"),
            (1234567, "1,234,567ms"),
            (-5, "0ms"),
        ],
    )
    def test_format_duration_ms(self, milliseconds, expected):
        assert format_duration_ms(milliseconds) == expected
