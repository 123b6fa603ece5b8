"""Tests for datetime conversion helpers."""

from datetime import UTC, datetime, timedelta, timezone

import pendulum

from backend.services.datetime_service import format_iso, to_utc


class TestToUtc:
    def test_naive_is_assumed_utc(self) -> None:
        assert to_utc(datetime(2024, 1, 1, 12, 0)) == datetime(2024, 1, 1, 12, 0, tzinfo=UTC)

    def test_aware_is_converted(self) -> None:
        dt = datetime(2024, 1, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        result = to_utc(dt)
        assert result.hour == 10
        assert result.utcoffset() == timedelta(0)

    def test_site_timezone_bound_is_converted(self) -> None:
        start = pendulum.datetime(2024, 3, 1, tz="Europe/Warsaw")
        assert to_utc(start) == datetime(2024, 2, 29, 23, 0, tzinfo=UTC)


class TestFormatting:
    def test_format_iso_naive(self) -> None:
        assert format_iso(datetime(2024, 3, 1, 10, 0)) == "2024-03-01T10:00:00+00:00"

    def test_format_iso_aware(self) -> None:
        dt = datetime(2024, 3, 1, 12, 0, tzinfo=timezone(timedelta(hours=2)))
        assert format_iso(dt) == "2024-03-01T10:00:00+00:00"
