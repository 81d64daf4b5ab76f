"""
Tests for rs_lookup.utils.time_utils.
"""

from __future__ import annotations

import time
from datetime import datetime, timedelta, timezone

import pytest

from rs_lookup.utils.time_utils import (
    ensure_utc,
    parse_activity_date,
    struct_time_to_utc,
    utcnow,
)


class TestUtcnow:
    def test_is_aware_utc(self):
        now = utcnow()
        assert now.tzinfo is not None
        assert now.utcoffset() == timedelta(0)


class TestEnsureUtc:
    def test_naive_assumed_utc(self):
        assert ensure_utc(datetime(2026, 10, 19, 13, 14)) == datetime(2026, 10, 19, 13, 14, tzinfo=timezone.utc)

    def test_naive_in_named_zone(self):
        result = ensure_utc(datetime(2026, 1, 19, 13, 14), assume_tz="Europe/Berlin")
        assert result == datetime(2026, 1, 19, 12, 14, tzinfo=timezone.utc)

    def test_aware_converted(self):
        plus_two = timezone(timedelta(hours=2))
        result = ensure_utc(datetime(2026, 10, 19, 13, 14, tzinfo=plus_two), assume_tz="Asia/Tokyo")
        assert result == datetime(2026, 10, 19, 11, 14, tzinfo=timezone.utc)
        assert result.tzinfo == timezone.utc


class TestParseActivityDate:
    def test_minute_precision(self):
        assert parse_activity_date("19-Oct-2026 13:14") == datetime(2026, 10, 19, 13, 14, tzinfo=timezone.utc)

    def test_second_precision(self):
        result = parse_activity_date("19-Oct-2026 13:14:59")
        assert result == datetime(2026, 10, 19, 13, 14, 59, tzinfo=timezone.utc)

    def test_surrounding_whitespace(self):
        assert parse_activity_date("  19-Oct-2026 13:14 \n").minute == 14

    def test_iso_fallback(self):
        assert parse_activity_date("2026-10-19T13:14:00Z") == datetime(2026, 10, 19, 13, 14, tzinfo=timezone.utc)

    def test_source_timezone(self):
        result = parse_activity_date("19-Jan-2026 13:14", source_timezone="America/New_York")
        assert result == datetime(2026, 1, 19, 18, 14, tzinfo=timezone.utc)

    def test_custom_formats(self):
        result = parse_activity_date("19.10.2026", formats=("%d.%m.%Y",))
        assert result == datetime(2026, 10, 19, tzinfo=timezone.utc)

    @pytest.mark.parametrize("text", ["", "yesterday", "32-Oct-2026 13:14"])
    def test_unparseable(self, text):
        with pytest.raises(ValueError, match="Cannot parse activity date"):
            parse_activity_date(text)


class TestStructTimeToUtc:
    def test_roundtrip_from_gmtime(self):
        expected = datetime(2026, 10, 17, 0, 0, tzinfo=timezone.utc)
        assert struct_time_to_utc(time.gmtime(expected.timestamp())) == expected
