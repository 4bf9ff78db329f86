"""Tests for toolscout/utils/time_utils.py."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from toolscout.utils.time_utils import (
    days_ago,
    ensure_utc,
    parse_timestamp,
    start_of_month,
    utcnow,
)


def test_utcnow_is_aware():
    assert utcnow().tzinfo is not None


class TestEnsureUtc:
    def test_naive_gets_utc(self):
        assert ensure_utc(datetime(2026, 1, 1)) == datetime(2026, 1, 1, tzinfo=timezone.utc)

    def test_aware_unchanged(self):
        tz = timezone(timedelta(hours=2))
        value = datetime(2026, 1, 1, tzinfo=tz)
        assert ensure_utc(value).tzinfo is tz


class TestParseTimestamp:
    @pytest.mark.parametrize("raw, expected", [
        ("2026-03-19T10:00:00Z",      datetime(2026, 3, 19, 10, tzinfo=timezone.utc)),
        ("2026-03-19T10:00:00+00:00", datetime(2026, 3, 19, 10, tzinfo=timezone.utc)),
        ("2026-03-19T10:00:00",       datetime(2026, 3, 19, 10, tzinfo=timezone.utc)),
        ("2026-03-19",                datetime(2026, 3, 19, tzinfo=timezone.utc)),
    ])
    def test_iso_strings(self, raw, expected):
        assert parse_timestamp(raw) == expected

    def test_offset_is_preserved(self):
        parsed = parse_timestamp("2026-03-19T10:00:00+02:00")
        assert parsed == datetime(2026, 3, 19, 8, tzinfo=timezone.utc)

    def test_datetime_passthrough(self):
        assert parse_timestamp(datetime(2026, 3, 1)) == datetime(2026, 3, 1, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", [None, "", "   ", "yesterday", 1700000000])
    def test_unparsable_is_none(self, raw):
        assert parse_timestamp(raw) is None


class TestWindowHelpers:
    def test_start_of_month(self, now):
        assert start_of_month(now) == datetime(2026, 3, 1, tzinfo=timezone.utc)

    def test_start_of_month_on_first_day(self):
        value = datetime(2026, 4, 1, 0, 0, 5, tzinfo=timezone.utc)
        assert start_of_month(value) == datetime(2026, 4, 1, tzinfo=timezone.utc)

    def test_days_ago(self, now):
        assert days_ago(now, 7) == datetime(2026, 3, 13, 12, tzinfo=timezone.utc)
        assert days_ago(now, 0) == now

    def test_days_ago_negative_raises(self, now):
        with pytest.raises(ValueError):
            days_ago(now, -1)
