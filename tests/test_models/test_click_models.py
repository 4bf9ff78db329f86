"""Tests for affiliate click models."""

from __future__ import annotations

from datetime import datetime, timezone
from decimal import Decimal

import pytest

from toolscout.models.click import (
    ClickEvent,
    DashboardSummary,
    GlobalClickCounts,
    one_decimal,
)


class TestClickEvent:
    def test_iso_timestamp_parsed(self):
        event = ClickEvent(entity_id="t1", occurred_at="2026-03-19T10:00:00Z")
        assert event.occurred_at == datetime(2026, 3, 19, 10, tzinfo=timezone.utc)

    @pytest.mark.parametrize("raw", [None, "", "garbage"])
    def test_bad_timestamp_becomes_none(self, raw):
        assert ClickEvent(entity_id="t1", occurred_at=raw).occurred_at is None

    def test_integer_entity_id_is_coerced(self):
        assert ClickEvent(entity_id=5).entity_id == "5"

    def test_extra_columns_ignored(self):
        event = ClickEvent(entity_id="t1", referrer="https://news.example", user_agent="x")
        assert event.entity_slug is None


class TestDashboardSummary:
    @pytest.mark.parametrize("average, shown", [
        (0.0, "0.0"), (2.0, "2.0"), (3.5, "3.5"), (0.25, "0.3"), (1.25, "1.3"),
    ])
    def test_average_display(self, average, shown):
        assert DashboardSummary(average=average).average_display == shown

    def test_defaults(self):
        summary = DashboardSummary()
        assert summary.top_entity is None
        assert summary.total_clicks == 0


def test_global_counts_defaults():
    counts = GlobalClickCounts()
    assert (counts.total, counts.last_7_days, counts.this_month) == (0, 0, 0)


@pytest.mark.parametrize("value, expected", [
    (Decimal(5) / Decimal(4), "1.3"),
    (Decimal(1) / Decimal(4), "0.3"),
    (Decimal(4) / Decimal(3), "1.3"),
    (0.05, "0.1"),
    (3, "3.0"),
])
def test_one_decimal_rounds_half_up(value, expected):
    assert str(one_decimal(value)) == expected
