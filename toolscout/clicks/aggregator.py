"""
Click aggregation: per-tool counters and dashboard roll-ups.

Usage flow
----------
1. aggregate(events, now, click_range, entity_ids)
   -> (dict[entity_id, StatsBucket], DashboardSummary)

2. count_global_clicks(events, now)
   -> GlobalClickCounts  (site-wide card, no per-tool breakdown)

3. top_entities_this_month(events, now, limit=3)
   -> list[(slug, count)]  ("top tools by clicks" panel)

Bucket semantics
----------------
``total`` respects the selected range; ``last_7_days`` and ``this_month``
do not. With ``range="7d"`` a click from 12 days ago (still this month)
adds nothing to ``total`` but still counts towards ``this_month``, so the
two fixed-window columns read the same whichever range is selected.

Events without a usable timestamp are skipped and never counted.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Iterable, Optional

from toolscout.clicks.windows import ClickRange, WindowBounds
from toolscout.models.click import (
    ClickEvent,
    DashboardSummary,
    GlobalClickCounts,
    one_decimal,
)
from toolscout.utils.time_utils import ensure_utc

logger = logging.getLogger(__name__)

UNKNOWN_SLUG = "unknown"
DEFAULT_TOP_LIMIT = 3


@dataclass
class StatsBucket:
    """Click counters for one tool."""

    total:       int = 0
    last_7_days: int = 0
    this_month:  int = 0


def aggregate(
    events: Iterable[ClickEvent],
    now: datetime,
    click_range: ClickRange | str = ClickRange.ALL,
    entity_ids: Optional[Iterable[str]] = None,
) -> tuple[dict[str, StatsBucket], DashboardSummary]:
    """Bucket click events per tool and summarise them.

    Output map order is deterministic: ``entity_ids`` in the order given,
    then tools seen only in events in first-seen order. That order is also
    the tie-break for ``top_entity``.

    Args:
        events:      Raw click events.
        now:         Reference time (naive values are taken as UTC).
        click_range: Range filter gating ``total``; a string is parsed with
                     ``ClickRange.parse``.
        entity_ids:  Every tool id to report, including ones with no clicks.

    Returns:
        ``(buckets, summary)``.
    """
    if not isinstance(click_range, ClickRange):
        click_range = ClickRange.parse(click_range)
    bounds = WindowBounds.at(ensure_utc(now))

    buckets: dict[str, StatsBucket] = {}
    for entity_id in entity_ids or ():
        buckets.setdefault(entity_id, StatsBucket())

    skipped_untimed = 0
    outside_range = 0
    for event in events:
        occurred_at = event.occurred_at
        if occurred_at is None:
            skipped_untimed += 1
            continue
        bucket = buckets.get(event.entity_id)
        if bucket is None:
            bucket = buckets[event.entity_id] = StatsBucket()

        if bounds.in_range(occurred_at, click_range):
            bucket.total += 1
        else:
            outside_range += 1
        if bounds.in_last_7_days(occurred_at):
            bucket.last_7_days += 1
        if bounds.in_this_month(occurred_at):
            bucket.this_month += 1

    logger.debug(
        "Aggregated clicks for %d tools (range=%s, %d outside range, %d without timestamp)",
        len(buckets), click_range.value, outside_range, skipped_untimed,
    )
    return buckets, summarize(buckets)


def summarize(buckets: dict[str, StatsBucket]) -> DashboardSummary:
    """Build the dashboard headline numbers from per-tool buckets.

    ``top_entity`` is the first bucket in map order holding the highest
    ``total``; it is ``None`` when nothing was clicked.
    """
    total_clicks = 0
    active = 0
    top_entity: Optional[str] = None
    top_clicks = 0

    for entity_id, bucket in buckets.items():
        total_clicks += bucket.total
        if bucket.total > 0:
            active += 1
        if bucket.total > top_clicks:
            top_entity, top_clicks = entity_id, bucket.total

    average = float(one_decimal(Decimal(total_clicks) / Decimal(active))) if active else 0.0
    return DashboardSummary(
        total_clicks=total_clicks,
        active_entities=active,
        top_entity=top_entity,
        top_entity_clicks=top_clicks,
        average=average,
    )


def count_global_clicks(events: Iterable[ClickEvent], now: datetime) -> GlobalClickCounts:
    """Count all clicks, clicks in the last 7 days, and clicks this month.

    Same windows as ``aggregate`` but with no grouping and no range filter.
    """
    bounds = WindowBounds.at(ensure_utc(now))
    total = last_7 = this_month = 0

    for event in events:
        if event.occurred_at is None:
            continue
        total += 1
        if bounds.in_last_7_days(event.occurred_at):
            last_7 += 1
        if bounds.in_this_month(event.occurred_at):
            this_month += 1

    return GlobalClickCounts(total=total, last_7_days=last_7, this_month=this_month)


def top_entities_this_month(
    events: Iterable[ClickEvent],
    now: datetime,
    limit: int = DEFAULT_TOP_LIMIT,
) -> list[tuple[str, int]]:
    """Most-clicked tracking slugs in the current calendar month.

    Clicks without a recorded slug are grouped under ``"unknown"``. Ties keep
    first-seen order.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}.")

    bounds = WindowBounds.at(ensure_utc(now))
    counts: dict[str, int] = {}
    for event in events:
        if event.occurred_at is None or not bounds.in_this_month(event.occurred_at):
            continue
        slug = event.entity_slug or UNKNOWN_SLUG
        counts[slug] = counts.get(slug, 0) + 1

    ranked = sorted(counts.items(), key=lambda kv: -kv[1])
    return ranked[:limit]
