"""
Time windows for click aggregation.

Two kinds of window are in play:
  - The *range filter* (``ClickRange``) chosen on the dashboard. It gates
    which events count towards a bucket's ``total``.
  - The fixed *7-day* and *calendar-month* windows behind ``last_7_days``
    and ``this_month``. These are always measured from "now", whatever
    range is selected.

All boundaries are inclusive: an event exactly at the boundary counts.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Optional

from toolscout.utils.time_utils import days_ago, start_of_month

logger = logging.getLogger(__name__)

WEEK_DAYS = 7
THIRTY_DAYS = 30


class ClickRange(StrEnum):
    """Dashboard range selector."""

    ALL = "all"
    LAST_7_DAYS = "7d"
    LAST_30_DAYS = "30d"
    MONTH = "month"

    @classmethod
    def parse(cls, value: Optional[str]) -> "ClickRange":
        """Map a query-string value to a range; unknown values mean ``ALL``."""
        if not value:
            return cls.ALL
        try:
            return cls(value.strip().lower())
        except ValueError:
            logger.warning("Unknown click range %r; falling back to 'all'", value)
            return cls.ALL


@dataclass(frozen=True)
class WindowBounds:
    """Precomputed window starts for one reference time.

    Attributes:
        now:          Reference time.
        week_start:   ``now - 7 days``.
        thirty_start: ``now - 30 days``.
        month_start:  Midnight on day 1 of ``now``'s month.
    """

    now:          datetime
    week_start:   datetime
    thirty_start: datetime
    month_start:  datetime

    @classmethod
    def at(cls, now: datetime) -> "WindowBounds":
        return cls(
            now=now,
            week_start=days_ago(now, WEEK_DAYS),
            thirty_start=days_ago(now, THIRTY_DAYS),
            month_start=start_of_month(now),
        )

    def in_range(self, occurred_at: datetime, click_range: ClickRange) -> bool:
        """Whether ``occurred_at`` passes the dashboard range filter."""
        if click_range == ClickRange.LAST_7_DAYS:
            return occurred_at >= self.week_start
        if click_range == ClickRange.LAST_30_DAYS:
            return occurred_at >= self.thirty_start
        if click_range == ClickRange.MONTH:
            return occurred_at >= self.month_start
        return True

    def in_last_7_days(self, occurred_at: datetime) -> bool:
        return occurred_at >= self.week_start

    def in_this_month(self, occurred_at: datetime) -> bool:
        return occurred_at >= self.month_start
