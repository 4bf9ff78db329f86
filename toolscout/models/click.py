"""
Affiliate click models.

``ClickEvent`` is append-only provider data. A missing or unparsable
``occurred_at`` is stored as ``None`` rather than rejected so that one bad
row cannot abort a whole dashboard aggregation; the aggregator skips such
events.

``DashboardSummary`` and ``GlobalClickCounts`` are the roll-ups shown on the
admin dashboards.
"""

from __future__ import annotations

from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from toolscout.utils.time_utils import parse_timestamp

_ONE_DECIMAL = Decimal("0.1")


def one_decimal(value: float | int | Decimal) -> Decimal:
    """Round to one decimal place, halves away from zero (0.25 -> 0.3)."""
    if not isinstance(value, Decimal):
        value = Decimal(repr(value)) if isinstance(value, float) else Decimal(value)
    return value.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP)


class ClickEvent(BaseModel):
    """One recorded click on a tracking link.

    Attributes:
        entity_id: Id of the clicked tool.
        occurred_at: When the click happened; ``None`` if unknown.
        entity_slug: Tracking-link slug recorded with the click, if any.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    entity_id: str
    occurred_at: Optional[datetime] = None
    entity_slug: Optional[str] = None

    @field_validator("entity_id", mode="before")
    @classmethod
    def coerce_entity_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("occurred_at", mode="before")
    @classmethod
    def lenient_timestamp(cls, v: Any) -> Optional[datetime]:
        return parse_timestamp(v)


class DashboardSummary(BaseModel):
    """Headline numbers for the per-tool click dashboard.

    Attributes:
        total_clicks: Sum of range-gated totals over every bucket.
        active_entities: Buckets with at least one range-gated click.
        top_entity: Entity with the most clicks; ``None`` when there are none.
        top_entity_clicks: Clicks of ``top_entity`` (0 when ``None``).
        average: ``total_clicks / active_entities`` rounded half-up to one
            decimal.
    """

    model_config = ConfigDict(frozen=True)

    total_clicks: int = 0
    active_entities: int = 0
    top_entity: Optional[str] = None
    top_entity_clicks: int = 0
    average: float = 0.0

    @property
    def average_display(self) -> str:
        """``average`` rendered with exactly one decimal place."""
        return str(one_decimal(self.average))


class GlobalClickCounts(BaseModel):
    """Ungrouped click counts for the site-wide dashboard."""

    model_config = ConfigDict(frozen=True)

    total: int = 0
    last_7_days: int = 0
    this_month: int = 0
