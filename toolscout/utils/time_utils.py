"""
Time and date utilities for click windows and post ordering.

Key concepts:
  - All comparisons are done on timezone-aware datetimes. Naive values coming
    from providers are interpreted as UTC.
  - Calendar-month windows start at midnight on day 1 in the reference
    time's own timezone.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Optional


def utcnow() -> datetime:
    """Return the current UTC datetime with timezone info.

    Prefer this over ``datetime.utcnow()`` (which returns naive datetimes).
    """
    return datetime.now(tz=timezone.utc)


def ensure_utc(value: datetime) -> datetime:
    """Attach UTC to a naive datetime; aware datetimes are returned unchanged."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Best-effort conversion of a provider timestamp to an aware datetime.

    Accepts ``datetime`` objects and ISO-8601 strings (a trailing ``Z`` is
    accepted). Anything else, including empty strings, yields ``None``.

    Args:
        value: Raw timestamp value from a provider row.

    Returns:
        Timezone-aware datetime, or ``None`` if the value cannot be parsed.
    """
    if isinstance(value, datetime):
        return ensure_utc(value)
    if not isinstance(value, str) or not value.strip():
        return None
    text = value.strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        return ensure_utc(datetime.fromisoformat(text))
    except ValueError:
        return None


def start_of_month(now: datetime) -> datetime:
    """Return midnight on the first day of ``now``'s month (same tzinfo)."""
    return now.replace(day=1, hour=0, minute=0, second=0, microsecond=0)


def days_ago(now: datetime, days: int) -> datetime:
    """Return ``now - days`` as an exact ``timedelta`` offset.

    Raises:
        ValueError: If ``days`` is negative.
    """
    if days < 0:
        raise ValueError(f"days must be >= 0, got {days}.")
    return now - timedelta(days=days)
