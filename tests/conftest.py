"""
Shared pytest fixtures for the toolscout test suite.

Provides:
  - ``now``: a fixed, timezone-aware reference time mid-month.
  - Sample domain object factories (tools, answers, posts, click events)
    for use in multiple test modules.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Callable

import pytest

from toolscout.models.click import ClickEvent
from toolscout.models.post import Post
from toolscout.models.tool import QuizAnswers, Tool


# ── Reference time ────────────────────────────────────────────────────────────

@pytest.fixture
def now() -> datetime:
    """2026-03-20 12:00 UTC - far enough into March that 7d stays in-month."""
    return datetime(2026, 3, 20, 12, 0, 0, tzinfo=timezone.utc)


# ── Quiz fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def make_answers() -> Callable[..., QuizAnswers]:
    """Factory for ``QuizAnswers`` with neutral defaults.

    Defaults pick codes that score nothing on their own (intermediate
    experience, collaboration priority) so tests only see the rule under test.
    """
    def _make(**overrides) -> QuizAnswers:
        fields = {
            "goal": "content",
            "team_size": "solo",
            "budget": "free",
            "experience": "intermediate",
            "use_case": "blog",
            "priority": "collaboration",
        }
        fields.update(overrides)
        return QuizAnswers(**fields)

    return _make


@pytest.fixture
def make_tool() -> Callable[..., Tool]:
    """Factory for ``Tool``; ``slug`` defaults to a slugified name."""
    def _make(
        slug: str = "tool",
        category: str | None = None,
        rating: float | None = None,
        review_count: int | None = None,
        name: str | None = None,
        id: str | None = None,
    ) -> Tool:
        return Tool(
            id=id or f"id-{slug}",
            slug=slug,
            name=name or slug.replace("-", " ").title(),
            category=category,
            rating=rating,
            review_count=review_count,
        )

    return _make


@pytest.fixture
def sample_catalog(make_tool) -> list[Tool]:
    """A small mixed catalog."""
    return [
        make_tool("jasper", category="AI Writing", rating=4.8, review_count=1200),
        make_tool("surfer-seo", category="SEO Tools", rating=4.6, review_count=3400),
        make_tool("copilot", category="Coding Assistant", rating=4.9, review_count=9000),
        make_tool("zapier", category="Automation", rating=4.5, review_count=600),
        make_tool("midjourney", category="Image Generation", rating=4.7, review_count=5000),
    ]


# ── Post fixtures ─────────────────────────────────────────────────────────────

@pytest.fixture
def make_post(now) -> Callable[..., Post]:
    """Factory for ``Post``; ``age_days`` sets ``created_at`` relative to ``now``."""
    def _make(
        slug: str,
        category: str | None = None,
        tags: tuple[str, ...] | list[str] | None = (),
        age_days: int = 0,
    ) -> Post:
        return Post(
            slug=slug,
            title=slug.replace("-", " ").title(),
            category=category,
            tags=tags,
            created_at=now - timedelta(days=age_days),
        )

    return _make


# ── Click fixtures ────────────────────────────────────────────────────────────

@pytest.fixture
def make_click(now) -> Callable[..., ClickEvent]:
    """Factory for ``ClickEvent`` occurring ``days_ago`` days before ``now``."""
    def _make(entity_id: str, days_ago: float = 0, slug: str | None = None) -> ClickEvent:
        return ClickEvent(
            entity_id=entity_id,
            occurred_at=now - timedelta(days=days_ago),
            entity_slug=slug,
        )

    return _make
