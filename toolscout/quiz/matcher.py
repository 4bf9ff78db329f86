"""
Quiz matching: scores every catalog tool against a completed questionnaire
and returns the best few as ``Recommendation`` objects.

Score formula (integer sum, see ``rules`` for point values)
------------------------------------------------------------
    raw = goal_points + use_case_points + experience_points + priority_points
    match = min(95, 50 + raw)        # only for raw > 0

Tools with ``raw <= 0`` are not recommended at all.

Ranking
-------
1. The catalog is de-duplicated by slug in iteration order; the first row
   for a slug is the only one scored.
2. Survivors are sorted by ``match`` descending. ``sorted`` is stable, so
   ties keep catalog order.
3. The list is cut to ``limit`` entries (3 by default).

Nothing here raises for validated input: a tool without ``rating`` or
``review_count`` simply cannot earn the bonuses that read them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable

from toolscout.models.tool import QuizAnswers, Recommendation, Tool
from toolscout.quiz import rules
from toolscout.taxonomy.quiz_taxonomy import ExperienceLevel, Priority, UseCase

logger = logging.getLogger(__name__)

DEFAULT_MAX_RESULTS = 3


@dataclass
class ToolScore:
    """Per-rule points for one tool.

    Attributes:
        goal_points:       Goal keyword bonus (0 or 30).
        use_case_points:   Use-case bonus (0, 10, or 20–30).
        experience_points: Review-count heuristic (0, 5 or 10).
        priority_points:   Rating / category heuristic (0–20).
    """

    goal_points:       int = 0
    use_case_points:   int = 0
    experience_points: int = 0
    priority_points:   int = 0

    @property
    def total(self) -> int:
        return (
            self.goal_points
            + self.use_case_points
            + self.experience_points
            + self.priority_points
        )

    @property
    def match(self) -> int:
        """Clamped fit percentage. Only meaningful when ``total > 0``."""
        return min(rules.MAX_MATCH, rules.BASE_MATCH + self.total)


def score_tool(answers: QuizAnswers, tool: Tool) -> ToolScore:
    """Evaluate the four scoring rules for one tool.

    Args:
        answers: Completed questionnaire.
        tool:    Catalog row.

    Returns:
        ``ToolScore`` with each rule's contribution.
    """
    category = tool.category
    score = ToolScore()

    # ── Goal ──────────────────────────────────────────────────────────────────
    goal_keyword = rules.GOAL_KEYWORDS.get(answers.goal)
    if goal_keyword and rules.category_contains(category, goal_keyword):
        score.goal_points = rules.GOAL_POINTS

    # ── Use case ──────────────────────────────────────────────────────────────
    if answers.use_case == UseCase.ALL:
        score.use_case_points = rules.USE_CASE_FLAT_POINTS
    else:
        keywords, points = rules.USE_CASE_RULES.get(answers.use_case, ((), 0))
        if any(rules.category_contains(category, kw) for kw in keywords):
            score.use_case_points = points

    # ── Experience ────────────────────────────────────────────────────────────
    reviews = tool.review_count
    if reviews is not None:
        if answers.experience == ExperienceLevel.ADVANCED and reviews > rules.ADVANCED_MIN_REVIEWS:
            score.experience_points = rules.ADVANCED_POINTS
        elif answers.experience == ExperienceLevel.BEGINNER and reviews < rules.BEGINNER_MAX_REVIEWS:
            score.experience_points = rules.BEGINNER_POINTS

    # ── Priority ──────────────────────────────────────────────────────────────
    if answers.priority == Priority.QUALITY:
        if tool.rating is not None:
            for threshold, points in rules.QUALITY_TIERS:
                if tool.rating >= threshold:
                    score.priority_points = points
                    break
    elif answers.priority == Priority.SEO:
        if rules.category_contains(category, rules.SEO_MARKER):
            score.priority_points = rules.SEO_PRIORITY_POINTS
    elif answers.priority == Priority.SPEED:
        if any(rules.category_contains(category, kw) for kw in rules.SPEED_KEYWORDS):
            score.priority_points = rules.SPEED_POINTS

    return score


def build_reason(answers: QuizAnswers, tool: Tool) -> str:
    """Return the one-line explanation shown under a recommendation.

    Example::

        "AI Writing pick for your content goal with a focus on SEO."
    """
    category = (tool.category or "").strip() or "General"
    priority = rules.PRIORITY_LABELS.get(answers.priority, str(answers.priority))
    return f"{category} pick for your {answers.goal} goal with a focus on {priority}."


def match(
    answers: QuizAnswers,
    catalog: Iterable[Tool],
    limit: int = DEFAULT_MAX_RESULTS,
) -> list[Recommendation]:
    """Rank the catalog against a questionnaire.

    Args:
        answers: Completed questionnaire; gating on completeness is the
            caller's job (see ``QuizAnswers.from_partial``).
        catalog: Published tools in provider order.
        limit:   Maximum number of recommendations.

    Returns:
        Up to ``limit`` recommendations, ``match`` descending, unique by slug.
        An empty catalog gives an empty list.

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}.")

    seen_slugs: set[str] = set()
    recs: list[Recommendation] = []
    duplicates = 0
    excluded = 0

    for tool in catalog:
        if tool.slug in seen_slugs:
            duplicates += 1
            continue
        seen_slugs.add(tool.slug)

        score = score_tool(answers, tool)
        if score.total <= 0:
            excluded += 1
            continue

        recs.append(
            Recommendation(
                slug=tool.slug,
                name=tool.name,
                reason=build_reason(answers, tool),
                match=score.match,
            )
        )

    logger.debug(
        "Quiz scored %d tools (%d excluded, %d duplicate slugs)",
        len(recs), excluded, duplicates,
    )

    recs.sort(key=lambda r: r.match, reverse=True)
    return recs[:limit]
