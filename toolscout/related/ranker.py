"""
Related-post ranker: picks the articles shown under "Related posts".

Score formula (integer, unbounded)
----------------------------------
    score = 3 * (candidate.category == target.category) + |shared tags|

Category equality is exact and case-sensitive, unlike the substring
matching the quiz matcher uses. A missing category never matches.

Ordering
--------
Score descending, then ``created_at`` descending. There is no minimum
score: when fewer than ``limit`` candidates are related at all, unrelated
posts fill the remaining slots newest first, so a post with no tags and a
unique category still gets the three most recent articles.
"""

from __future__ import annotations

import logging
from typing import Iterable

from toolscout.models.post import Post, RelatedPost

logger = logging.getLogger(__name__)

CATEGORY_POINTS = 3
TAG_POINTS = 1
DEFAULT_LIMIT = 3


def score_candidate(target: Post, candidate: Post) -> RelatedPost:
    """Score one candidate against the target post.

    Args:
        target:    The post being read.
        candidate: A published post that might be shown alongside it.

    Returns:
        ``RelatedPost`` with the score and the signals behind it.
    """
    same_category = bool(target.category) and candidate.category == target.category

    candidate_tags = set(candidate.tags)
    shared: list[str] = []
    for tag in target.tags:
        if tag in candidate_tags and tag not in shared:
            shared.append(tag)

    score = (CATEGORY_POINTS if same_category else 0) + TAG_POINTS * len(shared)
    return RelatedPost(
        post=candidate,
        relevance_score=score,
        shared_tags=tuple(shared),
        same_category=same_category,
    )


def rank(
    target: Post,
    candidates: Iterable[Post],
    limit: int = DEFAULT_LIMIT,
) -> list[RelatedPost]:
    """Return the ``limit`` most related candidates.

    The target is excluded by slug even if the provider already filtered it
    out by id.

    Args:
        target:     The post being read.
        candidates: Published posts, any order.
        limit:      Maximum number of results.

    Returns:
        Up to ``limit`` related posts ordered by (score desc, created_at desc).

    Raises:
        ValueError: If ``limit`` is negative.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}.")

    scored = [
        score_candidate(target, candidate)
        for candidate in candidates
        if candidate.slug != target.slug
    ]
    scored.sort(
        key=lambda rp: (-rp.relevance_score, -rp.post.created_at.timestamp())
    )

    logger.debug(
        "Ranked %d related candidates for %s (%d with positive score)",
        len(scored), target.slug, sum(1 for rp in scored if rp.relevance_score > 0),
    )
    return scored[:limit]
