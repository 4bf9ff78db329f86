"""
Blog post models for related-content ranking.

``Post`` carries just enough of a published article to score relatedness.
``RelatedPost`` wraps a candidate with the relevance it earned against the
article being read.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from toolscout.utils.time_utils import ensure_utc


class Post(BaseModel):
    """A published blog post.

    Attributes:
        id: Provider primary key, if supplied.
        slug: URL slug; used to exclude the target from its own candidates.
        title: Display title, if supplied.
        category: Category label. Compared exactly (case-sensitive).
        tags: Tag labels in provider order. ``None`` is stored as ``()``.
        created_at: Creation time; naive values are treated as UTC.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: Optional[str] = None
    slug: str
    title: Optional[str] = None
    category: Optional[str] = None
    tags: tuple[str, ...] = ()
    created_at: datetime

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        return str(v) if isinstance(v, int) else v

    @field_validator("tags", mode="before")
    @classmethod
    def none_tags_to_empty(cls, v: Any) -> Any:
        return () if v is None else v

    @field_validator("created_at")
    @classmethod
    def validate_created_at(cls, v: datetime) -> datetime:
        return ensure_utc(v)


class RelatedPost(BaseModel):
    """A candidate post with its relevance to the target.

    Attributes:
        post: The candidate.
        relevance_score: 3 for a shared category plus 1 per shared tag.
        shared_tags: Tags present on both posts, in the target's tag order.
        same_category: Whether the candidate's category equals the target's.
    """

    model_config = ConfigDict(frozen=True)

    post: Post
    relevance_score: int
    shared_tags: tuple[str, ...] = ()
    same_category: bool = False

    @field_validator("relevance_score")
    @classmethod
    def validate_score(cls, v: int) -> int:
        if v < 0:
            raise ValueError(f"relevance_score must be >= 0, got {v}.")
        return v
