"""
Catalog and questionnaire models.

``Tool`` is one published catalog row as supplied by the catalog provider.
Only the columns the matcher reads are modelled; anything else a provider
sends along (tags, pricing, affiliate flags) is ignored.

``QuizAnswers`` is a completed questionnaire. Unknown answer codes fail at
construction, so the matcher never has to guard against them.
"""

from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from toolscout.taxonomy.quiz_taxonomy import (
    Budget,
    ExperienceLevel,
    Priority,
    QuizGoal,
    TeamSize,
    UseCase,
)

REQUIRED_ANSWER_FIELDS: tuple[str, ...] = (
    "goal", "team_size", "budget", "experience", "use_case", "priority",
)


class Tool(BaseModel):
    """A published AI tool.

    Attributes:
        id: Provider primary key.
        slug: URL slug, unique in a well-formed catalog.
        name: Display name.
        category: Free-text category label, e.g. ``"AI Writing"``; ``None``
            when the tool is uncategorised.
        rating: Average review rating on a 0–5 scale, if known.
        review_count: Number of reviews behind ``rating``, if known.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    slug: str
    name: str
    category: Optional[str] = None
    rating: Optional[float] = None
    review_count: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, v: Any) -> Any:
        # Providers hand out both UUID strings and integer keys.
        return str(v) if isinstance(v, int) else v

    @field_validator("rating")
    @classmethod
    def validate_rating(cls, v: Optional[float]) -> Optional[float]:
        if v is not None and not 0.0 <= v <= 5.0:
            raise ValueError(f"rating must be in [0, 5], got {v}.")
        return v

    @field_validator("review_count")
    @classmethod
    def validate_review_count(cls, v: Optional[int]) -> Optional[int]:
        if v is not None and v < 0:
            raise ValueError(f"review_count must be >= 0, got {v}.")
        return v


class QuizAnswers(BaseModel):
    """A completed six-step questionnaire.

    ``email`` is only collected after the recommendations are revealed and
    plays no part in scoring.
    """

    model_config = ConfigDict(frozen=True)

    goal: QuizGoal
    team_size: TeamSize
    budget: Budget
    experience: ExperienceLevel
    use_case: UseCase
    priority: Priority
    email: Optional[str] = None

    @field_validator("email")
    @classmethod
    def strip_email(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return None
        return v.strip() or None

    @staticmethod
    def is_complete(raw: dict[str, Any]) -> bool:
        """Whether all six required answers are present and non-blank."""
        return all(raw.get(name) for name in REQUIRED_ANSWER_FIELDS)

    @classmethod
    def from_partial(cls, raw: dict[str, Any]) -> Optional["QuizAnswers"]:
        """Build answers from a possibly incomplete form state.

        Returns ``None`` while any of the six required fields is still blank,
        which is how the quiz flow decides whether matching may run.

        Raises:
            pydantic.ValidationError: If every field is present but one holds
                an unknown code.
        """
        if not cls.is_complete(raw):
            return None
        return cls(**{k: v for k, v in raw.items() if k in cls.model_fields})


class Recommendation(BaseModel):
    """One ranked quiz recommendation.

    Attributes:
        slug: Tool slug (unique within a result list).
        name: Tool display name.
        reason: Human-readable explanation referencing the tool's category.
        match: Fit percentage, always within [50, 95].
    """

    model_config = ConfigDict(frozen=True)

    slug: str
    name: str
    reason: str
    match: int

    @field_validator("match")
    @classmethod
    def validate_match(cls, v: int) -> int:
        if not 50 <= v <= 95:
            raise ValueError(f"match must be in [50, 95], got {v}.")
        return v
