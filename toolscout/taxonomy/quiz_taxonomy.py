"""
Value sets for the tool-matching questionnaire.

Six orthogonal answers describe a visitor:
  - ``QuizGoal``        - what they want to get done.
  - ``TeamSize``        - how many people will use the tool.
  - ``Budget``          - monthly spend bracket.
  - ``ExperienceLevel`` - familiarity with AI tooling.
  - ``UseCase``         - the concrete job the tool is bought for.
  - ``Priority``        - the quality they care about most.

Only goal, use case, experience and priority influence scoring; team size
and budget are captured for the subscription payload.

This module has NO imports from any other ``toolscout`` package.
"""

from enum import StrEnum


class QuizGoal(StrEnum):
    """Primary objective selected on the first questionnaire step."""

    CONTENT = "content"
    """Blogs, social posts, copy."""

    CODING = "coding"
    """Code, debug, deploy."""

    MARKETING = "marketing"
    """Ads and campaigns."""

    AUTOMATION = "automation"
    """Connecting apps and workflows."""

    RESEARCH = "research"
    """Analysis, reports, data."""

    IMAGE = "image"
    """Images, UI, visual assets."""

    CHATBOT = "chatbot"
    """Conversational agents and customer support."""


class TeamSize(StrEnum):
    SOLO = "solo"
    SMALL = "small"
    TEAM = "team"
    ENTERPRISE = "enterprise"


class Budget(StrEnum):
    FREE = "free"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class ExperienceLevel(StrEnum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


class UseCase(StrEnum):
    """Concrete job the visitor wants the tool for."""

    BLOG = "blog"
    SEO = "seo"
    SOCIAL = "social"
    CODE = "code"
    DESIGN = "design"
    ALL = "all"
    """No specific job; every tool gets a small flat bonus."""


class Priority(StrEnum):
    QUALITY = "quality"
    SPEED = "speed"
    SEO = "seo"
    INTEGRATIONS = "integrations"
    COLLABORATION = "collaboration"
