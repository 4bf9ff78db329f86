"""
Scoring rules for the quiz matcher.

Every rule tests the tool's category label with a case-insensitive
substring check, so ``"AI Writing Assistant"`` satisfies the ``writing``
keyword. Rules are independent and additive; a label containing keywords
for several rules collects every bonus it qualifies for.

Point values
------------
    goal keyword present            +30
    use-case keyword(s) present     +20 .. +30  (``all``: flat +10)
    advanced  & review_count > 3000 +10
    beginner  & review_count < 1000  +5
    quality   & rating >= 4.7       +15   (else rating >= 4.5: +10)
    seo       & "seo" in category   +20
    speed     & writing/automation  +10
"""

from __future__ import annotations

from toolscout.taxonomy.quiz_taxonomy import Priority, QuizGoal, UseCase

GOAL_POINTS = 30

GOAL_KEYWORDS: dict[QuizGoal, str] = {
    QuizGoal.CONTENT:    "writing",
    QuizGoal.CODING:     "coding",
    QuizGoal.MARKETING:  "marketing",
    QuizGoal.AUTOMATION: "automation",
    QuizGoal.RESEARCH:   "research",
    QuizGoal.IMAGE:      "image",
    QuizGoal.CHATBOT:    "chatbot",
}

# use case -> (keywords, points); the bonus applies once if any keyword matches
USE_CASE_RULES: dict[UseCase, tuple[tuple[str, ...], int]] = {
    UseCase.BLOG:   (("writing", "content"), 25),
    UseCase.SEO:    (("seo",), 20),
    UseCase.SOCIAL: (("social", "marketing"), 20),
    UseCase.CODE:   (("coding", "developer"), 30),
    UseCase.DESIGN: (("image", "design", "video"), 25),
}
USE_CASE_FLAT_POINTS = 10   # UseCase.ALL, independent of category

ADVANCED_MIN_REVIEWS = 3000     # strictly greater than
ADVANCED_POINTS = 10
BEGINNER_MAX_REVIEWS = 1000     # strictly less than
BEGINNER_POINTS = 5

QUALITY_TIERS: tuple[tuple[float, int], ...] = (
    (4.7, 15),
    (4.5, 10),
)
SEO_MARKER = "seo"
SEO_PRIORITY_POINTS = 20
SPEED_KEYWORDS: tuple[str, ...] = ("writing", "automation")
SPEED_POINTS = 10

BASE_MATCH = 50
MAX_MATCH = 95

PRIORITY_LABELS: dict[Priority, str] = {
    Priority.QUALITY:       "output quality",
    Priority.SPEED:         "speed",
    Priority.SEO:           "SEO",
    Priority.INTEGRATIONS:  "integrations",
    Priority.COLLABORATION: "team collaboration",
}


def category_contains(category: str | None, keyword: str) -> bool:
    """Case-insensitive substring test; a missing category never matches."""
    if not category:
        return False
    return keyword.lower() in category.lower()
