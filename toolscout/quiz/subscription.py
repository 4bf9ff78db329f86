"""
Best-effort submission of quiz answers to the mailing-list endpoint.

When a visitor reveals their recommendations they hand over an email
address; the answers are forwarded to the subscribe endpoint so the
follow-up sequence can be personalised. This is fire-and-forget:
a failed POST is logged and otherwise ignored, and it must never stop the
recommendations from being shown.

Payload::

    {"email": "...", "source": "quiz",
     "quizData": {"goal": "content", "team_size": "solo", ...}}

The endpoint URL comes from ``[subscription] endpoint_url`` or the
``TOOLSCOUT_SUBSCRIBE_URL`` environment variable. Without one the notifier
is a no-op.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional

import httpx

from toolscout.models.tool import QuizAnswers, Recommendation, Tool
from toolscout.quiz.matcher import DEFAULT_MAX_RESULTS, match

logger = logging.getLogger(__name__)

SOURCE_QUIZ = "quiz"


def is_valid_email(email: Optional[str]) -> bool:
    """Loose email gate used before submitting: > 3 chars and an ``@``."""
    if not email:
        return False
    email = email.strip()
    return len(email) > 3 and "@" in email


def build_payload(answers: QuizAnswers, source: str = SOURCE_QUIZ) -> dict[str, Any]:
    """Return the JSON body posted to the subscribe endpoint."""
    return {
        "email": answers.email,
        "source": source,
        "quizData": answers.model_dump(mode="json"),
    }


class SubscriptionNotifier:
    """Posts quiz submissions to the subscribe endpoint.

    Usage::

        notifier = SubscriptionNotifier("https://example.com/api/subscribe")
        notifier.submit(answers)   # True on 2xx, False otherwise

    Attributes:
        endpoint_url: Subscribe endpoint; ``None`` disables submission.
        timeout_s:    Request timeout in seconds.
    """

    def __init__(self, endpoint_url: Optional[str] = None, timeout_s: float = 5.0) -> None:
        self.endpoint_url = endpoint_url
        self.timeout_s = timeout_s

    @property
    def enabled(self) -> bool:
        return bool(self.endpoint_url)

    def submit(self, answers: QuizAnswers) -> bool:
        """Post the answers; never raises for transport, HTTP or URL errors.

        Args:
            answers: Completed questionnaire including ``email``.

        Returns:
            ``True`` if the endpoint accepted the submission.
        """
        if not self.enabled:
            logger.debug("Subscription endpoint not configured; skipping submission")
            return False
        if not is_valid_email(answers.email):
            logger.debug("Quiz submission has no usable email; skipping")
            return False

        try:
            resp = httpx.post(
                self.endpoint_url,
                json=build_payload(answers),
                timeout=self.timeout_s,
            )
            resp.raise_for_status()
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as exc:
            logger.warning("Quiz subscription failed: %s", exc)
            return False

        logger.info("Quiz submission accepted by %s", self.endpoint_url)
        return True


def recommend_with_submission(
    answers: QuizAnswers,
    catalog: Iterable[Tool],
    notifier: Optional[SubscriptionNotifier] = None,
    limit: int = DEFAULT_MAX_RESULTS,
) -> list[Recommendation]:
    """Submit the answers (best effort), then return the recommendations.

    The recommendations are computed regardless of how the submission went.
    """
    if notifier is not None:
        notifier.submit(answers)
    return match(answers, catalog, limit=limit)
