"""Slug helpers shared by tracking-link and catalog code."""

from __future__ import annotations

import re

_INVALID_CHARS = re.compile(r"[^a-z0-9\s-]")
_WHITESPACE = re.compile(r"\s+")
_DASH_RUNS = re.compile(r"-+")

MAX_SLUG_LENGTH = 40


def generate_slug_from_name(name: str) -> str:
    """Derive the default tracking-link slug for a tool name.

    Lower-cases, drops anything outside ``[a-z0-9]``, whitespace and ``-``,
    turns whitespace runs into a single ``-``, collapses repeated dashes and
    truncates to ``MAX_SLUG_LENGTH`` characters.

    Example::

        >>> generate_slug_from_name("Surfer SEO (Pro)")
        'surfer-seo-pro'
    """
    slug = _INVALID_CHARS.sub("", name.lower()).strip()
    slug = _WHITESPACE.sub("-", slug)
    slug = _DASH_RUNS.sub("-", slug)
    return slug[:MAX_SLUG_LENGTH]
