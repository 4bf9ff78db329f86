"""Tests for toolscout/utils/slugs.py."""

from __future__ import annotations

import pytest

from toolscout.utils.slugs import MAX_SLUG_LENGTH, generate_slug_from_name


@pytest.mark.parametrize("name, expected", [
    ("Jasper",            "jasper"),
    ("Surfer SEO (Pro)",  "surfer-seo-pro"),
    ("  Jasper  AI  ",    "jasper-ai"),
    ("Tool - Pro",        "tool-pro"),
    ("A--B",              "a-b"),
    ("Café Bot",          "caf-bot"),
    ("GPT-4o Mini",       "gpt-4o-mini"),
    ("",                  ""),
])
def test_generate_slug_from_name(name, expected):
    assert generate_slug_from_name(name) == expected


def test_slug_is_truncated():
    slug = generate_slug_from_name("x" * 100)
    assert len(slug) == MAX_SLUG_LENGTH
