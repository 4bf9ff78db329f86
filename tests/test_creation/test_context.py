"""Tests for toolscout/creation/context.py."""

from __future__ import annotations

import pytest

from toolscout.creation.context import (
    CHILD_TABLES,
    AlternativeEntry,
    ComparisonRowEntry,
    FAQEntry,
    FeatureEntry,
    PricingPlanEntry,
    TextEntry,
    ToolCreationContext,
    build_child_rows,
)


@pytest.fixture
def filled_context() -> ToolCreationContext:
    return ToolCreationContext(
        features=[
            FeatureEntry("Long-form editor", "Write 3,000-word drafts", icon="pen"),
            FeatureEntry("Brand voice"),
        ],
        pros=[TextEntry("Fast"), TextEntry("Good templates")],
        cons=[TextEntry("Pricey")],
        pricing=[
            PricingPlanEntry("Creator", "$39/mo", features=["1 seat"]),
            PricingPlanEntry("Pro", "$59/mo", features=["5 seats", "SEO mode"], is_popular=True),
        ],
        faqs=[FAQEntry("Is there a free trial?", "Yes, 7 days.")],
        alternatives=[AlternativeEntry("Copy.ai", "copy-ai", reason="Cheaper")],
        comparison=[ComparisonRowEntry("Seats", "5", "1")],
    )


class TestToolCreationContext:
    def test_new_context_is_empty(self):
        assert ToolCreationContext().is_empty()

    def test_contexts_do_not_share_lists(self):
        first, second = ToolCreationContext(), ToolCreationContext()
        first.pros.append(TextEntry("Fast"))
        assert second.pros == []
        assert not first.is_empty()
        assert second.is_empty()

    def test_every_section_has_a_table(self, filled_context):
        for attr in CHILD_TABLES:
            assert getattr(filled_context, attr)


class TestBuildChildRows:
    def test_all_sections_present(self, filled_context):
        rows = build_child_rows(filled_context, "tool-42")
        assert set(rows) == set(CHILD_TABLES.values())

    def test_rows_carry_tool_id_and_sort_order(self, filled_context):
        rows = build_child_rows(filled_context, "tool-42")
        features = rows["tool_features"]
        assert [r["sort_order"] for r in features] == [0, 1]
        assert all(r["tool_id"] == "tool-42" for r in features)
        assert features[0] == {
            "tool_id": "tool-42",
            "title": "Long-form editor",
            "description": "Write 3,000-word drafts",
            "icon": "pen",
            "sort_order": 0,
        }

    def test_pricing_rows_keep_features_and_flag(self, filled_context):
        plans = build_child_rows(filled_context, "tool-42")["tool_pricing_plans"]
        assert plans[1]["plan_name"] == "Pro"
        assert plans[1]["features"] == ["5 seats", "SEO mode"]
        assert plans[1]["is_popular"] is True
        assert plans[0]["is_popular"] is False

    def test_pros_and_cons_go_to_separate_tables(self, filled_context):
        rows = build_child_rows(filled_context, "tool-42")
        assert [r["text"] for r in rows["tool_pros"]] == ["Fast", "Good templates"]
        assert [r["text"] for r in rows["tool_cons"]] == ["Pricey"]

    def test_empty_sections_are_omitted(self):
        context = ToolCreationContext(faqs=[FAQEntry("Q?", "A.")])
        assert list(build_child_rows(context, "t1")) == ["tool_faqs"]

    def test_empty_context_gives_no_rows(self):
        assert build_child_rows(ToolCreationContext(), "t1") == {}

    @pytest.mark.parametrize("tool_id", ["", None])
    def test_missing_tool_id_raises(self, filled_context, tool_id):
        with pytest.raises(ValueError, match="tool_id"):
            build_child_rows(filled_context, tool_id)
