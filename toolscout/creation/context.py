"""
Request-scoped context for the multi-step "create tool" flow.

Creating a tool happens in two steps: the parent ``ai_tools`` row is
inserted first, and only once its id is known can the repeater sections
(features, pros/cons, pricing plans, FAQs, alternatives, comparison rows)
be written to their child tables. The repeater entries collected by the
form travel between the two steps inside a ``ToolCreationContext`` that the
caller creates per request and passes explicitly.

``build_child_rows()`` turns a context into insert-ready rows; the actual
writes belong to the persistence layer.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Optional


@dataclass
class FeatureEntry:
    title: str
    description: str = ""
    icon: Optional[str] = None


@dataclass
class TextEntry:
    """A single pro or con."""

    text: str


@dataclass
class PricingPlanEntry:
    plan_name: str
    price: str
    features: list[str] = field(default_factory=list)
    is_popular: bool = False


@dataclass
class FAQEntry:
    question: str
    answer: str


@dataclass
class AlternativeEntry:
    alternative_name: str
    alternative_slug: str
    reason: str = ""


@dataclass
class ComparisonRowEntry:
    feature: str
    tool_value: str
    competitor_value: str


@dataclass
class ToolCreationContext:
    """Repeater data gathered while a single tool is being created.

    Attributes:
        features:     Feature cards.
        pros:         "Pros" bullet list.
        cons:         "Cons" bullet list.
        pricing:      Pricing plans, displayed in order.
        faqs:         Question/answer pairs.
        alternatives: Competing tools worth considering.
        comparison:   Rows of the comparison table.
    """

    features:     list[FeatureEntry] = field(default_factory=list)
    pros:         list[TextEntry] = field(default_factory=list)
    cons:         list[TextEntry] = field(default_factory=list)
    pricing:      list[PricingPlanEntry] = field(default_factory=list)
    faqs:         list[FAQEntry] = field(default_factory=list)
    alternatives: list[AlternativeEntry] = field(default_factory=list)
    comparison:   list[ComparisonRowEntry] = field(default_factory=list)

    def is_empty(self) -> bool:
        return not any(getattr(self, name) for name in CHILD_TABLES)


# context attribute -> child table
CHILD_TABLES: dict[str, str] = {
    "features":     "tool_features",
    "pros":         "tool_pros",
    "cons":         "tool_cons",
    "pricing":      "tool_pricing_plans",
    "faqs":         "tool_faqs",
    "alternatives": "tool_alternatives",
    "comparison":   "tool_comparisons",
}


def build_child_rows(context: ToolCreationContext, tool_id: str) -> dict[str, list[dict[str, Any]]]:
    """Convert repeater entries into child-table rows for a new tool.

    Each row gets ``tool_id`` and a 0-based ``sort_order`` reflecting the
    order the entries were entered in. Empty sections are omitted.

    Args:
        context: Entries collected during this creation request.
        tool_id: Id assigned to the freshly inserted parent row.

    Returns:
        Mapping of table name -> rows.

    Raises:
        ValueError: If ``tool_id`` is empty.
    """
    if not tool_id:
        raise ValueError("tool_id is required to build child rows.")

    rows: dict[str, list[dict[str, Any]]] = {}
    for attr, table in CHILD_TABLES.items():
        entries = getattr(context, attr)
        if not entries:
            continue
        rows[table] = [
            {"tool_id": tool_id, **asdict(entry), "sort_order": index}
            for index, entry in enumerate(entries)
        ]
    return rows
