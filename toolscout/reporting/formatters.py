"""
ASCII terminal formatters for CLI output.

All formatters accept already-ranked results and return plain multi-line
strings suitable for ``typer.echo()``. No third-party dependencies.
"""

from __future__ import annotations

from typing import Optional

from toolscout.clicks.aggregator import StatsBucket
from toolscout.models.click import DashboardSummary, GlobalClickCounts
from toolscout.models.post import RelatedPost
from toolscout.models.tool import Recommendation
from toolscout.utils.slugs import generate_slug_from_name


def format_recommendations(recs: list[Recommendation]) -> str:
    """Format quiz recommendations as a ranked table::

        Rank  Match  Tool
        ----------------------------------------------
           1    90%  Surfer SEO (surfer-seo)
                     SEO Tools pick for your content goal ...
    """
    lines = ["", "=== Your Tool Matches ==="]
    if not recs:
        lines.append("  (no matching tools; try a broader use case)")
        return "\n".join(lines)

    lines.append(f"  {'Rank':>4}  {'Match':>5}  Tool")
    lines.append("  " + "-" * 46)
    for rank, rec in enumerate(recs, start=1):
        lines.append(f"  {rank:>4}  {rec.match:>4}%  {rec.name} ({rec.slug})")
        lines.append(f"  {'':>4}  {'':>5}  {rec.reason}")
    return "\n".join(lines)


def format_related(target_slug: str, related: list[RelatedPost]) -> str:
    """Format related posts with the signals behind each score."""
    lines = ["", f"=== Related to '{target_slug}' ==="]
    if not related:
        lines.append("  (no other published posts)")
        return "\n".join(lines)

    lines.append(f"  {'Score':>5}  {'Created':<10}  Post")
    lines.append("  " + "-" * 46)
    for rp in related:
        signals: list[str] = []
        if rp.same_category:
            signals.append("same category")
        if rp.shared_tags:
            signals.append("tags: " + ", ".join(rp.shared_tags))
        suffix = f"  [{'; '.join(signals)}]" if signals else ""
        created = rp.post.created_at.date().isoformat()
        lines.append(f"  {rp.relevance_score:>5}  {created:<10}  {rp.post.slug}{suffix}")
    return "\n".join(lines)


def format_click_dashboard(
    buckets: dict[str, StatsBucket],
    summary: DashboardSummary,
    click_range: str,
    names: Optional[dict[str, str]] = None,
) -> str:
    """Format the per-tool click table plus the summary cards.

    Args:
        buckets:     Output of ``aggregate()``.
        summary:     Output of ``aggregate()``.
        click_range: Range label shown in the header.
        names:       Optional entity id -> tool name; used for display and to
                     derive the default tracking slug.
    """
    names = names or {}
    lines = ["", f"=== Affiliate Clicks (range: {click_range}) ==="]

    top_label = "-"
    if summary.top_entity is not None:
        top_label = f"{names.get(summary.top_entity, summary.top_entity)} ({summary.top_entity_clicks})"
    lines.append(f"  Total clicks:     {summary.total_clicks}")
    lines.append(f"  Tools w/ clicks:  {summary.active_entities}")
    lines.append(f"  Top tool:         {top_label}")
    lines.append(f"  Avg per tool:     {summary.average_display}")
    lines.append("")

    if not buckets:
        lines.append("  (no tools)")
        return "\n".join(lines)

    lines.append(f"  {'Tool':<28} {'Link slug':<24} {'Total':>6} {'7d':>5} {'Month':>6}")
    lines.append("  " + "-" * 73)
    for entity_id, bucket in buckets.items():
        name = names.get(entity_id, entity_id)
        slug = generate_slug_from_name(name) if entity_id in names else "-"
        lines.append(
            f"  {name[:28]:<28} {slug[:24]:<24} {bucket.total:>6} "
            f"{bucket.last_7_days:>5} {bucket.this_month:>6}"
        )
    return "\n".join(lines)


def format_global_counts(counts: GlobalClickCounts, top: list[tuple[str, int]]) -> str:
    """Format the site-wide click card and the top-tools-this-month list."""
    lines = [
        "",
        "=== Site-wide Clicks ===",
        f"  All time:    {counts.total}",
        f"  This month:  {counts.this_month}",
        f"  Last 7 days: {counts.last_7_days}",
    ]
    if top:
        lines.append("")
        lines.append("  Top tools this month:")
        for rank, (slug, count) in enumerate(top, start=1):
            lines.append(f"    {rank}. {slug} ({count})")
    return "\n".join(lines)
