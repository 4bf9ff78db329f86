"""
toolscout - CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Read and validate the JSON input files.
  4. Run the scoring function.
  5. Print an ASCII report to stdout.

Install and run::

    pip install -e .
    toolscout --help
    toolscout validate-config
    toolscout quiz --answers answers.json --catalog tools.json
    toolscout related --target my-post --posts posts.json
    toolscout clicks --events clicks.json --entities tools.json --range 7d
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Optional

import typer

app = typer.Typer(
    name="toolscout",
    help="AI-tools directory scoring: quiz matches, related posts, click stats.",
    add_completion=False,
)


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from toolscout.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from toolscout.utils.logging import configure_logging
    configure_logging(config.logging)


def _read_json_or_exit(path: str, expect_list: bool = True) -> Any:
    """Read a JSON input file; exit with code 1 on any read/shape error."""
    file_path = Path(path)
    if not file_path.exists():
        typer.echo(f"[ERROR] File not found: {file_path}", err=True)
        raise typer.Exit(code=1)
    try:
        with open(file_path, encoding="utf-8") as f:
            data = json.load(f)
    except (json.JSONDecodeError, OSError) as exc:
        typer.echo(f"[ERROR] JSON parse error in {file_path}: {exc}", err=True)
        raise typer.Exit(code=1)

    if expect_list and not isinstance(data, list):
        typer.echo(f"[ERROR] {file_path} must contain a JSON array.", err=True)
        raise typer.Exit(code=1)
    if not expect_list and not isinstance(data, dict):
        typer.echo(f"[ERROR] {file_path} must contain a JSON object.", err=True)
        raise typer.Exit(code=1)
    return data


def _validate_rows_or_exit(model, rows: list[dict], label: str) -> list:
    """Validate every row against ``model``; report the first few failures."""
    from pydantic import ValidationError

    validated = []
    errors: list[tuple[int, str]] = []
    for i, raw in enumerate(rows):
        try:
            validated.append(model(**raw))
        except (ValidationError, TypeError) as exc:
            errors.append((i, str(exc)))

    if errors:
        typer.echo(f"[ERROR] {len(errors)} {label}(s) failed validation:", err=True)
        for idx, msg in errors[:5]:
            typer.echo(f"  {label} #{idx}: {msg}", err=True)
        if len(errors) > 5:
            typer.echo(f"  ... and {len(errors) - 5} more.", err=True)
        raise typer.Exit(code=1)
    return validated


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values."""
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Quiz max results:   {config.quiz.max_results}")
    typer.echo(f"  Related limit:      {config.related.limit}")
    typer.echo(f"  Click range:        {config.clicks.default_range.value}")
    typer.echo(f"  Subscribe endpoint: {config.subscription.endpoint_url or '(disabled)'}")
    typer.echo(f"  Log level:          {config.logging.level}")
    typer.echo(f"  Debug mode:         {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(mode="json"), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("quiz")
def quiz(
    answers_file: str = typer.Option(..., "--answers", help="JSON object with the six answers."),
    catalog_file: str = typer.Option(..., "--catalog", help="JSON array of published tools."),
    subscribe: bool = typer.Option(
        False,
        "--subscribe",
        help="Also submit the answers to the configured subscribe endpoint.",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Recommend tools for a completed questionnaire."""
    from pydantic import ValidationError

    from toolscout.models.tool import QuizAnswers, Tool
    from toolscout.quiz.subscription import SubscriptionNotifier, recommend_with_submission
    from toolscout.reporting.formatters import format_recommendations

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    raw_answers = _read_json_or_exit(answers_file, expect_list=False)
    try:
        answers = QuizAnswers.from_partial(raw_answers)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Invalid answers: {exc}", err=True)
        raise typer.Exit(code=1)
    if answers is None:
        typer.echo("[ERROR] All six questions must be answered before matching.", err=True)
        raise typer.Exit(code=1)

    catalog = _validate_rows_or_exit(Tool, _read_json_or_exit(catalog_file), "tool")

    notifier = None
    if subscribe:
        notifier = SubscriptionNotifier(
            config.subscription.endpoint_url,
            timeout_s=config.subscription.timeout_s,
        )

    recs = recommend_with_submission(
        answers, catalog, notifier=notifier, limit=config.quiz.max_results
    )
    typer.echo(format_recommendations(recs))


@app.command("related")
def related(
    target_slug: str = typer.Option(..., "--target", help="Slug of the post being read."),
    posts_file: str = typer.Option(..., "--posts", help="JSON array of published posts."),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Rank related posts for one article."""
    from toolscout.models.post import Post
    from toolscout.related.ranker import rank
    from toolscout.reporting.formatters import format_related

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    posts = _validate_rows_or_exit(Post, _read_json_or_exit(posts_file), "post")
    target = next((p for p in posts if p.slug == target_slug), None)
    if target is None:
        typer.echo(f"[ERROR] Post '{target_slug}' not found in {posts_file}.", err=True)
        raise typer.Exit(code=1)

    result = rank(target, posts, limit=config.related.limit)
    typer.echo(format_related(target_slug, result))


@app.command("clicks")
def clicks(
    events_file: str = typer.Option(..., "--events", help="JSON array of click events."),
    entities_file: Optional[str] = typer.Option(
        None,
        "--entities",
        help="JSON array of tools ({id, name}) to list even without clicks.",
    ),
    click_range: Optional[str] = typer.Option(
        None,
        "--range",
        help="all | 7d | 30d | month (default from config).",
    ),
    now_iso: Optional[str] = typer.Option(
        None,
        "--now",
        help="Reference time as ISO-8601 (default: current UTC time).",
    ),
    config_path: Optional[str] = typer.Option(None, "--config", help="Path to TOML config file."),
) -> None:
    """Aggregate affiliate clicks per tool and site-wide."""
    from toolscout.clicks.aggregator import (
        aggregate,
        count_global_clicks,
        top_entities_this_month,
    )
    from toolscout.clicks.windows import ClickRange
    from toolscout.models.click import ClickEvent
    from toolscout.reporting.formatters import format_click_dashboard, format_global_counts
    from toolscout.utils.time_utils import parse_timestamp, utcnow

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    now = utcnow()
    if now_iso:
        parsed = parse_timestamp(now_iso)
        if parsed is None:
            typer.echo(f"[ERROR] Cannot parse --now '{now_iso}'.", err=True)
            raise typer.Exit(code=1)
        now = parsed

    selected = ClickRange.parse(click_range) if click_range else config.clicks.default_range
    events = _validate_rows_or_exit(ClickEvent, _read_json_or_exit(events_file), "event")

    names: dict[str, str] = {}
    if entities_file:
        for row in _read_json_or_exit(entities_file):
            if isinstance(row, dict) and row.get("id") is not None:
                names[str(row["id"])] = str(row.get("name") or row["id"])

    buckets, summary = aggregate(events, now, selected, entity_ids=list(names))
    typer.echo(format_click_dashboard(buckets, summary, selected.value, names=names))

    counts = count_global_clicks(events, now)
    top = top_entities_this_month(events, now, limit=config.clicks.top_entities_limit)
    typer.echo(format_global_counts(counts, top))


if __name__ == "__main__":
    app()
