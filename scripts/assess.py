#!/usr/bin/env python3
"""
Command-line readiness assessment.

Takes the four wizard answers (goal, industry with org size, timeline) as
options, recommends the best-fitting use cases, and shows how many use cases
each alternative answer would leave.

Usage:
    assess.py --goal work-faster --industry Banking --org-size Large --timeline quick-wins
    assess.py --goal work-better --counts
"""

import os
from pathlib import Path
from typing import Dict, Optional

import typer
from dotenv import load_dotenv

from genai_atlas.contexts.catalog import InvalidCatalogError, load_default_catalog
from genai_atlas.contexts.targeting import (
    Answers,
    FrameworkMatcher,
    Goal,
    OrgSize,
    Timeline,
    difficulty_level,
    goal_match_counts,
    industry_match_counts,
    org_size_match_counts,
    recommend,
    timeline_estimate,
    timeline_match_counts,
)
from genai_atlas.contexts.targeting.defaults import DEFAULT_RECOMMENDATION_LIMIT, MAX_FIT_SCORE
from genai_atlas.contexts.targeting.logger import _log_info, setup_targeting_logger
from genai_atlas.utils.report_formatter import Column, TableFormatter, format_match_count

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(add_completion=False, help="Recommend GenAI use cases for your organization")


def _check_choice(value: Optional[str], allowed, label: str) -> None:
    if value is not None and value not in allowed:
        typer.secho(
            f"Error: Unknown {label} '{value}'. Available: {', '.join(sorted(allowed))}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)


def _echo_counts(title: str, counts: Dict[str, int], selected: Optional[str]) -> None:
    typer.echo(f"\n{title}:")
    for option, count in counts.items():
        marker = ">" if option == selected else " "
        typer.echo(f"  {marker} {option:28} {format_match_count(count, empty_label='No matches')}")


@app.command()
def main(
    goal: Optional[str] = typer.Option(
        None, "--goal", "-g", help="work-faster | work-better | work-at-scale"
    ),
    industry: Optional[str] = typer.Option(None, "--industry", "-i", help="Exact industry name"),
    org_size: Optional[str] = typer.Option(
        None, "--org-size", "-o", help="Small | Medium | Large"
    ),
    timeline: Optional[str] = typer.Option(
        None, "--timeline", "-t", help="quick-wins | balanced | transformative"
    ),
    limit: int = typer.Option(
        DEFAULT_RECOMMENDATION_LIMIT, "--limit", "-n", help="Number of recommendations"
    ),
    counts: bool = typer.Option(
        False, "--counts", "-c", help="Also show how many use cases each alternative answer leaves"
    ),
):
    """
    Recommend use cases that fit the given answers.

    Candidates must match the goal, timeline and industry; they are then
    ranked by fit score. Any answer may be left out.
    """
    _check_choice(goal, Goal.values(), "goal")
    _check_choice(timeline, Timeline.values(), "timeline")
    _check_choice(org_size, OrgSize.values(), "org size")

    setup_targeting_logger(LOGS_PATH, view="assess", console_level="WARNING")
    try:
        catalog = load_default_catalog()
    except (FileNotFoundError, InvalidCatalogError) as e:
        typer.secho(f"Error loading catalog: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    matcher = FrameworkMatcher(catalog.frameworks)

    answers = Answers(goal=goal, industry=industry, org_size=org_size, timeline=timeline)
    recommendations = recommend(catalog.use_cases, answers, matcher, limit=limit)
    _log_info(f"Assessment {answers} -> {[entry.use_case.id for entry in recommendations]}")

    typer.secho("\nRecommended use cases", fg=typer.colors.BLUE, bold=True)
    if not recommendations:
        typer.secho(
            "  No use cases match these answers. Try a different industry or timeline.",
            fg=typer.colors.YELLOW,
        )
    else:
        table = TableFormatter(
            [
                Column("Fit", 7, align=">"),
                Column("Organization", 26),
                Column("Industry", 20),
                Column("Difficulty", 10),
                Column("Timeline", 12),
                Column("Id", 34),
            ]
        )
        table.add_table_header().add_separator()
        for entry in recommendations:
            uc = entry.use_case
            table.add_row(
                [
                    f"{entry.fit_score}/{MAX_FIT_SCORE}",
                    uc.organization,
                    uc.industry,
                    difficulty_level(uc, matcher),
                    timeline_estimate(uc, matcher),
                    uc.id,
                ]
            )
        typer.echo(table.render())

    if counts:
        _echo_counts("Goals", goal_match_counts(catalog.use_cases, answers, matcher), goal)
        _echo_counts(
            "Industries",
            industry_match_counts(
                catalog.use_cases, answers, matcher, catalog.get_industries()
            ),
            industry,
        )
        _echo_counts(
            "Organization sizes",
            org_size_match_counts(catalog.use_cases, answers, matcher),
            org_size,
        )
        _echo_counts(
            "Timelines", timeline_match_counts(catalog.use_cases, answers, matcher), timeline
        )


if __name__ == "__main__":
    app()
