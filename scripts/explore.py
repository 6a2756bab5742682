#!/usr/bin/env python3
"""
Command-line browser for the GenAI case study catalog.

Lists use cases filtered by goal, timeline and industry, runs the advanced
explorer, and shows the full profile of a single use case.

Commands:
    list        - Filtered, sorted listing (remembers the search)
    advanced    - Multi-select explorer with fit scores
    show        - Detail profile of one use case with related cases
    industries  - Industries present in the catalog
"""

import os
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv

from genai_atlas.contexts.catalog import InvalidCatalogError, load_default_catalog
from genai_atlas.contexts.state import (
    AddRecentSearch,
    SearchQuery,
    SetPreferences,
    StateContainer,
    StateStore,
)
from genai_atlas.contexts.targeting import (
    ExplorerQuery,
    Difficulty,
    FrameworkMatcher,
    Goal,
    Timeline,
    build_case_profile,
    difficulty_level,
    explore,
    filter_opportunities,
    sort_opportunities,
)
from genai_atlas.contexts.targeting.criteria import (
    ALL_VIEW,
    VIEWS,
    SearchCriteria,
    build_query_string,
    parse_link,
)
from genai_atlas.contexts.targeting.explorer import ALL_DIFFICULTIES, EXPLORER_SORT_KEYS
from genai_atlas.contexts.targeting.filters import SORT_KEYS
from genai_atlas.contexts.targeting.logger import setup_targeting_logger
from genai_atlas.utils.report_formatter import Column, TableFormatter
from genai_atlas.utils.text_formatting import extract_metric, format_result
from genai_atlas.utils.timestamp import format_date, now_exact

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Browse real-world GenAI case studies",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _load_catalog():
    """Load the catalog and its matcher, exiting with an error message on failure."""
    try:
        catalog = load_default_catalog()
    except (FileNotFoundError, InvalidCatalogError) as e:
        typer.secho(f"Error loading catalog: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)
    return catalog, FrameworkMatcher(catalog.frameworks)


def _check_choice(value: Optional[str], allowed, label: str) -> None:
    if value is not None and value not in allowed:
        typer.secho(
            f"Error: Unknown {label} '{value}'. Available: {', '.join(sorted(allowed))}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)


@app.command("list")
def list_command(
    goal: Optional[str] = typer.Option(
        None, "--goal", "-g", help="work-faster | work-better | work-at-scale"
    ),
    timeline: Optional[str] = typer.Option(
        None, "--timeline", "-t", help="quick-wins | balanced | transformative"
    ),
    industry: Optional[str] = typer.Option(
        None, "--industry", "-i", help="Exact industry name, or All"
    ),
    link: Optional[str] = typer.Option(
        None, "--link", "-l", help="Deep link to reopen, e.g. '/?goal=work-faster'"
    ),
    sort: Optional[str] = typer.Option(
        None, "--sort", "-s", help="difficulty | industry | recent (defaults to saved preference)"
    ),
    view: Optional[str] = typer.Option(
        None, "--view", "-v", help="grid | list (defaults to saved preference)"
    ),
    show_all: bool = typer.Option(
        False, "--all", "-a", help="List every use case, ignoring filters (not remembered)"
    ),
):
    """
    List use cases matching a goal, timeline and industry.

    Searches with at least one criterion are remembered as recent searches.
    Passing --sort or --view also stores it as the new preference. A --link
    from `manage_saved.py recent` reopens that search; explicit options
    override its values.

    Examples:\n

        $ explore.py list                                       # Everything, saved sort order

        $ explore.py list --goal work-faster --timeline quick-wins

        $ explore.py list --industry Banking --sort recent --view list

        $ explore.py list --link '/?goal=work-better&industry=Banking'

        $ explore.py list --all                                 # Browse all, no filters
    """
    _check_choice(goal, Goal.values(), "goal")
    _check_choice(timeline, Timeline.values(), "timeline")
    _check_choice(sort, set(SORT_KEYS), "sort order")
    _check_choice(view, VIEWS, "view")

    criteria = parse_link(link) if link else SearchCriteria()
    overrides = {
        key: value
        for key, value in (("goal", goal), ("timeline", timeline), ("industry", industry))
        if value is not None
    }
    criteria = replace(criteria, **overrides)
    show_all = show_all or criteria.view == ALL_VIEW

    setup_targeting_logger(LOGS_PATH, view="explore", console_level="WARNING")
    catalog, matcher = _load_catalog()
    container = StateContainer(StateStore())

    if sort or view:
        container.dispatch(SetPreferences(view=view, sort=sort))
    preferences = container.state.preferences

    if show_all:
        matches = list(catalog.use_cases)
    else:
        if not criteria.is_empty:
            container.dispatch(
                AddRecentSearch(
                    SearchQuery(
                        goal=criteria.goal,
                        timeline=criteria.timeline,
                        industry=criteria.industry,
                        timestamp=now_exact(),
                    )
                )
            )
        matches = filter_opportunities(
            catalog.use_cases,
            matcher,
            goal=criteria.goal,
            timeline=criteria.timeline,
            industry=criteria.industry,
        )
    matches = sort_opportunities(matches, preferences.sort, matcher)

    if show_all:
        link = f"/?view={ALL_VIEW}"
    else:
        link = build_query_string(criteria.goal, criteria.timeline, criteria.industry)
    typer.secho(
        f"\n{len(matches)} of {len(catalog)} use cases  ({link})",
        fg=typer.colors.BLUE,
        bold=True,
    )
    if not matches:
        typer.echo("  (none)")
        return

    state = container.state
    if preferences.view == "grid":
        for uc in matches:
            marker = "*" if state.is_saved(uc.id) else " "
            typer.secho(f"\n{marker} {uc.organization}", bold=True)
            typer.echo(
                f"  {uc.industry} | {uc.use_case_category} | {difficulty_level(uc, matcher)}"
            )
            typer.echo(f"  {uc.specific_application}")
            for result in uc.summary_results():
                typer.echo(f"    - {format_result(result, style='markdown')}")
            typer.echo(f"  id: {uc.id}")
        return

    table = TableFormatter(
        [
            Column("", 1),
            Column("Organization", 26),
            Column("Industry", 20),
            Column("Category", 22),
            Column("Difficulty", 10),
            Column("Metric", 7, align=">"),
            Column("Id", 34),
        ]
    )
    table.add_table_header().add_separator()
    for uc in matches:
        metric = next(filter(None, (extract_metric(r) for r in uc.results)), "")
        table.add_row(
            [
                "*" if state.is_saved(uc.id) else "",
                uc.organization,
                uc.industry,
                uc.use_case_category,
                difficulty_level(uc, matcher),
                metric,
                uc.id,
            ]
        )
    table.add_summary("* saved")
    typer.echo(table.render())


@app.command("advanced")
def advanced_command(
    industry: Optional[List[str]] = typer.Option(
        None, "--industry", "-i", help="Industry to keep (repeatable)"
    ),
    sector: Optional[List[str]] = typer.Option(
        None, "--sector", help="Sector to keep (repeatable)"
    ),
    difficulty: str = typer.Option(
        ALL_DIFFICULTIES, "--difficulty", "-d", help="Low | Medium | High | Very High | All"
    ),
    goal: Optional[List[str]] = typer.Option(
        None, "--goal", "-g", help="Goal to match (repeatable)"
    ),
    timeline: Optional[List[str]] = typer.Option(
        None, "--timeline", "-t", help="Timeline to match (repeatable)"
    ),
    search: str = typer.Option(
        "", "--search", "-q", help="Text to find in organization, category or application"
    ),
    sort: str = typer.Option(
        "fit", "--sort", "-s", help="fit | organization | industry | difficulty | timeline"
    ),
):
    """
    Compare use cases with multi-select filters and fit scores.

    Examples:\n

        $ explore.py advanced --industry Banking --industry Payments --sort difficulty

        $ explore.py advanced --goal work-better --timeline transformative --search drug
    """
    goal = goal or []
    timeline = timeline or []
    for value in goal:
        _check_choice(value, Goal.values(), "goal")
    for value in timeline:
        _check_choice(value, Timeline.values(), "timeline")
    _check_choice(difficulty, Difficulty.values() | {ALL_DIFFICULTIES}, "difficulty")
    _check_choice(sort, set(EXPLORER_SORT_KEYS), "sort order")

    setup_targeting_logger(LOGS_PATH, view="advanced", console_level="WARNING")
    catalog, matcher = _load_catalog()

    query = ExplorerQuery(
        industries=tuple(industry or ()),
        sectors=tuple(sector or ()),
        difficulty=difficulty,
        goals=tuple(goal),
        timelines=tuple(timeline),
        search_term=search,
        sort_by=sort,
    )
    rows = explore(catalog.use_cases, query, matcher)

    table = TableFormatter(
        [
            Column("Fit", 4, align=">"),
            Column("Organization", 26),
            Column("Industry", 20),
            Column("Sector", 16),
            Column("Difficulty", 10),
            Column("Timeline", 12),
        ]
    )
    table.add_section_header(f"Advanced explorer: {len(rows)} of {len(catalog)} use cases")
    table.add_table_header().add_separator()
    for row in rows:
        table.add_row(
            [
                row.fit_score,
                row.use_case.organization,
                row.use_case.industry,
                row.use_case.sector,
                row.difficulty,
                row.timeline,
            ]
        )
    typer.echo(table.render())


@app.command("show")
def show_command(
    use_case_id: str = typer.Argument(..., help="Use case id (e.g., klarna-customer-service)"),
):
    """
    Show the full profile of one use case.

    Examples:\n

        $ explore.py show klarna-customer-service
    """
    setup_targeting_logger(LOGS_PATH, view="case", console_level="WARNING")
    catalog, matcher = _load_catalog()

    profile = build_case_profile(use_case_id, catalog, matcher)
    if profile is None:
        typer.secho(f"Use case '{use_case_id}' not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    uc = profile.use_case
    typer.secho(f"\n{uc.organization}: {uc.specific_application}", fg=typer.colors.BLUE, bold=True)
    typer.echo(f"  {uc.sector} | {uc.industry} | {uc.use_case_category}")
    if uc.last_reviewed:
        typer.echo(f"  Last reviewed: {format_date(uc.last_reviewed)}")

    typer.echo(f"\nChallenge:\n  {uc.challenge}")
    typer.echo(f"\nSolution:\n  {uc.solution}")
    typer.echo("\nResults:")
    for result in uc.results:
        typer.echo(f"  - {format_result(result, style='markdown')}")
    if uc.key_insight:
        typer.echo(f"\nKey insight:\n  {uc.key_insight}")

    typer.echo("\n" + "=" * 80)
    framework_name = profile.framework.intervention_type if profile.framework else "(none)"
    typer.echo(f"Framework:   {framework_name}")
    typer.echo(f"Difficulty:  {profile.difficulty}")
    typer.echo(f"Timeline:    {profile.timeline}")
    typer.echo(f"Investment:  {profile.investment}")
    typer.echo(f"ROI:         {profile.roi_timeline}")

    if profile.success_factors:
        typer.echo("\nSuccess factors:")
        for factor in profile.success_factors:
            typer.echo(f"  - {factor}")
    if profile.common_challenges:
        typer.echo("\nCommon challenges:")
        for challenge in profile.common_challenges:
            typer.echo(f"  - {challenge}")

    typer.echo("\nImplementation roadmap:")
    for phase, step in enumerate(profile.roadmap, start=1):
        typer.echo(f"  {phase}. {step}")

    if profile.related:
        typer.echo("\nRelated use cases:")
        for related in profile.related:
            typer.echo(f"  {related.id:34} {related.organization} ({related.industry})")

    for source in uc.sources:
        typer.echo(f"\nSource: {source.publisher} {source.url}")


@app.command("industries")
def industries_command():
    """
    List the industries present in the catalog with their use case counts.

    Examples:\n

        $ explore.py industries
    """
    setup_targeting_logger(LOGS_PATH, view="explore", console_level="WARNING")
    catalog, _ = _load_catalog()

    typer.secho("\nIndustries", fg=typer.colors.BLUE, bold=True)
    typer.echo("=" * 80)
    for name in catalog.get_industries():
        count = sum(1 for uc in catalog.use_cases if uc.industry == name)
        typer.echo(f"  {name:30} {count}")


if __name__ == "__main__":
    app()
