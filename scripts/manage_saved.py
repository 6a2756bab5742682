#!/usr/bin/env python3
"""
Command-line interface for saved opportunities, recent searches and preferences.

State is kept in ATLAS_STATE_PATH (outs/state/atlas_state.json by default).

Commands:
    save    - Save a use case
    remove  - Remove a saved use case
    list    - List saved use cases
    recent  - Show recent searches
    prefs   - Show or update listing preferences
"""

import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv

from genai_atlas.contexts.catalog import InvalidCatalogError, load_default_catalog
from genai_atlas.contexts.state import (
    RemoveOpportunity,
    SaveOpportunity,
    SetPreferences,
    StateContainer,
    StateStore,
)
from genai_atlas.contexts.targeting.criteria import VIEWS, build_query_string
from genai_atlas.contexts.targeting.filters import SORT_KEYS
from genai_atlas.utils.logger import setup_logger
from genai_atlas.utils.timestamp import format_timestamp

load_dotenv()
LOGS_PATH = Path(os.getenv("LOGS_PATH", "outs/logs"))

app = typer.Typer(
    add_completion=False,
    help="Manage saved opportunities and preferences",
    invoke_without_command=True,
)


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()
    setup_logger(context_name="state", log_dir=LOGS_PATH, console_level="WARNING")


def _load_catalog():
    try:
        return load_default_catalog()
    except (FileNotFoundError, InvalidCatalogError) as e:
        typer.secho(f"Error loading catalog: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("save")
def save_command(use_case_id: str = typer.Argument(..., help="Use case id to save")):
    """
    Save a use case. Saving an already saved use case changes nothing.

    Examples:\n

        $ manage_saved.py save klarna-customer-service
    """
    catalog = _load_catalog()
    if catalog.get_use_case_by_id(use_case_id) is None:
        typer.secho(f"Use case '{use_case_id}' not found", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    container = StateContainer(StateStore())
    if container.state.is_saved(use_case_id):
        typer.secho(f"'{use_case_id}' is already saved", fg=typer.colors.YELLOW)
        return

    container.dispatch(SaveOpportunity(use_case_id))
    typer.secho(f"✓ Saved {use_case_id}", fg=typer.colors.GREEN)


@app.command("remove")
def remove_command(use_case_id: str = typer.Argument(..., help="Use case id to remove")):
    """
    Remove a saved use case.

    Examples:\n

        $ manage_saved.py remove klarna-customer-service
    """
    container = StateContainer(StateStore())
    if not container.state.is_saved(use_case_id):
        typer.secho(f"'{use_case_id}' is not saved", fg=typer.colors.YELLOW)
        return

    container.dispatch(RemoveOpportunity(use_case_id))
    typer.secho(f"✓ Removed {use_case_id}", fg=typer.colors.GREEN)


@app.command("list")
def list_command():
    """
    List saved use cases in the order they were saved.

    Examples:\n

        $ manage_saved.py list
    """
    state = StateContainer(StateStore()).state
    typer.secho("\nSaved use cases:", fg=typer.colors.BLUE, bold=True)
    if not state.saved_opportunities:
        typer.echo("  (none)")
        return

    catalog = _load_catalog()
    for use_case_id in state.saved_opportunities:
        uc = catalog.get_use_case_by_id(use_case_id)
        label = f"{uc.organization} ({uc.industry})" if uc else "(no longer in catalog)"
        typer.echo(f"  {use_case_id:34} {label}")

    typer.echo(f"\nTotal: {len(state.saved_opportunities)}")


@app.command("recent")
def recent_command():
    """
    Show recent searches, newest first.

    Each link reopens its search with `explore.py list --link LINK`.

    Examples:\n

        $ manage_saved.py recent
    """
    state = StateContainer(StateStore()).state
    typer.secho("\nRecent searches:", fg=typer.colors.BLUE, bold=True)
    if not state.recent_searches:
        typer.echo("  (none)")
        return

    for query in state.recent_searches:
        link = build_query_string(query.goal, query.timeline, query.industry)
        typer.echo(f"  {format_timestamp(query.timestamp, relative=True):>10}  {link}")


@app.command("prefs")
def prefs_command(
    view: Optional[str] = typer.Option(None, "--view", "-v", help="grid | list"),
    sort: Optional[str] = typer.Option(
        None, "--sort", "-s", help="difficulty | industry | recent"
    ),
):
    """
    Show listing preferences, or update them when options are given.

    Examples:\n

        $ manage_saved.py prefs                  # Show current preferences

        $ manage_saved.py prefs --view list      # Switch to list view
    """
    if view is not None and view not in VIEWS:
        typer.secho(
            f"Error: Unknown view '{view}'. Available: {', '.join(sorted(VIEWS))}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)
    if sort is not None and sort not in SORT_KEYS:
        typer.secho(
            f"Error: Unknown sort order '{sort}'. Available: {', '.join(SORT_KEYS)}",
            fg=typer.colors.RED,
            err=True,
        )
        raise typer.Exit(code=1)

    container = StateContainer(StateStore())
    if view or sort:
        container.dispatch(SetPreferences(view=view, sort=sort))

    preferences = container.state.preferences
    typer.echo(f"View: {preferences.view}")
    typer.echo(f"Sort: {preferences.sort}")


if __name__ == "__main__":
    app()
