"""
Integration tests for the command-line scripts.

Scripts live outside the package, so they are loaded from their files. Logs
and state are redirected into tmp_path.
"""

import importlib.util
import json
from pathlib import Path

import pytest
from loguru import logger
from typer.testing import CliRunner

from genai_atlas.contexts.state import state_store

SCRIPTS_PATH = Path(__file__).resolve().parents[2] / "scripts"

runner = CliRunner()


def _load_script(name):
    spec = importlib.util.spec_from_file_location(f"{name}_cli", SCRIPTS_PATH / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


@pytest.fixture
def state_path(tmp_path, monkeypatch):
    path = tmp_path / "state" / "atlas_state.json"
    monkeypatch.setattr(state_store, "ATLAS_STATE_PATH", path)
    yield path
    # Scripts bind a console sink to the runner's stream
    logger.remove()


@pytest.fixture
def script(tmp_path, monkeypatch, state_path):
    def _get(name):
        module = _load_script(name)
        monkeypatch.setattr(module, "LOGS_PATH", tmp_path / "logs")
        return module

    return _get


# ============================================================================
# explore.py
# ============================================================================


@pytest.mark.integration
def test_explore_list_table(script, state_path):
    explore = script("explore")
    result = runner.invoke(explore.app, ["list", "--goal", "work-at-scale", "--view", "list"])

    assert result.exit_code == 0, result.output
    assert "klarna-customer-service" in result.output
    assert "/?goal=work-at-scale" in result.output

    saved = json.loads(state_path.read_text())
    assert saved["recentSearches"][0]["goal"] == "work-at-scale"
    assert saved["preferences"]["view"] == "list"


@pytest.mark.integration
def test_explore_list_grid(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["list", "--industry", "Banking", "--view", "grid"])

    assert result.exit_code == 0, result.output
    assert "JPMorgan Chase" in result.output
    assert "id: jpmorgan-payment-validation" in result.output
    assert "Klarna" not in result.output


@pytest.mark.integration
def test_explore_list_without_criteria_not_remembered(script, state_path):
    explore = script("explore")
    result = runner.invoke(explore.app, ["list"])

    assert result.exit_code == 0, result.output
    assert "21 of 21 use cases" in result.output
    assert not state_path.exists()


@pytest.mark.integration
def test_explore_list_all_is_not_persisted(script, state_path):
    """--all lists everything once; later filtered runs still filter."""
    explore = script("explore")
    result = runner.invoke(explore.app, ["list", "--all", "--industry", "Banking"])
    assert result.exit_code == 0, result.output
    assert "21 of 21 use cases  (/?view=all)" in result.output
    assert not state_path.exists()

    result = runner.invoke(explore.app, ["list", "--industry", "Banking", "--view", "list"])
    assert result.exit_code == 0, result.output
    assert "3 of 21 use cases  (/?industry=Banking)" in result.output
    assert "Klarna" not in result.output
    assert json.loads(state_path.read_text())["preferences"]["view"] == "list"


@pytest.mark.integration
def test_explore_list_rejects_all_as_view(script, state_path):
    explore = script("explore")
    result = runner.invoke(explore.app, ["list", "--view", "all"])
    assert result.exit_code == 1
    assert not state_path.exists()


@pytest.mark.integration
def test_explore_list_reopens_link(script, state_path):
    """A recent-search link reopens the search; explicit options override it."""
    explore = script("explore")
    result = runner.invoke(
        explore.app, ["list", "--link", "/?industry=Banking&goal=work-harder", "--view", "list"]
    )
    assert result.exit_code == 0, result.output
    assert "3 of 21 use cases  (/?industry=Banking)" in result.output

    result = runner.invoke(
        explore.app, ["list", "--link", "/?industry=Banking", "--industry", "Payments"]
    )
    assert result.exit_code == 0, result.output
    assert "(/?industry=Payments)" in result.output
    assert json.loads(state_path.read_text())["recentSearches"][0]["industry"] == "Payments"


@pytest.mark.integration
def test_explore_list_link_view_all(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["list", "--link", "/?view=all&industry=Banking"])
    assert result.exit_code == 0, result.output
    assert "21 of 21 use cases" in result.output


@pytest.mark.integration
def test_explore_list_rejects_unknown_goal(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["list", "--goal", "work-harder"])
    assert result.exit_code == 1


@pytest.mark.integration
def test_explore_advanced(script):
    explore = script("explore")
    result = runner.invoke(
        explore.app,
        ["advanced", "--industry", "Banking", "--industry", "Payments", "--sort", "difficulty"],
    )

    assert result.exit_code == 0, result.output
    assert "Advanced explorer: 4 of 21 use cases" in result.output
    assert "Mastercard" in result.output


@pytest.mark.integration
def test_explore_advanced_rejects_unknown_difficulty(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["advanced", "--difficulty", "Extreme"])
    assert result.exit_code == 1


@pytest.mark.integration
def test_explore_show(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["show", "klarna-customer-service"])

    assert result.exit_code == 0, result.output
    assert "Customer Service Automation" in result.output
    assert "Last reviewed: January 15, 2025" in result.output
    assert "Implementation roadmap:" in result.output
    assert "octopus-energy-email" in result.output


@pytest.mark.integration
def test_explore_show_unknown(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["show", "no-such-case"])
    assert result.exit_code == 1


@pytest.mark.integration
def test_explore_industries(script):
    explore = script("explore")
    result = runner.invoke(explore.app, ["industries"])

    assert result.exit_code == 0, result.output
    assert "Financial Services" in result.output


# ============================================================================
# assess.py
# ============================================================================


@pytest.mark.integration
def test_assess_recommendation(script):
    assess = script("assess")
    result = runner.invoke(
        assess.app,
        [
            "--goal",
            "work-at-scale",
            "--industry",
            "Financial Services",
            "--org-size",
            "Large",
            "--timeline",
            "quick-wins",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "klarna-customer-service" in result.output
    assert "26/28" in result.output


@pytest.mark.integration
def test_assess_counts(script):
    assess = script("assess")
    result = runner.invoke(assess.app, ["--goal", "work-faster", "--counts"])

    assert result.exit_code == 0, result.output
    assert "Goals:" in result.output
    assert "Organization sizes:" in result.output
    assert "Timelines:" in result.output


@pytest.mark.integration
def test_assess_no_matches(script):
    assess = script("assess")
    result = runner.invoke(assess.app, ["--industry", "Underwater Basket Weaving"])

    assert result.exit_code == 0, result.output
    assert "No use cases match these answers" in result.output


@pytest.mark.integration
def test_assess_rejects_unknown_org_size(script):
    assess = script("assess")
    result = runner.invoke(assess.app, ["--org-size", "Huge"])
    assert result.exit_code == 1


# ============================================================================
# manage_saved.py
# ============================================================================


@pytest.mark.integration
def test_save_list_remove(script, state_path):
    manage = script("manage_saved")

    result = runner.invoke(manage.app, ["save", "klarna-customer-service"])
    assert result.exit_code == 0, result.output
    assert "Saved klarna-customer-service" in result.output

    result = runner.invoke(manage.app, ["save", "klarna-customer-service"])
    assert "already saved" in result.output
    assert json.loads(state_path.read_text())["savedOpportunities"] == [
        "klarna-customer-service"
    ]

    result = runner.invoke(manage.app, ["list"])
    assert "Klarna (Financial Services)" in result.output

    result = runner.invoke(manage.app, ["remove", "klarna-customer-service"])
    assert result.exit_code == 0, result.output
    assert json.loads(state_path.read_text())["savedOpportunities"] == []


@pytest.mark.integration
def test_save_unknown_case(script, state_path):
    manage = script("manage_saved")
    result = runner.invoke(manage.app, ["save", "no-such-case"])

    assert result.exit_code == 1
    assert not state_path.exists()


@pytest.mark.integration
def test_recent_searches(script):
    explore = script("explore")
    manage = script("manage_saved")

    runner.invoke(explore.app, ["list", "--goal", "work-faster", "--timeline", "quick-wins"])
    result = runner.invoke(manage.app, ["recent"])

    assert result.exit_code == 0, result.output
    assert "/?goal=work-faster&timeline=quick-wins" in result.output


@pytest.mark.integration
def test_prefs(script):
    manage = script("manage_saved")

    result = runner.invoke(manage.app, ["prefs"])
    assert "View: grid" in result.output
    assert "Sort: difficulty" in result.output

    result = runner.invoke(manage.app, ["prefs", "--view", "list", "--sort", "recent"])
    assert result.exit_code == 0, result.output
    assert "View: list" in result.output
    assert "Sort: recent" in result.output


@pytest.mark.integration
def test_prefs_rejects_unknown_view(script):
    manage = script("manage_saved")
    result = runner.invoke(manage.app, ["prefs", "--view", "cards"])
    assert result.exit_code == 1

    result = runner.invoke(manage.app, ["prefs", "--view", "all"])
    assert result.exit_code == 1
