"""
Advanced explorer: multi-select filtering and ranked comparison of all use cases.

Unlike filter_opportunities (one value per criterion), the explorer accepts
several industries, sectors, goals and timelines at once, filters on the
difficulty bucket, supports free-text search, and returns table rows with the
fit score and derived attributes already computed.
"""

from dataclasses import dataclass
from typing import List, Sequence, Tuple

from genai_atlas.contexts.catalog.catalog_data_structure import UseCase
from genai_atlas.contexts.targeting.criteria import require_timeline
from genai_atlas.contexts.targeting.defaults import DIFFICULTY_ORDER, TIMELINE_DIFFICULTY
from genai_atlas.contexts.targeting.difficulty import difficulty_level, timeline_estimate
from genai_atlas.contexts.targeting.filters import matches_goal
from genai_atlas.contexts.targeting.fit_score import Answers, fit_score
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher
from genai_atlas.contexts.targeting.logger import _log_debug

ALL_DIFFICULTIES = "All"
EXPLORER_SORT_KEYS = ("fit", "organization", "industry", "difficulty", "timeline")


@dataclass(frozen=True)
class ExplorerQuery:
    """
    Explorer filter and sort state. Empty selections mean "no filter".

    Attributes:
        industries: Industries to keep
        sectors: Sectors to keep
        difficulty: Difficulty bucket to keep, or "All"
        goals: Goals of which at least one must match
        timelines: Timelines of which at least one must match
        search_term: Case-insensitive text searched in organization, category and application
        sort_by: One of EXPLORER_SORT_KEYS (unknown keys sort by fit)
    """

    industries: Tuple[str, ...] = ()
    sectors: Tuple[str, ...] = ()
    difficulty: str = ALL_DIFFICULTIES
    goals: Tuple[str, ...] = ()
    timelines: Tuple[str, ...] = ()
    search_term: str = ""
    sort_by: str = "fit"


@dataclass(frozen=True)
class ExplorerRow:
    """One explorer result with its derived attributes."""

    use_case: UseCase
    fit_score: int
    difficulty: str
    timeline: str


def _matches_search(use_case: UseCase, term: str) -> bool:
    return (
        term in use_case.organization.lower()
        or term in use_case.use_case_category.lower()
        or term in use_case.specific_application.lower()
    )


def _matches_timeline_bucket(bucket: str, timelines: Sequence[str]) -> bool:
    # Labels are checked against the bucket here, so "transformative" keeps both High and Very High
    return any(
        label in bucket
        for timeline in timelines
        for label in TIMELINE_DIFFICULTY[require_timeline(timeline)]
    )


def _sort_rows(rows: List[ExplorerRow], sort_by: str) -> List[ExplorerRow]:
    if sort_by == "organization":
        return sorted(rows, key=lambda row: row.use_case.organization.casefold())
    if sort_by == "industry":
        return sorted(rows, key=lambda row: row.use_case.industry.casefold())
    if sort_by == "difficulty":
        return sorted(rows, key=lambda row: DIFFICULTY_ORDER.index(row.difficulty))
    if sort_by == "timeline":
        return sorted(rows, key=lambda row: row.timeline)
    return sorted(rows, key=lambda row: row.fit_score, reverse=True)


def explore(
    use_cases: Sequence[UseCase], query: ExplorerQuery, matcher: FrameworkMatcher
) -> List[ExplorerRow]:
    """
    Filter, score and sort use cases for the advanced explorer.

    Fit scores use the first selected goal, industry and timeline, with no org size.

    Args:
        use_cases: All candidate use cases
        query: Explorer filter and sort state
        matcher: Framework matcher

    Returns:
        Sorted list of ExplorerRow
    """
    selected = list(use_cases)

    if query.industries:
        selected = [uc for uc in selected if uc.industry in query.industries]

    if query.sectors:
        selected = [uc for uc in selected if uc.sector in query.sectors]

    if query.difficulty != ALL_DIFFICULTIES:
        selected = [uc for uc in selected if difficulty_level(uc, matcher) == query.difficulty]

    if query.goals:
        selected = [uc for uc in selected if any(matches_goal(uc, goal) for goal in query.goals)]

    if query.timelines:
        selected = [
            uc
            for uc in selected
            if _matches_timeline_bucket(difficulty_level(uc, matcher), query.timelines)
        ]

    term = query.search_term.strip().lower()
    if term:
        selected = [uc for uc in selected if _matches_search(uc, term)]

    answers = Answers(
        goal=query.goals[0] if query.goals else None,
        industry=query.industries[0] if query.industries else None,
        org_size=None,
        timeline=query.timelines[0] if query.timelines else None,
    )

    rows = [
        ExplorerRow(
            use_case=uc,
            fit_score=fit_score(uc, answers, matcher),
            difficulty=difficulty_level(uc, matcher),
            timeline=timeline_estimate(uc, matcher),
        )
        for uc in selected
    ]

    _log_debug(f"Explorer kept {len(rows)}/{len(use_cases)} use cases, sorted by {query.sort_by}")
    return _sort_rows(rows, query.sort_by)
