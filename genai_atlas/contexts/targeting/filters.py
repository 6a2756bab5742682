"""
Opportunity filtering, sorting and related-case lookup.

All functions are pure: they never mutate their inputs and return new lists
that preserve the original relative order unless a sort is requested.
"""

from typing import List, Optional, Sequence

from genai_atlas.contexts.catalog.catalog_data_structure import UseCase
from genai_atlas.contexts.targeting.criteria import require_goal, require_timeline
from genai_atlas.contexts.targeting.defaults import (
    ALL_INDUSTRIES,
    DEFAULT_RELATED_LIMIT,
    DIFFICULTY_ORDER,
    GOAL_FALLBACK_TERM,
    GOAL_KEYWORDS,
    TIMELINE_DIFFICULTY,
)
from genai_atlas.contexts.targeting.difficulty import raw_difficulty
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher
from genai_atlas.contexts.targeting.logger import _log_debug

SORT_KEYS = ("difficulty", "industry", "recent")


# ============================================================================
# Predicates
# ============================================================================


def matches_goal_keywords(use_case: UseCase, goal: str) -> bool:
    """Check if any result mentions any keyword of the goal (case-insensitive)."""
    keywords = [keyword.lower() for keyword in GOAL_KEYWORDS[require_goal(goal)]]
    return any(
        keyword in result.lower() for result in use_case.results for keyword in keywords
    )


def matches_goal(use_case: UseCase, goal: str) -> bool:
    """
    Goal filter predicate.

    A use case passes when its results mention a goal keyword, or when its
    challenge or solution mentions "time" at all. The second clause ignores
    the selected goal, so it admits extra cases for every goal.
    """
    if matches_goal_keywords(use_case, goal):
        return True
    return (
        GOAL_FALLBACK_TERM in use_case.challenge.lower()
        or GOAL_FALLBACK_TERM in use_case.solution.lower()
    )


def matches_timeline(use_case: UseCase, timeline: str, matcher: FrameworkMatcher) -> bool:
    """
    Timeline filter predicate.

    Checks the raw framework difficulty text (not the bucket) against the
    labels allowed for the timeline. Use cases with no matching framework fail.
    """
    allowed_labels = TIMELINE_DIFFICULTY[require_timeline(timeline)]
    difficulty = raw_difficulty(use_case, matcher)
    if difficulty is None:
        return False
    return any(label in difficulty for label in allowed_labels)


# ============================================================================
# Filtering
# ============================================================================


def filter_opportunities(
    use_cases: Sequence[UseCase],
    matcher: FrameworkMatcher,
    goal: Optional[str] = None,
    timeline: Optional[str] = None,
    industry: Optional[str] = None,
) -> List[UseCase]:
    """
    Filter use cases by goal, timeline and industry.

    Each criterion is optional and applied only when given; all given
    criteria must hold. Industry is an exact match and the value "All"
    disables it.

    Args:
        use_cases: Use cases to filter
        matcher: Framework matcher used for timeline filtering
        goal: One of the goal values, or None
        timeline: One of the timeline values, or None
        industry: Industry name, "All", or None

    Returns:
        Matching use cases in their original order

    Raises:
        ValueError: If goal or timeline is not a known value
    """
    filtered = list(use_cases)

    if goal:
        filtered = [uc for uc in filtered if matches_goal(uc, goal)]

    if timeline:
        filtered = [uc for uc in filtered if matches_timeline(uc, timeline, matcher)]

    if industry and industry != ALL_INDUSTRIES:
        filtered = [uc for uc in filtered if uc.industry == industry]

    _log_debug(
        f"filter goal={goal} timeline={timeline} industry={industry}: "
        f"{len(filtered)}/{len(use_cases)} use cases"
    )
    return filtered


# ============================================================================
# Sorting
# ============================================================================


def difficulty_rank(use_case: UseCase, matcher: FrameworkMatcher) -> int:
    """
    Sort rank of a use case's raw difficulty.

    Position of the first label in DIFFICULTY_ORDER contained in the raw text,
    or -1 when there is no framework or no label matches (those sort first).
    Because "Very High" contains "High", it shares rank 2 with "High".
    """
    difficulty = raw_difficulty(use_case, matcher)
    if difficulty is None:
        return -1
    for index, label in enumerate(DIFFICULTY_ORDER):
        if label in difficulty:
            return index
    return -1


def sort_opportunities(
    use_cases: Sequence[UseCase], sort_by: str, matcher: FrameworkMatcher
) -> List[UseCase]:
    """
    Sort use cases for display.

    Args:
        use_cases: Use cases to sort
        sort_by: "difficulty" (easiest first), "industry" (A-Z, case-insensitive),
                 "recent" (most recently reviewed first); anything else keeps order
        matcher: Framework matcher used for difficulty sorting

    Returns:
        New sorted list; ties keep their original relative order
    """
    if sort_by == "difficulty":
        return sorted(use_cases, key=lambda uc: difficulty_rank(uc, matcher))

    if sort_by == "industry":
        return sorted(use_cases, key=lambda uc: uc.industry.casefold())

    if sort_by == "recent":
        # Records without a review date go last
        dated = [uc for uc in use_cases if uc.last_reviewed is not None]
        undated = [uc for uc in use_cases if uc.last_reviewed is None]
        return sorted(dated, key=lambda uc: uc.last_reviewed, reverse=True) + undated

    return list(use_cases)


# ============================================================================
# Related cases
# ============================================================================


def related_cases(
    current: UseCase, all_cases: Sequence[UseCase], limit: int = DEFAULT_RELATED_LIMIT
) -> List[UseCase]:
    """
    Other use cases sharing the current one's industry or category.

    Args:
        current: Use case being viewed
        all_cases: All use cases, in dataset order
        limit: Maximum number of related cases

    Returns:
        Up to limit use cases in dataset order, never including current
    """
    related = [
        uc
        for uc in all_cases
        if uc.id != current.id
        and (uc.industry == current.industry or uc.use_case_category == current.use_case_category)
    ]
    return related[: max(limit, 0)]
