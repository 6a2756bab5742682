"""
Fit score: an additive heuristic ranking how well a use case suits a user.

Points (each check independent, no early exit):
    +10  industry equals the answered industry
    +5   org size Small and difficulty bucket Low
    +5   org size Medium and difficulty bucket Medium
    +3   org size Large (regardless of difficulty)
    +5   raw framework difficulty contains a label allowed for the timeline
    +8   a result mentions a goal keyword

The maximum is 28; the Large-org path caps at 26.
"""

from dataclasses import dataclass
from typing import Optional

from genai_atlas.contexts.catalog.catalog_data_structure import UseCase
from genai_atlas.contexts.targeting.defaults import (
    GOAL_MATCH_POINTS,
    INDUSTRY_MATCH_POINTS,
    LARGE_ORG_POINTS,
    ORG_SIZE_DIFFICULTY,
    ORG_SIZE_MATCH_POINTS,
    TIMELINE_MATCH_POINTS,
)
from genai_atlas.contexts.targeting.difficulty import difficulty_level
from genai_atlas.contexts.targeting.filters import matches_goal_keywords, matches_timeline
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher


@dataclass(frozen=True)
class Answers:
    """
    Answers collected by the assessment wizard.

    Attributes:
        goal: Goal value or None
        industry: Industry name or None
        org_size: "Small", "Medium", "Large" or None
        timeline: Timeline value or None
    """

    goal: Optional[str] = None
    industry: Optional[str] = None
    org_size: Optional[str] = None
    timeline: Optional[str] = None


def org_size_points(use_case: UseCase, org_size: Optional[str], matcher: FrameworkMatcher) -> int:
    """Org-size part of the fit score, based on the difficulty bucket."""
    if org_size == "Large":
        return LARGE_ORG_POINTS
    preferred_bucket = ORG_SIZE_DIFFICULTY.get(org_size)
    if preferred_bucket and difficulty_level(use_case, matcher) == preferred_bucket:
        return ORG_SIZE_MATCH_POINTS
    return 0


def fit_score(use_case: UseCase, answers: Answers, matcher: FrameworkMatcher) -> int:
    """
    Score a use case against the user's answers.

    Args:
        use_case: Use case to score
        answers: Wizard answers (any field may be None)
        matcher: Framework matcher used for difficulty

    Returns:
        Integer score in [0, 28]
    """
    score = 0

    if answers.industry is not None and use_case.industry == answers.industry:
        score += INDUSTRY_MATCH_POINTS

    score += org_size_points(use_case, answers.org_size, matcher)

    if answers.timeline and matches_timeline(use_case, answers.timeline, matcher):
        score += TIMELINE_MATCH_POINTS

    # Results only; the challenge/solution fallback of the goal filter does not score
    if answers.goal and matches_goal_keywords(use_case, answers.goal):
        score += GOAL_MATCH_POINTS

    return score
