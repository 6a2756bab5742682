"""
Assessment recommendations.

The assessment wizard asks for a goal, an industry with an org size, and a
timeline, then recommends the best-fitting use cases. Next to every option it
shows how many use cases would remain if that option were chosen.
"""

from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Sequence

from genai_atlas.contexts.catalog.catalog_data_structure import UseCase
from genai_atlas.contexts.targeting.criteria import Goal, OrgSize, Timeline
from genai_atlas.contexts.targeting.defaults import DEFAULT_RECOMMENDATION_LIMIT
from genai_atlas.contexts.targeting.filters import filter_opportunities
from genai_atlas.contexts.targeting.fit_score import Answers, fit_score
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher
from genai_atlas.contexts.targeting.logger import _log_debug


@dataclass(frozen=True)
class ScoredCase:
    """A use case paired with its fit score."""

    use_case: UseCase
    fit_score: int


def _passing_cases(
    use_cases: Sequence[UseCase], answers: Answers, matcher: FrameworkMatcher
) -> List[UseCase]:
    return filter_opportunities(
        use_cases,
        matcher,
        goal=answers.goal,
        timeline=answers.timeline,
        industry=answers.industry,
    )


def recommend(
    use_cases: Sequence[UseCase],
    answers: Answers,
    matcher: FrameworkMatcher,
    limit: int = DEFAULT_RECOMMENDATION_LIMIT,
) -> List[ScoredCase]:
    """
    Recommend the best-fitting use cases for a set of answers.

    Use cases must first pass filter_opportunities with the answers' goal,
    timeline and industry; survivors are ranked by fit score (highest first,
    ties in dataset order).

    Args:
        use_cases: Candidate use cases
        answers: Wizard answers
        matcher: Framework matcher
        limit: Maximum number of recommendations

    Returns:
        Up to limit ScoredCase entries
    """
    scored = [
        ScoredCase(use_case=uc, fit_score=fit_score(uc, answers, matcher))
        for uc in _passing_cases(use_cases, answers, matcher)
    ]
    ranked = sorted(scored, key=lambda entry: entry.fit_score, reverse=True)
    _log_debug(f"Ranked {len(ranked)} candidate(s) for {answers}")
    return ranked[: max(limit, 0)]


def goal_match_counts(
    use_cases: Sequence[UseCase], answers: Answers, matcher: FrameworkMatcher
) -> Dict[str, int]:
    """Number of use cases left for each goal, keeping the other answers."""
    return {
        goal: len(_passing_cases(use_cases, replace(answers, goal=goal), matcher))
        for goal in sorted(Goal.values())
    }


def timeline_match_counts(
    use_cases: Sequence[UseCase], answers: Answers, matcher: FrameworkMatcher
) -> Dict[str, int]:
    """Number of use cases left for each timeline, keeping the other answers."""
    return {
        timeline: len(_passing_cases(use_cases, replace(answers, timeline=timeline), matcher))
        for timeline in sorted(Timeline.values())
    }


def industry_match_counts(
    use_cases: Sequence[UseCase],
    answers: Answers,
    matcher: FrameworkMatcher,
    industries: Iterable[str],
) -> Dict[str, int]:
    """Number of use cases left for each industry, keeping the other answers."""
    return {
        industry: len(_passing_cases(use_cases, replace(answers, industry=industry), matcher))
        for industry in industries
    }


def org_size_match_counts(
    use_cases: Sequence[UseCase], answers: Answers, matcher: FrameworkMatcher
) -> Dict[str, int]:
    """
    Number of use cases that pass the filters and score above zero for each org size.

    Org size is not a filter criterion, so a positive fit score stands in for "matches".
    """
    passing = _passing_cases(use_cases, answers, matcher)
    counts = {}
    for org_size in (OrgSize.SMALL, OrgSize.MEDIUM, OrgSize.LARGE):
        sized = replace(answers, org_size=org_size)
        counts[org_size] = sum(1 for uc in passing if fit_score(uc, sized, matcher) > 0)
    return counts
