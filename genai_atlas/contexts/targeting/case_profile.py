"""
Case profile: everything the detail view of a single use case shows.

Bundles the use case with its matched framework, derived difficulty /
timeline / investment / ROI, framework success factors and challenges, a
three-phase implementation roadmap and related use cases.
"""

from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from genai_atlas.contexts.catalog.catalog import Catalog
from genai_atlas.contexts.catalog.catalog_data_structure import Framework, UseCase
from genai_atlas.contexts.targeting.defaults import DEFAULT_RELATED_LIMIT, SUMMARY_RESULT_COUNT
from genai_atlas.contexts.targeting.difficulty import (
    difficulty_level,
    investment_level,
    roi_timeline,
    timeline_estimate,
)
from genai_atlas.contexts.targeting.filters import related_cases
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher

GENERIC_ROADMAP = (
    "Document the current workflow and identify high-volume tasks that create the most friction.",
    "Pilot a GenAI solution with a focused team, capturing metrics that prove business value.",
    "Scale the deployment with change management, training, and continuous monitoring.",
)


@dataclass(frozen=True)
class CaseProfile:
    """Detail view of one use case."""

    use_case: UseCase
    framework: Optional[Framework]
    difficulty: str
    timeline: str
    investment: str
    roi_timeline: str
    headline_results: Tuple[str, ...]
    success_factors: List[str] = field(default_factory=list)
    common_challenges: List[str] = field(default_factory=list)
    roadmap: List[str] = field(default_factory=list)
    related: List[UseCase] = field(default_factory=list)


def build_implementation_roadmap(framework: Optional[Framework]) -> List[str]:
    """
    Three implementation phases, phrased from the framework when there is one.

    Args:
        framework: Matched framework, or None

    Returns:
        Three roadmap steps (generic steps when framework is None)
    """
    if framework is None:
        return list(GENERIC_ROADMAP)

    return [
        "Document processes and gather high-quality training data, a prerequisite for "
        f"{framework.value_proposition.lower()}.",
        f"Launch a pilot to reach time-to-value in {framework.time_to_value.lower()}, "
        f"validating the {framework.sub_category.lower()} approach.",
        f"Invest {framework.investment_level.lower()} to scale and track ROI within "
        f"{framework.ROI_timeline.lower()}.",
    ]


def build_case_profile(
    use_case_id: str,
    catalog: Catalog,
    matcher: FrameworkMatcher,
    related_limit: int = DEFAULT_RELATED_LIMIT,
) -> Optional[CaseProfile]:
    """
    Build the detail profile for a use case.

    Args:
        use_case_id: Id of the use case
        catalog: Catalog holding the use case
        matcher: Framework matcher for the catalog's frameworks
        related_limit: Maximum number of related cases

    Returns:
        CaseProfile, or None if no use case has this id
    """
    use_case = catalog.get_use_case_by_id(use_case_id)
    if use_case is None:
        return None

    framework = matcher.match(use_case)

    return CaseProfile(
        use_case=use_case,
        framework=framework,
        difficulty=difficulty_level(use_case, matcher),
        timeline=timeline_estimate(use_case, matcher),
        investment=investment_level(use_case, matcher),
        roi_timeline=roi_timeline(use_case, matcher),
        headline_results=use_case.summary_results(SUMMARY_RESULT_COUNT),
        success_factors=framework.success_factors() if framework else [],
        common_challenges=framework.challenges() if framework else [],
        roadmap=build_implementation_roadmap(framework),
        related=related_cases(use_case, catalog.use_cases, related_limit),
    )
