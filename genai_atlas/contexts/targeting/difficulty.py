"""
Difficulty, timeline, investment and ROI derivation.

Every value here is derived from a use case's matched framework and
recomputed on demand; nothing is stored. Use cases without a matching
framework (or whose framework has no difficulty text) fall back to Medium.

Two views of difficulty exist side by side:
- raw difficulty: the framework's free text ("Low to Medium"), used by
  timeline filtering and difficulty sorting
- difficulty bucket: one of Low / Medium / High / Very High, used for display,
  the derived lookups and the org-size part of the fit score
"""

from typing import Optional

from genai_atlas.contexts.catalog.catalog_data_structure import UseCase
from genai_atlas.contexts.targeting.defaults import (
    DEFAULT_DIFFICULTY,
    INVESTMENT_LEVELS,
    ROI_TIMELINES,
    TIMELINE_ESTIMATES,
)
from genai_atlas.contexts.targeting.framework_matcher import FrameworkMatcher


def raw_difficulty(use_case: UseCase, matcher: FrameworkMatcher) -> Optional[str]:
    """
    Raw difficulty text of the use case's matched framework.

    Returns:
        Framework difficulty_level text, or None if no framework matches or the text is empty
    """
    framework = matcher.match(use_case)
    if framework is None or not framework.difficulty_level:
        return None
    return framework.difficulty_level


def classify_difficulty(difficulty_text: Optional[str]) -> str:
    """
    Map free-text difficulty to a bucket.

    Precedence: "Very High" > "High" > "Medium" > anything else (Low).
    Order matters because "Very High" contains "High" and compound values
    such as "Medium to High" contain several labels.

    Args:
        difficulty_text: Raw difficulty text (None or empty means unknown)

    Returns:
        One of "Low", "Medium", "High", "Very High"
    """
    if not difficulty_text:
        return DEFAULT_DIFFICULTY
    if "Very High" in difficulty_text:
        return "Very High"
    if "High" in difficulty_text:
        return "High"
    if "Medium" in difficulty_text:
        return "Medium"
    return "Low"


def difficulty_level(use_case: UseCase, matcher: FrameworkMatcher) -> str:
    """Difficulty bucket of a use case; never None."""
    return classify_difficulty(raw_difficulty(use_case, matcher))


def timeline_estimate(use_case: UseCase, matcher: FrameworkMatcher) -> str:
    """Implementation timeline estimate (e.g., "6-12 months")."""
    return TIMELINE_ESTIMATES[difficulty_level(use_case, matcher)]


def investment_level(use_case: UseCase, matcher: FrameworkMatcher) -> str:
    """Investment level estimate (e.g., "Medium-High")."""
    return INVESTMENT_LEVELS[difficulty_level(use_case, matcher)]


def roi_timeline(use_case: UseCase, matcher: FrameworkMatcher) -> str:
    """Window in which ROI is typically seen (e.g., "18-24 months")."""
    return ROI_TIMELINES[difficulty_level(use_case, matcher)]
