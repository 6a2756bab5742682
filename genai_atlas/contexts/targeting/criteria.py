"""
Search criteria vocabulary and navigational query parameters.

Goals, timelines, org sizes and difficulty buckets are small closed
vocabularies. Query parameters (goal, timeline, industry, view) seed filter
state from deep links such as the ones recent searches point back to.
Values outside their vocabulary are dropped rather than rejected.
"""

from dataclasses import dataclass
from typing import Mapping, Optional, Set
from urllib.parse import parse_qs, urlencode, urlsplit

from genai_atlas.contexts.targeting.defaults import (
    DIFFICULTY_ORDER,
    GOAL_KEYWORDS,
    TIMELINE_DIFFICULTY,
)


class Goal:
    """Enum-like class for the user's stated priority"""

    WORK_FASTER = "work-faster"
    WORK_BETTER = "work-better"
    WORK_AT_SCALE = "work-at-scale"

    @classmethod
    def values(cls) -> Set[str]:
        return set(GOAL_KEYWORDS)


class Timeline:
    """Enum-like class for the user's time horizon"""

    QUICK_WINS = "quick-wins"
    BALANCED = "balanced"
    TRANSFORMATIVE = "transformative"

    @classmethod
    def values(cls) -> Set[str]:
        return set(TIMELINE_DIFFICULTY)


class OrgSize:
    """Enum-like class for organization size"""

    SMALL = "Small"
    MEDIUM = "Medium"
    LARGE = "Large"

    @classmethod
    def values(cls) -> Set[str]:
        return {cls.SMALL, cls.MEDIUM, cls.LARGE}


class Difficulty:
    """Enum-like class for difficulty buckets"""

    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    VERY_HIGH = "Very High"

    @classmethod
    def values(cls) -> Set[str]:
        return set(DIFFICULTY_ORDER)


# Persisted layout preferences. "all" is navigational only: it lists every use
# case for one request and is never stored.
VIEWS = {"grid", "list"}
ALL_VIEW = "all"


def require_goal(goal: str) -> str:
    """Return goal unchanged, or raise ValueError if it is not a known goal."""
    if goal not in GOAL_KEYWORDS:
        raise ValueError(f"Unknown goal '{goal}'. Available: {sorted(GOAL_KEYWORDS)}")
    return goal


def require_timeline(timeline: str) -> str:
    """Return timeline unchanged, or raise ValueError if it is not a known timeline."""
    if timeline not in TIMELINE_DIFFICULTY:
        raise ValueError(
            f"Unknown timeline '{timeline}'. Available: {sorted(TIMELINE_DIFFICULTY)}"
        )
    return timeline


@dataclass(frozen=True)
class SearchCriteria:
    """Filter state seeded from query parameters."""

    goal: Optional[str] = None
    timeline: Optional[str] = None
    industry: Optional[str] = None
    view: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not (self.goal or self.timeline or self.industry)


def _first(value) -> Optional[str]:
    """Query values may arrive as a list (repeated parameter); keep the first string."""
    if isinstance(value, (list, tuple)):
        value = value[0] if value else None
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def parse_query_params(params: Mapping) -> SearchCriteria:
    """
    Build SearchCriteria from navigational query parameters.

    Only enum membership is checked: goal, timeline and view outside their
    vocabulary become None. Industry is free text and kept as given.

    Examples:
        parse_query_params({"goal": "work-faster", "timeline": "someday"})
        # SearchCriteria(goal="work-faster", timeline=None, industry=None, view=None)
    """
    goal = _first(params.get("goal"))
    timeline = _first(params.get("timeline"))
    view = _first(params.get("view"))

    return SearchCriteria(
        goal=goal if goal in Goal.values() else None,
        timeline=timeline if timeline in Timeline.values() else None,
        industry=_first(params.get("industry")),
        view=view if view in VIEWS or view == ALL_VIEW else None,
    )


def build_query_string(
    goal: Optional[str] = None, timeline: Optional[str] = None, industry: Optional[str] = None
) -> str:
    """
    Build the deep link back to a filtered listing.

    Returns "/" when no criteria are set, otherwise "/?goal=...&timeline=...".
    """
    params = {
        key: value
        for key, value in (("goal", goal), ("timeline", timeline), ("industry", industry))
        if value
    }
    return f"/?{urlencode(params)}" if params else "/"


def parse_link(link: str) -> SearchCriteria:
    """Parse a deep link such as "/?goal=work-faster&industry=Banking"."""
    return parse_query_params(parse_qs(urlsplit(link).query))
