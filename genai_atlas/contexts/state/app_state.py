"""
Client state: saved opportunities, recent searches and view preferences.

State values are immutable. Every change goes through apply_action(), which
returns a new AppState (or the same object when nothing changes).

Invariants:
- saved_opportunities holds no duplicates (saving twice is a no-op)
- recent_searches is newest first and holds at most MAX_RECENT_SEARCHES entries
"""

from dataclasses import dataclass, replace
from typing import Any, Dict, Optional, Tuple, Union

MAX_RECENT_SEARCHES = 5

DEFAULT_VIEW = "grid"
DEFAULT_SORT = "difficulty"


@dataclass(frozen=True)
class SearchQuery:
    """A search the user ran, remembered for quick re-use."""

    goal: Optional[str]
    timeline: Optional[str]
    industry: Optional[str] = None
    timestamp: str = ""

    def to_dict(self) -> Dict[str, Any]:
        data = {"goal": self.goal, "timeline": self.timeline, "timestamp": self.timestamp}
        if self.industry is not None:
            data["industry"] = self.industry
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "SearchQuery":
        return cls(
            goal=data.get("goal"),
            timeline=data.get("timeline"),
            industry=data.get("industry"),
            timestamp=str(data.get("timestamp", "")),
        )


@dataclass(frozen=True)
class Preferences:
    """Listing preferences."""

    view: str = DEFAULT_VIEW
    sort: str = DEFAULT_SORT


@dataclass(frozen=True)
class AppState:
    """
    Complete persisted client state.

    Attributes:
        saved_opportunities: Saved use case ids, in the order they were saved
        recent_searches: Recent searches, newest first
        preferences: View and sort preferences
    """

    saved_opportunities: Tuple[str, ...] = ()
    recent_searches: Tuple[SearchQuery, ...] = ()
    preferences: Preferences = Preferences()

    def is_saved(self, use_case_id: str) -> bool:
        return use_case_id in self.saved_opportunities

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the persisted key names."""
        return {
            "savedOpportunities": list(self.saved_opportunities),
            "recentSearches": [query.to_dict() for query in self.recent_searches],
            "preferences": {"view": self.preferences.view, "sort": self.preferences.sort},
        }


# ============================================================================
# Actions
# ============================================================================


@dataclass(frozen=True)
class SaveOpportunity:
    use_case_id: str


@dataclass(frozen=True)
class RemoveOpportunity:
    use_case_id: str


@dataclass(frozen=True)
class AddRecentSearch:
    query: SearchQuery


@dataclass(frozen=True)
class SetPreferences:
    """Partial preference update; None fields are left unchanged."""

    view: Optional[str] = None
    sort: Optional[str] = None


Action = Union[SaveOpportunity, RemoveOpportunity, AddRecentSearch, SetPreferences]


def apply_action(state: AppState, action: Action) -> AppState:
    """
    Apply one action to a state value.

    Args:
        state: Current state
        action: Action to apply

    Returns:
        New AppState, or state itself when the action changes nothing

    Raises:
        TypeError: If action is not a known action type
    """
    if isinstance(action, SaveOpportunity):
        if state.is_saved(action.use_case_id):
            return state
        return replace(
            state, saved_opportunities=state.saved_opportunities + (action.use_case_id,)
        )

    if isinstance(action, RemoveOpportunity):
        if not state.is_saved(action.use_case_id):
            return state
        return replace(
            state,
            saved_opportunities=tuple(
                saved_id for saved_id in state.saved_opportunities if saved_id != action.use_case_id
            ),
        )

    if isinstance(action, AddRecentSearch):
        recent = (action.query,) + state.recent_searches
        return replace(state, recent_searches=recent[:MAX_RECENT_SEARCHES])

    if isinstance(action, SetPreferences):
        changes = {
            key: value
            for key, value in (("view", action.view), ("sort", action.sort))
            if value is not None
        }
        if not changes:
            return state
        return replace(state, preferences=replace(state.preferences, **changes))

    raise TypeError(f"Unknown action type: {type(action).__name__}")


def state_from_dict(data: Dict[str, Any]) -> AppState:
    """
    Rebuild state from its persisted form.

    Saved ids are replayed through SaveOpportunity so duplicates collapse,
    recent searches are re-capped, and missing preferences take defaults.

    Raises:
        TypeError: If the data does not have the persisted shape
    """
    if not isinstance(data, dict):
        raise TypeError(f"Persisted state must be an object, got {type(data).__name__}")

    saved = data.get("savedOpportunities") or []
    searches = data.get("recentSearches") or []
    preferences = data.get("preferences") or {}
    if not isinstance(saved, list) or not isinstance(searches, list):
        raise TypeError("savedOpportunities and recentSearches must be lists")
    if not isinstance(preferences, dict):
        raise TypeError("preferences must be an object")

    state = AppState(
        recent_searches=tuple(SearchQuery.from_dict(q) for q in searches)[:MAX_RECENT_SEARCHES],
        preferences=Preferences(
            view=preferences.get("view") or DEFAULT_VIEW,
            sort=preferences.get("sort") or DEFAULT_SORT,
        ),
    )
    for use_case_id in saved:
        state = apply_action(state, SaveOpportunity(str(use_case_id)))
    return state
