"""
State Context

Responsibilities:
- Represents saved opportunities, recent searches and view preferences
- Applies state transitions through a pure reducer
- Persists state to a local JSON file on a best-effort basis

Owns: AppState, actions, state file format
Never: Reads the dataset or scores use cases
"""

from genai_atlas.contexts.state.app_state import (
    MAX_RECENT_SEARCHES,
    AddRecentSearch,
    AppState,
    Preferences,
    RemoveOpportunity,
    SaveOpportunity,
    SearchQuery,
    SetPreferences,
    apply_action,
    state_from_dict,
)
from genai_atlas.contexts.state.state_store import StateContainer, StateStore

__all__ = [
    "AppState",
    "Preferences",
    "SearchQuery",
    "MAX_RECENT_SEARCHES",
    # Actions and reducer
    "SaveOpportunity",
    "RemoveOpportunity",
    "AddRecentSearch",
    "SetPreferences",
    "apply_action",
    "state_from_dict",
    # Persistence
    "StateStore",
    "StateContainer",
]
