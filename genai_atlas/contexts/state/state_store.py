"""
Best-effort persistence of client state.

State is stored as a single JSON document at ATLAS_STATE_PATH. Reads and
writes never raise: a missing or corrupt file loads as the default state, and
a failed write is logged and skipped.

Usage:
    from genai_atlas.contexts.state import StateContainer, StateStore, SaveOpportunity

    container = StateContainer(StateStore())
    container.dispatch(SaveOpportunity("klarna-customer-service"))
"""

import json
import os
import shutil
import tempfile
from pathlib import Path

from dotenv import load_dotenv

from genai_atlas.contexts.state.app_state import Action, AppState, apply_action, state_from_dict
from genai_atlas.contexts.state.logger import _log_debug, _log_error, _log_warning

load_dotenv()
ATLAS_STATE_PATH = Path(os.getenv("ATLAS_STATE_PATH", "outs/state/atlas_state.json"))


class StateStore:
    """
    JSON file holding the serialized AppState.

    Attributes:
        state_path: Location of the state file
    """

    def __init__(self, state_path: Path = None):
        """
        Args:
            state_path: State file location (defaults to ATLAS_STATE_PATH from environment)
        """
        if state_path is None:
            state_path = ATLAS_STATE_PATH
        self.state_path = Path(state_path)

    def load(self) -> AppState:
        """
        Read the persisted state.

        Returns:
            Persisted AppState, or the default AppState if the file is absent or unreadable
        """
        if not self.state_path.exists():
            _log_debug(f"No saved state at {self.state_path}, using defaults")
            return AppState()

        try:
            with open(self.state_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            state = state_from_dict(data)
        except (OSError, ValueError, TypeError, AttributeError) as e:
            # json.JSONDecodeError is a ValueError
            _log_warning(f"Error loading saved state from {self.state_path}: {e}")
            return AppState()

        _log_debug(
            f"Loaded state: {len(state.saved_opportunities)} saved, "
            f"{len(state.recent_searches)} recent searches"
        )
        return state

    def save(self, state: AppState) -> bool:
        """
        Write state to disk.

        Writes to a temp file first and moves it into place, so a failed
        write never leaves a truncated state file behind.

        Returns:
            True if written, False if the write failed (the failure is logged)
        """
        temp_path = None
        try:
            self.state_path.parent.mkdir(parents=True, exist_ok=True)
            temp_fd, temp_path = tempfile.mkstemp(
                suffix=".json", dir=self.state_path.parent, text=True
            )
            with os.fdopen(temp_fd, "w", encoding="utf-8") as f:
                json.dump(state.to_dict(), f, indent=2)
            shutil.move(temp_path, self.state_path)
        except OSError as e:
            _log_error(f"Error saving state to {self.state_path}: {e}")
            if temp_path and os.path.exists(temp_path):
                os.unlink(temp_path)
            return False

        return True


class StateContainer:
    """
    Holds the current AppState and persists it after every change.

    Inject one container into whatever presents state to the user instead of
    keeping state in a module-level global.
    """

    def __init__(self, store: StateStore):
        self.store = store
        self._state = store.load()

    @property
    def state(self) -> AppState:
        return self._state

    def dispatch(self, action: Action) -> AppState:
        """
        Apply an action and persist the result.

        Nothing is written when the action leaves the state unchanged.

        Returns:
            The new current state
        """
        new_state = apply_action(self._state, action)
        if new_state is not self._state:
            self._state = new_state
            self.store.save(new_state)
        return self._state
