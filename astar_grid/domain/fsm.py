"""Finite state machine for a single search invocation."""

from enum import Enum
from typing import Callable, Dict, Optional, Set


class SearchState(Enum):
    """Phases of one A* search."""
    INITIALIZING = "initializing"
    EXPANDING = "expanding"
    FOUND = "found"
    EXHAUSTED = "exhausted"


TERMINAL_STATES = frozenset({SearchState.FOUND, SearchState.EXHAUSTED})


class SearchStateMachine:
    """
    Tracks the phase of a search and rejects illegal jumps.

    State Transitions:
    INITIALIZING -> EXPANDING (start cell seeded into the frontier)
    EXPANDING -> FOUND (goal popped from the frontier)
    EXPANDING -> EXHAUSTED (frontier empty or expansion budget spent)

    FOUND and EXHAUSTED are terminal; ``reset`` returns to INITIALIZING.
    """

    def __init__(self):
        self._current_state = SearchState.INITIALIZING
        self._state_callbacks: Dict[SearchState, Callable[[Optional[dict]], None]] = {}
        self._valid_transitions = self._build_transition_map()

    def _build_transition_map(self) -> Dict[SearchState, Set[SearchState]]:
        return {
            SearchState.INITIALIZING: {SearchState.EXPANDING},
            SearchState.EXPANDING: {SearchState.FOUND, SearchState.EXHAUSTED},
            SearchState.FOUND: set(),
            SearchState.EXHAUSTED: set(),
        }

    @property
    def current_state(self) -> SearchState:
        return self._current_state

    def can_transition_to(self, target_state: SearchState) -> bool:
        """Check if transition to target state is valid."""
        return target_state in self._valid_transitions.get(self._current_state, set())

    def transition_to(self, target_state: SearchState, context: Optional[dict] = None) -> bool:
        """
        Attempt to transition to the target state.

        Args:
            target_state: The state to transition to
            context: Optional context data handed to callbacks

        Returns:
            True if transition was successful, False otherwise
        """
        if not self.can_transition_to(target_state):
            return False

        self._current_state = target_state

        if target_state in self._state_callbacks:
            self._state_callbacks[target_state](context)

        return True

    def on_state_enter(self, state: SearchState, callback: Callable[[Optional[dict]], None]):
        """Register a callback for when entering a specific state."""
        self._state_callbacks[state] = callback

    def reset(self):
        """Reset the state machine to INITIALIZING."""
        self._current_state = SearchState.INITIALIZING

    def is_finished(self) -> bool:
        """Check if the search reached a terminal state."""
        return self._current_state in TERMINAL_STATES
