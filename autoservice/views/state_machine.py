"""
Finite state machine for a list view's load lifecycle.

A view starts Idle, enters Loading when activated, and settles in Ready
or Error depending on the fetch. Filtering, paging and selection never
touch this machine; only (re)loading does.

Usage:
    sm = ViewStateMachine()
    sm.transition(ViewTrigger.LOAD)
    sm.transition(ViewTrigger.LOAD_SUCCEEDED)
    assert sm.current_state == ViewState.READY
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class ViewState(str, Enum):
    """All possible states of a list view."""
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class ViewTrigger(str, Enum):
    """Events that cause state transitions."""
    LOAD = "load"
    LOAD_SUCCEEDED = "load_succeeded"
    LOAD_FAILED = "load_failed"
    REFRESH = "refresh"
    DEACTIVATE = "deactivate"


@dataclass(frozen=True)
class Transition:
    """A single valid state transition."""
    from_state: ViewState
    to_state: ViewState
    trigger: ViewTrigger


@dataclass
class StateEntry:
    """Recorded history entry for a state visit."""
    state: ViewState
    entered_at: datetime
    trigger: Optional[ViewTrigger] = None


class InvalidTransitionError(Exception):
    """Raised when a transition is not valid from the current state."""


class ViewStateMachine:
    """
    Deterministic load lifecycle for one view.

    Every transition is listed explicitly; anything else is rejected with
    the triggers that would have been valid.
    """

    TRANSITIONS: list[Transition] = [
        # --- Activation ---
        Transition(ViewState.IDLE, ViewState.LOADING, ViewTrigger.LOAD),

        # --- Fetch outcome ---
        Transition(ViewState.LOADING, ViewState.READY, ViewTrigger.LOAD_SUCCEEDED),
        Transition(ViewState.LOADING, ViewState.ERROR, ViewTrigger.LOAD_FAILED),

        # --- Manual refresh ---
        Transition(ViewState.READY, ViewState.LOADING, ViewTrigger.REFRESH),
        Transition(ViewState.ERROR, ViewState.LOADING, ViewTrigger.REFRESH),

        # --- Unmount ---
        Transition(ViewState.IDLE, ViewState.IDLE, ViewTrigger.DEACTIVATE),
        Transition(ViewState.LOADING, ViewState.IDLE, ViewTrigger.DEACTIVATE),
        Transition(ViewState.READY, ViewState.IDLE, ViewTrigger.DEACTIVATE),
        Transition(ViewState.ERROR, ViewState.IDLE, ViewTrigger.DEACTIVATE),
    ]

    def __init__(self) -> None:
        self._table: dict[tuple[ViewState, ViewTrigger], ViewState] = {
            (t.from_state, t.trigger): t.to_state for t in self.TRANSITIONS
        }
        self._current_state = ViewState.IDLE
        self._history = [StateEntry(ViewState.IDLE, datetime.now(timezone.utc))]
        self._error_count = 0

    @property
    def current_state(self) -> ViewState:
        return self._current_state

    @property
    def error_count(self) -> int:
        """Number of times the view has entered Error."""
        return self._error_count

    def transition(self, trigger: ViewTrigger) -> ViewState:
        """
        Move to the state the table assigns to (current state, trigger).

        Raises:
            InvalidTransitionError: If the table has no such entry.
        """
        target = self._table.get((self._current_state, trigger))
        if target is None:
            allowed = ", ".join(t.value for t in self.get_valid_triggers())
            raise InvalidTransitionError(
                f"{trigger.value!r} is not allowed while {self._current_state.value}; "
                f"Valid triggers: [{allowed}]"
            )

        previous, self._current_state = self._current_state, target
        self._history.append(StateEntry(target, datetime.now(timezone.utc), trigger))
        if target is ViewState.ERROR:
            self._error_count += 1
        logger.debug("%s --%s--> %s", previous.value, trigger.value, target.value)
        return target

    def can(self, trigger: ViewTrigger) -> bool:
        return (self._current_state, trigger) in self._table

    def get_valid_triggers(self) -> list[ViewTrigger]:
        return [trigger for state, trigger in self._table if state is self._current_state]

    def get_history(self) -> list[StateEntry]:
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """State names in the order they were entered."""
        return [entry.state.value for entry in self._history]

    def is_settled(self) -> bool:
        """True once a fetch has finished, successfully or not."""
        return self._current_state in (ViewState.READY, ViewState.ERROR)
