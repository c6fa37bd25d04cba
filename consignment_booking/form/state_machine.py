"""
Finite state machine for the booking form lifecycle.

The form is either being edited or showing a submitted booking that
can still be cancelled. Every transition is explicit; anything else
is rejected with the list of triggers valid from the current state.

Usage:
    sm = FormStateMachine()
    sm.transition(FormTrigger.SUBMIT_ACCEPTED)
    assert sm.current_state == FormState.SUBMITTED
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Optional

logger = logging.getLogger(__name__)


class FormState(str, Enum):
    """All possible states of the booking form."""
    EDITING = "editing"
    SUBMITTED = "submitted"


class FormTrigger(str, Enum):
    """Events that cause state transitions."""
    SUBMIT_ACCEPTED = "submit_accepted"
    CANCELLED = "cancelled"
    NEW_BOOKING = "new_booking"


@dataclass
class Transition:
    """A single valid state transition."""
    from_state: FormState
    to_state: FormState
    trigger: FormTrigger


@dataclass
class StateEntry:
    """Recorded history entry for a state visit."""
    state: FormState
    entered_at: datetime
    trigger: Optional[FormTrigger] = None


class InvalidTransitionError(Exception):
    """Raised when a transition is not valid from the current state."""


class FormStateMachine:
    """Editing -> Submitted -> Editing, with a recorded history."""

    TRANSITIONS: list[Transition] = [
        Transition(FormState.EDITING, FormState.SUBMITTED, FormTrigger.SUBMIT_ACCEPTED),
        Transition(FormState.SUBMITTED, FormState.EDITING, FormTrigger.CANCELLED),
        # The form stays usable after a submission; the booking is kept.
        Transition(FormState.SUBMITTED, FormState.EDITING, FormTrigger.NEW_BOOKING),
    ]

    def __init__(self) -> None:
        self._current_state = FormState.EDITING
        self._history: list[StateEntry] = [
            StateEntry(state=FormState.EDITING, entered_at=datetime.now(timezone.utc))
        ]

    @property
    def current_state(self) -> FormState:
        return self._current_state

    def transition(self, trigger: FormTrigger) -> FormState:
        """
        Execute a state transition.

        Raises:
            InvalidTransitionError: If no valid transition exists.
        """
        for t in self.TRANSITIONS:
            if t.from_state == self._current_state and t.trigger == trigger:
                old_state = self._current_state
                self._current_state = t.to_state
                self._history.append(StateEntry(
                    state=self._current_state,
                    entered_at=datetime.now(timezone.utc),
                    trigger=trigger,
                ))
                logger.debug(
                    "Form transition: %s -> %s (trigger: %s)",
                    old_state.value, self._current_state.value, trigger.value,
                )
                return self._current_state

        valid = [t.value for t in self.get_valid_triggers()]
        raise InvalidTransitionError(
            f"No valid transition from '{self._current_state.value}' "
            f"with trigger '{trigger.value}'. Valid triggers: {valid}"
        )

    def require(self, state: FormState, action: str) -> None:
        """Raise unless the form is currently in ``state``."""
        if self._current_state != state:
            raise InvalidTransitionError(
                f"Cannot {action} while form is '{self._current_state.value}'"
            )

    def get_valid_triggers(self) -> list[FormTrigger]:
        """Return all triggers valid from the current state."""
        return [t.trigger for t in self.TRANSITIONS if t.from_state == self._current_state]

    def get_history(self) -> list[StateEntry]:
        return list(self._history)

    def get_state_trace(self) -> list[str]:
        """Return ordered list of state names visited."""
        return [entry.state.value for entry in self._history]
