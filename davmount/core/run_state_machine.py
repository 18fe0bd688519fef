import logging
from typing import Dict, Set

from davmount.core.exceptions import InvalidTransitionError
from davmount.models import RunState


class RunStateMachine:
    """
    Central "dørmand" for run-state overgange.

    Exactly one manifest is processed per run, so the machine starts in
    Idle and ends in one of the terminal states Invalid, Done or Failed.
    """

    def __init__(self):
        self._state = RunState.IDLE

        # Definerer alle lovlige overgange
        self._transitions: Dict[RunState, Set[RunState]] = {
            RunState.IDLE: {RunState.LOADING},
            RunState.LOADING: {
                RunState.PARSED,
                RunState.INVALID,
                RunState.FAILED,
            },
            RunState.PARSED: {
                RunState.MOUNTING,
                RunState.INVALID,  # Mount URL could not be derived
            },
            RunState.MOUNTING: {
                RunState.DONE,
                RunState.FAILED,
            },
            RunState.INVALID: set(),
            RunState.DONE: set(),
            RunState.FAILED: set(),
        }

    @property
    def state(self) -> RunState:
        return self._state

    def can_transition(self, new_state: RunState) -> bool:
        return new_state in self._transitions.get(self._state, set())

    def transition(self, new_state: RunState) -> RunState:
        """
        Move to ``new_state``.

        Raises:
            InvalidTransitionError: Hvis overgangen ikke er tilladt.
        """
        old_state = self._state
        if not self.can_transition(new_state):
            raise InvalidTransitionError(old_state.value, new_state.value)

        logging.debug(f"Run transition: {old_state.value} -> {new_state.value}")
        self._state = new_state
        return self._state
