"""
Single-owner container for the current project document.

The application shell keeps one ``ProjectSession`` for the lifetime of an
editing session. It threads the current document through the transition
engine and notifies listeners (for example a snapshot writer) after every
accepted change.
"""

import logging
from typing import Callable, List, Optional

from heatload.engine.commands import Command
from heatload.engine.reducer import Rejection, dispatch
from heatload.model.state import ProjectState, default_project_state

logger = logging.getLogger(__name__)

Listener = Callable[[ProjectState], None]


class ProjectSession:
    """Holds the current ProjectState and applies commands to it."""

    def __init__(self, state: Optional[ProjectState] = None) -> None:
        """
        Initialize the session.

        Args:
            state: Starting document (a restored snapshot); the default
                project when omitted
        """
        self._state = state if state is not None else default_project_state()
        self._listeners: List[Listener] = []

    @property
    def state(self) -> ProjectState:
        """The current project document."""
        return self._state

    def subscribe(self, listener: Listener) -> None:
        """Call ``listener`` with the new document after each accepted change."""
        self._listeners.append(listener)

    def dispatch(self, command: Command) -> Optional[Rejection]:
        """
        Apply a command to the current document.

        Args:
            command: Command to apply

        Returns:
            The rejection if the command was refused, otherwise None
        """
        result = dispatch(self._state, command)
        if result.rejection is not None:
            return result.rejection

        if result.state is not self._state:
            self._state = result.state
            for listener in self._listeners:
                listener(self._state)
        return None

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(room={self._state.room.name!r}, ahus={len(self._state.ahus)})"
