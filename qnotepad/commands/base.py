"""
Base command and invoker for QNotepad.

Implements the command pattern for reversible edit operations.
"""

from abc import ABC, abstractmethod
from enum import Enum, auto
from typing import List, Optional, Tuple
import logging

from qnotepad.errors import CommandStateError

logger = logging.getLogger(__name__)


class CommandState(Enum):
    """Lifecycle of a single command instance."""

    CONSTRUCTED = auto()
    EXECUTED = auto()
    UNDONE = auto()


class Command(ABC):
    """
    Abstract base class for undoable commands.

    A command runs at most once and is undone at most once. Subclasses
    implement ``_do_execute`` and ``_do_undo``; the public methods enforce
    the CONSTRUCTED -> EXECUTED -> UNDONE order.
    """

    def __init__(self) -> None:
        self._state = CommandState.CONSTRUCTED

    @property
    def state(self) -> CommandState:
        """Current lifecycle state."""
        return self._state

    @property
    @abstractmethod
    def description(self) -> str:
        """Human-readable description of this command."""

    def execute(self) -> None:
        """Execute the command and capture what is needed to undo it."""
        if self._state is not CommandState.CONSTRUCTED:
            raise CommandStateError(
                f"{self.description}: cannot execute a command in state {self._state.name}"
            )
        self._do_execute()
        self._state = CommandState.EXECUTED

    def undo(self) -> None:
        """Reverse the single prior execution."""
        if self._state is not CommandState.EXECUTED:
            raise CommandStateError(
                f"{self.description}: cannot undo a command in state {self._state.name}"
            )
        self._do_undo()
        self._state = CommandState.UNDONE

    @abstractmethod
    def _do_execute(self) -> None:
        """Perform the action."""

    @abstractmethod
    def _do_undo(self) -> None:
        """Reverse the action."""


class Invoker:
    """
    Executes commands and keeps the undo history.

    The history is an unbounded LIFO. There is no redo: an undone command
    is dropped.
    """

    def __init__(self) -> None:
        self._history: List[Command] = []

    def store_and_execute(self, command: Command) -> None:
        """
        Execute a command and push it onto the history.

        The command is recorded even if it changed nothing. If ``execute``
        raises, nothing is recorded.
        """
        command.execute()
        self._history.append(command)
        logger.debug("Command executed: %s (history depth=%d)", command.description, len(self._history))

    def undo_last_command(self) -> Optional[str]:
        """
        Undo the most recent command.

        Returns:
            Description of the undone command, or None if the history is empty.
        """
        if not self._history:
            return None

        command = self._history.pop()
        command.undo()
        logger.debug("Undo: %s (history depth=%d)", command.description, len(self._history))
        return command.description

    def can_undo(self) -> bool:
        """Check if there are commands to undo."""
        return len(self._history) > 0

    def clear(self) -> None:
        """Drop the whole history."""
        self._history.clear()

    @property
    def history(self) -> Tuple[Command, ...]:
        """Executed commands, oldest first."""
        return tuple(self._history)

    @property
    def undo_description(self) -> Optional[str]:
        """Description of the next command to undo."""
        if self._history:
            return self._history[-1].description
        return None

    @property
    def depth(self) -> int:
        """Current history depth."""
        return len(self._history)
