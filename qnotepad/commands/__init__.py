"""
Command pattern implementation for undo in QNotepad.
"""

from qnotepad.commands.base import Command, CommandState, Invoker
from qnotepad.commands.edit_commands import (
    CutCommand,
    CopyCommand,
    PasteCommand,
    ToggleItalicCommand,
)

__all__ = [
    "Command",
    "CommandState",
    "Invoker",
    "CutCommand",
    "CopyCommand",
    "PasteCommand",
    "ToggleItalicCommand",
]
