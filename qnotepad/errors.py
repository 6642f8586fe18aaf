"""Exception types shared across QNotepad."""


class QNotepadError(Exception):
    """Base class for QNotepad errors."""


class ClipboardError(QNotepadError):
    """The clipboard could not be read or written."""


class CommandStateError(QNotepadError):
    """A command was executed or undone out of order."""
