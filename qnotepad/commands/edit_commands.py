"""
Concrete edit commands for QNotepad undo.

Each command captures the state needed to reverse its operation while it
executes. Commands receive the buffer and clipboard they act on.
"""

from typing import Callable, Optional
import logging

from qnotepad.commands.base import Command
from qnotepad.core.buffer import FontStyle, TextBuffer
from qnotepad.core.clipboard import Clipboard
from qnotepad.errors import ClipboardError

logger = logging.getLogger(__name__)


NO_SELECTION_MESSAGE = "No text selected!"


class CutCommand(Command):
    """Move the selected text to the clipboard, reversible."""

    def __init__(self, buffer: TextBuffer, clipboard: Clipboard):
        super().__init__()
        self._buffer = buffer
        self._clipboard = clipboard
        self._backup = ""
        self._selection_start = 0
        self._selection_end = 0

    @property
    def description(self) -> str:
        return "Cut"

    def _do_execute(self) -> None:
        self._selection_start, self._selection_end = self._buffer.selection_range()
        self._backup = self._buffer.selected_text() or ""
        self._clipboard.write(self._backup)
        self._buffer.replace_range(self._selection_start, self._selection_end, "")
        logger.debug(
            "Cut %d chars at [%d, %d)",
            len(self._backup),
            self._selection_start,
            self._selection_end,
        )

    def _do_undo(self) -> None:
        if not self._backup:
            return
        self._buffer.insert(self._backup, self._selection_start)
        self._buffer.select(self._selection_start, self._selection_start + len(self._backup))


class CopyCommand(Command):
    """Copy the selected text to the clipboard. Undo does nothing."""

    def __init__(self, buffer: TextBuffer, clipboard: Clipboard):
        super().__init__()
        self._buffer = buffer
        self._clipboard = clipboard

    @property
    def description(self) -> str:
        return "Copy"

    def _do_execute(self) -> None:
        selected = self._buffer.selected_text()
        if selected:
            self._clipboard.write(selected)
            logger.debug("Copied %d chars", len(selected))

    def _do_undo(self) -> None:
        pass


class PasteCommand(Command):
    """Insert the clipboard text at the caret, reversible."""

    def __init__(self, buffer: TextBuffer, clipboard: Clipboard):
        super().__init__()
        self._buffer = buffer
        self._clipboard = clipboard
        self._backup = ""
        self._caret_position = 0

    @property
    def description(self) -> str:
        return "Paste"

    def _do_execute(self) -> None:
        try:
            contents = self._clipboard.read()
        except ClipboardError:
            logger.exception("Paste skipped: clipboard unavailable")
            return

        if not isinstance(contents, str) or not contents:
            logger.debug("Paste skipped: clipboard holds no text")
            return

        self._backup = contents
        self._caret_position = self._buffer.caret_position()
        self._buffer.insert(self._backup, self._caret_position)
        logger.debug("Pasted %d chars at %d", len(self._backup), self._caret_position)

    def _do_undo(self) -> None:
        if not self._backup:
            return
        self._buffer.replace_range(
            self._caret_position,
            self._caret_position + len(self._backup),
            "",
        )


class ToggleItalicCommand(Command):
    """
    Switch the buffer's display font to italic.

    Requires a selection; without one the user is notified and nothing
    changes. The style applies to the whole buffer. Undo restores the style
    that was active before execute.
    """

    def __init__(self, buffer: TextBuffer, notify: Optional[Callable[[str], None]] = None):
        super().__init__()
        self._buffer = buffer
        self._notify = notify
        self._previous_style: Optional[FontStyle] = None

    @property
    def description(self) -> str:
        return "Italic"

    def _do_execute(self) -> None:
        start, end = self._buffer.selection_range()
        if start == end:
            if self._notify is not None:
                self._notify(NO_SELECTION_MESSAGE)
            else:
                logger.warning("Italic ignored: %s", NO_SELECTION_MESSAGE)
            return

        self._previous_style = self._buffer.font_style()
        self._buffer.set_font_style(self._previous_style | FontStyle.ITALIC)
        logger.debug("Font style %s -> %s", self._previous_style.name, self._buffer.font_style().name)

    def _do_undo(self) -> None:
        if self._previous_style is None:
            return
        self._buffer.set_font_style(self._previous_style)
