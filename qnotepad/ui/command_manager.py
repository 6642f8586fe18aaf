"""
Keyboard and trigger routing for QNotepad.

Every edit trigger (button, menu action, shortcut) is dispatched through
the command manager by id. The manager also filters key presses on the
text area (and middle clicks on its viewport) so the widget's built-in
cut/copy/paste/undo handling never runs and all edits reach the undo
history.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
from typing import Callable, Optional, TYPE_CHECKING

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtGui import QKeyEvent, QKeySequence, QMouseEvent

from qnotepad.config import EDIT_COMMAND_IDS

if TYPE_CHECKING:
    from qnotepad.ui.main_window import MainWindow


logger = logging.getLogger(__name__)


# Platform key sequences the text widget would otherwise handle itself.
STANDARD_KEY_COMMANDS: tuple[tuple[QKeySequence.StandardKey, Optional[str]], ...] = (
    (QKeySequence.Cut, "cut"),
    (QKeySequence.Copy, "copy"),
    (QKeySequence.Paste, "paste"),
    (QKeySequence.Undo, "undo"),
    (QKeySequence.Redo, None),
)


@dataclass
class CommandSpec:
    """Metadata for a command bound in the command manager."""

    command_id: str
    handler: Callable[[], object]
    label: str = ""


class CommandManager(QObject):
    """
    Dispatches edit triggers by id and owns their key bindings.

    Handler failures are logged and reported on the status bar instead of
    escaping into the Qt event loop.
    """

    def __init__(self, window: "MainWindow"):
        super().__init__(window)
        self._window = window
        self._commands: dict[str, CommandSpec] = {}
        self._bindings: dict[str, str] = {}
        self._installed = False

        self._register_default_commands()
        self._register_default_bindings()
        self.install()

    def install(self) -> None:
        """Install the manager as a key event filter on the text area."""
        if self._installed:
            return
        self._window.text_edit.installEventFilter(self)
        self._window.text_edit.viewport().installEventFilter(self)
        self._installed = True
        logger.info("CommandManager installed")

    def shutdown(self) -> None:
        """Remove the key event filter."""
        if not self._installed:
            return
        self._window.text_edit.removeEventFilter(self)
        self._window.text_edit.viewport().removeEventFilter(self)
        self._installed = False
        logger.info("CommandManager shut down")

    def register_command(self, command_id: str, handler: Callable[[], object], label: str = "") -> None:
        """Register or replace a command specification."""
        self._commands[command_id] = CommandSpec(
            command_id=command_id,
            handler=handler,
            label=label or command_id.title(),
        )

    def bind_key(self, sequence: str | QKeySequence, command_id: str) -> None:
        """Bind a key sequence to a command id. Empty sequences are ignored."""
        key = self._normalize(sequence)
        if not key:
            return
        self._bindings[key] = command_id

    def binding_for(self, sequence: str | QKeySequence) -> Optional[str]:
        """Return the command id bound to a key sequence, if any."""
        return self._bindings.get(self._normalize(sequence))

    def dispatch_command(self, command_id: str) -> bool:
        """Dispatch a command by id. Returns True if handled."""
        spec = self._commands.get(command_id)
        if spec is None:
            logger.warning("Unknown command '%s'", command_id)
            return False

        try:
            spec.handler()
        except Exception:
            logger.exception("Command '%s' failed", command_id)
            self._window.show_status_message(f"{spec.label} failed")
            return True

        logger.info("Command dispatched: %s", command_id)
        return True

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:
        """Route bound key presses on the text area to their commands."""
        if event.type() in (QEvent.MouseButtonPress, QEvent.MouseButtonRelease):
            # X11 selection paste on middle click would skip the undo history.
            return isinstance(event, QMouseEvent) and event.button() == Qt.MiddleButton
        if event.type() not in (QEvent.ShortcutOverride, QEvent.KeyPress):
            return False
        if not isinstance(event, QKeyEvent):
            return False

        found, command_id = self._match(event)
        if not found:
            return False

        if event.type() == QEvent.ShortcutOverride:
            # Claim the chord so it arrives here as a key press.
            event.accept()
            return True

        if command_id is not None and not event.isAutoRepeat():
            self.dispatch_command(command_id)
        event.accept()
        return True

    def _register_default_commands(self) -> None:
        """Register the editor's five triggers."""
        self.register_command("cut", self._window.cut, "Cut")
        self.register_command("copy", self._window.copy, "Copy")
        self.register_command("paste", self._window.paste, "Paste")
        self.register_command("italic", self._window.toggle_italic, "Italic")
        self.register_command("undo", self._window.undo, "Undo")

    def _register_default_bindings(self) -> None:
        """Bind configured shortcuts from the ``shortcuts`` config section."""
        for command_id in EDIT_COMMAND_IDS:
            sequence = self._window.config_manager.shortcut(command_id)
            if sequence:
                self.bind_key(sequence, command_id)

    def _match(self, event: QKeyEvent) -> tuple[bool, Optional[str]]:
        """Return (matched, command id) for a key event."""
        chord = QKeySequence(event.keyCombination())
        command_id = self._bindings.get(self._normalize(chord))
        if command_id is not None:
            return True, command_id

        for standard_key, standard_command in STANDARD_KEY_COMMANDS:
            if event.matches(standard_key):
                return True, standard_command
        return False, None

    @staticmethod
    def _normalize(sequence: str | QKeySequence) -> str:
        """Return the portable text form of a key sequence."""
        if isinstance(sequence, str):
            sequence = QKeySequence(sequence.strip())
        return sequence.toString(QKeySequence.PortableText)
