"""
Button panel setup for QNotepad.

A row of push buttons below the text area, one per edit trigger.
"""

from typing import TYPE_CHECKING, Optional
import logging

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QHBoxLayout, QPushButton, QWidget

if TYPE_CHECKING:
    from qnotepad.ui.main_window import MainWindow


logger = logging.getLogger(__name__)


BUTTONS = (
    ("cut", "Cut"),
    ("copy", "Copy"),
    ("paste", "Paste"),
    ("italic", "Italic"),
    ("undo", "Undo"),
)


class ButtonPanelSetup:
    """Creates the trigger buttons and wires them to the command manager."""

    def __init__(self, main_window: "MainWindow"):
        self._window = main_window
        self._panel: Optional[QWidget] = None
        self._buttons: dict[str, QPushButton] = {}

    def button(self, command_id: str) -> Optional[QPushButton]:
        """Return the button for a command id."""
        return self._buttons.get(command_id)

    def setup_panel(self) -> QWidget:
        """Create the panel and its buttons."""
        self._panel = QWidget()
        self._panel.setObjectName("button_panel")
        layout = QHBoxLayout(self._panel)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.addStretch(1)

        for command_id, text in BUTTONS:
            button = QPushButton(text)
            button.setObjectName(f"{command_id}_button")
            # Keep keyboard focus (and the selection highlight) in the text area.
            button.setFocusPolicy(Qt.NoFocus)
            button.clicked.connect(
                lambda _checked=False, cid=command_id: self._window.command_manager.dispatch_command(cid)
            )
            layout.addWidget(button)
            self._buttons[command_id] = button

        layout.addStretch(1)
        logger.info("Button panel initialized")
        return self._panel

    def update_undo_button(self, can_undo: bool) -> None:
        """Enable the Undo button only when there is history."""
        button = self._buttons.get("undo")
        if button:
            button.setEnabled(can_undo)

    def set_visible(self, visible: bool) -> None:
        """Show or hide the panel."""
        if self._panel:
            self._panel.setVisible(visible)
