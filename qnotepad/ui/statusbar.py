"""
Status bar setup for QNotepad.

Displays:
- Operation messages
- Caret line and column
- Current font style
- Undo history depth
"""

from typing import TYPE_CHECKING, Optional
from PySide6.QtWidgets import QStatusBar, QLabel, QFrame

from qnotepad.core.buffer import FontStyle

if TYPE_CHECKING:
    from qnotepad.ui.main_window import MainWindow


class StatusBarSetup:
    """
    Sets up the status bar for the main window.

    Manages permanent widgets showing caret, style and undo info,
    plus a message area for operation results.
    """

    def __init__(self, main_window: "MainWindow"):
        self._window = main_window
        self._statusbar: Optional[QStatusBar] = None

        self._caret_label: Optional[QLabel] = None
        self._style_label: Optional[QLabel] = None
        self._undo_label: Optional[QLabel] = None

    @property
    def statusbar(self) -> Optional[QStatusBar]:
        """Get the status bar."""
        return self._statusbar

    @property
    def caret_text(self) -> str:
        return self._caret_label.text() if self._caret_label else ""

    @property
    def style_text(self) -> str:
        return self._style_label.text() if self._style_label else ""

    @property
    def undo_text(self) -> str:
        return self._undo_label.text() if self._undo_label else ""

    def setup_status_bar(self) -> None:
        """Create and configure the status bar."""
        self._statusbar = QStatusBar()
        self._window.setStatusBar(self._statusbar)

        self._caret_label = QLabel("Ln 1, Col 1")
        self._caret_label.setMinimumWidth(90)
        self._statusbar.addPermanentWidget(self._caret_label)

        self._add_separator()

        self._style_label = QLabel("Plain")
        self._style_label.setMinimumWidth(50)
        self._statusbar.addPermanentWidget(self._style_label)

        self._add_separator()

        self._undo_label = QLabel("Undo: 0")
        self._undo_label.setMinimumWidth(60)
        self._statusbar.addPermanentWidget(self._undo_label)

    def _add_separator(self) -> None:
        """Add a vertical separator line."""
        separator = QFrame()
        separator.setFrameShape(QFrame.VLine)
        separator.setFrameShadow(QFrame.Sunken)
        self._statusbar.addPermanentWidget(separator)

    def update_caret(self, line: int, column: int) -> None:
        """Update the caret display (1-based)."""
        if self._caret_label:
            self._caret_label.setText(f"Ln {line}, Col {column}")

    def update_style(self, style: FontStyle) -> None:
        """Update the font style display."""
        if self._style_label:
            self._style_label.setText("Italic" if style & FontStyle.ITALIC else "Plain")

    def update_undo_depth(self, depth: int) -> None:
        """Update the undo depth display."""
        if self._undo_label:
            self._undo_label.setText(f"Undo: {depth}")

    def show_message(self, message: str, timeout: int = 0) -> None:
        """Show a temporary message."""
        if self._statusbar:
            self._statusbar.showMessage(message, timeout)

    def current_message(self) -> str:
        """Return the temporary message currently shown."""
        if self._statusbar:
            return self._statusbar.currentMessage()
        return ""
