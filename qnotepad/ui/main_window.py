"""
Main window for QNotepad.

The MainWindow owns the single text area and the undo history, and wires
the user triggers to commands:
- Menu bar with File and Edit menus
- Central plain text area
- Button panel with Cut, Copy, Paste, Italic and Undo
- Status bar showing caret, font style and undo depth
"""

from typing import Optional
import logging

from PySide6.QtCore import Qt, Slot, QByteArray
from PySide6.QtGui import QCloseEvent, QFont
from PySide6.QtWidgets import (
    QMainWindow,
    QMessageBox,
    QPlainTextEdit,
    QVBoxLayout,
    QWidget,
)

from qnotepad.commands import (
    Command,
    CopyCommand,
    CutCommand,
    Invoker,
    PasteCommand,
    ToggleItalicCommand,
)
from qnotepad.config import JsonConfigManager
from qnotepad.core.clipboard import Clipboard
from qnotepad.ui.adapters import QtClipboard, QtTextBuffer
from qnotepad.ui.button_panel import ButtonPanelSetup
from qnotepad.ui.command_manager import CommandManager
from qnotepad.ui.menubar import MenuBarSetup
from qnotepad.ui.statusbar import StatusBarSetup


logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    """
    Main application window for QNotepad.

    Each trigger builds a fresh command and hands it to the invoker, which
    executes it and records it for undo. The clipboard can be injected;
    by default the Qt application clipboard is used.
    """

    def __init__(
        self,
        parent: Optional[QWidget] = None,
        config_manager: Optional[JsonConfigManager] = None,
        clipboard: Optional[Clipboard] = None,
    ):
        super().__init__(parent)

        self._config_manager = config_manager or JsonConfigManager()
        self._clipboard: Clipboard = clipboard or QtClipboard()
        self._invoker = Invoker()
        self._status_timeout = 2000

        self.setWindowTitle(self._config_manager.window_title())

        self._setup_central_widget()
        self._buffer = QtTextBuffer(self._text_edit)
        self._command_manager = CommandManager(self)
        self._setup_menu_bar()
        self._setup_button_panel()
        self._setup_status_bar()

        self._load_settings()
        self._connect_signals()
        self._refresh_indicators()
        logger.info("MainWindow initialized")

    def _setup_central_widget(self) -> None:
        """Set up the text area and the container for the button panel."""
        self._central_container = QWidget()
        self._central_layout = QVBoxLayout(self._central_container)
        self._central_layout.setContentsMargins(0, 0, 0, 0)
        self._central_layout.setSpacing(0)

        self._text_edit = QPlainTextEdit()
        self._text_edit.setObjectName("text_area")
        # All edits go through the invoker; the widget keeps no history of its own.
        self._text_edit.setUndoRedoEnabled(False)
        self._text_edit.setAcceptDrops(False)
        self._text_edit.setContextMenuPolicy(Qt.ActionsContextMenu)
        self._central_layout.addWidget(self._text_edit, 1)

        self.setCentralWidget(self._central_container)

    def _setup_menu_bar(self) -> None:
        """Set up the menu bar and reuse its Edit actions as the context menu."""
        self._menu_setup = MenuBarSetup(self)
        self._menu_setup.setup_menus()
        self._text_edit.addActions(self._menu_setup.edit_actions())

    def _setup_button_panel(self) -> None:
        """Set up the trigger buttons below the text area."""
        self._button_setup = ButtonPanelSetup(self)
        self._central_layout.addWidget(self._button_setup.setup_panel())

    def _setup_status_bar(self) -> None:
        """Set up the status bar."""
        self._status_setup = StatusBarSetup(self)
        self._status_setup.setup_status_bar()

    def _connect_signals(self) -> None:
        """Connect internal signals."""
        self._text_edit.cursorPositionChanged.connect(self._update_caret_indicator)

    def _load_settings(self) -> None:
        """Apply window and editor settings; values are validated by the config manager."""
        self.resize(*self._config_manager.window_size())

        geometry_b64 = self._config_manager.window_geometry()
        if geometry_b64 and not self.restoreGeometry(QByteArray.fromBase64(geometry_b64.encode("ascii"))):
            logger.warning("Saved window geometry could not be restored")

        font = QFont(self._text_edit.font())
        family, point_size = self._config_manager.editor_font()
        if family:
            font.setFamily(family)
        font.setPointSize(point_size)
        self._text_edit.setFont(font)

        self._status_timeout = self._config_manager.status_timeout()
        self._button_setup.set_visible(self._config_manager.show_button_panel())
        logger.info("JSON config loaded from %s", self._config_manager.config_dir)

    def _save_settings(self) -> None:
        """Save window settings to JSON configuration files."""
        geometry_b64 = bytes(self.saveGeometry().toBase64()).decode("ascii")
        self._config_manager.set("ui", "window.geometry", geometry_b64)
        self._config_manager.set("ui", "window.size", [self.width(), self.height()])
        self._config_manager.save_all()
        logger.info("JSON config saved")

    # -------------------------------------------------------------------------
    # Properties
    # -------------------------------------------------------------------------

    @property
    def text_edit(self) -> QPlainTextEdit:
        """Return the text area widget."""
        return self._text_edit

    @property
    def buffer(self) -> QtTextBuffer:
        """Return the text buffer commands act on."""
        return self._buffer

    @property
    def clipboard(self) -> Clipboard:
        """Return the clipboard commands act on."""
        return self._clipboard

    @property
    def invoker(self) -> Invoker:
        """Return the undo history."""
        return self._invoker

    @property
    def config_manager(self) -> JsonConfigManager:
        """Return JSON configuration manager."""
        return self._config_manager

    @property
    def command_manager(self) -> CommandManager:
        """Return the trigger dispatcher."""
        return self._command_manager

    @property
    def menu_setup(self) -> MenuBarSetup:
        return self._menu_setup

    @property
    def button_setup(self) -> ButtonPanelSetup:
        return self._button_setup

    @property
    def status_setup(self) -> StatusBarSetup:
        return self._status_setup

    # -------------------------------------------------------------------------
    # Edit Operations
    # -------------------------------------------------------------------------

    @Slot()
    def cut(self) -> None:
        """Cut the selected text to the clipboard."""
        self._store_and_execute(CutCommand(self._buffer, self._clipboard))

    @Slot()
    def copy(self) -> None:
        """Copy the selected text to the clipboard."""
        self._store_and_execute(CopyCommand(self._buffer, self._clipboard))

    @Slot()
    def paste(self) -> None:
        """Paste clipboard text at the caret."""
        self._store_and_execute(PasteCommand(self._buffer, self._clipboard))

    @Slot()
    def toggle_italic(self) -> None:
        """Toggle the italic display font."""
        self._store_and_execute(ToggleItalicCommand(self._buffer, notify=self._show_warning))

    @Slot()
    def undo(self) -> None:
        """Undo the last operation."""
        desc = self._invoker.undo_last_command()
        if desc:
            self.show_status_message(f"Undone: {desc}")
        else:
            self.show_status_message("Nothing to undo")
        self._refresh_indicators()

    def show_status_message(self, message: str) -> None:
        """Show a temporary status bar message."""
        self._status_setup.show_message(message, self._status_timeout)

    def _store_and_execute(self, command: Command) -> None:
        """Hand a fresh command to the invoker and refresh the indicators."""
        try:
            self._invoker.store_and_execute(command)
        finally:
            self._refresh_indicators()
        self.show_status_message(command.description)

    def _show_warning(self, message: str) -> None:
        """Report a user-facing warning in a modal dialog."""
        logger.info("User warning: %s", message)
        QMessageBox.information(self, self.windowTitle(), message)

    def _refresh_indicators(self) -> None:
        """Sync status bar, Undo button and Undo action with current state."""
        self._status_setup.update_style(self._buffer.font_style())
        self._status_setup.update_undo_depth(self._invoker.depth)
        self._button_setup.update_undo_button(self._invoker.can_undo())
        self._menu_setup.update_undo_action(self._invoker.undo_description)
        self._update_caret_indicator()

    @Slot()
    def _update_caret_indicator(self) -> None:
        cursor = self._text_edit.textCursor()
        self._status_setup.update_caret(cursor.blockNumber() + 1, cursor.positionInBlock() + 1)

    # -------------------------------------------------------------------------
    # Window Events
    # -------------------------------------------------------------------------

    def closeEvent(self, event: QCloseEvent) -> None:
        """Persist settings and release the key filter on close."""
        try:
            self._save_settings()
        except OSError:
            logger.exception("Failed to save settings on close")
        self._command_manager.shutdown()
        event.accept()
