"""
Menu bar setup for QNotepad.

Provides:
- File: Quit
- Edit: Undo, Cut, Copy, Paste, Italic
"""

from typing import TYPE_CHECKING, Optional
import logging

from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import QMenu, QStyle

if TYPE_CHECKING:
    from qnotepad.ui.main_window import MainWindow


logger = logging.getLogger(__name__)


# (command id, menu text, standard icon); None marks a separator.
EDIT_MENU_LAYOUT = (
    ("undo", "&Undo", QStyle.SP_ArrowBack),
    None,
    ("cut", "Cu&t", None),
    ("copy", "&Copy", None),
    ("paste", "&Paste", None),
    None,
    ("italic", "&Italic", None),
)


class MenuBarSetup:
    """
    Sets up the menu bar for the main window.

    Edit actions dispatch through the window's command manager and take
    their shortcuts from the ``shortcuts`` config section.
    """

    def __init__(self, main_window: "MainWindow"):
        self._window = main_window
        self._menubar = main_window.menuBar()
        self._style = main_window.style()
        self._edit_menu: Optional[QMenu] = None
        self._actions: dict[str, QAction] = {}

    def action(self, command_id: str) -> Optional[QAction]:
        """Return the Edit action for a command id."""
        return self._actions.get(command_id)

    def edit_actions(self) -> list[QAction]:
        """Return Edit actions in menu order."""
        return [self._actions[entry[0]] for entry in EDIT_MENU_LAYOUT if entry is not None]

    def setup_menus(self) -> None:
        """Create all menus."""
        self._create_file_menu()
        self._create_edit_menu()

    def update_undo_action(self, description: Optional[str]) -> None:
        """Show the next undoable command in the Undo action text."""
        action = self._actions.get("undo")
        if action is None:
            return
        action.setEnabled(description is not None)
        action.setText(f"&Undo {description}" if description else "&Undo")

    def _create_file_menu(self) -> None:
        """Create the File menu."""
        menu = self._menubar.addMenu("&File")
        quit_action = menu.addAction(self._style.standardIcon(QStyle.SP_DialogCloseButton), "&Quit")
        quit_action.setShortcut(QKeySequence.Quit)
        quit_action.triggered.connect(self._window.close)

    def _create_edit_menu(self) -> None:
        """Create the Edit menu."""
        self._edit_menu = self._menubar.addMenu("&Edit")
        for entry in EDIT_MENU_LAYOUT:
            if entry is None:
                self._edit_menu.addSeparator()
                continue
            command_id, text, icon = entry
            self._actions[command_id] = self._add_action(self._edit_menu, command_id, text, icon)
        logger.debug("Edit menu created with %d actions", len(self._actions))

    def _add_action(
        self,
        menu: QMenu,
        command_id: str,
        text: str,
        icon: Optional[QStyle.StandardPixmap] = None,
    ) -> QAction:
        """Create an action bound to a command id and add it to ``menu``."""
        if icon is None:
            action = QAction(text, self._window)
        else:
            action = QAction(self._style.standardIcon(icon), text, self._window)
        menu.addAction(action)

        shortcut = self._window.config_manager.shortcut(command_id)
        if shortcut:
            action.setShortcut(QKeySequence(shortcut))

        action.triggered.connect(
            lambda _checked=False, cid=command_id: self._window.command_manager.dispatch_command(cid)
        )
        return action
