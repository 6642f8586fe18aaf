"""
User Interface package for QNotepad.

This package provides the Qt/PySide6-based user interface:
- MainWindow: text area, button panel, menus and status bar
- Qt adapters for the text buffer and clipboard
- CommandManager: trigger dispatch and key routing
"""

from qnotepad.ui.adapters import QtClipboard, QtTextBuffer
from qnotepad.ui.button_panel import ButtonPanelSetup
from qnotepad.ui.command_manager import CommandManager
from qnotepad.ui.main_window import MainWindow
from qnotepad.ui.menubar import MenuBarSetup
from qnotepad.ui.statusbar import StatusBarSetup

__all__ = [
    "MainWindow",
    "MenuBarSetup",
    "ButtonPanelSetup",
    "StatusBarSetup",
    "CommandManager",
    "QtClipboard",
    "QtTextBuffer",
]
