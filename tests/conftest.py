import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from qnotepad.commands import Invoker
from qnotepad.config import JsonConfigManager
from qnotepad.core import MemoryClipboard, PlainTextBuffer


@pytest.fixture
def buffer():
    return PlainTextBuffer()


@pytest.fixture
def clipboard():
    return MemoryClipboard()


@pytest.fixture
def invoker():
    return Invoker()


@pytest.fixture
def config_manager(qapp, tmp_path, monkeypatch):
    """Config manager isolated in a temporary directory."""
    monkeypatch.delenv("QNOTEPAD_CONFIG_DIR", raising=False)
    return JsonConfigManager(tmp_path / "config")


@pytest.fixture
def window(qtbot, config_manager, clipboard):
    """Main window with an in-memory clipboard."""
    from qnotepad.ui import MainWindow

    win = MainWindow(config_manager=config_manager, clipboard=clipboard)
    qtbot.addWidget(win)
    return win


@pytest.fixture(params=["plain", "qt"])
def make_buffer(request, qtbot):
    """Factory for a buffer holding ``text``, once per buffer implementation."""

    def factory(text=""):
        if request.param == "plain":
            return PlainTextBuffer(text)
        from PySide6.QtWidgets import QPlainTextEdit

        from qnotepad.ui.adapters import QtTextBuffer

        editor = QPlainTextEdit()
        qtbot.addWidget(editor)
        editor.setPlainText(text)
        return QtTextBuffer(editor)

    return factory
