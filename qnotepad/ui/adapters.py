"""
Qt implementations of the text buffer and clipboard collaborators.

``QtTextBuffer`` drives a ``QPlainTextEdit`` through text cursors and
``QtClipboard`` wraps the application clipboard.
"""

from __future__ import annotations

from typing import Optional, Tuple
import logging

from PySide6.QtGui import QClipboard, QGuiApplication, QTextCursor
from PySide6.QtWidgets import QPlainTextEdit

from qnotepad.core.buffer import FontStyle
from qnotepad.errors import ClipboardError


logger = logging.getLogger(__name__)


# QTextCursor.selectedText() reports line breaks as U+2029.
PARAGRAPH_SEPARATOR = "\u2029"


def _to_utf16(text: str, index: int) -> int:
    """Convert a ``str`` index into a Qt position (UTF-16 code units)."""
    return index + sum(1 for ch in text[:index] if ord(ch) > 0xFFFF)


def _from_utf16(text: str, offset: int) -> int:
    """Convert a Qt position (UTF-16 code units) into a ``str`` index."""
    units = 0
    for index, ch in enumerate(text):
        if units >= offset:
            return index
        units += 2 if ord(ch) > 0xFFFF else 1
    return len(text)


class QtTextBuffer:
    """
    ``TextBuffer`` backed by a ``QPlainTextEdit``.

    Qt positions count UTF-16 code units; ``TextBuffer`` positions are
    ``str`` indices. Every position is converted at this boundary.
    """

    def __init__(self, editor: QPlainTextEdit):
        self._editor = editor

    @property
    def editor(self) -> QPlainTextEdit:
        """Return the wrapped widget."""
        return self._editor

    def text(self) -> str:
        return self._editor.toPlainText()

    def selection_range(self) -> Tuple[int, int]:
        cursor = self._editor.textCursor()
        text = self.text()
        return _from_utf16(text, cursor.selectionStart()), _from_utf16(text, cursor.selectionEnd())

    def selected_text(self) -> Optional[str]:
        selected = self._editor.textCursor().selectedText()
        if not selected:
            return None
        return selected.replace(PARAGRAPH_SEPARATOR, "\n")

    def select(self, start: int, end: int) -> None:
        text = self.text()
        cursor = self._editor.textCursor()
        cursor.setPosition(_to_utf16(text, self._clamp(start, text)))
        cursor.setPosition(_to_utf16(text, self._clamp(end, text)), QTextCursor.KeepAnchor)
        self._editor.setTextCursor(cursor)

    def replace_range(self, start: int, end: int, text: str) -> None:
        current = self.text()
        if not 0 <= start <= end <= len(current):
            raise ValueError(f"Range [{start}, {end}) outside buffer of length {len(current)}")

        cursor = QTextCursor(self._editor.document())
        cursor.setPosition(_to_utf16(current, start))
        cursor.setPosition(_to_utf16(current, end), QTextCursor.KeepAnchor)
        cursor.insertText(text)
        self._editor.setTextCursor(cursor)

    def insert(self, text: str, at: int) -> None:
        self.replace_range(at, at, text)

    def caret_position(self) -> int:
        return _from_utf16(self.text(), self._editor.textCursor().position())

    def font_style(self) -> FontStyle:
        return FontStyle.ITALIC if self._editor.font().italic() else FontStyle.PLAIN

    def set_font_style(self, style: FontStyle) -> None:
        font = self._editor.font()
        font.setItalic(bool(style & FontStyle.ITALIC))
        self._editor.setFont(font)

    @staticmethod
    def _clamp(position: int, text: str) -> int:
        return max(0, min(position, len(text)))


class QtClipboard:
    """``Clipboard`` backed by the Qt application clipboard."""

    def __init__(self, clipboard: Optional[QClipboard] = None):
        self._clipboard = clipboard

    def _qt_clipboard(self) -> QClipboard:
        if self._clipboard is None:
            self._clipboard = QGuiApplication.clipboard()
        if self._clipboard is None:
            raise ClipboardError("No application clipboard available")
        return self._clipboard

    def write(self, text: str) -> None:
        try:
            self._qt_clipboard().setText(text)
        except ClipboardError:
            raise
        except Exception as exc:
            raise ClipboardError(f"Clipboard write failed: {exc}") from exc

    def read(self) -> Optional[str]:
        try:
            mime = self._qt_clipboard().mimeData()
            if mime is None or not mime.hasText():
                return None
            return mime.text()
        except ClipboardError:
            raise
        except Exception as exc:
            raise ClipboardError(f"Clipboard read failed: {exc}") from exc
