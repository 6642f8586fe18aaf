"""
Text buffer model for QNotepad.

Commands only talk to the ``TextBuffer`` protocol. ``PlainTextBuffer`` is the
pure-Python implementation used by tests and headless callers; the editor
shell uses the Qt adapter in ``qnotepad.ui.adapters``.
"""

from __future__ import annotations

from enum import IntFlag
from typing import Optional, Protocol, Tuple, runtime_checkable


class FontStyle(IntFlag):
    """Display font style flags for the whole buffer."""
    PLAIN = 0
    ITALIC = 1


@runtime_checkable
class TextBuffer(Protocol):
    """Mutable text with a selection range [start, end) and a caret."""

    def text(self) -> str:
        ...

    def selection_range(self) -> Tuple[int, int]:
        ...

    def selected_text(self) -> Optional[str]:
        ...

    def select(self, start: int, end: int) -> None:
        ...

    def replace_range(self, start: int, end: int, text: str) -> None:
        ...

    def insert(self, text: str, at: int) -> None:
        ...

    def caret_position(self) -> int:
        ...

    def font_style(self) -> FontStyle:
        ...

    def set_font_style(self, style: FontStyle) -> None:
        ...


class PlainTextBuffer:
    """
    In-memory ``TextBuffer``.

    The selection is stored as an anchor and a caret position, like a text
    cursor: the caret is the moving end, and the selection spans the two.
    Edits collapse the selection to the end of the inserted text.
    """

    def __init__(self, text: str = "", font_style: FontStyle = FontStyle.PLAIN):
        self._text = text
        self._anchor = len(text)
        self._position = len(text)
        self._font_style = FontStyle(font_style)

    def __repr__(self) -> str:
        start, end = self.selection_range()
        return (
            f"PlainTextBuffer(text={self._text!r}, selection=({start}, {end}), "
            f"caret={self._position}, style={self._font_style.name})"
        )

    def text(self) -> str:
        return self._text

    def selection_range(self) -> Tuple[int, int]:
        return min(self._anchor, self._position), max(self._anchor, self._position)

    def selected_text(self) -> Optional[str]:
        start, end = self.selection_range()
        if start == end:
            return None
        return self._text[start:end]

    def select(self, start: int, end: int) -> None:
        """Select [start, end); the caret ends up at ``end``."""
        self._anchor = self._clamp(start)
        self._position = self._clamp(end)

    def set_caret(self, position: int) -> None:
        """Move the caret and clear the selection."""
        self._anchor = self._position = self._clamp(position)

    def replace_range(self, start: int, end: int, text: str) -> None:
        self._check_range(start, end)
        self._text = self._text[:start] + text + self._text[end:]
        self.set_caret(start + len(text))

    def insert(self, text: str, at: int) -> None:
        self.replace_range(at, at, text)

    def caret_position(self) -> int:
        return self._position

    def font_style(self) -> FontStyle:
        return self._font_style

    def set_font_style(self, style: FontStyle) -> None:
        self._font_style = FontStyle(style)

    def _clamp(self, position: int) -> int:
        return max(0, min(position, len(self._text)))

    def _check_range(self, start: int, end: int) -> None:
        if not 0 <= start <= end <= len(self._text):
            raise ValueError(
                f"Range [{start}, {end}) outside buffer of length {len(self._text)}"
            )
