"""
Clipboard collaborator for QNotepad.

A single-slot string holder written by Cut/Copy and read by Paste. It is
passed to commands explicitly so they never reach for a global clipboard.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class Clipboard(Protocol):
    """Single-slot text clipboard."""

    def write(self, text: str) -> None:
        """Replace the clipboard contents with ``text``."""

    def read(self) -> Optional[str]:
        """
        Return the clipboard text, or None when it holds no text.

        Raises:
            ClipboardError: the clipboard could not be accessed.
        """


class MemoryClipboard:
    """Process-local clipboard backed by a single attribute."""

    def __init__(self, text: Optional[str] = None):
        self._text = text

    def write(self, text: str) -> None:
        self._text = text

    def read(self) -> Optional[str]:
        return self._text

    def clear(self) -> None:
        self._text = None
