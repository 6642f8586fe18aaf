"""
Core collaborators for QNotepad.

The text buffer and clipboard abstractions that commands operate on,
with pure-Python implementations of each.
"""

from qnotepad.core.buffer import FontStyle, TextBuffer, PlainTextBuffer
from qnotepad.core.clipboard import Clipboard, MemoryClipboard

__all__ = [
    "FontStyle",
    "TextBuffer",
    "PlainTextBuffer",
    "Clipboard",
    "MemoryClipboard",
]
