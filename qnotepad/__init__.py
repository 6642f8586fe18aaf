"""
QNotepad - a small PySide6 text editor.

Clipboard operations (cut, copy, paste), an italic display toggle and a
linear undo history built on the command pattern.
"""

__version__ = "0.1.0"
__author__ = "QNotepad Contributors"
