"""Configuration management for QNotepad."""

from qnotepad.config.manager import (
    DEFAULT_CONFIGS,
    EDIT_COMMAND_IDS,
    JsonConfigManager,
    is_valid_shortcut,
)

__all__ = ["DEFAULT_CONFIGS", "EDIT_COMMAND_IDS", "JsonConfigManager", "is_valid_shortcut"]
