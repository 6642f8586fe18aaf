"""
JSON-backed settings for QNotepad.

Two sections, each stored as ``<section>.json`` in the config directory:
``ui`` (window, editor font, status bar) and ``shortcuts`` (one key
sequence per edit command). Values read from disk are validated on load;
anything malformed is replaced by its default and logged.
"""

from __future__ import annotations

from copy import deepcopy
import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QKeySequence


logger = logging.getLogger(__name__)


EDIT_COMMAND_IDS = ("cut", "copy", "paste", "italic", "undo")

DEFAULT_CONFIGS: dict[str, dict[str, Any]] = {
    "ui": {
        "window": {
            "geometry": "",
            "size": [400, 300],
            "title": "Simple Notepad Clone",
        },
        "editor": {
            "font_family": "",
            "font_point_size": 11,
        },
        "status_timeout_ms": 2000,
        "show_button_panel": True,
    },
    "shortcuts": {
        "edit.cut": "Ctrl+X",
        "edit.copy": "Ctrl+C",
        "edit.paste": "Ctrl+V",
        "edit.italic": "Ctrl+I",
        "edit.undo": "Ctrl+Z",
    },
}


def _is_window_size(value: Any) -> bool:
    return (
        isinstance(value, list)
        and len(value) == 2
        and all(isinstance(v, int) and not isinstance(v, bool) and v > 0 for v in value)
    )


def _is_positive_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


def _is_non_negative_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value >= 0


# Dotted path in the ``ui`` section -> validator.
UI_VALIDATORS: dict[str, Callable[[Any], bool]] = {
    "window.geometry": lambda v: isinstance(v, str) and v.isascii(),
    "window.size": _is_window_size,
    "window.title": lambda v: isinstance(v, str),
    "editor.font_family": lambda v: isinstance(v, str),
    "editor.font_point_size": _is_positive_int,
    "status_timeout_ms": _is_non_negative_int,
    "show_button_panel": lambda v: isinstance(v, bool),
}


def is_valid_shortcut(value: Any) -> bool:
    """Return True for a single-chord key sequence string, or "" (unbound)."""
    if not isinstance(value, str):
        return False
    if not value.strip():
        return True
    sequence = QKeySequence.fromString(value.strip(), QKeySequence.PortableText)
    if sequence.isEmpty() or sequence.count() != 1:
        return False
    return sequence[0].key() != Qt.Key_unknown


def _path_get(data: dict[str, Any], dotted_path: str, default: Any = None) -> Any:
    """Read a nested key from dotted path notation; a literal flat key wins."""
    if dotted_path in data:
        return data[dotted_path]
    node: Any = data
    for part in dotted_path.split("."):
        if not isinstance(node, dict) or part not in node:
            return default
        node = node[part]
    return node


def _path_set(data: dict[str, Any], dotted_path: str, value: Any) -> None:
    """Set a nested key using dotted path notation."""
    node = data
    parts = dotted_path.split(".")
    for part in parts[:-1]:
        if not isinstance(node.get(part), dict):
            node[part] = {}
        node = node[part]
    node[parts[-1]] = value


def _read_json_object(path: Path) -> dict[str, Any]:
    """Return the JSON object stored at ``path``, or {} if unusable."""
    if not path.exists():
        logger.info("Creating default config file '%s'", path)
        return {}
    try:
        with path.open("r", encoding="utf-8") as handle:
            parsed = json.load(handle)
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Failed to load config '%s': %s", path, exc)
        return {}
    if not isinstance(parsed, dict):
        logger.warning("Config '%s' is not a JSON object; resetting to defaults", path)
        return {}
    return parsed


class JsonConfigManager:
    """Loads, validates and saves QNotepad settings."""

    def __init__(self, config_dir: str | Path | None = None):
        base_dir = os.environ.get("QNOTEPAD_CONFIG_DIR")
        root = Path(base_dir or config_dir or Path.home() / ".qnotepad" / "config")
        self._config_dir = root.expanduser().resolve()
        self._config_dir.mkdir(parents=True, exist_ok=True)
        self._data: dict[str, dict[str, Any]] = {}

        self._load()

    @property
    def config_dir(self) -> Path:
        """Return configuration directory path."""
        return self._config_dir

    def get(self, section: str, dotted_path: str, default: Any = None) -> Any:
        """Get a value from a section by dotted path."""
        return _path_get(self._data.get(section, {}), dotted_path, default)

    def set(self, section: str, dotted_path: str, value: Any) -> None:
        """Set a value in a section by dotted path."""
        _path_set(self._data.setdefault(section, {}), dotted_path, value)

    def save_all(self) -> None:
        """Write every section to its JSON file."""
        for section, data in self._data.items():
            path = self._config_dir / f"{section}.json"
            with path.open("w", encoding="utf-8") as handle:
                json.dump(data, handle, indent=2, sort_keys=True)
                handle.write("\n")

    # -------------------------------------------------------------------------
    # Typed accessors
    # -------------------------------------------------------------------------

    def window_title(self) -> str:
        return self.get("ui", "window.title")

    def window_size(self) -> tuple[int, int]:
        width, height = self.get("ui", "window.size")
        return width, height

    def window_geometry(self) -> str:
        """Base64 window geometry saved on the last close, or ""."""
        return self.get("ui", "window.geometry")

    def editor_font(self) -> tuple[str, int]:
        """Return (family, point size); an empty family means the system default."""
        return self.get("ui", "editor.font_family"), self.get("ui", "editor.font_point_size")

    def status_timeout(self) -> int:
        return self.get("ui", "status_timeout_ms")

    def show_button_panel(self) -> bool:
        return self.get("ui", "show_button_panel")

    def shortcut(self, command_id: str) -> Optional[str]:
        """Return the key sequence bound to an edit command, or None if unbound."""
        value = self.get("shortcuts", f"edit.{command_id}", "")
        return value.strip() or None

    # -------------------------------------------------------------------------
    # Loading
    # -------------------------------------------------------------------------

    def _load(self) -> None:
        """Load both sections, validate them, and write the result back."""
        ui = deepcopy(DEFAULT_CONFIGS["ui"])
        for path, value in _flatten(_read_json_object(self._config_dir / "ui.json")):
            validator = UI_VALIDATORS.get(path)
            if validator is None:
                logger.warning("Ignoring unknown ui setting '%s'", path)
            elif not validator(value):
                logger.warning("Invalid ui setting '%s'=%r; using default", path, value)
            else:
                _path_set(ui, path, value)

        shortcuts = deepcopy(DEFAULT_CONFIGS["shortcuts"])
        for key, value in _read_json_object(self._config_dir / "shortcuts.json").items():
            if key not in shortcuts:
                logger.warning("Ignoring shortcut for unknown command '%s'", key)
            elif not is_valid_shortcut(value):
                logger.warning("Invalid shortcut %r for '%s'; using '%s'", value, key, shortcuts[key])
            else:
                shortcuts[key] = value

        self._data = {"ui": ui, "shortcuts": shortcuts}
        self.save_all()


def _flatten(data: dict[str, Any], prefix: str = "") -> list[tuple[str, Any]]:
    """Flatten nested dicts into (dotted path, leaf value) pairs."""
    items: list[tuple[str, Any]] = []
    for key, value in data.items():
        path = f"{prefix}{key}"
        if isinstance(value, dict):
            items.extend(_flatten(value, f"{path}."))
        else:
            items.append((path, value))
    return items
