"""
Process-wide logging for QNotepad.

Everything goes to a rotating log file; stderr output is optional. Qt's own
diagnostics (``qWarning`` and friends) are routed into the ``qnotepad.qt``
logger, and uncaught exceptions are logged on ``qnotepad.crash`` before the
previous excepthook runs.
"""

from __future__ import annotations

from dataclasses import dataclass
import logging
import os
import sys
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler


LOG_FILE_NAME = "qnotepad.log"

LOG_MAX_BYTES = 10_000_000
LOG_BACKUP_COUNT = 4

DEFAULT_LOG_DIR = Path.home() / ".qnotepad" / "logs"
FALLBACK_LOG_DIR = Path(tempfile.gettempdir()) / "qnotepad" / "logs"

FILE_FORMAT = "%(asctime)s.%(msecs)03d %(levelname)s [%(name)s] %(message)s"
STDERR_FORMAT = "%(levelname)s [%(name)s] %(message)s"

QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

_initialized = False
_log_file_path: Optional[Path] = None
_original_excepthook = sys.excepthook


@dataclass(frozen=True)
class LogSettings:
    """Where and how loudly to log. Environment variables win over arguments."""

    log_dir: Path
    stderr_level: int
    to_stderr: bool

    @classmethod
    def resolve(
        cls,
        log_level: str | int | None = None,
        log_dir: str | Path | None = None,
        enable_stderr: bool | None = None,
    ) -> "LogSettings":
        env = os.environ
        directory = Path(env.get("QNOTEPAD_LOG_DIR") or log_dir or DEFAULT_LOG_DIR).expanduser()
        if enable_stderr is None or "QNOTEPAD_LOG_TO_STDERR" in env:
            enable_stderr = env.get("QNOTEPAD_LOG_TO_STDERR", "1") != "0"
        return cls(
            log_dir=directory,
            stderr_level=_resolve_level(env.get("QNOTEPAD_LOG_LEVEL", log_level)),
            to_stderr=enable_stderr,
        )


def _resolve_level(level: str | int | None) -> int:
    """Map a level name or number to a logging constant; unknown names mean INFO."""
    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level or "INFO").upper())
    return value if isinstance(value, int) else logging.INFO


def _usable_log_dir(preferred: Path) -> Path:
    try:
        preferred.mkdir(parents=True, exist_ok=True)
        return preferred
    except OSError as exc:
        FALLBACK_LOG_DIR.mkdir(parents=True, exist_ok=True)
        # Logging is not up yet.
        print(
            f"Log directory '{preferred}' unavailable ({exc}); using '{FALLBACK_LOG_DIR}'",
            file=sys.stderr,
        )
        return FALLBACK_LOG_DIR


def _file_handler(path: Path) -> logging.Handler:
    handler = RotatingFileHandler(
        path, maxBytes=LOG_MAX_BYTES, backupCount=LOG_BACKUP_COUNT, encoding="utf-8"
    )
    handler.setLevel(logging.DEBUG)
    handler.setFormatter(logging.Formatter(FILE_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    return handler


def _stderr_handler(level: int) -> logging.Handler:
    handler = logging.StreamHandler()
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(STDERR_FORMAT))
    return handler


def _log_unhandled_exception(exc_type, exc_value, exc_traceback) -> None:
    """Log an uncaught exception, then defer to the previous hook."""
    if not issubclass(exc_type, KeyboardInterrupt):
        logging.getLogger("qnotepad.crash").critical(
            "Unhandled exception",
            exc_info=(exc_type, exc_value, exc_traceback),
        )
    _original_excepthook(exc_type, exc_value, exc_traceback)


def _log_qt_message(mode, context, message: str) -> None:
    """Qt message handler: forward Qt diagnostics to ``qnotepad.qt``."""
    level = QT_LEVELS.get(mode, logging.WARNING)
    origin = ""
    if context is not None and context.file:
        origin = f" ({context.file}:{context.line})"
    logging.getLogger("qnotepad.qt").log(level, "%s%s", message, origin)


def install_qt_message_handler() -> None:
    """Route Qt's qDebug/qWarning output through Python logging."""
    qInstallMessageHandler(_log_qt_message)


def setup_logging(
    log_level: str | int | None = None,
    log_dir: str | Path | None = None,
    enable_stderr: bool | None = None,
) -> Path:
    """Configure the root logger once and return the log file path."""
    global _initialized
    global _log_file_path

    if _initialized and _log_file_path is not None:
        return _log_file_path

    settings = LogSettings.resolve(log_level, log_dir, enable_stderr)
    _log_file_path = _usable_log_dir(settings.log_dir) / LOG_FILE_NAME

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()
    root_logger.addHandler(_file_handler(_log_file_path))
    if settings.to_stderr:
        root_logger.addHandler(_stderr_handler(settings.stderr_level))

    logging.captureWarnings(True)
    sys.excepthook = _log_unhandled_exception
    _initialized = True

    logging.getLogger(__name__).info("Logging to '%s'", _log_file_path)
    return _log_file_path


def get_log_file_path() -> Optional[Path]:
    """Return the log file path, or None before ``setup_logging``."""
    return _log_file_path
