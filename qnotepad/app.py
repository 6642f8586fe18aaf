"""
QNotepad application setup and main window initialization.
"""

import sys
from typing import List
import logging

from PySide6.QtWidgets import QApplication

from qnotepad import __version__
from qnotepad.config import JsonConfigManager
from qnotepad.logging_config import install_qt_message_handler, setup_logging


logger = logging.getLogger(__name__)


def run_app(args: List[str]) -> int:
    """Initialize and run the QNotepad application."""
    log_path = setup_logging()
    install_qt_message_handler()
    config_manager = JsonConfigManager()
    logger.info("Starting QNotepad %s (args=%s, log_file=%s)", __version__, args, log_path)
    logger.info("Configuration directory: %s", config_manager.config_dir)

    app = QApplication(sys.argv[:1] + list(args))
    app.setApplicationName("QNotepad")
    app.setApplicationVersion(__version__)
    app.setOrganizationName("QNotepad")

    # Import here so logging is configured before any widget module loads
    from qnotepad.ui.main_window import MainWindow

    window = MainWindow(config_manager=config_manager)
    window.show()
    rc = app.exec()
    logger.info("Application exited with code %d", rc)
    return rc
