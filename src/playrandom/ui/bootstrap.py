"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication

    from playrandom.settings import GameSettings

_LOGGER = logging.getLogger(__name__)


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings and theme."""
    from playrandom.ui.styles.theme import APP_STYLE

    app.setApplicationName("playrandom")
    if app.setStyle("Fusion") is None:
        _LOGGER.warning("Fusion style unavailable, using the platform default")
    app.setStyleSheet(APP_STYLE)


def run_application(
    settings: GameSettings | None = None,
    argv: list[str] | None = None,
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    from playrandom.ui.main_window import MainWindow

    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    window = MainWindow(settings)
    window.show()
    _LOGGER.info("Window shown, start FEN %s", window.controller.fen)

    return app.exec()
