"""Qt application bootstrap helpers."""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING

from tapchess.game.controller import GameController
from tapchess.settings import AppSettings

if TYPE_CHECKING:
    from PyQt6.QtWidgets import QApplication, QMainWindow

_LOGGER = logging.getLogger(__name__)


def build_window(settings: AppSettings, controller: GameController) -> QMainWindow:
    """Create the main window showing the board for *controller*."""
    from PyQt6.QtWidgets import QMainWindow

    from tapchess.ui.board_view import BoardView
    from tapchess.ui.theme import BoardTheme

    window = QMainWindow()
    window.setWindowTitle("Chess")
    view = BoardView(controller, window, tile=settings.tile_size)
    scene = view.board_scene
    scene.set_theme(BoardTheme.by_name(settings.board_theme))
    scene.set_flipped(settings.flipped)
    scene.set_show_legal_moves(settings.show_legal_moves)
    scene.set_show_hover(settings.show_hover)
    window.setCentralWidget(view)

    side = settings.tile_size * 8
    window.resize(side, side)
    return window


def _configure_application(app: QApplication) -> None:
    """Apply app-wide settings."""
    app.setApplicationName("tapchess")
    app.setStyle("Fusion")


def run_application(
    settings: AppSettings | None = None, argv: list[str] | None = None
) -> int:
    """Create and run the main Qt application."""
    from PyQt6.QtWidgets import QApplication

    settings = settings or AppSettings()
    app = QApplication(sys.argv if argv is None else argv)
    _configure_application(app)

    controller = GameController(settings.rules)
    window = build_window(settings, controller)
    window.show()
    _LOGGER.info(
        "Board ready (%s theme, %s to move)",
        settings.board_theme,
        controller.state.side_to_move,
    )

    return app.exec()
