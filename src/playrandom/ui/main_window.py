"""MainWindow — top-level window assembling all UI components."""

from __future__ import annotations

from collections.abc import Callable
from typing import TypeVar

import chess
from PyQt6.QtGui import QAction, QCloseEvent
from PyQt6.QtWidgets import QLabel, QMainWindow, QStatusBar, QVBoxLayout, QWidget

from playrandom.core.types import Orientation
from playrandom.game.controller import GameController
from playrandom.game.interfaces import GamePhase
from playrandom.game.overlays import HighlightMap
from playrandom.i18n import set_language, t
from playrandom.settings import GameSettings
from playrandom.ui.board.board_view import BoardView
from playrandom.ui.panels.control_panel import ControlPanel
from playrandom.ui.qt_scheduler import QtScheduler
from playrandom.ui.styles.theme import BoardTheme
from playrandom.ui.toast import ToastNotifier

TCallback = TypeVar("TCallback", bound=Callable[..., None])


class MainWindow(QMainWindow):
    """Main application window: the board, three buttons and toasts."""

    def __init__(self, settings: GameSettings | None = None) -> None:
        super().__init__()
        self._settings = settings if settings is not None else GameSettings()
        set_language(self._settings.language)

        self.setMinimumSize(480, 560)
        self.resize(640, 720)

        self._setup_ui()
        self._setup_menu()

        self._scheduler = QtScheduler(self)
        self._notifier = ToastNotifier(self._board_view)
        self._controller = GameController(
            scheduler=self._scheduler,
            notifier=self._notifier,
            settings=self._settings,
        )

        self._connect_signals()
        self._connect_game_events()
        self._apply_settings()
        self._sync_from_controller()

    @property
    def controller(self) -> GameController:
        return self._controller

    @property
    def board_view(self) -> BoardView:
        return self._board_view

    @property
    def notifier(self) -> ToastNotifier:
        return self._notifier

    # ── UI setup ─────────────────────────────────────────────────────────

    def _setup_ui(self) -> None:
        central = QWidget()
        self.setCentralWidget(central)
        root = QVBoxLayout(central)
        root.setContentsMargins(10, 10, 10, 10)
        root.setSpacing(6)

        self._board_view = BoardView()
        root.addWidget(self._board_view, stretch=1)

        self._control_panel = ControlPanel()
        root.addWidget(self._control_panel)

        self._status = QStatusBar()
        self.setStatusBar(self._status)
        self._status_label = QLabel()
        self._status.addWidget(self._status_label)

    def _setup_menu(self) -> None:
        menu_bar = self.menuBar()
        assert menu_bar is not None

        self._menu_game = menu_bar.addMenu("")
        assert self._menu_game is not None

        self._act_reset = QAction(self)
        self._act_reset.setShortcut("Ctrl+R")
        self._act_reset.triggered.connect(self._on_reset)
        self._menu_game.addAction(self._act_reset)

        self._act_undo = QAction(self)
        self._act_undo.setShortcut("Ctrl+Z")
        self._act_undo.triggered.connect(self._on_undo)
        self._menu_game.addAction(self._act_undo)

        self._act_flip = QAction(self)
        self._act_flip.setShortcut("F")
        self._act_flip.triggered.connect(self._on_flip)
        self._menu_game.addAction(self._act_flip)

        self._menu_game.addSeparator()

        self._act_quit = QAction(self)
        self._act_quit.setShortcut("Ctrl+Q")
        self._act_quit.triggered.connect(self.close)
        self._menu_game.addAction(self._act_quit)

    def retranslate_ui(self) -> None:
        s = t()
        self.setWindowTitle(s.window_title)
        self._menu_game.setTitle(s.menu_game)
        self._act_reset.setText(s.menu_reset)
        self._act_undo.setText(s.menu_undo)
        self._act_flip.setText(s.menu_flip_board)
        self._act_quit.setText(s.menu_quit)
        self._control_panel.retranslate_ui()

    def _apply_settings(self) -> None:
        s = self._settings
        set_language(s.language)
        self.retranslate_ui()

        scene = self._board_view.board_scene
        scene.set_theme(BoardTheme.by_name(s.board_theme))
        scene.set_show_coordinates(s.show_coordinates)

    # ── Signal wiring ────────────────────────────────────────────────────

    def _connect_signals(self) -> None:
        """Connect Qt widget signals."""
        self._board_view.square_clicked.connect(self._on_square_clicked)
        self._board_view.square_right_clicked.connect(self._on_square_right_clicked)
        self._control_panel.reset_clicked.connect(self._on_reset)
        self._control_panel.flip_clicked.connect(self._on_flip)
        self._control_panel.undo_clicked.connect(self._on_undo)

    def _connect_game_events(self) -> None:
        """Subscribe to GameController callbacks (idempotent)."""
        events = self._controller.events
        self._replace_callback(events.on_position_changed, self._on_position_changed)
        self._replace_callback(events.on_overlays_changed, self._on_overlays_changed)
        self._replace_callback(events.on_phase_changed, self._on_phase_changed)
        self._replace_callback(
            events.on_orientation_changed, self._on_orientation_changed
        )

    def _disconnect_game_events(self) -> None:
        """Detach this window from GameController callbacks."""
        events = self._controller.events
        self._remove_callback(events.on_position_changed, self._on_position_changed)
        self._remove_callback(events.on_overlays_changed, self._on_overlays_changed)
        self._remove_callback(events.on_phase_changed, self._on_phase_changed)
        self._remove_callback(
            events.on_orientation_changed, self._on_orientation_changed
        )

    @staticmethod
    def _replace_callback(
        callbacks: list[TCallback],
        callback: TCallback,
    ) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]
        callbacks.append(callback)

    @staticmethod
    def _remove_callback(callbacks: list[TCallback], callback: TCallback) -> None:
        callbacks[:] = [cb for cb in callbacks if cb != callback]

    # ── Board input ──────────────────────────────────────────────────────

    def _on_square_clicked(self, square: str) -> None:
        self._controller.on_square_click(square)

    def _on_square_right_clicked(self, square: str) -> None:
        self._controller.on_square_right_click(square)

    # ── User controls ────────────────────────────────────────────────────

    def _on_reset(self) -> None:
        self._notifier.clear()
        self._controller.reset()

    def _on_undo(self) -> None:
        self._controller.undo()

    def _on_flip(self) -> None:
        self._controller.flip_board()

    # ── Controller callbacks ─────────────────────────────────────────────

    def _on_position_changed(self, fen: str, move: chess.Move | None) -> None:
        scene = self._board_view.board_scene
        if move is None:
            scene.set_position(fen)
        else:
            scene.animate_and_sync(move, fen)

    def _on_overlays_changed(self, styles: HighlightMap) -> None:
        self._board_view.board_scene.set_square_styles(styles)

    def _on_orientation_changed(self, orientation: Orientation) -> None:
        self._board_view.board_scene.set_flipped(orientation is Orientation.BLACK)

    def _on_phase_changed(self, _phase: GamePhase) -> None:
        self._update_status()

    def _update_status(self) -> None:
        s = t()
        phase = self._controller.phase
        if phase == GamePhase.THINKING:
            text = s.status_thinking
        elif phase == GamePhase.GAME_OVER:
            text = s.status_game_over
        else:
            text = s.status_your_move
        self._status_label.setText(text)

    def _sync_from_controller(self) -> None:
        scene = self._board_view.board_scene
        scene.set_flipped(self._controller.orientation is Orientation.BLACK)
        scene.set_position(self._controller.fen)
        scene.set_square_styles(self._controller.square_styles())
        self._update_status()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._controller.cancel_pending()
        self._disconnect_game_events()
        super().closeEvent(event)
