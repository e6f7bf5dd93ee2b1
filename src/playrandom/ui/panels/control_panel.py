"""ControlPanel — game action buttons."""

from __future__ import annotations

from PyQt6.QtCore import pyqtSignal
from PyQt6.QtGui import QFont
from PyQt6.QtWidgets import QHBoxLayout, QPushButton, QWidget

from playrandom.i18n import t


class ControlPanel(QWidget):
    """Buttons for game actions: reset, flip board, undo."""

    reset_clicked = pyqtSignal()
    flip_clicked = pyqtSignal()
    undo_clicked = pyqtSignal()

    def __init__(self, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self._setup_ui()
        self.retranslate_ui()

    def _setup_ui(self) -> None:
        layout = QHBoxLayout(self)
        layout.setContentsMargins(4, 4, 4, 4)
        layout.setSpacing(6)

        btn_font = QFont("Adwaita Sans", 10)

        self._btn_reset = QPushButton()
        self._btn_reset.setFont(btn_font)
        self._btn_reset.setMinimumHeight(36)
        self._btn_reset.clicked.connect(self.reset_clicked)
        layout.addWidget(self._btn_reset)

        self._btn_flip = QPushButton()
        self._btn_flip.setFont(btn_font)
        self._btn_flip.setMinimumHeight(36)
        self._btn_flip.clicked.connect(self.flip_clicked)
        layout.addWidget(self._btn_flip)

        self._btn_undo = QPushButton()
        self._btn_undo.setFont(btn_font)
        self._btn_undo.setMinimumHeight(36)
        self._btn_undo.clicked.connect(self.undo_clicked)
        layout.addWidget(self._btn_undo)

    def retranslate_ui(self) -> None:
        s = t()
        self._btn_reset.setText(s.btn_reset)
        self._btn_flip.setText(s.btn_flip)
        self._btn_undo.setText(s.btn_undo)
