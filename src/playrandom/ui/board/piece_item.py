"""PieceItem — a chess piece drawn on the QGraphicsScene."""

from __future__ import annotations

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QCursor
from PyQt6.QtSvgWidgets import QGraphicsSvgItem
from PyQt6.QtWidgets import QGraphicsItem

from playrandom.core.types import SquareName
from playrandom.ui.resources import piece_renderer


class PieceItem(QGraphicsSvgItem):
    """A single chess piece on the board.

    Stores its FEN *symbol* and logical *square*.  Mouse presses pass
    through to the scene, which owns all click handling.
    """

    _MARGIN_RATIO = 0.03

    def __init__(self, symbol: str, square: SquareName, tile_size: int) -> None:
        super().__init__()
        self.symbol = symbol
        self.square = square
        self._tile_size = tile_size
        self._margin = 0.0

        self.setSharedRenderer(piece_renderer(symbol))
        self.setTransformOriginPoint(0.0, 0.0)
        self.setCacheMode(QGraphicsItem.CacheMode.NoCache)
        self.setAcceptedMouseButtons(Qt.MouseButton.NoButton)
        self.setCursor(QCursor(Qt.CursorShape.PointingHandCursor))
        self.setZValue(1)
        self._update_size(tile_size)

    @property
    def margin(self) -> float:
        """Inner margin to keep the piece away from tile edges."""
        return self._margin

    def _update_size(self, size: int) -> None:
        self._tile_size = size
        self._margin = float(size) * self._MARGIN_RATIO
        draw_size = max(float(size) - 2.0 * self._margin, 1.0)

        renderer = self.renderer()
        if renderer is None:
            return
        bounds = self.boundingRect()
        width = float(bounds.width()) or float(renderer.defaultSize().width()) or 1.0
        height = float(bounds.height()) or float(renderer.defaultSize().height()) or 1.0
        scale = min(draw_size / width, draw_size / height)
        self.setScale(scale)
