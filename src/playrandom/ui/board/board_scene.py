"""BoardScene — QGraphicsScene that draws the chessboard, pieces and overlays."""

from __future__ import annotations

from collections.abc import Mapping

import chess
from PyQt6.QtCore import (
    QAbstractAnimation,
    QEasingCurve,
    QObject,
    QPointF,
    QPropertyAnimation,
    Qt,
    pyqtSignal,
)
from PyQt6.QtGui import QBrush, QColor, QFont, QPen
from PyQt6.QtWidgets import (
    QAbstractGraphicsShapeItem,
    QGraphicsEllipseItem,
    QGraphicsRectItem,
    QGraphicsScene,
    QGraphicsSceneMouseEvent,
    QGraphicsSimpleTextItem,
)

from playrandom.core.types import SquareName, parse_square, square_name
from playrandom.game.overlays import StyleToken
from playrandom.ui.board.piece_item import PieceItem
from playrandom.ui.styles.theme import BoardTheme


class BoardScene(QGraphicsScene):
    """Renders the board, coordinates, square styles and piece items.

    Holds no game logic: it draws whatever position and style overlay it
    is given and reports clicks.

    Signals:
        square_clicked(str): Left button pressed on a square.
        square_right_clicked(str): Right button pressed on a square.
    """

    square_clicked = pyqtSignal(str)
    square_right_clicked = pyqtSignal(str)

    TILE = 80  # px per square

    _ANIM_DURATION_MS = 200
    _DOT_RATIO = 0.25
    _RING_WIDTH_RATIO = 0.08

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._theme = BoardTheme.default()
        self._fen: str | None = None
        self._flipped = False
        self._show_coordinates = True
        self._animate_moves = True
        self._active_anim: QPropertyAnimation | None = None
        self._styles: dict[SquareName, StyleToken] = {}

        # Visual layers
        self._square_items: dict[SquareName, QGraphicsRectItem] = {}
        self._style_items: list[QAbstractGraphicsShapeItem] = []
        self._piece_items: dict[SquareName, PieceItem] = {}
        self._coord_items: list[QGraphicsSimpleTextItem] = []

        self._draw_board()

    # ── Public API ───────────────────────────────────────────────────────

    def set_position(self, fen: str) -> None:
        """Update the displayed position (full redraw of pieces)."""
        self._stop_animation()
        self._fen = fen
        self._sync_pieces()

    def set_flipped(self, flipped: bool) -> None:
        """Flip the board orientation."""
        self._flipped = flipped
        self._redraw()

    def is_flipped(self) -> bool:
        """Return whether the board is currently flipped."""
        return self._flipped

    def set_theme(self, theme: BoardTheme) -> None:
        self._theme = theme
        self._redraw()

    def set_show_coordinates(self, visible: bool) -> None:
        """Show or hide rank/file coordinate labels."""
        self._show_coordinates = visible
        for item in self._coord_items:
            item.setVisible(visible)

    def set_animate_moves(self, enabled: bool) -> None:
        """Enable or disable piece move animations."""
        self._animate_moves = enabled

    def set_square_styles(self, styles: Mapping[SquareName, StyleToken]) -> None:
        """Replace the overlay drawn on top of the squares."""
        self._styles = dict(styles)
        self._draw_styles()

    def square_styles(self) -> dict[SquareName, StyleToken]:
        return dict(self._styles)

    def animate_and_sync(self, move: chess.Move, fen: str) -> None:
        """Slide the moving piece to its destination, then full-sync.

        *fen* becomes the displayed position immediately, so a redraw in
        the middle of the slide already shows it.  Falls back to an instant
        sync when animation is disabled or a previous animation is still
        running.
        """
        self._fen = fen
        if self._active_anim is not None:
            self._stop_animation()
            self._sync_pieces()
            return

        from_name = square_name(move.from_square)
        to_name = square_name(move.to_square)
        item = self._piece_items.get(from_name)
        if not self._animate_moves or item is None:
            self._sync_pieces()
            return

        # Captured piece disappears before the slide; castling rook and
        # en-passant victims are fixed up by the final sync.
        captured = self._piece_items.pop(to_name, None)
        if captured is not None:
            self.removeItem(captured)

        target = self._square_origin(to_name)
        del self._piece_items[from_name]
        self._piece_items[to_name] = item
        item.square = to_name
        item.setZValue(2)

        anim = QPropertyAnimation(item, b"pos", self)
        anim.setDuration(self._ANIM_DURATION_MS)
        anim.setStartValue(item.pos())
        anim.setEndValue(QPointF(target.x() + item.margin, target.y() + item.margin))
        anim.setEasingCurve(QEasingCurve.Type.OutCubic)

        def _on_finished() -> None:
            self._active_anim = None
            item.setZValue(1)
            self._sync_pieces()

        anim.finished.connect(_on_finished)
        self._active_anim = anim
        anim.start(QAbstractAnimation.DeletionPolicy.DeleteWhenStopped)

    # ── Board drawing ────────────────────────────────────────────────────

    def _redraw(self) -> None:
        self._stop_animation()
        self._draw_board()
        self._sync_pieces()
        self._draw_styles()

    def _draw_board(self) -> None:
        """Draw or redraw the 64 squares and coordinates."""
        for sq_item in self._square_items.values():
            self.removeItem(sq_item)
        self._square_items.clear()
        for coord_item in self._coord_items:
            self.removeItem(coord_item)
        self._coord_items.clear()

        t = self.TILE
        font = QFont("Adwaita Sans", max(9, t // 8))

        for sq in chess.SQUARES:
            f, r = chess.square_file(sq), chess.square_rank(sq)
            vf, vr = self._visual_coords(f, r)
            is_dark = (f + r) % 2 == 0
            color = self._theme.dark_square if is_dark else self._theme.light_square
            rect = QGraphicsRectItem(vf * t, vr * t, t, t)
            rect.setBrush(QBrush(color))
            rect.setPen(QPen(Qt.PenStyle.NoPen))
            rect.setZValue(0)
            self.addItem(rect)
            self._square_items[square_name(sq)] = rect

            text_color = self._theme.coord_dark if is_dark else self._theme.coord_light
            # Rank numbers (left edge)
            if f == (7 if self._flipped else 0):
                self._add_coord(str(r + 1), vf * t + 2, vr * t + 1, font, text_color)
            # File letters (bottom edge)
            if r == (7 if self._flipped else 0):
                self._add_coord(
                    chess.FILE_NAMES[f],
                    vf * t + t - 12,
                    vr * t + t - 16,
                    font,
                    text_color,
                )

        self.setSceneRect(0, 0, 8 * t, 8 * t)

    def _add_coord(
        self, label: str, x: float, y: float, font: QFont, color: QColor
    ) -> None:
        txt = QGraphicsSimpleTextItem(label)
        txt.setFont(font)
        txt.setBrush(QBrush(color))
        txt.setPos(x, y)
        txt.setZValue(0.3)
        txt.setVisible(self._show_coordinates)
        self.addItem(txt)
        self._coord_items.append(txt)

    def _draw_styles(self) -> None:
        self._clear_items(self._style_items)
        t = self.TILE
        for name, token in self._styles.items():
            origin = self._square_origin(name)
            color = self._theme.color_for(token)
            item: QAbstractGraphicsShapeItem
            if token == StyleToken.MOVE_TARGET:
                d = t * self._DOT_RATIO * 2
                off = (t - d) / 2
                item = QGraphicsEllipseItem(origin.x() + off, origin.y() + off, d, d)
                item.setBrush(QBrush(color))
                item.setPen(QPen(Qt.PenStyle.NoPen))
            elif token == StyleToken.CAPTURE_TARGET:
                w = t * self._RING_WIDTH_RATIO
                item = QGraphicsEllipseItem(
                    origin.x() + w / 2, origin.y() + w / 2, t - w, t - w
                )
                item.setBrush(QBrush(Qt.BrushStyle.NoBrush))
                item.setPen(QPen(color, w))
            else:
                item = QGraphicsRectItem(origin.x(), origin.y(), t, t)
                item.setBrush(QBrush(color))
                item.setPen(QPen(Qt.PenStyle.NoPen))
            item.setZValue(0.8 if token == StyleToken.ANNOTATION else 0.5)
            self.addItem(item)
            self._style_items.append(item)

    # ── Piece synchronisation ────────────────────────────────────────────

    def _sync_pieces(self) -> None:
        """Re-create all piece items from the current FEN."""
        for item in self._piece_items.values():
            self.removeItem(item)
        self._piece_items.clear()

        if self._fen is None:
            return

        t = self.TILE
        board = chess.Board(self._fen)
        for sq, piece in board.piece_map().items():
            name = square_name(sq)
            item = PieceItem(piece.symbol(), name, t)
            origin = self._square_origin(name)
            item.setPos(origin.x() + item.margin, origin.y() + item.margin)
            self.addItem(item)
            self._piece_items[name] = item

    def _stop_animation(self) -> None:
        if self._active_anim is not None:
            self._active_anim.stop()
            self._active_anim = None

    # ── Mouse interaction ────────────────────────────────────────────────

    def mousePressEvent(self, event: QGraphicsSceneMouseEvent | None) -> None:
        if event is None:
            return super().mousePressEvent(event)

        name = self._pos_to_square(event.scenePos())
        if name is None:
            return super().mousePressEvent(event)

        if event.button() == Qt.MouseButton.RightButton:
            self.square_right_clicked.emit(name)
        elif event.button() == Qt.MouseButton.LeftButton:
            self.square_clicked.emit(name)
        event.accept()

    def _clear_items(self, items: list) -> None:
        for item in items:
            self.removeItem(item)
        items.clear()

    # ── Coordinate helpers ───────────────────────────────────────────────

    def _visual_coords(self, file: int, rank: int) -> tuple[int, int]:
        """Convert board file/rank to visual column/row."""
        if self._flipped:
            return 7 - file, rank
        return file, 7 - rank

    def _square_origin(self, name: SquareName) -> QPointF:
        """Top-left scene point of square *name*."""
        sq = parse_square(name)
        vf, vr = self._visual_coords(chess.square_file(sq), chess.square_rank(sq))
        return QPointF(vf * self.TILE, vr * self.TILE)

    def _pos_to_square(self, pos: QPointF) -> SquareName | None:
        """Scene position → board square name."""
        t = self.TILE
        col = int(pos.x() // t)
        row = int(pos.y() // t)
        if not (0 <= col < 8 and 0 <= row < 8):
            return None
        if self._flipped:
            f, r = 7 - col, row
        else:
            f, r = col, 7 - row
        return square_name(chess.square(f, r))
