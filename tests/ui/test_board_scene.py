"""Tests for BoardScene drawing, geometry and click signals."""

from __future__ import annotations

import chess
import pytest
from PyQt6.QtCore import QPointF, Qt
from PyQt6.QtWidgets import QGraphicsEllipseItem, QGraphicsRectItem

from playrandom.game.overlays import StyleToken
from playrandom.ui.board.board_scene import BoardScene
from playrandom.ui.board.piece_item import PieceItem
from playrandom.ui.resources import piece_renderer
from playrandom.ui.styles.theme import BoardTheme


def _centre(scene: BoardScene, name: str) -> QPointF:
    origin = scene._square_origin(name)
    half = scene.TILE / 2
    return QPointF(origin.x() + half, origin.y() + half)


def test_pos_to_square_respects_orientation() -> None:
    scene = BoardScene()
    scene.set_flipped(False)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "a8"

    scene.set_flipped(True)
    assert scene._pos_to_square(scene.sceneRect().topLeft()) == "h1"


def test_pos_outside_board_is_none() -> None:
    scene = BoardScene()
    assert scene._pos_to_square(QPointF(-5, 10)) is None
    assert scene._pos_to_square(QPointF(8 * scene.TILE + 1, 10)) is None


def test_square_origin_round_trips() -> None:
    scene = BoardScene()
    for flipped in (False, True):
        scene.set_flipped(flipped)
        for sq in chess.SQUARES:
            name = chess.square_name(sq)
            assert scene._pos_to_square(_centre(scene, name)) == name


def test_set_position_creates_one_item_per_piece() -> None:
    scene = BoardScene()
    scene.set_position(chess.STARTING_FEN)
    assert len(scene._piece_items) == 32
    assert scene._piece_items["e1"].symbol == "K"
    assert scene._piece_items["d8"].symbol == "q"

    scene.set_position("8/8/8/4k3/8/8/8/4K3 w - - 0 1")
    assert set(scene._piece_items) == {"e5", "e1"}


def test_set_show_coordinates_toggles_all_labels_visibility() -> None:
    scene = BoardScene()
    assert len(scene._coord_items) == 16

    scene.set_show_coordinates(False)
    assert all(not item.isVisible() for item in scene._coord_items)

    scene.set_show_coordinates(True)
    assert all(item.isVisible() for item in scene._coord_items)


def test_square_styles_draw_shapes() -> None:
    scene = BoardScene()
    scene.set_square_styles(
        {
            "e2": StyleToken.SOURCE,
            "e3": StyleToken.MOVE_TARGET,
            "d3": StyleToken.CAPTURE_TARGET,
            "a1": StyleToken.ANNOTATION,
        }
    )
    assert len(scene._style_items) == 4
    ellipses = [i for i in scene._style_items if isinstance(i, QGraphicsEllipseItem)]
    rects = [i for i in scene._style_items if isinstance(i, QGraphicsRectItem)]
    assert len(ellipses) == 2
    assert len(rects) == 2
    assert scene.square_styles()["a1"] == StyleToken.ANNOTATION

    scene.set_square_styles({})
    assert scene._style_items == []


def test_styles_survive_flip() -> None:
    scene = BoardScene()
    scene.set_square_styles({"a1": StyleToken.ANNOTATION})
    scene.set_flipped(True)
    assert len(scene._style_items) == 1
    rect = scene._style_items[0].boundingRect()
    assert scene._pos_to_square(rect.center()) == "a1"


def test_left_and_right_press_emit_signals() -> None:
    scene = BoardScene()
    left: list[str] = []
    right: list[str] = []
    scene.square_clicked.connect(left.append)
    scene.square_right_clicked.connect(right.append)

    class _Event:
        def __init__(self, pos: QPointF, button: Qt.MouseButton) -> None:
            self._pos = pos
            self._button = button
            self.accepted = False

        def scenePos(self) -> QPointF:
            return self._pos

        def button(self) -> Qt.MouseButton:
            return self._button

        def accept(self) -> None:
            self.accepted = True

    press = _Event(_centre(scene, "e2"), Qt.MouseButton.LeftButton)
    scene.mousePressEvent(press)  # type: ignore[arg-type]
    right_press = _Event(_centre(scene, "h7"), Qt.MouseButton.RightButton)
    scene.mousePressEvent(right_press)  # type: ignore[arg-type]

    assert left == ["e2"]
    assert right == ["h7"]
    assert press.accepted


def test_animate_and_sync_without_animation_is_immediate() -> None:
    scene = BoardScene()
    scene.set_position(chess.STARTING_FEN)
    scene.set_animate_moves(False)
    board = chess.Board()
    move = chess.Move.from_uci("e2e4")
    board.push(move)

    scene.animate_and_sync(move, board.fen())

    assert scene._active_anim is None
    assert "e4" in scene._piece_items
    assert "e2" not in scene._piece_items


def test_animate_and_sync_moves_item_immediately_in_index() -> None:
    scene = BoardScene()
    scene.set_position(chess.STARTING_FEN)
    board = chess.Board()
    move = chess.Move.from_uci("g1f3")
    board.push(move)

    scene.animate_and_sync(move, board.fen())

    assert scene._active_anim is not None
    assert scene._piece_items["f3"].symbol == "N"
    # A new position arriving mid-slide snaps straight to it.
    scene.set_position(chess.STARTING_FEN)
    assert scene._active_anim is None
    assert "g1" in scene._piece_items


def test_redraw_during_slide_shows_new_position() -> None:
    scene = BoardScene()
    scene.set_position(chess.STARTING_FEN)
    board = chess.Board()
    move = chess.Move.from_uci("e2e4")
    board.push(move)

    scene.animate_and_sync(move, board.fen())
    assert scene._active_anim is not None
    scene.set_flipped(True)

    assert scene._active_anim is None
    assert "e4" in scene._piece_items
    assert "e2" not in scene._piece_items
    expected = {chess.square_name(sq) for sq in board.piece_map()}
    assert set(scene._piece_items) == expected


def test_set_theme_recolours_squares() -> None:
    scene = BoardScene()
    theme = BoardTheme.by_name("Blue")
    scene.set_theme(theme)
    a1 = scene._square_items["a1"]
    assert a1.brush().color() == theme.dark_square


def test_piece_item_is_click_transparent() -> None:
    item = PieceItem("Q", "d1", 80)
    assert item.acceptedMouseButtons() == Qt.MouseButton.NoButton
    assert item.margin == pytest.approx(80 * 0.03)


def test_piece_renderer_rejects_unknown_symbol() -> None:
    with pytest.raises(ValueError):
        piece_renderer("x")
