"""Tests for the two-click selection state machine."""

import chess

from playrandom.core.position_store import MoveOption, PositionStore, PromotionPolicy
from playrandom.core.types import ALL_SQUARES
from playrandom.game.overlays import StyleToken
from playrandom.game.selection import (
    IDLE,
    Pending,
    SelectionMachine,
    derive_highlights,
)

CAPTURE_FEN = "4k3/8/8/3p4/4P3/8/8/4K3 w - - 0 1"


def _machine(fen: str = chess.STARTING_FEN) -> tuple[PositionStore, SelectionMachine]:
    store = PositionStore(fen)
    return store, SelectionMachine(store)


class TestDeriveHighlights:
    def test_marks_source_and_targets(self) -> None:
        options = [
            MoveOption("e4", "e5", is_capture=False),
            MoveOption("e4", "d5", is_capture=True),
        ]
        assert derive_highlights("e4", options) == {
            "e5": StyleToken.MOVE_TARGET,
            "d5": StyleToken.CAPTURE_TARGET,
            "e4": StyleToken.SOURCE,
        }


class TestIdleClick:
    def test_square_without_moves_stays_idle(self) -> None:
        store, machine = _machine()
        for square in ALL_SQUARES:
            if store.legal_moves(square):
                continue
            assert machine.click(square) is None
            assert machine.state == IDLE
            assert machine.highlights == {}

    def test_square_with_moves_becomes_pending(self) -> None:
        store, machine = _machine()
        for square in ALL_SQUARES:
            options = store.legal_moves(square)
            if not options:
                continue
            machine.clear()
            machine.click(square)
            assert machine.state == Pending(square)
            targets = {
                sq for sq, tok in machine.highlights.items() if tok != StyleToken.SOURCE
            }
            assert targets == {opt.to_square for opt in options}
            assert machine.highlights[square] == StyleToken.SOURCE

    def test_capture_targets_styled_differently(self) -> None:
        _, machine = _machine(CAPTURE_FEN)
        machine.click("e4")
        assert machine.highlights == {
            "e4": StyleToken.SOURCE,
            "e5": StyleToken.MOVE_TARGET,
            "d5": StyleToken.CAPTURE_TARGET,
        }


class TestPendingClick:
    def test_legal_destination_commits(self) -> None:
        store, machine = _machine()
        machine.click("e2")
        move = machine.click("e4")
        assert move == chess.Move.from_uci("e2e4")
        assert machine.state == IDLE
        assert machine.highlights == {}
        assert store.ply_count == 1

    def test_unreachable_square_without_moves_goes_idle(self) -> None:
        store, machine = _machine()
        before = store.fen
        machine.click("e2")
        assert machine.click("e6") is None
        assert store.fen == before
        assert machine.state == IDLE
        assert machine.highlights == {}

    def test_unreachable_square_with_moves_reselects(self) -> None:
        store, machine = _machine()
        before = store.fen
        machine.click("e2")
        assert machine.click("d2") is None
        assert store.fen == before
        assert machine.state == Pending("d2")
        assert set(machine.highlights) == {"d2", "d3", "d4"}

    def test_clicking_source_again_keeps_it_selected(self) -> None:
        _, machine = _machine()
        machine.click("g1")
        machine.click("g1")
        assert machine.state == Pending("g1")

    def test_promotion_uses_policy(self) -> None:
        store = PositionStore("2k5/P7/8/8/8/8/8/K7 w - - 0 1")
        machine = SelectionMachine(store, PromotionPolicy.ROOK)
        machine.click("a7")
        move = machine.click("a8")
        assert move is not None and move.promotion == chess.ROOK

    def test_default_promotion_is_queen(self) -> None:
        _, machine = _machine()
        assert machine.promotion is PromotionPolicy.QUEEN

    def test_highlights_returns_copy(self) -> None:
        _, machine = _machine()
        machine.click("e2")
        machine.highlights.clear()
        assert machine.highlights
