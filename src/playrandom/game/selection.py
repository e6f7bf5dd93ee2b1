"""Two-click move selection: pick a source square, then a destination."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from typing import TypeAlias

import chess

from playrandom.core.position_store import MoveOption, PositionStore, PromotionPolicy
from playrandom.core.types import SquareName
from playrandom.game.overlays import HighlightMap, StyleToken

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Idle:
    """No source square chosen."""


@dataclass(frozen=True, slots=True)
class Pending:
    """*source* is chosen and waits for a destination click."""

    source: SquareName


SelectionState: TypeAlias = Idle | Pending

IDLE = Idle()


def derive_highlights(
    source: SquareName, options: Iterable[MoveOption]
) -> HighlightMap:
    """Highlight map for a pending *source*: its destinations plus itself."""
    highlights: HighlightMap = {
        opt.to_square: (
            StyleToken.CAPTURE_TARGET if opt.is_capture else StyleToken.MOVE_TARGET
        )
        for opt in options
    }
    highlights[source] = StyleToken.SOURCE
    return highlights


class SelectionMachine:
    """Turns left-clicks into moves against a :class:`PositionStore`.

    An illegal destination click is not an error: the clicked square is
    simply tried as a new source.
    """

    __slots__ = ("_store", "_promotion", "_state", "_highlights")

    def __init__(
        self,
        store: PositionStore,
        promotion: PromotionPolicy = PromotionPolicy.QUEEN,
    ) -> None:
        self._store = store
        self._promotion = promotion
        self._state: SelectionState = IDLE
        self._highlights: HighlightMap = {}

    @property
    def state(self) -> SelectionState:
        return self._state

    @property
    def highlights(self) -> HighlightMap:
        return dict(self._highlights)

    @property
    def promotion(self) -> PromotionPolicy:
        return self._promotion

    def click(self, square: SquareName) -> chess.Move | None:
        """Feed a left-click.  Returns the committed move, if any."""
        if isinstance(self._state, Pending):
            move = self._store.apply_move(self._state.source, square, self._promotion)
            if move is not None:
                _LOGGER.debug("Move committed: %s", move.uci())
                self.clear()
                return move
        self._select(square)
        return None

    def clear(self) -> None:
        """Back to Idle with no highlights."""
        self._state = IDLE
        self._highlights = {}

    def _select(self, square: SquareName) -> None:
        options = self._store.legal_moves(square)
        if not options:
            self.clear()
            return
        self._state = Pending(square)
        self._highlights = derive_highlights(square, options)
        _LOGGER.debug("Selected %s (%d targets)", square, len(options))
