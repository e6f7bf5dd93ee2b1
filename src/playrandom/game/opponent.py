"""RandomOpponent: picks a uniformly random legal move."""

from __future__ import annotations

import random

import chess


class RandomOpponent:
    """Opponent with no evaluation at all.

    Args:
        seed: Optional seed for reproducible games.
    """

    __slots__ = ("_rng",)

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)

    def choose(self, board: chess.Board) -> chess.Move | None:
        """A random legal move for the side to move, ``None`` if there is none."""
        legal = list(board.legal_moves)
        if not legal:
            return None
        return self._rng.choice(legal)
