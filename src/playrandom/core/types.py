"""Square name alias, board orientation and coordinate helpers.

Squares cross the UI boundary as algebraic names (``"e4"``); the
rules oracle works with python-chess integer squares (a1=0 … h8=63).
"""

from __future__ import annotations

from enum import Enum
from typing import TypeAlias

import chess

SquareName: TypeAlias = str  # "a1" … "h8"


class Orientation(Enum):
    """Which side is drawn at the bottom of the board."""

    WHITE = "white"
    BLACK = "black"

    def flipped(self) -> Orientation:
        return Orientation.BLACK if self is Orientation.WHITE else Orientation.WHITE

    def __str__(self) -> str:
        return self.value


def parse_square(name: SquareName) -> chess.Square:
    """Parse square name, e.g. 'e4' → 28.

    Raises:
        ValueError: *name* is not a board square.
    """
    try:
        return chess.parse_square(name)
    except (ValueError, TypeError):
        raise ValueError(f"Invalid square name: {name!r}") from None


def square_name(sq: chess.Square) -> SquareName:
    """Human-readable name, e.g. 0 → 'a1', 63 → 'h8'."""
    return chess.square_name(sq)


def is_valid_square_name(name: object) -> bool:
    """Check whether *name* is one of the 64 square names."""
    return isinstance(name, str) and name in chess.SQUARE_NAMES


ALL_SQUARES: tuple[SquareName, ...] = tuple(chess.SQUARE_NAMES)
