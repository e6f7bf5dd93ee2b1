"""Square style tokens and overlay-layer composition."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import TypeAlias

import chess

from playrandom.core.types import SquareName, square_name


class StyleToken(Enum):
    """Visual style of a highlighted square; the theme maps these to colours."""

    SOURCE = "source"
    MOVE_TARGET = "move-target"
    CAPTURE_TARGET = "capture-target"
    LAST_MOVE = "last-move"
    ANNOTATION = "annotation"


HighlightMap: TypeAlias = dict[SquareName, StyleToken]


def last_move_highlights(move: chess.Move | None) -> HighlightMap:
    """Move-history layer: origin and destination of *move*."""
    if move is None:
        return {}
    return {
        square_name(move.from_square): StyleToken.LAST_MOVE,
        square_name(move.to_square): StyleToken.LAST_MOVE,
    }


def compose(*layers: Mapping[SquareName, StyleToken]) -> HighlightMap:
    """Merge overlay layers; a later layer wins on the same square."""
    combined: HighlightMap = {}
    for layer in layers:
        combined.update(layer)
    return combined
