"""Core domain layer — the position store around the python-chess oracle.

Quick start::

    from playrandom.core import PositionStore

    store = PositionStore()
    for option in store.legal_moves("e2"):
        print(option.to_square, option.is_capture)
    store.apply_move("e2", "e4")
"""

from playrandom.core.position_store import MoveOption, PositionStore, PromotionPolicy
from playrandom.core.types import (
    ALL_SQUARES,
    Orientation,
    SquareName,
    is_valid_square_name,
    parse_square,
    square_name,
)

__all__ = [
    "ALL_SQUARES",
    "MoveOption",
    "Orientation",
    "PositionStore",
    "PromotionPolicy",
    "SquareName",
    "is_valid_square_name",
    "parse_square",
    "square_name",
]
