"""User-configurable settings for a play-versus-random session."""

from __future__ import annotations

from dataclasses import dataclass

import chess

from playrandom.core.types import Orientation
from playrandom.i18n import LANGUAGES

BOARD_THEMES: tuple[str, ...] = ("Classic", "Blue", "Green")


@dataclass
class GameSettings:
    """All user-configurable settings.

    Raises:
        ValueError: on a negative delay, an unknown language or theme, or
            a start FEN that is not a legal position with a move to play.
    """

    # Turn loop
    opponent_delay_ms: int = 300  # lets the move animation finish first
    reset_delay_ms: int = 5000
    seed: int | None = None
    start_fen: str = chess.STARTING_FEN

    # Board
    orientation: Orientation = Orientation.WHITE
    board_theme: str = "Classic"
    show_coordinates: bool = True
    highlight_last_move: bool = False

    # General
    language: str = "English"

    def __post_init__(self) -> None:
        if self.opponent_delay_ms < 0:
            raise ValueError(
                f"opponent_delay_ms must be >= 0, got {self.opponent_delay_ms}"
            )
        if self.reset_delay_ms < 0:
            raise ValueError(
                f"reset_delay_ms must be >= 0, got {self.reset_delay_ms}"
            )
        if self.language not in LANGUAGES:
            raise ValueError(f"Unknown language: {self.language!r}")
        if self.board_theme not in BOARD_THEMES:
            raise ValueError(f"Unknown board theme: {self.board_theme!r}")
        try:
            board = chess.Board(self.start_fen)
        except ValueError as exc:
            raise ValueError(f"Invalid start FEN {self.start_fen!r}: {exc}") from exc
        if not board.is_valid():
            raise ValueError(
                f"Invalid start FEN {self.start_fen!r}: illegal position "
                f"({board.status()!r})"
            )
        if not any(board.generate_legal_moves()):
            raise ValueError(
                f"Invalid start FEN {self.start_fen!r}: side to move has no moves"
            )

    @property
    def reset_delay_seconds(self) -> float:
        return self.reset_delay_ms / 1000.0
