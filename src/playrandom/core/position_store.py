"""PositionStore — owns the canonical game position and its move history.

Wraps a :class:`chess.Board` (the rules oracle).  Every mutation is done
on a copy and swapped in, so readers never see a half-applied move.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum

import chess

from playrandom.core.types import SquareName, parse_square, square_name

_LOGGER = logging.getLogger(__name__)


class PromotionPolicy(Enum):
    """Piece a pawn becomes when it reaches the last rank."""

    QUEEN = chess.QUEEN
    ROOK = chess.ROOK
    BISHOP = chess.BISHOP
    KNIGHT = chess.KNIGHT

    @property
    def piece_type(self) -> chess.PieceType:
        return self.value


@dataclass(frozen=True, slots=True)
class MoveOption:
    """One legal destination for a piece, as seen by the UI."""

    from_square: SquareName
    to_square: SquareName
    is_capture: bool


class PositionStore:
    """Single owner of the game position.

    Args:
        start_fen: Position that :meth:`reset` returns to.
    """

    __slots__ = ("_board", "_start_fen")

    def __init__(self, start_fen: str = chess.STARTING_FEN) -> None:
        self._start_fen = start_fen
        self._board = chess.Board(start_fen)

    # ── Read API ─────────────────────────────────────────────────────────

    @property
    def fen(self) -> str:
        return self._board.fen()

    @property
    def side_to_move(self) -> chess.Color:
        return self._board.turn

    @property
    def ply_count(self) -> int:
        return len(self._board.move_stack)

    @property
    def last_move(self) -> chess.Move | None:
        if not self._board.move_stack:
            return None
        return self._board.move_stack[-1]

    def current_position(self) -> chess.Board:
        """Return a copy of the canonical board."""
        return self._board.copy()

    def piece_at(self, square: SquareName) -> chess.Piece | None:
        return self._board.piece_at(parse_square(square))

    def legal_moves(self, square: SquareName | None = None) -> list[MoveOption]:
        """Legal moves for the side to move, optionally only from *square*.

        Promotion variants of the same from/to pair are reported once.
        """
        board = self._board
        if square is None:
            moves = board.legal_moves
        else:
            try:
                from_sq = parse_square(square)
            except ValueError:
                _LOGGER.debug("legal_moves: ignoring bad square %r", square)
                return []
            moves = board.generate_legal_moves(from_mask=chess.BB_SQUARES[from_sq])

        options: list[MoveOption] = []
        seen: set[tuple[int, int]] = set()
        for move in moves:
            key = (move.from_square, move.to_square)
            if key in seen:
                continue
            seen.add(key)
            options.append(
                MoveOption(
                    from_square=square_name(move.from_square),
                    to_square=square_name(move.to_square),
                    is_capture=board.is_capture(move),
                )
            )
        return options

    def is_terminal(self) -> bool:
        """No legal moves for the side to move, or a recognised draw.

        Threefold repetition counts only once the position on the board
        has actually occurred three times.  A repetition the side to move
        could merely claim by playing a move does not end the game.
        """
        return self.outcome() is not None

    def outcome(self) -> chess.Outcome | None:
        board = self._board
        outcome = board.outcome()
        if outcome is not None:
            return outcome
        if board.is_repetition(3):
            return chess.Outcome(chess.Termination.THREEFOLD_REPETITION, None)
        if board.is_fifty_moves():
            return chess.Outcome(chess.Termination.FIFTY_MOVES, None)
        return None

    # ── Mutations ────────────────────────────────────────────────────────

    def apply_move(
        self,
        from_sq: SquareName,
        to_sq: SquareName,
        promotion: PromotionPolicy = PromotionPolicy.QUEEN,
    ) -> chess.Move | None:
        """Try to play *from_sq* → *to_sq*.

        Returns the applied move, or ``None`` when the move is illegal
        (the position is then left untouched).
        """
        try:
            origin = parse_square(from_sq)
            target = parse_square(to_sq)
        except ValueError:
            _LOGGER.debug("apply_move: bad squares %r → %r", from_sq, to_sq)
            return None

        piece = self._board.piece_at(origin)
        promotes = (
            piece is not None
            and piece.piece_type == chess.PAWN
            and chess.square_rank(target) in (0, 7)
        )
        move = chess.Move(
            origin, target, promotion=promotion.piece_type if promotes else None
        )

        if not self._board.is_legal(move):
            return None
        self.push(move)
        return move

    def push(self, move: chess.Move) -> None:
        """Commit an already-validated move."""
        board = self._board.copy()
        board.push(move)
        self._board = board

    def undo(self) -> chess.Move | None:
        """Take back one ply.  Returns the removed move, ``None`` at the start."""
        if not self._board.move_stack:
            return None
        board = self._board.copy()
        move = board.pop()
        self._board = board
        return move

    def reset(self) -> None:
        """Back to the start position with an empty history."""
        self._board = chess.Board(self._start_fen)
