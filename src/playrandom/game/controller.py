"""GameController — the turn loop of a human-vs-random game.

Coordinates: PositionStore, SelectionMachine, AnnotationOverlay,
RandomOpponent and the deferred timers for the opponent reply and the
post-game auto-reset.  Emits events via simple callbacks so the UI /
tests can subscribe.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field

import chess

from playrandom.core.position_store import PositionStore
from playrandom.core.types import Orientation, SquareName
from playrandom.game.annotations import AnnotationOverlay
from playrandom.game.interfaces import (
    GamePhase,
    INotifier,
    IScheduler,
    PendingTimer,
    TimerKind,
)
from playrandom.game.opponent import RandomOpponent
from playrandom.game.orientation import OrientationToggle
from playrandom.game.overlays import HighlightMap, compose, last_move_highlights
from playrandom.game.selection import SelectionMachine, SelectionState
from playrandom.i18n import t
from playrandom.settings import GameSettings

_LOGGER = logging.getLogger(__name__)

_REPETITION = (
    chess.Termination.THREEFOLD_REPETITION,
    chess.Termination.FIVEFOLD_REPETITION,
)
_MOVE_RULE = (
    chess.Termination.FIFTY_MOVES,
    chess.Termination.SEVENTYFIVE_MOVES,
)

# ── Event definitions ────────────────────────────────────────────────────────

PositionCallback = Callable[[str, chess.Move | None], None]  # fen, move or None
OverlayCallback = Callable[[HighlightMap], None]
PhaseCallback = Callable[[GamePhase], None]
OrientationCallback = Callable[[Orientation], None]
GameOverCallback = Callable[[chess.Outcome | None], None]


@dataclass
class GameEvents:
    """Observable callbacks. Multiple handlers per event."""

    on_position_changed: list[PositionCallback] = field(default_factory=list)
    on_overlays_changed: list[OverlayCallback] = field(default_factory=list)
    on_phase_changed: list[PhaseCallback] = field(default_factory=list)
    on_orientation_changed: list[OrientationCallback] = field(default_factory=list)
    on_game_over: list[GameOverCallback] = field(default_factory=list)


def describe_outcome(outcome: chess.Outcome | None) -> str:
    """Localised one-line description of how the game ended."""
    s = t()
    if outcome is None:
        return s.no_moves
    if outcome.winner is not None:
        color = s.color_white if outcome.winner == chess.WHITE else s.color_black
        if outcome.termination == chess.Termination.CHECKMATE:
            return s.wins_checkmate.format(color=color)
        return s.wins_generic.format(color=color)
    termination = outcome.termination
    if termination == chess.Termination.STALEMATE:
        return s.draw_stalemate
    if termination == chess.Termination.INSUFFICIENT_MATERIAL:
        return s.draw_insufficient
    if termination in _REPETITION:
        return s.draw_repetition
    if termination in _MOVE_RULE:
        return s.draw_move_rule
    return s.draw_generic


# ── Controller ───────────────────────────────────────────────────────────────


class GameController:
    """Owns all interaction state: position, selection, overlays, timers.

    Thread-safety: every method runs on the single UI thread; the only
    deferral is through *scheduler*, whose callbacks arrive on that same
    thread.  ``reset`` and ``undo`` cancel every outstanding timer so a
    stale opponent reply or auto-reset never lands on a changed position.
    """

    __slots__ = (
        "_settings",
        "_scheduler",
        "_notifier",
        "_opponent",
        "_store",
        "_selection",
        "_annotations",
        "_orientation",
        "_phase",
        "_timers",
        "events",
    )

    def __init__(
        self,
        *,
        scheduler: IScheduler,
        notifier: INotifier,
        settings: GameSettings | None = None,
        opponent: RandomOpponent | None = None,
    ) -> None:
        self._settings = settings if settings is not None else GameSettings()
        self._scheduler = scheduler
        self._notifier = notifier
        self._opponent = (
            opponent if opponent is not None else RandomOpponent(self._settings.seed)
        )
        self._store = PositionStore(self._settings.start_fen)
        self._selection = SelectionMachine(self._store)
        self._annotations = AnnotationOverlay()
        self._orientation = OrientationToggle(self._settings.orientation)
        self._phase = GamePhase.AWAITING_MOVE
        self._timers: dict[TimerKind, PendingTimer] = {}
        self.events = GameEvents()

    # ── Properties ───────────────────────────────────────────────────────

    @property
    def settings(self) -> GameSettings:
        return self._settings

    @property
    def store(self) -> PositionStore:
        return self._store

    @property
    def fen(self) -> str:
        return self._store.fen

    @property
    def phase(self) -> GamePhase:
        return self._phase

    @property
    def selection(self) -> SelectionState:
        return self._selection.state

    @property
    def annotations(self) -> AnnotationOverlay:
        return self._annotations

    @property
    def orientation(self) -> Orientation:
        return self._orientation.value

    def pending_timer(self, kind: TimerKind) -> PendingTimer | None:
        return self._timers.get(kind)

    def square_styles(self) -> HighlightMap:
        """All overlay layers combined: history, selection, annotations."""
        history: HighlightMap = {}
        if self._settings.highlight_last_move:
            history = last_move_highlights(self._store.last_move)
        return compose(
            history,
            self._selection.highlights,
            self._annotations.highlights(),
        )

    # ── Board events ─────────────────────────────────────────────────────

    def on_square_click(self, square: SquareName) -> None:
        """Left-click on *square*."""
        self._annotations.clear()
        if self._phase != GamePhase.AWAITING_MOVE:
            self._emit_overlays()
            return

        move = self._selection.click(square)
        if move is None:
            self._emit_overlays()
            return

        self._emit_position(move)
        self._emit_overlays()
        self._schedule_opponent()

    def on_square_right_click(self, square: SquareName) -> None:
        """Right-click on *square*: toggle its annotation marker."""
        self._annotations.toggle(square)
        self._emit_overlays()

    # ── User controls ────────────────────────────────────────────────────

    def reset(self) -> None:
        """Start over from the initial position."""
        _LOGGER.info("Reset requested")
        self._cancel_timers()
        self._restart()

    def undo(self) -> bool:
        """Take back one ply.  Returns False at the initial position."""
        self._cancel_timers()
        move = self._store.undo()
        self._selection.clear()
        self._set_phase(GamePhase.AWAITING_MOVE)
        if move is None:
            self._emit_overlays()
            return False
        _LOGGER.info("Undid %s", move.uci())
        self._emit_position(None)
        self._emit_overlays()
        return True

    def cancel_pending(self) -> None:
        """Drop every outstanding timer without touching the position."""
        self._cancel_timers()

    def flip_board(self) -> Orientation:
        orientation = self._orientation.flip()
        for cb in self.events.on_orientation_changed:
            cb(orientation)
        return orientation

    # ── Turn loop ────────────────────────────────────────────────────────

    def _schedule_opponent(self) -> None:
        self._schedule(
            TimerKind.OPPONENT_MOVE,
            self._settings.opponent_delay_ms,
            self._on_opponent_timer,
            fen=self._store.fen,
        )
        self._set_phase(GamePhase.THINKING)

    def _on_opponent_timer(self, timer: PendingTimer) -> None:
        if timer.fen != self._store.fen:
            _LOGGER.debug("Dropping opponent reply scheduled for %s", timer.fen)
            return
        self._play_opponent_move()

    def _play_opponent_move(self) -> None:
        if self._store.is_terminal():
            self._game_over()
            return

        move = self._opponent.choose(self._store.current_position())
        if move is None:
            self._game_over()
            return

        self._store.push(move)
        _LOGGER.debug("Opponent played %s", move.uci())
        self._emit_position(move)
        self._emit_overlays()

        if self._store.is_terminal():
            self._game_over()
            return
        self._set_phase(GamePhase.AWAITING_MOVE)

    def _game_over(self) -> None:
        outcome = self._store.outcome()
        _LOGGER.info("Game over: %s", outcome.result() if outcome else "no moves")

        s = t()
        self._notifier.info(s.toast_game_over.format(detail=describe_outcome(outcome)))
        self._notifier.info(
            s.toast_auto_reset.format(seconds=f"{self._settings.reset_delay_seconds:g}")
        )

        self._set_phase(GamePhase.GAME_OVER)
        for cb in self.events.on_game_over:
            cb(outcome)
        self._schedule(
            TimerKind.AUTO_RESET,
            self._settings.reset_delay_ms,
            self._on_auto_reset,
        )

    def _on_auto_reset(self, _timer: PendingTimer) -> None:
        _LOGGER.info("Auto-reset")
        self._restart()

    def _restart(self) -> None:
        self._store.reset()
        self._selection.clear()
        self._annotations.clear()
        self._set_phase(GamePhase.AWAITING_MOVE)
        self._emit_position(None)
        self._emit_overlays()

    # ── Timers ───────────────────────────────────────────────────────────

    def _schedule(
        self,
        kind: TimerKind,
        delay_ms: int,
        action: Callable[[PendingTimer], None],
        *,
        fen: str | None = None,
    ) -> None:
        """Arm the single timer of *kind*, replacing any previous one."""
        self._cancel_timer(kind)
        timer: PendingTimer | None = None

        def _fire() -> None:
            if timer is None or self._timers.get(kind) is not timer:
                return
            del self._timers[kind]
            action(timer)

        handle = self._scheduler.schedule(delay_ms, _fire)
        timer = PendingTimer(
            kind=kind,
            deadline=self._scheduler.now() + delay_ms / 1000.0,
            handle=handle,
            fen=fen,
        )
        self._timers[kind] = timer
        _LOGGER.debug("Scheduled %s in %d ms", kind.name, delay_ms)

    def _cancel_timer(self, kind: TimerKind) -> None:
        timer = self._timers.pop(kind, None)
        if timer is not None:
            timer.cancel()
            _LOGGER.debug("Cancelled %s", kind.name)

    def _cancel_timers(self) -> None:
        for kind in list(self._timers):
            self._cancel_timer(kind)

    # ── Internal helpers ─────────────────────────────────────────────────

    def _set_phase(self, phase: GamePhase) -> None:
        if phase == self._phase:
            return
        self._phase = phase
        for cb in self.events.on_phase_changed:
            cb(phase)

    def _emit_position(self, move: chess.Move | None) -> None:
        fen = self._store.fen
        for cb in self.events.on_position_changed:
            cb(fen, move)

    def _emit_overlays(self) -> None:
        styles = self.square_styles()
        for cb in self.events.on_overlays_changed:
            cb(styles)
