"""Abstract interfaces for the game layer.

Follows Dependency Inversion: the GameController depends on these ABCs,
not on Qt timers or toast widgets, so it can be driven from tests with
plain Python fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass
from enum import IntEnum, auto

# ── Game phase FSM states ────────────────────────────────────────────────────


class GamePhase(IntEnum):
    """Finite-state-machine states of the turn loop."""

    AWAITING_MOVE = auto()
    THINKING = auto()  # opponent reply scheduled
    GAME_OVER = auto()  # auto-reset scheduled


class TimerKind(IntEnum):
    """Deferred actions the turn loop can have outstanding."""

    OPPONENT_MOVE = auto()
    AUTO_RESET = auto()


# ── Abstract interfaces ─────────────────────────────────────────────────────


class ITimerHandle(ABC):
    """A scheduled callback that has not necessarily fired yet."""

    @abstractmethod
    def cancel(self) -> None:
        """Prevent the callback from running. Safe to call more than once."""

    @property
    @abstractmethod
    def is_active(self) -> bool:
        """True until the callback has fired or been cancelled."""


class IScheduler(ABC):
    """Single-threaded deferred execution (an event-loop timer)."""

    @abstractmethod
    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ITimerHandle:
        """Run *callback* once after *delay_ms* on the same thread."""

    @abstractmethod
    def now(self) -> float:
        """Monotonic clock in seconds, used for timer deadlines."""


class INotifier(ABC):
    """Fire-and-forget user notifications (toasts)."""

    @abstractmethod
    def info(self, message: str) -> None:
        """Show an informational message."""


# ── Pending timer record ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class PendingTimer:
    """An outstanding deferred action.

    ``fen`` is the position the action was scheduled against; it is only
    set for opponent replies.
    """

    kind: TimerKind
    deadline: float
    handle: ITimerHandle
    fen: str | None = None

    def cancel(self) -> None:
        self.handle.cancel()
