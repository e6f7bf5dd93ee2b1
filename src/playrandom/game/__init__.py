"""Game management layer — selection, annotations, opponent, turn loop.

Quick start::

    from playrandom.game import GameController

    ctrl = GameController(scheduler=my_scheduler, notifier=my_notifier)
    ctrl.on_square_click("e2")
    ctrl.on_square_click("e4")   # opponent reply is now scheduled
"""

from playrandom.game.annotations import AnnotationOverlay
from playrandom.game.controller import GameController, GameEvents, describe_outcome
from playrandom.game.interfaces import (
    GamePhase,
    INotifier,
    IScheduler,
    ITimerHandle,
    PendingTimer,
    TimerKind,
)
from playrandom.game.opponent import RandomOpponent
from playrandom.game.orientation import OrientationToggle
from playrandom.game.overlays import HighlightMap, StyleToken, compose
from playrandom.game.selection import (
    IDLE,
    Idle,
    Pending,
    SelectionMachine,
    SelectionState,
    derive_highlights,
)

__all__ = [
    # Interfaces
    "GamePhase",
    "INotifier",
    "IScheduler",
    "ITimerHandle",
    "PendingTimer",
    "TimerKind",
    # Concrete
    "AnnotationOverlay",
    "GameController",
    "GameEvents",
    "OrientationToggle",
    "RandomOpponent",
    "SelectionMachine",
    # State / overlays
    "HighlightMap",
    "IDLE",
    "Idle",
    "Pending",
    "SelectionState",
    "StyleToken",
    "compose",
    "derive_highlights",
    "describe_outcome",
]
