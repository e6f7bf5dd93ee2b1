"""QTimer-backed scheduler for the game controller."""

from __future__ import annotations

import time
from collections.abc import Callable

from PyQt6.QtCore import QObject, QTimer

from playrandom.game.interfaces import IScheduler, ITimerHandle


class QtTimerHandle(ITimerHandle):
    """Wraps one single-shot QTimer."""

    __slots__ = ("_timer", "_active")

    def __init__(self, timer: QTimer) -> None:
        self._timer = timer
        self._active = True

    @property
    def is_active(self) -> bool:
        return self._active

    def cancel(self) -> None:
        if not self._active:
            return
        self._active = False
        self._timer.stop()
        self._timer.deleteLater()

    def _fired(self) -> None:
        self._active = False
        self._timer.deleteLater()


class QtScheduler(IScheduler):
    """Runs callbacks on the Qt event loop via single-shot timers."""

    __slots__ = ("_parent",)

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtTimerHandle:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        handle = QtTimerHandle(timer)

        def _on_timeout() -> None:
            if not handle.is_active:
                return
            handle._fired()
            callback()

        timer.timeout.connect(_on_timeout)
        timer.start(max(0, int(delay_ms)))
        return handle

    def now(self) -> float:
        return time.monotonic()
