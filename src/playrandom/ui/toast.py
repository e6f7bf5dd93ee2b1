"""Toast notifications stacked in the top-right corner of a widget."""

from __future__ import annotations

import logging
from collections.abc import Callable

from PyQt6.QtCore import QEvent, QObject, Qt, QTimer, pyqtSignal
from PyQt6.QtGui import QCloseEvent, QFont, QMouseEvent
from PyQt6.QtWidgets import QLabel, QWidget

from playrandom.game.interfaces import INotifier

_LOGGER = logging.getLogger(__name__)


class Toast(QLabel):
    """One message bubble; closes itself on click or after a timeout.

    Signals:
        closed(): Emitted once when the toast goes away.
    """

    closed = pyqtSignal()

    def __init__(self, message: str, parent: QWidget, auto_close_ms: int) -> None:
        super().__init__(message, parent)
        self.setFont(QFont("Adwaita Sans", 10))
        self.setWordWrap(True)
        self.setFixedWidth(300)
        self.setMargin(10)
        self.setStyleSheet(
            "QLabel { background: #3498db; color: white; border-radius: 4px; }"
        )
        self.adjustSize()
        self.setAttribute(Qt.WidgetAttribute.WA_DeleteOnClose)

        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        self._timer.timeout.connect(self.close)
        self._timer.start(auto_close_ms)

    def mousePressEvent(self, event: QMouseEvent | None) -> None:
        self.close()

    def closeEvent(self, event: QCloseEvent | None) -> None:
        self._timer.stop()
        self.closed.emit()
        super().closeEvent(event)


class _ResizeWatcher(QObject):
    """Calls *on_resize* whenever the watched widget changes size."""

    def __init__(self, watched: QWidget, on_resize: Callable[[], None]) -> None:
        super().__init__(watched)
        self._on_resize = on_resize
        watched.installEventFilter(self)

    def eventFilter(self, obj: QObject | None, event: QEvent | None) -> bool:
        if event is not None and event.type() == QEvent.Type.Resize:
            self._on_resize()
        return False


class ToastNotifier(INotifier):
    """Shows :class:`Toast` bubbles over *host*, oldest on top.

    Args:
        host: Widget the toasts float over.
        auto_close_ms: Lifetime of each toast.
    """

    _MARGIN = 12
    _SPACING = 8

    def __init__(self, host: QWidget, auto_close_ms: int = 5000) -> None:
        self._host = host
        self._auto_close_ms = auto_close_ms
        self._toasts: list[Toast] = []
        self._watcher = _ResizeWatcher(host, self._layout)

    @property
    def visible_messages(self) -> list[str]:
        return [toast.text() for toast in self._toasts]

    def info(self, message: str) -> None:
        _LOGGER.info("Toast: %s", message)
        toast = Toast(message, self._host, self._auto_close_ms)
        toast.closed.connect(lambda tst=toast: self._forget(tst))
        self._toasts.append(toast)
        toast.show()
        toast.raise_()
        self._layout()

    def clear(self) -> None:
        for toast in list(self._toasts):
            toast.close()

    def _forget(self, toast: Toast) -> None:
        if toast in self._toasts:
            self._toasts.remove(toast)
            self._layout()

    def _layout(self) -> None:
        y = self._MARGIN
        for toast in self._toasts:
            x = self._host.width() - toast.width() - self._MARGIN
            toast.move(max(0, x), y)
            y += toast.height() + self._SPACING
