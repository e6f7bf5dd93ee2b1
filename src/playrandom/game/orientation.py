"""Board orientation toggle — a display flag with no effect on the game."""

from __future__ import annotations

from playrandom.core.types import Orientation


class OrientationToggle:
    """Holds which side is rendered at the bottom."""

    __slots__ = ("_orientation",)

    def __init__(self, initial: Orientation = Orientation.WHITE) -> None:
        self._orientation = initial

    @property
    def value(self) -> Orientation:
        return self._orientation

    @property
    def is_flipped(self) -> bool:
        """True when Black is at the bottom."""
        return self._orientation is Orientation.BLACK

    def flip(self) -> Orientation:
        self._orientation = self._orientation.flipped()
        return self._orientation
