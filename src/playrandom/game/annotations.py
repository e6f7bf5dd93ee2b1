"""Right-click square markers, independent of move selection."""

from __future__ import annotations

from playrandom.core.types import SquareName, is_valid_square_name
from playrandom.game.overlays import HighlightMap, StyleToken


class AnnotationOverlay:
    """Toggle-map of marked squares."""

    __slots__ = ("_marked",)

    def __init__(self) -> None:
        self._marked: set[SquareName] = set()

    def toggle(self, square: SquareName) -> bool:
        """Flip the marker on *square*.  Returns the new on/off state."""
        if not is_valid_square_name(square):
            return False
        if square in self._marked:
            self._marked.discard(square)
            return False
        self._marked.add(square)
        return True

    def is_marked(self, square: SquareName) -> bool:
        return square in self._marked

    def clear(self) -> None:
        self._marked.clear()

    def highlights(self) -> HighlightMap:
        return {sq: StyleToken.ANNOTATION for sq in sorted(self._marked)}
