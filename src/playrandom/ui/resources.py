"""Piece rendering helpers built on the python-chess SVG piece set."""

from __future__ import annotations

import chess
import chess.svg
from PyQt6.QtCore import QByteArray
from PyQt6.QtSvg import QSvgRenderer

# Cache SVG renderers (one per piece symbol)
_renderers: dict[str, QSvgRenderer] = {}


def piece_svg(symbol: str) -> str:
    """Standalone SVG document for a FEN piece letter ('P', 'n', ...)."""
    return chess.svg.piece(chess.Piece.from_symbol(symbol))


def piece_renderer(symbol: str) -> QSvgRenderer:
    """Return a cached SVG renderer for the FEN piece letter *symbol*.

    Raises:
        ValueError: *symbol* is not a piece letter, or the SVG is invalid.
    """
    if symbol not in _renderers:
        renderer = QSvgRenderer(QByteArray(piece_svg(symbol).encode("utf-8")))
        if not renderer.isValid():
            raise ValueError(f"Could not render SVG for piece {symbol!r}")
        _renderers[symbol] = renderer
    return _renderers[symbol]
