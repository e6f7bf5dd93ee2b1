"""Visual theme constants and QSS styles for playrandom."""

from __future__ import annotations

from dataclasses import dataclass

from PyQt6.QtGui import QColor

from playrandom.game.overlays import StyleToken


@dataclass(frozen=True)
class BoardTheme:
    """Colour scheme for the chessboard."""

    light_square: QColor
    dark_square: QColor
    highlight_source: QColor  # selected piece origin
    move_dot: QColor  # quiet legal-move target
    capture_ring: QColor  # capturing legal-move target
    last_move: QColor  # last move origin/destination
    annotation: QColor  # right-click marker
    coord_light: QColor  # coordinate text on dark squares
    coord_dark: QColor  # coordinate text on light squares

    def color_for(self, token: StyleToken) -> QColor:
        """Overlay colour of a style token."""
        return {
            StyleToken.SOURCE: self.highlight_source,
            StyleToken.MOVE_TARGET: self.move_dot,
            StyleToken.CAPTURE_TARGET: self.capture_ring,
            StyleToken.LAST_MOVE: self.last_move,
            StyleToken.ANNOTATION: self.annotation,
        }[token]

    @classmethod
    def by_name(cls, name: str) -> BoardTheme:
        """Theme for a settings name; unknown names get the default."""
        factories = {
            "Classic": cls.default,
            "Blue": cls.blue,
            "Green": cls.green,
        }
        return factories.get(name, cls.default)()

    @classmethod
    def default(cls) -> BoardTheme:
        return cls(
            light_square=QColor(240, 217, 181),  # tan
            dark_square=QColor(181, 136, 99),  # brown
            highlight_source=QColor(255, 255, 0, 102),  # yellow transparent
            move_dot=QColor(0, 0, 0, 26),  # small dark dot
            capture_ring=QColor(0, 0, 0, 26),  # large dark ring
            last_move=QColor(155, 199, 0, 105),  # green
            annotation=QColor(0, 0, 255, 102),  # blue transparent
            coord_light=QColor(181, 136, 99),
            coord_dark=QColor(240, 217, 181),
        )

    @classmethod
    def blue(cls) -> BoardTheme:
        return cls(
            light_square=QColor(222, 227, 230),
            dark_square=QColor(140, 162, 173),
            highlight_source=QColor(255, 255, 0, 102),
            move_dot=QColor(0, 0, 0, 26),
            capture_ring=QColor(0, 0, 0, 26),
            last_move=QColor(155, 199, 0, 105),
            annotation=QColor(0, 0, 255, 102),
            coord_light=QColor(140, 162, 173),
            coord_dark=QColor(222, 227, 230),
        )

    @classmethod
    def green(cls) -> BoardTheme:
        return cls(
            light_square=QColor(236, 238, 220),
            dark_square=QColor(112, 149, 120),
            highlight_source=QColor(255, 255, 0, 102),
            move_dot=QColor(0, 0, 0, 26),
            capture_ring=QColor(0, 0, 0, 26),
            last_move=QColor(155, 199, 0, 105),
            annotation=QColor(0, 0, 255, 102),
            coord_light=QColor(112, 149, 120),
            coord_dark=QColor(236, 238, 220),
        )


# ── Application-wide QSS ────────────────────────────────────────────────────

APP_STYLE = """
QMainWindow {
    background: #2b2b2b;
}

QLabel {
    color: #e0e0e0;
    font-family: "Adwaita Sans", "Helvetica Neue", sans-serif;
}

QPushButton {
    background: #3c3c3c;
    color: #e0e0e0;
    border: 1px solid #555;
    border-radius: 4px;
    padding: 6px 14px;
    font-size: 13px;
}
QPushButton:hover {
    background: #505050;
}
QPushButton:pressed {
    background: #264f78;
}

QMenuBar {
    background: #2b2b2b;
    color: #e0e0e0;
}
QMenuBar::item:selected {
    background: #3c3c3c;
}
QMenu {
    background: #2b2b2b;
    color: #e0e0e0;
    border: 1px solid #3c3c3c;
}
QMenu::item:selected {
    background: #264f78;
}
"""
