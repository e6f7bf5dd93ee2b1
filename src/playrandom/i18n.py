"""Localised strings shared by the game layer and the Qt UI.

Usage::

    from playrandom.i18n import t, set_language

    set_language("Russian")
    print(t().btn_reset)          # "сброс"
    print(t().wins_checkmate.format(color=t().color_white))
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Strings:
    # ── Main window ──────────────────────────────────────────────────────
    window_title: str
    menu_game: str
    menu_reset: str
    menu_flip_board: str
    menu_undo: str
    menu_quit: str

    status_your_move: str
    status_thinking: str
    status_game_over: str

    # ── Toasts ───────────────────────────────────────────────────────────
    toast_game_over: str  # "♔ GAME OVER: {detail}"
    toast_auto_reset: str  # "... AFTER {seconds} SECONDS"

    # Game-over reasons
    draw_stalemate: str
    draw_insufficient: str
    draw_repetition: str
    draw_move_rule: str
    draw_generic: str
    wins_checkmate: str  # "{color} wins by checkmate."
    wins_generic: str  # "{color} wins."
    no_moves: str
    color_white: str
    color_black: str

    # ── ControlPanel ─────────────────────────────────────────────────────
    btn_reset: str
    btn_flip: str
    btn_undo: str


_EN = Strings(
    window_title="Play vs Random",
    menu_game="&Game",
    menu_reset="&Reset",
    menu_flip_board="&Flip board",
    menu_undo="&Undo",
    menu_quit="&Quit",
    status_your_move="Your move",
    status_thinking="Opponent is moving...",
    status_game_over="Game over",
    toast_game_over="♔ GAME OVER: {detail}",
    toast_auto_reset="THE GAME WILL RESET AFTER {seconds} SECONDS",
    draw_stalemate="Draw by stalemate.",
    draw_insufficient="Draw by insufficient material.",
    draw_repetition="Draw by repetition.",
    draw_move_rule="Draw by the move rule.",
    draw_generic="Draw.",
    wins_checkmate="{color} wins by checkmate.",
    wins_generic="{color} wins.",
    no_moves="No legal moves.",
    color_white="White",
    color_black="Black",
    btn_reset="reset",
    btn_flip="flip board",
    btn_undo="undo",
)

_RU = Strings(
    window_title="Игра со случайным соперником",
    menu_game="&Игра",
    menu_reset="&Сброс",
    menu_flip_board="&Перевернуть доску",
    menu_undo="&Отмена хода",
    menu_quit="&Выход",
    status_your_move="Ваш ход",
    status_thinking="Соперник делает ход...",
    status_game_over="Конец игры",
    toast_game_over="♔ КОНЕЦ ИГРЫ: {detail}",
    toast_auto_reset="ИГРА НАЧНЁТСЯ ЗАНОВО ЧЕРЕЗ {seconds} СЕК.",
    draw_stalemate="Пат.",
    draw_insufficient="Ничья: недостаточно материала.",
    draw_repetition="Ничья повторением позиции.",
    draw_move_rule="Ничья по правилу ходов.",
    draw_generic="Ничья.",
    wins_checkmate="{color} побеждают матом.",
    wins_generic="{color} побеждают.",
    no_moves="Нет возможных ходов.",
    color_white="Белые",
    color_black="Чёрные",
    btn_reset="сброс",
    btn_flip="перевернуть",
    btn_undo="отмена",
)

_LOCALES: dict[str, Strings] = {
    "English": _EN,
    "Russian": _RU,
}

LANGUAGES: list[str] = list(_LOCALES.keys())

_current: Strings = _EN


def t() -> Strings:
    """Return the active locale strings."""
    return _current


def set_language(language: str) -> None:
    """Switch the global locale. Unknown names fall back to English."""
    global _current
    _current = _LOCALES.get(language, _EN)
