"""Application entry point."""

from __future__ import annotations

import argparse
import logging
import sys

import chess

from playrandom.core.types import Orientation
from playrandom.i18n import LANGUAGES
from playrandom.settings import BOARD_THEMES, GameSettings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="playrandom",
        description="Play chess against an opponent that moves at random.",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed for the opponent")
    parser.add_argument(
        "--fen", default=chess.STARTING_FEN, help="Start (and reset) position"
    )
    parser.add_argument(
        "--opponent-delay-ms",
        type=int,
        default=300,
        help="Pause before the opponent replies",
    )
    parser.add_argument(
        "--reset-delay-ms",
        type=int,
        default=5000,
        help="Pause between game over and the automatic reset",
    )
    parser.add_argument(
        "--orientation",
        choices=[o.value for o in Orientation],
        default=Orientation.WHITE.value,
    )
    parser.add_argument("--theme", choices=BOARD_THEMES, default="Classic")
    parser.add_argument("--language", choices=LANGUAGES, default="English")
    parser.add_argument("--no-coordinates", action="store_true")
    parser.add_argument(
        "--highlight-last-move",
        action="store_true",
        help="Tint the squares of the last move",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser


def settings_from_args(
    args: argparse.Namespace, parser: argparse.ArgumentParser
) -> GameSettings:
    """Build settings; invalid values become a usage error."""
    try:
        return GameSettings(
            opponent_delay_ms=args.opponent_delay_ms,
            reset_delay_ms=args.reset_delay_ms,
            seed=args.seed,
            start_fen=args.fen,
            orientation=Orientation(args.orientation),
            board_theme=args.theme,
            show_coordinates=not args.no_coordinates,
            highlight_last_move=args.highlight_last_move,
            language=args.language,
        )
    except ValueError as exc:
        parser.error(str(exc))


def main(argv: list[str] | None = None) -> None:
    """Launch the playrandom application."""
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    settings = settings_from_args(args, parser)

    from playrandom.ui.bootstrap import run_application

    sys.exit(run_application(settings, [sys.argv[0]]))


if __name__ == "__main__":
    main()
