"""Command line entry point: two players, one keyboard, one terminal."""

import argparse
import curses
import sys
from typing import Optional, Sequence

from loguru import logger

from src.api.models import NewGameRequest
from src.checkers.players import KeyboardPlayer
from src.core.exceptions import GameError, QuitGame
from src.core.log_config import configure_logging
from src.core.settings import Settings
from src.core.shared_types import Color
from src.services.game_service import CheckersService, MatchResult
from src.terminal.render import render_text
from src.terminal.screen import CursesScreen


def parse_args(
    argv: Optional[Sequence[str]] = None, defaults: Optional[Settings] = None
) -> argparse.Namespace:
    defaults = defaults or Settings()
    parser = argparse.ArgumentParser(
        description="Checkers in the terminal, for two players sharing a keyboard"
    )
    parser.add_argument(
        "--num-pieces",
        type=int,
        default=defaults.num_pieces,
        help="Total number of pieces on the board at the start (half for each player)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=defaults.log_level,
        help="Log level (DEBUG, INFO, WARNING, ...)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        default=defaults.log_file,
        help="Write logs to this file instead of stderr",
    )
    return parser.parse_args(argv)


def run(stdscr: "curses.window", request: NewGameRequest) -> MatchResult:
    """Everything that needs the curses screen. Black moves first."""
    screen = CursesScreen(stdscr)
    players = [
        KeyboardPlayer(Color.BLACK, screen.read_command, screen.show),
        KeyboardPlayer(Color.WHITE, screen.read_command, screen.show),
    ]
    service = CheckersService(display=screen.show)
    result = service.play_match(request, players)
    screen.wait_for_key()
    return result


def main(argv: Optional[Sequence[str]] = None) -> int:
    try:
        args = parse_args(argv, Settings.from_env())
        settings = Settings(
            num_pieces=args.num_pieces, log_level=args.log_level, log_file=args.log_file
        )
        request = NewGameRequest(num_pieces=settings.num_pieces)
    except GameError as err:
        print(f"Invalid settings: {err}", file=sys.stderr)
        return 2

    configure_logging(settings.log_level, settings.log_file)

    try:
        result = curses.wrapper(run, request)
    except QuitGame as quit_signal:
        logger.info(f"Game ended early: {quit_signal}")
        return 0
    except GameError as err:
        logger.error(f"Game could not be played: {err}")
        return 1

    print(render_text(result.final_board))
    return 0


if __name__ == "__main__":
    sys.exit(main())
