"""Orchestration of one match: from a request to a finished Game (and the result the outer layer shows)."""

from dataclasses import dataclass
from typing import Callable, Optional, Sequence

from loguru import logger

from src.api.models import NewGameRequest
from src.checkers.game import Game
from src.checkers.players import Player
from src.core.models import BoardSnapshot
from src.core.shared_types import Color

DisplayFn = Callable[[BoardSnapshot], None]


@dataclass
class MatchResult:
    winner: Color
    turns: int
    moves: list[str]
    final_board: BoardSnapshot


class CheckersService:
    """Orchestration of layers for a checkers match."""

    def __init__(self, display: Optional[DisplayFn] = None) -> None:
        self.display = display

    def new_game(self, request: NewGameRequest, players: Sequence[Player]) -> Game:
        """Set up the board as requested. The first player moves first."""
        return Game.new_game(players=players, num_pieces=request.num_pieces)

    def play_match(
        self, request: NewGameRequest, players: Sequence[Player]
    ) -> MatchResult:
        """
        Play a game from the starting position until somebody wins.
        ----

        QuitGame (raised by a player) is not handled here: the caller decides what quitting means.
        """
        game = self.new_game(request, players)
        winner = game.play()

        final_board = game.board.snapshot(winner=winner)
        if self.display is not None:
            self.display(final_board)

        logger.info("Final position:\n" + "\n".join(game.board.to_rows()))
        return MatchResult(
            winner=winner,
            turns=game.turns,
            moves=[str(move) for move in game.moves],
            final_board=final_board,
        )
