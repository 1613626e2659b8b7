"""
Players supply the squares of a move. They do NOT check whether the move is legal: that is the Game's job.
"""

from collections import deque
from enum import Enum, auto
from typing import TYPE_CHECKING, Callable, Iterable, Optional, Protocol

from loguru import logger

from src.api.models import MoveRequest
from src.checkers.position import Position, Vector
from src.core.exceptions import GameStateError, QuitGame
from src.core.models import BoardSnapshot
from src.core.shared_types import Color

if TYPE_CHECKING:
    from src.checkers.board import Board


class Player(Protocol):
    """Anything that can pick squares on the board for a given color"""

    color: Color

    def get_move(self, board: "Board", count: int = 2) -> list[Position]:
        """Return `count` squares that are on the board."""
        ...


class Command(Enum):
    UP = auto()
    DOWN = auto()
    LEFT = auto()
    RIGHT = auto()
    SELECT = auto()
    QUIT = auto()


CURSOR_MOVES: dict[Command, Vector] = {
    Command.UP: (-1, 0),
    Command.DOWN: (1, 0),
    Command.LEFT: (0, -1),
    Command.RIGHT: (0, 1),
}

ReadCommandFn = Callable[[], Optional[Command]]
DisplayFn = Callable[[BoardSnapshot], None]


class KeyboardPlayer:
    """
    A person at the keyboard: moves the board's cursor around and selects squares.
    ----

    The board gets redrawn before every key press, so the cursor (and the last error) stay up to date on screen.
    """

    def __init__(
        self, color: Color, read_command: ReadCommandFn, display: DisplayFn
    ) -> None:
        self.color = color
        self.read_command = read_command
        self.display = display

    def get_move(self, board: "Board", count: int = 2) -> list[Position]:
        selected: list[Position] = []
        while len(selected) < count:
            self.display(board.snapshot(current=self.color))
            command = self.read_command()

            if command is None:
                continue
            if command == Command.QUIT:
                raise QuitGame(f"{self.color} left the game")
            if command == Command.SELECT:
                selected.append(board.cursor)
                continue
            board.move_cursor(CURSOR_MOVES[command])

        request = MoveRequest(
            board_size=board.size, positions=[square.to_tuple() for square in selected]
        )
        return request.squares()


class ScriptedPlayer:
    """Plays a fixed list of squares, in order. Handy to replay a game (or to test one)."""

    def __init__(self, color: Color, squares: Iterable[tuple[int, int]]) -> None:
        self.color = color
        request = MoveRequest(positions=list(squares))
        self._queue: deque[Position] = deque(request.squares())

    @property
    def remaining(self) -> int:
        return len(self._queue)

    def get_move(self, board: "Board", count: int = 2) -> list[Position]:
        if len(self._queue) < count:
            raise GameStateError(
                f"Script for {self.color} ran out: needed {count} squares, {len(self._queue)} left."
            )
        squares = [self._queue.popleft() for _ in range(count)]
        logger.trace(f"{self.color} plays {', '.join(str(square) for square in squares)}")
        return squares
