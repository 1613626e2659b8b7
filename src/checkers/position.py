"""
A position on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

# Standard checkers board. Other sizes are not supported, but keep the number in one place.
BOARD_SIZE = 8

# (delta_row, delta_col)
Vector = tuple[int, int]


@dataclass(frozen=True)
class Position:
    row: int
    col: int

    def __str__(self) -> str:
        return f"({self.row}, {self.col})"

    def step(self, direction: Vector, times: int = 1) -> Position:
        """Walk `times` squares along a direction vector."""
        d_row, d_col = direction
        return Position(self.row + times * d_row, self.col + times * d_col)

    def midpoint(self, other: Position) -> Position:
        """The square jumped over when moving from self to other (two diagonal steps apart)."""
        return Position((self.row + other.row) // 2, (self.col + other.col) // 2)

    def distance(self, other: Position) -> int:
        """Number of diagonal steps between two squares on the same diagonal."""
        return abs(other.row - self.row)

    def is_within_bounds(self, size: int = BOARD_SIZE) -> bool:
        return (0 <= self.row < size) and (0 <= self.col < size)

    def to_tuple(self) -> tuple[int, int]:
        return (self.row, self.col)


class Marker(Enum):
    """What `Board.at()` returns when there is no piece. Off-board and empty must never be confused:
    an off-board square blocks a jump just like an occupied one does."""

    EMPTY = auto()
    OFF_BOARD = auto()
