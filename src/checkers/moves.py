"""
Geometry/Base movement and capturing rules

Key idea: a piece only ever looks one or two squares along a diagonal. Which diagonals it may use depends on
its color (men only move "forward") and on whether it has been crowned.

Whether a move is allowed in the current turn (forced captures, whose turn it is) is checked later by Game
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional, Protocol, Self

from src.checkers.position import Marker, Position, Vector
from src.core.shared_types import Color

if TYPE_CHECKING:
    from src.checkers.pieces import Piece


class BoardView(Protocol):
    """Just the part of the Board the movement rules need"""

    def at(self, position: Position) -> Piece | Marker: ...


@dataclass(frozen=True)
class Move:
    """A single step of a turn: either a slide, or one jump of a (possibly longer) jump chain"""

    from_square: Position
    to_square: Position
    captured: Optional[Position] = None

    @classmethod
    def between(cls, from_square: Position, to_square: Position) -> Self:
        """Two diagonal steps apart means a piece got jumped over."""
        captured = (
            from_square.midpoint(to_square)
            if from_square.distance(to_square) == 2
            else None
        )
        return cls(from_square, to_square, captured)

    @property
    def is_jump(self) -> bool:
        return self.captured is not None

    def __str__(self) -> str:
        # the usual checkers notation: "-" for a slide, "x" for a capture
        separator = "x" if self.is_jump else "-"
        return f"{self.from_square}{separator}{self.to_square}"


# --- DIRECTIONS ---
# Seen from black, which starts on row 0 and moves DOWN the board (row + 1)
FORWARD_DIAGONALS: list[Vector] = [(1, -1), (1, 1)]
BACKWARD_DIAGONALS: list[Vector] = [(-1, 1), (-1, -1)]


def movement_directions(color: Color, king: bool = False) -> list[Vector]:
    """
    Men move forward only, kings get the backward diagonals on top.
    White starts at the bottom and moves UP the board, so the row component is flipped.
    """
    directions = FORWARD_DIAGONALS + (BACKWARD_DIAGONALS if king else [])
    if color == Color.BLACK:
        return list(directions)
    return [(-d_row, d_col) for d_row, d_col in directions]


# --- MOVEMENT RULES ---
def is_empty(board: BoardView, position: Position) -> bool:
    """NOTE: an off-board square is NOT empty."""
    return board.at(position) is Marker.EMPTY


def can_jump(piece: Piece, direction: Vector, board: BoardView) -> bool:
    """
    A jump needs an opponent's piece right next to you, and an empty square right behind it.
    """
    neighbour = board.at(piece.position.step(direction))
    if isinstance(neighbour, Marker):
        return False
    if neighbour.color == piece.color:
        return False
    return is_empty(board, piece.position.step(direction, times=2))


def jump_targets(piece: Piece, board: BoardView) -> list[Position]:
    """Landing squares of all jumps the piece can make right now"""
    return [
        piece.position.step(direction, times=2)
        for direction in piece.directions()
        if can_jump(piece, direction, board)
    ]


def slide_targets(piece: Piece, board: BoardView) -> list[Position]:
    """Non-capturing moves: a single diagonal step onto an empty square"""
    return [
        target
        for target in (piece.position.step(direction) for direction in piece.directions())
        if is_empty(board, target)
    ]
