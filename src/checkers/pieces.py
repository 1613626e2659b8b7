"""Defines a checkers piece and the moves it can make from where it stands"""

from __future__ import annotations

from dataclasses import dataclass, field

from src.checkers.moves import (
    BoardView,
    can_jump,
    jump_targets,
    movement_directions,
    slide_targets,
)
from src.checkers.position import Position, Vector
from src.core.shared_types import Color

PIECE_SYMBOLS: dict[tuple[Color, bool], str] = {
    (Color.BLACK, False): "b",
    (Color.BLACK, True): "B",
    (Color.WHITE, False): "w",
    (Color.WHITE, True): "W",
}

SYMBOL_TO_PIECE: dict[str, tuple[Color, bool]] = {
    value: key for key, value in PIECE_SYMBOLS.items()
}


@dataclass
class Piece:
    color: Color
    position: Position
    board: BoardView = field(repr=False, compare=False)
    king: bool = False

    def to_symbol(self) -> str:
        return PIECE_SYMBOLS[(self.color, self.king)]

    def crown(self) -> None:
        """Once a king, always a king."""
        self.king = True

    def directions(self) -> list[Vector]:
        return movement_directions(self.color, self.king)

    def can_jump(self, direction: Vector) -> bool:
        return can_jump(self, direction, self.board)

    def possible_jumps(self) -> list[Position]:
        return jump_targets(self, self.board)

    def possible_slides(self) -> list[Position]:
        return slide_targets(self, self.board)

    def possible_moves(self) -> list[Position]:
        """Jumps first. Order only matters for reproducible output."""
        return self.possible_jumps() + self.possible_slides()
