"""The Game board: grid storage, piece lookup and the (UI only) cursor"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generator, Optional, Self

from src.checkers.pieces import SYMBOL_TO_PIECE, Piece
from src.checkers.position import BOARD_SIZE, Marker, Position, Vector
from src.core.exceptions import InvalidRequestError
from src.core.models import BoardSnapshot
from src.core.shared_types import Color

EMPTY_SYMBOL = "."


@dataclass
class Board:
    size: int = BOARD_SIZE
    grid: list[list[Optional[Piece]]] = field(init=False, repr=False)
    # --- UI state: never used to decide if a move is legal ---
    cursor: Position = Position(0, 0)
    last_error: Optional[str] = None

    def __post_init__(self) -> None:
        self.grid = [[None] * self.size for _ in range(self.size)]

    @classmethod
    def from_rows(cls, rows: list[str]) -> Self:
        """Construct a board from a text layout, top row (row 0) first.

        ex. a black man on (0, 0) and a white king on (1, 1) of a 2x2 corner:
        ["b.",
         ".W"]
        * "." empty square
        * "b"/"w": black/white men
        * "B"/"W": black/white kings
        """
        board = cls(size=len(rows))
        for row, line in enumerate(rows):
            if len(line) != board.size:
                raise InvalidRequestError(
                    f"Row {row} has {len(line)} squares, expected {board.size}: {line!r}"
                )
            for col, character in enumerate(line):
                if character == EMPTY_SYMBOL:
                    continue
                if character not in SYMBOL_TO_PIECE:
                    raise InvalidRequestError(
                        f"Unknown piece symbol {character!r} at ({row}, {col})."
                    )
                color, king = SYMBOL_TO_PIECE[character]
                board.place_piece(color, Position(row, col), king=king)
        return board

    def to_rows(self) -> list[str]:
        """reverse operation: write the text layout of the current board"""
        return [
            "".join(
                piece.to_symbol() if piece is not None else EMPTY_SYMBOL
                for piece in row
            )
            for row in self.grid
        ]

    # --- GRID ACCESS ---
    def at(self, position: Position) -> Piece | Marker:
        """
        Three possible answers: a piece, an empty square, or 'not on the board at all'.
        The movement rules depend on that last distinction (cannot jump off the board).
        """
        if not position.is_within_bounds(self.size):
            return Marker.OFF_BOARD
        piece = self.grid[position.row][position.col]
        return piece if piece is not None else Marker.EMPTY

    def set(self, position: Position, piece: Optional[Piece]) -> None:
        """NOTE: no bounds check. Only positions that have been validated should get here."""
        self.grid[position.row][position.col] = piece

    def place_piece(self, color: Color, position: Position, king: bool = False) -> Piece:
        """Convenience method: create a piece that knows about this board, and put it on the given square"""
        piece = Piece(color=color, position=position, board=self, king=king)
        self.set(position, piece)
        return piece

    def all_pieces(self) -> Generator[Piece, None, None]:
        """Row by row, left to right"""
        for row in self.grid:
            for piece in row:
                if piece is not None:
                    yield piece

    def pieces_of(self, color: Color) -> list[Piece]:
        return [piece for piece in self.all_pieces() if piece.color == color]

    def colors_remaining(self) -> set[Color]:
        return {piece.color for piece in self.all_pieces()}

    # --- STARTING POSITION ---
    def fill_standard(self, num_pieces: int) -> None:
        """
        Standard starting pattern: half of the pieces for each color, on the dark squares closest to that player.
        ----

        Counting rows from each player's own back row (black: row 0 downward, white: row size-1 upward),
        the k-th dark square of a row sits in column 2k + row % 2 for black and 2k + (row + 1) % 2 for white.
        Rows are filled nearest first, left to right.

        ex) 8x8 board, num_pieces = 24: 12 black men on rows 0-2 and 12 white men on rows 5-7.
        """
        per_color = num_pieces // 2
        squares_per_row = self.size // 2
        for color in Color:
            placed = 0
            row = 0
            while placed < per_color and row < self.size:
                for k in range(squares_per_row):
                    if placed == per_color:
                        break
                    if color == Color.BLACK:
                        position = Position(row, 2 * k + row % 2)
                    else:
                        position = Position(self.size - row - 1, 2 * k + (row + 1) % 2)
                    self.place_piece(color, position)
                    placed += 1
                row += 1

    # --- UI STATE ---
    def move_cursor(self, delta: Vector) -> None:
        """Move the cursor, unless that would take it off the board."""
        new_cursor = self.cursor.step(delta)
        if new_cursor.is_within_bounds(self.size):
            self.cursor = new_cursor

    def snapshot(
        self, current: Optional[Color] = None, winner: Optional[Color] = None
    ) -> BoardSnapshot:
        """Freeze the board (and the UI state) for a renderer"""
        return BoardSnapshot(
            size=self.size,
            cells=tuple(tuple(row) for row in self.to_rows()),
            cursor=self.cursor.to_tuple(),
            last_error=self.last_error,
            to_move=current.value if current else None,
            winner=winner.value if winner else None,
        )
