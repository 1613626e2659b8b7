"""Request models: data coming from outside (settings, selected squares) on its way into the engine"""

from pydantic import BaseModel, ValidationInfo, field_validator

from src.checkers.position import BOARD_SIZE, Position
from src.core.exceptions import InvalidRequestError

# Rows of men per side in a standard game. The two middle rows start empty.
STARTING_ROWS = 3


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    num_pieces: int = 2 * STARTING_ROWS * (BOARD_SIZE // 2)

    @field_validator("num_pieces")
    @classmethod
    def validate_num_pieces(cls, value: int) -> int:
        """Both players get half of the pieces, and they have to fit on their own three starting rows."""
        max_pieces = 2 * STARTING_ROWS * (BOARD_SIZE // 2)
        if value <= 0 or value % 2 != 0:
            raise InvalidRequestError(
                f"Number of pieces must be a positive, even number. Got {value}."
            )
        if value > max_pieces:
            raise InvalidRequestError(
                f"At most {max_pieces} pieces fit on the starting rows. Got {value}."
            )
        return value


class MoveRequest(BaseModel):
    """Squares picked by a player, as (row, col) pairs. Only checks they are on the board, not that the move is legal."""

    board_size: int = BOARD_SIZE
    positions: list[tuple[int, int]]

    @field_validator("positions")
    @classmethod
    def validate_positions(
        cls, value: list[tuple[int, int]], info: ValidationInfo
    ) -> list[tuple[int, int]]:
        size = info.data.get("board_size", BOARD_SIZE)
        for row, col in value:
            if not Position(row, col).is_within_bounds(size):
                raise InvalidRequestError(
                    f"Square {(row, col)} is not on the {size}x{size} board."
                )
        return value

    def squares(self) -> list[Position]:
        return [Position(row, col) for row, col in self.positions]
