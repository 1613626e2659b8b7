"""Unit tests for /src/api/models.py"""

import pytest

from src.api.models import MoveRequest, NewGameRequest
from src.checkers.position import Position
from src.core.exceptions import InvalidRequestError


# -- Validation - NewGameRequest --
def test_standard_number_of_pieces() -> None:
    """Without anything specified, a normal game: 12 pieces each."""
    assert NewGameRequest().num_pieces == 24


@pytest.mark.parametrize("num_pieces", [2, 8, 12, 24])
def test_valid_number_of_pieces(num_pieces: int) -> None:
    assert NewGameRequest(num_pieces=num_pieces).num_pieces == num_pieces


@pytest.mark.parametrize(
    "num_pieces",
    [
        0,  # nothing to play with
        -2,
        7,  # cannot split evenly over two players
        26,  # does not fit on three rows per side
    ],
)
def test_invalid_number_of_pieces(num_pieces: int) -> None:
    with pytest.raises(InvalidRequestError):
        _ = NewGameRequest(num_pieces=num_pieces)


# -- Validation - MoveRequest --
def test_valid_squares() -> None:
    request = MoveRequest(positions=[(2, 2), (3, 3)])
    assert request.squares() == [Position(2, 2), Position(3, 3)]


def test_squares_from_lists() -> None:
    """JSON-ish input (lists instead of tuples) is fine too"""
    request = MoveRequest(positions=[[0, 0], [7, 7]])
    assert request.squares() == [Position(0, 0), Position(7, 7)]


@pytest.mark.parametrize("square", [(-1, 0), (0, -1), (8, 0), (0, 8)])
def test_square_off_the_board(square: tuple[int, int]) -> None:
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(positions=[(2, 2), square])


def test_squares_checked_against_the_board_size() -> None:
    assert MoveRequest(board_size=4, positions=[(3, 3)]).squares() == [Position(3, 3)]
    with pytest.raises(InvalidRequestError):
        _ = MoveRequest(board_size=4, positions=[(4, 0)])
