"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable, Generator

import pytest
from loguru import logger

from src.checkers.board import Board
from src.checkers.position import BOARD_SIZE

Placements = dict[tuple[int, int], str]


@pytest.fixture
def board_with() -> Callable[[Placements], Board]:
    """Call the inner function with {(row, col): symbol} to get an 8x8 board with just those pieces on it"""

    def _create_board(placements: Placements) -> Board:
        rows = [["."] * BOARD_SIZE for _ in range(BOARD_SIZE)]
        for (row, col), symbol in placements.items():
            rows[row][col] = symbol
        return Board.from_rows(["".join(row) for row in rows])

    return _create_board


@pytest.fixture
def captured_logs() -> Generator[list[str], None, None]:
    """Collect loguru messages (DEBUG and up) in a list for the duration of the test"""
    messages: list[str] = []
    sink_id = logger.add(messages.append, level="DEBUG", format=lambda _: "{level}|{message}")
    try:
        yield messages
    finally:
        logger.remove(sink_id)
