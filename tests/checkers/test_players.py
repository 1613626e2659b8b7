"""Unit tests for /src/checkers/players.py"""

from unittest.mock import Mock

import pytest

from src.checkers.board import Board
from src.checkers.players import Command, KeyboardPlayer, ScriptedPlayer
from src.checkers.position import BOARD_SIZE, Position
from src.core.exceptions import GameStateError, InvalidRequestError, QuitGame
from src.core.shared_types import Color


def keyboard_player(commands: list[Command | None]) -> tuple[KeyboardPlayer, Mock]:
    """A keyboard player pressing the given keys, and the display it draws on"""
    display = Mock()
    player = KeyboardPlayer(Color.BLACK, iter(commands).__next__, display)
    return player, display


# -- KEYBOARD PLAYER --
def test_selecting_two_squares() -> None:
    board = Board()
    player, _ = keyboard_player(
        [Command.DOWN, Command.RIGHT, Command.SELECT, Command.DOWN, Command.SELECT]
    )
    assert player.get_move(board, 2) == [Position(1, 1), Position(2, 1)]
    assert board.cursor == Position(2, 1)


def test_selecting_a_single_square() -> None:
    """mid jump-chain only one square is needed"""
    board = Board(cursor=Position(4, 4))
    player, _ = keyboard_player([Command.SELECT])
    assert player.get_move(board, 1) == [Position(4, 4)]


def test_board_is_redrawn_before_every_key() -> None:
    board = Board()
    commands = [Command.RIGHT, None, Command.SELECT, Command.SELECT]
    player, display = keyboard_player(commands)
    player.get_move(board, 2)

    assert display.call_count == len(commands)
    snapshot = display.call_args.args[0]
    assert snapshot.to_move == "black"
    assert snapshot.cursor == (0, 1)


def test_unknown_keys_are_ignored() -> None:
    board = Board()
    player, _ = keyboard_player([None, None, Command.SELECT, None, Command.SELECT])
    assert player.get_move(board, 2) == [Position(0, 0), Position(0, 0)]


def test_cursor_does_not_leave_the_board() -> None:
    board = Board()
    player, _ = keyboard_player([Command.UP, Command.LEFT, Command.SELECT])
    assert player.get_move(board, 1) == [Position(0, 0)]


def test_walking_to_the_far_corner() -> None:
    board = Board()
    moves = [Command.DOWN, Command.RIGHT] * (BOARD_SIZE + 2)
    player, _ = keyboard_player(moves + [Command.SELECT])
    assert player.get_move(board, 1) == [Position(BOARD_SIZE - 1, BOARD_SIZE - 1)]


def test_quit_key() -> None:
    board = Board()
    player, _ = keyboard_player([Command.SELECT, Command.QUIT])
    with pytest.raises(QuitGame):
        player.get_move(board, 2)


# -- SCRIPTED PLAYER --
def test_scripted_player_plays_in_order() -> None:
    player = ScriptedPlayer(Color.WHITE, [(5, 1), (4, 0), (4, 0)])
    board = Board()
    assert player.get_move(board, 2) == [Position(5, 1), Position(4, 0)]
    assert player.remaining == 1
    assert player.get_move(board, 1) == [Position(4, 0)]
    assert player.remaining == 0


def test_scripted_player_runs_out() -> None:
    player = ScriptedPlayer(Color.WHITE, [(5, 1)])
    with pytest.raises(GameStateError):
        player.get_move(Board(), 2)


def test_script_with_square_off_the_board() -> None:
    with pytest.raises(InvalidRequestError):
        ScriptedPlayer(Color.WHITE, [(5, 1), (8, 0)])
