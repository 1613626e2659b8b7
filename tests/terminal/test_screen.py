"""Unit tests for /src/terminal/screen.py (the terminal itself is mocked out)"""

from unittest.mock import Mock, patch

from src.checkers.players import Command
from src.core.models import BoardSnapshot
from src.terminal.render import render_lines
from src.terminal.screen import STYLE_COLORS, STYLE_PAIRS, CursesScreen

SNAPSHOT = BoardSnapshot(
    size=2,
    cells=(("b", "."), (".", "w")),
    cursor=(0, 0),
    last_error="no piece there!",
    to_move="white",
)


def test_every_style_has_its_own_color_pair() -> None:
    assert set(STYLE_PAIRS) == set(STYLE_COLORS)
    assert sorted(STYLE_PAIRS.values()) == list(range(1, len(STYLE_COLORS) + 1))


def test_show_draws_every_segment() -> None:
    stdscr = Mock()
    with patch("src.terminal.screen.curses"):
        screen = CursesScreen(stdscr)
        screen.show(SNAPSHOT)

    expected_segments = sum(len(line) for line in render_lines(SNAPSHOT))
    assert stdscr.addstr.call_count == expected_segments
    stdscr.erase.assert_called_once()
    stdscr.refresh.assert_called_once()


def test_show_places_segments_side_by_side() -> None:
    stdscr = Mock()
    with patch("src.terminal.screen.curses"):
        CursesScreen(stdscr).show(SNAPSHOT)

    lines = render_lines(SNAPSHOT)
    board_row = len(lines) - 5  # header, blank, [board rows], blank, status, error
    calls = [call.args for call in stdscr.addstr.call_args_list if call.args[0] == board_row]
    assert [x for _, x, _, _ in calls] == [0, 6, 8]


def test_read_command() -> None:
    stdscr = Mock()
    stdscr.getch.return_value = ord("q")
    with patch("src.terminal.screen.curses"):
        screen = CursesScreen(stdscr)
    assert screen.read_command() == Command.QUIT
