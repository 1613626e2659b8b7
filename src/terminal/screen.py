"""Curses screen: draws render lines and reads key presses. The only module that talks to the terminal."""

import curses
from typing import Optional

from loguru import logger

from src.checkers.players import Command
from src.core.models import BoardSnapshot
from src.terminal.keys import decode_key
from src.terminal.render import Style, render_lines

# Style -> (foreground, background). -1 is the terminal's default color.
STYLE_COLORS: dict[Style, tuple[int, int]] = {
    Style.PLAIN: (-1, -1),
    Style.HEADER: (curses.COLOR_GREEN, -1),
    Style.STATUS: (curses.COLOR_GREEN, -1),
    Style.ERROR: (curses.COLOR_RED, -1),
    Style.DARK_SQUARE: (curses.COLOR_WHITE, curses.COLOR_RED),
    Style.LIGHT_SQUARE: (curses.COLOR_WHITE, curses.COLOR_MAGENTA),
    Style.CURSOR: (curses.COLOR_WHITE, curses.COLOR_BLUE),
    Style.BLACK_ON_DARK: (curses.COLOR_BLACK, curses.COLOR_RED),
    Style.BLACK_ON_LIGHT: (curses.COLOR_BLACK, curses.COLOR_MAGENTA),
    Style.BLACK_ON_CURSOR: (curses.COLOR_BLACK, curses.COLOR_BLUE),
    Style.WHITE_ON_DARK: (curses.COLOR_WHITE, curses.COLOR_RED),
    Style.WHITE_ON_LIGHT: (curses.COLOR_WHITE, curses.COLOR_MAGENTA),
    Style.WHITE_ON_CURSOR: (curses.COLOR_WHITE, curses.COLOR_BLUE),
}

# curses color pair 0 is reserved
STYLE_PAIRS: dict[Style, int] = {
    style: pair_id for pair_id, style in enumerate(STYLE_COLORS, start=1)
}


def init_colors() -> None:
    """Initialize curses color pairs."""
    curses.start_color()
    curses.use_default_colors()
    for style, (foreground, background) in STYLE_COLORS.items():
        curses.init_pair(STYLE_PAIRS[style], foreground, background)


def safe_addstr(win: "curses.window", y: int, x: int, text: str, attr: int = 0) -> None:
    """addstr that silently ignores curses errors at screen edges."""
    try:
        win.addstr(y, x, text, attr)
    except curses.error:
        pass


class CursesScreen:
    """Renderer + input source for KeyboardPlayer. Reads snapshots only, never the Game."""

    def __init__(self, stdscr: "curses.window") -> None:
        self.stdscr = stdscr
        try:
            curses.curs_set(0)
        except curses.error:
            logger.debug("Terminal cannot hide the cursor")
        self.stdscr.keypad(True)
        if curses.has_colors():
            init_colors()

    def show(self, snapshot: BoardSnapshot) -> None:
        self.stdscr.erase()
        for y, line in enumerate(render_lines(snapshot)):
            x = 0
            for text, style in line:
                safe_addstr(self.stdscr, y, x, text, curses.color_pair(STYLE_PAIRS[style]))
                x += len(text)
        self.stdscr.refresh()

    def read_command(self) -> Optional[Command]:
        return decode_key(self.stdscr.getch())

    def wait_for_key(self) -> int:
        """Keep the final board on screen until a key is pressed"""
        return self.stdscr.getch()
