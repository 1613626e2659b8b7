"""Translate curses key codes into player commands"""

import curses
from typing import Optional

from src.checkers.players import Command

KEY_BINDINGS: dict[int, Command] = {
    curses.KEY_UP: Command.UP,
    curses.KEY_DOWN: Command.DOWN,
    curses.KEY_LEFT: Command.LEFT,
    curses.KEY_RIGHT: Command.RIGHT,
    # vi keys
    ord("k"): Command.UP,
    ord("j"): Command.DOWN,
    ord("h"): Command.LEFT,
    ord("l"): Command.RIGHT,
    # gamer keys
    ord("w"): Command.UP,
    ord("s"): Command.DOWN,
    ord("a"): Command.LEFT,
    ord("d"): Command.RIGHT,
    ord(" "): Command.SELECT,
    ord("\n"): Command.SELECT,
    ord("\r"): Command.SELECT,
    curses.KEY_ENTER: Command.SELECT,
    ord("q"): Command.QUIT,
    ord("Q"): Command.QUIT,
}


def decode_key(key: int) -> Optional[Command]:
    """None for keys without a binding (they are simply ignored)"""
    return KEY_BINDINGS.get(key)
