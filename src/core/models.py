"""
Boundary layer data model(s).

The renderer only ever receives a snapshot: it can read everything it needs to draw the board,
but has no handle on the Board or the Game to change anything.
(Decouples the terminal layer from the domain objects)
"""

from dataclasses import dataclass
from typing import Optional

# Type aliases to make BoardSnapshot easier to read
CellCode = str  # "." empty, "b"/"w" men, "B"/"W" kings
ColorName = str


@dataclass(frozen=True)
class BoardSnapshot:
    """Read-only representation of the board (plus UI state) handed to a renderer."""

    size: int
    cells: tuple[tuple[CellCode, ...], ...]
    cursor: tuple[int, int]
    last_error: Optional[str]
    to_move: Optional[ColorName]
    winner: Optional[ColorName] = None
