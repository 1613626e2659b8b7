"""
Turn a BoardSnapshot into text, without touching the terminal.
----

Every line is a list of (text, Style) segments. The curses screen decides what a Style looks like,
so everything in here can be checked without a terminal.
"""

from enum import Enum, auto

from src.core.models import BoardSnapshot

Segment = tuple[str, "Style"]
Line = list[Segment]


class Style(Enum):
    PLAIN = auto()
    HEADER = auto()
    STATUS = auto()
    ERROR = auto()
    # empty squares
    DARK_SQUARE = auto()
    LIGHT_SQUARE = auto()
    CURSOR = auto()
    # pieces, on each of the square backgrounds
    BLACK_ON_DARK = auto()
    BLACK_ON_LIGHT = auto()
    BLACK_ON_CURSOR = auto()
    WHITE_ON_DARK = auto()
    WHITE_ON_LIGHT = auto()
    WHITE_ON_CURSOR = auto()


HEADER_LINES: list[str] = [
    " ~~~~~~~~~~~~~~~~~~~~~~~~~~~ ",
    " move cursor to select piece ",
    "   press spacebar to select ",
    "      piece and target",
    "       press q to quit ",
    " ~~~~~~~~~~~~~~~~~~~~~~~~~~~ ",
]
BOARD_INDENT = "      "

KING_GLYPH = "♛"
MAN_GLYPH = "❂"

PIECE_STYLES: dict[tuple[str, Style], Style] = {
    ("b", Style.DARK_SQUARE): Style.BLACK_ON_DARK,
    ("b", Style.LIGHT_SQUARE): Style.BLACK_ON_LIGHT,
    ("b", Style.CURSOR): Style.BLACK_ON_CURSOR,
    ("w", Style.DARK_SQUARE): Style.WHITE_ON_DARK,
    ("w", Style.LIGHT_SQUARE): Style.WHITE_ON_LIGHT,
    ("w", Style.CURSOR): Style.WHITE_ON_CURSOR,
}


def square_background(row: int, col: int, cursor: tuple[int, int]) -> Style:
    if (row, col) == cursor:
        return Style.CURSOR
    # pieces stand on the squares where row + col is even
    return Style.DARK_SQUARE if (row + col) % 2 == 0 else Style.LIGHT_SQUARE


def render_cell(code: str, background: Style) -> Segment:
    """Two characters per square: the glyph (if any) and a space."""
    if code == ".":
        return ("  ", background)
    glyph = KING_GLYPH if code.isupper() else MAN_GLYPH
    return (f"{glyph} ", PIECE_STYLES[(code.lower(), background)])


def render_board(snapshot: BoardSnapshot) -> list[Line]:
    lines: list[Line] = []
    for row, cells in enumerate(snapshot.cells):
        line: Line = [(BOARD_INDENT, Style.PLAIN)]
        for col, code in enumerate(cells):
            line.append(render_cell(code, square_background(row, col, snapshot.cursor)))
        lines.append(line)
    return lines


def render_lines(snapshot: BoardSnapshot) -> list[Line]:
    """Header, board, then whose turn it is, the last error and (at the end) the winner."""
    lines: list[Line] = [[(text, Style.HEADER)] for text in HEADER_LINES]
    lines.append([])
    lines.extend(render_board(snapshot))
    lines.append([])
    if snapshot.to_move:
        lines.append([(f"{snapshot.to_move} to move.", Style.STATUS)])
    if snapshot.last_error:
        lines.append([(snapshot.last_error, Style.ERROR)])
    if snapshot.winner:
        lines.append([(f"{snapshot.winner.capitalize()} won!!!", Style.STATUS)])
    return lines


def render_text(snapshot: BoardSnapshot) -> str:
    """Plain text version (no styling), e.g. for log files"""
    return "\n".join("".join(text for text, _ in line) for line in render_lines(snapshot))
