"""
The Game class is the move engine and the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating everything required to play a turn of checkers:
asking the player for a move, checking it against the rules, updating the board, crowning kings, and spotting the winner.
"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Self, Sequence

from loguru import logger

from src.checkers.board import Board
from src.checkers.moves import Move
from src.checkers.pieces import Piece
from src.checkers.players import Player
from src.checkers.position import Position
from src.core.exceptions import GameStateError
from src.core.shared_types import Color, Status

STANDARD_NUM_PIECES = 24


class MoveError(Enum):
    """Reasons to turn down a move. None of them end the turn: the player simply gets asked again."""

    EMPTY_ORIGIN = auto()
    WRONG_OWNER = auto()
    ILLEGAL_DESTINATION = auto()
    FORCED_CAPTURE_VIOLATION = auto()
    ILLEGAL_JUMP_CONTINUATION = auto()


# What the player gets to read on screen
ERROR_MESSAGES: dict[MoveError, str] = {
    MoveError.EMPTY_ORIGIN: "no piece there!",
    MoveError.WRONG_OWNER: "not your piece",
    MoveError.ILLEGAL_DESTINATION: "not a valid move",
    MoveError.FORCED_CAPTURE_VIOLATION: "you must jump if you can",
    MoveError.ILLEGAL_JUMP_CONTINUATION: "not a valid move",
}


@dataclass(frozen=True)
class MoveRejected:
    error: MoveError

    @property
    def message(self) -> str:
        return ERROR_MESSAGES[self.error]


# Validation either hands back the move to make, or the reason why not.
MoveResult = Move | MoveRejected


def promotion_row(color: Color, size: int) -> int:
    """The far row, seen from the side the color starts on. Black starts on top (row 0), white at the bottom."""
    return size - 1 if color == Color.BLACK else 0


@dataclass
class JumpChain:
    """
    State of a turn after a capture: the piece that is jumping, and where it would get crowned.
    The chain goes on as long as that piece can capture again and has not just reached the promotion row.
    """

    piece: Piece
    promotion_row: int

    @property
    def can_continue(self) -> bool:
        if self.piece.position.row == self.promotion_row:
            return False
        return len(self.piece.possible_jumps()) > 0


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    players: list[Player]
    turns: int = 0
    current_player: Optional[Player] = None
    status: Status = Status.IN_PROGRESS
    moves: list[Move] = field(default_factory=list)

    def __post_init__(self) -> None:
        if len(self.players) != 2:
            raise GameStateError(
                f"Checkers is played by exactly two players, got {len(self.players)}."
            )
        if self.players[0].color == self.players[1].color:
            raise GameStateError(
                f"Both players want to play {self.players[0].color}. Pick one color each."
            )
        if self.current_player is None:
            self.current_player = self.players[0]

    @classmethod
    def new_game(
        cls, players: Sequence[Player], num_pieces: int = STANDARD_NUM_PIECES
    ) -> Self:
        """Start a new game from the standard starting position. The first player in the list moves first."""
        board = Board()
        board.fill_standard(num_pieces)
        logger.info(
            f"New game: {' vs '.join(str(player.color) for player in players)}, {num_pieces} pieces"
        )
        return cls(board=board, players=list(players))

    @property
    def winner(self) -> Optional[Color]:
        """Only defined once a single color is left on the board"""
        colors = self.board.colors_remaining()
        if len(colors) != 1:
            return None
        return next(iter(colors))

    def is_won(self) -> bool:
        return len(self.board.colors_remaining()) == 1

    def play(self) -> Color:
        """
        Keep playing turns until one of the colors has been wiped off the board.
        ----

        NOTE: a player who asks to quit raises QuitGame from inside get_move(). That is not caught here on purpose.
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        while not self.is_won():
            self.current_player = self.players[self.turns % 2]
            self.play_turn(self.current_player)
            self.turns += 1

        self._change_status(Status.FINISHED)
        self.current_player = None

        # for the type checker: is_won() guarantees a single color is left
        winner = self.winner
        assert winner is not None
        logger.info(f"{winner} won after {self.turns} turns ({len(self.moves)} moves)")
        return winner

    def play_turn(self, player: Player) -> None:
        """
        A single turn
        ----

        1. get a valid move (ask again, as often as needed)
        2. make it
        3. if it was a capture: keep asking for follow-up jumps with the same piece
        4. crown the piece if it ended up on its promotion row
        """
        if not self.legal_moves(player.color):
            logger.info(f"{player.color} has no legal move left")

        move = self._request_move(player)
        piece = self.apply_move(move)

        if move.is_jump:
            chain = JumpChain(piece, promotion_row(piece.color, self.board.size))
            self._request_jump_continuations(player, chain)

        self.promote_if_possible(piece)

    def legal_moves(self, color: Color) -> list[Move]:
        """
        Every move the color could make right now.
        If any piece can capture, only the captures count (forced capture rule).
        """
        pieces = self.board.pieces_of(color)
        jumps = [
            Move.between(piece.position, target)
            for piece in pieces
            for target in piece.possible_jumps()
        ]
        if jumps:
            return jumps
        return [
            Move.between(piece.position, target)
            for piece in pieces
            for target in piece.possible_slides()
        ]

    def validate_move(
        self, color: Color, from_square: Position, to_square: Position
    ) -> MoveResult:
        """
        Check the first move of a turn. Nothing on the board changes here.
        ----

        1. Is there a piece?
        2. Is it yours?
        3. Can it get there at all?
        4. If you could capture anywhere on the board, you have to.
        """
        piece = self.board.at(from_square)
        if not isinstance(piece, Piece):
            return MoveRejected(MoveError.EMPTY_ORIGIN)

        if piece.color != color:
            return MoveRejected(MoveError.WRONG_OWNER)

        if to_square not in piece.possible_moves():
            return MoveRejected(MoveError.ILLEGAL_DESTINATION)

        is_capture = to_square in piece.possible_jumps()
        if not is_capture and self._any_jump_available(color):
            return MoveRejected(MoveError.FORCED_CAPTURE_VIOLATION)

        return Move.between(from_square, to_square)

    def validate_continuation(self, chain: JumpChain, to_square: Position) -> MoveResult:
        """In the middle of a jump chain, the only thing allowed is another jump with the same piece."""
        if to_square not in chain.piece.possible_jumps():
            return MoveRejected(MoveError.ILLEGAL_JUMP_CONTINUATION)
        return Move.between(chain.piece.position, to_square)

    def apply_move(self, move: Move) -> Piece:
        """
        Update the board with a validated move
        ----

        * remove the captured piece (if any)
        * lift the piece off its square and put it on the target square
        * keep the piece's own position in sync with the grid
        """
        piece = self.board.at(move.from_square)
        # for the type checker: only validated moves get here
        assert isinstance(piece, Piece)

        if move.captured is not None:
            self.board.set(move.captured, None)

        self.board.set(move.from_square, None)
        self.board.set(move.to_square, piece)
        piece.position = move.to_square

        self.board.last_error = None
        self.moves.append(move)
        logger.debug(f"{piece.color}: {move}")
        return piece

    def promote_if_possible(self, piece: Piece) -> bool:
        """Crown the piece if it stands on the far row for its color. Returns True if it got crowned just now."""
        if piece.king:
            return False
        if piece.position.row != promotion_row(piece.color, self.board.size):
            return False
        piece.crown()
        logger.info(f"{piece.color} piece crowned on {piece.position}")
        return True

    # -- PRIVATE HELPERS ---
    def _request_move(self, player: Player) -> Move:
        """Ask for a (from, to) pair until it is one the rules allow."""
        while True:
            from_square, to_square = player.get_move(self.board, 2)
            result = self.validate_move(player.color, from_square, to_square)
            if isinstance(result, MoveRejected):
                self._reject(player, result)
                continue
            return result

    def _request_jump_continuations(self, player: Player, chain: JumpChain) -> None:
        """Ask for one landing square at a time, for as long as the chain can go on."""
        while chain.can_continue:
            (to_square,) = player.get_move(self.board, 1)
            result = self.validate_continuation(chain, to_square)
            if isinstance(result, MoveRejected):
                self._reject(player, result)
                continue
            self.apply_move(result)

    def _reject(self, player: Player, rejection: MoveRejected) -> None:
        """Show the player what went wrong. The board itself stays untouched."""
        self.board.last_error = rejection.message
        logger.debug(f"{player.color}: move rejected ({rejection.error.name})")

    def _any_jump_available(self, color: Color) -> bool:
        return any(piece.possible_jumps() for piece in self.board.pieces_of(color))

    def _change_status(self, new_status: Status) -> None:
        self.status = new_status
