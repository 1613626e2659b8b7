"""
Custom exceptions shared by all layers.

NOTE: breaking a rule of checkers (moving an opponent's piece, ignoring a forced capture, ...) is NOT an exception.
The move engine reports those as result values and simply asks the player again.
"""


class GameError(Exception):
    """Top-level error for anything going wrong in the game itself."""


class InvalidRequestError(GameError):
    """Data handed to the engine (settings, selected squares) does not make sense."""


class GameStateError(GameError):
    """The requested action is not possible in the current state of the game."""


class QuitGame(Exception):
    """The player asked to leave. Deliberately NOT a GameError: it should pass straight through the turn loop."""
