"""
Custom exceptions.

Everything raised on purpose inherits from GameError, so callers at the boundary can catch one type.
NOTE: illegal candidate moves are never raised. The rules simply leave them out of the results.
"""


class GameError(Exception):
    """Top level exception for this package"""


class InvalidSquareError(GameError, ValueError):
    """Position outside of the board. This is a bug in the caller, not a game situation."""


class GameSetupError(GameError):
    """The rulebook could not produce a valid starting position."""


class IllegalMoveError(GameError):
    """Requested move is not among the legal updates."""


class InvalidRequestError(GameError):
    """Request data at the boundary could not be interpreted."""
