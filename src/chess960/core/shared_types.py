"""
Type definitions used across layers
"""

from enum import StrEnum


class Status(StrEnum):
    """Derived from the live game, never stored"""

    ONGOING = "ongoing"
    CHECK = "check"
    CHECKMATE = "checkmate"
    STALEMATE = "stalemate"
    # NOTE: no rule produces DRAW yet (repetition / 50 moves / material are not implemented)
    DRAW = "draw"


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"


class Variant(StrEnum):
    """Which rulebook sets up the board"""

    STANDARD = "standard"
    CHESS960 = "chess960"


def opponent(color: Color) -> Color:
    return Color.WHITE if color == Color.BLACK else Color.BLACK
