"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass
from enum import Enum

from chess960.core.shared_types import Color
from chess960.rules.square import Position

# The row with the pieces (not the pawns) at the start of the game
HOME_ROWS: dict[Color, int] = {Color.WHITE: 0, Color.BLACK: 7}


class CastlingSide(Enum):
    """Values are the FEN letters (white's version) for the two castling sides."""

    KING_SIDE = "K"
    QUEEN_SIDE = "Q"


# In every variant, the king and the rook end up on the files of orthodox chess:
# king side: king on g, rook on f. queen side: king on c, rook on d.
KING_DESTINATION_COLUMN: dict[CastlingSide, int] = {
    CastlingSide.KING_SIDE: 6,
    CastlingSide.QUEEN_SIDE: 2,
}
ROOK_DESTINATION_COLUMN: dict[CastlingSide, int] = {
    CastlingSide.KING_SIDE: 5,
    CastlingSide.QUEEN_SIDE: 3,
}


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the squares where king/rook start from/end up in by castling.
    NOTE: In Chess960 the starting squares vary per game, so these get computed from the board instead of looked up.
    """

    king_from: Position
    king_to: Position
    rook_from: Position
    rook_to: Position

    @classmethod
    def for_rook(cls, king_from: Position, rook_from: Position) -> "CastlingSquares":
        """The rook's file relative to the king decides the side we castle to"""
        side = castling_side(king_from, rook_from)
        row = king_from.row
        return cls(
            king_from=king_from,
            king_to=Position(row, KING_DESTINATION_COLUMN[side]),
            rook_from=rook_from,
            rook_to=Position(row, ROOK_DESTINATION_COLUMN[side]),
        )

    def king_path(self) -> list[Position]:
        """All squares the king touches, start and end included"""
        return squares_between_on_row(self.king_from, self.king_to, inclusive=True)

    def rook_path(self) -> list[Position]:
        """All squares the rook touches, start and end included"""
        return squares_between_on_row(self.rook_from, self.rook_to, inclusive=True)

    def span(self) -> list[Position]:
        """
        Every square from the leftmost to the rightmost square used by king or rook.
        These must be empty, apart from the castling king and rook themselves.
        """
        columns = [
            self.king_from.column,
            self.king_to.column,
            self.rook_from.column,
            self.rook_to.column,
        ]
        row = self.king_from.row
        return [Position(row, column) for column in range(min(columns), max(columns) + 1)]


def castling_side(king_from: Position, rook_from: Position) -> CastlingSide:
    return (
        CastlingSide.KING_SIDE
        if rook_from.column > king_from.column
        else CastlingSide.QUEEN_SIDE
    )


def squares_between_on_row(
    from_square: Position, to_square: Position, inclusive: bool = False
) -> list[Position]:
    """
    Find the squares in between the two squares specified that are on the same row

    Needed for checking if you can still castle (the caller checks which of those are empty / attacked etc.)
    """
    if from_square.row != to_square.row:
        raise ValueError(
            f"squares_between_on_row requires both squares to lie on the same row. \n from: {from_square}\n to:{to_square}"
        )

    low, high = sorted((from_square.column, to_square.column))
    if not inclusive:
        low, high = low + 1, high - 1
    return [Position(from_square.row, column) for column in range(low, high + 1)]
