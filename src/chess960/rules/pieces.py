"""Defines the chess pieces"""

from dataclasses import dataclass, replace
from typing import Self

from chess960.core.shared_types import Color, PieceType

FEN_TO_PIECE: dict[str, PieceType] = {
    "p": PieceType.PAWN,
    "n": PieceType.KNIGHT,
    "b": PieceType.BISHOP,
    "r": PieceType.ROOK,
    "q": PieceType.QUEEN,
    "k": PieceType.KING,
}

PIECE_TO_FEN: dict[PieceType, str] = {value: key for key, value in FEN_TO_PIECE.items()}


@dataclass(frozen=True)
class Piece:
    """
    A piece is a value: moving or promoting it creates a new Piece.

    `move_count` is the number of times this piece has been moved. Castling needs to know whether
    the king and rook are still untouched.
    """

    type: PieceType
    color: Color
    move_count: int = 0

    @classmethod
    def from_fen(cls, character: str) -> Self:
        # lower case: Black pieces, upper case: White pieces
        color = Color.WHITE if character.isupper() else Color.BLACK
        piece_type = FEN_TO_PIECE[character.lower()]
        return cls(piece_type, color)

    def to_fen(self) -> str:
        return (
            PIECE_TO_FEN[self.type].upper()
            if self.color == Color.WHITE
            else PIECE_TO_FEN[self.type].lower()
        )

    @property
    def has_moved(self) -> bool:
        return self.move_count > 0

    def moved(self) -> Self:
        return replace(self, move_count=self.move_count + 1)

    def promoted(self, new_type: PieceType) -> Self:
        """The pawn is gone, a new piece of the chosen type takes its place (keeps the move history)."""
        return replace(self, type=new_type)
