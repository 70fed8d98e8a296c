"""
The board only knows where the pieces are. All the rules live elsewhere.

Boards are immutable: every `with_...` method returns a new Board. Trying out a move and rolling it back
is then just a matter of throwing the new board away.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Optional, Self

from chess960.core.shared_types import Color, PieceType
from chess960.rules.pieces import Piece
from chess960.rules.square import BOARD_DIMENSIONS, Position, validate


@dataclass(frozen=True)
class Board:
    pieces: Mapping[Position, Piece] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for position in self.pieces:
            validate(position)
        # sort once, so iterating the board is always done in Position order
        ordered = dict(sorted(self.pieces.items()))
        object.__setattr__(self, "pieces", MappingProxyType(ordered))

    def __hash__(self) -> int:
        return hash(tuple(self.pieces.items()))

    @classmethod
    def empty(cls) -> Self:
        return cls({})

    @classmethod
    def from_pieces(cls, placed_pieces: Iterable[tuple[Position, Piece]]) -> Self:
        return cls(dict(placed_pieces))

    @classmethod
    def from_fen(cls, fen_str: str) -> Self:
        """Construct a board from the piece placement part of a FEN string.

        ex. standard starting position:
        rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR
        means:
        * black pieces are on the 8th rank (row 7), starting with rook on a8, knight on b8, etc.
        * pawns cover 7th rank entirely
        * ranks 6 through 3 have 8 consecutive empty squares
        * rank 2 are the white pawns (capital letters)
        * 1st rank (row 0) are the white pieces.
        """
        pieces: dict[Position, Piece] = {}
        for rank_idx, fen_one_rank in enumerate(fen_str.split("/")):
            # FEN string is read from top row to bottom row
            row = BOARD_DIMENSIONS[0] - 1 - rank_idx
            column = 0
            for character in fen_one_rank:
                if character.isalpha():
                    pieces[Position(row, column)] = Piece.from_fen(character)
                    column += 1
                else:
                    # A number denotes the amount of empty squares after each other
                    column += int(character)
        return cls(pieces)

    def to_fen(self) -> str:
        """Ranks are separated by slashes in FEN string."""
        return "/".join(
            self._row_to_fen(row) for row in range(BOARD_DIMENSIONS[0] - 1, -1, -1)
        )

    def _row_to_fen(self, row: int) -> str:
        fen_characters: list[str] = []
        empty_count = 0
        for column in range(BOARD_DIMENSIONS[1]):
            piece = self.pieces.get(Position(row, column))
            if piece is None:
                empty_count += 1
                continue
            if empty_count > 0:
                fen_characters.append(str(empty_count))
                empty_count = 0
            fen_characters.append(piece.to_fen())

        if empty_count > 0:
            fen_characters.append(str(empty_count))
        return "".join(fen_characters)

    # --- LOOKUP ---
    def get_piece(
        self, position: Position, color: Optional[Color] = None
    ) -> Optional[Piece]:
        """The piece on the position. If a color is given, only return the piece if it has that color."""
        piece = self.pieces.get(validate(position))
        if piece is None or (color is not None and piece.color != color):
            return None
        return piece

    def is_occupied(self, position: Position) -> bool:
        return self.get_piece(position) is not None

    def all_pieces(self) -> list[tuple[Position, Piece]]:
        return list(self.pieces.items())

    def locate_color(self, color: Color) -> list[Position]:
        return [position for position, piece in self.pieces.items() if piece.color == color]

    def locate_pieces(self, piece_type: PieceType, color: Color) -> list[Position]:
        return [
            position
            for position, piece in self.pieces.items()
            if piece.type == piece_type and piece.color == color
        ]

    def king_position(self, color: Color) -> Optional[Position]:
        kings = self.locate_pieces(PieceType.KING, color)
        return kings[0] if kings else None

    def count_pieces(self, color: Color) -> int:
        return len(self.locate_color(color))

    # --- NEW BOARDS ---
    def with_piece_moved(self, from_position: Position, to_position: Position) -> Self:
        """Move the piece (capturing whatever stands on the target). The piece remembers it has moved."""
        piece = self.pieces.get(validate(from_position))
        if piece is None:
            raise ValueError(f"No piece to move on {from_position.to_algebraic()}")
        pieces = dict(self.pieces)
        del pieces[from_position]
        pieces[validate(to_position)] = piece.moved()
        return type(self)(pieces)

    def with_piece_removed(self, position: Position) -> Self:
        pieces = dict(self.pieces)
        pieces.pop(validate(position), None)
        return type(self)(pieces)

    def with_piece_placed(self, position: Position, piece: Piece) -> Self:
        pieces = dict(self.pieces)
        pieces[validate(position)] = piece
        return type(self)(pieces)
