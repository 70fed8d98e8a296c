"""
A square on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

from chess960.core.exceptions import InvalidSquareError

# Chess board is always 8x8 (rows, columns). Rows and columns are zero-based.
BOARD_DIMENSIONS = (8, 8)


@dataclass(frozen=True, order=True)
class Position:
    """
    (row, column) pair.

    Row 0 is White's back rank, column 0 is the a-file.
    Ordering is row first, then column, which gives a deterministic iteration order over the board.
    """

    row: int
    column: int

    @classmethod
    def from_algebraic(cls, sq: str) -> Position:
        """Algebraic notation: 'a1' - 'h8' get converted to (0,0) - (7,7)"""
        column = ord(sq[0]) - ord("a")
        row = int(sq[1]) - 1
        return cls(row, column)

    def to_algebraic(self) -> str:
        return f"{chr(self.column + ord('a'))}{self.row + 1}"

    def is_within_bounds(self) -> bool:
        return (0 <= self.row < BOARD_DIMENSIONS[0]) and (
            0 <= self.column < BOARD_DIMENSIONS[1]
        )

    def offset(self, d_row: int, d_column: int) -> Position:
        """Neighbouring position. Might fall off the board, check with `is_within_bounds()`"""
        return Position(self.row + d_row, self.column + d_column)


def validate(position: Position) -> Position:
    """Fail fast on positions outside the board"""
    if not position.is_within_bounds():
        raise InvalidSquareError(
            f"Position {position} lies outside of a {BOARD_DIMENSIONS[0]}x{BOARD_DIMENSIONS[1]} board."
        )
    return position
