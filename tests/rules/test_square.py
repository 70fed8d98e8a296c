"""Unit tests for /src/chess960/rules/square.py"""

from string import ascii_lowercase

import pytest

from chess960.core.exceptions import GameError, InvalidSquareError
from chess960.rules.square import BOARD_DIMENSIONS, Position, validate


@pytest.mark.parametrize(
    "row, column, notation",
    [
        (row, column, f"{ascii_lowercase[column]}{row + 1}")
        for row in range(8)
        for column in range(8)
    ],
)
def test_creating_from_algebraic(row: int, column: int, notation: str) -> None:
    """Simply checks if the notation for 'a1' indeed maps to row 0, column 0, etc."""
    position = Position.from_algebraic(notation)
    assert position.row == row
    assert position.column == column
    assert position.to_algebraic() == notation


def test_square_within_bounds() -> None:
    """happy case: positions within the dimensions of the board"""
    for row in range(BOARD_DIMENSIONS[0]):
        for column in range(BOARD_DIMENSIONS[1]):
            assert Position(row, column).is_within_bounds()


@pytest.mark.parametrize("row, column", [(8, 0), (0, 8), (-1, 3), (3, -1), (8, 8)])
def test_square_out_of_bounds(row: int, column: int) -> None:
    position = Position(row, column)
    assert not position.is_within_bounds()
    with pytest.raises(InvalidSquareError):
        validate(position)


def test_invalid_square_error_is_a_value_error() -> None:
    """Callers can treat it as a plain contract violation, or catch our base error."""
    with pytest.raises(ValueError):
        validate(Position(9, 9))
    with pytest.raises(GameError):
        validate(Position(9, 9))


def test_positions_are_ordered_row_first() -> None:
    positions = [Position(1, 0), Position(0, 7), Position(0, 1), Position(7, 0)]
    assert sorted(positions) == [
        Position(0, 1),
        Position(0, 7),
        Position(1, 0),
        Position(7, 0),
    ]


def test_offset() -> None:
    assert Position.from_algebraic("e4").offset(1, -1) == Position.from_algebraic("d5")
    assert not Position.from_algebraic("h8").offset(1, 0).is_within_bounds()
