"""unit tests for src/chess960/rules/castling.py"""

import pytest

from chess960.rules.castling import (
    CastlingSide,
    CastlingSquares,
    castling_side,
    squares_between_on_row,
)
from chess960.rules.square import Position


def squares(*names: str) -> list[Position]:
    return [Position.from_algebraic(name) for name in names]


def test_orthodox_king_side() -> None:
    castling = CastlingSquares.for_rook(
        Position.from_algebraic("e1"), Position.from_algebraic("h1")
    )
    assert castling_side(castling.king_from, castling.rook_from) == CastlingSide.KING_SIDE
    assert castling.king_to == Position.from_algebraic("g1")
    assert castling.rook_to == Position.from_algebraic("f1")
    assert castling.king_path() == squares("e1", "f1", "g1")
    assert castling.rook_path() == squares("f1", "g1", "h1")
    assert castling.span() == squares("e1", "f1", "g1", "h1")


def test_orthodox_queen_side() -> None:
    castling = CastlingSquares.for_rook(
        Position.from_algebraic("e8"), Position.from_algebraic("a8")
    )
    assert castling_side(castling.king_from, castling.rook_from) == CastlingSide.QUEEN_SIDE
    assert castling.king_to == Position.from_algebraic("c8")
    assert castling.rook_to == Position.from_algebraic("d8")
    assert castling.king_path() == squares("c8", "d8", "e8")
    assert castling.rook_path() == squares("a8", "b8", "c8", "d8")
    assert castling.span() == squares("a8", "b8", "c8", "d8", "e8")


def test_chess960_destinations_do_not_depend_on_start() -> None:
    """King on b1, rook on a1: after castling queen side the king still ends up on c1 and the rook on d1"""
    castling = CastlingSquares.for_rook(
        Position.from_algebraic("b1"), Position.from_algebraic("a1")
    )
    assert castling_side(castling.king_from, castling.rook_from) == CastlingSide.QUEEN_SIDE
    assert castling.king_to == Position.from_algebraic("c1")
    assert castling.rook_to == Position.from_algebraic("d1")
    # the span covers the rook's travel all the way to d1
    assert castling.span() == squares("a1", "b1", "c1", "d1")


def test_king_already_on_destination() -> None:
    castling = CastlingSquares.for_rook(
        Position.from_algebraic("g1"), Position.from_algebraic("h1")
    )
    assert castling.king_path() == squares("g1")
    assert castling.span() == squares("f1", "g1", "h1")


def test_squares_between_on_row() -> None:
    a1 = Position.from_algebraic("a1")
    e1 = Position.from_algebraic("e1")
    assert squares_between_on_row(a1, e1) == squares("b1", "c1", "d1")
    assert squares_between_on_row(e1, a1) == squares("b1", "c1", "d1")
    assert squares_between_on_row(a1, e1, inclusive=True) == squares(
        "a1", "b1", "c1", "d1", "e1"
    )


def test_squares_between_requires_same_row() -> None:
    with pytest.raises(ValueError):
        squares_between_on_row(Position.from_algebraic("a1"), Position.from_algebraic("a2"))
