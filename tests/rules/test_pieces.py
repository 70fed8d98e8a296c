"""Unit tests for /src/chess960/rules/pieces.py"""

from dataclasses import FrozenInstanceError

import pytest

from chess960.rules.pieces import FEN_TO_PIECE, PIECE_TO_FEN, Color, Piece, PieceType


@pytest.mark.parametrize("char", [char.upper() for char in FEN_TO_PIECE.keys()])
def test_creating_white_piece_from_fen(char: str) -> None:
    """Capital letters are used for white pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.WHITE
    assert piece.move_count == 0


@pytest.mark.parametrize("char", [char.lower() for char in FEN_TO_PIECE.keys()])
def test_creating_black_piece_from_fen(char: str) -> None:
    """Lower case letters are used for black pieces"""
    piece = Piece.from_fen(char)
    assert piece.type == FEN_TO_PIECE[char.lower()]
    assert piece.color == Color.BLACK


@pytest.mark.parametrize("piece_type", list(PieceType))
def test_pieces_to_fen(piece_type: PieceType) -> None:
    assert Piece(piece_type, Color.WHITE).to_fen() == PIECE_TO_FEN[piece_type].upper()
    assert Piece(piece_type, Color.BLACK).to_fen() == PIECE_TO_FEN[piece_type].lower()


def test_moving_creates_new_piece() -> None:
    rook = Piece(PieceType.ROOK, Color.WHITE)
    moved_rook = rook.moved()
    assert not rook.has_moved
    assert moved_rook.has_moved
    assert moved_rook.move_count == 1
    assert moved_rook.moved().move_count == 2


@pytest.mark.parametrize("color", list(Color))
def test_promotion_to_queen(color: Color) -> None:
    """Promotion gives a new piece of another type. The original pawn stays a pawn, and the color never changes"""
    pawn = Piece(PieceType.PAWN, color, move_count=5)
    queen = pawn.promoted(PieceType.QUEEN)
    assert queen.type == PieceType.QUEEN
    assert queen.color == color
    assert queen.move_count == 5
    assert pawn.type == PieceType.PAWN


def test_pieces_are_immutable() -> None:
    piece = Piece(PieceType.KNIGHT, Color.BLACK)
    with pytest.raises(FrozenInstanceError):
        piece.type = PieceType.QUEEN  # type: ignore[misc]
