"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, field_validator

from chess960.core.exceptions import InvalidRequestError
from chess960.core.shared_types import Color, PieceType, Status
from chess960.rules.square import BOARD_DIMENSIONS

SquareName = str
PieceCode = str


def _is_algebraic_notation(value: str) -> bool:
    """'a1' through 'h8' on an 8x8 board"""
    if len(value) != 2:
        return False

    file_character, rank_character = value[0], value[1]
    if not (file_character.isalpha() and rank_character.isdecimal() and rank_character.isascii()):
        return False
    column = ord(file_character) - ord("a")
    row = int(rank_character) - 1
    return 0 <= column < BOARD_DIMENSIONS[1] and 0 <= row < BOARD_DIMENSIONS[0]


def _validate_square(value: str) -> str:
    if not _is_algebraic_notation(value):
        raise InvalidRequestError(
            f"Cannot interpret {value!r} as a valid square name."
        )
    return value


# --- REQUEST MODELS ---
class CreateGameRequest(BaseModel):
    # Same seed, same starting position. Leave empty for a random one.
    seed: Optional[int] = None


class SquareRequest(BaseModel):
    """The user selected a piece"""

    square: SquareName

    @field_validator("square")
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square(value)


class MoveRequest(BaseModel):
    from_square: SquareName
    to_square: SquareName
    promote_to: Optional[PieceType] = None

    @field_validator(*["from_square", "to_square"])
    @classmethod
    def validate_square(cls, value: str) -> str:
        return _validate_square(value)


# --- RESPONSE MODELS ---
class GameSnapshot(BaseModel):
    """Everything a view needs to draw the game. Pieces are FEN characters keyed by square name."""

    pieces: dict[SquareName, PieceCode]
    active_color: Color
    status: Status
    last_move: Optional[str]


class LegalMove(BaseModel):
    uci: str
    to_square: SquareName
    promote_to: Optional[PieceType] = None
    is_castling: bool = False
    is_en_passant: bool = False


class LegalMovesResponse(BaseModel):
    square: SquareName
    color: Color
    legal_moves: list[LegalMove]
