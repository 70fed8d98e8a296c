"""
Starting positions for Chess960 (Fischer Random).

The back rank is shuffled until it satisfies two constraints:
1. the bishops stand on squares of opposite color (one even, one odd column)
2. the king stands somewhere between the two rooks (so castling to both sides stays possible)

White and black get the same arrangement, pawns go in front as usual.
"""

import logging
import random
from typing import Optional

from chess960.core.shared_types import Color, PieceType
from chess960.rules.board import Board
from chess960.rules.castling import HOME_ROWS
from chess960.rules.moves import PAWN_ROWS
from chess960.rules.pieces import Piece
from chess960.rules.square import BOARD_DIMENSIONS, Position

logger = logging.getLogger("chess960.rules.chess960")

ORTHODOX_BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)

# 8 pawns + 8 pieces
PIECES_PER_ARMY = 2 * BOARD_DIMENSIONS[1]


def bishops_alternating(first_bishop: int, second_bishop: int) -> bool:
    """Opposite parity of the columns means opposite square colors"""
    return first_bishop % 2 != second_bishop % 2


def king_between_rooks(first_rook: int, second_rook: int, king: int) -> bool:
    """Rook indices are expected in increasing order"""
    return first_rook < king < second_rook


def indices_of(back_rank: list[PieceType], piece_type: PieceType) -> list[int]:
    return [index for index, kind in enumerate(back_rank) if kind == piece_type]


def is_valid_back_rank(back_rank: list[PieceType]) -> bool:
    bishops = indices_of(back_rank, PieceType.BISHOP)
    rooks = indices_of(back_rank, PieceType.ROOK)
    kings = indices_of(back_rank, PieceType.KING)
    if len(bishops) != 2 or len(rooks) != 2 or len(kings) != 1:
        return False
    return bishops_alternating(*bishops) and king_between_rooks(*rooks, kings[0])


def shuffle(back_rank: list[PieceType], rng: random.Random) -> None:
    """
    One full Fisher-Yates pass (in place): swap element i with a random element in [0, i], for i from the end down to 1.
    """
    for i in range(len(back_rank) - 1, 0, -1):
        j = rng.randint(0, i)
        back_rank[i], back_rank[j] = back_rank[j], back_rank[i]


def generate_back_rank(rng: Optional[random.Random] = None) -> list[PieceType]:
    """
    Rejection sampling: reshuffle until both constraints hold.
    ---

    There is no cap on the number of attempts. 960 of the 8!/(2!2!2!) = 5040 distinct arrangements are valid,
    so on average ~5 shuffles are needed and the loop terminates with probability 1.

    NOTE: a fresh random.Random is created per call if none is passed in: no shared global random state.
    """
    rng = rng if rng is not None else random.Random()
    back_rank = list(ORTHODOX_BACK_RANK)
    attempts = 0
    while True:
        attempts += 1
        shuffle(back_rank, rng)
        if is_valid_back_rank(back_rank):
            break
    logger.debug(f"Found valid back rank after {attempts} shuffle(s): {back_rank}")
    return back_rank


def _army(back_rank: list[PieceType], color: Color) -> list[tuple[Position, Piece]]:
    home_row = HOME_ROWS[color]
    pawn_row = PAWN_ROWS[color]
    pieces = [
        (Position(home_row, column), Piece(piece_type, color))
        for column, piece_type in enumerate(back_rank)
    ]
    pawns = [
        (Position(pawn_row, column), Piece(PieceType.PAWN, color))
        for column in range(BOARD_DIMENSIONS[1])
    ]
    return pieces + pawns


def build_board(back_rank: list[PieceType]) -> Board:
    """Mirror the back rank for both colors (same files) and put the pawns in front."""
    return Board.from_pieces(_army(back_rank, Color.WHITE) + _army(back_rank, Color.BLACK))


def has_full_armies(board: Board) -> bool:
    """Sanity check on a starting position: exactly 16 pieces of each color"""
    return all(board.count_pieces(color) == PIECES_PER_ARMY for color in Color)
