"""
Capturing rules / attacking rules

The attack set of a piece: the squares it could capture on, if an opponent's piece were standing there.
That is not the same as its moves: pawns attack diagonally but push forward, and a sliding piece
also 'attacks' the square of a piece of its own color (it defends it).
"""

from typing import Callable

from chess960.core.shared_types import Color, PieceType
from chess960.rules.board import Board
from chess960.rules.moves import (
    DIAGONALS,
    KING_DELTAS,
    KNIGHT_DELTAS,
    PAWN_DIRECTION,
    STRAIGHTS,
    raycast,
    single_steps,
)
from chess960.rules.square import Position


def pawn_attacks(position: Position, color: Color, board: Board) -> list[Position]:
    """Pawns only take diagonally forward (forward depends on the color)"""
    direction = PAWN_DIRECTION[color]
    return single_steps(position, [(direction, 1), (direction, -1)])


def knight_attacks(position: Position, color: Color, board: Board) -> list[Position]:
    return single_steps(position, KNIGHT_DELTAS)


def bishop_attacks(position: Position, color: Color, board: Board) -> list[Position]:
    return raycast(position, board, DIAGONALS)


def rook_attacks(position: Position, color: Color, board: Board) -> list[Position]:
    return raycast(position, board, STRAIGHTS)


def queen_attacks(position: Position, color: Color, board: Board) -> list[Position]:
    return raycast(position, board, STRAIGHTS + DIAGONALS)


def king_attacks(position: Position, color: Color, board: Board) -> list[Position]:
    return single_steps(position, KING_DELTAS)


# --- STRATEGY PATTERN: ATTACKING RULES ---
AttackShapeFn = Callable[[Position, Color, Board], list[Position]]
ATTACK_SHAPES: dict[PieceType, AttackShapeFn] = {
    PieceType.PAWN: pawn_attacks,
    PieceType.KNIGHT: knight_attacks,
    PieceType.BISHOP: bishop_attacks,
    PieceType.ROOK: rook_attacks,
    PieceType.QUEEN: queen_attacks,
    PieceType.KING: king_attacks,
}


class ThreatAnalyzer:
    """
    Answers "which squares does this side attack?".

    Stateless, so one instance can be shared by all the rules. Nothing is cached: every question is answered from the
    board that is passed in.
    """

    def is_attacked(self, board: Board, position: Position, by_color: Color) -> bool:
        """True if any piece of `by_color` has `position` in its attack set"""
        for square, piece in board.all_pieces():
            if piece.color != by_color:
                continue
            attack_shape = ATTACK_SHAPES[piece.type]
            if position in attack_shape(square, piece.color, board):
                return True
        return False

    def is_any_attacked(self, board: Board, positions: list[Position], by_color: Color) -> bool:
        return not self.attacked_squares(board, by_color).isdisjoint(positions)

    def attacked_squares(self, board: Board, by_color: Color) -> set[Position]:
        squares: set[Position] = set()
        for square, piece in board.all_pieces():
            if piece.color == by_color:
                squares.update(ATTACK_SHAPES[piece.type](square, piece.color, board))
        return squares
