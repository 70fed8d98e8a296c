"""
Geometry/Base movement rules

Key idea: Use strategy pattern to define the move sets for each piece type.

Legality (not leaving your own king in check) is checked later by the Rulebook.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from chess960.core.shared_types import Color, PieceType, opponent
from chess960.rules.castling import CastlingSquares, HOME_ROWS
from chess960.rules.pieces import PIECE_TO_FEN, Piece
from chess960.rules.square import BOARD_DIMENSIONS, Position


class Board(Protocol):
    """Just the parts the movement strategies need"""

    def get_piece(
        self, position: Position, color: Optional[Color] = None
    ) -> Optional[Piece]: ...
    def is_occupied(self, position: Position) -> bool: ...


Vector = tuple[int, int]

STRAIGHTS: list[Vector] = [(1, 0), (-1, 0), (0, 1), (0, -1)]
DIAGONALS: list[Vector] = [(1, 1), (1, -1), (-1, 1), (-1, -1)]
KNIGHT_DELTAS: list[Vector] = [
    (2, 1),
    (2, -1),
    (-2, 1),
    (-2, -1),
    (1, 2),
    (1, -2),
    (-1, 2),
    (-1, -2),
]
KING_DELTAS: list[Vector] = STRAIGHTS + DIAGONALS

# white moves UP the board (increasing rows), black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_ROWS: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: 6}
PROMOTION_ROWS: dict[Color, int] = {Color.WHITE: 7, Color.BLACK: 0}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made"""

    from_square: Position
    to_square: Position
    promote_to: Optional[PieceType] = None
    castling: Optional[CastlingSquares] = None
    is_en_passant: bool = False

    def to_uci(self) -> str:
        """
        Convert into UCI notation, ex. "e2e4", "e7e8q".

        NOTE: castling is written as "king takes own rook" (e1h1), the usual convention for Chess960,
        because the king does not always move in Chess960 castling.
        """
        if self.castling:
            return f"{self.castling.king_from.to_algebraic()}{self.castling.rook_from.to_algebraic()}"
        piece_char = PIECE_TO_FEN[self.promote_to] if self.promote_to else ""
        return f"{self.from_square.to_algebraic()}{self.to_square.to_algebraic()}{piece_char}"


# --- RAYCASTING ---
def raycast(position: Position, board: Board, directions: list[Vector]) -> list[Position]:
    """
    Raycasting algorithm
    -----

    We move along the given directions until we hit another piece or the edge of the board.
    The first occupied square IS included (whatever color stands there), the squares behind it are not.
    """
    squares: list[Position] = []
    for dr, dc in directions:
        target = position.offset(dr, dc)
        while target.is_within_bounds():
            squares.append(target)
            if board.is_occupied(target):
                break
            target = target.offset(dr, dc)
    return squares


def single_steps(position: Position, deltas: list[Vector]) -> list[Position]:
    """Raycasting is for sliding pieces. This is the equivalent for kings and knights that just jump once along a direction"""
    targets = [position.offset(dr, dc) for dr, dc in deltas]
    return [target for target in targets if target.is_within_bounds()]


# --- MOVEMENT RULES ---
def _not_own_piece(
    position: Position, targets: list[Position], board: Board
) -> list[Move]:
    """Turn target squares into moves. Squares occupied by your own pieces are dropped."""
    piece = board.get_piece(position)
    assert piece is not None
    return [
        Move(from_square=position, to_square=target)
        for target in targets
        if board.get_piece(target, piece.color) is None
    ]


def raycasting_move(position: Position, board: Board, directions: list[Vector]) -> list[Move]:
    return _not_own_piece(position, raycast(position, board, directions), board)


def single_step_move(position: Position, board: Board, deltas: list[Vector]) -> list[Move]:
    return _not_own_piece(position, single_steps(position, deltas), board)


def candidate_pawn_moves(position: Position, board: Board) -> list[Move]:
    """
    A pawn:
    - moves by a single square forward, only onto an empty square.
    - It can move by two in their first move (so when on their starting row), if both squares are empty
    - takes diagonally

    NOTE: En passant and promotion are added by the MovementRule
    """
    piece = board.get_piece(position)
    assert piece is not None
    direction = PAWN_DIRECTION[piece.color]

    moves: list[Move] = []
    one_step = position.offset(direction, 0)
    if one_step.is_within_bounds() and not board.is_occupied(one_step):
        moves.append(Move(position, one_step))
        two_steps = one_step.offset(direction, 0)
        if position.row == PAWN_ROWS[piece.color] and not board.is_occupied(two_steps):
            moves.append(Move(position, two_steps))

    for target in single_steps(position, [(direction, 1), (direction, -1)]):
        if board.get_piece(target, opponent(piece.color)) is not None:
            moves.append(Move(position, target))
    return moves


def candidate_knight_moves(position: Position, board: Board) -> list[Move]:
    """Knights always move such that |delta_row| + |delta_column| = 3"""
    return single_step_move(position, board, KNIGHT_DELTAS)


def candidate_bishop_moves(position: Position, board: Board) -> list[Move]:
    """Bishops move diagonally: |delta_row| = |delta_column|"""
    return raycasting_move(position, board, DIAGONALS)


def candidate_rook_moves(position: Position, board: Board) -> list[Move]:
    """Rooks move either horizontally or vertically"""
    return raycasting_move(position, board, STRAIGHTS)


def candidate_queen_moves(position: Position, board: Board) -> list[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return candidate_bishop_moves(position, board) + candidate_rook_moves(position, board)


def candidate_king_moves(position: Position, board: Board) -> list[Move]:
    """
    The king can move by a single square at the time.

    Castling is modelled as a special king move (handled separately).
    """
    return single_step_move(position, board, KING_DELTAS)


# -- STRATEGY PATTERN: MOVEMENT RULES ---
CandidateMovesFn = Callable[[Position, Board], list[Move]]
MOVEMENT_RULES: dict[PieceType, CandidateMovesFn] = {
    PieceType.PAWN: candidate_pawn_moves,
    PieceType.KNIGHT: candidate_knight_moves,
    PieceType.BISHOP: candidate_bishop_moves,
    PieceType.ROOK: candidate_rook_moves,
    PieceType.QUEEN: candidate_queen_moves,
    PieceType.KING: candidate_king_moves,
}


# -- EN PASSANT MOVES ---
def is_double_pawn_push(move: Move, board: Board) -> bool:
    """Looks at the board AFTER the move was made: the pawn now stands on `to_square`."""
    piece = board.get_piece(move.to_square)
    return (
        piece is not None
        and piece.type == PieceType.PAWN
        and abs(move.to_square.row - move.from_square.row) == 2
        and move.from_square.column == move.to_square.column
    )


def en_passant_moves(
    position: Position, board: Board, last_move: Optional[Move]
) -> list[Move]:
    """
    The pawn on `position` can take en passant only right after the opponent pushed a pawn by two squares,
    landing next to it. The pawn moves diagonally behind the opponent's pawn.
    """
    if last_move is None or not is_double_pawn_push(last_move, board):
        return []

    pawn = board.get_piece(position)
    passed_pawn = board.get_piece(last_move.to_square)
    assert pawn is not None and passed_pawn is not None
    if pawn.type != PieceType.PAWN or passed_pawn.color == pawn.color:
        return []

    next_to_each_other = (last_move.to_square.row == position.row) and (
        abs(last_move.to_square.column - position.column) == 1
    )
    if not next_to_each_other:
        return []

    target = Position(position.row + PAWN_DIRECTION[pawn.color], last_move.to_square.column)
    return [Move(from_square=position, to_square=target, is_en_passant=True)]


def en_passant_capture_square(move: Move) -> Position:
    """The taken pawn stands on the destination file, on the row the capturing pawn started from."""
    return Position(move.from_square.row, move.to_square.column)


# -- PAWN PROMOTION MOVES --
PROMOTION_OPTIONS: list[PieceType] = [
    PieceType.QUEEN,
    PieceType.ROOK,
    PieceType.BISHOP,
    PieceType.KNIGHT,
]


def is_pawn_push_to_promotion_square(move: Move, board: Board) -> bool:
    """check if the move is a pawn move that reaches the far row (as seen from the pawn)"""
    moving_piece = board.get_piece(move.from_square)
    return (
        moving_piece is not None
        and moving_piece.type == PieceType.PAWN
        and move.to_square.row == PROMOTION_ROWS[moving_piece.color]
    )


def pawn_pushes_w_promotion(pawn_push: Move) -> list[Move]:
    """Return multiple copies of the pawn push with the piece type to promote into filled in."""
    return [
        Move(
            from_square=pawn_push.from_square,
            to_square=pawn_push.to_square,
            promote_to=piece_type,
        )
        for piece_type in PROMOTION_OPTIONS
    ]


def expand_promotions(moves: list[Move], board: Board) -> list[Move]:
    """One move per promotion choice, instead of a single ambiguous pawn move. Order of `moves` is kept."""
    expanded: list[Move] = []
    for move in moves:
        if is_pawn_push_to_promotion_square(move, board):
            expanded.extend(pawn_pushes_w_promotion(move))
        else:
            expanded.append(move)
    return expanded


# -- CASTLING MOVES --
def candidate_castling_squares(position: Position, board: Board) -> list[CastlingSquares]:
    """
    Pair an unmoved king on its home row with each unmoved rook of the same color on that row.
    Only the *pieces* are checked here: empty paths and attacked squares are checked by the MovementRule.
    """
    king = board.get_piece(position)
    if king is None or king.type != PieceType.KING or king.has_moved:
        return []
    if position.row != HOME_ROWS[king.color]:
        return []

    candidates: list[CastlingSquares] = []
    for column in range(BOARD_DIMENSIONS[1]):
        rook_square = Position(position.row, column)
        rook = board.get_piece(rook_square, king.color)
        if rook is not None and rook.type == PieceType.ROOK and not rook.has_moved:
            candidates.append(CastlingSquares.for_rook(position, rook_square))
    return candidates


def castling_move(squares: CastlingSquares) -> Move:
    return Move(squares.king_from, squares.king_to, castling=squares)
