"""
Commands: small steps that turn one ChessGame into the next one.

A command either produces a new game or None (the step did not apply). Commands chain with `then()`:
the second step only runs if the first one produced a game. That is how "move a piece", "end the turn" and
"record the update" are glued into a single unit. Because games are immutable, a chain that is thrown away
leaves nothing behind: there is nothing to roll back.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Optional

from chess960.rules.board import Board
from chess960.rules.game import ChessGame, Update
from chess960.rules.moves import Move, en_passant_capture_square

GameTransition = Callable[[ChessGame], Optional[ChessGame]]


@dataclass(frozen=True)
class Command:
    transition: GameTransition
    # the move this command carries out, if any. Turn bookkeeping commands have none.
    move: Optional[Move] = None

    def execute(self, game: ChessGame) -> Optional[ChessGame]:
        return self.transition(game)

    def then(self, other: Command) -> Command:
        """Sequence two commands. Fails as soon as one of the steps fails."""

        def _sequence(game: ChessGame) -> Optional[ChessGame]:
            intermediate = self.execute(game)
            if intermediate is None:
                return None
            return other.execute(intermediate)

        return Command(_sequence, self.move or other.move)


# --- BOARD UPDATES ---
def apply_move(board: Board, move: Move) -> Board:
    """
    New board after the move. Handles the special moves:

    1. castling: both king and rook move. Both are lifted off the board first, because in Chess960
       the king may land on the square the rook started from (and vice versa).
    2. en passant: the pawn that is taken is not on the destination square.
    3. promotion: a new piece type arrives on the destination square.
    """
    if move.castling:
        squares = move.castling
        king = board.get_piece(squares.king_from)
        rook = board.get_piece(squares.rook_from)
        assert king is not None and rook is not None
        lifted = board.with_piece_removed(squares.king_from).with_piece_removed(
            squares.rook_from
        )
        return lifted.with_piece_placed(squares.king_to, king.moved()).with_piece_placed(
            squares.rook_to, rook.moved()
        )

    new_board = board.with_piece_moved(move.from_square, move.to_square)

    if move.is_en_passant:
        new_board = new_board.with_piece_removed(en_passant_capture_square(move))

    if move.promote_to:
        promoted_piece = new_board.get_piece(move.to_square)
        assert promoted_piece is not None
        new_board = new_board.with_piece_placed(
            move.to_square, promoted_piece.promoted(move.promote_to)
        )

    return new_board


# --- COMMANDS ---
def move_command(move: Move) -> Command:
    """Carry out the move. Only applies if the active player owns the piece on the starting square."""

    def _move(game: ChessGame) -> Optional[ChessGame]:
        piece = game.board.get_piece(move.from_square, game.active_player.color)
        if piece is None:
            return None
        return game.with_board(apply_move(game.board, move))

    return Command(_move, move)


def _end_turn(game: ChessGame) -> Optional[ChessGame]:
    return game.end_turn()


END_TURN = Command(_end_turn)


def record_update(update: Update) -> Command:
    """Remember the update on the game (needed for en passant, and to step back through the history)."""

    def _record(game: ChessGame) -> Optional[ChessGame]:
        return game.with_last_update(update)

    return Command(_record)
