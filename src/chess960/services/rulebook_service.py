"""Orchestration of communication from a presentation layer to the rules (and the reverse direction)."""

import logging
import random
from typing import Optional

from chess960.api.models import (
    CreateGameRequest,
    GameSnapshot,
    LegalMove,
    LegalMovesResponse,
    MoveRequest,
    SquareRequest,
)
from chess960.core.exceptions import GameSetupError, IllegalMoveError
from chess960.core.shared_types import Variant
from chess960.rules.game import ChessGame, Update
from chess960.rules.moves import Move
from chess960.rules.rulebook import Chess960Rulebook, Rulebook
from chess960.rules.square import Position

logger = logging.getLogger("chess960.services")

RULEBOOKS: dict[Variant, type[Rulebook]] = {
    Variant.STANDARD: Rulebook,
    Variant.CHESS960: Chess960Rulebook,
}


class RulebookService:
    """
    Translates requests (square names, piece type names) into rulebook calls and rulebook results into responses.

    The service keeps no games: the caller owns the current ChessGame and passes it in.
    """

    def __init__(self, variant: Variant = Variant.CHESS960) -> None:
        self.variant = variant
        self.rulebook = RULEBOOKS[variant]()

    def create_game(self, request: CreateGameRequest) -> ChessGame:
        """Start a game. A seed makes the Chess960 setup reproducible."""
        rng = random.Random(request.seed) if request.seed is not None else None
        game = self.rulebook.create_game(rng)
        if game is None:
            raise GameSetupError(f"The {self.variant} rulebook could not set up a board.")
        logger.info(f"New {self.variant} game: {game.board.to_fen()}")
        return game

    def describe(self, game: ChessGame) -> GameSnapshot:
        last_move = game.last_move
        return GameSnapshot(
            pieces={
                position.to_algebraic(): piece.to_fen()
                for position, piece in game.board.all_pieces()
            },
            active_color=game.active_player.color,
            status=self.rulebook.get_status(game),
            last_move=last_move.to_uci() if last_move else None,
        )

    def legal_moves(self, game: ChessGame, request: SquareRequest) -> LegalMovesResponse:
        """Legal destinations for the selected piece (empty if it is not a piece of the player to move)."""
        updates = self.rulebook.get_updates(game, Position.from_algebraic(request.square))
        return LegalMovesResponse(
            square=request.square,
            color=game.active_player.color,
            legal_moves=[self._to_legal_move(update) for update in updates],
        )

    def play(self, game: ChessGame, request: MoveRequest) -> ChessGame:
        """The user confirmed a destination: return the game after that move."""
        update = self._find_update(game, request)
        if update is None:
            raise IllegalMoveError(
                f"Move not allowed: {request.from_square}{request.to_square}"
                f"{' (' + request.promote_to + ')' if request.promote_to else ''}"
            )
        return update.game

    # -- Internal helpers --
    def _find_update(self, game: ChessGame, request: MoveRequest) -> Optional[Update]:
        from_square = Position.from_algebraic(request.from_square)
        to_square = Position.from_algebraic(request.to_square)
        for update in self.rulebook.get_updates(game, from_square):
            move = update.move
            assert move is not None
            if _matches(move, to_square) and move.promote_to == request.promote_to:
                return update
        return None

    def _to_legal_move(self, update: Update) -> LegalMove:
        move = update.move
        assert move is not None
        return LegalMove(
            uci=move.to_uci(),
            to_square=move.to_square.to_algebraic(),
            promote_to=move.promote_to,
            is_castling=move.castling is not None,
            is_en_passant=move.is_en_passant,
        )


def _matches(move: Move, to_square: Position) -> bool:
    """
    Castling can be selected by clicking the king's destination or the rook to castle with.

    NOTE: In Chess960 the king's destination can also be a normal king step. The normal move comes first in the
    enumeration and wins, so select the rook to castle in that case.
    """
    if move.castling:
        return to_square in (move.castling.king_to, move.castling.rook_from)
    return move.to_square == to_square
