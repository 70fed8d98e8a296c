"""
The Rulebook is the entrypoint into the rules for the layers above (service / presentation).

It owns one instance of every rule component and exposes three questions:
* create_game: the starting position
* get_status: ongoing, check, checkmate, stalemate?
* get_updates: the legal outcomes for the piece on a square
"""

import logging
import random
from typing import Optional

from chess960.core.shared_types import Status
from chess960.rules.board import Board
from chess960.rules.chess960 import (
    ORTHODOX_BACK_RANK,
    build_board,
    generate_back_rank,
    has_full_armies,
)
from chess960.rules.game import ChessGame, Update
from chess960.rules.rules import CheckRule, EndRule, MovementRule, legal_updates
from chess960.rules.square import Position
from chess960.rules.threats import ThreatAnalyzer

logger = logging.getLogger("chess960.rules.rulebook")


class Rulebook:
    """Orthodox chess"""

    def __init__(self) -> None:
        self.threat_analyzer = ThreatAnalyzer()
        self.check_rule = CheckRule(self.threat_analyzer)
        self.movement_rule = MovementRule(self.threat_analyzer)
        self.end_rule = EndRule(self.check_rule, self.movement_rule)

    def create_game(self, rng: Optional[random.Random] = None) -> Optional[ChessGame]:
        """Orthodox setup: `rng` is accepted for a common signature with Chess960Rulebook, and ignored."""
        return self._game_from_board(build_board(list(ORTHODOX_BACK_RANK)))

    def get_status(self, game: ChessGame) -> Status:
        return self.end_rule.get_status(game)

    def get_updates(self, game: ChessGame, position: Position) -> list[Update]:
        """
        Every legal future for the active player's piece on `position`.

        Nothing on the square, or an opponent's piece: no updates (not an error).
        """
        updates = legal_updates(game, position, self.movement_rule, self.check_rule)
        logger.debug(f"{len(updates)} legal update(s) for {position.to_algebraic()}")
        return updates

    def _game_from_board(self, board: Board) -> Optional[ChessGame]:
        """Only start a game on a board with two complete armies."""
        if not has_full_armies(board):
            logger.error(f"Refusing to create a game from a malformed board: {board.to_fen()}")
            return None
        return ChessGame.new(board)


class Chess960Rulebook(Rulebook):
    """Fischer Random: same rules, shuffled back rank."""

    def create_game(self, rng: Optional[random.Random] = None) -> Optional[ChessGame]:
        back_rank = generate_back_rank(rng)
        return self._game_from_board(build_board(back_rank))
