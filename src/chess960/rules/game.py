"""
The state of a game of chess: the board, whose turn it is and how we got here.

A ChessGame never changes. Making a move, ending a turn, recording the last update: each produces a new ChessGame.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from typing import TYPE_CHECKING, Optional, Self

from chess960.core.shared_types import Color
from chess960.rules.board import Board

if TYPE_CHECKING:
    from chess960.rules.commands import Command
    from chess960.rules.moves import Move


@dataclass(frozen=True)
class Player:
    color: Color


@dataclass(frozen=True)
class Update:
    """
    A game state together with the command that produced it.

    Returned by the Rulebook: one Update per legal move. The presentation layer adopts `game` once the user confirms.
    """

    game: ChessGame
    command: Command

    @property
    def move(self) -> Optional[Move]:
        return self.command.move


@dataclass(frozen=True)
class ChessGame:
    board: Board
    active_player: Player
    passive_player: Player
    # history is a linked list: leave it out of repr, eq and hash
    last_update: Optional[Update] = field(default=None, repr=False, compare=False)

    @classmethod
    def new(cls, board: Board) -> Self:
        """White always starts"""
        return cls(board, Player(Color.WHITE), Player(Color.BLACK))

    def end_turn(self) -> Self:
        """The 'active player' / 'passive player' distinction flips each turn."""
        return replace(
            self, active_player=self.passive_player, passive_player=self.active_player
        )

    def with_board(self, board: Board) -> Self:
        return replace(self, board=board)

    def with_last_update(self, update: Update) -> Self:
        return replace(self, last_update=update)

    @property
    def last_move(self) -> Optional[Move]:
        """The move played to reach this game (None at the start). En passant depends on it."""
        if self.last_update is None:
            return None
        return self.last_update.move

    def previous(self) -> Optional[ChessGame]:
        """
        The game as it was before the last move.

        NOTE: The recorded update stores the game the move was played FROM, so the history is a linked list.
        """
        if self.last_update is None:
            return None
        return self.last_update.game
