"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

from typing import Callable

import pytest

from chess960.core.shared_types import Color
from chess960.rules.board import Board
from chess960.rules.game import ChessGame, Player
from chess960.rules.rulebook import Chess960Rulebook, Rulebook

GameFactory = Callable[..., ChessGame]


@pytest.fixture
def rulebook() -> Rulebook:
    return Rulebook()


@pytest.fixture
def chess960_rulebook() -> Chess960Rulebook:
    return Chess960Rulebook()


@pytest.fixture
def game_from_fen() -> GameFactory:
    """Call the inner function with a FEN piece placement (and optionally the color to move)"""

    def _create_game(fen: str, to_move: Color = Color.WHITE) -> ChessGame:
        other = Color.BLACK if to_move == Color.WHITE else Color.WHITE
        return ChessGame(Board.from_fen(fen), Player(to_move), Player(other))

    return _create_game
