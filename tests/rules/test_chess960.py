"""Unit tests for /src/chess960/rules/chess960.py"""

import random
from collections import Counter
from unittest.mock import Mock, patch

import pytest

from chess960.core.shared_types import Color, PieceType
from chess960.rules.board import Board
from chess960.rules.chess960 import (
    ORTHODOX_BACK_RANK,
    bishops_alternating,
    build_board,
    generate_back_rank,
    has_full_armies,
    indices_of,
    is_valid_back_rank,
    king_between_rooks,
    shuffle,
)
from chess960.rules.square import Position

R, N, B, Q, K = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
)


# --- CONSTRAINTS ---
def test_king_between_rooks_happy_path() -> None:
    back_rank = [R, N, K, B, R, Q, B, N]
    rooks = indices_of(back_rank, R)
    king = indices_of(back_rank, K)[0]
    assert (rooks, king) == ([0, 4], 2)
    assert king_between_rooks(rooks[0], rooks[1], king)


def test_king_between_rooks_sad_path() -> None:
    back_rank = [K, R, N, B, Q, B, R, N]
    rooks = indices_of(back_rank, R)
    king = indices_of(back_rank, K)[0]
    assert (rooks, king) == ([1, 6], 0)
    assert not king_between_rooks(rooks[0], rooks[1], king)


def test_bishops_alternating_happy_path() -> None:
    """index 1 is odd, index 2 is even: different square colors"""
    assert bishops_alternating(1, 2)


def test_bishops_alternating_sad_path() -> None:
    """index 1 and index 5 are both odd: both bishops on the same square color"""
    assert not bishops_alternating(1, 5)


@pytest.mark.parametrize(
    "back_rank, valid",
    [
        (list(ORTHODOX_BACK_RANK), True),
        ([R, N, K, B, R, Q, B, N], True),
        ([K, R, N, B, Q, B, R, N], False),
        ([R, B, B, N, K, R, Q, N], True),
        ([R, B, N, B, K, R, Q, N], False),
        # wrong piece counts are never valid
        ([R, N, B, Q, K, B, N, N], False),
    ],
)
def test_is_valid_back_rank(back_rank: list[PieceType], valid: bool) -> None:
    assert is_valid_back_rank(back_rank) == valid


# --- SHUFFLING ---
def test_shuffle_is_a_permutation() -> None:
    back_rank = list(ORTHODOX_BACK_RANK)
    shuffle(back_rank, random.Random(7))
    assert Counter(back_rank) == Counter(ORTHODOX_BACK_RANK)


def test_shuffle_uses_fisher_yates_ranges() -> None:
    """Element i is swapped with a random element in [0, i], for i from 7 down to 1"""
    rng = Mock()
    rng.randint.return_value = 0
    back_rank = list(ORTHODOX_BACK_RANK)
    shuffle(back_rank, rng)
    assert [call.args for call in rng.randint.call_args_list] == [
        (0, i) for i in range(7, 0, -1)
    ]


@pytest.mark.parametrize("seed", range(200))
def test_generated_back_ranks_satisfy_constraints(seed: int) -> None:
    back_rank = generate_back_rank(random.Random(seed))
    bishops = indices_of(back_rank, B)
    rooks = indices_of(back_rank, R)
    king = indices_of(back_rank, K)[0]

    assert Counter(back_rank) == Counter(ORTHODOX_BACK_RANK)
    assert bishops[0] % 2 != bishops[1] % 2
    assert rooks[0] < king < rooks[1]


def test_same_seed_same_back_rank() -> None:
    assert generate_back_rank(random.Random(960)) == generate_back_rank(random.Random(960))


def test_generator_reshuffles_until_valid() -> None:
    """Rejection sampling: every rejected arrangement triggers a complete new shuffle"""
    with (
        patch("chess960.rules.chess960.shuffle") as mock_shuffle,
        patch(
            "chess960.rules.chess960.is_valid_back_rank",
            side_effect=[False, False, True],
        ) as mock_is_valid,
    ):
        generate_back_rank(random.Random(0))
    assert mock_shuffle.call_count == 3
    assert mock_is_valid.call_count == 3


def test_generator_does_not_touch_global_random_state() -> None:
    random.seed(1234)
    expected = random.random()

    random.seed(1234)
    generate_back_rank()
    assert random.random() == expected


# --- BOARD ---
def test_orthodox_build_board() -> None:
    board = build_board(list(ORTHODOX_BACK_RANK))
    assert board.to_fen() == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"


def test_build_board_mirrors_back_rank() -> None:
    back_rank = [R, N, K, B, R, Q, B, N]
    board = build_board(back_rank)
    for column, piece_type in enumerate(back_rank):
        white = board.get_piece(Position(0, column), Color.WHITE)
        black = board.get_piece(Position(7, column), Color.BLACK)
        assert white is not None and white.type == piece_type
        assert black is not None and black.type == piece_type
        assert board.get_piece(Position(1, column)) is not None
        assert board.get_piece(Position(6, column)) is not None
    assert has_full_armies(board)


def test_has_full_armies_detects_missing_piece() -> None:
    board = build_board(list(ORTHODOX_BACK_RANK))
    assert has_full_armies(board)
    assert not has_full_armies(board.with_piece_removed(Position(0, 0)))
    assert not has_full_armies(Board.empty())
