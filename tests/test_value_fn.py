"""Tests for the positional Connect4 value function."""

from __future__ import annotations

import numpy as np
import pytest

from connect_four.games.connect4 import (
    HUMAN,
    MACHINE,
    Connect4Game,
    board_from_rows,
    empty_board,
)
from connect_four.games.connect4.constants import WIN_POTENTIAL
from connect_four.search.connect4 import (
    Connect4PositionalValueFn,
    direction_potential,
    evaluate_board,
)


def _random_position(seed: int, plies: int):
    game = Connect4Game()
    rng = np.random.default_rng(seed)
    state = game.initial_state(first_player=MACHINE)
    while state.disc_count < plies:
        action = int(rng.choice(list(game.legal_actions(state))))
        child = game.apply_action(state, action)
        state = game.initial_state(first_player=MACHINE) if child.done else child
    return game, state


def test_empty_board_scores_zero():
    assert evaluate_board(empty_board(), MACHINE) == 0
    assert evaluate_board(empty_board(), HUMAN) == 0


def test_single_corner_disc():
    """Test a bottom-left disc has three open windows: right, up, up-right."""
    board = empty_board()
    board[5, 0] = MACHINE
    assert evaluate_board(board, MACHINE) == 3
    assert evaluate_board(board, HUMAN) == -3


def test_window_leaving_board_is_worthless():
    board = empty_board()
    board[5, 5] = HUMAN
    assert direction_potential(board, 5, 5, 0, 1) == 0
    assert direction_potential(board, 5, 5, 1, 0) == 0
    assert direction_potential(board, 5, 5, 0, -1) == 1


def test_window_with_opponent_disc_is_worthless():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".OX....",
    ])
    assert direction_potential(board, 5, 1, 0, 1) == 0
    assert direction_potential(board, 5, 2, 0, -1) == 0


def test_completed_line_is_win_potential():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "OOOO...",
    ])
    assert direction_potential(board, 5, 0, 0, 1) == WIN_POTENTIAL


def test_horizontal_parity_bonus_on_bottom_row():
    """Test an open _OOO_ shape earns row + 1 on top of the base potential."""
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        ".OOO...",
    ])
    assert direction_potential(board, 5, 1, 0, 1) == 1 + 6
    assert direction_potential(board, 5, 3, 0, -1) == 1 + 6
    # Only the first three cells may hold the run.
    assert direction_potential(board, 5, 2, 0, 1) == 1


def test_parity_bonus_depends_on_row():
    board = empty_board()
    for col in (1, 2, 3):
        board[2, col] = MACHINE
    assert direction_potential(board, 2, 1, 0, 1) == 1 + 3


def test_parity_bonus_needs_both_sides_open():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "XOOO...",
    ])
    assert direction_potential(board, 5, 1, 0, 1) == 1


def test_no_parity_bonus_off_horizontal():
    """Test vertical and diagonal runs of three get no bonus."""
    board = empty_board()
    for row in (5, 4, 3):
        board[row, 0] = MACHINE
    assert direction_potential(board, 5, 0, -1, 0) == 1

    board = empty_board()
    for row, col in ((5, 1), (4, 2), (3, 3)):
        board[row, col] = MACHINE
    assert direction_potential(board, 5, 1, -1, 1) == 1


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_score_is_zero_sum(seed):
    """Test swapping the perspective negates the score."""
    game, state = _random_position(seed, plies=12)
    value_fn = Connect4PositionalValueFn()
    mine = value_fn.evaluate(game, state, MACHINE)
    theirs = value_fn.evaluate(game, state, HUMAN)
    assert mine == -theirs
    assert mine == evaluate_board(state.board, MACHINE)
