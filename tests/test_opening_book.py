"""Tests for the machine player's opening book."""

import pytest

from connect_four.games.connect4 import HUMAN, MACHINE, board_from_rows, empty_board
from connect_four.search.connect4 import opening_move, special_case_move

# Machine started; centre holds O-X-O-X-O from the bottom.
CENTRE_STACK = [
    ".......",
    "...O...",
    "...X...",
    "...O...",
    "...X...",
    "...O...",
]


def _six_disc_board(row, col):
    """Centre stack plus the opponent's disc at (row, col)."""
    board = board_from_rows(CENTRE_STACK)
    board[row, col] = HUMAN
    return board


def test_centre_on_empty_board():
    assert opening_move(empty_board(), first_player=MACHINE) == 3


def test_centre_while_few_discs():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "O..O..X",
    ])
    # Three discs: still below the threshold when the machine started.
    assert opening_move(board, first_player=MACHINE) == 3

    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "X..O...",
    ])
    assert opening_move(board, first_player=HUMAN) == 3


def test_no_book_move_at_threshold_when_human_started():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        ".......",
        "X..O..X",
    ])
    assert opening_move(board, first_player=HUMAN) is None


def test_centre_on_four_stack():
    board = board_from_rows([
        ".......",
        ".......",
        "...X...",
        "...O...",
        "...X...",
        "...O...",
    ])
    assert opening_move(board, first_player=MACHINE) == 3


def test_four_discs_off_centre_need_search():
    board = board_from_rows([
        ".......",
        ".......",
        ".......",
        ".......",
        "...X...",
        "..XOO..",
    ])
    assert opening_move(board, first_player=MACHINE) is None


@pytest.mark.parametrize(
    "cell, expected",
    [
        ((5, 1), 1),
        ((0, 3), 4),
        ((5, 0), 4),
        ((5, 4), 4),
        ((5, 6), 4),
        ((5, 2), 5),
        ((5, 5), 5),
    ],
)
def test_six_disc_centre_stack_replies(cell, expected):
    """Test the opponent's sixth disc picks the reply."""
    board = _six_disc_board(*cell)
    assert opening_move(board, first_player=MACHINE) == expected


def test_six_disc_line_requires_machine_first():
    board = _six_disc_board(5, 1)
    assert opening_move(board, first_player=HUMAN) is None


def test_six_disc_line_requires_alternating_stack():
    board = board_from_rows([
        ".......",
        "...O...",
        "...O...",
        "...X...",
        "...X...",
        "X..O...",
    ])
    assert opening_move(board, first_player=MACHINE) is None


def test_special_case_without_matching_cell():
    assert special_case_move(empty_board()) is None
    # Earlier rules win over later ones.
    board = _six_disc_board(5, 1)
    board[5, 5] = HUMAN
    assert special_case_move(board) == 1
