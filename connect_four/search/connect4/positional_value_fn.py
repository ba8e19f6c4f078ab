"""Positional value function for Connect4 minimax: open four-windows per disc."""

from __future__ import annotations

import numpy as np

from connect_four.games.connect4 import Connect4State
from connect_four.games.connect4.board import is_in_bounds
from connect_four.games.connect4.constants import COLS, DIRECTIONS, EMPTY, ROWS, WIN_POTENTIAL
from connect_four.games.turn_based_game import TurnBasedGame
from ..value_fn import StateValueFn


def direction_potential(grid, row: int, col: int, d_row: int, d_col: int) -> int:
    """
    Potential of the four-cell window starting at the disc on ``(row, col)``.

    * 0 if the window leaves the board or holds an opponent disc;
    * ``WIN_POTENTIAL`` if all four cells hold the origin's disc;
    * 1 otherwise, plus ``row + 1`` for a horizontal ``_XXX_`` shape: the
      first three cells are the origin's and the cells just before the
      window and just after the third cell are both empty.

    ``grid`` may be an array or a nested list.
    """
    origin = grid[row][col]
    owned = 0
    parity_bonus = 0
    r, c = row, col
    steps = 0
    while steps < 4 and is_in_bounds(r, c):
        cell = grid[r][c]
        if cell != EMPTY and cell != origin:
            return 0
        if cell == origin:
            owned += 1
            if (
                d_row == 0
                and steps == 2
                and owned == 3
                and is_in_bounds(row, col - d_col)
                and is_in_bounds(r, c + d_col)
                and grid[row][col - d_col] == EMPTY
                and grid[r][c + d_col] == EMPTY
            ):
                # Odd/even row threats resolve differently under gravity.
                parity_bonus += row + 1
        r += d_row
        c += d_col
        steps += 1

    if steps < 4:
        return 0
    if owned == 4:
        return WIN_POTENTIAL
    return 1 + parity_bonus


def evaluate_board(board: np.ndarray, perspective: int) -> int:
    """
    Sum of ``direction_potential`` over every disc and all eight directions,
    added for ``perspective``'s discs and subtracted for the opponent's.
    """
    grid = board.tolist()
    score = 0
    for row in range(ROWS):
        line = grid[row]
        for col in range(COLS):
            token = line[col]
            if token == EMPTY:
                continue
            potential = 0
            for d_row, d_col in DIRECTIONS:
                potential += direction_potential(grid, row, col, d_row, d_col)
            if token == perspective:
                score += potential
            else:
                score -= potential
    return score


class Connect4PositionalValueFn(StateValueFn[Connect4State]):
    """Evaluates Connect4 positions by counting still-completable windows."""

    def evaluate(
        self,
        game: TurnBasedGame[Connect4State],
        state: Connect4State,
        perspective: int,
    ) -> int:
        return evaluate_board(state.board, perspective)
