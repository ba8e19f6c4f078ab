"""
Board model: pure functions over a ``(ROWS, COLS)`` int8 array.

Row 0 is the TOP of the board and row ``ROWS - 1`` the bottom, so a disc
dropped into a column lands on the highest free row index.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

import numpy as np

from .constants import (
    COLS,
    COLUMN_ORDER,
    DIRECTIONS,
    EMPTY,
    HUMAN,
    MACHINE,
    ROWS,
    SYMBOLS,
)
from .errors import InvalidColumnError
from .state import GameStatus

_CHAR_TO_TOKEN = {"X": HUMAN, "O": MACHINE, ".": EMPTY, " ": EMPTY}


def empty_board() -> np.ndarray:
    return np.zeros((ROWS, COLS), dtype=np.int8)


def board_from_rows(rows: Sequence[str]) -> np.ndarray:
    """
    Build a board from ``ROWS`` strings of ``COLS`` characters, top row first.

    ``X`` is the human, ``O`` the machine, ``.`` (or a space) an empty cell.
    """
    if len(rows) != ROWS or any(len(line) != COLS for line in rows):
        raise ValueError(f"Expected {ROWS} rows of {COLS} cells")
    board = empty_board()
    for r, line in enumerate(rows):
        for c, ch in enumerate(line):
            if ch not in _CHAR_TO_TOKEN:
                raise ValueError(f"Unknown cell symbol {ch!r} at ({r}, {c})")
            board[r, c] = _CHAR_TO_TOKEN[ch]
    return board


def is_in_bounds(row: int, col: int) -> bool:
    return 0 <= row < ROWS and 0 <= col < COLS


def is_gravity_consistent(board: np.ndarray) -> bool:
    """True when no disc floats above an empty cell in its column."""
    occupied = board != EMPTY
    # Once a column is occupied at row r, every row below must be occupied too.
    return bool(np.all(occupied[:-1] <= occupied[1:]))


def count_discs(board: np.ndarray) -> int:
    return int(np.count_nonzero(board))


def legal_columns(board: np.ndarray, order: Sequence[int] = COLUMN_ORDER) -> List[int]:
    """Playable columns, in ``order`` (centre-out by default)."""
    top_row = board[0]
    return [col for col in order if top_row[col] == EMPTY]


def landing_row(board: np.ndarray, column: int) -> Optional[int]:
    for row in range(ROWS - 1, -1, -1):
        if board[row, column] == EMPTY:
            return row
    return None


def apply_move(
    board: np.ndarray,
    column: int,
    player: int,
    *,
    in_place: bool = False,
) -> np.ndarray:
    """
    Drop ``player``'s disc into ``column``.

    Returns a new board unless ``in_place`` is set, in which case ``board``
    itself is updated and returned. The board is left untouched when
    ``InvalidColumnError`` is raised.
    """
    if column < 0 or column >= COLS:
        raise InvalidColumnError(column, "Invalid Column Index")
    row = landing_row(board, column)
    if row is None:
        raise InvalidColumnError(column, "Column is already full.")

    target = board if in_place else board.copy()
    target[row, column] = player
    return target


def is_direction_linked(board, row: int, col: int, d_row: int, d_col: int) -> bool:
    """
    True if four cells starting at ``(row, col)`` and stepping by
    ``(d_row, d_col)`` all hold the same disc.

    ``board`` may be an array or a nested list.
    """
    origin = board[row][col]
    if origin == EMPTY:
        return False
    r, c = row, col
    for _ in range(4):
        if not is_in_bounds(r, c):
            return False
        if board[r][c] != origin:
            return False
        r += d_row
        c += d_col
    return True


def find_winner(board: np.ndarray) -> Optional[int]:
    """Token of the first linked four found in row-major scan order, if any."""
    grid = board.tolist()
    for row in range(ROWS):
        for col in range(COLS):
            token = grid[row][col]
            if token == EMPTY:
                continue
            for d_row, d_col in DIRECTIONS:
                if is_direction_linked(grid, row, col, d_row, d_col):
                    return token
    return None


def is_full(board: np.ndarray) -> bool:
    return bool(np.all(board[0] != EMPTY))


def evaluate_status(board: np.ndarray) -> GameStatus:
    if find_winner(board) is not None:
        return GameStatus.WIN
    if is_full(board):
        return GameStatus.DRAW
    return GameStatus.ONGOING


def render_board(board: np.ndarray) -> str:
    lines = []
    for row in board.tolist():
        lines.append("|" + "|".join(SYMBOLS[cell] for cell in row) + "|")
    lines.append("-" * (2 * COLS + 1))
    lines.append(" " + " ".join(str(c + 1) for c in range(COLS)))
    return "\n".join(lines)
