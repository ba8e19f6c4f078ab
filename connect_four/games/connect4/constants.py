"""Fixed Connect4 geometry, disc tokens and score bounds."""

from __future__ import annotations

# --- Board dimensions ---
# Row 0 is the TOP of the board, row ROWS - 1 the bottom.
ROWS = 6
COLS = 7
CENTER_COL = COLS // 2

# --- Disc tokens ---
EMPTY = 0
HUMAN = 1
MACHINE = -1

SYMBOLS = {EMPTY: " ", HUMAN: "X", MACHINE: "O"}

# --- Search ---
MAX_DEPTH = 9

# Centre-out: better pruning, and the root tie-break favours earlier columns.
COLUMN_ORDER = (3, 2, 4, 0, 6, 1, 5)

# All eight neighbour directions as (d_row, d_col).
DIRECTIONS = (
    (1, 1),
    (1, 0),
    (1, -1),
    (0, 1),
    (0, -1),
    (-1, 1),
    (-1, 0),
    (-1, -1),
)

# --- Scoring ---
# Win/loss = MAX_SCORE - discs / MIN_SCORE + discs. Far outside the
# evaluator range, so faster wins still dominate any positional score.
MAX_SCORE = 2**31 - 1
MIN_SCORE = -(2**31)

# Potential of a window already holding four of the same disc.
WIN_POTENTIAL = MAX_SCORE


def opponent(player: int) -> int:
    return -player
