"""
Hard-coded opening preferences for the machine player.

These are exact-position patterns around the centre column, checked before
any search. They are not derived from the evaluator.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from connect_four.games.connect4.board import count_discs
from connect_four.games.connect4.constants import CENTER_COL, EMPTY, MACHINE, ROWS, opponent

logger = logging.getLogger(__name__)

BOTTOM = ROWS - 1
TOP = 0

# Centre stack checked for the six-disc line, bottom-up.
CENTER_STACK_HEIGHT = 5


@dataclass(frozen=True)
class OpeningRule:
    """Play ``column`` when any of ``cells`` (row, col) is occupied."""

    name: str
    cells: Tuple[Tuple[int, int], ...]
    column: int

    def matches(self, board: np.ndarray) -> bool:
        return any(board[row, col] != EMPTY for row, col in self.cells)


# Six discs, machine moved first, centre holds M-H-M-H-M from the bottom:
# the opponent's sixth disc decides the reply. First match wins.
SPECIAL_CASE_RULES: Tuple[OpeningRule, ...] = (
    OpeningRule("second-column", ((BOTTOM, 1),), 1),
    OpeningRule("centre-capped", ((TOP, CENTER_COL),), 4),
    OpeningRule("outer-or-right-of-centre", ((BOTTOM, 0), (BOTTOM, 4), (BOTTOM, 6)), 4),
    OpeningRule("third-or-sixth-column", ((BOTTOM, 2), (BOTTOM, 5)), 5),
)


def special_case_move(board: np.ndarray) -> Optional[int]:
    for rule in SPECIAL_CASE_RULES:
        if rule.matches(board):
            logger.debug("Opening rule %r -> column %d", rule.name, rule.column)
            return rule.column
    return None


def has_alternating_center_stack(board: np.ndarray, bottom_player: int = MACHINE) -> bool:
    """True if the centre column holds ``CENTER_STACK_HEIGHT`` alternating discs."""
    expected = bottom_player
    for row in range(BOTTOM, BOTTOM - CENTER_STACK_HEIGHT, -1):
        if board[row, CENTER_COL] != expected:
            return False
        expected = opponent(expected)
    return True


def opening_move(board: np.ndarray, first_player: int, machine: int = MACHINE) -> Optional[int]:
    """
    Book move for ``machine``, or None when the position needs a search.

    * fewer than 4 discs (machine started) or 3 (opponent started): centre;
    * exactly 4 discs stacked in the centre: centre again;
    * the six-disc centre-stack line: ``SPECIAL_CASE_RULES``.
    """
    discs = count_discs(board)
    machine_first = first_player == machine

    if discs < (4 if machine_first else 3):
        return CENTER_COL

    if discs == 4 and board[ROWS - 4, CENTER_COL] != EMPTY:
        return CENTER_COL

    if (
        discs == 6
        and machine_first
        and board[ROWS - 5, CENTER_COL] != EMPTY
        and has_alternating_center_stack(board, machine)
    ):
        return special_case_move(board)

    return None
