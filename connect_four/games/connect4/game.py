"""Connect4 game rules (immutable state, for search algorithms)."""

from __future__ import annotations

from typing import Optional, Sequence

import numpy as np

from .board import (
    apply_move,
    count_discs,
    empty_board,
    evaluate_status,
    find_winner,
    is_gravity_consistent,
    landing_row,
    legal_columns,
)
from .constants import COLS, COLUMN_ORDER, HUMAN, MACHINE, ROWS, opponent
from .state import Connect4State, GameStatus
from connect_four.games.turn_based_game import TurnBasedGame, Action


class Connect4Game(TurnBasedGame[Connect4State]):
    """
    Pure Connect4 rules: state transitions only, no session bookkeeping.

    Every transition copies the board, so a state can be shared freely
    between search branches.
    """

    def __init__(self, column_order: Sequence[int] = COLUMN_ORDER) -> None:
        if sorted(column_order) != list(range(COLS)):
            raise ValueError(f"column_order must be a permutation of 0..{COLS - 1}")
        self.rows = ROWS
        self.cols = COLS
        self.column_order = tuple(column_order)

    def initial_state(self, first_player: int = HUMAN) -> Connect4State:
        return Connect4State(
            board=empty_board(),
            current_player=first_player,
            disc_count=0,
        )

    def state_from_board(self, board: np.ndarray, current_player: int) -> Connect4State:
        """Wrap an arbitrary legal board, recomputing disc count and status."""
        if board.shape != (ROWS, COLS):
            raise ValueError(f"Board must have shape {(ROWS, COLS)}, got {board.shape}")
        if current_player not in (HUMAN, MACHINE):
            raise ValueError(f"Unknown player token: {current_player}")
        if not is_gravity_consistent(board):
            raise ValueError("Board has a floating disc")

        status = evaluate_status(board)
        return Connect4State(
            board=board.astype(np.int8, copy=True),
            current_player=current_player,
            disc_count=count_discs(board),
            status=status,
            winner=find_winner(board) if status is GameStatus.WIN else None,
        )

    def legal_actions(self, state: Connect4State) -> Sequence[Action]:
        return legal_columns(state.board, self.column_order)

    def apply_action(self, state: Connect4State, action: Action) -> Connect4State:
        if state.done:
            raise ValueError("Cannot apply action in terminal state")

        mover = state.current_player
        board = apply_move(state.board, action, mover)
        row = landing_row(state.board, action)
        assert row is not None

        status = evaluate_status(board)
        # The position was ongoing before this move, so any line is the mover's.
        winner: Optional[int] = mover if status is GameStatus.WIN else None

        return Connect4State(
            board=board,
            current_player=opponent(mover),
            disc_count=state.disc_count + 1,
            status=status,
            winner=winner,
            last_move=(row, action),
        )

    def current_player(self, state: Connect4State) -> int:
        return state.current_player

    def is_terminal(self, state: Connect4State) -> bool:
        return state.done

    def winner(self, state: Connect4State) -> Optional[int]:
        return state.winner

    def ply_count(self, state: Connect4State) -> int:
        return state.disc_count
