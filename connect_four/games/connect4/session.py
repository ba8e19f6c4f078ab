"""Live game held by the turn loop: one board, who started and who moves next."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

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
    render_board,
)
from .constants import COLS, HUMAN, MACHINE, ROWS, opponent
from .errors import GameOver
from .state import Connect4State, GameStatus

logger = logging.getLogger(__name__)


class GameSession:
    """
    Mutable wrapper around the single live board.

    Moves are applied in place; ``current_turn`` flips after every accepted
    disc. The move that ends the game raises ``GameOver`` so the caller's
    loop can stop after one final display.
    """

    def __init__(self, first_player: int = HUMAN) -> None:
        if first_player not in (HUMAN, MACHINE):
            raise ValueError(f"Unknown player token: {first_player}")
        self.board = empty_board()
        self.first_player = first_player
        self.current_turn = first_player
        self.status = GameStatus.ONGOING
        self.winner: Optional[int] = None
        self.history: List[Dict[str, Any]] = []

    @classmethod
    def from_board(
        cls,
        board: np.ndarray,
        first_player: int,
        current_turn: Optional[int] = None,
    ) -> "GameSession":
        """
        Resume from an existing position.

        ``current_turn`` defaults to whoever the disc count says is next.
        """
        if board.shape != (ROWS, COLS):
            raise ValueError(f"Board must have shape {(ROWS, COLS)}, got {board.shape}")
        if not is_gravity_consistent(board):
            raise ValueError("Board has a floating disc")

        session = cls(first_player=first_player)
        session.board = board.astype(np.int8, copy=True)
        if current_turn is None:
            even = count_discs(board) % 2 == 0
            current_turn = first_player if even else opponent(first_player)
        session.current_turn = current_turn
        session.status = evaluate_status(session.board)
        if session.status is GameStatus.WIN:
            session.winner = find_winner(session.board)
        return session

    @property
    def disc_count(self) -> int:
        return count_discs(self.board)

    @property
    def is_over(self) -> bool:
        return self.status is not GameStatus.ONGOING

    def legal_columns(self) -> List[int]:
        return sorted(legal_columns(self.board))

    def drop_disc(self, column: int) -> int:
        """
        Drop the current player's disc into ``column`` and return its row.

        Raises ``InvalidColumnError`` (turn not advanced, board untouched) or
        ``GameOver`` once the move decides the game.
        """
        if self.is_over:
            raise GameOver(self.status, self.winner)

        row = landing_row(self.board, column) if 0 <= column < COLS else None
        apply_move(self.board, column, self.current_turn, in_place=True)
        self.history.append({"player": self.current_turn, "column": column, "row": row})

        self.status = evaluate_status(self.board)
        if self.status is GameStatus.WIN:
            self.winner = self.current_turn
            logger.info("Player %d wins with column %d", self.current_turn, column)
            raise GameOver(self.status, self.winner)
        if self.status is GameStatus.DRAW:
            logger.info("Board full, game drawn")
            raise GameOver(self.status, None)

        self.current_turn = opponent(self.current_turn)
        return row

    def to_state(self) -> Connect4State:
        """Copy of the live position for the search engine."""
        return Connect4State(
            board=self.board.copy(),
            current_player=self.current_turn,
            disc_count=self.disc_count,
            status=self.status,
            winner=self.winner,
        )

    def reset(self, first_player: Optional[int] = None) -> None:
        """Start a new game on an empty board."""
        if first_player is not None:
            self.first_player = first_player
        self.board = empty_board()
        self.current_turn = self.first_player
        self.status = GameStatus.ONGOING
        self.winner = None
        self.history.clear()

    def render(self) -> str:
        return render_board(self.board)

