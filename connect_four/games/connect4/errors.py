"""Exceptions raised by the Connect4 board model and game session."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from .constants import HUMAN, MACHINE

if TYPE_CHECKING:
    from .state import GameStatus


class InvalidColumnError(ValueError):
    """Column index out of range, or the column is already full."""

    def __init__(self, column: int, message: str) -> None:
        super().__init__(message)
        self.column = column


class GameOver(Exception):
    """
    Raised by ``GameSession.drop_disc`` after the move that ends the game.

    Not a failure: it hands control back to the caller together with the
    final outcome so the turn loop can stop.
    """

    def __init__(self, status: "GameStatus", winner: Optional[int]) -> None:
        self.status = status
        self.winner = winner
        super().__init__(self._describe(winner))

    @staticmethod
    def _describe(winner: Optional[int]) -> str:
        if winner == HUMAN:
            return "Game Over! The winner is Human Player."
        if winner == MACHINE:
            return "Game Over! The winner is AI."
        return "Game Over! It is a tie."
