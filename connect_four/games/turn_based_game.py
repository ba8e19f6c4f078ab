from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Sequence, TypeVar, Optional

S = TypeVar("S")  # state type
Action = int  # actions are plain integer indices (columns)


class TurnBasedGame(ABC, Generic[S]):
    """
    Rules of a deterministic two-player game with perfect information.
    No I/O, no environment: only state transitions.
    """

    @abstractmethod
    def legal_actions(self, state: S) -> Sequence[Action]:
        """All legal actions in ``state``, in preferred search order."""

    @abstractmethod
    def apply_action(self, state: S, action: Action) -> S:
        """Return the new state after the move; ``state`` is left untouched."""

    @abstractmethod
    def current_player(self, state: S) -> int:
        """Token of the player to move."""

    @abstractmethod
    def is_terminal(self, state: S) -> bool:
        """Is the game over (win or draw)?"""

    @abstractmethod
    def winner(self, state: S) -> Optional[int]:
        """
        Who won:

        * a player token: that player completed a line
        * None: a draw, or the game is not over yet
        """

    @abstractmethod
    def ply_count(self, state: S) -> int:
        """Number of moves applied so far."""
