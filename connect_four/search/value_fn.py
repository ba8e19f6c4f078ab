"""Static evaluation used at the search frontier."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from connect_four.games.turn_based_game import TurnBasedGame

S = TypeVar("S")


class StateValueFn(Generic[S], ABC):
    """
    Heuristic score of a non-terminal position from ``perspective``'s side.
    """

    @abstractmethod
    def evaluate(self, game: TurnBasedGame[S], state: S, perspective: int) -> int:
        """
        Higher is better for ``perspective``; the game must be zero-sum, so
        swapping the perspective negates the score.
        """
        ...
