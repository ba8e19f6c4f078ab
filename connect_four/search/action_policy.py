from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Generic, Optional, Sequence, TypeVar

from connect_four.games.turn_based_game import Action, TurnBasedGame

S = TypeVar("S")


class ActionPolicy(ABC, Generic[S]):
    """
    Chooses a move from the rules and a position; nothing else.

    Policies never mutate ``state``: they explore copies produced by
    ``game.apply_action``.
    """

    @abstractmethod
    def select_action(
        self,
        game: TurnBasedGame[S],
        state: S,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        """
        Pick the move to play in ``state``.

        Args:
            game: rules / transitions implementation.
            state: position with the policy's player to move.
            legal_actions: optional pre-ordered legal moves (defaults to
                ``game.legal_actions``).
        """
        raise NotImplementedError
