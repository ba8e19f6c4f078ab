"""Machine player: opening book first, alpha-beta minimax otherwise."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from connect_four.games.connect4 import Connect4Game, Connect4State, GameSession
from connect_four.games.connect4.constants import MACHINE
from ..minimax_policy import MinimaxPolicy, SearchStats
from .heuristic_minimax import make_connect4_minimax_policy
from .opening_book import opening_move

if TYPE_CHECKING:
    from connect_four.config import SearchConfig

logger = logging.getLogger(__name__)


class Connect4MinimaxPlayer:
    """
    Chooses the machine's column for a live ``GameSession``.

    ``last_source`` tells where the previous move came from:
    ``"opening_book"``, ``"immediate_win"`` or ``"search"``.
    """

    def __init__(
        self,
        policy: Optional[MinimaxPolicy[Connect4State]] = None,
        game: Optional[Connect4Game] = None,
        *,
        use_opening_book: bool = True,
        machine: int = MACHINE,
    ) -> None:
        self.policy = policy or make_connect4_minimax_policy()
        self.game = game or Connect4Game()
        self.use_opening_book = use_opening_book
        self.machine = machine
        self.last_source: Optional[str] = None

    @classmethod
    def from_config(cls, config: "SearchConfig") -> "Connect4MinimaxPlayer":
        policy = make_connect4_minimax_policy(
            depth=config.depth,
            use_alpha_beta=config.use_alpha_beta,
        )
        return cls(policy=policy, use_opening_book=config.use_opening_book)

    @property
    def last_stats(self) -> SearchStats:
        return self.policy.last_stats

    def choose_column(self, session: GameSession) -> int:
        if session.is_over:
            raise ValueError("Cannot choose a column: the game is over")
        if session.current_turn != self.machine:
            raise ValueError("It is not the machine player's turn")

        if self.use_opening_book:
            column = opening_move(session.board, session.first_player, self.machine)
            if column is not None:
                self.last_source = "opening_book"
                self.policy.last_stats = SearchStats()
                logger.debug("Opening book move at %d discs: column %d", session.disc_count, column)
                return column

        column = self.policy.select_action(self.game, session.to_state())
        self.last_source = "immediate_win" if self.policy.last_stats.immediate_win else "search"
        return int(column)
