"""Minimax search policy with alpha-beta pruning."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass, field
from typing import Dict, Generic, List, Optional, Sequence, TypeVar

from connect_four.games.turn_based_game import Action, TurnBasedGame
from .action_policy import ActionPolicy
from .value_fn import StateValueFn

StateT = TypeVar("StateT")

logger = logging.getLogger(__name__)


@dataclass
class MinimaxConfig:
    depth: int = 9
    use_alpha_beta: bool = True
    # Terminal scores: max_score - plies for a root-player win,
    # min_score + plies for a loss, so quicker wins rank higher.
    max_score: int = 2**31 - 1
    min_score: int = -(2**31)


@dataclass
class SearchStats:
    nodes: int = 0
    evaluations: int = 0
    cutoffs: int = 0
    elapsed: float = 0.0
    immediate_win: bool = False
    action_scores: Dict[Action, float] = field(default_factory=dict)


class MinimaxPolicy(ActionPolicy[StateT], Generic[StateT]):
    """
    Depth-bounded minimax over ``TurnBasedGame`` + ``StateValueFn``.

    The player to move at the root is the maximizing side; its opponent
    minimizes. ``select_action`` scores every root move (no pruning at the
    root, so ties resolve to the earliest legal action) and ``_score_node``
    returns plain scores below it.
    """

    def __init__(
        self,
        value_fn: StateValueFn[StateT],
        config: Optional[MinimaxConfig] = None,
    ) -> None:
        self.value_fn = value_fn
        self.config = config or MinimaxConfig()
        self.last_stats = SearchStats()

    def select_action(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        legal_actions: Optional[Sequence[Action]] = None,
    ) -> Action:
        if self.config.depth <= 0:
            raise ValueError("Minimax depth must be >= 1")

        if legal_actions is None:
            legal_actions = list(game.legal_actions(state))

        if not legal_actions:
            raise ValueError("No legal actions available for minimax")

        root = game.current_player(state)
        stats = SearchStats()
        self.last_stats = stats
        started = time.perf_counter()

        children = [(action, game.apply_action(state, action)) for action in legal_actions]

        for action, child in children:
            if game.winner(child) == root:
                stats.immediate_win = True
                stats.elapsed = time.perf_counter() - started
                logger.debug("Immediate win in column %d", action)
                return action

        alpha = -math.inf
        beta = math.inf
        best_action = legal_actions[0]
        best_value = -math.inf

        for action, child in children:
            value = self._child_value(game, child, self.config.depth - 1, root, alpha, beta, stats)
            stats.action_scores[action] = value
            # Strictly greater: the earliest action keeps ties.
            if value > best_value:
                best_value = value
                best_action = action
                alpha = value

        stats.elapsed = time.perf_counter() - started
        logger.debug(
            "Searched %d nodes (%d cutoffs) in %.3fs: action %d scores %s",
            stats.nodes,
            stats.cutoffs,
            stats.elapsed,
            best_action,
            best_value,
        )
        return best_action

    def _child_value(
        self,
        game: TurnBasedGame[StateT],
        child: StateT,
        depth: int,
        root: int,
        alpha: float,
        beta: float,
        stats: SearchStats,
    ) -> float:
        """Score of the position a move produced, ``depth`` plies still to search."""
        if game.is_terminal(child):
            winner = game.winner(child)
            if winner is None:
                return 0
            return self._terminal_score(game, child, winner, root)

        if depth == 0:
            stats.evaluations += 1
            return self.value_fn.evaluate(game, child, root)

        return self._score_node(game, child, depth, root, alpha, beta, stats)

    def _score_node(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        depth: int,
        root: int,
        alpha: float,
        beta: float,
        stats: SearchStats,
    ) -> float:
        stats.nodes += 1
        maximizing = game.current_player(state) == root
        best = alpha if maximizing else beta
        scores: List[float] = []

        for action in game.legal_actions(state):
            child = game.apply_action(state, action)

            winner = game.winner(child)
            if winner is not None:
                # Winning on the spot is the mover's best outcome here.
                return self._terminal_score(game, child, winner, root)

            value = self._child_value(game, child, depth - 1, root, alpha, beta, stats)

            if maximizing:
                if value > best:
                    best = value
                    alpha = best
            elif value < best:
                best = value
                beta = best

            if self.config.use_alpha_beta and alpha >= beta:
                stats.cutoffs += 1
                return best

            scores.append(value)

        return max(scores) if maximizing else min(scores)

    def _terminal_score(
        self,
        game: TurnBasedGame[StateT],
        state: StateT,
        winner: int,
        root: int,
    ) -> int:
        plies = game.ply_count(state)
        if winner == root:
            return self.config.max_score - plies
        return self.config.min_score + plies
