"""Positional-heuristic minimax policy for Connect4."""

from __future__ import annotations

from typing import Optional

from connect_four.games.connect4 import Connect4State
from connect_four.games.connect4.constants import MAX_DEPTH, MAX_SCORE, MIN_SCORE
from ..minimax_policy import MinimaxConfig, MinimaxPolicy
from .positional_value_fn import Connect4PositionalValueFn


def make_connect4_minimax_policy(
    *,
    depth: int = MAX_DEPTH,
    use_alpha_beta: bool = True,
    value_fn: Optional[Connect4PositionalValueFn] = None,
) -> MinimaxPolicy[Connect4State]:
    config = MinimaxConfig(
        depth=depth,
        use_alpha_beta=use_alpha_beta,
        max_score=MAX_SCORE,
        min_score=MIN_SCORE,
    )
    return MinimaxPolicy[Connect4State](
        value_fn=value_fn or Connect4PositionalValueFn(),
        config=config,
    )
