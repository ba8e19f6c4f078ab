"""Search algorithms (minimax with alpha-beta) and value functions."""

from .action_policy import ActionPolicy
from .value_fn import StateValueFn
from .minimax_policy import MinimaxConfig, MinimaxPolicy, SearchStats

__all__ = [
    "ActionPolicy",
    "StateValueFn",
    "MinimaxPolicy",
    "MinimaxConfig",
    "SearchStats",
]
