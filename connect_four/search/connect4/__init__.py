"""Connect4-specific search: evaluator, opening book and machine player."""

from .heuristic_minimax import make_connect4_minimax_policy
from .machine_player import Connect4MinimaxPlayer
from .opening_book import SPECIAL_CASE_RULES, OpeningRule, opening_move, special_case_move
from .positional_value_fn import Connect4PositionalValueFn, direction_potential, evaluate_board

__all__ = [
    "Connect4MinimaxPlayer",
    "Connect4PositionalValueFn",
    "OpeningRule",
    "SPECIAL_CASE_RULES",
    "direction_potential",
    "evaluate_board",
    "make_connect4_minimax_policy",
    "opening_move",
    "special_case_move",
]
