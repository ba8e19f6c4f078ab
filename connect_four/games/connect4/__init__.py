"""Connect4 board model, rules and live game session."""

from .board import (
    apply_move,
    board_from_rows,
    count_discs,
    empty_board,
    evaluate_status,
    find_winner,
    is_direction_linked,
    legal_columns,
    render_board,
)
from .constants import COLS, COLUMN_ORDER, EMPTY, HUMAN, MACHINE, ROWS
from .errors import GameOver, InvalidColumnError
from .game import Connect4Game
from .session import GameSession
from .state import Connect4State, GameStatus

__all__ = [
    "COLS",
    "COLUMN_ORDER",
    "EMPTY",
    "HUMAN",
    "MACHINE",
    "ROWS",
    "Connect4Game",
    "Connect4State",
    "GameOver",
    "GameSession",
    "GameStatus",
    "InvalidColumnError",
    "apply_move",
    "board_from_rows",
    "count_discs",
    "empty_board",
    "evaluate_status",
    "find_winner",
    "is_direction_linked",
    "legal_columns",
    "render_board",
]
