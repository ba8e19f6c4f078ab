from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple

import numpy as np


class GameStatus(str, Enum):
    ONGOING = "ongoing"
    WIN = "win"
    DRAW = "draw"


@dataclass
class Connect4State:
    """
    Snapshot of one position, as seen by the search.

    ``board`` is never modified after construction; transitions build a new
    state around a copied board so sibling branches never share cells.
    """

    board: np.ndarray
    current_player: int
    disc_count: int
    status: GameStatus = GameStatus.ONGOING
    winner: Optional[int] = None
    last_move: Optional[Tuple[int, int]] = None

    @property
    def done(self) -> bool:
        return self.status is not GameStatus.ONGOING
