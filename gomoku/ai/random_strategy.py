from __future__ import annotations

import random
from typing import Optional

from gomoku.core.board import Board, Position
from gomoku.ai.base import Strategy


class RandomStrategy(Strategy):
    """Uniformly random empty cell. No evaluation."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self.rng = rng or random.Random()

    def next_move(self, board: Board) -> Optional[Position]:
        empty = board.empty_positions()
        if not empty:
            return None
        return self.rng.choice(empty)
