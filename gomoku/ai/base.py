from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from gomoku.core.board import Board, Position


class Strategy(ABC):
    """
    Move picker for the AI (WHITE).

    Implementations read the board and never mutate it; any simulation runs
    on `board.clone_board()`. `next_move` returns None only when the board
    has no empty cell left.
    """

    @abstractmethod
    def next_move(self, board: Board) -> Optional[Position]:
        ...
