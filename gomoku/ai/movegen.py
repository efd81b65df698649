from __future__ import annotations

from dataclasses import dataclass
from typing import List

import numpy as np

from gomoku.core.board import Board, Cell, Position
from gomoku.ai.config import (
    AILevelConfig,
    OPENING_EMPTY_TENTHS,
    OPENING_RADIUS,
    SCORE_IMMEDIATE_WIN,
    SEARCH_DISTANCE,
)
from gomoku.ai.heuristics import evaluate_position


@dataclass(frozen=True)
class PrioritizedMove:
    """Move with priority score (higher = better)."""
    position: Position
    priority: int


class MoveGenerator:
    """
    Generates the candidate moves a search considers (0-based Position).

    Narrowing, in order:
      - nearly empty board: only the 5x5 block around the center
      - otherwise: empty cells within Chebyshev distance 2 of a stone
      - nothing found: every empty cell
    With `level_config.max_candidates` set, candidates are ranked by a
    one-ply lookahead and truncated.
    """

    def __init__(self, board: Board, level_config: AILevelConfig) -> None:
        self.board = board
        self.level_config = level_config

    def get_candidates(self) -> List[Position]:
        size = self.board.size
        empty_count = size * size - self.board.move_count

        if empty_count > size * size * OPENING_EMPTY_TENTHS // 10:
            return self._opening_moves()

        candidates = self.get_adjacent_positions(distance=SEARCH_DISTANCE)
        if not candidates:
            return self.board.empty_positions()

        if self.level_config.max_candidates is not None:
            return self.get_ranked_moves(candidates, self.level_config.max_candidates)
        return candidates

    def _opening_moves(self) -> List[Position]:
        """Empty cells of the block around the center, row-major."""
        size = self.board.size
        center = size // 2
        lo = max(center - OPENING_RADIUS, 0)
        hi = min(center + OPENING_RADIUS, size - 1)
        block = self.board.cells[lo:hi + 1, lo:hi + 1]
        rows, cols = np.nonzero(block == Cell.EMPTY.value)
        return [Position(r + lo, c + lo) for r, c in zip(rows.tolist(), cols.tolist())]

    def get_adjacent_positions(self, distance: int = 1) -> List[Position]:
        """
        Get all empty positions near existing stones.

        Uses the Chebyshev neighborhood: any (dr,dc) with
        max(|dr|,|dc|) <= distance, excluding (0,0).

        Returns:
            List of empty positions near stones (unique, row-major).
        """
        if distance < 1:
            raise ValueError("distance must be >= 1")

        size = self.board.size
        occupied = self.board.cells != Cell.EMPTY.value
        near = np.zeros_like(occupied)

        # dilate the stone mask by shifting it over every offset
        for dr in range(-distance, distance + 1):
            for dc in range(-distance, distance + 1):
                if abs(dr) >= size or abs(dc) >= size:
                    continue
                near[max(dr, 0):size + min(dr, 0), max(dc, 0):size + min(dc, 0)] |= occupied[
                    max(-dr, 0):size + min(-dr, 0), max(-dc, 0):size + min(-dc, 0)
                ]

        rows, cols = np.nonzero(near & ~occupied)
        return [Position(r, c) for r, c in zip(rows.tolist(), cols.tolist())]

    def get_ranked_moves(self, candidates: List[Position], max_moves: int) -> List[Position]:
        """Order candidates by lookahead priority (best first) and keep `max_moves`."""
        probe = self.board.clone_board()
        prioritized = [
            PrioritizedMove(pos, self._evaluate_move_priority(probe, pos))
            for pos in candidates
        ]
        prioritized.sort(key=lambda m: m.priority, reverse=True)
        return [m.position for m in prioritized[:max_moves]]

    @staticmethod
    def _evaluate_move_priority(probe: Board, position: Position) -> int:
        """
        Best of our attack and the opponent's at the same cell.
        An immediate win for either side tops everything else.
        """
        scores = []
        for color in (Cell.WHITE, Cell.BLACK):
            probe.force_place(position, color)
            if probe.check_win(position):
                scores.append(SCORE_IMMEDIATE_WIN)
            else:
                scores.append(evaluate_position(probe, position, color))
        probe.force_place(position, Cell.EMPTY)
        return max(scores)
