"""Single-ply heuristic that weighs defense double."""

from __future__ import annotations

from typing import Optional

from gomoku.core.board import Board, Cell, Position
from gomoku.ai.base import Strategy
from gomoku.ai.config import SCORE_IMMEDIATE_WIN, SCORE_MUST_BLOCK
from gomoku.ai.heuristics import threat_score


class DefensiveStrategy(Strategy):
    """Scores every empty cell one ply deep and plays the best."""

    def next_move(self, board: Board) -> Optional[Position]:
        empty = board.empty_positions()
        if not empty:
            return None

        probe = board.clone_board()
        best_pos = empty[0]
        best_score = float("-inf")
        for pos in empty:
            score = self.evaluate_move(probe, pos)
            if score > best_score:
                best_score = score
                best_pos = pos
        return best_pos

    @staticmethod
    def evaluate_move(probe: Board, pos: Position) -> int:
        """
        Priority of playing pos. `probe` is a scratch board; pos is
        restored to EMPTY before returning.

          - AI wins here: 1,000,000
          - opponent would win here (must block): 500,000
          - otherwise attack + 2 * threat
        """
        try:
            probe.force_place(pos, Cell.WHITE)
            if probe.check_win(pos):
                return SCORE_IMMEDIATE_WIN
            ai_score = threat_score(probe, pos, Cell.WHITE)

            probe.force_place(pos, Cell.BLACK)
            if probe.check_win(pos):
                return SCORE_MUST_BLOCK
            player_score = threat_score(probe, pos, Cell.BLACK)
        finally:
            probe.force_place(pos, Cell.EMPTY)

        return ai_score + player_score * 2
