"""Minimax with Alpha-Beta pruning and a per-move transposition table."""

import logging
from typing import Dict, List, Optional, Tuple

from gomoku.core.board import Board, Cell, Position
from gomoku.ai.base import Strategy
from gomoku.ai.config import (
    AILevelConfig,
    SEARCH_WIN,
    SEARCH_WIN_DEPTH_BONUS,
    minimax_level,
)
from gomoku.ai.heuristics import evaluate_board, evaluate_positions
from gomoku.ai.movegen import MoveGenerator

logger = logging.getLogger(__name__)


class MinimaxStrategy(Strategy):
    """
    Bounded-depth minimax for WHITE with Alpha-Beta pruning.

    Immediate wins and forced blocks are found by scanning every empty cell
    before any search; the search itself only visits the pruned candidate set.
    The transposition table maps `Board.content_hash()` to a score and lives
    for one `next_move` call.
    """

    def __init__(self, depth: int, level_config: Optional[AILevelConfig] = None) -> None:
        if depth < 1:
            raise ValueError("depth must be >= 1")
        self.depth = depth
        self.level_config = level_config or minimax_level(depth)
        self.transposition_table: Dict[int, float] = {}
        self.nodes_explored = 0

    def next_move(self, board: Board) -> Optional[Position]:
        self.transposition_table.clear()
        self.nodes_explored = 0

        all_empty = board.empty_positions()
        if not all_empty:
            return None

        work = board.clone_board()

        winning = self._find_immediate_win(work, all_empty, Cell.WHITE)
        if winning is not None:
            logger.debug("Immediate win at %s", winning)
            return winning

        blocking = self._find_immediate_win(work, all_empty, Cell.BLACK)
        if blocking is not None:
            logger.info("Opponent threatens to win at %s, blocking", blocking)
            return blocking

        candidates = MoveGenerator(board, self.level_config).get_candidates()
        if not candidates:
            return all_empty[0]

        best_move, best_score = self._search_root(work, candidates)
        logger.debug(
            "Depth %d search chose %s (score %d, %d nodes, %d cached)",
            self.depth,
            best_move,
            best_score,
            self.nodes_explored,
            len(self.transposition_table),
        )
        return best_move

    @staticmethod
    def _find_immediate_win(work: Board, positions: List[Position], color: Cell) -> Optional[Position]:
        for pos in positions:
            work.force_place(pos, color)
            won = work.check_win(pos)
            work.force_place(pos, Cell.EMPTY)
            if won:
                return pos
        return None

    def _search_root(self, work: Board, candidates: List[Position]) -> Tuple[Position, float]:
        """Full-window search under every candidate; first best wins ties."""
        best_move = candidates[0]
        best_score = float("-inf")
        for move in candidates:
            work.force_place(move, Cell.WHITE)
            score = self._alpha_beta(
                work, self.depth - 1, float("-inf"), float("inf"), False, move
            )
            work.force_place(move, Cell.EMPTY)
            if score > best_score:
                best_score = score
                best_move = move
        return best_move, best_score

    def _alpha_beta(
        self,
        board: Board,
        depth: int,
        alpha: float,
        beta: float,
        is_maximizing: bool,
        last_move: Position,
    ) -> float:
        """
        Alpha-beta recursion over `board`, which is mutated in place and
        restored before returning.

        Args:
            depth: Remaining plies.
            is_maximizing: True when WHITE is to move.
            last_move: The move that produced this node.

        Returns:
            Score from WHITE's perspective.
        """
        self.nodes_explored += 1

        if board.check_win(last_move):
            win = SEARCH_WIN + depth * SEARCH_WIN_DEPTH_BONUS
            return -win if is_maximizing else win

        if depth == 0 or board.is_full():
            return evaluate_board(board, self.level_config.defense_weight)

        key = board.content_hash()
        cached = self.transposition_table.get(key)
        if cached is not None:
            return cached

        moves = MoveGenerator(board, self.level_config).get_candidates()
        if not moves:
            return 0

        mover = Cell.WHITE if is_maximizing else Cell.BLACK
        ordered = self._order_moves(board, moves, mover, descending=is_maximizing)

        if is_maximizing:
            result = float("-inf")
            for move in ordered:
                board.force_place(move, mover)
                eval_score = self._alpha_beta(board, depth - 1, alpha, beta, False, move)
                board.force_place(move, Cell.EMPTY)
                result = max(result, eval_score)
                alpha = max(alpha, eval_score)
                if beta <= alpha:
                    break
        else:
            result = float("inf")
            for move in ordered:
                board.force_place(move, mover)
                eval_score = self._alpha_beta(board, depth - 1, alpha, beta, True, move)
                board.force_place(move, Cell.EMPTY)
                result = min(result, eval_score)
                beta = min(beta, eval_score)
                if beta <= alpha:
                    break

        self.transposition_table[key] = result
        return result

    @staticmethod
    def _order_moves(board: Board, moves: List[Position], mover: Cell, descending: bool) -> List[Position]:
        """Sort by the mover's static score so strong replies are tried first."""
        scored = list(zip(moves, evaluate_positions(board, moves, mover)))
        scored.sort(key=lambda item: item[1], reverse=descending)
        return [move for move, _ in scored]
