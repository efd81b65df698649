# game.py
from __future__ import annotations

import logging
import random
from typing import Optional

from gomoku.core.board import Board, Cell, Position
from gomoku.core.move import Move, MoveResult
from gomoku.ai.base import Strategy
from gomoku.ai.factory import select_strategy

logger = logging.getLogger(__name__)

DEFAULT_BOARD_SIZE = 15
MIN_BOARD_SIZE = 9
MAX_BOARD_SIZE = 19
MIN_DIFFICULTY = 1
MAX_DIFFICULTY = 4
DEFAULT_DIFFICULTY = 1

HUMAN = Cell.BLACK
AI = Cell.WHITE


class Game:
    """
    Player vs computer session.

    Owns:
      - Board
      - the AI Strategy picked by difficulty
      - outcome fields (winner, is_draw)

    Note:
      - The human always plays BLACK and moves first; the AI plays WHITE.
      - ai_turn() blocks for the whole search. Run it off the input/render
        thread (see gomoku.app.ai_worker) and do not touch the board meanwhile.
    """

    def __init__(
        self,
        size: int = DEFAULT_BOARD_SIZE,
        difficulty: int = DEFAULT_DIFFICULTY,
        *,
        rng: Optional[random.Random] = None,
    ) -> None:
        """
        Initialize game.

        Args:
            size: Side length, MIN_BOARD_SIZE..MAX_BOARD_SIZE (default: 15)
            difficulty: AI level 1..4; anything else falls back to 1
            rng: Random source for the random tier

        Raises:
            ValueError: if size is outside the supported range.
        """
        if not isinstance(size, int) or not MIN_BOARD_SIZE <= size <= MAX_BOARD_SIZE:
            raise ValueError(
                f"board size must be between {MIN_BOARD_SIZE} and {MAX_BOARD_SIZE}, got {size!r}"
            )
        if difficulty not in range(MIN_DIFFICULTY, MAX_DIFFICULTY + 1):
            logger.warning(
                "Invalid difficulty %r, using default %d", difficulty, DEFAULT_DIFFICULTY
            )
            difficulty = DEFAULT_DIFFICULTY

        self.size = size
        self.difficulty = difficulty
        self._rng = rng
        self.board = Board(size)
        self.strategy: Strategy = select_strategy(difficulty, rng=rng)
        self.winner: Optional[Cell] = None
        self.is_draw = False
        self.last_move: Optional[Move] = None

    # -------------------------
    # State helpers
    # -------------------------

    @property
    def is_over(self) -> bool:
        return self.winner is not None or self.is_draw

    def thinking_message(self) -> Optional[str]:
        """Indicator shown while the AI searches (only the search tiers)."""
        if self.difficulty >= 4:
            return "Hell AI is thinking hard..."
        if self.difficulty == 3:
            return "AI is thinking..."
        return None

    # -------------------------
    # Moves
    # -------------------------

    def play_human(self, position: Position) -> MoveResult:
        """
        Place the human's stone.

        Returns:
            MoveResult (success, is_winning_move, is_draw, error_message)
        """
        if self.is_over:
            return MoveResult.fail("Game is over")
        if not self.board.place(position, HUMAN):
            return MoveResult.fail(f"Cannot place at {position}")
        return self._finish_move(Move(position, HUMAN))

    def ai_turn(self) -> Optional[Position]:
        """
        Let the AI move on the live board.

        Returns:
            The position played, or None if the game is over or no cell is left.
        """
        if self.is_over:
            return None
        position = self.strategy.next_move(self.board)
        if position is None:
            self.is_draw = True
            return None
        if not self.board.place(position, AI):
            raise RuntimeError(f"AI chose an occupied cell {position}")
        self._finish_move(Move(position, AI))
        return position

    def _finish_move(self, move: Move) -> MoveResult:
        self.last_move = move
        if self.board.check_win(move.position):
            self.winner = move.cell
            logger.info("%s wins", move)
            return MoveResult.ok(is_winning_move=True)
        if self.board.is_full():
            self.is_draw = True
            logger.info("Draw after %d moves", self.board.move_count)
            return MoveResult.ok(is_draw=True)
        return MoveResult.ok()

    # -------------------------
    # Reset
    # -------------------------

    def restart(self) -> None:
        """Reset to a fresh board and strategy with the same settings."""
        self.board = Board(self.size)
        self.strategy = select_strategy(self.difficulty, rng=self._rng)
        self.winner = None
        self.is_draw = False
        self.last_move = None
