from __future__ import annotations

import logging
import queue
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from gomoku.core.board import Position
from gomoku.core.game import Game

logger = logging.getLogger(__name__)


# =========================
# Events (worker -> game loop)
# =========================

class EventType(Enum):
    AI_MOVE = "ai_move"    # AI placed a stone (payload: Position)
    AI_PASS = "ai_pass"    # no move was made (game over / draw)
    AI_ERROR = "ai_error"  # search raised (payload: the exception)


@dataclass(frozen=True)
class AiEvent:
    type: EventType
    payload: object = None

    @property
    def position(self) -> Optional[Position]:
        return self.payload if isinstance(self.payload, Position) else None


# =========================
# Worker
# =========================

class AiTurnWorker:
    """
    Runs Game.ai_turn() on a background thread so the game loop can keep
    polling input and drawing a "thinking" indicator.

    The game loop must not mutate game.board while `thinking` is True.
    Results come back through poll() in the order turns were started.
    """

    def __init__(self, game: Game) -> None:
        self.game = game
        self._events: "queue.Queue[AiEvent]" = queue.Queue()
        self._thread: Optional[threading.Thread] = None
        self._thinking = threading.Event()
        self._start_lock = threading.Lock()

    @property
    def thinking(self) -> bool:
        return self._thinking.is_set()

    def start(self) -> bool:
        """Start an AI turn. Returns False if one is already running."""
        with self._start_lock:
            if self._thinking.is_set():
                return False
            self._thinking.set()
            self._thread = threading.Thread(target=self._run, name="gomoku-ai", daemon=True)
            self._thread.start()
        return True

    def _run(self) -> None:
        try:
            pos = self.game.ai_turn()
        except Exception as exc:  # reported to the game loop
            logger.exception("AI turn failed")
            event = AiEvent(EventType.AI_ERROR, exc)
        else:
            event = AiEvent(EventType.AI_MOVE, pos) if pos is not None else AiEvent(EventType.AI_PASS)
        # cleared first: whoever receives the event may start the next turn
        self._thinking.clear()
        self._events.put(event)

    def poll(self, timeout: Optional[float] = None) -> Optional[AiEvent]:
        """Next finished turn, or None if nothing arrived within timeout."""
        try:
            if timeout is None:
                return self._events.get_nowait()
            return self._events.get(timeout=timeout)
        except queue.Empty:
            return None

    def join(self, timeout: Optional[float] = None) -> None:
        if self._thread is not None:
            self._thread.join(timeout)
