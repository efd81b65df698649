"""AI strategies package."""

from gomoku.ai.base import Strategy
from gomoku.ai.defensive import DefensiveStrategy
from gomoku.ai.factory import select_strategy
from gomoku.ai.minimax import MinimaxStrategy
from gomoku.ai.random_strategy import RandomStrategy

__all__ = [
    "Strategy",
    "RandomStrategy",
    "DefensiveStrategy",
    "MinimaxStrategy",
    "select_strategy",
]
