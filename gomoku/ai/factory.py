"""Difficulty -> strategy mapping."""

from __future__ import annotations

import random
from typing import Optional

from gomoku.ai.base import Strategy
from gomoku.ai.config import AI_LEVELS, DEFAULT_LEVEL
from gomoku.ai.defensive import DefensiveStrategy
from gomoku.ai.minimax import MinimaxStrategy
from gomoku.ai.random_strategy import RandomStrategy


def select_strategy(difficulty: int, rng: Optional[random.Random] = None) -> Strategy:
    """
    Build the strategy for a difficulty level.

    1 -> random, 2 -> defensive, 3 -> minimax depth 4,
    anything else -> minimax depth 6.
    """
    cfg = AI_LEVELS.get(difficulty, AI_LEVELS[DEFAULT_LEVEL])
    if cfg.strategy == "random":
        return RandomStrategy(rng=rng)
    if cfg.strategy == "defensive":
        return DefensiveStrategy()
    return MinimaxStrategy(cfg.max_depth, level_config=cfg)
