from dataclasses import dataclass
from typing import Optional


# Pattern weights for evaluation (per direction through a stone)
SCORE_FIVE = 100_000
SCORE_LIVE_FOUR = 10_000
SCORE_DEAD_FOUR = 1_000
SCORE_LIVE_THREE = 800
SCORE_DEAD_THREE = 100
SCORE_LIVE_TWO = 80
SCORE_DEAD_TWO = 10
SCORE_ONE = 1
# Compound threats that single-line scoring underweights
BONUS_DOUBLE_THREE = 5_000
BONUS_FOUR_THREE = 8_000

# Single-ply scores used by the defensive tier and candidate ranking
SCORE_IMMEDIATE_WIN = 1_000_000
SCORE_MUST_BLOCK = 500_000
# Terminal score for a won search node, plus a per-remaining-ply bonus
SEARCH_WIN = 100_000
SEARCH_WIN_DEPTH_BONUS = 100

# Adjacent search distance for move generation
SEARCH_DISTANCE = 2
# Above this share of empty cells (in tenths) only the center is searched
OPENING_EMPTY_TENTHS = 9
OPENING_RADIUS = 2
# Depth from which candidates are ranked and truncated, and defense weighs more
DEEP_SEARCH_DEPTH = 6
MAX_CANDIDATES_DEEP = 20
DEFENSE_WEIGHT_SHALLOW = 2
DEFENSE_WEIGHT_DEEP = 3


@dataclass(frozen=True)
class AILevelConfig:
    strategy: str
    max_depth: int = 0
    defense_weight: int = DEFENSE_WEIGHT_SHALLOW
    max_candidates: Optional[int] = None  # None이면 후보 수 제한 없음


def minimax_level(depth: int) -> AILevelConfig:
    deep = depth >= DEEP_SEARCH_DEPTH
    return AILevelConfig(
        strategy="minimax",
        max_depth=depth,
        defense_weight=DEFENSE_WEIGHT_DEEP if deep else DEFENSE_WEIGHT_SHALLOW,
        max_candidates=MAX_CANDIDATES_DEEP if deep else None,
    )


AI_LEVELS = {
    1: AILevelConfig(strategy="random"),
    2: AILevelConfig(strategy="defensive"),
    3: minimax_level(4),
    4: minimax_level(6),
}
# Any difficulty outside the table plays at the strongest level
DEFAULT_LEVEL = 4
