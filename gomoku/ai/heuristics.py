"""Pattern-based evaluation of lines through a stone (no capture)."""

from enum import IntEnum
from typing import Iterable, List, Sequence, Tuple

from gomoku.core.board import Board, Cell, Position
from gomoku.ai.config import (
    SCORE_FIVE,
    SCORE_LIVE_FOUR,
    SCORE_DEAD_FOUR,
    SCORE_LIVE_THREE,
    SCORE_DEAD_THREE,
    SCORE_LIVE_TWO,
    SCORE_DEAD_TWO,
    SCORE_ONE,
    BONUS_DOUBLE_THREE,
    BONUS_FOUR_THREE,
    DEFENSE_WEIGHT_SHALLOW,
)

DIRECTIONS: Tuple[Tuple[int, int], ...] = Board.directions()

# Rows of plain ints, as returned by `board.cells.tolist()`
Rows = Sequence[Sequence[int]]


class Pattern(IntEnum):
    """Tactical category of a run, valued by its score."""
    FIVE = SCORE_FIVE
    LIVE_FOUR = SCORE_LIVE_FOUR
    DEAD_FOUR = SCORE_DEAD_FOUR
    LIVE_THREE = SCORE_LIVE_THREE
    DEAD_THREE = SCORE_DEAD_THREE
    LIVE_TWO = SCORE_LIVE_TWO
    DEAD_TWO = SCORE_DEAD_TWO
    ONE = SCORE_ONE


def _walk(rows: Rows, size: int, row: int, col: int, target: int, dr: int, dc: int) -> Tuple[int, bool]:
    """
    Walk from (row, col) outward along (dr,dc), start cell excluded.

    Returns:
        (stones of `target` passed, whether the run end is closed by the
        board edge or a stone of another color)
    """
    count = 0
    r, c = row + dr, col + dc
    while 0 <= r < size and 0 <= c < size:
        value = rows[r][c]
        if value != target:
            return count, value != 0
        count += 1
        r += dr
        c += dc
    return count, True


def count_line(board: Board, pos: Position, color: Cell, dr: int, dc: int) -> int:
    """
    Length of the `color` run through pos along (dr,dc), pos counted as one
    whatever it currently holds (so it works for hypothetical placements).
    """
    return (
        1
        + board.count_in_direction(pos, color, dr, dc)
        + board.count_in_direction(pos, color, -dr, -dc)
    )


def count_blocks(board: Board, pos: Position, color: Cell, dr: int, dc: int) -> int:
    """
    Number of run ends (0, 1 or 2) closed by the board edge or an opposing
    stone. An empty cell past the run leaves that end open.
    """
    rows = board.cells.tolist()
    target = int(color)
    _, ahead = _walk(rows, board.size, pos.row, pos.col, target, dr, dc)
    _, behind = _walk(rows, board.size, pos.row, pos.col, target, -dr, -dc)
    return int(ahead) + int(behind)


def classify(count: int, blocks: int) -> Pattern:
    if count >= 5:
        return Pattern.FIVE
    live = blocks == 0
    if count == 4:
        return Pattern.LIVE_FOUR if live else Pattern.DEAD_FOUR
    if count == 3:
        return Pattern.LIVE_THREE if live else Pattern.DEAD_THREE
    if count == 2:
        return Pattern.LIVE_TWO if live else Pattern.DEAD_TWO
    return Pattern.ONE


def _pattern_at(rows: Rows, size: int, row: int, col: int, target: int, dr: int, dc: int) -> Pattern:
    ahead, closed_ahead = _walk(rows, size, row, col, target, dr, dc)
    behind, closed_behind = _walk(rows, size, row, col, target, -dr, -dc)
    return classify(1 + ahead + behind, int(closed_ahead) + int(closed_behind))


def _score_at(rows: Rows, size: int, row: int, col: int, target: int) -> int:
    score = 0
    live_threes = 0
    live_fours = 0
    for dr, dc in DIRECTIONS:
        pattern = _pattern_at(rows, size, row, col, target, dr, dc)
        score += pattern.value
        if pattern is Pattern.LIVE_THREE:
            live_threes += 1
        elif pattern is Pattern.LIVE_FOUR:
            live_fours += 1

    if live_threes >= 2:
        score += BONUS_DOUBLE_THREE
    if live_fours >= 1 and live_threes >= 1:
        score += BONUS_FOUR_THREE
    return score


def analyze_pattern(board: Board, pos: Position, color: Cell, dr: int, dc: int) -> Pattern:
    return _pattern_at(board.cells.tolist(), board.size, pos.row, pos.col, int(color), dr, dc)


def evaluate_position(board: Board, pos: Position, color: Cell) -> int:
    """
    Score a (possibly hypothetical) `color` stone at pos.

    Sums the pattern score of the four directions, then rewards compound
    threats: two live threes (+5000) and a live four with a live three (+8000).
    """
    return _score_at(board.cells.tolist(), board.size, pos.row, pos.col, int(color))


def evaluate_positions(board: Board, positions: Iterable[Position], color: Cell) -> List[int]:
    """`evaluate_position` for many cells against one snapshot of the grid."""
    rows = board.cells.tolist()
    size = board.size
    target = int(color)
    return [_score_at(rows, size, pos.row, pos.col, target) for pos in positions]


def evaluate_board(board: Board, defense_weight: int = DEFENSE_WEIGHT_SHALLOW) -> int:
    """
    Evaluate the whole board. Positive = good for WHITE (the AI).

    Black stones are weighted by `defense_weight` so that deeper searches
    prefer blocking over attacking.
    """
    rows = board.cells.tolist()
    size = board.size
    white = int(Cell.WHITE)
    black = int(Cell.BLACK)
    score = 0
    for r, line in enumerate(rows):
        for c, value in enumerate(line):
            if value == white:
                score += _score_at(rows, size, r, c, white)
            elif value == black:
                score -= _score_at(rows, size, r, c, black) * defense_weight
    return score


_THREAT_BY_LENGTH = {4: 10_000, 3: 1_000, 2: 100}


def threat_score(board: Board, pos: Position, color: Cell) -> int:
    """Coarse threat of a `color` stone at pos: the longest run it makes."""
    best = 0
    for dr, dc in DIRECTIONS:
        count = count_line(board, pos, color, dr, dc)
        threat = SCORE_FIVE if count >= 5 else _THREAT_BY_LENGTH.get(count, 10)
        best = max(best, threat)
    return best
