"""
Shared pytest fixtures for the gomoku tests.

Boards are function-scoped so every test gets its own mutable instance.
"""

import random
from typing import Callable, Iterable, Tuple

import pytest

from gomoku.core.board import Board, Cell, Position

Coords = Iterable[Tuple[int, int]]


def draw_pattern_cell(row: int, col: int) -> Cell:
    """Fill colour whose longest run in any direction is two stones."""
    return Cell.BLACK if (col // 2 + row) % 2 == 0 else Cell.WHITE


@pytest.fixture
def make_board() -> Callable[..., Board]:
    """Factory: make_board(size, black=[(r, c), ...], white=[...])."""

    def _make(size: int = 15, black: Coords = (), white: Coords = ()) -> Board:
        board = Board(size)
        for r, c in black:
            assert board.place(Position(r, c), Cell.BLACK)
        for r, c in white:
            assert board.place(Position(r, c), Cell.WHITE)
        return board

    return _make


@pytest.fixture
def full_draw_board() -> Callable[[int], Board]:
    """Factory for a completely filled board without any five."""

    def _make(size: int = 15) -> Board:
        board = Board(size)
        for r in range(size):
            for c in range(size):
                board.place(Position(r, c), draw_pattern_cell(r, c))
        return board

    return _make


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
