"""Board model and game session."""

from gomoku.core.board import Board, Cell, Position

__all__ = ["Board", "Cell", "Position"]
