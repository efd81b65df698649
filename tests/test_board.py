"""Tests for Cell, Position and Board."""

import random

import pytest

from gomoku.core.board import Board, Cell, Position


def _brute_force_win(board: Board, pos: Position) -> bool:
    """Any five-cell window through pos, along any axis, of one colour."""
    cell = board.get(pos)
    if cell is None or cell == Cell.EMPTY:
        return False
    for dr, dc in ((0, 1), (1, 0), (1, 1), (1, -1)):
        for offset in range(-4, 1):
            window = []
            for k in range(offset, offset + 5):
                r, c = pos.row + dr * k, pos.col + dc * k
                if r < 0 or c < 0:
                    window.append(None)
                else:
                    window.append(board.get(Position(r, c)))
            if all(v == cell for v in window):
                return True
    return False


def _count_stones(board: Board) -> int:
    return sum(
        1
        for r in range(board.size)
        for c in range(board.size)
        if board.get(Position(r, c)) != Cell.EMPTY
    )


class TestCellAndPosition:
    def test_opponent(self) -> None:
        assert Cell.BLACK.opponent() == Cell.WHITE
        assert Cell.WHITE.opponent() == Cell.BLACK
        assert Cell.EMPTY.opponent() == Cell.EMPTY

    def test_position_is_hashable_and_ordered(self) -> None:
        positions = {Position(1, 2), Position(1, 2), Position(0, 5)}
        assert len(positions) == 2
        assert sorted(positions) == [Position(0, 5), Position(1, 2)]

    def test_position_label(self) -> None:
        assert str(Position(7, 7)) == "H8"
        assert str(Position(0, 0)) == "A1"

    def test_negative_position_rejected(self) -> None:
        with pytest.raises(ValueError):
            Position(-1, 0)

    def test_non_integer_position_rejected(self) -> None:
        with pytest.raises(TypeError):
            Position(1.5, 0)  # type: ignore[arg-type]


class TestBoardBasics:
    def test_new_board_is_empty(self) -> None:
        board = Board(15)
        assert board.size == 15
        assert board.move_count == 0
        assert not board.is_full()
        assert len(board.empty_positions()) == 225
        assert all(board.get(p) == Cell.EMPTY for p in board.empty_positions())

    @pytest.mark.parametrize("size", [0, 4, -3])
    def test_too_small_board_rejected(self, size: int) -> None:
        with pytest.raises(ValueError):
            Board(size)

    def test_smallest_board_supported(self) -> None:
        board = Board(5)
        assert len(board.empty_positions()) == 25

    def test_get_out_of_range_returns_none(self) -> None:
        board = Board(9)
        assert board.get(Position(9, 0)) is None
        assert board.get(Position(0, 9)) is None
        assert board.get(Position(8, 8)) == Cell.EMPTY

    def test_cells_view_is_read_only(self, make_board) -> None:
        board = make_board(5, black=[(1, 2)], white=[(3, 4)])
        cells = board.cells
        assert cells[1, 2] == Cell.BLACK
        assert cells[3, 4] == Cell.WHITE
        with pytest.raises(ValueError):
            cells[0, 0] = Cell.WHITE
        assert board.get(Position(0, 0)) == Cell.EMPTY
        board.place(Position(0, 0), Cell.WHITE)
        assert cells[0, 0] == Cell.WHITE

    def test_empty_positions_row_major(self, make_board) -> None:
        board = make_board(5, black=[(0, 0)], white=[(2, 3)])
        empty = board.empty_positions()
        assert empty == sorted(empty)
        assert empty[0] == Position(0, 1)
        assert Position(2, 3) not in empty
        assert len(empty) == 23


class TestPlacement:
    def test_place_on_empty_cell(self) -> None:
        board = Board(9)
        assert board.place(Position(4, 4), Cell.BLACK)
        assert board.get(Position(4, 4)) == Cell.BLACK
        assert board.move_count == 1

    def test_place_on_occupied_cell_fails(self) -> None:
        board = Board(9)
        board.place(Position(4, 4), Cell.BLACK)
        assert not board.place(Position(4, 4), Cell.WHITE)
        assert board.get(Position(4, 4)) == Cell.BLACK
        assert board.move_count == 1

    def test_place_out_of_range_fails(self) -> None:
        board = Board(9)
        assert not board.place(Position(9, 9), Cell.BLACK)
        assert board.move_count == 0

    def test_place_empty_cell_value_fails(self) -> None:
        board = Board(9)
        assert not board.place(Position(1, 1), Cell.EMPTY)
        assert board.move_count == 0

    def test_force_place_transitions(self) -> None:
        board = Board(9)
        pos = Position(3, 3)
        board.force_place(pos, Cell.BLACK)
        assert board.move_count == 1
        board.force_place(pos, Cell.WHITE)
        assert board.move_count == 1
        assert board.get(pos) == Cell.WHITE
        board.force_place(pos, Cell.EMPTY)
        assert board.move_count == 0
        board.force_place(pos, Cell.EMPTY)
        assert board.move_count == 0

    def test_force_place_out_of_range_ignored(self) -> None:
        board = Board(9)
        board.force_place(Position(20, 1), Cell.BLACK)
        assert board.move_count == 0

    def test_move_count_tracks_random_mutations(self) -> None:
        rng = random.Random(7)
        board = Board(7)
        cells = [Cell.EMPTY, Cell.BLACK, Cell.WHITE]
        for _ in range(500):
            pos = Position(rng.randrange(8), rng.randrange(8))
            cell = rng.choice(cells)
            if rng.random() < 0.5:
                board.place(pos, cell)
            else:
                board.force_place(pos, cell)
            assert board.move_count == _count_stones(board)

    def test_is_full(self, full_draw_board) -> None:
        board = full_draw_board(9)
        assert board.is_full()
        assert board.move_count == 81
        assert board.empty_positions() == []


class TestWinDetection:
    def test_horizontal_five(self) -> None:
        board = Board(15)
        for col in (3, 4, 5, 6):
            board.place(Position(7, col), Cell.BLACK)
        assert not board.check_win(Position(7, 6))
        board.place(Position(7, 7), Cell.BLACK)
        assert board.check_win(Position(7, 7))
        assert board.check_win(Position(7, 3))

    @pytest.mark.parametrize(
        "cells",
        [
            [(r, 2) for r in range(5)],
            [(k, k) for k in range(2, 7)],
            [(k, 10 - k) for k in range(3, 8)],
        ],
        ids=["vertical", "diagonal", "anti-diagonal"],
    )
    def test_other_axes(self, make_board, cells) -> None:
        board = make_board(15, white=cells)
        assert all(board.check_win(Position(r, c)) for r, c in cells)

    def test_overline_counts(self, make_board) -> None:
        board = make_board(15, black=[(0, c) for c in range(6)])
        assert board.check_win(Position(0, 5))

    def test_mixed_colours_do_not_win(self, make_board) -> None:
        board = make_board(15, black=[(0, 0), (0, 1), (0, 3), (0, 4)], white=[(0, 2)])
        assert not board.check_win(Position(0, 0))
        assert not board.check_win(Position(0, 2))

    def test_empty_and_out_of_range(self) -> None:
        board = Board(9)
        assert not board.check_win(Position(4, 4))
        assert not board.check_win(Position(40, 4))

    def test_matches_brute_force_on_random_boards(self) -> None:
        rng = random.Random(99)
        for _ in range(20):
            board = Board(9)
            for r in range(9):
                for c in range(9):
                    roll = rng.random()
                    if roll < 0.45:
                        board.place(Position(r, c), Cell.BLACK)
                    elif roll < 0.9:
                        board.place(Position(r, c), Cell.WHITE)
            for r in range(9):
                for c in range(9):
                    pos = Position(r, c)
                    assert board.check_win(pos) == _brute_force_win(board, pos)

    def test_draw_pattern_has_no_five(self, full_draw_board) -> None:
        board = full_draw_board(15)
        assert not any(
            board.check_win(Position(r, c)) for r in range(15) for c in range(15)
        )


class TestClone:
    def test_clone_is_equal(self, make_board) -> None:
        board = make_board(9, black=[(1, 1), (2, 2)], white=[(3, 3)])
        clone = board.clone_board()
        assert clone == board
        assert clone.size == board.size
        assert clone.move_count == board.move_count
        assert clone.content_hash() == board.content_hash()

    def test_clone_is_independent(self, make_board) -> None:
        board = make_board(9, black=[(1, 1)])
        clone = board.clone_board()
        clone.place(Position(5, 5), Cell.WHITE)
        board.force_place(Position(1, 1), Cell.EMPTY)
        assert board.get(Position(5, 5)) == Cell.EMPTY
        assert clone.get(Position(1, 1)) == Cell.BLACK
        assert board.move_count == 0
        assert clone.move_count == 2
        assert clone != board

    def test_content_hash_changes_with_content(self) -> None:
        board = Board(9)
        before = board.content_hash()
        board.place(Position(0, 0), Cell.BLACK)
        assert board.content_hash() != before
        board.force_place(Position(0, 0), Cell.EMPTY)
        assert board.content_hash() == before


class TestRendering:
    def test_to_ascii(self, make_board) -> None:
        board = make_board(5, black=[(0, 0)], white=[(4, 4)])
        text = board.to_ascii()
        lines = text.splitlines()
        assert lines[0].split() == ["A", "B", "C", "D", "E"]
        assert lines[1].split() == ["1", "@", ".", ".", ".", "."]
        assert lines[5].split() == ["5", ".", ".", ".", ".", "O"]
        assert str(board) == text
