"""Test board module."""

from __future__ import annotations

import pytest

from arena4.core.board import (
    SIZE,
    Board,
    empty_board,
    index_of,
    place,
    row_col,
    to_debug_string,
)
from arena4.types import Stone


def test_empty_board_size() -> None:
    board = empty_board()
    assert len(board) == SIZE == 28
    assert all(cell is None for cell in board)
    assert board.empty_count() == SIZE


def test_index_layout() -> None:
    assert index_of(0, 0) == 0
    assert index_of(0, 6) == 6
    assert index_of(1, 0) == 7
    assert index_of(3, 6) == 27
    assert row_col(16) == (2, 2)


def test_place_returns_new_board() -> None:
    board = empty_board()
    after = place(board, 3, Stone.RED)
    assert after[3] is Stone.RED
    assert board[3] is None
    assert after is not board


def test_place_occupied_raises() -> None:
    board = place(empty_board(), 3, Stone.RED)
    with pytest.raises(ValueError, match="occupied"):
        place(board, 3, Stone.BLUE)


@pytest.mark.parametrize("index", [-1, SIZE, 100])
def test_place_out_of_range_raises(index: int) -> None:
    with pytest.raises(ValueError, match="out of range"):
        place(empty_board(), index, Stone.RED)


def test_board_is_hashable_value() -> None:
    a = place(empty_board(), 0, Stone.RED)
    b = place(empty_board(), 0, Stone.RED)
    assert a == b
    assert hash(a) == hash(b)


def test_board_is_frozen() -> None:
    board = empty_board()
    with pytest.raises(AttributeError):
        board.cells = ()  # type: ignore[misc]


def test_wrong_cell_count_rejected() -> None:
    with pytest.raises(ValueError):
        Board((None,) * 5)


def test_from_rows_top_row_first() -> None:
    board = Board.from_rows([
        "O......",
        "X......",
    ])
    assert board[0] is Stone.RED
    assert board[7] is Stone.BLUE
    assert board.count(Stone.RED) == 1
    assert board.count(Stone.BLUE) == 1


def test_from_rows_rejects_bad_input() -> None:
    with pytest.raises(ValueError):
        Board.from_rows(["XX"])
    with pytest.raises(ValueError):
        Board.from_rows(["Z......"])
    with pytest.raises(ValueError):
        Board.from_rows(["......."] * 5)


def test_is_full() -> None:
    assert not empty_board().is_full()
    assert Board((Stone.RED,) * SIZE).is_full()


def test_debug_string() -> None:
    board = place(place(empty_board(), 0, Stone.RED), 7, Stone.BLUE)
    assert to_debug_string(board) == "X......-O......-.......-.......-"
