from __future__ import annotations
from typing import List, Optional, Tuple

from arena4.config import WIDTH, HEIGHT, CONNECT_N
from arena4.core.board import Board, SIZE, index_of, to_debug_string
from arena4.types import Move, Stone

Line = Tuple[int, ...]


class IllegalMoveError(ValueError):
    def __init__(self, move: object, board: Board) -> None:
        super().__init__(f"cannot play to position {move} @ {to_debug_string(board)}")
        self.move = move
        self.board = board


def _build_lines() -> List[Line]:
    lines: List[Line] = []
    n = CONNECT_N

    # Horizontal
    for r in range(HEIGHT):
        for c in range(WIDTH - n + 1):
            lines.append(tuple(index_of(r, c + i) for i in range(n)))

    # Vertical
    for r in range(HEIGHT - n + 1):
        for c in range(WIDTH):
            lines.append(tuple(index_of(r + i, c) for i in range(n)))

    # Diagonal up-right
    for r in range(HEIGHT - n + 1):
        for c in range(WIDTH - n + 1):
            lines.append(tuple(index_of(r + i, c + i) for i in range(n)))

    # Diagonal down-right
    for r in range(n - 1, HEIGHT):
        for c in range(WIDTH - n + 1):
            lines.append(tuple(index_of(r - i, c + i) for i in range(n)))

    return lines


WINNING_LINES: List[Line] = _build_lines()


def winning_line(board: Board, color: Stone) -> Optional[List[int]]:
    cells = board.cells
    for line in WINNING_LINES:
        if all(cells[i] is color for i in line):
            return list(line)
    return None


def is_winning(board: Board, color: Stone) -> bool:
    return winning_line(board, color) is not None


def is_draw(board: Board) -> bool:
    return (
        board.is_full()
        and not is_winning(board, Stone.RED)
        and not is_winning(board, Stone.BLUE)
    )


def is_supported(board: Board, index: int) -> bool:
    """A cell is fillable when it sits on the bottom row or on top of a piece."""
    return index < WIDTH or board.cells[index - WIDTH] is not None


def is_legal(board: Board, move: object) -> bool:
    if not isinstance(move, int) or isinstance(move, bool):
        return False
    if move < 0 or move >= SIZE:
        return False
    return board.cells[move] is None and is_supported(board, move)


def legal_moves(board: Board) -> List[Move]:
    cells = board.cells
    return [
        Move(i)
        for i in range(SIZE)
        if cells[i] is None and (i < WIDTH or cells[i - WIDTH] is not None)
    ]


def check_move(board: Board, move: object) -> Move:
    if not is_legal(board, move):
        raise IllegalMoveError(move, board)
    return Move(move)  # type: ignore[arg-type]
