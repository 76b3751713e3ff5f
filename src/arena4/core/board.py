# src/arena4/core/board.py

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterator, Sequence, Tuple

from arena4.config import WIDTH, HEIGHT
from arena4.types import Cell, Stone

SIZE = WIDTH * HEIGHT

_SYMBOLS = {".": None, "X": Stone.RED, "O": Stone.BLUE}


def index_of(row: int, col: int) -> int:
    return row * WIDTH + col


def row_col(index: int) -> Tuple[int, int]:
    return divmod(index, WIDTH)


@dataclass(frozen=True, slots=True)
class Board:
    """
    Immutable 7x4 board. Index 0 is the bottom-left cell; indices grow
    left-to-right, then bottom-to-top:

        21 22 23 24 25 26 27
        14 15 16 17 18 19 20
         7  8  9 10 11 12 13
         0  1  2  3  4  5  6
    """

    cells: Tuple[Cell, ...] = field(default=(None,) * SIZE)

    def __post_init__(self) -> None:
        if len(self.cells) != SIZE:
            raise ValueError(f"Board needs {SIZE} cells, got {len(self.cells)}.")

    def __getitem__(self, index: int) -> Cell:
        return self.cells[index]

    def __len__(self) -> int:
        return SIZE

    def __iter__(self) -> Iterator[Cell]:
        return iter(self.cells)

    def is_full(self) -> bool:
        return all(c is not None for c in self.cells)

    def empty_count(self) -> int:
        return sum(1 for c in self.cells if c is None)

    def count(self, color: Stone) -> int:
        return sum(1 for c in self.cells if c is color)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> "Board":
        """
        Build a board from text rows, top row first.
        'X' is RED, 'O' is BLUE, '.' is empty. Missing top rows are empty.
        """
        if len(rows) > HEIGHT:
            raise ValueError(f"At most {HEIGHT} rows allowed.")
        padded = ["." * WIDTH] * (HEIGHT - len(rows)) + list(rows)
        cells: list[Cell] = []
        for text in reversed(padded):
            text = text.replace(" ", "")
            if len(text) != WIDTH:
                raise ValueError(f"Row {text!r} must have {WIDTH} cells.")
            for ch in text:
                if ch not in _SYMBOLS:
                    raise ValueError(f"Unknown cell symbol {ch!r}.")
                cells.append(_SYMBOLS[ch])
        return cls(tuple(cells))


def empty_board() -> Board:
    return Board()


def place(board: Board, index: int, color: Stone) -> Board:
    """Return a copy of `board` with `color` at `index`. The input is untouched."""
    if index < 0 or index >= SIZE:
        raise ValueError(f"Cell {index} out of range.")
    if board.cells[index] is not None:
        raise ValueError(f"Cell {index} is occupied.")
    cells = list(board.cells)
    cells[index] = color
    return Board(tuple(cells))


def to_debug_string(board: Board) -> str:
    # bottom row first, rows separated by '-'
    parts = []
    for r in range(HEIGHT):
        row = board.cells[r * WIDTH:(r + 1) * WIDTH]
        parts.append("".join("." if c is None else c.symbol for c in row))
    return "-".join(parts) + "-"
