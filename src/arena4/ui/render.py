from __future__ import annotations
from typing import Iterable, List, Optional, Set

from arena4.config import CLEAR_SCREEN, WIDTH, HEIGHT
from arena4.core.board import Board, index_of
from arena4.core.rules import is_supported
from arena4.game.state import GameState
from arena4.types import Stone
from arena4.ui.colors import c, BOLD, DIM, FG_BLUE, FG_CYAN, FG_GRAY, FG_RED, REVERSE


def _cell(board: Board, index: int, highlighted: bool) -> str:
    cell = board[index]
    if cell is None:
        if is_supported(board, index):
            # playable cells show the index to type
            return c(f"{index:<2}", FG_GRAY)
        return c(". ", FG_GRAY)

    text = c(cell.symbol, FG_RED if cell is Stone.RED else FG_BLUE)
    if highlighted:
        text = c(text, REVERSE)
    return text + " "


def pretty_board(board: Board, highlight: Optional[Iterable[int]] = None) -> str:
    hl: Set[int] = set(highlight) if highlight else set()
    lines: List[str] = []
    for r in range(HEIGHT - 1, -1, -1):
        parts = []
        for col in range(WIDTH):
            i = index_of(r, col)
            parts.append(_cell(board, i, i in hl))
        lines.append(" ".join(parts).rstrip())
    return "\n".join(lines)


def clear_screen() -> None:
    if CLEAR_SCREEN:
        print("\033[2J\033[H", end="")


def render(state: GameState, highlight: Optional[Iterable[int]] = None) -> None:
    clear_screen()

    print(c("CONNECT 4 ARENA (7x4)", BOLD))
    if state.last_status:
        print(c(state.last_status, FG_CYAN))
    else:
        print()

    print(pretty_board(state.board, highlight))
    print(c("   Enter a highlighted cell number to drop. Enter q to quit.", DIM))
