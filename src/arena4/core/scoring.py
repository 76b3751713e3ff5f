from __future__ import annotations

from arena4.core.board import Board
from arena4.types import Stone


def evaluate(board: Board, color: Stone) -> int:
    """
    Static score used at the search horizon: pieces of `color` minus pieces of
    its opponent. Positive favors `color`.
    """
    opp = color.opponent()
    score = 0
    for cell in board.cells:
        if cell is color:
            score += 1
        elif cell is opp:
            score -= 1
    return score
