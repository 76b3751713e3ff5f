from __future__ import annotations

from arena4.ai.base import TrackingPlayer
from arena4.config import WIDTH, HEIGHT
from arena4.core.board import Board, index_of
from arena4.types import Move, Stone


class GreedyPlayer(TrackingPlayer):
    """Fills the leftmost column that still has room."""

    def __init__(self, name: str = "Greedy AI") -> None:
        super().__init__()
        self.name = name

    def choose(self, board: Board, color: Stone) -> Move:
        for c in range(WIDTH):
            for r in range(HEIGHT):
                i = index_of(r, c)
                if board[i] is None:
                    return Move(i)
        raise ValueError("No valid moves.")
