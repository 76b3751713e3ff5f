from __future__ import annotations

import time

from arena4.ai.alphabeta import search
from arena4.ai.base import TrackingPlayer
from arena4.config import SEARCH_DEPTH
from arena4.core.board import Board
from arena4.types import Move, Stone


class AlphaBetaPlayer(TrackingPlayer):
    def __init__(self, name: str = "AlphaBeta AI", depth: int = SEARCH_DEPTH) -> None:
        super().__init__()
        if depth < 0:
            raise ValueError("depth must be >= 0")
        self.name = name
        self.depth = depth
        self.last_info: dict = {}

    def choose(self, board: Board, color: Stone) -> Move:
        start = time.perf_counter()
        result = search(board, color, self.depth)
        if result.move is None:
            raise ValueError("No valid moves.")

        elapsed = time.perf_counter() - start
        self.last_info = {
            "move": int(result.move),
            "eval": result.score,
            "depth": self.depth,
            "nodes": result.nodes,
            "cutoffs": result.cutoffs,
            "time_ms": max(1, int(elapsed * 1000)),
        }
        return result.move
