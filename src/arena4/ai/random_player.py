from __future__ import annotations
import random
from typing import Optional

from arena4.ai.base import TrackingPlayer
from arena4.core.board import Board
from arena4.core.rules import legal_moves
from arena4.types import Move, Stone


class RandomPlayer(TrackingPlayer):
    def __init__(self, name: str = "Random AI", seed: Optional[int] = None) -> None:
        super().__init__()
        self.name = name
        self.rng = random.Random(seed)

    def choose(self, board: Board, color: Stone) -> Move:
        moves = legal_moves(board)
        if not moves:
            raise ValueError("No valid moves.")
        return self.rng.choice(moves)
