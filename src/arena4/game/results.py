from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional

from arena4.core.board import Board
from arena4.types import Move, Stone


@dataclass(frozen=True, slots=True)
class GameResult:
    winner: Optional[Stone]          # None means a draw
    board: Board
    moves: List[Move] = field(default_factory=list)
    winning_line: Optional[List[int]] = None

    @property
    def is_draw(self) -> bool:
        return self.winner is None

    @property
    def outcome(self) -> str:
        """'X' (RED won), 'O' (BLUE won) or 'D'."""
        return "D" if self.winner is None else self.winner.symbol
