from __future__ import annotations
from dataclasses import dataclass, field

from arena4.core.board import Board, empty_board
from arena4.types import Stone


@dataclass(slots=True)
class GameState:
    board: Board = field(default_factory=empty_board)
    current: Stone = Stone.RED
    last_status: str = "RED starts."
