# src/arena4/types.py

from __future__ import annotations
from enum import Enum
from typing import NewType, Optional


class Stone(Enum):
    RED = "RED"
    BLUE = "BLUE"

    def opponent(self) -> "Stone":
        return Stone.BLUE if self is Stone.RED else Stone.RED

    @property
    def symbol(self) -> str:
        return "X" if self is Stone.RED else "O"


Cell = Optional[Stone]
Move = NewType("Move", int)   # cell index 0..WIDTH*HEIGHT-1
