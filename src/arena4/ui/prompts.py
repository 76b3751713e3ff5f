from __future__ import annotations
from typing import Optional

from arena4.core.board import SIZE
from arena4.types import Move


def parse_move(raw: str) -> Optional[Move]:
    """Parse a typed cell index. Returns None when the user wants to quit."""
    s = raw.strip().lower()
    if s in {"q", "quit", "exit"}:
        return None
    if not s.isdigit():
        raise ValueError("Invalid input. Enter a cell number or q.")
    index = int(s)
    if index >= SIZE:
        raise ValueError(f"Cell must be between 0 and {SIZE - 1}.")
    return Move(index)
