from __future__ import annotations
from typing import Callable, Optional

from arena4.ai.base import TrackingPlayer
from arena4.core.board import Board
from arena4.core.rules import is_legal
from arena4.game.arena import GameAborted
from arena4.types import Move, Stone
from arena4.ui.prompts import parse_move


class HumanPlayer(TrackingPlayer):
    """Reads cell indices from the terminal until a legal one is entered."""

    def __init__(self, name: str = "Human", read: Optional[Callable[[str], str]] = None) -> None:
        super().__init__()
        self.name = name
        self._read = read if read is not None else input

    def choose(self, board: Board, color: Stone) -> Move:
        while True:
            try:
                raw = self._read(f"where to put the next {color.name}? ")
            except EOFError:
                raise GameAborted(f"{self.name} closed the input.") from None
            try:
                move = parse_move(raw)
            except ValueError as e:
                print(e)
                continue

            if move is None:
                raise GameAborted(f"{self.name} quit.")
            if not is_legal(board, move):
                print(f"Cell {move} is not playable.")
                continue
            return move
