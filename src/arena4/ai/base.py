from __future__ import annotations

import abc
from typing import Optional, Protocol

from arena4.core.board import Board, place
from arena4.types import Move, Stone


class Player(Protocol):
    name: str

    def initialize(self, board: Board, color: Stone) -> None:
        ...

    def play(self, opponent_last_move: Optional[Move]) -> Move:
        ...


class TrackingPlayer(abc.ABC):
    """
    Keeps a private copy of the board in sync with the game.

    `initialize` is called once with the starting board and this player's
    color. Every `play` call first records the opponent's last move (None on
    the opening move of the game), then asks `choose` for a move and records
    it as well.
    """

    name: str = "Player"

    def __init__(self) -> None:
        self.board: Optional[Board] = None
        self.color: Optional[Stone] = None

    def initialize(self, board: Board, color: Stone) -> None:
        if self.board is not None:
            raise RuntimeError(f"{self.name} was already initialized.")
        self.board = board
        self.color = color

    def play(self, opponent_last_move: Optional[Move]) -> Move:
        if self.board is None or self.color is None:
            raise RuntimeError(f"{self.name} must be initialized before play().")

        if opponent_last_move is not None:
            self.board = place(self.board, opponent_last_move, self.color.opponent())

        move = self.choose(self.board, self.color)
        self.board = place(self.board, move, self.color)
        return move

    @abc.abstractmethod
    def choose(self, board: Board, color: Stone) -> Move:
        """Return a cell index to play on `board` for `color`."""
        raise NotImplementedError
