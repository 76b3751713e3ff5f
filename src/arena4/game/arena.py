from __future__ import annotations

import logging
from typing import Callable, List, Optional

from arena4.ai.base import Player
from arena4.core.board import SIZE, empty_board, place, to_debug_string
from arena4.core.rules import check_move, winning_line
from arena4.game.results import GameResult
from arena4.game.state import GameState
from arena4.types import Move, Stone

logger = logging.getLogger(__name__)

Renderer = Callable[[GameState, Optional[List[int]]], None]


class GameAborted(Exception):
    """A player gave up before the game was decided (e.g. a human typed 'q')."""


def play_game(red: Player, blue: Player, *, render: Optional[Renderer] = None) -> GameResult:
    """
    Run one game, RED first, and return the result.

    Each player gets its own starting board; moves are checked against the
    authoritative board here and an illegal one raises IllegalMoveError.
    """
    if red is blue:
        raise ValueError("must be different players (simply create two instances)")

    state = GameState(board=empty_board(), current=Stone.RED, last_status="RED starts.")
    red.initialize(empty_board(), Stone.RED)
    blue.initialize(empty_board(), Stone.BLUE)

    moves: List[Move] = []
    last_move: Optional[Move] = None

    for _ in range(SIZE):
        player = red if state.current is Stone.RED else blue
        if render is not None:
            render(state, None)

        raw = player.play(last_move)
        last_move = check_move(state.board, raw)
        state.board = place(state.board, last_move, state.current)
        moves.append(last_move)
        logger.debug("%s (%s) played %d", state.current.name, player.name, last_move)

        line = winning_line(state.board, state.current)
        if line is not None:
            state.last_status = f"...and the winner is: {state.current.name}"
            if render is not None:
                render(state, line)
            logger.info(
                "winner %s (%s) @ %s", state.current.name, player.name, to_debug_string(state.board)
            )
            return GameResult(winner=state.current, board=state.board, moves=moves, winning_line=line)

        state.current = state.current.opponent()
        state.last_status = f"{player.name} played {last_move}. {state.current.name} to play next..."

    state.last_status = "...it's a DRAW"
    if render is not None:
        render(state, None)
    logger.info("draw @ %s", to_debug_string(state.board))
    return GameResult(winner=None, board=state.board, moves=moves)
