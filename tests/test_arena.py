"""Test the game loop."""

from __future__ import annotations

from typing import List, Optional

import pytest

from arena4.ai.alphabeta_player import AlphaBetaPlayer
from arena4.ai.base import TrackingPlayer
from arena4.ai.greedy_player import GreedyPlayer
from arena4.ai.random_player import RandomPlayer
from arena4.core.board import Board
from arena4.core.rules import IllegalMoveError, is_winning
from arena4.game.arena import play_game
from arena4.game.state import GameState
from arena4.types import Move, Stone


class FloatingPlayer(TrackingPlayer):
    name = "Floating"

    def choose(self, board: Board, color: Stone) -> Move:
        return Move(20)


def test_same_instance_rejected() -> None:
    p = GreedyPlayer()
    with pytest.raises(ValueError, match="different players"):
        play_game(p, p)


def test_greedy_vs_greedy() -> None:
    result = play_game(GreedyPlayer(), GreedyPlayer())
    assert result.winner is Stone.RED
    assert result.outcome == "X"
    assert result.moves == [0, 7, 14, 21, 1, 8, 15, 22, 2, 9, 16, 23, 3]
    assert result.winning_line == [0, 1, 2, 3]


def test_illegal_move_aborts_game() -> None:
    with pytest.raises(IllegalMoveError):
        play_game(FloatingPlayer(), GreedyPlayer())


def test_render_callback() -> None:
    calls: List[Optional[List[int]]] = []

    def render(state: GameState, highlight: Optional[List[int]]) -> None:
        calls.append(highlight)

    result = play_game(GreedyPlayer(), GreedyPlayer(), render=render)
    assert len(calls) == len(result.moves) + 1
    assert calls[-1] == result.winning_line
    assert all(h is None for h in calls[:-1])


@pytest.mark.parametrize("seed", range(5))
def test_random_games_finish(seed: int) -> None:
    red, blue = RandomPlayer(seed=seed), RandomPlayer(seed=seed + 100)
    result = play_game(red, blue)

    assert len(result.moves) <= 28
    assert len(set(result.moves)) == len(result.moves)
    if result.winner is None:
        assert result.board.is_full()
        assert result.outcome == "D"
    else:
        assert is_winning(result.board, result.winner)

    last = red if len(result.moves) % 2 == 1 else blue
    assert last.board == result.board


def test_alphabeta_vs_greedy_completes() -> None:
    red = AlphaBetaPlayer(depth=3)
    result = play_game(red, GreedyPlayer())
    assert result.outcome in {"X", "O", "D"}
    assert red.last_info["depth"] == 3
    if result.winner is not None:
        assert result.winning_line is not None
