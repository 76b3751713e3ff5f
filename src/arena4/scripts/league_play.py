from __future__ import annotations

import time
from typing import Dict, Optional, Tuple

from arena4.core.board import Board
from arena4.game.arena import play_game
from arena4.types import Move, Stone

from .league_types import Agg


def seed_player(player, seed: int) -> None:
    if hasattr(player, "rng"):
        player.rng.seed(seed)


class _Metered:
    """Wraps a player and adds up its thinking time and searched nodes."""

    def __init__(self, inner) -> None:
        self.inner = inner
        self.name = inner.name
        self.moves = 0
        self.time_ms = 0
        self.nodes = 0

    def initialize(self, board: Board, color: Stone) -> None:
        self.inner.initialize(board, color)

    def play(self, opponent_last_move: Optional[Move]) -> Move:
        start = time.perf_counter()
        move = self.inner.play(opponent_last_move)
        self.time_ms += max(1, int((time.perf_counter() - start) * 1000))
        self.moves += 1
        info = getattr(self.inner, "last_info", None) or {}
        self.nodes += int(info.get("nodes", 0))
        return move

    def stats(self) -> Dict[str, int]:
        return {"moves": self.moves, "time_ms": self.time_ms, "nodes": self.nodes}


def play_headless(red, blue, seed_base: int = 0) -> Tuple[str, Dict[str, Dict[str, int]]]:
    seed_player(red, seed_base + 101)
    seed_player(blue, seed_base + 202)

    m_red, m_blue = _Metered(red), _Metered(blue)
    result = play_game(m_red, m_blue)
    return result.outcome, {"X": m_red.stats(), "O": m_blue.stats()}


def add_result(agg_a: Agg, agg_b: Agg, outcome: str, a_is_x: bool) -> None:
    agg_a.games += 1
    agg_b.games += 1

    if outcome == "D":
        agg_a.draws += 1
        agg_b.draws += 1
        agg_a.points += 0.5
        agg_b.points += 0.5
        return

    a_won = (outcome == "X" and a_is_x) or (outcome == "O" and not a_is_x)
    if a_won:
        agg_a.wins += 1
        agg_b.losses += 1
        agg_a.points += 1.0
    else:
        agg_b.wins += 1
        agg_a.losses += 1
        agg_b.points += 1.0


def add_stats(agg: Agg, side_stats: Dict[str, int]) -> None:
    agg.moves += side_stats["moves"]
    agg.time_ms += side_stats["time_ms"]
    agg.nodes += side_stats["nodes"]


def run_pairings_batch(args):
    (batch_items, games_per_pair) = args
    out = []
    for (A_name, B_name, A_make, B_make, base_seed) in batch_items:
        for g in range(games_per_pair):
            if g % 2 == 0:
                outcome, stats = play_headless(A_make(), B_make(), seed_base=(base_seed + g))
                out.append((A_name, B_name, True, outcome, stats))
            else:
                outcome, stats = play_headless(B_make(), A_make(), seed_base=(base_seed + g))
                out.append((A_name, B_name, False, outcome, stats))
    return out


def chunked(lst, size: int):
    for i in range(0, len(lst), size):
        yield lst[i : i + size]
