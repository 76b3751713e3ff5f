from __future__ import annotations

import csv
import logging
import os
import time
from concurrent.futures import ProcessPoolExecutor, as_completed
from pathlib import Path
from typing import Dict, List, Optional

from arena4.ui.colors import BOLD, DIM, FG_GREEN, FG_RED, FG_YELLOW, c

from .league_play import add_result, add_stats, chunked, run_pairings_batch
from .league_scoring import avg_ms_per_move, ppg, strength_score
from .league_types import Agg, Team

logger = logging.getLogger(__name__)

RULE = "─" * 70

CSV_COLUMNS = [
    "name",
    "games", "wins", "draws", "losses",
    "points", "ppg",
    "strength_wilson_lcb",
    "avg_ms_per_move",
    "moves", "time_ms", "nodes",
]


def print_standings(agg: Dict[str, Agg], z: float) -> None:
    rows = sorted(agg.items(), key=lambda kv: (strength_score(kv[1], z), ppg(kv[1])), reverse=True)

    print("\n" + c("=== Standings ===", BOLD))
    print(c(f"{'rk':>3}  {'player':<20}  {'strength':>9}  {'ppg':>5}  {'g':>3}  {'ms/mv':>7}  {'W-D-L':>8}", DIM))
    print(c(RULE, DIM))
    for i, (name, a) in enumerate(rows, start=1):
        p = ppg(a)
        color = FG_GREEN if p >= 0.75 else FG_YELLOW if p >= 0.5 else FG_RED
        print(
            f"{i:>3}  {name:<20}  {strength_score(a, z):>9.4f}  {c(f'{p:5.3f}', color)}  {a.games:>3}  "
            f"{avg_ms_per_move(a):>7.1f}  {a.wdl:>8}"
        )
    print(c(RULE, DIM))


def export_csv(agg: Dict[str, Agg], out_dir: Path, z: float) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    ts = time.strftime("%Y%m%d_%H%M%S")
    out_path = out_dir / f"league_results_{ts}.csv"

    with open(out_path, "w", newline="") as f:
        w = csv.writer(f)
        w.writerow(CSV_COLUMNS)
        for name, a in agg.items():
            w.writerow([
                name,
                a.games, a.wins, a.draws, a.losses,
                a.points, round(ppg(a), 6),
                round(strength_score(a, z), 6),
                round(avg_ms_per_move(a), 3),
                a.moves, a.time_ms, a.nodes,
            ])
    return out_path


def league_round_robin(
    teams: List[Team],
    games_per_pair: int = 2,
    seed: int = 1234,
    max_workers: Optional[int] = None,
    batch_pairings: int = 4,
    z: float = 1.28,
    export_dir: Optional[str | Path] = ".",
) -> Dict[str, Agg]:
    """
    Every team plays every other team `games_per_pair` times, swapping colors
    each game. Games are spread over a process pool; `max_workers=1` plays
    them in this process.
    """
    if len({t.name for t in teams}) != len(teams):
        raise ValueError("Team names must be unique.")

    agg: Dict[str, Agg] = {t.name: Agg() for t in teams}

    pair_items = []
    n = len(teams)
    for i in range(n):
        for j in range(i + 1, n):
            A_team = teams[i]
            B_team = teams[j]
            base_seed = seed + i * 10_000 + j * 100
            pair_items.append((A_team.name, B_team.name, A_team.make, B_team.make, base_seed))

    print(c(f"Round robin: {n} players, {len(pair_items)} pairings, {games_per_pair} games each", BOLD))

    def apply(results) -> None:
        for (A_name, B_name, a_is_x, outcome, stats) in results:
            add_result(agg[A_name], agg[B_name], outcome, a_is_x=a_is_x)
            add_stats(agg[A_name], stats["X" if a_is_x else "O"])
            add_stats(agg[B_name], stats["O" if a_is_x else "X"])
            logger.debug("%s vs %s (a_is_x=%s): %s", A_name, B_name, a_is_x, outcome)

    if max_workers == 1:
        for chunk in chunked(pair_items, batch_pairings):
            apply(run_pairings_batch((chunk, games_per_pair)))
    else:
        if max_workers is None:
            max_workers = min(os.cpu_count() or 2, 6)
        with ProcessPoolExecutor(max_workers=max_workers) as ex:
            futures = [
                ex.submit(run_pairings_batch, (chunk, games_per_pair))
                for chunk in chunked(pair_items, batch_pairings)
            ]
            for fut in as_completed(futures):
                apply(fut.result())

    print_standings(agg, z)

    if export_dir is not None:
        out_path = export_csv(agg, Path(export_dir), z)
        print(f"Wrote CSV: {out_path}")
        logger.info("league results written to %s", out_path)

    return agg
