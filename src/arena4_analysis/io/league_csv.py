from __future__ import annotations

import re
from pathlib import Path

import pandas as pd


COUNT_COLS = ["games", "wins", "draws", "losses", "moves", "time_ms", "nodes"]
RATE_COLS = ["points", "ppg", "strength_wilson_lcb", "avg_ms_per_move"]

# roster names written by arena4.scripts.league_roster
_ALPHABETA_NAME = re.compile(r"^AlphaBeta d(\d+)$")


def player_kind(name: str) -> str:
    if _ALPHABETA_NAME.match(name):
        return "alphabeta"
    low = name.strip().lower()
    return low if low in {"random", "greedy"} else "other"


def search_depth(name: str) -> float:
    m = _ALPHABETA_NAME.match(name)
    return float(m.group(1)) if m else float("nan")


def read_league_csv(path: Path) -> pd.DataFrame:
    """
    Load one `league_results_*.csv` and add the columns the reports use:
    `kind` (random / greedy / alphabeta / other), `depth` (NaN unless the
    player is an alpha-beta searcher) and `nodes_per_move`.
    """
    if not path.exists():
        raise FileNotFoundError(f"League CSV not found: {path}")

    df = pd.read_csv(path)
    if "name" not in df.columns:
        raise ValueError(f"{path} has no 'name' column; columns are {list(df.columns)}")

    for col in COUNT_COLS + RATE_COLS:
        if col in df.columns:
            df[col] = pd.to_numeric(df[col], errors="coerce")

    df["name"] = df["name"].astype(str).str.strip()
    df["kind"] = df["name"].map(player_kind)
    df["depth"] = df["name"].map(search_depth)

    if {"nodes", "moves"} <= set(df.columns):
        moves = df["moves"].where(df["moves"] > 0)
        df["nodes_per_move"] = df["nodes"] / moves
    return df


def latest_league_csv(results_dir: Path, pattern: str = "league_results_*.csv") -> Path:
    files = sorted(results_dir.glob(pattern)) if results_dir.is_dir() else []
    if not files:
        raise FileNotFoundError(f"no {pattern} in {results_dir}")
    # timestamped names sort chronologically
    return files[-1]
