from __future__ import annotations

import pandas as pd


STANDINGS_COLS = [
    "name", "kind", "depth",
    "games", "wins", "draws", "losses",
    "ppg", "strength_wilson_lcb",
    "nodes_per_move", "avg_ms_per_move",
]


def standings(df: pd.DataFrame, min_games: int = 0) -> pd.DataFrame:
    """Players ranked by Wilson strength, ties broken by points per game."""
    out = df
    if min_games > 0 and "games" in out.columns:
        out = out[out["games"] >= min_games]

    sort_by = [c for c in ("strength_wilson_lcb", "ppg") if c in out.columns]
    if sort_by:
        out = out.sort_values(sort_by, ascending=False, kind="mergesort")

    out = out[[c for c in STANDINGS_COLS if c in out.columns]].reset_index(drop=True)
    out.insert(0, "rk", range(1, len(out) + 1))
    return out


def depth_profile(df: pd.DataFrame) -> pd.DataFrame:
    """
    One row per alpha-beta search depth, ascending.

    `strength_gain` is the change in Wilson strength against the next
    shallower depth and `node_growth` the factor by which nodes per move
    grew over it; both are NaN on the shallowest row.
    """
    ab = df[df["kind"] == "alphabeta"].dropna(subset=["depth"])
    cols = [c for c in ("strength_wilson_lcb", "ppg", "nodes_per_move", "avg_ms_per_move") if c in ab.columns]
    if ab.empty or not cols:
        return pd.DataFrame(columns=["depth", *cols, "strength_gain", "node_growth"])

    prof = (
        ab.assign(depth=ab["depth"].astype(int))
        .groupby("depth", as_index=False)[cols]
        .mean()
        .sort_values("depth")
        .reset_index(drop=True)
    )
    prof["strength_gain"] = prof["strength_wilson_lcb"].diff() if "strength_wilson_lcb" in prof else float("nan")
    prof["node_growth"] = (
        prof["nodes_per_move"] / prof["nodes_per_move"].shift(1) if "nodes_per_move" in prof else float("nan")
    )
    return prof


def baselines(df: pd.DataFrame) -> dict[str, float]:
    """Wilson strength of the non-searching players, keyed by name."""
    if "strength_wilson_lcb" not in df.columns:
        return {}
    base = df[df["kind"].isin(["random", "greedy"])]
    return {str(n): float(s) for n, s in zip(base["name"], base["strength_wilson_lcb"])}
