from __future__ import annotations

import math
from pathlib import Path
from typing import Mapping, Optional

import matplotlib.pyplot as plt
import pandas as pd


def _finish(fig, outdir: Path, filename: str, show: bool) -> Optional[Path]:
    if show:
        plt.show()
        return None
    outdir.mkdir(parents=True, exist_ok=True)
    out = outdir / filename
    fig.savefig(out, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return out


def plot_strength_by_depth(
    profile: pd.DataFrame,
    outdir: Path,
    baselines: Optional[Mapping[str, float]] = None,
    *,
    show: bool,
) -> Optional[Path]:
    """Wilson strength against search depth, with the non-searching players as flat lines."""
    if profile.empty or "strength_wilson_lcb" not in profile.columns:
        return None

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.plot(profile["depth"], profile["strength_wilson_lcb"], marker="o", label="AlphaBeta")
    for name, strength in (baselines or {}).items():
        ax.axhline(strength, linestyle="--", linewidth=1, color="gray")
        ax.annotate(name, (profile["depth"].min(), strength), fontsize=8, va="bottom")

    ax.set_xticks(profile["depth"].tolist())
    ax.set_xlabel("search depth")
    ax.set_ylabel("strength (Wilson lower bound)")
    ax.set_ylim(0, 1)
    ax.set_title("Strength by search depth")
    ax.legend(loc="lower right")

    return _finish(fig, outdir, "strength_by_depth.png", show)


def plot_cost_vs_strength(df: pd.DataFrame, outdir: Path, *, show: bool) -> Optional[Path]:
    """Nodes per move (log scale) against strength for every alpha-beta player."""
    need = {"nodes_per_move", "strength_wilson_lcb", "kind"}
    if not need <= set(df.columns):
        return None
    ab = df[(df["kind"] == "alphabeta") & (df["nodes_per_move"] > 0)]
    if ab.empty:
        return None

    fig, ax = plt.subplots(figsize=(7, 4))
    ax.scatter(ab["nodes_per_move"], ab["strength_wilson_lcb"])
    for _, row in ab.iterrows():
        ax.annotate(f"d{int(row['depth'])}", (row["nodes_per_move"], row["strength_wilson_lcb"]), fontsize=8)

    ax.set_xscale("log")
    lo, hi = math.log10(ab["nodes_per_move"].min()), math.log10(ab["nodes_per_move"].max())
    ax.set_xlim(10 ** (lo - 0.2), 10 ** (hi + 0.2))
    ax.set_xlabel("nodes per move")
    ax.set_ylabel("strength (Wilson lower bound)")
    ax.set_title("Search cost vs strength")

    return _finish(fig, outdir, "cost_vs_strength.png", show)
