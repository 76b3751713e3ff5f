from __future__ import annotations

import argparse
import logging
from pathlib import Path

import pandas as pd

from ..io.league_csv import latest_league_csv, read_league_csv
from ..metrics.depth import baselines, depth_profile, standings
from ..plots.chart import plot_cost_vs_strength, plot_strength_by_depth

logger = logging.getLogger(__name__)


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="arena4_analysis",
        description="Report how alpha-beta strength and cost scale with search depth in an arena4 league.",
    )
    ap.add_argument("--csv", type=str, default=None, help="League CSV; defaults to the newest one in --results-dir")
    ap.add_argument("--results-dir", type=str, default=".", help="Where `arena4 league` wrote its CSVs")
    ap.add_argument("--min-games", type=int, default=0, help="Leave out players with fewer games")
    ap.add_argument("--outdir", type=str, default="figures", help="Where to save the charts")
    ap.add_argument("--show", action="store_true", help="Open the charts instead of saving them")
    ap.add_argument("--no-plots", action="store_true")
    return ap


def _fmt(df: pd.DataFrame) -> str:
    return df.to_string(index=False, float_format=lambda v: f"{v:.3f}", na_rep="-")


def main(argv: list[str] | None = None) -> int:
    args = build_argparser().parse_args(argv)

    csv_path = Path(args.csv) if args.csv else latest_league_csv(Path(args.results_dir))
    df = read_league_csv(csv_path)
    logger.info("loaded %d players from %s", len(df), csv_path)

    print(f"\nLeague: {csv_path}")
    print("\n=== Standings ===")
    print(_fmt(standings(df, min_games=args.min_games)))

    profile = depth_profile(df)
    if profile.empty:
        print("\nNo AlphaBeta players in this league.")
    else:
        print("\n=== By search depth ===")
        print(_fmt(profile))

    if args.no_plots:
        return 0

    outdir = Path(args.outdir)
    written = [
        plot_strength_by_depth(profile, outdir, baselines(df), show=args.show),
        plot_cost_vs_strength(df, outdir, show=args.show),
    ]
    for path in written:
        if path is not None:
            print(f"Saved {path}")
    return 0
