"""Test the search-depth report over league CSVs."""

from __future__ import annotations

import math
from pathlib import Path

import matplotlib

matplotlib.use("Agg")

import pandas as pd
import pytest

from arena4_analysis.cli.report import main as report_main
from arena4_analysis.io.league_csv import latest_league_csv, player_kind, read_league_csv, search_depth
from arena4_analysis.metrics.depth import baselines, depth_profile, standings
from arena4_analysis.plots.chart import plot_cost_vs_strength, plot_strength_by_depth


def _write(path: Path, rows: dict) -> Path:
    pd.DataFrame(rows).to_csv(path, index=False)
    return path


@pytest.fixture
def league_csv(tmp_path: Path) -> Path:
    return _write(
        tmp_path / "league_results_20260101_000000.csv",
        {
            "name": ["Random", "Greedy", "AlphaBeta d1", "AlphaBeta d3"],
            "games": [6, 6, 6, 6],
            "wins": [0, 2, 3, 5],
            "draws": [1, 0, 1, 0],
            "losses": [5, 4, 2, 1],
            "points": [0.5, 2.0, 3.5, 5.0],
            "ppg": [0.083, 0.333, 0.583, 0.833],
            "strength_wilson_lcb": [0.02, 0.2, 0.3, 0.6],
            "avg_ms_per_move": [0.1, 0.1, 0.8, 12.5],
            "moves": [30, 28, 40, 30],
            "time_ms": [3, 3, 32, 375],
            "nodes": [0, 0, 400, 6000],
        },
    )


@pytest.mark.parametrize(
    "name, kind, depth",
    [
        ("AlphaBeta d5", "alphabeta", 5.0),
        ("AlphaBeta d12", "alphabeta", 12.0),
        ("Greedy", "greedy", None),
        ("Random", "random", None),
        ("AlphaBeta", "other", None),
        ("Human", "other", None),
    ],
)
def test_roster_names(name: str, kind: str, depth: float | None) -> None:
    assert player_kind(name) == kind
    if depth is None:
        assert math.isnan(search_depth(name))
    else:
        assert search_depth(name) == depth


def test_read_adds_derived_columns(league_csv: Path) -> None:
    df = read_league_csv(league_csv)
    assert list(df["kind"]) == ["random", "greedy", "alphabeta", "alphabeta"]
    assert list(df["nodes_per_move"]) == [0.0, 0.0, 10.0, 200.0]
    assert df["depth"].iloc[3] == 3.0


def test_nodes_per_move_without_moves(tmp_path: Path) -> None:
    path = _write(tmp_path / "l.csv", {"name": ["AlphaBeta d2"], "moves": [0], "nodes": [0]})
    assert math.isnan(read_league_csv(path)["nodes_per_move"].iloc[0])


def test_read_errors(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        read_league_csv(tmp_path / "missing.csv")
    with pytest.raises(FileNotFoundError):
        latest_league_csv(tmp_path)
    with pytest.raises(ValueError, match="name"):
        read_league_csv(_write(tmp_path / "bad.csv", {"games": [1]}))


def test_latest_csv(league_csv: Path) -> None:
    newer = league_csv.with_name("league_results_20270101_000000.csv")
    newer.write_text(league_csv.read_text())
    assert latest_league_csv(league_csv.parent) == newer


def test_standings_order(league_csv: Path) -> None:
    df = read_league_csv(league_csv)
    table = standings(df)
    assert list(table["name"]) == ["AlphaBeta d3", "AlphaBeta d1", "Greedy", "Random"]
    assert list(table["rk"]) == [1, 2, 3, 4]
    assert "nodes_per_move" in table.columns
    assert standings(df, min_games=7).empty


def test_depth_profile(league_csv: Path) -> None:
    prof = depth_profile(read_league_csv(league_csv))
    assert list(prof["depth"]) == [1, 3]
    assert list(prof["nodes_per_move"]) == [10.0, 200.0]
    assert math.isnan(prof["strength_gain"].iloc[0])
    assert prof["strength_gain"].iloc[1] == pytest.approx(0.3)
    assert prof["node_growth"].iloc[1] == pytest.approx(20.0)


def test_depth_profile_without_searchers(tmp_path: Path) -> None:
    path = _write(tmp_path / "l.csv", {"name": ["Random", "Greedy"], "strength_wilson_lcb": [0.1, 0.4]})
    df = read_league_csv(path)
    assert depth_profile(df).empty
    assert baselines(df) == {"Random": 0.1, "Greedy": 0.4}
    assert plot_strength_by_depth(depth_profile(df), tmp_path, show=False) is None


def test_charts_written(league_csv: Path, tmp_path: Path) -> None:
    df = read_league_csv(league_csv)
    outdir = tmp_path / "figs"
    curve = plot_strength_by_depth(depth_profile(df), outdir, baselines(df), show=False)
    cost = plot_cost_vs_strength(df, outdir, show=False)
    assert curve == outdir / "strength_by_depth.png" and curve.exists()
    assert cost == outdir / "cost_vs_strength.png" and cost.exists()


def test_report_cli(league_csv: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    outdir = tmp_path / "out"
    rc = report_main(["--results-dir", str(league_csv.parent), "--outdir", str(outdir)])
    assert rc == 0
    out = capsys.readouterr().out
    assert "By search depth" in out
    assert "AlphaBeta d3" in out
    assert sorted(p.name for p in outdir.glob("*.png")) == ["cost_vs_strength.png", "strength_by_depth.png"]


def test_report_cli_no_plots(league_csv: Path, tmp_path: Path) -> None:
    outdir = tmp_path / "out"
    assert report_main(["--csv", str(league_csv), "--outdir", str(outdir), "--no-plots"]) == 0
    assert not outdir.exists()
