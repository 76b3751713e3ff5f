from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from arena4 import config
from arena4.ai.pick import PLAYER_KINDS, make_player
from arena4.core.rules import IllegalMoveError
from arena4.game.arena import GameAborted, Renderer, play_game
from arena4.game.state import GameState
from arena4.types import Stone
from arena4.ui.colors import c, BOLD
from arena4.ui.effects import ai_thinking
from arena4.ui.human import HumanPlayer
from arena4.ui.render import render


def _renderer(red, blue, show_thinking: bool) -> Renderer:
    def _render(state: GameState, highlight: Optional[List[int]]) -> None:
        render(state, highlight)
        if highlight is not None or state.board.is_full():
            return
        player = red if state.current is Stone.RED else blue
        if show_thinking and not isinstance(player, HumanPlayer):
            ai_thinking(f"{player.name}")

    return _render


def build_argparser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="arena4", description="Connect Four on a 7x4 board.")
    ap.add_argument("--log-level", type=str, default=config.LOG_LEVEL, help="Logging level (DEBUG, INFO, ...)")

    sub = ap.add_subparsers(dest="cmd")

    play = sub.add_parser("play", help="Play a single game in the terminal")
    play.add_argument("--red", choices=PLAYER_KINDS, default="human", help="Who plays RED (moves first)")
    play.add_argument("--blue", choices=PLAYER_KINDS, default="alphabeta", help="Who plays BLUE")
    play.add_argument("--depth", type=int, default=config.SEARCH_DEPTH, help="Alpha-beta search depth")
    play.add_argument("--seed", type=int, default=None, help="Seed for random players")
    play.add_argument("--no-thinking", action="store_true", help="Disable the AI thinking spinner")

    league = sub.add_parser("league", help="Run a headless round-robin league")
    league.add_argument("--games-per-pair", type=int, default=2, help="Games per pairing (colors alternate)")
    league.add_argument("--seed", type=int, default=1234)
    league.add_argument("--max-workers", type=int, default=None)
    league.add_argument("--depths", type=int, nargs="+", default=[1, 3, 5], help="Alpha-beta depths in the roster")
    league.add_argument("--outdir", type=str, default=".", help="Where to write league_results_*.csv")
    league.add_argument("--no-csv", action="store_true")

    return ap


def run_play(args: argparse.Namespace) -> int:
    red = make_player(args.red, depth=args.depth, seed=args.seed)
    blue = make_player(args.blue, depth=args.depth, seed=None if args.seed is None else args.seed + 1)

    try:
        result = play_game(red, blue, render=_renderer(red, blue, not args.no_thinking))
    except GameAborted as e:
        print(f"\n{e} Game quit.")
        return 1
    except IllegalMoveError as e:
        print(f"\nIllegal move: {e}")
        return 2

    if result.is_draw:
        print(c("It's a DRAW.", BOLD))
    else:
        winner = red if result.winner is Stone.RED else blue
        print(c(f"Winner: {result.winner.name} ({winner.name})", BOLD))
    return 0


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    ap = build_argparser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, str(args.log_level).upper(), logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.cmd == "league":
        if any(d < 0 for d in args.depths):
            ap.error("--depths must be non-negative")

        from arena4.scripts.league import league_round_robin
        from arena4.scripts.league_roster import build_roster

        league_round_robin(
            build_roster(args.depths),
            games_per_pair=args.games_per_pair,
            seed=args.seed,
            max_workers=args.max_workers,
            export_dir=None if args.no_csv else args.outdir,
        )
        return 0

    if args.cmd is None:
        # bare `arena4` means `arena4 play`
        args = ap.parse_args([*argv, "play"])

    return run_play(args)


if __name__ == "__main__":
    raise SystemExit(main())
