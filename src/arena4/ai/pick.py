from __future__ import annotations

from typing import Optional

from arena4.config import SEARCH_DEPTH

PLAYER_KINDS = ("human", "alphabeta", "greedy", "random")


def make_player(kind: str, *, depth: int = SEARCH_DEPTH, seed: Optional[int] = None):
    """
    Build a fresh player by kind name. Imports are local so the league
    workers only load what they use.
    """
    kind = kind.lower()

    if kind == "alphabeta":
        from arena4.ai.alphabeta_player import AlphaBetaPlayer
        return AlphaBetaPlayer(name=f"AlphaBeta d{depth}", depth=depth)

    if kind == "greedy":
        from arena4.ai.greedy_player import GreedyPlayer
        return GreedyPlayer()

    if kind == "random":
        from arena4.ai.random_player import RandomPlayer
        return RandomPlayer(seed=seed)

    if kind == "human":
        from arena4.ui.human import HumanPlayer
        return HumanPlayer()

    raise ValueError(f"Unknown player kind {kind!r}. Choose from {', '.join(PLAYER_KINDS)}.")
