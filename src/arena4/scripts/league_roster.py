from __future__ import annotations

from functools import partial
from typing import List, Sequence

from arena4.ai.pick import make_player

from .league_types import Team


def build_roster(depths: Sequence[int] = (1, 3, 5)) -> List[Team]:
    teams: List[Team] = [
        Team("Random", partial(make_player, "random", seed=0)),
        Team("Greedy", partial(make_player, "greedy")),
    ]
    # repeated depths would give two teams the same name
    for d in dict.fromkeys(depths):
        teams.append(Team(f"AlphaBeta d{d}", partial(make_player, "alphabeta", depth=d)))
    return teams
