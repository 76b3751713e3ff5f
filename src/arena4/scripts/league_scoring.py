from __future__ import annotations

import math

from .league_types import Agg


def ppg(a: Agg) -> float:
    return (a.points / a.games) if a.games else 0.0


def avg_ms_per_move(a: Agg) -> float:
    return (a.time_ms / a.moves) if a.moves else 0.0


def wilson_lcb(p: float, n: int, z: float) -> float:
    """Lower bound of the Wilson score interval for a success rate `p` over `n` games."""
    if n <= 0:
        return 0.0
    p = min(1.0, max(0.0, p))
    z2 = z * z
    spread = z * math.sqrt(p * (1.0 - p) / n + z2 / (4.0 * n * n))
    return max(0.0, (p + z2 / (2.0 * n) - spread) / (1.0 + z2 / n))


def strength_score(a: Agg, z: float) -> float:
    """Points-per-game, discounted for small samples."""
    return wilson_lcb(ppg(a), a.games, z)
