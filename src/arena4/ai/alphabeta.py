from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from arena4.config import SCORE_MAX, SCORE_MIN, SEARCH_DEPTH
from arena4.core.board import Board, place
from arena4.core.rules import is_winning, legal_moves
from arena4.core.scoring import evaluate
from arena4.types import Move, Stone

logger = logging.getLogger(__name__)

# RED maximizes, BLUE minimizes, whoever is searching.
MAX_STONE = Stone.RED


def _extreme(color: Stone) -> int:
    return SCORE_MAX if color is MAX_STONE else SCORE_MIN


@dataclass(slots=True)
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


@dataclass(frozen=True, slots=True)
class SearchResult:
    move: Optional[Move]
    score: int
    nodes: int = 0
    cutoffs: int = 0


def alphabeta(
    board: Board,
    to_move: Stone,
    depth: int,
    alpha: int = SCORE_MIN,
    beta: int = SCORE_MAX,
    stats: Optional[SearchStats] = None,
) -> int:
    """
    Fixed-depth alpha-beta over `board` with `to_move` on turn.

    Scores are always in RED's frame. Order of checks: a four for the side to
    move, then the depth cutoff, then a four for the other side, then a full
    board. Wins score SCORE_MAX/SCORE_MIN no matter how deep they are found.
    """
    if stats is not None:
        stats.nodes += 1

    if is_winning(board, to_move):
        return _extreme(to_move)
    if depth == 0:
        score = evaluate(board, to_move)
        return score if to_move is MAX_STONE else -score

    opp = to_move.opponent()
    if is_winning(board, opp):
        return _extreme(opp)
    if board.is_full():
        return 0

    maximizing = to_move is MAX_STONE
    for m in legal_moves(board):
        value = alphabeta(place(board, m, to_move), opp, depth - 1, alpha, beta, stats)
        if maximizing:
            alpha = max(alpha, value)
        else:
            beta = min(beta, value)
        if alpha >= beta:
            if stats is not None:
                stats.cutoffs += 1
            break

    return alpha if maximizing else beta


def search(
    board: Board,
    color: Stone,
    depth: int = SEARCH_DEPTH,
    alpha: int = SCORE_MIN,
    beta: int = SCORE_MAX,
) -> SearchResult:
    """
    Pick a move for `color`. Every root move is searched with the full `depth`
    budget below it.

    A move becomes the best only when its value strictly improves the bound,
    so among equal scores the lowest index wins. When no move improves the
    initial bound the first legal move is returned. `move` is None only if
    the board has no legal moves.
    """
    if depth < 0:
        raise ValueError("depth must be >= 0")

    moves = legal_moves(board)
    if not moves:
        return SearchResult(move=None, score=0)

    stats = SearchStats()
    opp = color.opponent()
    maximizing = color is MAX_STONE
    best_move: Optional[Move] = None

    for m in moves:
        value = alphabeta(place(board, m, color), opp, depth, alpha, beta, stats)
        if maximizing:
            if value > alpha:
                alpha = value
                best_move = m
        else:
            if value < beta:
                beta = value
                best_move = m
        if alpha >= beta:
            stats.cutoffs += 1
            break

    if best_move is None:
        best_move = moves[0]

    score = alpha if maximizing else beta
    logger.debug(
        "search color=%s depth=%d move=%s score=%d nodes=%d cutoffs=%d",
        color.name, depth, best_move, score, stats.nodes, stats.cutoffs,
    )
    return SearchResult(move=best_move, score=score, nodes=stats.nodes, cutoffs=stats.cutoffs)


def find_best_move(board: Board, color: Stone, depth: int = SEARCH_DEPTH) -> Optional[Move]:
    return search(board, color, depth).move
