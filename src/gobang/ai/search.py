"""Minimax search with alpha-beta pruning for choosing moves."""

from __future__ import annotations

import logging
import math
import time
from dataclasses import dataclass
from typing import Optional

from ..board import Board, Coordinate, Stone
from ..config import MAX_SEARCH_DEPTH
from .candidates import candidate_moves
from .evaluation import evaluate_board

logger = logging.getLogger(__name__)

# White maximises the board score, Black minimises it.
MAXIMIZING_STONE = Stone.WHITE
MINIMIZING_STONE = Stone.BLACK


@dataclass
class SearchStats:
    nodes: int = 0
    cutoffs: int = 0


@dataclass(frozen=True)
class SearchResult:
    """Outcome of a root search: the chosen move and how it was found."""

    move: Coordinate
    score: int
    depth: int
    nodes: int
    cutoffs: int
    elapsed: float


def minimax(
    board: Board,
    depth: int,
    alpha: float,
    beta: float,
    maximizing: bool,
    stats: Optional[SearchStats] = None,
) -> int:
    """Return the minimax value of ``board`` searched ``depth`` plies deep.

    Leaves are scored with :func:`evaluate_board`; wins are not detected at
    interior nodes, the heuristic rates them highly enough. Every trial stone
    is removed before this returns, so the board is left as it was found.
    """

    if stats is not None:
        stats.nodes += 1
    if depth <= 0 or depth >= MAX_SEARCH_DEPTH:
        return evaluate_board(board)

    moves = candidate_moves(board)
    if not moves:
        return evaluate_board(board)

    if maximizing:
        best = -math.inf
        for move in moves:
            with board.trial(move, MAXIMIZING_STONE):
                value = minimax(board, depth - 1, alpha, beta, False, stats)
            best = max(best, value)
            alpha = max(alpha, value)
            if beta <= alpha:
                if stats is not None:
                    stats.cutoffs += 1
                break
        return int(best)

    best = math.inf
    for move in moves:
        with board.trial(move, MINIMIZING_STONE):
            value = minimax(board, depth - 1, alpha, beta, True, stats)
        best = min(best, value)
        beta = min(beta, value)
        if beta <= alpha:
            if stats is not None:
                stats.cutoffs += 1
            break
    return int(best)


def choose_best_move(
    board: Board,
    depth: int,
    stone: Stone = MAXIMIZING_STONE,
) -> Optional[SearchResult]:
    """Search every candidate for ``stone`` and return the best one.

    White keeps the highest score and Black the lowest. Ties keep the first
    candidate in row-major order, which makes the choice deterministic.
    Returns ``None`` when there is nothing to search.
    """

    if stone is Stone.EMPTY:
        raise ValueError("Cannot search on behalf of an empty stone")
    if depth < 1 or depth > MAX_SEARCH_DEPTH:
        clamped = min(max(depth, 1), MAX_SEARCH_DEPTH)
        logger.warning("Search depth %d out of range, using %d", depth, clamped)
        depth = clamped

    moves = candidate_moves(board)
    if not moves:
        return None

    maximizing = stone is MAXIMIZING_STONE
    stats = SearchStats()
    started = time.perf_counter()

    best_move: Optional[Coordinate] = None
    best_score = 0
    for move in moves:
        with board.trial(move, stone):
            score = minimax(board, depth - 1, -math.inf, math.inf, not maximizing, stats)
        if best_move is None or (score > best_score if maximizing else score < best_score):
            best_move = move
            best_score = score

    assert best_move is not None
    elapsed = time.perf_counter() - started
    logger.debug(
        "%s search depth=%d candidates=%d nodes=%d cutoffs=%d best=%s score=%d in %.3fs",
        stone.label,
        depth,
        len(moves),
        stats.nodes,
        stats.cutoffs,
        best_move,
        best_score,
        elapsed,
    )
    return SearchResult(
        move=best_move,
        score=best_score,
        depth=depth,
        nodes=stats.nodes,
        cutoffs=stats.cutoffs,
        elapsed=elapsed,
    )
