"""Move generation limited to the neighbourhood of existing stones."""

from __future__ import annotations

from typing import List, Set

from ..board import Board, Coordinate, Stone
from ..config import SEARCH_RANGE


def candidate_moves(board: Board, search_range: int = SEARCH_RANGE) -> List[Coordinate]:
    """Return empty cells within ``search_range`` of any stone, row-major.

    An empty board yields no candidates; callers decide how to open the game.
    """

    size = board.size
    grid = board.grid
    seen: Set[Coordinate] = set()
    for row, col in board.occupied_cells():
        for nr in range(max(0, row - search_range), min(size, row + search_range + 1)):
            for nc in range(max(0, col - search_range), min(size, col + search_range + 1)):
                if grid[nr][nc] is Stone.EMPTY:
                    seen.add((nr, nc))
    return sorted(seen)


def in_search_range(board: Board, coord: Coordinate, search_range: int = SEARCH_RANGE) -> bool:
    """Return ``True`` when a stone lies within ``search_range`` of ``coord``."""

    row, col = coord
    for nr in range(row - search_range, row + search_range + 1):
        for nc in range(col - search_range, col + search_range + 1):
            stone = board.get((nr, nc))
            if stone is not None and stone is not Stone.EMPTY:
                return True
    return False
