"""Heuristic scoring of stones and whole positions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from ..board import DIRECTIONS, Board, Coordinate, Stone
from ..config import WIN_SEQUENCE_LENGTH

# A fifth stone in either direction would already be a win.
_SCAN_STEPS = WIN_SEQUENCE_LENGTH - 1

FIVE_SCORE = 100_000
OPEN_FOUR_SCORE = 10_000
CLOSED_FOUR_SCORE = 1_000
OPEN_THREE_SCORE = 1_000
CLOSED_THREE_SCORE = 100
OPEN_TWO_SCORE = 100


@dataclass(frozen=True)
class LineRun:
    """Contiguous same-stone run through a cell along one axis."""

    count: int
    block: int

    @property
    def score(self) -> int:
        return line_score(self.count, self.block)


def line_score(count: int, block: int) -> int:
    if count >= WIN_SEQUENCE_LENGTH:
        return FIVE_SCORE
    if count == 4:
        if block == 0:
            return OPEN_FOUR_SCORE
        if block == 1:
            return CLOSED_FOUR_SCORE
    elif count == 3:
        if block == 0:
            return OPEN_THREE_SCORE
        if block == 1:
            return CLOSED_THREE_SCORE
    elif count == 2 and block == 0:
        return OPEN_TWO_SCORE
    return 0


def scan_line(board: Board, coord: Coordinate, stone: Stone, delta: Coordinate) -> LineRun:
    """Measure the run of ``stone`` through ``coord`` along ``delta``.

    Each direction is walked for at most four steps. An end is blocked when
    the walk leaves the board or meets the opponent before an empty cell.
    """

    count = 1
    block = 0
    for d_row, d_col in (delta, (-delta[0], -delta[1])):
        row, col = coord
        for _ in range(_SCAN_STEPS):
            row += d_row
            col += d_col
            if not (0 <= row < board.size and 0 <= col < board.size):
                block += 1
                break
            cell = board.grid[row][col]
            if cell is stone:
                count += 1
            elif cell is Stone.EMPTY:
                break
            else:
                block += 1
                break
    return LineRun(count=count, block=block)


def line_runs(board: Board, coord: Coordinate, stone: Stone) -> Tuple[LineRun, ...]:
    return tuple(scan_line(board, coord, stone, delta) for delta in DIRECTIONS)


def evaluate_position(board: Board, coord: Coordinate, stone: Stone) -> int:
    """Score the offensive potential of ``stone`` sitting at ``coord``."""

    return sum(run.score for run in line_runs(board, coord, stone))


def evaluate_board(board: Board) -> int:
    """Return the position score from White's point of view.

    White stones add their position score and Black stones subtract theirs,
    so positive values favour White. The whole board is rescored on each call.
    """

    score = 0
    for stone, coord in board.history:
        if stone is Stone.WHITE:
            score += evaluate_position(board, coord, stone)
        elif stone is Stone.BLACK:
            score -= evaluate_position(board, coord, stone)
    return score
