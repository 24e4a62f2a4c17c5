"""Board model and win detection for Gobang."""

from __future__ import annotations

from contextlib import contextmanager
from dataclasses import dataclass, field
from enum import Enum
from typing import Iterable, Iterator, List, Optional, Tuple

from .config import BLACK_STONE, BOARD_SIZE, EMPTY_CELL, WHITE_STONE, WIN_SEQUENCE_LENGTH
from .errors import InvalidMoveError

Coordinate = Tuple[int, int]
WinningLine = Tuple[Coordinate, ...]
Grid = Tuple[Tuple["Stone", ...], ...]

# Horizontal, vertical, diagonal, anti-diagonal.
DIRECTIONS: Tuple[Coordinate, ...] = ((0, 1), (1, 0), (1, 1), (1, -1))


class Stone(Enum):
    EMPTY = 0
    BLACK = 1
    WHITE = 2

    @property
    def glyph(self) -> str:
        if self is Stone.BLACK:
            return BLACK_STONE
        if self is Stone.WHITE:
            return WHITE_STONE
        return EMPTY_CELL

    @property
    def label(self) -> str:
        return self.name.title()

    @property
    def opponent(self) -> "Stone":
        if self is Stone.EMPTY:
            raise ValueError("An empty cell has no opponent")
        return Stone.WHITE if self is Stone.BLACK else Stone.BLACK


MoveRecord = Tuple[Stone, Coordinate]


@dataclass
class Board:
    """A square Gobang board with placement history and win detection."""

    size: int = BOARD_SIZE
    win_length: int = WIN_SEQUENCE_LENGTH
    grid: List[List[Stone]] = field(init=False)
    history: List[MoveRecord] = field(default_factory=list)

    def __post_init__(self) -> None:
        if self.size <= 0:
            raise ValueError("Board size must be positive")
        if self.win_length <= 1:
            raise ValueError("Win length must be greater than 1")
        self.grid = [[Stone.EMPTY for _ in range(self.size)] for _ in range(self.size)]

    # ---------------------------------------------------------------------
    # Query helpers
    # ---------------------------------------------------------------------
    def is_within_bounds(self, coord: Coordinate) -> bool:
        """Return ``True`` if the coordinate lies inside the board."""

        row, col = coord
        return 0 <= row < self.size and 0 <= col < self.size

    def get(self, coord: Coordinate) -> Optional[Stone]:
        """Return the stone at the coordinate or ``None`` when out of bounds."""

        if not self.is_within_bounds(coord):
            return None
        row, col = coord
        return self.grid[row][col]

    def is_empty(self, coord: Coordinate) -> bool:
        """Return ``True`` when the cell is inside the board and empty."""

        return self.get(coord) is Stone.EMPTY

    def is_full(self) -> bool:
        """Return ``True`` when no empty cells remain on the board."""

        return len(self.history) == self.size * self.size

    def is_vacant(self) -> bool:
        """Return ``True`` when no stone has been placed yet."""

        return not self.history

    @property
    def stone_count(self) -> int:
        return len(self.history)

    def occupied_cells(self) -> Iterable[Coordinate]:
        """Iterate over coordinates holding stones, in placement order."""

        for _, coord in self.history:
            yield coord

    def snapshot(self) -> Grid:
        """Return an immutable copy of the grid."""

        return tuple(tuple(row) for row in self.grid)

    # ---------------------------------------------------------------------
    # Mutation helpers
    # ---------------------------------------------------------------------
    def place_stone(self, coord: Coordinate, stone: Stone) -> None:
        """Place ``stone`` at ``coord``.

        Raises :class:`InvalidMoveError` for coordinates outside the board,
        occupied cells, or an ``EMPTY`` stone. The board is left untouched
        when the move is rejected.
        """

        if stone is Stone.EMPTY:
            raise InvalidMoveError("Cannot place an empty stone")
        if not self.is_within_bounds(coord):
            raise InvalidMoveError(f"Position {coord} is outside the board")
        if not self.is_empty(coord):
            raise InvalidMoveError(f"Position {coord} is already occupied")

        row, col = coord
        self.grid[row][col] = stone
        self.history.append((stone, coord))

    def remove_stone(self, coord: Coordinate) -> Stone:
        """Remove the stone at ``coord`` and return it.

        Raises :class:`InvalidMoveError` when the coordinate is out of bounds
        or empty. The move history is updated accordingly.
        """

        if not self.is_within_bounds(coord):
            raise InvalidMoveError(f"Position {coord} is outside the board")

        row, col = coord
        stone = self.grid[row][col]
        if stone is Stone.EMPTY:
            raise InvalidMoveError(f"Position {coord} holds no stone")

        self.grid[row][col] = Stone.EMPTY
        for index in range(len(self.history) - 1, -1, -1):
            if self.history[index][1] == coord:
                self.history.pop(index)
                break
        return stone

    @contextmanager
    def trial(self, coord: Coordinate, stone: Stone) -> Iterator[None]:
        """Place ``stone`` for the duration of the block, then take it back.

        The stone is removed even when the block exits early or raises, so a
        search never leaves a speculative stone behind.
        """

        self.place_stone(coord, stone)
        try:
            yield
        finally:
            self.remove_stone(coord)

    def reset(self) -> None:
        """Reset the board to its initial empty state."""

        for row in self.grid:
            for col in range(self.size):
                row[col] = Stone.EMPTY
        self.history.clear()

    # ---------------------------------------------------------------------
    # Win detection
    # ---------------------------------------------------------------------
    def check_win(self, coord: Coordinate) -> bool:
        """Return ``True`` if the stone at ``coord`` completes a winning line."""

        return self.winning_line(coord) is not None

    def winning_line(self, coord: Coordinate) -> Optional[WinningLine]:
        """Return the cells of the line completed by the stone at ``coord``.

        Only the four axes through ``coord`` are inspected, since the last
        move is the only one able to create a new line. The result holds
        exactly ``win_length`` cells ordered along the axis, or ``None``.
        """

        stone = self.get(coord)
        if stone is None or stone is Stone.EMPTY:
            return None

        for delta in DIRECTIONS:
            forward = self._collect_in_direction(coord, stone, delta)
            backward = self._collect_in_direction(coord, stone, (-delta[0], -delta[1]))
            if 1 + len(forward) + len(backward) < self.win_length:
                continue
            cells = [coord, *forward, *backward][: self.win_length]
            d_row, d_col = delta
            cells.sort(key=lambda cell: cell[0] * d_row + cell[1] * d_col)
            return tuple(cells)
        return None

    def _collect_in_direction(
        self, coord: Coordinate, stone: Stone, delta: Coordinate
    ) -> List[Coordinate]:
        cells: List[Coordinate] = []
        row, col = coord
        d_row, d_col = delta
        while True:
            row += d_row
            col += d_col
            if not (0 <= row < self.size and 0 <= col < self.size):
                break
            if self.grid[row][col] is not stone:
                break
            cells.append((row, col))
        return cells
