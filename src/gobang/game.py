"""Game engine for Gobang turn management and rules enforcement."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from .ai.difficulty import Difficulty, get_difficulty
from .ai.search import choose_best_move
from .board import Board, Coordinate, Stone, WinningLine
from .config import BOARD_SIZE
from .errors import InvalidMoveError, NoCandidateMovesError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MoveResult:
    coordinate: Coordinate
    stone: Stone
    winning_line: Optional[WinningLine]
    produced_draw: bool

    @property
    def produced_win(self) -> bool:
        return self.winning_line is not None


@dataclass(frozen=True)
class WinCheck:
    won: bool
    line: Optional[WinningLine] = None


@dataclass
class Game:
    """State manager for a two-player Gobang match.

    Black always opens. The computer plays White when a game is against the
    AI, but any side can ask the search for a move through
    :meth:`compute_assist_move`.
    """

    board: Board = field(default_factory=Board)
    current_player: Stone = Stone.BLACK
    last_move: Optional[MoveResult] = None
    winner: Optional[Stone] = None
    winning_line: Optional[WinningLine] = None
    draw: bool = False
    moves: List[MoveResult] = field(default_factory=list)

    @classmethod
    def new(cls, size: int = BOARD_SIZE) -> "Game":
        return cls(board=Board(size=size))

    # ------------------------------------------------------------------
    # Move application
    # ------------------------------------------------------------------
    def is_valid_move(self, coord: Coordinate) -> bool:
        return not self.is_finished and self.board.is_empty(coord)

    def apply_move(self, coord: Coordinate, stone: Optional[Stone] = None) -> MoveResult:
        """Place a stone for ``stone`` (default: the side to move) at ``coord``.

        Raises :class:`InvalidMoveError` when the coordinate is off the board,
        the cell is taken, or the game is over; nothing changes in that case.
        """

        if self.is_finished:
            raise InvalidMoveError("The game is already over")
        if stone is None:
            stone = self.current_player
        self.board.place_stone(coord, stone)

        line = self.board.winning_line(coord)
        produced_draw = line is None and self.board.is_full()
        if line is not None:
            self.winner = stone
            self.winning_line = line
            logger.info("%s wins with %s", stone.label, list(line))
        elif produced_draw:
            self.draw = True
            logger.info("Board is full, game drawn after %d moves", self.move_count)

        result = MoveResult(
            coordinate=coord,
            stone=stone,
            winning_line=line,
            produced_draw=produced_draw,
        )
        self.last_move = result
        self.moves.append(result)
        self.current_player = stone.opponent
        return result

    def check_win(self, coord: Coordinate) -> WinCheck:
        line = self.board.winning_line(coord)
        return WinCheck(won=line is not None, line=line)

    def is_board_full(self) -> bool:
        return self.board.is_full()

    def compute_ai_move(self, difficulty: str | int | Difficulty) -> Coordinate:
        """Search for White at the tier's depth and play the chosen move."""

        tier = get_difficulty(difficulty)
        coord = self._search_move(Stone.WHITE, tier.search_depth)
        self.apply_move(coord, Stone.WHITE)
        return coord

    def compute_assist_move(
        self,
        stone: Optional[Stone] = None,
        difficulty: str | int | Difficulty = "medium",
    ) -> Coordinate:
        """Suggest and play a move on behalf of a human side."""

        if stone is None:
            stone = self.current_player
        tier = get_difficulty(difficulty)
        coord = self._search_move(stone, tier.search_depth)
        self.apply_move(coord, stone)
        return coord

    def undo(self) -> MoveResult:
        """Take back the most recent move and hand the turn back to its player."""

        if not self.moves:
            raise InvalidMoveError("There is no move to undo")
        result = self.moves.pop()
        self.board.remove_stone(result.coordinate)
        self.current_player = result.stone
        self.last_move = self.moves[-1] if self.moves else None
        self.winner = None
        self.winning_line = None
        self.draw = False
        return result

    # ------------------------------------------------------------------
    # Status helpers
    # ------------------------------------------------------------------
    @property
    def is_finished(self) -> bool:
        return self.winner is not None or self.draw

    @property
    def move_count(self) -> int:
        return self.board.stone_count

    @property
    def center(self) -> Coordinate:
        middle = self.board.size // 2
        return (middle, middle)

    def reset(self) -> None:
        self.board.reset()
        self.current_player = Stone.BLACK
        self.last_move = None
        self.winner = None
        self.winning_line = None
        self.draw = False
        self.moves.clear()

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    def _search_move(self, stone: Stone, depth: int) -> Coordinate:
        if self.board.is_full():
            raise NoCandidateMovesError("The board is full")
        if self.is_finished:
            raise InvalidMoveError("The game is already over")
        if self.board.is_vacant():
            logger.debug("Empty board, %s opens at the center", stone.label)
            return self.center

        # A board holding both a stone and an empty cell always has a stone
        # next to an empty cell, so the search has candidates from here on.
        result = choose_best_move(self.board, depth, stone)
        if result is None:  # pragma: no cover - guarded by the checks above
            raise NoCandidateMovesError("The search found no move")
        return result.move


def new_game(size: int = BOARD_SIZE) -> Game:
    """Return a fresh game on an empty ``size`` x ``size`` board."""

    return Game.new(size)
