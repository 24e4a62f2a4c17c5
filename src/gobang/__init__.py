"""Top-level package for the console Gobang game."""

from .board import Board, Coordinate, Stone
from .errors import GobangError, InvalidMoveError, NoCandidateMovesError
from .game import Game, MoveResult, WinCheck, new_game

__all__ = [
    "config",
    "board",
    "game",
    "controller",
    "Board",
    "Coordinate",
    "Stone",
    "GobangError",
    "InvalidMoveError",
    "NoCandidateMovesError",
    "Game",
    "MoveResult",
    "WinCheck",
    "new_game",
]
