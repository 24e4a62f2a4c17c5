"""Search and evaluation engine for the Gobang computer player."""

from .candidates import candidate_moves, in_search_range
from .difficulty import (
    DEFAULT_DIFFICULTY,
    DIFFICULTIES,
    Difficulty,
    DifficultyRegistry,
    get_difficulty,
)
from .evaluation import LineRun, evaluate_board, evaluate_position, line_score, scan_line
from .opponent import AIOpponent, create_ai_opponent
from .search import SearchResult, SearchStats, choose_best_move, minimax

__all__ = [
    "candidate_moves",
    "in_search_range",
    "DEFAULT_DIFFICULTY",
    "DIFFICULTIES",
    "Difficulty",
    "DifficultyRegistry",
    "get_difficulty",
    "LineRun",
    "evaluate_board",
    "evaluate_position",
    "line_score",
    "scan_line",
    "AIOpponent",
    "create_ai_opponent",
    "SearchResult",
    "SearchStats",
    "choose_best_move",
    "minimax",
]
