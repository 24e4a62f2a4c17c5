"""Rendering helpers for the console UI."""

from __future__ import annotations

from typing import Iterable, List, Optional

from ..ai.difficulty import Difficulty
from ..board import Stone
from ..config import VERSION
from ..game import Game
from .coords import axis_labels
from .text_utils import center_to_width, display_width

RESET = "\033[0m"
BOLD = "\033[1m"
FG_RED = "\033[31m"
FG_YELLOW = "\033[33m"
FG_CYAN = "\033[36m"

CLEAR_SCREEN = "\033[H\033[J"
TITLE = "Gobang Game"


def render(
    game: Game,
    difficulty: Optional[Difficulty] = None,
    *,
    show_winning_line: bool = True,
    use_color: bool = True,
) -> str:
    """Return the full screen: title, board and the optional difficulty footer."""

    board_lines = [_render_header(game)] + list(
        _render_board(game, show_winning_line=show_winning_line, use_color=use_color)
    )
    width = max(display_width(line) for line in board_lines)

    lines: List[str] = [""]
    lines.extend(_render_title(width))
    lines.append("")
    lines.extend(board_lines)
    if difficulty is not None:
        lines.append("")
        lines.append(f"AI Difficulty {difficulty.display_name}")
    return "\n".join(lines)


def _render_title(width: int) -> List[str]:
    rule = "-" * len(TITLE)
    return [
        center_to_width(rule, width),
        center_to_width(TITLE, width),
        center_to_width(rule, width),
        center_to_width(f"v{VERSION}", width),
    ]


def _render_header(game: Game) -> str:
    return "  " + "".join(f"{label:>2}" for label in axis_labels(game.board.size))


def _render_board(game: Game, *, show_winning_line: bool, use_color: bool) -> Iterable[str]:
    labels = axis_labels(game.board.size)
    winning = set(game.winning_line or ()) if show_winning_line else set()
    last = game.last_move.coordinate if game.last_move else None
    for row_idx, row in enumerate(game.board.grid):
        cells: List[str] = []
        for col_idx, stone in enumerate(row):
            coord = (row_idx, col_idx)
            glyph = stone.glyph
            if use_color and coord in winning:
                glyph = _color(glyph, BOLD, FG_RED)
            elif use_color and coord == last and stone is not Stone.EMPTY:
                glyph = _color(glyph, BOLD, FG_YELLOW)
            cells.append(" " + glyph)
        yield f"{labels[row_idx]:>2}" + "".join(cells)


def render_status(message: str, use_color: bool = True) -> str:
    return _color(message, BOLD, FG_CYAN) if use_color else message


def _color(text: str, *codes: str) -> str:
    if not codes:
        return text
    prefix = "".join(codes)
    return f"{prefix}{text}{RESET}"
