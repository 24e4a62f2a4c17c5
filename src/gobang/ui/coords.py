"""Coordinate labels used by the console: rows and columns 0-9 then A-E."""

from __future__ import annotations

from typing import List

from ..board import Coordinate
from ..config import BOARD_SIZE

_DIGITS = "0123456789"


def axis_label(index: int) -> str:
    if 0 <= index < 10:
        return _DIGITS[index]
    return chr(ord("A") + index - 10)


def axis_labels(size: int = BOARD_SIZE) -> List[str]:
    return [axis_label(index) for index in range(size)]


def parse_axis(char: str, size: int = BOARD_SIZE) -> int:
    """Translate a single label character into an index, case-insensitively."""

    label = char.upper()
    if len(label) != 1:
        raise ValueError(f"Expected a single character, got {char!r}")
    if label in _DIGITS:
        index = int(label)
    elif "A" <= label <= "Z":
        index = 10 + ord(label) - ord("A")
    else:
        raise ValueError(f"Invalid coordinate {char!r}")
    if index >= size:
        raise ValueError(f"Coordinate {char!r} is outside the board")
    return index


def parse_coordinate(text: str, size: int = BOARD_SIZE) -> Coordinate:
    """Parse ``"7 A"`` or ``"7a"`` into ``(row, col)``."""

    chars = "".join(text.split())
    if len(chars) != 2:
        raise ValueError("Invalid input, please enter two characters")
    try:
        row = parse_axis(chars[0], size)
    except ValueError as exc:
        raise ValueError("Invalid row coordinate, please try again") from exc
    try:
        col = parse_axis(chars[1], size)
    except ValueError as exc:
        raise ValueError("Invalid column coordinate, please try again") from exc
    return (row, col)


def format_coordinate(coord: Coordinate) -> str:
    row, col = coord
    return f"{axis_label(row)} {axis_label(col)}"
