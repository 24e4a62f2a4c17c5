"""Difficulty tiers for the computer opponent."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from ..config import EASY_DEPTH, HARD_DEPTH, MEDIUM_DEPTH


@dataclass(frozen=True)
class Difficulty:
    """A named search-depth bound, chosen once before a game starts."""

    key: str
    display_name: str
    level: int
    search_depth: int


@dataclass(frozen=True)
class DifficultyRegistry:
    """Collection of difficulty tiers with lookups by key or menu level."""

    tiers: tuple[Difficulty, ...] = field(default_factory=tuple)
    _by_key: Dict[str, Difficulty] = field(init=False, repr=False)
    _by_level: Dict[int, Difficulty] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_by_key", {tier.key: tier for tier in self.tiers})
        object.__setattr__(self, "_by_level", {tier.level: tier for tier in self.tiers})

    def get(self, identifier: str | int) -> Difficulty:
        if isinstance(identifier, int):
            tier = self._by_level.get(identifier)
        else:
            tier = self._by_key.get(identifier.strip().lower())
        if tier is None:
            raise KeyError(f"Unknown difficulty: {identifier!r}")
        return tier

    def __iter__(self):
        return iter(self.tiers)

    def keys(self):
        return self._by_key.keys()


EASY = Difficulty(key="easy", display_name="Easy", level=1, search_depth=EASY_DEPTH)
MEDIUM = Difficulty(key="medium", display_name="Medium", level=2, search_depth=MEDIUM_DEPTH)
HARD = Difficulty(key="hard", display_name="Hard", level=3, search_depth=HARD_DEPTH)

DIFFICULTIES = DifficultyRegistry((EASY, MEDIUM, HARD))
DEFAULT_DIFFICULTY = MEDIUM


def get_difficulty(identifier: str | int | Difficulty) -> Difficulty:
    """Resolve a tier from its key, menu level, or an existing tier."""

    if isinstance(identifier, Difficulty):
        return identifier
    return DIFFICULTIES.get(identifier)
