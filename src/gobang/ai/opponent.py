"""AI opponent orchestration for Gobang."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

from ..board import Coordinate, Stone
from .difficulty import DEFAULT_DIFFICULTY, Difficulty, get_difficulty

if TYPE_CHECKING:  # pragma: no cover - circular import guard
    from ..game import Game


@dataclass
class AIOpponent:
    """Automates turns for a given difficulty and stone color."""

    difficulty: Difficulty
    player: Stone = Stone.WHITE

    def take_turn(self, game: "Game") -> Optional[Coordinate]:
        """Play the AI's move if it is the configured player's turn."""

        if game.is_finished or game.current_player is not self.player:
            return None
        if self.player is Stone.WHITE:
            return game.compute_ai_move(self.difficulty)
        return game.compute_assist_move(self.player, self.difficulty)


def create_ai_opponent(
    difficulty: str | int | Difficulty = DEFAULT_DIFFICULTY,
    player: Stone = Stone.WHITE,
) -> AIOpponent:
    """Factory helper resolving the difficulty tier by key or menu level."""

    return AIOpponent(difficulty=get_difficulty(difficulty), player=player)
