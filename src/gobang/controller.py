"""Controller responsible for interpreting player commands."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Optional

from .ai.difficulty import DEFAULT_DIFFICULTY, Difficulty
from .ai.opponent import AIOpponent
from .board import Coordinate
from .errors import InvalidMoveError
from .game import Game
from .ui.coords import parse_coordinate


class Command:
    QUIT = "q"
    UNDO = "u"
    HINT = "?"
    RESET = "r"


@dataclass
class Controller:
    """Translate typed commands into game actions.

    Anything that is not a command is read as a ``row col`` coordinate and
    played for the side to move.
    """

    game: Game
    opponent: Optional[AIOpponent] = None
    assist_difficulty: Difficulty = DEFAULT_DIFFICULTY

    def __post_init__(self) -> None:
        self._handlers: Dict[str, Callable[[], Optional[Coordinate]]] = {
            Command.UNDO: self.undo,
            Command.HINT: self.assist,
            Command.RESET: self.reset,
        }

    def handle_input(self, text: str) -> Optional[Coordinate]:
        """Run one command and return the coordinate played, if any.

        Raises :class:`ValueError` (including :class:`InvalidMoveError`) for
        unreadable input or illegal moves; the game is unchanged then.
        """

        command = text.strip().lower()
        handler = self._handlers.get(command)
        if handler is not None:
            return handler()
        if self.game.is_finished:
            raise InvalidMoveError("The game is already over")

        coord = parse_coordinate(command, self.game.board.size)
        self.game.apply_move(coord)
        return coord

    def assist(self) -> Coordinate:
        return self.game.compute_assist_move(difficulty=self.assist_difficulty)

    def undo(self) -> None:
        """Take back the last move, or the last pair when playing the AI."""

        self.game.undo()
        if self.opponent is not None and self.game.current_player is self.opponent.player and self.game.moves:
            self.game.undo()

    def reset(self) -> None:
        self.game.reset()

    def run_ai_turn(self) -> Optional[Coordinate]:
        if self.opponent is None:
            return None
        return self.opponent.take_turn(self.game)
