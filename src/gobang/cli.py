"""Command-line entry point for the console Gobang game."""

from __future__ import annotations

import argparse
import logging
import time
from typing import List, Optional

from .ai.difficulty import DEFAULT_DIFFICULTY, DIFFICULTIES, Difficulty, get_difficulty
from .ai.opponent import create_ai_opponent
from .board import Stone
from .config import AUTHOR, EMAIL, FLASH_COUNT, FLASH_INTERVAL_SEC, VERSION, WEBSITE
from .controller import Command, Controller
from .game import Game
from .ui.coords import format_coordinate
from .ui.input import confirm
from .ui.renderer import CLEAR_SCREEN, render, render_status

logger = logging.getLogger(__name__)

MODE_PVP = "pvp"
MODE_PVAI = "pvai"

VERSION_TEXT = (
    f"Gobang Game Version {VERSION}\n"
    f"Author: {AUTHOR}\n"
    f"Email: {EMAIL}\n"
    f"Website: {WEBSITE}"
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gobang",
        description=(
            "Console five-in-a-row on a 15x15 board, against a friend or a "
            "minimax AI with three difficulty levels."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-v", "--version", action="version", version=VERSION_TEXT)
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "-1",
        dest="mode",
        action="store_const",
        const=MODE_PVAI,
        help="start directly in player vs AI mode",
    )
    mode.add_argument(
        "-2",
        dest="mode",
        action="store_const",
        const=MODE_PVP,
        help="start directly in player vs player mode",
    )
    parser.add_argument(
        "--difficulty",
        choices=list(DIFFICULTIES.keys()),
        help="AI difficulty; implies player vs AI mode",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="logging verbosity (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:  # pragma: no cover - interactive loop
    """Launch the interactive Gobang game."""

    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    mode = args.mode
    if mode is None and args.difficulty:
        mode = MODE_PVAI
    if mode is None:
        mode = _prompt_mode()

    difficulty: Optional[Difficulty] = None
    if mode == MODE_PVAI:
        if args.difficulty:
            difficulty = get_difficulty(args.difficulty)
        elif args.mode == MODE_PVAI:
            difficulty = DEFAULT_DIFFICULTY
        else:
            difficulty = _prompt_difficulty()
    logger.info("Starting %s game (difficulty=%s)", mode, difficulty.key if difficulty else "-")

    game = Game.new()
    controller = Controller(
        game,
        opponent=create_ai_opponent(difficulty) if difficulty else None,
        assist_difficulty=difficulty or DEFAULT_DIFFICULTY,
    )

    while True:
        if not _play_one_game(controller, difficulty):
            print("Game over.")
            return 0
        try:
            again = confirm("Play again? (y/n): ")
        except (EOFError, KeyboardInterrupt):
            again = False
        if not again:
            break
        game.reset()

    print("Thanks for playing, goodbye!")
    return 0


def _play_one_game(controller: Controller, difficulty: Optional[Difficulty]) -> bool:  # pragma: no cover
    """Run turns until the game ends. Returns ``False`` when the player quits."""

    game = controller.game
    message: Optional[str] = None
    while not game.is_finished:
        _redraw(game, difficulty)
        if message:
            print(message)
            message = None

        if controller.opponent is not None and game.current_player is controller.opponent.player:
            coord = controller.run_ai_turn()
            if coord is not None:
                message = f"AI placed a move at {format_coordinate(coord)}"
            continue

        print(f"Player {game.current_player.label}")
        try:
            text = input(
                f"Enter move position, '{Command.HINT}' for a hint, "
                f"'{Command.UNDO}' to undo, or '{Command.QUIT}' to quit: "
            )
        except EOFError:
            return False
        if text.strip().lower() == Command.QUIT:
            return False
        try:
            coord = controller.handle_input(text)
        except ValueError as exc:
            message = str(exc)
            continue
        if coord is not None and text.strip() == Command.HINT:
            message = f"Hint played at {format_coordinate(coord)}"

    _flash_winning_line(game, difficulty)
    print(render_status(outcome_message(game, controller.opponent is not None)))
    return True


def outcome_message(game: Game, against_ai: bool) -> str:
    if game.winner is None:
        return "It's a draw!"
    if against_ai and game.winner is Stone.WHITE:
        return "AI wins!"
    return f"Player {game.winner.label} wins!"


def _redraw(game: Game, difficulty: Optional[Difficulty], show_winning_line: bool = True) -> None:  # pragma: no cover
    print(CLEAR_SCREEN, end="")
    print(render(game, difficulty, show_winning_line=show_winning_line))


def _flash_winning_line(game: Game, difficulty: Optional[Difficulty]) -> None:  # pragma: no cover
    if game.winning_line:
        for _ in range(FLASH_COUNT):
            _redraw(game, difficulty, show_winning_line=False)
            time.sleep(FLASH_INTERVAL_SEC)
            _redraw(game, difficulty)
            time.sleep(FLASH_INTERVAL_SEC)
    else:
        _redraw(game, difficulty)


def _prompt_mode() -> str:  # pragma: no cover - interactive prompt
    while True:
        print("Select game mode:\n1. Player vs Player\n2. Player vs AI")
        try:
            choice = input().strip()
        except EOFError:
            choice = "2"
        if choice == "1":
            return MODE_PVP
        if choice == "2":
            return MODE_PVAI
        print("Invalid choice, please try again.")


def _prompt_difficulty() -> Difficulty:  # pragma: no cover - interactive prompt
    menu = "\n".join(f"{tier.level}. {tier.display_name}" for tier in DIFFICULTIES)
    while True:
        print(f"Select AI difficulty:\n{menu}")
        try:
            choice = input().strip()
        except EOFError:
            return DEFAULT_DIFFICULTY
        try:
            return get_difficulty(int(choice) if choice.isdigit() else choice)
        except KeyError:
            print("Invalid choice, please try again.")


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
