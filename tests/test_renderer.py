from gobang.ai.difficulty import HARD
from gobang.board import Stone
from gobang.config import VERSION
from gobang.game import Game
from gobang.ui.renderer import BOLD, FG_RED, FG_YELLOW, render
from gobang.ui.text_utils import strip_ansi


def test_render_shows_title_labels_and_stones() -> None:
    game = Game.new()
    game.apply_move((0, 0))
    game.apply_move((14, 14))

    lines = render(game, use_color=False).splitlines()

    assert any("Gobang Game" in line for line in lines)
    assert any(f"v{VERSION}" in line for line in lines)
    assert "  " + "".join(f" {label}" for label in "0123456789ABCDE") in lines
    assert " 0 ●" + " ·" * 14 in lines
    assert " E" + " ·" * 14 + " ○" in lines
    assert not any("AI Difficulty" in line for line in lines)


def test_render_shows_difficulty_footer() -> None:
    text = render(Game.new(), HARD, use_color=False)

    assert text.splitlines()[-1] == "AI Difficulty Hard"


def test_last_move_is_highlighted() -> None:
    game = Game.new()
    game.apply_move((7, 7))

    text = render(game)

    assert f"{BOLD}{FG_YELLOW}{Stone.BLACK.glyph}" in text


def test_winning_line_is_highlighted_and_can_be_hidden() -> None:
    game = Game.new()
    for col in range(5):
        game.apply_move((2, col), Stone.WHITE)

    shown = render(game)
    hidden = render(game, show_winning_line=False)

    assert shown.count(f"{BOLD}{FG_RED}{Stone.WHITE.glyph}") == 5
    assert FG_RED not in hidden
    assert strip_ansi(shown) == strip_ansi(hidden)
