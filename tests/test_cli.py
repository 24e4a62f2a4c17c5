import pytest

from gobang.board import Stone
from gobang.cli import MODE_PVAI, MODE_PVP, build_parser, outcome_message
from gobang.config import VERSION
from gobang.game import Game


def test_default_arguments() -> None:
    args = build_parser().parse_args([])

    assert args.mode is None
    assert args.difficulty is None
    assert args.log_level == "WARNING"


def test_mode_flags() -> None:
    parser = build_parser()

    assert parser.parse_args(["-1"]).mode == MODE_PVAI
    assert parser.parse_args(["-2"]).mode == MODE_PVP
    assert parser.parse_args(["--difficulty", "hard"]).difficulty == "hard"


def test_mode_flags_are_exclusive() -> None:
    with pytest.raises(SystemExit):
        build_parser().parse_args(["-1", "-2"])


def test_unknown_argument_is_rejected() -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["-x"])

    assert excinfo.value.code == 2


def test_version_flag_prints_project_information(capsys) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["-v"])

    out = capsys.readouterr().out
    assert excinfo.value.code == 0
    assert f"Gobang Game Version {VERSION}" in out
    assert "Website:" in out


def test_outcome_messages() -> None:
    game = Game.new()
    assert outcome_message(game, against_ai=True) == "It's a draw!"

    game.winner = Stone.WHITE
    assert outcome_message(game, against_ai=True) == "AI wins!"
    assert outcome_message(game, against_ai=False) == "Player White wins!"

    game.winner = Stone.BLACK
    assert outcome_message(game, against_ai=True) == "Player Black wins!"
