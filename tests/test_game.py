import pytest

from gobang.ai.difficulty import EASY
from gobang.ai.opponent import create_ai_opponent
from gobang.board import Stone
from gobang.errors import InvalidMoveError, NoCandidateMovesError
from gobang.game import Game, WinCheck, new_game


def draw_pattern(row: int, col: int) -> Stone:
    """Fill pattern whose longest run on any axis is two stones."""

    return Stone.BLACK if (col // 2 + row) % 2 == 0 else Stone.WHITE


def test_new_game_starts_empty_with_black_to_move() -> None:
    game = new_game(15)

    assert game.board.size == 15
    assert game.board.is_vacant()
    assert game.current_player is Stone.BLACK
    assert not game.is_finished
    assert game.center == (7, 7)


def test_apply_move_passes_the_turn() -> None:
    game = Game.new()

    result = game.apply_move((7, 7))

    assert result.stone is Stone.BLACK
    assert not result.produced_win
    assert game.board.get((7, 7)) is Stone.BLACK
    assert game.current_player is Stone.WHITE
    assert game.last_move == result
    assert game.move_count == 1


@pytest.mark.parametrize("coord", [(-1, 3), (15, 15), (3, 20)])
def test_out_of_bounds_move_is_rejected_without_side_effects(coord) -> None:
    game = Game.new()

    with pytest.raises(InvalidMoveError):
        game.apply_move(coord)

    assert game.board.is_vacant()
    assert game.current_player is Stone.BLACK
    assert game.moves == []


def test_occupied_cell_is_rejected() -> None:
    game = Game.new()
    game.apply_move((7, 7))

    with pytest.raises(InvalidMoveError):
        game.apply_move((7, 7))

    assert game.board.get((7, 7)) is Stone.BLACK
    assert game.current_player is Stone.WHITE
    assert not game.is_valid_move((7, 7))
    assert game.is_valid_move((7, 8))


def test_first_move_is_not_a_win() -> None:
    game = Game.new()
    game.apply_move((7, 7), Stone.BLACK)

    assert game.check_win((7, 7)) == WinCheck(won=False, line=None)


def test_five_in_a_row_wins_and_ends_the_game() -> None:
    game = Game.new()
    for col in range(3, 7):
        game.apply_move((7, col), Stone.BLACK)

    result = game.apply_move((7, 7), Stone.BLACK)

    expected_line = ((7, 3), (7, 4), (7, 5), (7, 6), (7, 7))
    assert game.check_win((7, 7)) == WinCheck(won=True, line=expected_line)
    assert result.produced_win
    assert game.winner is Stone.BLACK
    assert game.winning_line == expected_line
    assert game.is_finished
    with pytest.raises(InvalidMoveError):
        game.apply_move((0, 0))


def test_full_board_without_five_is_a_draw() -> None:
    game = Game.new()
    size = game.board.size

    for row in range(size):
        for col in range(size):
            assert not game.is_board_full()
            game.apply_move((row, col), draw_pattern(row, col))
            assert not game.check_win((row, col)).won

    assert game.move_count == 225
    assert game.is_board_full()
    assert game.draw
    assert game.winner is None
    assert game.last_move is not None and game.last_move.produced_draw


def test_full_board_has_no_ai_move() -> None:
    game = Game.new()
    for row in range(game.board.size):
        for col in range(game.board.size):
            game.board.place_stone((row, col), draw_pattern(row, col))

    with pytest.raises(NoCandidateMovesError):
        game.compute_ai_move("easy")
    with pytest.raises(NoCandidateMovesError):
        game.compute_assist_move(Stone.BLACK)


def test_ai_opens_at_center_on_empty_board() -> None:
    game = Game.new()
    game.current_player = Stone.WHITE

    coord = game.compute_ai_move("hard")

    assert coord == (7, 7)
    assert game.board.get(coord) is Stone.WHITE
    assert game.current_player is Stone.BLACK


def test_assist_opens_at_center_on_empty_board() -> None:
    game = Game.new(size=9)

    coord = game.compute_assist_move()

    assert coord == (4, 4)
    assert game.board.get(coord) is Stone.BLACK
    assert game.current_player is Stone.WHITE


def test_ai_move_is_applied_and_near_the_action() -> None:
    game = Game.new()
    game.apply_move((7, 7))

    coord = game.compute_ai_move(EASY)

    row, col = coord
    assert max(abs(row - 7), abs(col - 7)) <= 2
    assert game.board.get(coord) is Stone.WHITE
    assert game.move_count == 2
    assert game.last_move is not None and game.last_move.coordinate == coord


def test_ai_takes_the_winning_cell() -> None:
    game = Game.new()
    for coord in [(3, 2), (9, 9), (10, 10), (11, 12)]:
        game.board.place_stone(coord, Stone.BLACK)
    for col in range(3, 7):
        game.board.place_stone((3, col), Stone.WHITE)
    game.current_player = Stone.WHITE

    coord = game.compute_ai_move("easy")

    assert coord == (3, 7)
    assert game.winner is Stone.WHITE


def test_assist_move_plays_for_the_requested_side() -> None:
    game = Game.new()
    for col in range(1, 5):
        game.board.place_stone((5, col), Stone.WHITE)
    game.board.place_stone((5, 0), Stone.BLACK)
    game.board.place_stone((6, 3), Stone.BLACK)

    coord = game.compute_assist_move(Stone.BLACK, difficulty="easy")

    assert coord == (5, 5)
    assert game.board.get((5, 5)) is Stone.BLACK


def test_undo_restores_previous_state() -> None:
    game = Game.new()
    for col in range(3, 8):
        game.apply_move((7, col), Stone.BLACK)
    assert game.winner is Stone.BLACK

    undone = game.undo()

    assert undone.coordinate == (7, 7)
    assert game.winner is None
    assert game.winning_line is None
    assert game.current_player is Stone.BLACK
    assert game.board.is_empty((7, 7))
    assert game.last_move is not None and game.last_move.coordinate == (7, 6)


def test_undo_without_moves_raises() -> None:
    with pytest.raises(InvalidMoveError):
        Game.new().undo()


def test_reset_starts_over() -> None:
    game = Game.new()
    game.apply_move((7, 7))
    game.apply_move((7, 8))

    game.reset()

    assert game.board.is_vacant()
    assert game.current_player is Stone.BLACK
    assert game.last_move is None
    assert game.moves == []


def test_ai_opponent_only_moves_on_its_turn() -> None:
    game = Game.new()
    opponent = create_ai_opponent("easy")

    assert opponent.take_turn(game) is None

    game.apply_move((7, 7))
    coord = opponent.take_turn(game)

    assert coord is not None
    assert game.board.get(coord) is Stone.WHITE
    assert game.current_player is Stone.BLACK
