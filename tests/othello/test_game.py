import pytest

from reversi.othello.board import Board, InvalidMove, InvalidPosition
from reversi.othello.game import Game
from reversi.othello.piece import Color

EMPTY_ROW = "........"


@pytest.fixture
def one_pass_game() -> Game:
    # After black plays c1 white is stuck, while black can still play c8
    board = Board.from_rows(["BW......"] + [EMPTY_ROW] * 6 + ["BW......"])
    return Game(board, Color.BLACK)


@pytest.fixture
def last_move_game() -> Game:
    board = Board.from_rows(["BWW....."] + [EMPTY_ROW] * 7)
    return Game(board, Color.BLACK)


def test_new_game() -> None:
    game = Game()
    assert game.turn == Color.BLACK
    assert game.moves == []
    assert game.valid_moves() == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert not game.is_over()
    assert game.winner() is None
    assert game.score() == {Color.BLACK: 2, Color.WHITE: 2}


def test_play_switches_turn() -> None:
    game = Game()
    game.play([2, 3])

    assert game.turn == Color.WHITE
    assert game.moves == [(2, 3)]
    assert game.valid_moves() == [(2, 2), (2, 4), (4, 2)]
    assert game.score() == {Color.BLACK: 4, Color.WHITE: 1}


def test_play_invalid_move_keeps_turn() -> None:
    game = Game()

    with pytest.raises(InvalidMove):
        game.play((0, 0))

    assert game.turn == Color.BLACK
    assert game.moves == []


def test_play_invalid_position() -> None:
    with pytest.raises(InvalidPosition):
        Game().play((8, 8))


def test_from_fields() -> None:
    game = Game.from_fields(["d3", "c3"])

    assert game.moves == [(2, 3), (2, 2)]
    assert game.turn == Color.BLACK


@pytest.mark.parametrize(
    ["fields", "error"],
    [
        pytest.param(["a1"], InvalidMove, id="illegal"),
        pytest.param(["d3", "d3"], InvalidMove, id="occupied"),
        pytest.param(["z9"], ValueError, id="malformed"),
    ],
)
def test_from_fields_error(fields: list[str], error: type[Exception]) -> None:
    with pytest.raises(error):
        Game.from_fields(fields)


def test_automatic_pass(one_pass_game: Game) -> None:
    one_pass_game.play((0, 2))

    assert one_pass_game.turn == Color.BLACK
    assert one_pass_game.moves == [(0, 2), None]
    assert one_pass_game.passed_last()
    assert not one_pass_game.is_over()


def test_pass_turn_not_allowed() -> None:
    game = Game()

    with pytest.raises(InvalidMove):
        game.pass_turn()

    assert game.turn == Color.BLACK


def test_pass_turn_game_over() -> None:
    game = Game(Board.from_rows(["BBBBWWWW"] * 8))

    with pytest.raises(InvalidMove):
        game.pass_turn()

    assert game.turn == Color.BLACK
    assert game.moves == []


def test_pass_on_creation() -> None:
    board = Board.from_rows(["BW......"] + [EMPTY_ROW] * 7)
    game = Game(board, Color.WHITE)

    assert game.turn == Color.BLACK
    assert game.moves == [None]


def test_game_end(last_move_game: Game) -> None:
    last_move_game.play((0, 3))

    assert last_move_game.is_over()
    assert not last_move_game.passed_last()
    assert last_move_game.winner() == Color.BLACK
    assert last_move_game.score() == {Color.BLACK: 4, Color.WHITE: 0}


def test_game_draw() -> None:
    game = Game(Board.from_rows(["BBBBWWWW"] * 8))

    assert game.is_over()
    assert game.winner() is None
    assert game.moves == []
