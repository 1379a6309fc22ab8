import pytest

from robopoker.board import Board
from robopoker.hand import Hand
from robopoker.street import Street


def test_empty_board_is_preflop():
    board = Board()
    assert board.street() == Street.PREF
    assert board.hand() == Hand.empty()


def test_streets_progress():
    board = Board()
    board.add(Hand.parse("2c 3d 4h"))
    assert board.street() == Street.FLOP
    board.add(Hand.parse("5s"))
    assert board.street() == Street.TURN
    board.add(Hand.parse("6c"))
    assert board.street() == Street.RIVE


def test_add_overlap_raises():
    board = Board(Hand.parse("2c 3d 4h"))
    with pytest.raises(ValueError):
        board.add(Hand.parse("2c"))


def test_clear():
    board = Board(Hand.parse("2c 3d 4h"))
    board.clear()
    assert board.hand() == Hand.empty()


def test_invalid_size_raises():
    board = Board(Hand.parse("2c 3d"))
    with pytest.raises(ValueError):
        board.hand()
    with pytest.raises(ValueError):
        board.street()


def test_string_round_trip():
    board = Board(Hand.parse("4h 2c 3d"))
    assert Hand.parse(str(board)) == board.hand()
    assert str(board).count(" ") == board.hand().size() - 1