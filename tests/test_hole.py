import pytest

from robopoker.card import Card
from robopoker.hand import Hand
from robopoker.hole import Hole


def test_parse_two_cards():
    hole = Hole.parse("As Kd")
    assert hole.hand == Hand.parse("As Kd")


def test_parse_wrong_count_raises():
    with pytest.raises(ValueError):
        Hole.parse("As")
    with pytest.raises(ValueError):
        Hole.parse("As Kd Qh")


def test_from_cards_same_card_raises():
    card = Card.parse("As")
    with pytest.raises(ValueError):
        Hole.from_cards(card, card)


def test_from_cards_matches_parse():
    assert Hole.from_cards(Card.parse("Kd"), Card.parse("As")) == Hole.parse("As Kd")


def test_from_hand_wrong_size_raises():
    with pytest.raises(ValueError):
        Hole.from_hand(Hand.parse("As"))


def test_empty_hole():
    assert Hole.empty().hand.size() == 0


def test_string_round_trip():
    hole = Hole.parse("Kd As")
    assert str(hole) == str(hole.hand)
    assert Hole.parse(str(hole)) == hole