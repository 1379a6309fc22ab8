import pytest

from robopoker.evaluator import Evaluator
from robopoker.hand import Hand
from robopoker.strength import Strength


def strength(text):
    return Strength.from_hand(Hand.parse(text))


def test_fields_match_evaluator():
    hand = Hand.parse("As Ah Kd Qc Js")
    evaluator = Evaluator(hand)
    ranking = evaluator.find_ranking()
    result = Strength.from_hand(hand)
    assert result.value == ranking
    assert result.kicks == evaluator.find_kickers(ranking)


@pytest.mark.parametrize(
    "better, worse",
    [
        ("As Ks Qs Js 9s", "Ts Jh Qd Kc As"),
        ("As Ah Kd Qc Js", "Ks Kh Ad Qc Js"),
        ("As Ah Kd Qc Js", "As Ah Qd Jc 9s"),
        ("As Ah Ad Ac 2s", "Ks Kh Kd Qc Qs"),
        ("Ts Js Qs Ks As", "As Ah Ad Ac Ks"),
        ("2s 3h 4d 5c 6s", "As 2h 3d 4c 5s"),
    ],
)
def test_ordering(better, worse):
    assert strength(better) > strength(worse)
    assert strength(worse) < strength(better)


def test_suit_symmetric_hands_tie():
    assert strength("As Ah Kd Qc Js") == strength("Ad Ac Kh Qs Jd")


def test_board_cards_below_five_best_are_irrelevant():
    assert strength("As Kh Qd Jc 9s 3d 2c") == strength("As Kh Qd Jc 9s 4d 3c")


def test_display_starts_with_category():
    text = str(strength("2s 2h 2d 3c 3s"))
    assert text.startswith("FullHouse")
    assert len(text) >= 18 + 5


def test_display_includes_kickers():
    result = strength("As Ah Ad Kc Qs")
    assert str(result).endswith(str(result.kicks))
    assert str(result).startswith("ThreeOfAKind")


def test_empty_hand_raises():
    with pytest.raises(ValueError):
        Strength.from_hand(Hand.empty())