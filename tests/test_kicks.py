from robopoker.kicks import Kickers
from robopoker.rank import Rank


def test_ranks_roundtrip():
    ranks = [Rank.THREE, Rank.NINE, Rank.KING]
    assert Kickers.from_ranks(ranks).ranks() == ranks


def test_ranks_sorted_ascending():
    kickers = Kickers.from_ranks([Rank.ACE, Rank.TWO, Rank.JACK])
    assert kickers.ranks() == [Rank.TWO, Rank.JACK, Rank.ACE]


def test_duplicates_collapse():
    assert Kickers.from_ranks([Rank.ACE, Rank.ACE]) == Kickers.from_ranks([Rank.ACE])


def test_empty():
    assert Kickers.from_ranks([]) == Kickers()
    assert Kickers().ranks() == []
    assert str(Kickers()) == ""


def test_int_matches_masks():
    kickers = Kickers.from_ranks([Rank.FIVE, Rank.QUEEN])
    assert int(kickers) == Rank.FIVE.mask() | Rank.QUEEN.mask()


def test_higher_kicker_wins():
    high = Kickers.from_ranks([Rank.KING, Rank.TWO])
    low = Kickers.from_ranks([Rank.QUEEN, Rank.JACK])
    assert low < high


def test_display():
    assert str(Kickers.from_ranks([Rank.KING, Rank.QUEEN])) == "Q K "