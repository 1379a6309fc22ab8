import pytest

from robopoker.rank import Rank


def test_bijective_u8():
    rank = Rank.FIVE
    assert Rank(int(rank)) == rank


def test_bijective_u16():
    rank = Rank.FIVE
    assert Rank.from_mask(rank.mask()) == rank


def test_injective_u64():
    assert Rank.FIVE.nibble() == 0b1111000000000000


@pytest.mark.parametrize("rank", list(Rank))
def test_mask_roundtrip_all(rank):
    assert Rank.from_mask(rank.mask()) == rank


def test_from_mask_takes_highest():
    assert Rank.from_mask(Rank.TWO.mask() | Rank.KING.mask()) == Rank.KING


def test_from_mask_empty():
    with pytest.raises(ValueError):
        Rank.from_mask(0)


def test_lo_and_hi():
    bits = Rank.THREE.nibble() | Rank.QUEEN.nibble()
    assert Rank.lo(bits) == Rank.THREE
    assert Rank.hi(bits) == Rank.QUEEN


def test_lo_empty():
    with pytest.raises(ValueError):
        Rank.lo(0)


@pytest.mark.parametrize("rank", list(Rank))
def test_parse_roundtrip(rank):
    assert Rank.parse(str(rank)) == rank


def test_parse_lowercase():
    assert Rank.parse("a") == Rank.ACE
    assert Rank.parse("t") == Rank.TEN


def test_parse_invalid():
    with pytest.raises(ValueError):
        Rank.parse("1")