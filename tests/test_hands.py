from robopoker.hand import Hand
from robopoker.hands import HandIterator


def test_n_choose_0():
    assert sum(1 for _ in HandIterator(0, Hand.empty())) == 0


def test_n_choose_1():
    assert sum(1 for _ in HandIterator(1, Hand.empty())) == Hand.empty().complement().size()


def test_n_choose_2():
    assert sum(1 for _ in HandIterator(2, Hand.empty())) == 1326


def test_n_choose_0_mask_4():
    assert sum(1 for _ in HandIterator(0, Hand.from_bits(0xF))) == 0


def test_n_choose_1_mask_4():
    assert sum(1 for _ in HandIterator(1, Hand.from_bits(0xF))) == 48


def test_n_choose_2_mask_4():
    assert sum(1 for _ in HandIterator(2, Hand.from_bits(0xF))) == 1128


def test_choose_3():
    it = HandIterator(3, Hand.empty())
    expected = [0b00111, 0b01011, 0b01101, 0b01110, 0b10011,
                0b10101, 0b10110, 0b11001, 0b11010, 0b11100]
    for bits in expected:
        assert next(it) == Hand.from_bits(bits)


def test_choose_3_from_5():
    mask = Hand.from_bits(0b1111_00_1).complement()
    it = HandIterator(3, mask)
    expected = [0b0011_00_1, 0b0101_00_1, 0b0110_00_1, 0b0111_00_0, 0b1001_00_1,
                0b1010_00_1, 0b1011_00_0, 0b1100_00_1, 0b1101_00_0, 0b1110_00_0]
    assert list(it) == [Hand.from_bits(bits) for bits in expected]


def test_combinations_match_count():
    it = HandIterator(2, Hand.from_bits(0xF))
    assert it.combinations() == 1128
    assert it.combinations() == len(list(HandIterator(2, Hand.from_bits(0xF))))


def test_hands_avoid_mask_and_have_size():
    mask = Hand.parse("As Kd Qh")
    for hand in HandIterator(2, mask):
        assert hand.size() == 2
        assert int(hand) & int(mask) == 0