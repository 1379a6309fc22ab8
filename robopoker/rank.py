"""Card ranks."""

from __future__ import annotations

from enum import IntEnum

_RANK_MASK = 0b1111111111111
_SYMBOLS = "23456789TJQKA"


class Rank(IntEnum):
    """Card rank from Two up to Ace."""

    TWO = 0
    THREE = 1
    FOUR = 2
    FIVE = 3
    SIX = 4
    SEVEN = 5
    EIGHT = 6
    NINE = 7
    TEN = 8
    JACK = 9
    QUEEN = 10
    KING = 11
    ACE = 12

    @classmethod
    def lo(cls, bits: int) -> Rank:
        """Rank of the lowest set bit of a 52-bit card set."""
        if bits <= 0:
            raise ValueError("no cards in bit set")
        lowest = (bits & -bits).bit_length() - 1
        return cls(lowest // 4)

    @classmethod
    def hi(cls, bits: int) -> Rank:
        """Rank of the highest set bit of a 52-bit card set."""
        if bits <= 0:
            raise ValueError("no cards in bit set")
        return cls((bits.bit_length() - 1) // 4)

    @classmethod
    def from_mask(cls, bits: int) -> Rank:
        """Highest rank present in a 13-bit rank mask."""
        masked = bits & _RANK_MASK
        if masked == 0:
            raise ValueError("empty rank mask")
        return cls(masked.bit_length() - 1)

    def mask(self) -> int:
        """Single-bit 13-bit rank mask."""
        return 1 << self.value

    def nibble(self) -> int:
        """The four card bits of this rank in a 52-bit hand."""
        return 0xF << (self.value * 4)

    @classmethod
    def parse(cls, text: str) -> Rank:
        """Parse a rank symbol such as 'T' or 'a'."""
        key = text.strip().upper()
        if len(key) != 1 or key not in _SYMBOLS:
            raise ValueError(f"invalid rank str: {text}")
        return cls(_SYMBOLS.index(key))

    def __str__(self) -> str:
        return _SYMBOLS[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)