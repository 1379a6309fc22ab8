"""Single playing cards."""

from __future__ import annotations

from dataclasses import dataclass

from .rank import Rank
from .suit import Suit


@dataclass(frozen=True, order=True)
class Card:
    """A card identified by its position 0..51 in a sorted deck (rank * 4 + suit)."""

    index: int

    def __post_init__(self) -> None:
        if not 0 <= self.index < 52:
            raise ValueError(f"card index out of range: {self.index}")

    def rank(self) -> Rank:
        return Rank(self.index // 4)

    def suit(self) -> Suit:
        return Suit(self.index % 4)

    @classmethod
    def from_rank_suit(cls, rank: Rank, suit: Suit) -> Card:
        return cls(int(rank) * 4 + int(suit))

    def to_bits32(self) -> int:
        """Rank bit in the low 13 bits, one suit bit in the next 4."""
        return self.rank().mask() | ((1 << 13) << int(self.suit()))

    @classmethod
    def from_bits32(cls, bits: int) -> Card:
        rank = Rank.from_mask(bits & 0xFFFF)
        suit_bits = bits >> 13
        if suit_bits <= 0:
            raise ValueError("no suit bit set")
        suit = Suit((suit_bits & -suit_bits).bit_length() - 1)
        return cls.from_rank_suit(rank, suit)

    def bit(self) -> int:
        """The single bit this card occupies in a 52-bit hand."""
        return 1 << self.index

    @classmethod
    def parse(cls, text: str) -> Card:
        """Parse two characters such as 'Ts' or 'a♠'."""
        token = text.strip()
        if len(token) != 2:
            raise ValueError("2 characters")
        return cls.from_rank_suit(Rank.parse(token[0]), Suit.parse(token[1]))

    def __int__(self) -> int:
        return self.index

    def __str__(self) -> str:
        return f"{self.rank()}{self.suit()}"