"""Unordered sets of cards packed into a 52-bit integer."""

from __future__ import annotations

import random as _random
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .card import Card
from .rank import Rank
from .suit import Suit

FULL_MASK = 0x000FFFFFFFFFFFFF


@dataclass(frozen=True, order=True)
class Hand:
    """A set of cards; bit ``i`` is set when the card with index ``i`` is present."""

    bits: int = 0

    def __post_init__(self) -> None:
        if self.bits < 0 or self.bits & ~FULL_MASK:
            raise ValueError(f"hand bits outside the deck: {self.bits:#x}")

    @classmethod
    def empty(cls) -> Hand:
        return cls(0)

    @classmethod
    def from_bits(cls, bits: int) -> Hand:
        """Build a hand from an integer, dropping bits outside the deck."""
        return cls(bits & FULL_MASK)

    @classmethod
    def from_card(cls, card: Card) -> Hand:
        return cls(card.bit())

    @classmethod
    def from_cards(cls, cards: Iterable[Card]) -> Hand:
        bits = 0
        for card in cards:
            bits |= card.bit()
        return cls(bits)

    @classmethod
    def parse(cls, text: str) -> Hand:
        """Parse whitespace-separated tokens of two-character cards.

        A token may hold several cards run together ("AsKd"). Tokens that do not
        parse as cards are skipped; repeated cards collapse into one.
        """
        cards: list[Card] = []
        for token in text.split():
            chunks = [token[i : i + 2] for i in range(0, len(token), 2)]
            try:
                parsed = [Card.parse(chunk) for chunk in chunks]
            except ValueError:
                continue
            cards.extend(parsed)
        return cls.from_cards(cards)

    @classmethod
    def random(cls) -> Hand:
        """A uniformly random subset of the deck."""
        return cls.from_bits(_random.getrandbits(64))

    def add(self, other: Hand) -> Hand:
        """Union of two hands that must not share a card."""
        if self.bits & other.bits:
            raise ValueError("hands overlap")
        return Hand(self.bits | other.bits)

    def __or__(self, other: Hand) -> Hand:
        return Hand(self.bits | other.bits)

    def complement(self) -> Hand:
        """Every card of the deck not in this hand."""
        return Hand(self.bits ^ FULL_MASK)

    def size(self) -> int:
        return bin(self.bits).count("1")

    def of(self, suit: Suit) -> Hand:
        """The cards of this hand belonging to one suit."""
        return Hand.from_bits(self.bits & suit.mask())

    def min_rank(self) -> Rank | None:
        return Rank.lo(self.bits) if self.bits else None

    def max_rank(self) -> Rank | None:
        return Rank.hi(self.bits) if self.bits else None

    def without(self, card: Card) -> Hand:
        """This hand with one card removed (if present)."""
        return Hand(self.bits & ~card.bit())

    def cards(self) -> list[Card]:
        """The cards in ascending order."""
        return list(self)

    def rank_mask(self) -> int:
        """13-bit mask of the ranks present, regardless of suit."""
        mask = 0
        for rank in Rank:
            if self.bits & rank.nibble():
                mask |= rank.mask()
        return mask

    def __iter__(self) -> Iterator[Card]:
        bits = self.bits
        while bits:
            lowest = bits & -bits
            yield Card(lowest.bit_length() - 1)
            bits ^= lowest

    def __contains__(self, card: object) -> bool:
        return isinstance(card, Card) and bool(self.bits & card.bit())

    def __int__(self) -> int:
        return self.bits

    def __str__(self) -> str:
        return "".join(str(card) for card in self)