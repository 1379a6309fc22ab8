"""A player's two pocket cards."""

from __future__ import annotations

from dataclasses import dataclass

from .card import Card
from .hand import Hand


@dataclass(frozen=True, order=True)
class Hole:
    """Two private cards held as a hand."""

    hand: Hand

    @classmethod
    def empty(cls) -> Hole:
        return cls(Hand.empty())

    @classmethod
    def from_hand(cls, hand: Hand) -> Hole:
        if hand.size() != 2:
            raise ValueError("hand must contain exactly two cards")
        return cls(hand)

    @classmethod
    def from_cards(cls, first: Card, second: Card) -> Hole:
        if first == second:
            raise ValueError("hole cards must differ")
        return cls(Hand.from_cards((first, second)))

    @classmethod
    def parse(cls, text: str) -> Hole:
        return cls.from_hand(Hand.parse(text))

    def __str__(self) -> str:
        return str(self.hand)