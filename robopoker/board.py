"""The public cards on the table."""

from __future__ import annotations

from .hand import Hand
from .street import Street


class Board:
    """Community cards, filled street by street."""

    def __init__(self, hand: Hand | None = None) -> None:
        self._hand = Hand.empty() if hand is None else hand

    def add(self, hand: Hand) -> None:
        """Place more cards on the board; they must not already be there."""
        self._hand = self._hand.add(hand)

    def clear(self) -> None:
        self._hand = Hand.empty()

    def street(self) -> Street:
        return Street.from_card_count(self._hand.size())

    def hand(self) -> Hand:
        """The board as a hand; only 0, 3, 4 or 5 cards form a valid board."""
        size = self._hand.size()
        if size in (1, 2) or size > 5:
            raise ValueError(f"invalid board size: {size}")
        return self._hand

    def __str__(self) -> str:
        return " ".join(str(card) for card in self._hand)