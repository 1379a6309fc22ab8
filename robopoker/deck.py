"""A deck from which cards are drawn at random."""

from __future__ import annotations

import random as _random

from .card import Card
from .hand import Hand
from .hole import Hole
from .street import Street


class Deck:
    """The cards not yet dealt; starts full unless given a hand."""

    def __init__(self, hand: Hand | None = None) -> None:
        self._hand = Hand.empty().complement() if hand is None else hand

    def __contains__(self, card: object) -> bool:
        return card in self._hand

    def __len__(self) -> int:
        return self._hand.size()

    def draw(self) -> Card:
        """Remove and return a random card."""
        cards = self._hand.cards()
        if not cards:
            raise ValueError("deck is empty")
        card = _random.choice(cards)
        self._hand = self._hand.without(card)
        return card

    def deal(self, street: Street) -> Hand:
        """Draw the public cards revealed when leaving ``street``."""
        hand = Hand.empty()
        for _ in range(street.n_revealed()):
            hand = hand.add(Hand.from_card(self.draw()))
        return hand

    def hole(self) -> Hole:
        """Draw two cards as a player's pocket."""
        first = self.draw()
        second = self.draw()
        return Hole.from_cards(first, second)

    def hand(self) -> Hand:
        """The cards remaining in the deck."""
        return self._hand