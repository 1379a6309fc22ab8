"""A player's view of the cards between chance events."""

from __future__ import annotations

import random as _random
from collections.abc import Iterator
from dataclasses import dataclass

from .deck import Deck
from .hand import Hand
from .hands import HandIterator
from .street import Street
from .strength import Strength

SEPARATOR = "~"


def _shuffle_cards(text: str) -> str:
    """Shuffle the two-character card chunks of a run-together hand string."""
    cards = [text[i : i + 2] for i in range(0, len(text), 2)]
    _random.shuffle(cards)
    return "".join(cards)


@dataclass(frozen=True, order=True)
class Observation:
    """Pocket and public cards, each kept as an unordered hand."""

    pocket: Hand
    public: Hand

    def __post_init__(self) -> None:
        if self.pocket.size() != 2:
            raise ValueError("pocket must contain exactly two cards")
        if self.public.size() > 5:
            raise ValueError("public cards cannot exceed five")
        if self.pocket.bits & self.public.bits:
            raise ValueError("pocket and public cards overlap")

    def children(self) -> Iterator[Observation]:
        """Every observation reachable by dealing the next street's cards."""
        n = self.street().n_revealed()
        for reveal in HandIterator(n, self.hand()):
            yield Observation(self.pocket, self.public.add(reveal))

    def equity(self) -> float:
        """Share of non-tied showdowns won against every villain pocket on the river."""
        if self.street() is not Street.RIVE:
            raise ValueError("equity is only defined on the river")
        hand = self.hand()
        hero = Strength.from_hand(hand)
        won = total = 0
        for villain in HandIterator(2, hand):
            other = Strength.from_hand(self.public.add(villain))
            if hero > other:
                won += 1
                total += 1
            elif hero < other:
                total += 1
        return 0.5 if total == 0 else won / total

    def street(self) -> Street:
        return Street.from_card_count(self.public.size())

    def equivalent(self) -> str:
        """A random suit-relabelled, card-shuffled text form of this observation."""
        from .permutation import Permutation

        text = str(Permutation.random().permute(self))
        parts = (_shuffle_cards(part.strip()) for part in text.split(SEPARATOR))
        return SEPARATOR.join(parts)

    def hand(self) -> Hand:
        """Pocket and public cards together."""
        return self.pocket.add(self.public)

    def to_int(self) -> int:
        """Pack cards one per byte, public first, each stored as index + 1."""
        packed = 0
        for card in (*self.public, *self.pocket):
            packed = packed << 8 | (int(card) + 1)
        return packed

    @classmethod
    def from_int(cls, bits: int) -> Observation:
        """Inverse of :meth:`to_int`; the two lowest bytes are the pocket."""
        pocket = Hand.empty()
        public = Hand.empty()
        for i in range(8):
            shifted = bits >> (i * 8)
            if shifted <= 0:
                break
            card_index = (shifted & 0xFF) - 1
            single = Hand.from_bits(1 << card_index)
            if i < 2:
                pocket = pocket.add(single)
            else:
                public = public.add(single)
        return cls(pocket, public)

    @classmethod
    def from_street(cls, street: Street) -> Observation:
        """A random observation on the given street."""
        deck = Deck()
        public = Hand.empty()
        for _ in range(street.n_observed()):
            public = public.add(Hand.from_card(deck.draw()))
        pocket = Hand.empty()
        for _ in range(2):
            pocket = pocket.add(Hand.from_card(deck.draw()))
        return cls(pocket, public)

    @classmethod
    def parse(cls, text: str) -> Observation:
        """Parse 'pocket ~ public', e.g. '2c 3c ~ 4c 5c 6c'."""
        stripped = text.strip()
        pocket_text, _, public_text = stripped.partition(SEPARATOR)
        pocket = Hand.parse(pocket_text)
        public = Hand.parse(public_text)
        if pocket.size() != 2 or public.size() not in (0, 3, 4, 5):
            raise ValueError(f"invalid card counts: {pocket} {public}")
        return cls(pocket, public)

    @classmethod
    def random(cls) -> Observation:
        return cls.from_street(Street.random())

    def __str__(self) -> str:
        return f"{self.pocket} {SEPARATOR} {self.public}"