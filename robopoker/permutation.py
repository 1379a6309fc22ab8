"""Relabelling of suits, used to canonicalise observations."""

from __future__ import annotations

import random as _random
from dataclasses import dataclass
from functools import lru_cache
from itertools import permutations

from .hand import Hand
from .observation import Observation
from .suit import Suit


def _rank_key(rank) -> int:
    return -1 if rank is None else int(rank)


def _order_key(entry: tuple[Suit, Hand, Hand]) -> tuple[int, ...]:
    suit, pocket, public = entry
    return (
        pocket.size(),
        public.size(),
        _rank_key(pocket.min_rank()),
        _rank_key(public.min_rank()),
        _rank_key(pocket.max_rank()),
        _rank_key(public.max_rank()),
        int(suit),
    )


@lru_cache(maxsize=1)
def _all_permutations() -> tuple[Permutation, ...]:
    return tuple(Permutation(p) for p in permutations(Suit.all()))


@dataclass(frozen=True)
class Permutation:
    """Maps clubs, diamonds, hearts, spades to ``suits[0..3]`` respectively."""

    suits: tuple[Suit, Suit, Suit, Suit]

    def __post_init__(self) -> None:
        suits = tuple(Suit(s) for s in self.suits)
        if sorted(suits) != list(Suit.all()):
            raise ValueError("a permutation must use every suit exactly once")
        object.__setattr__(self, "suits", suits)

    @classmethod
    def from_observation(cls, observation: Observation) -> Permutation:
        """The permutation taking an observation to its canonical form.

        Suits are ordered by pocket count, public count, lowest and highest ranks,
        with suit order breaking ties; the i-th suit in that order maps to Suit(i).
        """
        entries = sorted(
            (
                (suit, observation.pocket.of(suit), observation.public.of(suit))
                for suit in Suit.all()
            ),
            key=_order_key,
        )
        mapping = [Suit.C] * 4
        for target, (suit, _, _) in enumerate(entries):
            mapping[suit] = Suit(target)
        return cls(tuple(mapping))

    def permute(self, observation: Observation) -> Observation:
        """Apply the permutation to both pocket and public cards."""
        return Observation(self.image(observation.pocket), self.image(observation.public))

    def image(self, hand: Hand) -> Hand:
        """The hand with each card's suit relabelled."""
        result = Hand.empty()
        for suit in Suit.all():
            result = result.add(self._shift(suit, hand))
        return result

    def _shift(self, suit: Suit, hand: Hand) -> Hand:
        shift = int(self.map(suit)) - int(suit)
        cards = suit.mask() & int(hand)
        if shift >= 0:
            return Hand.from_bits(cards << shift)
        return Hand.from_bits(cards >> -shift)

    def map(self, suit: Suit) -> Suit:
        """The image of one suit."""
        return self.suits[suit]

    @classmethod
    def identity(cls) -> Permutation:
        return cls(Suit.all())

    @classmethod
    def exhaust(cls) -> tuple[Permutation, ...]:
        """All 24 suit permutations in lexicographic order."""
        return _all_permutations()

    @classmethod
    def random(cls) -> Permutation:
        return _random.choice(cls.exhaust())

    def __str__(self) -> str:
        return "".join(f"{suit} -> {self.map(suit)}\n" for suit in Suit.all())