"""Betting rounds of a hold'em hand."""

from __future__ import annotations

import random as _random
from enum import IntEnum

_NAMES = {0: "preflop", 1: "flop", 2: "turn", 3: "river"}
_OBSERVED = {0: 0, 1: 3, 2: 4, 3: 5}
_REVEALED = {0: 3, 1: 1, 2: 1}
_CHILDREN = {0: 19_600, 1: 47, 2: 46}
_ISOMORPHISMS = {0: 169, 1: 1_286_792, 2: 13_960_050, 3: 123_156_254}
_OBSERVATIONS = {0: 1_326, 1: 25_989_600, 2: 305_377_800, 3: 2_809_475_760}
_BY_CARD_COUNT = {0: 0, 3: 1, 4: 2, 5: 3}
_LETTERS = {"P": 0, "F": 1, "T": 2, "R": 3}


class Street(IntEnum):
    """Preflop, flop, turn or river."""

    PREF = 0
    FLOP = 1
    TURN = 2
    RIVE = 3

    @classmethod
    def all(cls) -> tuple[Street, ...]:
        """All streets in order of play."""
        return tuple(cls)

    def next(self) -> Street:
        """The street that follows this one."""
        if self is Street.RIVE:
            raise ValueError("terminal")
        return Street(self.value + 1)

    def prev(self) -> Street:
        """The street that precedes this one."""
        if self is Street.PREF:
            raise ValueError("starting")
        return Street(self.value - 1)

    def n_observed(self) -> int:
        """Number of public cards visible on this street."""
        return _OBSERVED[self.value]

    def n_revealed(self) -> int:
        """Number of public cards dealt when moving to the next street."""
        if self is Street.RIVE:
            raise ValueError("terminal")
        return _REVEALED[self.value]

    def n_children(self) -> int:
        """Number of successor card states reachable from one observation."""
        if self is Street.RIVE:
            raise ValueError("terminal")
        return _CHILDREN[self.value]

    def n_isomorphisms(self) -> int:
        """Number of suit-canonical observations on this street."""
        return _ISOMORPHISMS[self.value]

    def n_observations(self) -> int:
        """Number of distinct observations on this street."""
        return _OBSERVATIONS[self.value]

    @classmethod
    def from_card_count(cls, n: int) -> Street:
        """Street with the given number of public cards."""
        try:
            return cls(_BY_CARD_COUNT[n])
        except KeyError:
            raise ValueError(f"no street has {n} public cards") from None

    @classmethod
    def from_bits(cls, obs: int) -> Street:
        """Street of a packed observation integer (one byte per card)."""
        count = 0
        for i in range(8):
            if obs >> (i * 8) <= 0:
                break
            count += 1
        return cls.from_card_count(max(count - 2, 0))

    @classmethod
    def parse(cls, text: str) -> Street:
        """Parse a street from its leading letter (P, F, T or R)."""
        head = text.upper()[:1]
        if head not in _LETTERS:
            raise ValueError("invalid street character")
        return cls(_LETTERS[head])

    @classmethod
    def random(cls) -> Street:
        """A uniformly chosen street."""
        return _random.choice(cls.all())

    def __str__(self) -> str:
        return _NAMES[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)