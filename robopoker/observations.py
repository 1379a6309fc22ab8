"""Enumeration of every observation on a street."""

from __future__ import annotations

from collections.abc import Iterator

from .hand import Hand
from .hands import HandIterator
from .observation import Observation
from .street import Street

# 2c 2d: the first pocket in enumeration order.
_START_POCKET = Hand.from_bits(0x3)


class ObservationIterator(Iterator[Observation]):
    """Yields every (pocket, public) observation on a street.

    Pockets are enumerated in ascending bit order; for each pocket, every
    public board of the street's size that avoids it follows in the same order.
    """

    def __init__(self, street: Street) -> None:
        self._street = street
        self._pocket = _START_POCKET
        self._inner = HandIterator(street.n_observed(), self._pocket)
        self._outer = HandIterator(2, Hand.empty())
        if street is not Street.PREF:
            next(self._outer)

    def combinations(self) -> int:
        """Number of observations counted from the iterator's current state."""
        return self._outer.combinations() * self._inner.combinations()

    def street(self) -> Street:
        return self._street

    def __iter__(self) -> ObservationIterator:
        return self

    def __next__(self) -> Observation:
        public = next(self._inner, None)
        if public is not None:
            return Observation(self._pocket, public)
        pocket = next(self._outer)
        self._pocket = pocket
        if self._street is Street.PREF:
            return Observation(pocket, Hand.empty())
        self._inner = HandIterator(self._street.n_observed(), pocket)
        public = next(self._inner, None)
        if public is None:
            raise StopIteration
        return Observation(pocket, public)

    def __length_hint__(self) -> int:
        return self.combinations()