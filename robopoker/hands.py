"""Enumeration of every hand of a given size that avoids a set of cards."""

from __future__ import annotations

from collections.abc import Iterator
from math import comb

from .hand import Hand


def _next_permutation(x: int) -> int:
    """Next larger integer with the same number of set bits."""
    a = x | (x - 1)
    b = a + 1
    d = ~a & b
    e = d - 1
    f = (x & -x).bit_length()
    return b | (e >> f)


class HandIterator(Iterator[Hand]):
    """Yields, in ascending bit order, every ``n``-card hand disjoint from ``mask``."""

    def __init__(self, n: int, mask: Hand | None = None) -> None:
        self._mask = 0 if mask is None else int(mask)
        self._next = (1 << n) - 1
        while self._next & self._mask and not self._exhausted():
            self._next = _next_permutation(self._next)

    def combinations(self) -> int:
        """Number of hands this iterator produces, counted from its current state."""
        n = 52 - Hand.from_bits(self._mask).size()
        k = Hand.from_bits(self._next).size()
        return comb(n, k) if k <= n else 0

    def _exhausted(self) -> bool:
        return self._next == 0 or self._next.bit_length() > 52

    def _advance(self) -> None:
        while True:
            self._next = _next_permutation(self._next)
            if not self._next & self._mask:
                break

    def __iter__(self) -> HandIterator:
        return self

    def __next__(self) -> Hand:
        if self._exhausted():
            raise StopIteration
        current = Hand.from_bits(self._next)
        self._advance()
        return current

    def __length_hint__(self) -> int:
        return self.combinations()