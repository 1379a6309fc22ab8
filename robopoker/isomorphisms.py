"""Enumeration of every canonical observation on a street."""

from __future__ import annotations

from collections.abc import Iterator

from .isomorphism import Isomorphism
from .observations import ObservationIterator
from .street import Street


class IsomorphismIterator(Iterator[Isomorphism]):
    """Yields each suit-canonical observation of a street exactly once."""

    def __init__(self, street: Street) -> None:
        self._observations = ObservationIterator(street)

    def street(self) -> Street:
        return self._observations.street()

    def __iter__(self) -> IsomorphismIterator:
        return self

    def __next__(self) -> Isomorphism:
        for observation in self._observations:
            if Isomorphism.is_canonical(observation):
                return Isomorphism.from_observation(observation)
        raise StopIteration

    def __length_hint__(self) -> int:
        return self.street().n_isomorphisms()