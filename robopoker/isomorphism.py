"""Suit-canonical observations."""

from __future__ import annotations

from dataclasses import dataclass

from .observation import Observation
from .permutation import Permutation


@dataclass(frozen=True, order=True)
class Isomorphism:
    """An observation in canonical suit form.

    Observations that differ only by a relabelling of suits are strategically
    equivalent and share one isomorphism. Board cards are lumped together
    regardless of the street on which they were dealt.
    """

    observation: Observation

    @classmethod
    def from_observation(cls, observation: Observation) -> Isomorphism:
        """Canonicalise an observation."""
        permutation = Permutation.from_observation(observation)
        return cls(permutation.permute(observation))

    @classmethod
    def is_canonical(cls, observation: Observation) -> bool:
        """Whether the observation is already in canonical form."""
        return Permutation.from_observation(observation) == Permutation.identity()

    def to_int(self) -> int:
        """Packed integer form of the canonical observation."""
        return self.observation.to_int()

    @classmethod
    def from_int(cls, bits: int) -> Isomorphism:
        """Wrap the observation packed in ``bits`` without re-canonicalising it."""
        return cls(Observation.from_int(bits))

    @classmethod
    def random(cls) -> Isomorphism:
        return cls.from_observation(Observation.random())

    def __int__(self) -> int:
        return self.to_int()

    def __str__(self) -> str:
        return str(self.observation)