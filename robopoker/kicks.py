"""Kicker cards that break ties between equal rankings."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .rank import Rank


@dataclass(frozen=True, order=True)
class Kickers:
    """A set of kicker ranks stored as a 13-bit rank mask."""

    bits: int = 0

    @classmethod
    def from_ranks(cls, ranks: Iterable[Rank]) -> Kickers:
        """Build kickers from a collection of ranks."""
        bits = 0
        for rank in ranks:
            bits |= rank.mask()
        return cls(bits)

    def ranks(self) -> list[Rank]:
        """The kicker ranks, lowest first."""
        return [Rank(i) for i in range(self.bits.bit_length()) if self.bits >> i & 1]

    def __int__(self) -> int:
        return self.bits

    def __str__(self) -> str:
        return "".join(f"{rank} " for rank in self.ranks())