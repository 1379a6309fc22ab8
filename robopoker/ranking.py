"""Made-hand categories, without kickers."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from functools import total_ordering

from .rank import Rank


class RankingKind(IntEnum):
    """Hand category in order of strength."""

    HIGH_CARD = 0
    ONE_PAIR = 1
    TWO_PAIR = 2
    THREE_OAK = 3
    STRAIGHT = 4
    FULL_HOUSE = 5
    FLUSH = 6
    FOUR_OAK = 7
    STRAIGHT_FLUSH = 8
    MAX = 9


_TWO_RANKS = {RankingKind.TWO_PAIR, RankingKind.FULL_HOUSE}

_KICKERS = {
    RankingKind.HIGH_CARD: 4,
    RankingKind.ONE_PAIR: 3,
    RankingKind.THREE_OAK: 2,
    RankingKind.FOUR_OAK: 1,
    RankingKind.TWO_PAIR: 1,
}

_LABELS = {
    RankingKind.HIGH_CARD: "HighCard",
    RankingKind.ONE_PAIR: "OnePair",
    RankingKind.TWO_PAIR: "TwoPair",
    RankingKind.THREE_OAK: "ThreeOfAKind",
    RankingKind.STRAIGHT: "Straight",
    RankingKind.FULL_HOUSE: "FullHouse",
    RankingKind.FLUSH: "Flush",
    RankingKind.FOUR_OAK: "FourOfAKind",
    RankingKind.STRAIGHT_FLUSH: "StraightFlush",
}


@total_ordering
@dataclass(frozen=True)
class Ranking:
    """A hand category with its defining rank(s).

    ``lo`` is used only by two pair and full house; ``MAX`` carries no rank.
    """

    kind: RankingKind
    hi: Rank | None = None
    lo: Rank | None = None

    def __post_init__(self) -> None:
        if self.kind is RankingKind.MAX:
            if self.hi is not None or self.lo is not None:
                raise ValueError("MAX ranking takes no ranks")
        elif self.kind in _TWO_RANKS:
            if self.hi is None or self.lo is None:
                raise ValueError(f"{self.kind.name} needs two ranks")
        elif self.hi is None or self.lo is not None:
            raise ValueError(f"{self.kind.name} needs exactly one rank")

    def _key(self) -> tuple[int, int, int]:
        hi = -1 if self.hi is None else int(self.hi)
        lo = -1 if self.lo is None else int(self.lo)
        return (int(self.kind), hi, lo)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Ranking):
            return NotImplemented
        return self._key() < other._key()

    def n_kickers(self) -> int:
        """How many kicker cards accompany this category in a five-card hand."""
        return _KICKERS.get(self.kind, 0)

    def __str__(self) -> str:
        if self.kind is RankingKind.MAX:
            raise ValueError("MAX ranking has no display")
        label = _LABELS[self.kind].ljust(14)
        if self.kind in _TWO_RANKS:
            return f"{label}{self.hi}{self.lo}"
        return f"{label}{self.hi} "

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)