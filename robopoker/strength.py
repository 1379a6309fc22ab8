"""Total ordering of hands: ranking first, kickers second."""

from __future__ import annotations

from dataclasses import dataclass

from .evaluator import Evaluator
from .hand import Hand
from .kicks import Kickers
from .ranking import Ranking


@dataclass(frozen=True, order=True)
class Strength:
    """The value of a hand; greater strengths win at showdown."""

    value: Ranking
    kicks: Kickers

    @classmethod
    def from_hand(cls, hand: Hand) -> Strength:
        evaluator = Evaluator(hand)
        value = evaluator.find_ranking()
        return cls(value, evaluator.find_kickers(value))

    def __str__(self) -> str:
        return f"{format(str(self.value), '<18')}{format(str(self.kicks), '>5')}"

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)