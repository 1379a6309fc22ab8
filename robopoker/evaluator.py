"""Find the best made hand in a set of cards."""

from __future__ import annotations

from .hand import Hand
from .kicks import Kickers
from .rank import Rank
from .ranking import Ranking, RankingKind
from .suit import Suit

_WHEEL = 0b1000000001111
_LOWEST_STRAIGHT_RANK = Rank.FIVE
_RANKS_DESCENDING = tuple(reversed(Rank))
_SINGLE_RANK_KINDS = {
    RankingKind.HIGH_CARD,
    RankingKind.ONE_PAIR,
    RankingKind.THREE_OAK,
    RankingKind.FOUR_OAK,
}


def _popcount(bits: int) -> int:
    return bin(bits).count("1")


class Evaluator:
    """Searches a hand for its strongest ranking using bit operations."""

    def __init__(self, hand: Hand) -> None:
        self._hand = hand

    def find_ranking(self) -> Ranking:
        """The best category present in the hand."""
        searches = (
            self._find_flush,
            self._find_4_oak,
            self._find_3_oak_2_oak,
            self._find_straight,
            self._find_3_oak,
            self._find_2_oak_2_oak,
            self._find_2_oak,
            self._find_1_oak,
        )
        for search in searches:
            ranking = search()
            if ranking is not None:
                return ranking
        raise ValueError("at least one card in Hand")

    def find_kickers(self, ranking: Ranking) -> Kickers:
        """The highest ranks outside the ranking that complete five cards."""
        n = ranking.n_kickers()
        if n == 0:
            return Kickers(0)
        if ranking.kind is RankingKind.TWO_PAIR:
            excluded = ranking.hi.mask() | ranking.lo.mask()
        elif ranking.kind in _SINGLE_RANK_KINDS:
            excluded = ranking.hi.mask()
        else:
            raise ValueError(f"{ranking.kind.name} has no kickers")
        ranks = self._hand.rank_mask() & ~excluded & 0x1FFF
        while _popcount(ranks) > n:
            ranks &= ranks - 1
        return Kickers(ranks)

    def _find_1_oak(self) -> Ranking | None:
        rank = self._find_rank_of_n_oak(1)
        return None if rank is None else Ranking(RankingKind.HIGH_CARD, rank)

    def _find_2_oak(self) -> Ranking | None:
        rank = self._find_rank_of_n_oak(2)
        return None if rank is None else Ranking(RankingKind.ONE_PAIR, rank)

    def _find_3_oak(self) -> Ranking | None:
        rank = self._find_rank_of_n_oak(3)
        return None if rank is None else Ranking(RankingKind.THREE_OAK, rank)

    def _find_4_oak(self) -> Ranking | None:
        rank = self._find_rank_of_n_oak(4)
        return None if rank is None else Ranking(RankingKind.FOUR_OAK, rank)

    def _find_2_oak_2_oak(self) -> Ranking | None:
        hi = self._find_rank_of_n_oak(2)
        if hi is None:
            return None
        lo = self._find_rank_of_n_oak(2, skip=hi)
        if lo is None:
            return Ranking(RankingKind.ONE_PAIR, hi)
        return Ranking(RankingKind.TWO_PAIR, hi, lo)

    def _find_3_oak_2_oak(self) -> Ranking | None:
        triple = self._find_rank_of_n_oak(3)
        if triple is None:
            return None
        paired = self._find_rank_of_n_oak(2, skip=triple)
        if paired is None:
            return None
        return Ranking(RankingKind.FULL_HOUSE, triple, paired)

    def _find_straight(self) -> Ranking | None:
        rank = self._find_rank_of_straight(self._hand)
        return None if rank is None else Ranking(RankingKind.STRAIGHT, rank)

    def _find_flush(self) -> Ranking | None:
        suit = self._find_suit_of_flush()
        if suit is None:
            return None
        suited = self._hand.of(suit)
        top = self._find_rank_of_straight(suited)
        if top is not None:
            return Ranking(RankingKind.STRAIGHT_FLUSH, top)
        return Ranking(RankingKind.FLUSH, Rank.from_mask(suited.rank_mask()))

    @staticmethod
    def _find_rank_of_straight(hand: Hand) -> Rank | None:
        ranks = hand.rank_mask()
        bits = ranks
        for _ in range(4):
            bits &= bits << 1
        if bits:
            return Rank.from_mask(bits)
        if ranks & _WHEEL == _WHEEL:
            return _LOWEST_STRAIGHT_RANK
        return None

    def _find_suit_of_flush(self) -> Suit | None:
        bits = int(self._hand)
        return next((s for s in Suit.all() if _popcount(bits & s.mask()) >= 5), None)

    def _find_rank_of_n_oak(self, n: int, skip: Rank | None = None) -> Rank | None:
        bits = int(self._hand)
        for rank in _RANKS_DESCENDING:
            if rank is skip:
                continue
            if _popcount(bits & rank.nibble()) >= n:
                return rank
        return None