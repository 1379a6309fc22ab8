# robopoker

Card primitives for No-Limit Texas Hold'em: cards and hands as compact
bitsets, a bitwise hand evaluator, and the observation/isomorphism
machinery that collapses strategically equivalent situations under suit
symmetry. The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Cards and hands

`Suit`, `Rank` and `Street` are integer enums. A `Card` is an index 0..51
(`rank * 4 + suit`).

```python
from robopoker.card import Card
from robopoker.hand import Hand
from robopoker.suit import Suit

ace = Card.parse("As")
ace.rank(), ace.suit()          # Rank.ACE, Suit.S
str(ace)                        # 'As'

hand = Hand.parse("Jc Ts 2c Js")
[str(c) for c in hand.cards()]  # ['2c', 'Ts', 'Jc', 'Js'], low to high
hand.size()                     # 4
hand.of(Suit.C).size()          # 2
```

`Hand` is an immutable, unordered set of cards stored as a 52-bit integer.
`Hand.add` joins two hands and raises `ValueError` if they share a card;
`hand | other` is a plain union. `Hole` holds exactly two pocket cards and
`Board` collects the community cards street by street.

`Deck` draws cards at random (`draw`, `deal`, `hole`), and `HandIterator`
walks every hand of a given size that avoids a set of blocked cards, in
ascending bit order:

```python
from robopoker.hands import HandIterator

sum(1 for _ in HandIterator(2, Hand.empty()))   # 1326
```

## Evaluating strength

```python
from robopoker.evaluator import Evaluator
from robopoker.strength import Strength

evaluator = Evaluator(Hand.parse("As Ah Kd Kc Qs Jh 9d"))
ranking = evaluator.find_ranking()            # two pair, aces and kings
kickers = evaluator.find_kickers(ranking)     # queen

Strength.from_hand(Hand.parse("Ts Js Qs Ks As")) > Strength.from_hand(
    Hand.parse("As Ah Ad Ac Ks")
)                                             # True
```

A `Ranking` is a hand category (`RankingKind`) with its defining rank or
ranks; `Kickers` break ties between equal rankings. `Strength` orders hands
by ranking first, kickers second. The ace-to-five straight (wheel) is
recognised, with five as its top rank.

## Observations and isomorphisms

An `Observation` is a pair of pocket cards plus zero, three, four or five
public cards, written as `"pocket ~ public"`.

```python
from robopoker.observation import Observation
from robopoker.isomorphism import Isomorphism
from robopoker.street import Street

obs = Observation.parse("Ac Ad ~ Jc Ts 5s")
obs.street()                                  # Street.FLOP
Observation.from_int(obs.to_int()) == obs     # True
sum(1 for _ in obs.children())                # 47 turn observations

river = Observation.from_street(Street.RIVE)
river.equity()      # share of non-tied showdowns won against every villain pocket

a = Isomorphism.from_observation(Observation.parse("Ac Ad ~ Jc Ts 5s"))
b = Isomorphism.from_observation(Observation.parse("As Ah ~ Js Tc 5c"))
a == b                                        # True
```

`Permutation` represents the 24 relabellings of suits; `Isomorphism` maps
an observation to its canonical representative, and `Observation.equivalent`
returns a random suit-relabelled text form of the same situation.
`ObservationIterator` and `IsomorphismIterator` enumerate every observation
or canonical observation of a street; on the later streets these run to
millions of items.

## What this package does not do

It provides the card layer only. It has no command-line tool, no HTTP
service, no database storage of abstractions, equities or strategies, and
no clustering or training of a strategy. `equity` is exact enumeration on
the river; there is no Monte Carlo estimate for earlier streets.