"""Card suits."""

from __future__ import annotations

from enum import IntEnum

_MASKS = {
    0: 0x0001111111111111,
    1: 0x0002222222222222,
    2: 0x0004444444444444,
    3: 0x0008888888888888,
}

_SYMBOLS = {
    "c": 0,
    "♣": 0,
    "d": 1,
    "♦": 1,
    "h": 2,
    "♥": 2,
    "s": 3,
    "♠": 3,
}


class Suit(IntEnum):
    """One of the four suits, ordered clubs < diamonds < hearts < spades."""

    C = 0
    D = 1
    H = 2
    S = 3

    @classmethod
    def all(cls) -> tuple[Suit, ...]:
        """All suits in canonical order."""
        return tuple(cls)

    def mask(self) -> int:
        """Bitmask selecting every card of this suit in a 52-bit hand."""
        return _MASKS[self.value]

    @classmethod
    def parse(cls, text: str) -> Suit:
        """Parse a suit letter or symbol, case-insensitively."""
        key = text.strip().lower()
        try:
            return cls(_SYMBOLS[key])
        except KeyError:
            raise ValueError(f"invalid suit str: {text}") from None

    def __str__(self) -> str:
        return "cdhs"[self.value]

    def __format__(self, spec: str) -> str:
        return format(str(self), spec)