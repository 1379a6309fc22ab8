"""Cards, hands, hand evaluation and suit-isomorphic observations for Texas Hold'em."""

__version__ = "0.1.1"