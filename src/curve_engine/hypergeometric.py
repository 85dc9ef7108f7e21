"""
Hypergeometric distributions in factorial form.

Two views of the same law, P(cards | pool_size, hand_size, deck_size):
- card_chance sweeps the observed count for a fixed pool
- pool_chance sweeps the pool size for a fixed observed count

pool_size: successes in the deck, hand_size: cards drawn,
cards: successes seen, deck_size: population.
"""

import math
from typing import Optional

import numpy as np

from deck_rules.defaults import clamp
from curve_engine.factorial_cache import FactorialCache, DEFAULT_FACTORIALS


class HypergeometricEngine:
    """
    Computes hypergeometric PMFs from a cached factorial table.

    Entries whose factorial terms go negative are impossible draws and come
    back as NaN so the mode selector never picks them.
    """

    def __init__(self, factorials: Optional[FactorialCache] = None):
        self.factorials = factorials if factorials is not None else DEFAULT_FACTORIALS

    def probability(
        self, cards: int, pool_size: int, hand_size: int, deck_size: int
    ) -> float:
        """P(exactly `cards` successes) with no clamping applied."""
        numerator_terms = (
            pool_size,
            hand_size,
            deck_size - pool_size,
            deck_size - hand_size,
        )
        denominator_terms = (
            deck_size - pool_size - hand_size + cards,
            deck_size,
            cards,
            hand_size - cards,
            pool_size - cards,
        )

        if min(numerator_terms + denominator_terms) < 0:
            return math.nan

        f = self.factorials
        numerator = 1
        for n in numerator_terms:
            numerator *= f(n)
        denominator = 1
        for n in denominator_terms:
            denominator *= f(n)

        # Exact ints divided once: equal ratios give identical floats
        return numerator / denominator

    def card_chance(self, pool_size: int, hand_size: int, deck_size: int) -> np.ndarray:
        """Distribution over cards = 0..hand_size for a fixed pool."""
        deck_size = max(0, deck_size)
        hand_size = clamp(0, hand_size, deck_size)
        pool_size = clamp(0, pool_size, deck_size)

        return np.array(
            [
                self.probability(cards, pool_size, hand_size, deck_size)
                for cards in range(hand_size + 1)
            ],
            dtype=np.float64,
        )

    def pool_chance(self, cards: int, hand_size: int, deck_size: int) -> np.ndarray:
        """Distribution over pool_size = 0..deck_size for a fixed observed count."""
        deck_size = max(0, deck_size)
        hand_size = clamp(0, hand_size, deck_size)
        cards = clamp(0, cards, hand_size)

        return np.array(
            [
                self.probability(cards, pool_size, hand_size, deck_size)
                for pool_size in range(deck_size + 1)
            ],
            dtype=np.float64,
        )


DEFAULT_ENGINE = HypergeometricEngine()


def card_chance(pool_size: int, hand_size: int, deck_size: int) -> np.ndarray:
    return DEFAULT_ENGINE.card_chance(pool_size, hand_size, deck_size)


def pool_chance(cards: int, hand_size: int, deck_size: int) -> np.ndarray:
    return DEFAULT_ENGINE.pool_chance(cards, hand_size, deck_size)
