"""
Memoized factorials for the hypergeometric engine.

Values are exact Python ints, so large decks never overflow; the engine
divides them only once per probability.
"""

import math
from typing import Dict, Union


class FactorialCache:
    """
    Append-only factorial table.

    - n < 0 yields NaN, the marker for a combinatorially impossible term
    - n < 2 yields 1 and is never stored
    - every other n is filled upward from the largest cached value, so each
      entry is built from the (n - 1) entry exactly once

    Concurrent callers can only write identical values for the same key,
    so the table is shared without a lock.
    """

    def __init__(self):
        self._cache: Dict[int, int] = {}

    def factorial(self, n: int) -> Union[int, float]:
        if n < 0:
            return math.nan
        if n < 2:
            return 1

        cached = self._cache.get(n)
        if cached is not None:
            return cached

        # Walk down to the nearest value we already know
        start = n - 1
        while start >= 2 and start not in self._cache:
            start -= 1
        value = self._cache.get(start, 1)

        for k in range(start + 1, n + 1):
            value *= k
            self._cache[k] = value

        return value

    __call__ = factorial

    def clear(self) -> None:
        self._cache.clear()

    def __len__(self) -> int:
        return len(self._cache)

    def __contains__(self, n: int) -> bool:
        return n in self._cache


# Shared by the module-level helpers
DEFAULT_FACTORIALS = FactorialCache()


def factorial(n: int) -> Union[int, float]:
    return DEFAULT_FACTORIALS.factorial(n)
