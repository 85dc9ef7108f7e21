from typing import Sequence


def optimal(distribution: Sequence[float]) -> int:
    """
    Index of the most probable entry.

    Scans left to right keeping the first index that beats the best value
    so far by a strict comparison. NaN never beats anything, ties keep the
    earliest index, and an empty or all-NaN input gives 0.
    """
    best_index = 0
    best_value = float("-inf")

    for index, value in enumerate(distribution):
        if value > best_value:
            best_index = index
            best_value = value

    return best_index
