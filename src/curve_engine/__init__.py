"""
Mana curve builder.

Computes how many cards of each mana cost a deck should run so that a play
on or near its ideal turn is as likely as possible, given the deck size,
land count, opening hand size and a curve-raising budget.

Key components:
- factorial_cache: Memoized exact factorials, injectable and resettable
- hypergeometric: card_chance / pool_chance distributions (NaN = impossible)
- mode_selection: Strict left-to-right argmax
- curve_builder: Grid construction and greedy curve allocation
- report_rendering: Text report and pandas tables
- plotting: matplotlib bar chart of a curve
- cli: Command-line interface

Usage:
    manacurve 20 0 2 7 60 --verbose
    manacurve --preset limited --table
"""

from .factorial_cache import FactorialCache, factorial
from .hypergeometric import HypergeometricEngine, card_chance, pool_chance
from .mode_selection import optimal
from .curve_builder import CurveBuilder, CurveReport, deck_stats
from .report_rendering import curve_frame, summary_frame, format_report

__version__ = "0.1.0"

__all__ = [
    "FactorialCache",
    "factorial",
    "HypergeometricEngine",
    "card_chance",
    "pool_chance",
    "optimal",
    "CurveBuilder",
    "CurveReport",
    "deck_stats",
    "curve_frame",
    "summary_frame",
    "format_report",
]
