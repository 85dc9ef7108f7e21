"""
Text and tabular views of a CurveReport.
"""

from typing import List

import pandas as pd

from curve_engine.curve_builder import CurveReport


def _visible_costs(report: CurveReport) -> List[int]:
    # The zero-cost slot is only worth showing when something landed there
    return [cost for cost, count in enumerate(report.curve) if cost or count]


def curve_frame(report: CurveReport) -> pd.DataFrame:
    """One row per shown cost slot with columns cost, count."""
    costs = _visible_costs(report)
    return pd.DataFrame(
        {
            "cost": pd.Series(costs, dtype="int64"),
            "count": pd.Series([report.curve[c] for c in costs], dtype="int64"),
        }
    )


def summary_frame(report: CurveReport) -> pd.DataFrame:
    """Scalar fields of the report as a single-column table."""
    rows = {
        "lands": report.lands,
        "spells": report.spells,
        "extra": report.extra,
        "curve_total": report.curve_total,
        "deck_size": report.deck_size,
    }
    return pd.DataFrame.from_dict(rows, orient="index", columns=["value"])


def format_report(report: CurveReport) -> str:
    curve_lines = [
        f"{cost:3d} drops:{report.curve[cost]:3d}" for cost in _visible_costs(report)
    ]

    lines = [
        "Deck Stats",
        f"Lands:     {report.lands:2d}",
        f"Spells:    {report.spells:2d}",
        f"Reserved:  {report.extra:2d}",
        "",
        "Curve:",
        *curve_lines,
        "",
        f"Total:     {report.deck_size:2d}",
    ]
    return "\n".join(lines)
