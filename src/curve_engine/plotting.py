from typing import Optional

import matplotlib.pyplot as plt

from curve_engine.curve_builder import CurveReport
from curve_engine.report_rendering import curve_frame


def plot_curve(report: CurveReport, ax: Optional[plt.Axes] = None, title: Optional[str] = None):
    """Bar chart of card count per cost. Returns the figure."""
    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 5))
    else:
        fig = ax.figure

    frame = curve_frame(report)
    ax.bar(frame["cost"], frame["count"], color="steelblue")

    ax.set_xlabel("Mana Cost")
    ax.set_ylabel("Cards")
    ax.set_title(title or f"Mana Curve ({report.lands} lands / {report.deck_size} cards)")
    ax.set_xticks(list(frame["cost"]))
    ax.grid(True, axis="y", alpha=0.3)

    fig.tight_layout()
    return fig
