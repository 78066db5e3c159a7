# charts/plots.py
# ------------------------------------------------------------
# Minimal plotting utilities for shuttering estimates.
#
# Design principles
# -----------------
# - No imports from your core app → no circular deps.
# - Pure matplotlib; caller supplies plain data (labels, quantities).
# - Functions return a matplotlib Figure for UI layers to render
#   (e.g., Streamlit st.pyplot(fig)).
#
# Usage (example in Streamlit)
# ----------------------------
#   from charts.plots import plot_summary_bars
#   fig = plot_summary_bars({"Wood Boards": 5768, "Props": 92, ...})
#   st.pyplot(fig)
#
from __future__ import annotations

from typing import Mapping, Sequence, Union

import matplotlib.pyplot as plt
import numpy as np


Number = Union[int, float]


def _validate_xy(x: Sequence[Number], y: Sequence[Number], name: str = "") -> None:
    if x is None or y is None:
        raise ValueError(f"{name}: x and y must be provided.")
    if len(x) != len(y):
        raise ValueError(f"{name}: x and y must be the same length (got {len(x)} vs {len(y)}).")
    if len(x) < 2:
        raise ValueError(f"{name}: need at least 2 points to plot (got {len(x)}).")


def plot_summary_bars(
    totals: Mapping[str, Number],
    *,
    title: str = "Material summary",
) -> plt.Figure:
    """
    Horizontal bar chart of the cross-category totals.

    Parameters
    ----------
    totals : mapping label -> quantity, e.g. {"Wood Boards": 5768, ...}
    title  : figure title

    Returns
    -------
    matplotlib.figure.Figure
    """
    if not totals:
        raise ValueError("totals is empty.")

    labels = list(totals.keys())
    values = [totals[k] for k in labels]

    fig, ax = plt.subplots()
    bars = ax.barh(labels, values)
    ax.bar_label(bars, labels=[f"{v:,}" for v in values], padding=3)
    ax.invert_yaxis()
    ax.set_xlabel("Quantity (pcs)")
    ax.grid(True, axis="x", alpha=0.35)
    ax.set_title(title)
    fig.tight_layout()
    return fig


def plot_category_breakdown(
    per_category: Mapping[str, Mapping[str, Number]],
    *,
    title: str = "Shared materials by category",
) -> plt.Figure:
    """
    Grouped bars: one group per material family, one bar per category.

    Parameters
    ----------
    per_category : mapping like:
        {
          "Slab Shuttering":   {"Wood Boards": 195, "Props": 40, ...},
          "Beam Shuttering":   {...},
          "Column Shuttering": {...},
          "Wall Shuttering":   {...},
        }
      Every category must list the same materials.
    title        : figure title

    Returns
    -------
    matplotlib.figure.Figure
    """
    if not per_category:
        raise ValueError("per_category is empty.")

    categories = list(per_category.keys())
    materials = list(per_category[categories[0]].keys())
    for cat in categories:
        if list(per_category[cat].keys()) != materials:
            raise ValueError(f"plot_category_breakdown[{cat}]: materials differ from {materials}.")

    x = np.arange(len(materials))
    width = 0.8 / len(categories)

    fig, ax = plt.subplots()
    for i, cat in enumerate(categories):
        values = [per_category[cat][m] for m in materials]
        ax.bar(x + i * width - 0.4 + width / 2, values, width, label=cat)

    ax.set_xticks(x)
    ax.set_xticklabels(materials)
    ax.set_ylabel("Quantity (pcs)")
    ax.set_yscale("symlog")
    ax.grid(True, axis="y", which="both", alpha=0.35)
    ax.legend(title="Category")
    ax.set_title(title)
    fig.tight_layout()
    return fig


def plot_quantity_vs_area(
    areas: Sequence[Number],
    series: Mapping[str, Sequence[Number]],
    *,
    unit: str = "sqft",
    title: str = "Quantities vs total area",
) -> plt.Figure:
    """
    One curve per material family against the total area.

    Parameters
    ----------
    areas  : list/array of total areas (in ``unit``)
    series : mapping label -> quantities at each area
    unit   : "sqft" or "sqm" (axis label only)
    title  : figure title

    Returns
    -------
    matplotlib.figure.Figure
    """
    if not series:
        raise ValueError("series is empty.")
    for label, values in series.items():
        _validate_xy(areas, values, f"plot_quantity_vs_area[{label}]")

    fig, ax = plt.subplots()
    for label, values in series.items():
        ax.plot(areas, values, linewidth=2, label=label)

    ax.set_xlabel("Total area (sq m)" if unit == "sqm" else "Total area (sq ft)")
    ax.set_ylabel("Quantity (pcs)")
    ax.grid(True, which="both", alpha=0.35)
    ax.legend(title="Material")
    ax.set_title(title)
    fig.tight_layout()
    return fig


__all__ = [
    "plot_summary_bars",
    "plot_category_breakdown",
    "plot_quantity_vs_area",
]
