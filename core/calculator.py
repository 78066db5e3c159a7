# core/calculator.py
# ------------------------------------------------------------
# Orchestration of the shuttering estimate:
# - Validates and normalises the total area to sq ft
# - Distributes it across slab / beam / column / wall
# - Runs the per-category material calculator
# - Aggregates the five summarised families across categories
# - Returns a ShutteringResult (fresh value object per call)
#
# Dependencies
# ------------
# - imports ONLY from core.* modules that do NOT import this file, to avoid
#   circular imports.
#
from __future__ import annotations
import logging
from dataclasses import replace
from math import isfinite
from typing import Dict, Iterable, List

from core.areas import distribute_area, round_display, to_sqft, validate_area
from core.constants import CATEGORY_NAMES, CATEGORY_NOTES, DEFAULT_CONFIG, ShutteringConfig
from core.materials import calculate_category
from core.models import (
    CalculationInput,
    CategoryResult,
    InvalidAreaError,
    MaterialFamily,
    MaterialSummary,
    ShutteringResult,
)

logger = logging.getLogger(__name__)


# -----------------------------
# Public API: main estimate
# -----------------------------
def calculate(inp: CalculationInput, config: ShutteringConfig = DEFAULT_CONFIG) -> ShutteringResult:
    """
    Master entry point. Turns one total area into a four-category bill of
    materials plus a cross-category summary.

    The advanced inputs (heights, thickness, steel preference) are carried
    on ``result.input`` but do not affect any quantity.

    Raises
    ------
    InvalidAreaError
        If ``inp.total_area`` is not a finite number > 0, or overflows
        when converted to sq ft.

    Returns
    -------
    ShutteringResult
    """
    area = validate_area(inp.total_area)
    total_sqft = to_sqft(area, inp.unit)
    if not isfinite(total_sqft):
        # a finite sq m value can still overflow once scaled to sq ft
        raise InvalidAreaError(
            f"Total area is too large to convert to sq ft (got {inp.total_area} {inp.unit.value})."
        )
    areas = distribute_area(total_sqft, config.distribution)

    categories = []
    for cat, cat_area in areas.items():
        mats = calculate_category(cat, cat_area, config)
        categories.append(CategoryResult(
            category=cat,
            name=CATEGORY_NAMES[cat],
            materials=mats.materials,
            total_area=round_display(cat_area),
            notes=CATEGORY_NOTES[cat],
            detail=mats.detail,
        ))

    derived: Dict[str, float] = {"total_area_sqft": total_sqft}
    for cat, cat_area in areas.items():
        derived[f"{cat.value}_area_sqft"] = cat_area

    result = ShutteringResult(
        total_area=round_display(total_sqft),
        categories=tuple(categories),
        summary=summarize(categories),
        input=inp,
        derived=derived,
    )
    logger.debug(
        "Shuttering estimate: %s %s -> %.2f sq ft, %d wood boards",
        inp.total_area, inp.unit.value, total_sqft, result.summary.total_wood_boards,
    )
    return result


# -----------------------------
# Summary aggregation
# -----------------------------
def summarize(categories: Iterable[CategoryResult]) -> MaterialSummary:
    """
    Sum the five summarised families across categories.

    Totals are derived from the line items only, so they always agree with
    the per-category tables.
    """
    totals = {family: 0 for family in MaterialFamily}
    for cat in categories:
        for item in cat.materials:
            if item.family is not None:
                totals[item.family] += item.quantity
    return MaterialSummary(
        total_wood_boards=totals[MaterialFamily.WOOD_BOARD],
        total_bamboo=totals[MaterialFamily.BAMBOO],
        total_steel_sheets=totals[MaterialFamily.STEEL_SHEET],
        total_props=totals[MaterialFamily.PROP],
        total_beams=totals[MaterialFamily.BEAM],
    )


# -----------------------------
# Convenience views (tables, charts)
# -----------------------------
SUMMARY_LABELS: Dict[MaterialFamily, str] = {
    MaterialFamily.WOOD_BOARD: "Wood Boards",
    MaterialFamily.PROP: "Props",
    MaterialFamily.BEAM: "Steel Beams",
    MaterialFamily.BAMBOO: "Bamboo Poles",
    MaterialFamily.STEEL_SHEET: "Steel Sheets",
}

_SUMMARY_FIELDS: Dict[MaterialFamily, str] = {
    MaterialFamily.WOOD_BOARD: "total_wood_boards",
    MaterialFamily.PROP: "total_props",
    MaterialFamily.BEAM: "total_beams",
    MaterialFamily.BAMBOO: "total_bamboo",
    MaterialFamily.STEEL_SHEET: "total_steel_sheets",
}

SHARED_FAMILIES = (
    MaterialFamily.WOOD_BOARD,
    MaterialFamily.PROP,
    MaterialFamily.BEAM,
    MaterialFamily.BAMBOO,
)


def summary_quantities(summary: MaterialSummary) -> Dict[str, int]:
    """Summary totals keyed by display label."""
    return {label: getattr(summary, _SUMMARY_FIELDS[fam]) for fam, label in SUMMARY_LABELS.items()}


def shared_breakdown(result: ShutteringResult) -> Dict[str, Dict[str, int]]:
    """
    Shared-family quantities per category, e.g.
    {"Slab Shuttering": {"Wood Boards": 195, "Props": 40, ...}, ...}
    """
    out: Dict[str, Dict[str, int]] = {}
    for cat in result.categories:
        row = {}
        for fam in SHARED_FAMILIES:
            item = cat.find(fam)
            row[SUMMARY_LABELS[fam]] = item.quantity if item is not None else 0
        out[cat.name] = row
    return out


def area_sweep(
    inp: CalculationInput,
    areas: Iterable[float],
    config: ShutteringConfig = DEFAULT_CONFIG,
) -> Dict[str, List[int]]:
    """
    Re-run the estimate for each total area (same unit and advanced inputs
    as ``inp``) and collect the summary totals.

    Returns
    -------
    dict
        label -> one total per area, labels as in SUMMARY_LABELS.
    """
    series: Dict[str, List[int]] = {label: [] for label in SUMMARY_LABELS.values()}
    for a in areas:
        res = calculate(replace(inp, total_area=float(a)), config)
        for label, qty in summary_quantities(res.summary).items():
            series[label].append(qty)
    return series


__all__ = [
    "calculate",
    "summarize",
    "SUMMARY_LABELS",
    "summary_quantities",
    "shared_breakdown",
    "area_sweep",
]
