# core/areas.py
# ------------------------------------------------------------
# Area handling for the shuttering estimator.
#
# What this file provides
# -----------------------
# - sq m <-> sq ft conversion (exact multiplicative constant, no rounding)
# - The two rounding rules:
#     round_up      -> material quantities (you can't buy half a board)
#     round_display -> areas shown to the user (nearest, halves up)
# - Validation of the total area
# - Distribution of the total area across slab/beam/column/wall
#
# Units convention
# ----------------
# - Everything downstream of to_sqft() is in square feet.
# - Category areas stay fractional; only emitted values are rounded.
#
from __future__ import annotations
import math
from math import isfinite
from numbers import Real
from typing import Dict, Mapping

from core.constants import CATEGORY_DISTRIBUTION, CATEGORY_ORDER, SQFT_PER_SQM
from core.models import AreaUnit, Category, InvalidAreaError


# -----------------------------
# Unit conversion
# -----------------------------
def sqm_to_sqft(sqm: float) -> float:
    """Convert square metres to square feet."""
    return sqm * SQFT_PER_SQM


def sqft_to_sqm(sqft: float) -> float:
    """Convert square feet to square metres."""
    return sqft / SQFT_PER_SQM


def to_sqft(area: float, unit: AreaUnit) -> float:
    """Normalise an area in ``unit`` to square feet."""
    if AreaUnit(unit) == AreaUnit.SQM:
        return sqm_to_sqft(area)
    return area


# -----------------------------
# Rounding policy
# -----------------------------
def round_up(value: float) -> int:
    """Round a quantity UP to the next whole unit."""
    return int(math.ceil(value))


def round_display(value: float) -> int:
    """
    Nearest integer with halves rounded up (2.5 -> 3), for displayed areas.

    Python's round() uses banker's rounding, which would show 2 for 2.5.
    """
    return int(math.floor(value + 0.5))


# -----------------------------
# Validation
# -----------------------------
def validate_area(area) -> float:
    """
    Return ``area`` as float if it is a finite number > 0.

    Raises
    ------
    InvalidAreaError
        For booleans, non-numbers, NaN/inf, zero and negative values.
    """
    if isinstance(area, bool) or not isinstance(area, Real):
        raise InvalidAreaError(f"Total area must be a number (got {area!r}).")
    value = float(area)
    if not isfinite(value):
        raise InvalidAreaError(f"Total area must be finite (got {value}).")
    if value <= 0.0:
        raise InvalidAreaError(f"Total area must be > 0 (got {value}).")
    return value


# -----------------------------
# Distribution
# -----------------------------
def distribute_area(
    total_sqft: float,
    distribution: Mapping[Category, float] = CATEGORY_DISTRIBUTION,
) -> Dict[Category, float]:
    """
    Split a total area (sq ft) across the four categories.

        slab = 0.50 A, beam = 0.25 A, column = 0.15 A, wall = 0.10 A

    Returns
    -------
    dict
        Category -> fractional area (sq ft), in reporting order.
    """
    return {cat: total_sqft * distribution[cat] for cat in CATEGORY_ORDER}


__all__ = [
    "sqm_to_sqft",
    "sqft_to_sqm",
    "to_sqft",
    "round_up",
    "round_display",
    "validate_area",
    "distribute_area",
]
