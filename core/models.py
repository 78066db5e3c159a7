# core/models.py
# ------------------------------------------------------------
# Core data models for the shuttering (formwork) estimator.
# This file contains NO imports from other local modules
# to avoid circular-import issues.
#
# Units convention (consistent across the codebase):
# - Areas: square feet (sq ft) internally; sq m only at the input boundary
# - Lengths: feet (ft), board widths in inches (in)
# - Quantities: whole units (pcs, kg, liters), always rounded UP
#
# Notes:
# - The advanced parameters on CalculationInput (heights, thickness,
#   steel preference) are carried through to exports but are not
#   consumed by the calculation.
# - MaterialItem.family tags the five summarised material families so
#   the summary never depends on item names.
#
# This file is purely data containers + tiny helpers.
# All calculations live in areas.py / materials.py / calculator.py.

from __future__ import annotations
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Dict, Mapping, Optional, Tuple


# -----------------------------
# Enumerations
# -----------------------------
class AreaUnit(str, Enum):
    SQFT = "sqft"  # square feet
    SQM = "sqm"    # square metres


class Category(str, Enum):
    SLAB = "slab"
    BEAM = "beam"
    COLUMN = "column"
    WALL = "wall"


class MaterialFamily(str, Enum):
    WOOD_BOARD = "WoodBoard"
    PROP = "Prop"
    BEAM = "Beam"
    BAMBOO = "Bamboo"
    STEEL_SHEET = "SteelSheet"


# -----------------------------
# Errors
# -----------------------------
class InvalidAreaError(ValueError):
    """Raised when the total area is not a finite number greater than zero."""


# -----------------------------
# Configuration records
# -----------------------------
@dataclass(frozen=True)
class CategoryFactors:
    """
    Linear density factors for one structural category.

    Attributes
    ----------
    wood_boards : float
        Board face area required per sq ft (divided by the board area later).
    props       : float
        Adjustable props per sq ft.
    beams       : float
        Steel beams / joists per sq ft.
    bamboo      : float
        Bamboo poles per sq ft.
    """
    wood_boards: float
    props: float
    beams: float
    bamboo: float


@dataclass(frozen=True)
class BoardSpec:
    """Standard shuttering board (2.5" wide x 8' long)."""
    width_in: float = 2.5
    length_ft: float = 8.0

    @property
    def area_sqft(self) -> float:
        # same evaluation order as the published tables (2.5 * 8 / 12)
        return self.width_in * self.length_ft / 12


# -----------------------------
# Input
# -----------------------------
@dataclass(frozen=True)
class CalculationInput:
    """
    Everything the estimator form collects.

    Primary
    -------
    total_area           : Total built-up area (> 0) in ``unit``.
    unit                 : AreaUnit.SQFT or AreaUnit.SQM (plain strings accepted).

    Advanced (reserved)
    -------------------
    slab_height          : Slab height (ft).
    beam_height          : Beam depth (in).
    column_height        : Column height (ft).
    slab_thickness       : Slab thickness (in).
    use_steel_shuttering : Prefer steel over wood where applicable.

    The advanced values are accepted and exported but do not change any
    quantity; geometry-aware sizing is not modelled.
    """
    total_area: float
    unit: AreaUnit = AreaUnit.SQFT

    slab_height: Optional[float] = None
    beam_height: Optional[float] = None
    column_height: Optional[float] = None
    slab_thickness: Optional[float] = None
    use_steel_shuttering: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.unit, AreaUnit):
            try:
                unit = AreaUnit(str(self.unit).strip().lower())
            except ValueError:
                raise ValueError(
                    f"Unknown area unit '{self.unit}'. Expected sqft | sqm."
                ) from None
            object.__setattr__(self, "unit", unit)

    def advanced_parameters(self) -> Dict[str, Optional[float]]:
        """Reserved inputs, keyed by name (None when not supplied)."""
        return {
            "slab_height": self.slab_height,
            "beam_height": self.beam_height,
            "column_height": self.column_height,
            "slab_thickness": self.slab_thickness,
            "use_steel_shuttering": self.use_steel_shuttering,
        }


# -----------------------------
# Results
# -----------------------------
@dataclass(frozen=True)
class MaterialItem:
    """
    One line of a bill of materials.

    name       : display name, kept verbatim from the material tables.
    quantity   : whole units, never negative.
    unit       : "pcs", "kg", "liters", ...
    family     : summary family tag, None for category-specific items.
    """
    name: str
    quantity: int
    unit: str
    description: str = ""
    size: str = ""
    family: Optional[MaterialFamily] = None


@dataclass(frozen=True)
class CategoryResult:
    """
    Materials for one structural category.

    total_area : area allocated to this category (sq ft), rounded for display.
    notes      : fixed category annotation.
    detail     : how the category-specific counts were derived.
    """
    category: Category
    name: str
    materials: Tuple[MaterialItem, ...]
    total_area: int
    notes: str = ""
    detail: str = ""

    def find(self, family: MaterialFamily) -> Optional[MaterialItem]:
        """First item tagged with ``family`` (None if the category has none)."""
        for item in self.materials:
            if item.family == family:
                return item
        return None


@dataclass(frozen=True)
class MaterialSummary:
    total_wood_boards: int = 0
    total_bamboo: int = 0
    total_steel_sheets: int = 0
    total_props: int = 0
    total_beams: int = 0

    def as_dict(self) -> Dict[str, int]:
        """camelCase mapping used by the JSON export."""
        return {
            "totalWoodBoards": self.total_wood_boards,
            "totalBamboo": self.total_bamboo,
            "totalSteelSheets": self.total_steel_sheets,
            "totalProps": self.total_props,
            "totalBeams": self.total_beams,
        }


@dataclass(frozen=True)
class ShutteringResult:
    """
    Full estimator output.

    total_area : input area converted to sq ft, rounded for display.
    categories : exactly four CategoryResult, ordered slab, beam, column, wall.
    summary    : cross-category totals for the five material families.
    input      : the CalculationInput that produced this result.
    derived    : unrounded areas (sq ft), e.g.
                 {"total_area_sqft": 1076.4, "slab_area_sqft": 538.2, ...}
                 (read-only view)
    """
    total_area: int
    categories: Tuple[CategoryResult, ...]
    summary: MaterialSummary
    input: CalculationInput
    derived: Mapping[str, float] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "derived", MappingProxyType(dict(self.derived)))

    def category(self, category: Category) -> CategoryResult:
        for cat in self.categories:
            if cat.category == category:
                return cat
        raise KeyError(category)


# Friendly export list
__all__ = [
    "AreaUnit",
    "Category",
    "MaterialFamily",
    "InvalidAreaError",
    "CategoryFactors",
    "BoardSpec",
    "CalculationInput",
    "MaterialItem",
    "CategoryResult",
    "MaterialSummary",
    "ShutteringResult",
]
