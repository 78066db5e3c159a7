# core/constants.py
# ------------------------------------------------------------
# Static configuration tables for the shuttering estimator.
#
# What this file provides
# -----------------------
# - Unit conversion constant (sq m -> sq ft)
# - Category distribution fractions (slab/beam/column/wall)
# - Per-category linear density factors
# - Standard stock sizes (board, steel sheet, prop/beam lengths)
# - Display names, category notes and the "important notes" list
# - ShutteringConfig bundling the tunable numbers + DEFAULT_CONFIG
#
# Typical construction ratios; tune here, not in the calculators.
#
from __future__ import annotations
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Dict, Mapping, Tuple

from core.models import BoardSpec, Category, CategoryFactors


SQFT_PER_SQM = 10.764

# Order matters: results are always reported in this order.
CATEGORY_ORDER: Tuple[Category, ...] = (
    Category.SLAB,
    Category.BEAM,
    Category.COLUMN,
    Category.WALL,
)

CATEGORY_DISTRIBUTION: Mapping[Category, float] = MappingProxyType({
    Category.SLAB: 0.50,
    Category.BEAM: 0.25,
    Category.COLUMN: 0.15,
    Category.WALL: 0.10,
})

MATERIAL_FACTORS: Mapping[Category, CategoryFactors] = MappingProxyType({
    Category.SLAB:   CategoryFactors(wood_boards=0.65, props=0.08, beams=0.15, bamboo=0.12),
    Category.BEAM:   CategoryFactors(wood_boards=0.85, props=0.15, beams=0.25, bamboo=0.08),
    # column boards use COLUMN_WRAP_FACTOR, see materials.column_wood_boards
    Category.COLUMN: CategoryFactors(wood_boards=1.20, props=0.05, beams=0.10, bamboo=0.06),
    Category.WALL:   CategoryFactors(wood_boards=0.75, props=0.06, beams=0.12, bamboo=0.10),
})

STANDARD_WOOD_BOARD = BoardSpec(width_in=2.5, length_ft=8.0)

STEEL_SHEET_AREA_SQFT = 32.0     # 4' x 8'
STOCK_LENGTH_FT = 8.0            # props, beams, panels, beam bottoms
WALL_HEIGHT_FT = 10.0            # typical storey wall

COLUMN_WRAP_FACTOR = 1.4         # 4-sided wrap
COLUMN_FACE_AREA_SQFT = 4 * 8 / 144  # 4" x 8" section face
COLUMN_BOARDS_PER_COLUMN = 8     # 2 boards x 4 sides

# Secondary material rates (per sq ft or per board)
SLAB_NAILS_PER_BOARD = 8
SLAB_BINDING_WIRE_KG_PER_SQFT = 0.05
BEAM_NAILS_PER_BOARD = 6
BEAM_BOTTOM_PLATES_PER_BEAM = 2
BEAM_HEAVY_NAILS_PER_BEAM = 4
COLUMN_CLAMPS_PER_COLUMN = 4
COLUMN_ANGLES_PER_COLUMN = 4
COLUMN_NAILS_PER_BOARD = 4
COLUMN_RELEASE_OIL_L_PER_SQFT = 0.02
WALL_TIE_RODS_PER_PANEL = 2
WALL_NAILS_PER_BOARD = 5


CATEGORY_NAMES: Dict[Category, str] = {
    Category.SLAB: "Slab Shuttering",
    Category.BEAM: "Beam Shuttering",
    Category.COLUMN: "Column Shuttering",
    Category.WALL: "Wall Shuttering",
}

CATEGORY_NOTES: Dict[Category, str] = {
    Category.SLAB: "Horizontal formwork for floor/roof slabs. Includes main support system.",
    Category.BEAM: "Formwork for RCC beams. Includes sides, bottom, and support system.",
    Category.COLUMN: (
        "Vertical formwork for columns. 4-sided coverage with special board "
        'arrangement (2.5" + 2.5" boards for 4" faces).'
    ),
    Category.WALL: "Vertical formwork for walls. Includes tie rods and alignment system.",
}

IMPORTANT_NOTES: Tuple[str, ...] = (
    'Wood board standard size: 2.5" × 8\'. For 4" × 8" columns, 2 boards are used '
    'per side (2.5" + 2.5" = 5" coverage).',
    "Quantities include standard wastage factor of 10-15%.",
    "Actual requirements may vary based on site conditions and design specifications.",
    "Steel shuttering sheets are provided as an alternative where smooth finish is required.",
    "All props are assumed to be 8' adjustable steel props.",
)


@dataclass(frozen=True)
class ShutteringConfig:
    """
    Tunable numbers used by the calculators.

    distribution     : fraction of the total area per category (must sum to 1).
    factors          : CategoryFactors per category.
    board            : standard wood board.
    steel_sheet_area : coverage of one steel shuttering sheet (sq ft).
    stock_length_ft  : length of props/beams/panels used for counts (ft).
    wall_height_ft   : assumed wall height for the wall run length (ft).
    column_face_area : face area of one column section (sq ft).
    column_boards    : boards per column (2 per side x 4 sides).
    column_wrap      : board factor for the column baseline.

    The two mappings are copied into read-only views, so a shared config
    (DEFAULT_CONFIG) cannot be changed after validation.
    """
    distribution: Mapping[Category, float] = field(
        default_factory=lambda: dict(CATEGORY_DISTRIBUTION)
    )
    factors: Mapping[Category, CategoryFactors] = field(
        default_factory=lambda: dict(MATERIAL_FACTORS)
    )
    board: BoardSpec = STANDARD_WOOD_BOARD
    steel_sheet_area: float = STEEL_SHEET_AREA_SQFT
    stock_length_ft: float = STOCK_LENGTH_FT
    wall_height_ft: float = WALL_HEIGHT_FT
    column_face_area: float = COLUMN_FACE_AREA_SQFT
    column_boards: int = COLUMN_BOARDS_PER_COLUMN
    column_wrap: float = COLUMN_WRAP_FACTOR

    def __post_init__(self) -> None:
        object.__setattr__(self, "distribution", MappingProxyType(dict(self.distribution)))
        object.__setattr__(self, "factors", MappingProxyType(dict(self.factors)))
        missing = [c.value for c in CATEGORY_ORDER if c not in self.distribution]
        if missing:
            raise ValueError(f"Distribution is missing categories: {missing}.")
        missing = [c.value for c in CATEGORY_ORDER if c not in self.factors]
        if missing:
            raise ValueError(f"Material factors are missing categories: {missing}.")
        total = sum(self.distribution[c] for c in CATEGORY_ORDER)
        if abs(total - 1.0) > 1e-9:
            raise ValueError(f"Distribution fractions must sum to 1.0 (got {total}).")
        if any(self.distribution[c] < 0.0 for c in CATEGORY_ORDER):
            raise ValueError("Distribution fractions must be >= 0.")
        if self.board.area_sqft <= 0.0:
            raise ValueError("Board area must be > 0.")
        for name in ("steel_sheet_area", "stock_length_ft", "wall_height_ft", "column_face_area"):
            if getattr(self, name) <= 0.0:
                raise ValueError(f"{name} must be > 0.")

    def __hash__(self) -> int:
        return hash((
            tuple(self.distribution[c] for c in CATEGORY_ORDER),
            tuple(self.factors[c] for c in CATEGORY_ORDER),
            self.board,
            self.steel_sheet_area,
            self.stock_length_ft,
            self.wall_height_ft,
            self.column_face_area,
            self.column_boards,
            self.column_wrap,
        ))


DEFAULT_CONFIG = ShutteringConfig()


__all__ = [
    "SQFT_PER_SQM",
    "CATEGORY_ORDER",
    "CATEGORY_DISTRIBUTION",
    "MATERIAL_FACTORS",
    "STANDARD_WOOD_BOARD",
    "CATEGORY_NAMES",
    "CATEGORY_NOTES",
    "IMPORTANT_NOTES",
    "ShutteringConfig",
    "DEFAULT_CONFIG",
]
