# core/materials.py
# ------------------------------------------------------------
# Material quantities for the four shuttering categories:
#  1) Slab   : boards, props, joists, bamboo + steel sheets, nails, wire
#  2) Beam   : shared set + bottom plates, 3" and 5" nails
#  3) Column : special board rule + clamps, corner angles, nails, oil
#  4) Wall   : shared set + steel panels, tie rods, nails
#
# Units convention
# ----------------
# - area arguments are sq ft (already distributed to the category)
# - every emitted quantity goes through round_up()
#
# Model (short version)
# ---------------------
# - Shared families use linear density factors from CategoryFactors:
#       boards = ceil(area * f_wood / board_area)
#       props  = ceil(area * f_props), beams/bamboo likewise
# - One parametrised calculator (calculate_category) runs the shared set,
#   then a per-category hook builds the ordered item list and its
#   category-specific extras.
# - Columns replace the generic board count with column_wood_boards():
#   the larger of a 1.4-factor baseline and 8 boards per estimated
#   4" x 8" column.
#
# Item names are kept verbatim from the published material tables; the
# summary keys on MaterialItem.family, never on the names.
#
from __future__ import annotations
import math
from dataclasses import dataclass
from typing import Callable, Dict, List, Tuple

from core.areas import round_up
from core.constants import (
    BEAM_BOTTOM_PLATES_PER_BEAM,
    BEAM_HEAVY_NAILS_PER_BEAM,
    BEAM_NAILS_PER_BOARD,
    COLUMN_ANGLES_PER_COLUMN,
    COLUMN_CLAMPS_PER_COLUMN,
    COLUMN_NAILS_PER_BOARD,
    COLUMN_RELEASE_OIL_L_PER_SQFT,
    DEFAULT_CONFIG,
    SLAB_BINDING_WIRE_KG_PER_SQFT,
    SLAB_NAILS_PER_BOARD,
    WALL_NAILS_PER_BOARD,
    WALL_TIE_RODS_PER_PANEL,
    ShutteringConfig,
)
from core.models import BoardSpec, Category, MaterialFamily, MaterialItem


WOOD_BOARDS = 'Wood Boards (2.5" × 8\')'
ADJUSTABLE_PROPS = "Adjustable Props"
STEEL_BEAMS = "Steel Beams / Joists"
BAMBOO_POLES = "Bamboo Poles"

BOARD_SIZE = '2.5" × 8\''
STOCK_SIZE = "8' length"
BAMBOO_SIZE = '12\' length, 3" diameter'

# description per category for the shared families: (boards, props, beams, bamboo)
_SHARED_DESCRIPTIONS: Dict[Category, Tuple[str, str, str, str]] = {
    Category.SLAB: (
        "Standard shuttering boards for slab surface",
        "Steel props for slab support (8' standard)",
        "Support beams under wood boards",
        "Secondary support and bracing",
    ),
    Category.BEAM: (
        "For beam sides and bottom",
        "Vertical support for beams",
        "Horizontal support under beam",
        "Diagonal bracing for beam sides",
    ),
    Category.COLUMN: (
        "For column shuttering (4 sides)",
        "Plumb support for columns",
        "For column alignment",
        "Diagonal bracing for columns",
    ),
    Category.WALL: (
        "For wall surface",
        "Wall alignment supports",
        "Horizontal walers",
        "Wall bracing",
    ),
}


@dataclass(frozen=True)
class SharedQuantities:
    """Counts of the four families every category uses."""
    wood_boards: int
    props: int
    beams: int
    bamboo: int


@dataclass(frozen=True)
class ColumnBoards:
    """
    Result of the column board rule.

    boards            : governing board count, max(baseline, column_boards).
    baseline          : area-based count with the wrap factor.
    estimated_columns : number of 4" x 8" columns the area represents.
    column_boards     : estimated_columns * boards per column.
    note              : explanation shown with the column category.
    """
    boards: int
    baseline: int
    estimated_columns: int
    column_boards: int
    note: str


@dataclass(frozen=True)
class CategoryMaterials:
    """Ordered items for one category plus a derivation note."""
    materials: Tuple[MaterialItem, ...]
    detail: str = ""


# -----------------------------
# Generic formulas (public)
# -----------------------------
def wood_boards(area: float, factor: float, board: BoardSpec = DEFAULT_CONFIG.board) -> int:
    """
    Boards needed to cover ``area * factor`` sq ft with standard boards.

        boards = ceil(area * factor / board_area)
    """
    total_board_area = area * factor
    return round_up(total_board_area / board.area_sqft)


def per_sqft(area: float, factor: float) -> int:
    """Whole units for a units-per-sq-ft factor: ceil(area * factor)."""
    return round_up(area * factor)


def estimate_column_count(area: float, face_area: float = DEFAULT_CONFIG.column_face_area) -> int:
    """Number of column faces the area represents (at least one)."""
    return max(1, math.floor(area / face_area))


def estimate_beam_count(area: float, beam_length_ft: float = DEFAULT_CONFIG.stock_length_ft) -> int:
    """
    Physical beams from a square-root run estimate:

        run   = sqrt(4 * area)
        beams = max(1, floor(run / beam_length))
    """
    return max(1, math.floor(beam_run_length(area) / beam_length_ft))


def beam_run_length(area: float) -> float:
    return math.sqrt(area * 4)


def wall_run_length(area: float, wall_height_ft: float = DEFAULT_CONFIG.wall_height_ft) -> float:
    return area / wall_height_ft


def wall_panel_count(
    area: float,
    wall_height_ft: float = DEFAULT_CONFIG.wall_height_ft,
    panel_length_ft: float = DEFAULT_CONFIG.stock_length_ft,
) -> int:
    """Steel wall panels along the wall run: ceil((area / height) / panel_length)."""
    return round_up(wall_run_length(area, wall_height_ft) / panel_length_ft)


def column_wood_boards(area: float, config: ShutteringConfig = DEFAULT_CONFIG) -> ColumnBoards:
    """
    Column boards: a 4" face needs two 2.5" boards (5" >= 4"), so each
    column takes 2 boards x 4 sides. Both the area baseline and the
    per-column count are lower bounds; the larger governs.

    Example
    -------
    area = 150 sq ft:
        baseline   = ceil(150 * 1.4 / 1.667) = 126
        columns    = floor(150 / (32/144))   = 675
        boards     = max(126, 675 * 8)       = 5400
    """
    baseline = wood_boards(area, config.column_wrap, config.board)
    columns = estimate_column_count(area, config.column_face_area)
    column_boards = columns * config.column_boards
    note = (
        f'For {columns} estimated columns (4"×8"). Each column needs '
        f"{config.column_boards} boards (2 boards per side × 4 sides). "
        f'2.5" + 2.5" boards cover 4" width.'
    )
    return ColumnBoards(
        boards=max(baseline, column_boards),
        baseline=baseline,
        estimated_columns=columns,
        column_boards=column_boards,
        note=note,
    )


# -----------------------------
# Shared families
# -----------------------------
def _generic_boards(category: Category, area: float, config: ShutteringConfig) -> int:
    return wood_boards(area, config.factors[category].wood_boards, config.board)


def _column_boards(category: Category, area: float, config: ShutteringConfig) -> int:
    return column_wood_boards(area, config).boards


_BOARD_RULES: Dict[Category, Callable[[Category, float, ShutteringConfig], int]] = {
    Category.COLUMN: _column_boards,
}


def shared_quantities(
    category: Category,
    area: float,
    config: ShutteringConfig = DEFAULT_CONFIG,
) -> SharedQuantities:
    """Boards, props, beams and bamboo for one category."""
    f = config.factors[category]
    board_rule = _BOARD_RULES.get(category, _generic_boards)
    return SharedQuantities(
        wood_boards=board_rule(category, area, config),
        props=per_sqft(area, f.props),
        beams=per_sqft(area, f.beams),
        bamboo=per_sqft(area, f.bamboo),
    )


def _shared_items(category: Category, q: SharedQuantities) -> Tuple[MaterialItem, ...]:
    d_boards, d_props, d_beams, d_bamboo = _SHARED_DESCRIPTIONS[category]
    return (
        MaterialItem(WOOD_BOARDS, q.wood_boards, "pcs", d_boards, BOARD_SIZE,
                     MaterialFamily.WOOD_BOARD),
        MaterialItem(ADJUSTABLE_PROPS, q.props, "pcs", d_props, STOCK_SIZE,
                     MaterialFamily.PROP),
        MaterialItem(STEEL_BEAMS, q.beams, "pcs", d_beams, STOCK_SIZE,
                     MaterialFamily.BEAM),
        MaterialItem(BAMBOO_POLES, q.bamboo, "pcs", d_bamboo, BAMBOO_SIZE,
                     MaterialFamily.BAMBOO),
    )


# -----------------------------
# Category hooks
# -----------------------------
def _slab_items(area: float, q: SharedQuantities, config: ShutteringConfig) -> Tuple[List[MaterialItem], str]:
    boards, props, beams, bamboo = _shared_items(Category.SLAB, q)
    sheets = round_up(area / config.steel_sheet_area)
    items = [
        boards, props, beams, bamboo,
        MaterialItem(
            "Steel Shuttering Sheets (4' × 8')", sheets, "pcs",
            "Alternative to wood for smooth finish", "4' × 8'",
            MaterialFamily.STEEL_SHEET,
        ),
        MaterialItem(
            'Nails (4")', round_up(q.wood_boards * SLAB_NAILS_PER_BOARD), "pcs",
            "For securing boards to beams",
        ),
        MaterialItem(
            "Binding Wire", round_up(area * SLAB_BINDING_WIRE_KG_PER_SQFT), "kg",
            "For tying and securing",
        ),
    ]
    detail = f"{sheets} steel sheets at {config.steel_sheet_area:g} sq ft coverage each."
    return items, detail


def _beam_items(area: float, q: SharedQuantities, config: ShutteringConfig) -> Tuple[List[MaterialItem], str]:
    boards, props, beams, bamboo = _shared_items(Category.BEAM, q)
    n_beams = estimate_beam_count(area, config.stock_length_ft)
    items = [
        boards, props, beams, bamboo,
        MaterialItem(
            "Beam Bottom Plates", n_beams * BEAM_BOTTOM_PLATES_PER_BEAM, "pcs",
            "Thick boards for beam bottom (if needed)", '1.5" × 9" × 8\'',
        ),
        MaterialItem(
            'Nails (3")', round_up(q.wood_boards * BEAM_NAILS_PER_BOARD), "pcs",
            "For beam formwork assembly",
        ),
        MaterialItem(
            'Nails (5")', round_up(n_beams * BEAM_HEAVY_NAILS_PER_BEAM), "pcs",
            "Heavy nails for beam bottom",
        ),
    ]
    detail = (
        f"Estimated {n_beams} beams of {config.stock_length_ft:g}' "
        f"from {beam_run_length(area):.1f} ft of beam run."
    )
    return items, detail


def _column_items(area: float, q: SharedQuantities, config: ShutteringConfig) -> Tuple[List[MaterialItem], str]:
    boards, props, beams, bamboo = _shared_items(Category.COLUMN, q)
    column = column_wood_boards(area, config)
    n_cols = column.estimated_columns
    items = [
        boards,
        MaterialItem(
            "Column Clamps / Yokes", n_cols * COLUMN_CLAMPS_PER_COLUMN, "pcs",
            "Metal clamps to hold column boards", "Adjustable",
        ),
        props, beams, bamboo,
        MaterialItem(
            "Corner Angles (Steel)", n_cols * COLUMN_ANGLES_PER_COLUMN, "pcs",
            "For perfect column corners", STOCK_SIZE,
        ),
        MaterialItem(
            'Nails (4")', round_up(column.boards * COLUMN_NAILS_PER_BOARD), "pcs",
            "For column formwork",
        ),
        MaterialItem(
            "Release Agent / Oil", round_up(area * COLUMN_RELEASE_OIL_L_PER_SQFT), "liters",
            "For easy form removal",
        ),
    ]
    return items, column.note


def _wall_items(area: float, q: SharedQuantities, config: ShutteringConfig) -> Tuple[List[MaterialItem], str]:
    boards, props, beams, bamboo = _shared_items(Category.WALL, q)
    panels = wall_panel_count(area, config.wall_height_ft, config.stock_length_ft)
    items = [
        boards,
        MaterialItem(
            "Wall Panels (Steel)", panels, "pcs",
            "Steel panels for wall (optional)", "2' × 8' or 3' × 8'",
        ),
        props, beams, bamboo,
        MaterialItem(
            "Tie Rods", round_up(panels * WALL_TIE_RODS_PER_PANEL), "pcs",
            "To hold wall forms together", "With cones",
        ),
        MaterialItem(
            'Nails (3")', round_up(q.wood_boards * WALL_NAILS_PER_BOARD), "pcs",
            "For wall formwork",
        ),
    ]
    detail = (
        f"{wall_run_length(area, config.wall_height_ft):.1f} ft of wall at "
        f"{config.wall_height_ft:g} ft height, {panels} panels of {config.stock_length_ft:g}'."
    )
    return items, detail


_CATEGORY_HOOKS: Dict[
    Category,
    Callable[[float, SharedQuantities, ShutteringConfig], Tuple[List[MaterialItem], str]],
] = {
    Category.SLAB: _slab_items,
    Category.BEAM: _beam_items,
    Category.COLUMN: _column_items,
    Category.WALL: _wall_items,
}


# -----------------------------
# Public API
# -----------------------------
def calculate_category(
    category: Category,
    area: float,
    config: ShutteringConfig = DEFAULT_CONFIG,
) -> CategoryMaterials:
    """
    Ordered bill of materials for one category.

    Parameters
    ----------
    category : Category
    area     : area allocated to the category (sq ft), fractional allowed.
    config   : factor tables and stock sizes.

    Returns
    -------
    CategoryMaterials
        materials in the fixed display order for the category, and a
        short note on how the category-specific counts were derived.
    """
    category = Category(category)
    shared = shared_quantities(category, area, config)
    items, detail = _CATEGORY_HOOKS[category](area, shared, config)
    return CategoryMaterials(materials=tuple(items), detail=detail)


__all__ = [
    "SharedQuantities",
    "ColumnBoards",
    "CategoryMaterials",
    "wood_boards",
    "per_sqft",
    "estimate_column_count",
    "estimate_beam_count",
    "beam_run_length",
    "wall_run_length",
    "wall_panel_count",
    "column_wood_boards",
    "shared_quantities",
    "calculate_category",
]
