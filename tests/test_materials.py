# tests/test_materials.py
# ------------------------------------------------------------
# Per-category material tables and the column board rule.
# Run:  pytest -q
#
from __future__ import annotations

import pytest

from core.calculator import calculate
from core.constants import CATEGORY_DISTRIBUTION, DEFAULT_CONFIG, ShutteringConfig
from core.materials import (
    calculate_category,
    column_wood_boards,
    estimate_beam_count,
    estimate_column_count,
    wall_panel_count,
    wood_boards,
)
from core.models import BoardSpec, CalculationInput, Category, MaterialFamily


def _table(category: Category, area: float):
    return [(m.name, m.quantity, m.unit) for m in calculate_category(category, area).materials]


def test_board_area_is_two_and_a_half_inch_by_eight_foot():
    assert BoardSpec().area_sqft == pytest.approx(1.6667, abs=1e-4)


def test_slab_table_at_500_sqft():
    assert _table(Category.SLAB, 500.0) == [
        ('Wood Boards (2.5" × 8\')', 195, "pcs"),
        ("Adjustable Props", 40, "pcs"),
        ("Steel Beams / Joists", 75, "pcs"),
        ("Bamboo Poles", 60, "pcs"),
        ("Steel Shuttering Sheets (4' × 8')", 16, "pcs"),
        ('Nails (4")', 195 * 8, "pcs"),
        ("Binding Wire", 25, "kg"),
    ]


def test_beam_table_at_250_sqft():
    # run = sqrt(1000) = 31.6 ft -> 3 beams of 8'
    assert estimate_beam_count(250.0) == 3
    assert _table(Category.BEAM, 250.0) == [
        ('Wood Boards (2.5" × 8\')', 128, "pcs"),
        ("Adjustable Props", 38, "pcs"),
        ("Steel Beams / Joists", 63, "pcs"),
        ("Bamboo Poles", 20, "pcs"),
        ("Beam Bottom Plates", 6, "pcs"),
        ('Nails (3")', 128 * 6, "pcs"),
        ('Nails (5")', 12, "pcs"),
    ]


def test_column_table_at_150_sqft():
    assert _table(Category.COLUMN, 150.0) == [
        ('Wood Boards (2.5" × 8\')', 5400, "pcs"),
        ("Column Clamps / Yokes", 2700, "pcs"),
        ("Adjustable Props", 8, "pcs"),
        ("Steel Beams / Joists", 15, "pcs"),
        ("Bamboo Poles", 9, "pcs"),
        ("Corner Angles (Steel)", 2700, "pcs"),
        ('Nails (4")', 5400 * 4, "pcs"),
        ("Release Agent / Oil", 3, "liters"),
    ]


def test_wall_table_at_100_sqft():
    # 100 sq ft / 10 ft height = 10 ft run -> 2 panels of 8'
    assert wall_panel_count(100.0) == 2
    assert _table(Category.WALL, 100.0) == [
        ('Wood Boards (2.5" × 8\')', 45, "pcs"),
        ("Wall Panels (Steel)", 2, "pcs"),
        ("Adjustable Props", 6, "pcs"),
        ("Steel Beams / Joists", 12, "pcs"),
        ("Bamboo Poles", 10, "pcs"),
        ("Tie Rods", 4, "pcs"),
        ('Nails (3")', 45 * 5, "pcs"),
    ]


def test_column_rule_estimated_columns_dominate_small_areas():
    col = column_wood_boards(150.0)
    assert col.estimated_columns == 675
    assert col.column_boards == 5400
    assert col.baseline == 126
    assert col.boards == max(col.baseline, col.column_boards) == 5400
    assert '2.5" + 2.5"' in col.note


def test_column_rule_uses_at_least_one_column():
    assert estimate_column_count(0.01) == 1
    col = column_wood_boards(0.01)
    assert col.boards == 8


def test_column_baseline_governs_with_large_faces():
    cfg = ShutteringConfig(column_face_area=100.0)
    col = column_wood_boards(150.0, cfg)
    assert col.estimated_columns == 1
    assert col.boards == col.baseline == 126


def test_every_category_tags_the_shared_families():
    for cat in Category:
        res = calculate_category(cat, 321.0)
        for family in (MaterialFamily.WOOD_BOARD, MaterialFamily.PROP,
                       MaterialFamily.BEAM, MaterialFamily.BAMBOO):
            assert sum(1 for m in res.materials if m.family == family) == 1
        assert res.detail


def test_only_slab_has_steel_sheets():
    for cat in Category:
        has_sheet = any(m.family == MaterialFamily.STEEL_SHEET
                        for m in calculate_category(cat, 500.0).materials)
        assert has_sheet == (cat == Category.SLAB)


def test_wood_boards_rounds_up():
    # 1 sq ft at factor 1.0 is 0.6 of a board -> 1 board
    assert wood_boards(1.0, 1.0) == 1


def test_config_rejects_bad_distribution():
    bad = dict(CATEGORY_DISTRIBUTION)
    bad[Category.WALL] = 0.2
    with pytest.raises(ValueError):
        ShutteringConfig(distribution=bad)


def test_config_rejects_missing_category():
    partial = {k: v for k, v in CATEGORY_DISTRIBUTION.items() if k != Category.WALL}
    with pytest.raises(ValueError):
        ShutteringConfig(distribution=partial)


def test_default_config_cannot_be_mutated():
    with pytest.raises(TypeError):
        DEFAULT_CONFIG.distribution[Category.SLAB] = 5.0
    with pytest.raises(TypeError):
        DEFAULT_CONFIG.factors[Category.SLAB] = None
    with pytest.raises(TypeError):
        CATEGORY_DISTRIBUTION[Category.SLAB] = 5.0
    res = calculate(CalculationInput(total_area=1000.0))
    assert res.category(Category.SLAB).total_area == 500


def test_config_copies_caller_mapping():
    dist = dict(CATEGORY_DISTRIBUTION)
    cfg = ShutteringConfig(distribution=dist)
    dist[Category.SLAB] = 5.0
    assert cfg.distribution[Category.SLAB] == 0.50


def test_config_is_hashable():
    assert hash(DEFAULT_CONFIG) == hash(ShutteringConfig())
    assert DEFAULT_CONFIG == ShutteringConfig()
