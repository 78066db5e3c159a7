# tests/test_smoke.py
# ------------------------------------------------------------
# Smoke tests for the shuttering estimator engine.
# Run:  pytest -q
#
from __future__ import annotations

import math

import pytest

from core.areas import distribute_area, round_display, sqft_to_sqm, sqm_to_sqft
from core.calculator import area_sweep, calculate, summarize
from core.models import (
    AreaUnit, CalculationInput, Category, InvalidAreaError, MaterialFamily
)


def _default_input(total_area: float = 1000.0, unit: AreaUnit = AreaUnit.SQFT) -> CalculationInput:
    return CalculationInput(total_area=total_area, unit=unit)


def _quantities(result):
    return [m.quantity for cat in result.categories for m in cat.materials]


def test_calculate_returns_four_categories_in_order():
    """Basic: slab, beam, column, wall, each with a non-empty bill."""
    res = calculate(_default_input())
    assert [c.category for c in res.categories] == [
        Category.SLAB, Category.BEAM, Category.COLUMN, Category.WALL
    ]
    assert [c.name for c in res.categories] == [
        "Slab Shuttering", "Beam Shuttering", "Column Shuttering", "Wall Shuttering"
    ]
    for cat in res.categories:
        assert cat.materials
        assert cat.notes


def test_1000_sqft_scenario():
    res = calculate(_default_input(1000.0))
    assert res.total_area == 1000
    assert [c.total_area for c in res.categories] == [500, 250, 150, 100]

    slab = res.category(Category.SLAB)
    assert slab.find(MaterialFamily.WOOD_BOARD).quantity == 195
    assert slab.find(MaterialFamily.STEEL_SHEET).quantity == 16
    wire = next(m for m in slab.materials if m.name == "Binding Wire")
    assert wire.quantity == 25
    assert wire.unit == "kg"

    column = res.category(Category.COLUMN)
    assert column.find(MaterialFamily.WOOD_BOARD).quantity == 5400
    assert "675 estimated columns" in column.detail


def test_1000_sqft_summary_totals():
    s = calculate(_default_input(1000.0)).summary
    assert s.total_wood_boards == 195 + 128 + 5400 + 45
    assert s.total_props == 40 + 38 + 8 + 6
    assert s.total_beams == 75 + 63 + 15 + 12
    assert s.total_bamboo == 60 + 20 + 9 + 10
    assert s.total_steel_sheets == 16


def test_sqm_input_matches_converted_sqft_input():
    """100 sq m runs exactly like 1076.4 sq ft."""
    res_m = calculate(_default_input(100.0, AreaUnit.SQM))
    res_f = calculate(_default_input(sqm_to_sqft(100.0), AreaUnit.SQFT))
    assert math.isclose(res_m.derived["total_area_sqft"], 1076.4, rel_tol=1e-12)
    assert res_m.total_area == 1076
    assert res_m.categories == res_f.categories
    assert res_m.summary == res_f.summary
    assert [c.total_area for c in res_m.categories] == [538, 269, 161, 108]


def test_unit_string_is_coerced():
    inp = CalculationInput(total_area=10.0, unit="sqm")
    assert inp.unit is AreaUnit.SQM
    with pytest.raises(ValueError):
        CalculationInput(total_area=10.0, unit="acre")


def test_determinism():
    inp = _default_input(1234.5)
    assert calculate(inp) == calculate(inp)


@pytest.mark.parametrize("x", [0.001, 1.0, 10.764, 999.9, 1e6])
def test_unit_round_trip(x):
    assert math.isclose(sqft_to_sqm(sqm_to_sqft(x)), x, rel_tol=1e-12)


@pytest.mark.parametrize("total", [1.0, 333.3, 1000.0, 98765.4])
def test_distribution_conservation(total):
    areas = distribute_area(total)
    assert list(areas) == [Category.SLAB, Category.BEAM, Category.COLUMN, Category.WALL]
    assert math.isclose(sum(areas.values()), total, rel_tol=1e-12)


@pytest.mark.parametrize("total", [0.5, 1.0, 7.3, 250.0, 1000.0, 54321.0])
def test_quantities_are_non_negative_integers(total):
    for q in _quantities(calculate(_default_input(total))):
        assert isinstance(q, int)
        assert q >= 0


def test_monotonic_in_area():
    """Growing the area never lowers any line item."""
    areas = [0.5, 1.0, 5.0, 10.0, 50.0, 100.0, 333.3, 1000.0, 2500.0, 10000.0]
    prev = None
    for a in areas:
        cur = _quantities(calculate(_default_input(a)))
        if prev is not None:
            assert all(c >= p for c, p in zip(cur, prev)), f"decrease at area={a}"
        prev = cur


@pytest.mark.parametrize("total", [12.0, 1000.0, 4321.9])
def test_summary_matches_line_items(total):
    res = calculate(_default_input(total))
    assert summarize(res.categories) == res.summary

    def family_sum(family):
        return sum(m.quantity for c in res.categories for m in c.materials if m.family == family)

    assert res.summary.total_wood_boards == family_sum(MaterialFamily.WOOD_BOARD)
    assert res.summary.total_props == family_sum(MaterialFamily.PROP)
    assert res.summary.total_beams == family_sum(MaterialFamily.BEAM)
    assert res.summary.total_bamboo == family_sum(MaterialFamily.BAMBOO)
    assert res.summary.total_steel_sheets == family_sum(MaterialFamily.STEEL_SHEET)


def test_steel_panels_and_angles_are_not_steel_sheets():
    res = calculate(_default_input(1000.0))
    wall = res.category(Category.WALL)
    panels = next(m for m in wall.materials if m.name == "Wall Panels (Steel)")
    assert panels.family is None
    assert res.summary.total_steel_sheets == res.category(Category.SLAB).find(
        MaterialFamily.STEEL_SHEET).quantity


@pytest.mark.parametrize("bad", [0, 0.0, -5.0, float("nan"), float("inf"), -float("inf"), True, "100", None])
def test_invalid_area_rejected(bad):
    with pytest.raises(InvalidAreaError):
        calculate(CalculationInput(total_area=bad))


def test_invalid_area_is_value_error():
    assert issubclass(InvalidAreaError, ValueError)


def test_reserved_parameters_do_not_change_quantities():
    plain = calculate(_default_input(800.0))
    advanced = calculate(CalculationInput(
        total_area=800.0,
        unit=AreaUnit.SQFT,
        slab_height=10.0,
        beam_height=12.0,
        column_height=10.0,
        slab_thickness=6.0,
        use_steel_shuttering=True,
    ))
    assert advanced.categories == plain.categories
    assert advanced.summary == plain.summary
    assert advanced.input.advanced_parameters()["slab_thickness"] == 6.0


def test_round_display_rounds_halves_up():
    assert round_display(2.5) == 3
    assert round_display(3.5) == 4
    assert round_display(2.49) == 2


def test_area_sweep_series():
    series = area_sweep(_default_input(), [100.0, 1000.0, 5000.0])
    assert set(series) == {"Wood Boards", "Props", "Steel Beams", "Bamboo Poles", "Steel Sheets"}
    assert series["Wood Boards"][1] == 5768
    for values in series.values():
        assert len(values) == 3
        assert values == sorted(values)


def test_sqm_area_overflowing_sq_ft_is_rejected():
    """A finite sq m value that becomes inf in sq ft is an invalid area."""
    with pytest.raises(InvalidAreaError):
        calculate(CalculationInput(total_area=1e308, unit=AreaUnit.SQM))


def test_largest_finite_sqft_area_still_computes():
    res = calculate(_default_input(1e300))
    assert res.summary.total_wood_boards > 0


def test_result_derived_is_read_only():
    res = calculate(_default_input(1000.0))
    with pytest.raises(TypeError):
        res.derived["total_area_sqft"] = 0.0
    assert res.derived["slab_area_sqft"] == 500.0
