# export/excel.py
# ------------------------------------------------------------
# Excel export utilities for the shuttering estimator.
#
# What this file provides
# -----------------------
# - build_input_table(inp)            → pandas.DataFrame of inputs
# - build_summary_table(result)       → pandas.DataFrame of family totals
# - build_category_table(cat)         → pandas.DataFrame of one category
# - build_materials_table(result)     → pandas.DataFrame of every line item
# - export_to_excel_bytes(result)     → bytes of an .xlsx workbook with:
#       * "Summary"   sheet (totals + category areas)
#       * "Inputs"    sheet
#       * "Materials" sheet (all categories, long format)
#       * "Slab" / "Beam" / "Column" / "Wall" sheets
#   Optional: an "AreaSweep" sheet with a chart if you pass a sweep in.
#
# Dependencies: pandas, numpy, xlsxwriter (pandas uses it as engine)
#
from __future__ import annotations

import logging
from io import BytesIO
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import numpy as np
import pandas as pd

from core.calculator import SUMMARY_LABELS, summary_quantities
from core.constants import IMPORTANT_NOTES
from core.models import CalculationInput, CategoryResult, MaterialFamily, ShutteringResult

logger = logging.getLogger(__name__)

# Stock size per summarised family. Labels come from core.calculator.SUMMARY_LABELS.
SUMMARY_SIZES: Dict[MaterialFamily, str] = {
    MaterialFamily.WOOD_BOARD: "2.5\" × 8'",
    MaterialFamily.PROP: "8' length",
    MaterialFamily.BEAM: "8' length",
    MaterialFamily.BAMBOO: "12' × 3\"",
    MaterialFamily.STEEL_SHEET: "4' × 8'",
}

CATEGORY_SHEETS = ("Slab", "Beam", "Column", "Wall")


# -----------------------------
# Table builders (pandas)
# -----------------------------
def build_input_table(inp: CalculationInput) -> pd.DataFrame:
    """
    Flatten CalculationInput into a tidy two-column table for Excel.
    Advanced values not supplied are written as blanks.
    """
    def _opt(v):
        return np.nan if v is None else v

    data = {
        "Parameter": [
            "Total area",
            "Unit",
            "Slab height (ft) [reserved]",
            "Beam height (in) [reserved]",
            "Column height (ft) [reserved]",
            "Slab thickness (in) [reserved]",
            "Prefer steel shuttering [reserved]",
        ],
        "Value": [
            inp.total_area,
            inp.unit.value,
            _opt(inp.slab_height),
            _opt(inp.beam_height),
            _opt(inp.column_height),
            _opt(inp.slab_thickness),
            "Yes" if inp.use_steel_shuttering else "No",
        ],
    }
    return pd.DataFrame(data)


def build_summary_table(result: ShutteringResult) -> pd.DataFrame:
    """Five summarised families with their stock size."""
    rows = [
        {"Material": label, "Size": size, "Quantity": qty}
        for label, size, qty in _summary_rows(result)
    ]
    return pd.DataFrame(rows, columns=["Material", "Size", "Quantity"])


def build_category_table(cat: CategoryResult) -> pd.DataFrame:
    """One row per line item, in display order."""
    rows = []
    for m in cat.materials:
        rows.append({
            "Material": m.name,
            "Size/Spec": m.size or "-",
            "Quantity": m.quantity,
            "Unit": m.unit,
            "Description": m.description,
        })
    return pd.DataFrame(rows, columns=["Material", "Size/Spec", "Quantity", "Unit", "Description"])


def build_materials_table(result: ShutteringResult) -> pd.DataFrame:
    """Every line item across categories (long format)."""
    frames = []
    for cat in result.categories:
        df = build_category_table(cat)
        df.insert(0, "Category", cat.name)
        df.insert(1, "Category area (sq ft)", cat.total_area)
        frames.append(df)
    return pd.concat(frames, ignore_index=True)


# -----------------------------
# Excel writer
# -----------------------------
def export_to_excel_bytes(
    result: ShutteringResult,
    *,
    area_sweep: Optional[Tuple[Sequence[float], Mapping[str, Sequence[float]]]] = None,
) -> bytes:
    """
    Create an in-memory .xlsx workbook with summary, inputs and materials.
    Optionally include an AreaSweep sheet with quantity-vs-area series.

    Parameters
    ----------
    result     : ShutteringResult
    area_sweep : optional tuple (areas, series)
                 where areas are total areas (input unit) and series maps a
                 label (e.g. "Wood Boards") to one quantity per area.

    Returns
    -------
    bytes
        The content of the .xlsx file, ready for download or saving.
    """
    bio = BytesIO()
    with pd.ExcelWriter(bio, engine="xlsxwriter") as writer:
        # 1) Summary
        _write_summary_sheet(writer, result)

        # 2) Inputs
        build_input_table(result.input).to_excel(writer, sheet_name="Inputs", index=False)

        # 3) Materials (long)
        build_materials_table(result).to_excel(writer, sheet_name="Materials", index=False)

        # 4) One sheet per category
        for sheet, cat in zip(CATEGORY_SHEETS, result.categories):
            build_category_table(cat).to_excel(writer, sheet_name=sheet, index=False)

        # 5) Optional area sweep
        if area_sweep is not None:
            areas, series = area_sweep
            _write_area_sweep_sheet(writer, areas, series, result.input.unit.value)

        _autofit_columns(writer, "Inputs")
        _autofit_columns(writer, "Materials")
        for sheet in CATEGORY_SHEETS:
            _autofit_columns(writer, sheet)

    logger.debug("Excel export for %d sq ft", result.total_area)
    return bio.getvalue()


# -----------------------------
# Helpers (xlsxwriter formatting)
# -----------------------------
def _summary_rows(result: ShutteringResult) -> List[Tuple[str, str, int]]:
    totals = summary_quantities(result.summary)
    return [(label, SUMMARY_SIZES[fam], totals[label]) for fam, label in SUMMARY_LABELS.items()]


def _write_summary_sheet(writer: pd.ExcelWriter, result: ShutteringResult) -> None:
    ws = writer.book.add_worksheet("Summary")
    writer.sheets["Summary"] = ws

    # Formats
    h1 = writer.book.add_format({"bold": True, "font_size": 14})
    h2 = writer.book.add_format({"bold": True, "font_size": 12})
    lab = writer.book.add_format({"bold": True})

    ws.write(0, 0, "Shuttering Material Estimate — Summary", h1)

    ws.write(2, 0, "Total area (sq ft):", lab)
    ws.write_number(2, 1, result.total_area)
    ws.write(3, 0, "Input:", lab)
    ws.write(3, 1, f"{result.input.total_area:g} {result.input.unit.value}")

    ws.write(5, 0, "Material totals", h2)
    row = 6
    for j, h in enumerate(("Material", "Size", "Quantity")):
        ws.write(row, j, h, lab)
    row += 1
    for label, size, qty in _summary_rows(result):
        ws.write(row, 0, label)
        ws.write(row, 1, size)
        ws.write_number(row, 2, qty)
        row += 1

    ws.write(row + 1, 0, "Categories", h2)
    row += 2
    for j, h in enumerate(("Category", "Area (sq ft)", "Notes", "Detail")):
        ws.write(row, j, h, lab)
    row += 1
    for cat in result.categories:
        ws.write(row, 0, cat.name)
        ws.write_number(row, 1, cat.total_area)
        ws.write(row, 2, cat.notes)
        ws.write(row, 3, cat.detail)
        row += 1

    ws.write(row + 1, 0, "Important notes", h2)
    row += 2
    for note in IMPORTANT_NOTES:
        ws.write(row, 0, f"• {note}")
        row += 1

    # Column widths
    ws.set_column(0, 0, 28)
    ws.set_column(1, 1, 16)
    ws.set_column(2, 2, 60)
    ws.set_column(3, 3, 60)


def _write_area_sweep_sheet(
    writer: pd.ExcelWriter,
    areas: Sequence[float],
    series: Mapping[str, Sequence[float]],
    unit: str,
) -> None:
    """
    Writes a sheet "AreaSweep" with the area column plus one column per
    series, and a line chart of all series.
    """
    df = pd.DataFrame({f"Area ({unit})": list(areas)})
    for label, values in series.items():
        df[label] = list(values)
    df.to_excel(writer, sheet_name="AreaSweep", index=False)
    ws = writer.sheets["AreaSweep"]

    chart = writer.book.add_chart({"type": "line"})
    n = len(df)
    for j in range(1, len(df.columns)):
        chart.add_series({
            "name":       ["AreaSweep", 0, j],
            "categories": ["AreaSweep", 1, 0, n, 0],
            "values":     ["AreaSweep", 1, j, n, j],
            "line":       {"width": 2.25},
        })
    chart.set_title({"name": "Quantities vs total area"})
    chart.set_x_axis({"name": f"Total area ({unit})"})
    chart.set_y_axis({"name": "Quantity (pcs)"})
    chart.set_legend({"position": "bottom"})
    ws.insert_chart("H2", chart, {"x_scale": 1.3, "y_scale": 1.2})


def _autofit_columns(writer: pd.ExcelWriter, sheet_name: str) -> None:
    """
    Best-effort column widths for a given sheet (no text measurement available).
    """
    ws = writer.sheets.get(sheet_name)
    if ws is None:
        return
    if sheet_name == "Inputs":
        ws.set_column(0, 0, 36)  # Parameter
        ws.set_column(1, 1, 20)  # Value
    elif sheet_name == "Materials":
        ws.set_column(0, 0, 20)  # Category
        ws.set_column(1, 1, 20)  # Category area
        ws.set_column(2, 2, 34)  # Material
        ws.set_column(3, 3, 24)  # Size/Spec
        ws.set_column(4, 5, 10)  # Quantity/Unit
        ws.set_column(6, 6, 48)  # Description
    else:
        ws.set_column(0, 0, 34)
        ws.set_column(1, 1, 24)
        ws.set_column(2, 3, 10)
        ws.set_column(4, 4, 48)


__all__ = [
    "build_input_table",
    "build_summary_table",
    "build_category_table",
    "build_materials_table",
    "export_to_excel_bytes",
]
