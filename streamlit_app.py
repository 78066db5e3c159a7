# streamlit_app.py
# ------------------------------------------------------------
# Streamlit UI for the shuttering (formwork) estimator.
# - Collects total area + unit (+ optional advanced inputs)
# - Validates area > 0, then calls core.calculator.calculate()
# - Shows summary totals + per-category tables (All / Slab / Beam / Column / Wall)
# - Downloads: JSON, Excel, plain-text print view
# - Optional: quantity-vs-area sweep chart
#
# Run:
#   streamlit run streamlit_app.py
#
from __future__ import annotations

import logging

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd
import streamlit as st

# Local imports (no circular refs; core/* never imports streamlit_app)
from core.calculator import area_sweep, calculate, shared_breakdown, summary_quantities
from core.constants import IMPORTANT_NOTES
from core.models import AreaUnit, CalculationInput, CategoryResult, InvalidAreaError, MaterialFamily
from charts.plots import plot_category_breakdown, plot_quantity_vs_area, plot_summary_bars
from export.excel import build_category_table, export_to_excel_bytes
from export.json_export import export_filename, export_to_json_bytes
from export.report import render_text_report

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
logger = logging.getLogger("shuttering")


# -----------------------------
# UI Helpers
# -----------------------------
def _unit_radio() -> AreaUnit:
    pick = st.radio("Unit", ["sq ft", "sq m"], horizontal=True, index=0)
    return AreaUnit.SQM if pick == "sq m" else AreaUnit.SQFT


def _category_block(cat: CategoryResult) -> None:
    st.markdown(f"#### {cat.name} · {cat.total_area:,} sq ft")
    if cat.notes:
        st.caption(cat.notes)

    quick = st.columns(3)
    for col, (label, family) in zip(quick, (
        ("Wood Boards", MaterialFamily.WOOD_BOARD),
        ("Props", MaterialFamily.PROP),
        ("Beams", MaterialFamily.BEAM),
    )):
        item = cat.find(family)
        if item is not None:
            col.metric(label, f"{item.quantity:,}")

    st.dataframe(build_category_table(cat), use_container_width=True, hide_index=True)
    if cat.detail:
        st.caption(cat.detail)


# -----------------------------
# Sidebar inputs
# -----------------------------
st.set_page_config(page_title="Shuttering Calculator", layout="wide")
st.title("Shuttering Calculator — formwork material estimate")

with st.sidebar:
    st.header("Project area")
    total_area = st.number_input("Total construction area", min_value=0.0, value=1000.0, step=10.0,
                                 help="Total built-up area. It is distributed across slabs, "
                                      "beams, columns and walls.")
    unit = _unit_radio()

    st.divider()
    with st.expander("Advanced options (reserved, not used in quantities)"):
        slab_height = st.number_input("Slab height (ft)", min_value=1.0, value=10.0, step=0.5)
        beam_height = st.number_input("Beam height (in)", min_value=1.0, value=12.0, step=1.0)
        column_height = st.number_input("Column height (ft)", min_value=1.0, value=10.0, step=0.5)
        slab_thickness = st.number_input("Slab thickness (in)", min_value=1.0, value=6.0, step=0.5)
        use_steel = st.checkbox("Prefer steel shuttering over wood (where applicable)")
        use_advanced = st.checkbox("Include advanced values in exports")

    st.divider()
    run_calc = st.button("Calculate materials", type="primary")


# -----------------------------
# Build input object & run
# -----------------------------
if use_advanced:
    inp = CalculationInput(
        total_area=float(total_area),
        unit=unit,
        slab_height=float(slab_height),
        beam_height=float(beam_height),
        column_height=float(column_height),
        slab_thickness=float(slab_thickness),
        use_steel_shuttering=bool(use_steel),
    )
else:
    inp = CalculationInput(total_area=float(total_area), unit=unit)

if run_calc:
    if not total_area > 0:
        st.error("Enter a total area greater than zero.")
        st.stop()
    try:
        st.session_state["result"] = calculate(inp)
    except InvalidAreaError as exc:
        st.error(f"Calculation failed: {exc}")
        st.stop()
    logger.info("Estimated %s %s", inp.total_area, inp.unit.value)

# keep the last result across reruns (sweep widgets rerun the script)
result = st.session_state.get("result")

if result is not None:
    # Downloads
    d1, d2, d3 = st.columns(3)
    d1.download_button("Export JSON", export_to_json_bytes(result),
                       file_name=export_filename(result), mime="application/json")
    d2.download_button("Export Excel", export_to_excel_bytes(result),
                       file_name=export_filename(result).replace(".json", ".xlsx"),
                       mime="application/vnd.openxmlformats-officedocument.spreadsheetml.sheet")
    d3.download_button("Print view (text)", render_text_report(result),
                       file_name=export_filename(result).replace(".json", ".txt"),
                       mime="text/plain")

    # Summary
    st.subheader(f"Material summary · {result.total_area:,} sq ft")
    totals = summary_quantities(result.summary)
    for col, (label, qty) in zip(st.columns(len(totals)), totals.items()):
        col.metric(label, f"{qty:,}")

    col1, col2 = st.columns((1, 1), gap="large")
    with col1:
        st.pyplot(plot_summary_bars(totals), clear_figure=True)
    with col2:
        st.pyplot(plot_category_breakdown(shared_breakdown(result)), clear_figure=True)

    # Categories
    tabs = st.tabs(["All", "Slab", "Beam", "Column", "Wall"])
    with tabs[0]:
        for cat in result.categories:
            _category_block(cat)
    for tab, cat in zip(tabs[1:], result.categories):
        with tab:
            _category_block(cat)

    # Optional area sweep
    st.markdown("### Area sweep (quantities vs total area)")
    sweep = st.checkbox("Enable area sweep")
    if sweep:
        base = result.input
        a_max = st.number_input("Max area", min_value=float(base.total_area),
                                value=float(base.total_area) * 2, step=10.0)
        npts = st.slider("Points", min_value=5, max_value=50, value=20, step=1)
        areas = np.linspace(float(base.total_area) / 10, float(a_max), int(npts))
        series = area_sweep(base, areas)
        fig = plot_quantity_vs_area(areas, series, unit=base.unit.value)
        st.pyplot(fig, clear_figure=True)
        plt.close("all")
        st.dataframe(pd.DataFrame({f"Area ({base.unit.value})": areas, **series}),
                     use_container_width=True, hide_index=True)

    st.divider()
    st.markdown("**Important notes**")
    st.markdown("\n".join(f"- {note}" for note in IMPORTANT_NOTES))
else:
    st.info("Enter the project area in the sidebar and click **Calculate materials** to see results.")
