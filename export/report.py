# export/report.py
# ------------------------------------------------------------
# Plain-text print view of a shuttering estimate.
#
# render_text_report(result) → str with:
#   * header (total area, input as entered)
#   * material summary table
#   * one table per category with its notes and derivation detail
#   * the important-notes list
#
# Tables are rendered with pandas (DataFrame.to_string).
#
from __future__ import annotations

from typing import List

from core.constants import IMPORTANT_NOTES
from core.models import ShutteringResult
from export.excel import build_category_table, build_summary_table


def render_text_report(result: ShutteringResult) -> str:
    lines: List[str] = []
    inp = result.input

    title = "SHUTTERING MATERIAL ESTIMATE"
    lines += [title, "=" * len(title)]
    lines.append(f"Total area: {result.total_area:,} sq ft "
                 f"(entered as {inp.total_area:g} {inp.unit.value})")
    lines.append("")

    lines += ["Material summary", "-" * 16]
    lines.append(build_summary_table(result).to_string(index=False))
    lines.append("")

    for cat in result.categories:
        header = f"{cat.name} — {cat.total_area:,} sq ft"
        lines += [header, "-" * len(header)]
        if cat.notes:
            lines.append(cat.notes)
        if cat.detail:
            lines.append(cat.detail)
        table = build_category_table(cat).drop(columns=["Description"])
        lines.append(table.to_string(index=False))
        lines.append("")

    lines += ["Important notes", "-" * 15]
    lines += [f"- {note}" for note in IMPORTANT_NOTES]
    return "\n".join(lines) + "\n"


__all__ = ["render_text_report"]
