# export/json_export.py
# ------------------------------------------------------------
# JSON export of a shuttering estimate.
#
# What this file provides
# -----------------------
# - build_export_document(result)  → dict with
#       projectArea, unit, categories, summary, generatedAt
#       (generatedAt as "YYYY-MM-DDTHH:MM:SS.mmmZ", UTC)
# - export_to_json_bytes(result)   → UTF-8 bytes (indent 2), ready to download
# - export_filename(result)        → "shuttering-calculation-<area>sqft.json"
#
# Keys are camelCase so existing consumers of the exported file keep working.
#
from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional

from core.models import CategoryResult, MaterialItem, ShutteringResult

logger = logging.getLogger(__name__)


def _material_dict(item: MaterialItem) -> Dict[str, Any]:
    d: Dict[str, Any] = {
        "name": item.name,
        "quantity": item.quantity,
        "unit": item.unit,
    }
    # optional fields are omitted when empty
    if item.description:
        d["description"] = item.description
    if item.size:
        d["size"] = item.size
    return d


def _category_dict(cat: CategoryResult) -> Dict[str, Any]:
    return {
        "category": cat.name,
        "materials": [_material_dict(m) for m in cat.materials],
        "totalArea": cat.total_area,
        "notes": cat.notes,
    }


def build_export_document(
    result: ShutteringResult,
    generated_at: Optional[datetime] = None,
) -> Dict[str, Any]:
    """
    Build the export document for a result.

    Parameters
    ----------
    result       : ShutteringResult
    generated_at : timestamp to record; defaults to now (UTC). Naive values
                   are taken as UTC.
    """
    ts = generated_at or datetime.now(timezone.utc)
    ts = ts.replace(tzinfo=timezone.utc) if ts.tzinfo is None else ts.astimezone(timezone.utc)
    categories: List[Dict[str, Any]] = [_category_dict(c) for c in result.categories]
    return {
        "projectArea": result.total_area,
        "unit": "sq ft",
        "categories": categories,
        "summary": result.summary.as_dict(),
        "generatedAt": ts.isoformat(timespec="milliseconds").replace("+00:00", "Z"),
    }


def export_to_json_bytes(
    result: ShutteringResult,
    generated_at: Optional[datetime] = None,
) -> bytes:
    doc = build_export_document(result, generated_at=generated_at)
    logger.debug("JSON export for %d sq ft", result.total_area)
    return json.dumps(doc, indent=2, ensure_ascii=False).encode("utf-8")


def export_filename(result: ShutteringResult) -> str:
    return f"shuttering-calculation-{result.total_area}sqft.json"


__all__ = ["build_export_document", "export_to_json_bytes", "export_filename"]
