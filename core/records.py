from __future__ import annotations

import math
from typing import Any, Dict, Mapping, Tuple

MEASURES: Tuple[str, ...] = ("intensity", "likelihood", "relevance")

MEASURE_LABELS: Dict[str, str] = {
    "intensity": "Intensity",
    "likelihood": "Likelihood",
    "relevance": "Relevance",
}


def as_number(value: Any) -> float:
    """Coerce a record score to a number; absent, blank or non-numeric is 0."""
    if value is None or isinstance(value, bool):
        return 0
    if isinstance(value, (int, float)):
        if isinstance(value, float) and (math.isnan(value) or math.isinf(value)):
            return 0
        return value
    try:
        out = float(str(value).strip())
    except ValueError:
        return 0
    if math.isnan(out) or math.isinf(out):
        return 0
    return int(out) if out.is_integer() else out


def as_text(value: Any) -> str:
    """Render a record field as filter/label text. ``2030.0`` renders as ``2030``."""
    if value is None:
        return ""
    if isinstance(value, float):
        if math.isnan(value):
            return ""
        if value.is_integer():
            return str(int(value))
    return str(value)


def score(record: Mapping[str, Any], field: str) -> float:
    return as_number(record.get(field))
