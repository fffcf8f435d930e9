"""SWOT classification of records from their summed scores.

The branches are evaluated in this order and the first match wins:

* total >= 15 -> Strengths
* total <= 5  -> Weaknesses
* total > 10  -> Opportunities
* otherwise   -> Threats

so Opportunities only covers totals strictly between 10 and 15, and a total
of exactly 10 is a Threat.
"""

from __future__ import annotations

from typing import Any, Mapping, Tuple

from core.records import MEASURES, score

STRENGTHS = "Strengths"
WEAKNESSES = "Weaknesses"
OPPORTUNITIES = "Opportunities"
THREATS = "Threats"

SWOT_LABELS: Tuple[str, ...] = (STRENGTHS, WEAKNESSES, OPPORTUNITIES, THREATS)

HIGH_THRESHOLD = 15
LOW_THRESHOLD = 5
AVERAGE_THRESHOLD = 10


def swot_total(record: Mapping[str, Any]) -> float:
    return sum(score(record, m) for m in MEASURES)


def classify_total(total: float) -> str:
    if total >= HIGH_THRESHOLD:
        return STRENGTHS
    if total <= LOW_THRESHOLD:
        return WEAKNESSES
    if total > AVERAGE_THRESHOLD:
        return OPPORTUNITIES
    return THREATS


def classify_swot(record: Mapping[str, Any]) -> str:
    return classify_total(swot_total(record))
