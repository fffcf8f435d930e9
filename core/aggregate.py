from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Union

import pandas as pd

from core.records import MEASURE_LABELS, MEASURES, as_text, score
from core.swot import classify_swot

KeyFn = Callable[[Mapping[str, Any]], str]


@dataclass(frozen=True)
class MeasureTotals:
    intensity: float = 0
    likelihood: float = 0
    relevance: float = 0
    # Group size, excluded from equality.
    records: int = field(default=0, compare=False)

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)


def topic_key(record: Mapping[str, Any]) -> str:
    return as_text(record.get("topic"))


def year_key(record: Mapping[str, Any]) -> str:
    return as_text(record.get("end_year"))


def swot_key(record: Mapping[str, Any]) -> str:
    return classify_swot(record)


GROUPINGS: Dict[str, KeyFn] = {
    "topic": topic_key,
    "year": year_key,
    "swot": swot_key,
}


def _key_fn(key: Union[str, KeyFn]) -> KeyFn:
    if callable(key):
        return key
    return lambda record: as_text(record.get(key))


def _plain(value: Any) -> float:
    value = value.item() if hasattr(value, "item") else value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def aggregate_by_key(records: Iterable[Mapping[str, Any]], key: Union[str, KeyFn]) -> Dict[str, MeasureTotals]:
    """Sum intensity/likelihood/relevance per key.

    ``key`` is a record field name or a function of the record. Groups come
    out in the order their key first appears in ``records``; missing scores
    count as zero and missing keys group under ``""``.
    """
    records = list(records)
    if not records:
        return {}

    key_fn = _key_fn(key)
    frame = pd.DataFrame({"key": [key_fn(r) for r in records], "records": 1})
    for measure in MEASURES:
        frame[measure] = [score(r, measure) for r in records]

    grouped = frame.groupby("key", sort=False)[list(MEASURES) + ["records"]].sum()
    return {
        str(label): MeasureTotals(**{m: _plain(row[m]) for m in MEASURES}, records=int(row["records"]))
        for label, row in grouped.iterrows()
    }


def to_chart_data(totals: Mapping[str, MeasureTotals]) -> Dict[str, Any]:
    """Materialize grouped totals as parallel label/value arrays, one dataset per measure."""
    labels: List[str] = list(totals.keys())
    datasets = [
        {
            "label": MEASURE_LABELS[measure],
            "measure": measure,
            "data": [getattr(totals[label], measure) for label in labels],
        }
        for measure in MEASURES
    ]
    return {"labels": labels, "counts": [totals[label].records for label in labels], "datasets": datasets}


def total_of(totals: Mapping[str, MeasureTotals]) -> MeasureTotals:
    return MeasureTotals(
        **{m: sum(getattr(t, m) for t in totals.values()) for m in MEASURES},
        records=sum(t.records for t in totals.values()),
    )
