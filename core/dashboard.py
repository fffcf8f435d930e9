from __future__ import annotations

import logging
from dataclasses import asdict
from typing import Any, Dict, Iterable, List, Mapping

from core.aggregate import GROUPINGS, aggregate_by_key, to_chart_data
from core.charts import grouped_bar_chart, to_vega_spec
from core.filters import FilterSet, filter_records, normalize_filters
from core.swot import classify_swot

logger = logging.getLogger(__name__)

CHART_TITLES: Dict[str, str] = {
    "topic": "Topic-Based Data",
    "year": "Year-Based Data",
    "swot": "SWOT-Based Data",
}

CHART_KEY_TITLES: Dict[str, str] = {
    "topic": "topic",
    "year": "end_year",
    "swot": "swot",
}


def label_records(records: Iterable[Mapping[str, Any]]) -> List[Dict[str, Any]]:
    """Shallow copies of ``records`` with the derived ``swot`` label attached."""
    return [{**r, "swot": classify_swot(r)} for r in records]


def build_dashboard(records: Iterable[Mapping[str, Any]], filters: FilterSet | Mapping[str, Any] | None = None) -> Dict[str, Any]:
    filt = filters if isinstance(filters, FilterSet) else normalize_filters(filters)
    records = list(records)
    filtered = filter_records(records, filt)

    charts: Dict[str, Any] = {}
    vega: Dict[str, Any] = {}
    for name, key_fn in GROUPINGS.items():
        totals = aggregate_by_key(filtered, key_fn)
        charts[name] = to_chart_data(totals)
        if totals:
            chart = grouped_bar_chart(totals, key_title=CHART_KEY_TITLES[name], title=CHART_TITLES[name])
            vega[name] = to_vega_spec(chart)

    logger.info("Dashboard built: %d of %d records after filters", len(filtered), len(records))
    return {
        "filters": asdict(filt),
        "count": len(filtered),
        "total": len(records),
        "records": label_records(filtered),
        "charts": charts,
        "vega": vega,
    }
