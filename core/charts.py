from __future__ import annotations

from typing import Any, Dict, Mapping

import altair as alt
import pandas as pd

from core.aggregate import MeasureTotals
from core.records import MEASURE_LABELS, MEASURES

alt.data_transformers.disable_max_rows()


def to_vega_spec(chart: alt.Chart) -> Dict[str, Any]:
    """Convert an Altair chart into a Vega-Lite spec dict (JSON-serializable)."""
    return chart.to_dict()


def totals_frame(totals: Mapping[str, MeasureTotals], key_title: str = "key") -> pd.DataFrame:
    """Long frame (key, measure, value, records) for grouped bar charts."""
    rows = [
        {key_title: label, "measure": MEASURE_LABELS[m], "value": getattr(t, m), "records": t.records}
        for label, t in totals.items()
        for m in MEASURES
    ]
    return pd.DataFrame(rows, columns=[key_title, "measure", "value", "records"])


def grouped_bar_chart(totals: Mapping[str, MeasureTotals], *, key_title: str, title: str) -> alt.Chart:
    df = totals_frame(totals, key_title=key_title)
    # Keep x order as first seen instead of Vega's alphabetical default.
    x_order = list(totals.keys())
    return (
        alt.Chart(df, title=title)
        .mark_bar()
        .encode(
            x=alt.X(f"{key_title}:N", title=key_title.replace("_", " ").title(), sort=x_order),
            xOffset=alt.XOffset("measure:N", sort=[MEASURE_LABELS[m] for m in MEASURES]),
            y=alt.Y("value:Q", title="Total", scale=alt.Scale(zero=True)),
            color=alt.Color("measure:N", title="Measure", sort=[MEASURE_LABELS[m] for m in MEASURES]),
            tooltip=[
                alt.Tooltip(f"{key_title}:N"),
                alt.Tooltip("measure:N", title="Measure"),
                alt.Tooltip("value:Q", title="Total", format=",.2~f"),
                alt.Tooltip("records:Q", title="Records"),
            ],
        )
    )
