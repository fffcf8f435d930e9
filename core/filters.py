from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional

from core.records import as_text
from core.swot import SWOT_LABELS, classify_swot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterSet:
    end_year: str = ""
    topic: str = ""
    sector: str = ""
    region: str = ""
    pestle: str = ""
    source: str = ""
    country: str = ""
    swot: str = ""
    city: str = ""

    def active(self) -> Dict[str, str]:
        return {name: value for name, value in asdict(self).items() if value}

    def is_empty(self) -> bool:
        return not self.active()


FILTER_NAMES = tuple(f.name for f in fields(FilterSet))

# Keys sent by the React front end.
FILTER_ALIASES: Dict[str, str] = {
    "endYear": "end_year",
    "topics": "topic",
    "PEST": "pestle",
    "SWOT": "swot",
}


def _canonical_name(name: str) -> str:
    canonical = FILTER_ALIASES.get(name, name)
    if canonical not in FILTER_NAMES:
        raise ValueError(f"unknown filter {name!r}; expected one of {', '.join(FILTER_NAMES)}")
    return canonical


def _clean(value: Optional[object]) -> str:
    if value is None:
        return ""
    return as_text(value).strip()


def normalize_filters(raw: Optional[Mapping[str, Any]]) -> FilterSet:
    values: Dict[str, str] = {}
    for key, value in (raw or {}).items():
        name = FILTER_ALIASES.get(key, key)
        if name not in FILTER_NAMES:
            continue
        values[name] = _clean(value)
    return FilterSet(**values)


def set_filter(state: FilterSet, name: str, value: Optional[object]) -> FilterSet:
    return replace(state, **{_canonical_name(name): _clean(value)})


def clear_filter(state: FilterSet, name: str) -> FilterSet:
    return replace(state, **{_canonical_name(name): ""})


def clear_all() -> FilterSet:
    return FilterSet()


# ---------------- Matching ----------------
def _equals(field: str) -> Callable[[Mapping[str, Any], str], bool]:
    def match(record: Mapping[str, Any], wanted: str) -> bool:
        return field in record and as_text(record[field]) == wanted

    return match


def _topic_contains(record: Mapping[str, Any], wanted: str) -> bool:
    topic = record.get("topic")
    return bool(topic) and wanted in as_text(topic)


def _swot_equals(record: Mapping[str, Any], wanted: str) -> bool:
    return classify_swot(record) == wanted


MATCHERS: Dict[str, Callable[[Mapping[str, Any], str], bool]] = {
    "end_year": _equals("end_year"),
    "topic": _topic_contains,
    "sector": _equals("sector"),
    "region": _equals("region"),
    "pestle": _equals("pestle"),
    "source": _equals("source"),
    "country": _equals("country"),
    "swot": _swot_equals,
    "city": _equals("city"),
}


def matches(record: Mapping[str, Any], filters: FilterSet) -> bool:
    return all(MATCHERS[name](record, wanted) for name, wanted in filters.active().items())


def filter_records(records: Iterable[Mapping[str, Any]], filters: FilterSet | Mapping[str, Any]) -> List[Mapping[str, Any]]:
    """Keep records matching every active filter, in their original order."""
    filt = filters if isinstance(filters, FilterSet) else normalize_filters(filters)
    records = list(records)
    if filt.is_empty():
        return records
    kept = [r for r in records if matches(r, filt)]
    logger.debug("Filters %s kept %d of %d records", filt.active(), len(kept), len(records))
    return kept


# Record field backing each select box; swot options are the fixed labels.
OPTION_FIELDS: Dict[str, str] = {
    "end_year": "end_year",
    "topic": "topic",
    "sector": "sector",
    "region": "region",
    "pestle": "pestle",
    "source": "source",
    "country": "country",
    "city": "city",
}


def filter_options(records: Iterable[Mapping[str, Any]]) -> Dict[str, List[str]]:
    """Distinct non-empty values per filter, sorted, for populating select boxes."""
    seen: Dict[str, set] = {name: set() for name in OPTION_FIELDS}
    for record in records:
        for name, field in OPTION_FIELDS.items():
            text = as_text(record.get(field)).strip()
            if text:
                seen[name].add(text)
    options = {name: sorted(values) for name, values in seen.items()}
    options["swot"] = list(SWOT_LABELS)
    return options
