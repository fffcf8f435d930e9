"""Shared fixtures: a small mixed-sector record set."""

from __future__ import annotations

from typing import Any

import pytest


@pytest.fixture
def records() -> list[dict[str, Any]]:
    return [
        {"topic": "gas", "sector": "Energy", "region": "Asia", "pestle": "Industries", "source": "EIA",
         "country": "China", "city": "", "end_year": 2030, "intensity": 6, "likelihood": 6, "relevance": 6},
        {"topic": "oil", "sector": "Retail", "region": "Europe", "pestle": "Economic", "source": "Time",
         "country": "United States of America", "city": "New York", "end_year": "2025",
         "intensity": 1, "likelihood": 1, "relevance": 1},
        {"topic": "natural gas", "sector": "Energy", "region": "Europe", "pestle": "Economic", "source": "EIA",
         "country": "United States of America", "city": "Los Angeles", "end_year": 2030,
         "intensity": 4, "likelihood": 4, "relevance": 4},
        {"topic": "oil", "sector": "Energy", "region": "Asia", "pestle": "Industries", "source": "Time",
         "country": "China", "end_year": "", "intensity": 2, "likelihood": 3, "relevance": 4},
        {"topic": "market", "region": "World", "intensity": "", "likelihood": 2},
    ]
