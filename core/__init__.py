"""Core (UI-agnostic) dashboard logic.

This package contains:
- record store access (MongoDB or a JSON export -> list of dicts)
- filter state and record filtering
- SWOT classification and score aggregation
- chart helpers (Altair -> Vega-Lite spec dict)
"""
