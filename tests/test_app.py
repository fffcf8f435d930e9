"""Tests for the Streamlit page's record loading."""

from __future__ import annotations

from typing import Any

import pytest
import requests
import streamlit as st
from streamlit.testing.v1 import AppTest


class _FakeResponse:
    def __init__(self, payload: Any) -> None:
        self._payload = payload

    def raise_for_status(self) -> None:
        return

    def json(self) -> Any:
        return self._payload


def test_failed_fetch_is_retried_on_next_run(monkeypatch: pytest.MonkeyPatch, records) -> None:  # type: ignore[no-untyped-def]
    """An empty result after an outage is not cached; the next rerun fetches again."""
    st.cache_data.clear()
    calls: list[str] = []

    def _down(url: str, timeout: float) -> _FakeResponse:
        calls.append(url)
        raise requests.ConnectionError("refused")

    def _up(url: str, timeout: float) -> _FakeResponse:
        calls.append(url)
        return _FakeResponse(records)

    monkeypatch.setattr(requests, "get", _down)
    at = AppTest.from_file("../app.py", default_timeout=30).run()
    assert not at.exception
    assert at.warning[0].value.startswith("No records loaded")

    monkeypatch.setattr(requests, "get", _up)
    at.run()
    assert not at.exception
    assert len(calls) == 2
    assert not at.warning
    assert at.caption[0].value == f"{len(records)} of {len(records)} records match the current filters."
    st.cache_data.clear()
