"""Tests for the dashboard API client."""

from __future__ import annotations

from typing import Any

import pytest
import requests

from core import client as client_module
from core.client import DashboardAPIClient


class _FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Server Error")

    def json(self) -> Any:
        return self._payload


def test_fetch_records_returns_payload(monkeypatch: pytest.MonkeyPatch) -> None:
    calls: list[tuple[str, float]] = []

    def _fake_get(url: str, timeout: float) -> _FakeResponse:
        calls.append((url, timeout))
        return _FakeResponse([{"topic": "oil"}])

    monkeypatch.setattr(client_module.requests, "get", _fake_get)

    records = DashboardAPIClient("http://api.local:5000/", timeout=3).fetch_records()

    assert records == [{"topic": "oil"}]
    assert calls == [("http://api.local:5000/api/data", 3)]


def test_network_error_yields_empty_dataset(monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
    def _fake_get(url: str, timeout: float) -> _FakeResponse:
        raise requests.ConnectionError("refused")

    monkeypatch.setattr(client_module.requests, "get", _fake_get)

    assert DashboardAPIClient("http://api.local").fetch_records() == []
    assert "Error fetching data" in caplog.text


def test_server_error_yields_empty_dataset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(
        client_module.requests, "get", lambda url, timeout: _FakeResponse({"message": "boom"}, status_code=500)
    )

    assert DashboardAPIClient("http://api.local").fetch_records() == []


def test_non_list_payload_yields_empty_dataset(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(client_module.requests, "get", lambda url, timeout: _FakeResponse({"records": []}))

    assert DashboardAPIClient("http://api.local").fetch_records() == []
