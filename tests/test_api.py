"""Tests for the ``/api/data`` endpoint."""

from __future__ import annotations

from collections.abc import Iterator
from pathlib import Path
from typing import Any

import pytest
from bson import ObjectId
from fastapi.testclient import TestClient

from api.main import app, get_store
from core.store import JsonFileRecordStore, StorageError


class _StaticStore:
    def __init__(self, records: list[dict[str, Any]]) -> None:
        self.records = records
        self.calls = 0

    def fetch_all(self) -> list[dict[str, Any]]:
        self.calls += 1
        return self.records


class _BrokenStore:
    def fetch_all(self) -> list[dict[str, Any]]:
        raise StorageError("connection refused")


@pytest.fixture
def client() -> Iterator[TestClient]:
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_get_data_returns_all_records(client: TestClient, records) -> None:  # type: ignore[no-untyped-def]
    store = _StaticStore(records)
    app.dependency_overrides[get_store] = lambda: store

    resp = client.get("/api/data")

    assert resp.status_code == 200
    assert resp.json() == records
    assert store.calls == 1


def test_get_data_serializes_ids_and_nan(client: TestClient) -> None:
    oid = ObjectId()
    app.dependency_overrides[get_store] = lambda: _StaticStore([{"_id": oid, "intensity": float("nan")}])

    resp = client.get("/api/data")

    assert resp.status_code == 200
    assert resp.json() == [{"_id": str(oid), "intensity": None}]


def test_get_data_storage_failure_is_500_with_message(client: TestClient) -> None:
    app.dependency_overrides[get_store] = lambda: _BrokenStore()

    resp = client.get("/api/data")

    assert resp.status_code == 500
    assert resp.json() == {"message": "connection refused"}


def test_no_write_path(client: TestClient) -> None:
    app.dependency_overrides[get_store] = lambda: _StaticStore([])

    assert client.post("/api/data", json={}).status_code == 405


def test_get_data_undecodable_export_is_500_with_message(client: TestClient, tmp_path: Path) -> None:
    path = tmp_path / "data.json"
    path.write_bytes(b'[{"topic": "\xff"}]')
    app.dependency_overrides[get_store] = lambda: JsonFileRecordStore(path)

    resp = client.get("/api/data")

    assert resp.status_code == 500
    assert "invalid JSON" in resp.json()["message"]
