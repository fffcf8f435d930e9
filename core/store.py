"""Record store accessors.

Every store exposes a single no-argument ``fetch_all()`` that returns the
whole collection as plain dicts. Filtering, sorting and projection are left
to the consumer.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from bson import ObjectId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from core.config import Settings

logger = logging.getLogger(__name__)

Record = Dict[str, Any]


class StorageError(RuntimeError):
    """The record store is unreachable or the read failed."""


class RecordStore(Protocol):
    def fetch_all(self) -> List[Record]:
        ...


def _plain_record(doc: Dict[str, Any]) -> Record:
    return {key: (str(value) if isinstance(value, ObjectId) else value) for key, value in doc.items()}


class MongoRecordStore:
    def __init__(
        self,
        uri: str,
        database: str,
        collection: str,
        *,
        client: Optional[MongoClient] = None,
        server_selection_timeout_ms: int = 5000,
    ) -> None:
        self.uri = uri
        self.database = database
        self.collection = collection
        self._client = client
        self._timeout_ms = server_selection_timeout_ms

    def _get_client(self) -> MongoClient:
        if self._client is None:
            self._client = MongoClient(self.uri, serverSelectionTimeoutMS=self._timeout_ms)
        return self._client

    def fetch_all(self) -> List[Record]:
        try:
            docs = list(self._get_client()[self.database][self.collection].find({}))
        except PyMongoError as exc:
            raise StorageError(str(exc)) from exc
        records = [_plain_record(d) for d in docs]
        logger.info("Fetched %d records from %s.%s", len(records), self.database, self.collection)
        return records

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None


class JsonFileRecordStore:
    """Serves a JSON array export (e.g. ``mongoexport --jsonArray``) from disk."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)

    def fetch_all(self) -> List[Record]:
        try:
            with self.path.open("r", encoding="utf-8") as fh:
                payload = json.load(fh)
        except OSError as exc:
            raise StorageError(f"cannot read {self.path}: {exc}") from exc
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            raise StorageError(f"invalid JSON in {self.path}: {exc}") from exc

        if not isinstance(payload, list):
            raise StorageError(f"{self.path} must contain a JSON array of records")
        records = [dict(r) for r in payload if isinstance(r, dict)]
        logger.info("Loaded %d records from %s", len(records), self.path)
        return records


def create_store(settings: Settings) -> RecordStore:
    if settings.data_file:
        return JsonFileRecordStore(settings.data_file)
    return MongoRecordStore(settings.mongodb_uri, settings.mongodb_database, settings.mongodb_collection)
