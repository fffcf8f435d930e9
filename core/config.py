from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from functools import lru_cache
from typing import List, Mapping, Optional


LOG_FORMAT = "%(asctime)s | %(name)s | %(levelname)s | %(message)s"

DEFAULT_PORT = 5000
DEFAULT_MONGODB_URI = "mongodb://localhost:27017"
DEFAULT_MONGODB_DATABASE = "test"
# Mongoose pluralizes the "data" model into the "datas" collection.
DEFAULT_MONGODB_COLLECTION = "datas"
DEFAULT_API_URL = "http://localhost:5000"
DEFAULT_API_TIMEOUT = 30.0


@dataclass(frozen=True)
class Settings:
    port: int = DEFAULT_PORT
    mongodb_uri: str = DEFAULT_MONGODB_URI
    mongodb_database: str = DEFAULT_MONGODB_DATABASE
    mongodb_collection: str = DEFAULT_MONGODB_COLLECTION
    data_file: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    api_timeout: float = DEFAULT_API_TIMEOUT
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"


def _as_int(name: str, value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {value!r}") from None


def _as_float(name: str, value: str) -> float:
    try:
        return float(value)
    except ValueError:
        raise ValueError(f"{name} must be a number, got {value!r}") from None


def _split_origins(value: str) -> List[str]:
    origins = [o.strip() for o in value.split(",") if o.strip()]
    return origins or ["*"]


def load_settings(environ: Optional[Mapping[str, str]] = None) -> Settings:
    """Build settings from environment variables (``os.environ`` by default)."""
    env = os.environ if environ is None else environ

    port = env.get("PORT", "").strip()
    timeout = env.get("DASHBOARD_API_TIMEOUT", "").strip()
    return Settings(
        port=_as_int("PORT", port) if port else DEFAULT_PORT,
        mongodb_uri=env.get("MONGODB_URI") or DEFAULT_MONGODB_URI,
        mongodb_database=env.get("MONGODB_DATABASE") or DEFAULT_MONGODB_DATABASE,
        mongodb_collection=env.get("MONGODB_COLLECTION") or DEFAULT_MONGODB_COLLECTION,
        data_file=(env.get("DASHBOARD_DATA_FILE") or "").strip() or None,
        api_url=(env.get("DASHBOARD_API_URL") or DEFAULT_API_URL).rstrip("/"),
        api_timeout=_as_float("DASHBOARD_API_TIMEOUT", timeout) if timeout else DEFAULT_API_TIMEOUT,
        cors_origins=_split_origins(env.get("CORS_ORIGINS", "*")),
        log_level=(env.get("LOG_LEVEL") or "INFO").upper(),
    )


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return load_settings()


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, datefmt="%H:%M:%S")
