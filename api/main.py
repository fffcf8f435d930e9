from __future__ import annotations

import logging
import math
from functools import lru_cache

import numpy as np
from bson import ObjectId
from fastapi import Depends, FastAPI
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.schemas import ErrorResponse
from core.config import configure_logging, get_settings
from core.store import RecordStore, StorageError, create_store


settings = get_settings()
app = FastAPI(title="Insight Dashboard API", version="0.1.0")
logger = logging.getLogger(__name__)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_methods=["GET"],
    allow_headers=["*"],
)


@lru_cache(maxsize=1)
def get_store() -> RecordStore:
    return create_store(get_settings())


def _json(data: object, status_code: int = 200) -> JSONResponse:
    """Return JSON with safe encoding for BSON/numpy values."""

    def _safe_float(value: object) -> float | None:
        try:
            out = float(value)  # type: ignore[arg-type]
        except (TypeError, ValueError):
            return None
        if math.isnan(out) or math.isinf(out):
            return None
        return out

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(
            data,
            custom_encoder={
                ObjectId: str,
                np.integer: int,
                float: _safe_float,
                np.floating: _safe_float,
                np.bool_: bool,
                np.ndarray: lambda arr: arr.tolist(),
            },
        ),
    )


@app.get("/api/data", responses={500: {"model": ErrorResponse}})
def get_data(store: RecordStore = Depends(get_store)):
    try:
        records = store.fetch_all()
    except StorageError as exc:
        logger.exception("get_data failed")
        return _json(ErrorResponse(message=str(exc)).model_dump(), status_code=500)
    return _json(records)


def run() -> None:
    import uvicorn

    configure_logging(settings.log_level)
    logger.info("Server is running on port %d", settings.port)
    uvicorn.run(app, host="0.0.0.0", port=settings.port)


if __name__ == "__main__":
    run()
