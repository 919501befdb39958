"""Reference corpus management endpoints."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, HTTPException

from rarest.bootstrap import get_container

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/corpus/status")
async def get_corpus_status() -> dict[str, Any]:
    return get_container().rarest.get_corpus_status()


@router.post("/corpus/reload")
async def reload_corpus() -> dict[str, Any]:
    try:
        return get_container().rarest.reload_corpus()
    except Exception as exc:
        logger.exception("Error in reload_corpus")
        raise HTTPException(status_code=500, detail="Internal server error") from exc
