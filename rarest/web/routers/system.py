"""System endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from rarest.application import category_labels

router = APIRouter()


@router.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok"}


@router.get("/")
async def root() -> dict[str, str]:
    return {"service": "destiny-rarest-items", "status": "ok", "version": "1.0"}


@router.get("/categories")
async def list_categories() -> dict[str, Any]:
    return {"categories": category_labels()}
