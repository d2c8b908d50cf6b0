"""Health check endpoints."""

from __future__ import annotations

from fastapi import APIRouter

from notary_portal import __version__
from notary_portal.responses import success

router = APIRouter(tags=["health"])


@router.get("/health")
async def health() -> dict:
    return success({"status": "ok", "version": __version__})


@router.get("/ready")
async def ready() -> dict:
    return success({"status": "ready"})
