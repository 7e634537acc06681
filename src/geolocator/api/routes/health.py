"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.gazetteer_repository import get_gazetteer

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/gazetteer", status_code=status.HTTP_200_OK)
def health_gazetteer() -> dict:
    gazetteer = get_gazetteer()
    return {
        "regions": len(gazetteer.all_regions()),
        "localities": len(gazetteer.all_localities()),
    }
