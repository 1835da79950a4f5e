"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ..dependencies import get_poi_store
from ...data.poi_repository import PoiStore

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root(store: PoiStore = Depends(get_poi_store)) -> dict:
    """Liveness check that also reports how many records the store holds."""
    return {"status": "ok", "records": len(store)}
