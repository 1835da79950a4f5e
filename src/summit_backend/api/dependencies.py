"""Shared FastAPI dependencies."""

from __future__ import annotations

from fastapi import Request

from ..data.poi_repository import PoiStore


def get_poi_store(request: Request) -> PoiStore:
    """Return the store built by ``create_app`` before the app started serving."""
    return request.app.state.poi_store
