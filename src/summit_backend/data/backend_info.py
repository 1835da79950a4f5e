"""Constant identity of this backend instance."""

from __future__ import annotations

from ..models.domain import Backend, Coordinates

SUMMIT_BACKEND_INFO = Backend(
    id="summit-backend",
    display_name="Summit Backend",
    location=Coordinates(lat=0.0, lon=0.0),
    weight=4,
)


def describe_backend() -> Backend:
    return SUMMIT_BACKEND_INFO
