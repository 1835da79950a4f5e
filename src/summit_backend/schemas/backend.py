"""Backend descriptor API schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import Backend


class CoordinatesModel(BaseModel):
    lat: float
    lon: float


class BackendInfoModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str
    display_name: str = Field(..., alias="displayName")
    location: CoordinatesModel
    weight: int

    @classmethod
    def from_domain(cls, backend: Backend) -> "BackendInfoModel":
        return cls(
            id=backend.id,
            display_name=backend.display_name,
            location=CoordinatesModel(lat=backend.location.lat, lon=backend.location.lon),
            weight=backend.weight,
        )
