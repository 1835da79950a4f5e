"""POI API schemas."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import PoiRecord


class PoiRecordModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    name: str
    location_label: str = Field(..., alias="locationLabel")
    coordinate: List[float] = Field(..., min_length=2, max_length=2, description="[lat, lon]")

    @classmethod
    def from_domain(cls, record: PoiRecord) -> "PoiRecordModel":
        return cls(
            name=record.name,
            location_label=record.location_label,
            coordinate=list(record.coordinate),
        )
