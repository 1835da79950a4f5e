"""POI lookup endpoints."""

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, Path, status

from ..dependencies import get_poi_store
from ...data.poi_repository import PoiStore
from ...schemas.poi import PoiRecordModel

router = APIRouter(prefix="/poi", tags=["poi"])


@router.get("/find/all", response_model=List[PoiRecordModel], status_code=status.HTTP_200_OK)
def get_all_data_points(store: PoiStore = Depends(get_poi_store)) -> List[PoiRecordModel]:
    return [PoiRecordModel.from_domain(record) for record in store.list_all()]


@router.get(
    "/find/{id}",
    response_model=PoiRecordModel,
    status_code=status.HTTP_200_OK,
    responses={status.HTTP_404_NOT_FOUND: {"description": "No data point at this index"}},
)
def get_one_data_point(
    id: int = Path(..., description="Zero-based position of the data point"),
    store: PoiStore = Depends(get_poi_store),
) -> PoiRecordModel:
    # PoiNotFoundError is turned into a plain-text 404 by the app-level handler.
    return PoiRecordModel.from_domain(store.get_by_index(id))
