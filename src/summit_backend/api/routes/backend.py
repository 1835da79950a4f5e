"""Backend identity endpoint."""

from __future__ import annotations

from fastapi import APIRouter, status

from ...data.backend_info import describe_backend
from ...schemas.backend import BackendInfoModel

router = APIRouter(tags=["backend"])


@router.get("/ws/info", response_model=BackendInfoModel, status_code=status.HTTP_200_OK)
def get_info() -> BackendInfoModel:
    return BackendInfoModel.from_domain(describe_backend())
