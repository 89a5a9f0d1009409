"""CRUD, search and usability APIs for unit-of-measure statuses."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from uom_service.core.pagination import Page, Pagination
from uom_service.db.session import DbSession
from uom_service.modules.uom_status.repository import UomStatusRepository
from uom_service.modules.uom_status.schemas import (
    UomStatusRequest,
    UomStatusResponse,
    UomStatusUpdate,
)
from uom_service.modules.uom_status.service import UomStatusService

router = APIRouter()


def get_uom_status_service(db: DbSession) -> UomStatusService:
    return UomStatusService(UomStatusRepository(db))


StatusService = Annotated[UomStatusService, Depends(get_uom_status_service)]
StatusId = Annotated[int, Path(gt=0, description="Status identifier")]


@router.post("", response_model=UomStatusResponse, status_code=status.HTTP_201_CREATED)
async def create_uom_status(body: UomStatusRequest, service: StatusService) -> UomStatusResponse:
    """Create a status. Names must be unique."""
    return await service.create(body)


@router.get("/search", response_model=Page[UomStatusResponse])
async def search_uom_statuses(
    service: StatusService,
    pagination: Pagination,
    name: str = Query(..., description="Case-insensitive substring of the name"),
) -> Page[UomStatusResponse]:
    return await service.find_all_by_name(name, pagination)


@router.get("/filter", response_model=Page[UomStatusResponse])
async def filter_uom_statuses(
    service: StatusService,
    pagination: Pagination,
    is_usable: bool = Query(..., alias="isUsable"),
) -> Page[UomStatusResponse]:
    return await service.find_all_by_usability(is_usable, pagination)


@router.get("/check-name", response_model=bool)
async def check_uom_status_name(
    service: StatusService,
    name: str = Query(...),
) -> bool:
    """Whether a status with exactly this name already exists."""
    return await service.is_name_taken(name)


@router.get("/{status_id:int}", response_model=UomStatusResponse)
async def get_uom_status(status_id: StatusId, service: StatusService) -> UomStatusResponse:
    return await service.find_by_id(status_id)


@router.get("", response_model=Page[UomStatusResponse])
async def list_uom_statuses(
    service: StatusService,
    pagination: Pagination,
) -> Page[UomStatusResponse]:
    return await service.find_all(pagination)


@router.put("/{status_id:int}", response_model=UomStatusResponse)
async def update_uom_status(
    status_id: StatusId,
    body: UomStatusUpdate,
    service: StatusService,
) -> UomStatusResponse:
    """Update name and description; the usability flag is left alone."""
    return await service.update(status_id, body)


@router.patch("/{status_id:int}/status", status_code=status.HTTP_204_NO_CONTENT)
async def change_uom_status_usability(
    status_id: StatusId,
    service: StatusService,
    is_usable: bool = Query(..., alias="isUsable"),
) -> None:
    await service.change_usability(status_id, is_usable)


@router.delete("/{status_id:int}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_uom_status(status_id: StatusId, service: StatusService) -> None:
    """
    Delete a status.

    Fails while any unit of measure still references it.
    """
    await service.delete_by_id(status_id)
