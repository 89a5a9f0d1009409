"""CRUD, search and status re-assignment APIs for units of measure."""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Query, status

from uom_service.core.pagination import Page, Pagination
from uom_service.db.session import DbSession
from uom_service.modules.uom.repository import UomRepository
from uom_service.modules.uom.schemas import UomRequest, UomResponse, UomUpdate
from uom_service.modules.uom.service import UomService
from uom_service.modules.uom_status.router import get_uom_status_service
from uom_service.modules.uom_status.service import UomStatusService

router = APIRouter()


def get_uom_service(
    db: DbSession,
    status_service: Annotated[UomStatusService, Depends(get_uom_status_service)],
) -> UomService:
    return UomService(UomRepository(db), status_service)


UnitService = Annotated[UomService, Depends(get_uom_service)]
UomId = Annotated[int, Path(gt=0, description="Unit of measure identifier")]


@router.post("", response_model=UomResponse, status_code=status.HTTP_201_CREATED)
async def create_uom(body: UomRequest, service: UnitService) -> UomResponse:
    """Create a unit of measure attached to an existing status."""
    return await service.create(body)


@router.get("/search", response_model=Page[UomResponse])
async def search_uoms(
    service: UnitService,
    pagination: Pagination,
    name: str = Query(..., description="Case-insensitive substring of the name"),
) -> Page[UomResponse]:
    return await service.find_all_by_name(name, pagination)


@router.get("/filter/{uom_status_id:int}", response_model=Page[UomResponse])
async def filter_uoms_by_status(
    service: UnitService,
    pagination: Pagination,
    uom_status_id: Annotated[int, Path(gt=0)],
) -> Page[UomResponse]:
    return await service.find_all_by_status_id(uom_status_id, pagination)


@router.get("/check-name", response_model=bool)
async def check_uom_name(
    service: UnitService,
    name: str = Query(...),
) -> bool:
    """Whether a unit with this name exists, ignoring case."""
    return await service.is_name_taken(name)


@router.get("/{uom_id:int}", response_model=UomResponse)
async def get_uom(uom_id: UomId, service: UnitService) -> UomResponse:
    return await service.find_by_id(uom_id)


@router.get("", response_model=Page[UomResponse])
async def list_uoms(service: UnitService, pagination: Pagination) -> Page[UomResponse]:
    return await service.find_all(pagination)


@router.put("/{uom_id:int}", response_model=UomResponse)
async def update_uom(uom_id: UomId, body: UomUpdate, service: UnitService) -> UomResponse:
    return await service.update(uom_id, body)


@router.patch("/{uom_id:int}/change-status", status_code=status.HTTP_204_NO_CONTENT)
async def change_uom_status(
    uom_id: UomId,
    service: UnitService,
    new_uom_status_id: int = Query(..., gt=0, alias="newUomStatusId"),
) -> None:
    await service.change_status(uom_id, new_uom_status_id)


@router.delete("/{uom_id:int}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_uom(uom_id: UomId, service: UnitService) -> None:
    await service.delete_by_id(uom_id)
