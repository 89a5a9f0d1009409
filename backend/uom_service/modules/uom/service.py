"""Service layer for units of measure."""

from __future__ import annotations

from uom_service.core.errors import ServiceError
from uom_service.core.logging import get_logger
from uom_service.core.pagination import Page, PageRequest
from uom_service.db.models import Uom
from uom_service.db.repository import guarded_write
from uom_service.modules.uom.repository import UomRepository
from uom_service.modules.uom.schemas import UomRequest, UomResponse, UomUpdate
from uom_service.modules.uom_status.service import UomStatusService

logger = get_logger(__name__)

ENTITY_NAME = "Uom"


def _to_response(row: Uom) -> UomResponse:
    return UomResponse.model_validate(row)


def _to_page(rows: list[Uom], page_request: PageRequest, total: int) -> Page[UomResponse]:
    return Page[UomResponse].of([_to_response(row) for row in rows], page_request, total)


class UomService:
    """
    CRUD, search and status re-assignment for units of measure.

    Every unit points at an existing status; statuses are resolved through
    ``UomStatusService`` so a missing one is reported against ``UomStatus``.
    """

    def __init__(self, repository: UomRepository, status_service: UomStatusService) -> None:
        self._repository = repository
        self._status_service = status_service

    async def create(self, request: UomRequest) -> UomResponse:
        logger.info("uom_create_requested", name=request.name, uom_status_id=request.uom_status_id)
        async with guarded_write(self._repository, logger, "uom_create_failed", name=request.name):
            await self._ensure_name_available(request.name)
            uom_status = await self._status_service.get_entity(request.uom_status_id)
            row = await self._repository.save(
                Uom(
                    name=request.name,
                    description=request.description,
                    conversion_factor_to_base=request.conversion_factor_to_base,
                    uom_status_id=uom_status.id,
                    uom_status=uom_status,
                )
            )
        logger.info("uom_created", id=row.id, name=row.name, uom_status_id=row.uom_status_id)
        return _to_response(row)

    async def find_by_id(self, uom_id: int) -> UomResponse:
        return _to_response(await self._get_entity(uom_id))

    async def find_all(self, page_request: PageRequest) -> Page[UomResponse]:
        rows, total = await self._repository.find_all(page_request)
        logger.debug("uom_listed", page=page_request.page, total=total)
        return _to_page(rows, page_request, total)

    async def find_all_by_name(self, name: str, page_request: PageRequest) -> Page[UomResponse]:
        if not name or not name.strip():
            raise ServiceError.invalid_data("Search name must not be blank")
        rows, total = await self._repository.find_all_by_name_containing_ignore_case(
            name, page_request
        )
        logger.debug("uom_searched", name=name, total=total)
        return _to_page(rows, page_request, total)

    async def find_all_by_status_id(
        self, uom_status_id: int, page_request: PageRequest
    ) -> Page[UomResponse]:
        rows, total = await self._repository.find_all_by_uom_status_id(uom_status_id, page_request)
        logger.debug("uom_filtered_by_status", uom_status_id=uom_status_id, total=total)
        return _to_page(rows, page_request, total)

    async def is_name_taken(self, name: str) -> bool:
        """Case-insensitive, unlike the status name check."""
        return await self._repository.exists_by_name_ignore_case(name)

    async def update(self, uom_id: int, update: UomUpdate) -> UomResponse:
        async with guarded_write(self._repository, logger, "uom_update_failed", id=uom_id):
            row = await self._get_entity(uom_id)
            if update.name.lower() != row.name.lower():
                await self._ensure_name_available(update.name)
            uom_status = row.uom_status
            row.name = update.name
            row.description = update.description
            row.conversion_factor_to_base = update.conversion_factor_to_base
            row.uom_status = uom_status
            row.uom_status_id = uom_status.id
            row = await self._repository.save(row)
        logger.info("uom_updated", id=row.id, name=row.name)
        return _to_response(row)

    async def change_status(self, uom_id: int, new_uom_status_id: int) -> None:
        async with guarded_write(
            self._repository, logger, "uom_status_change_failed", id=uom_id
        ):
            row = await self._get_entity(uom_id)
            uom_status = await self._status_service.get_entity(new_uom_status_id)
            row.uom_status = uom_status
            row.uom_status_id = uom_status.id
            await self._repository.save(row)
        logger.info("uom_status_changed", id=uom_id, uom_status_id=new_uom_status_id)

    async def delete_by_id(self, uom_id: int) -> None:
        async with guarded_write(self._repository, logger, "uom_delete_failed", id=uom_id):
            row = await self._get_entity(uom_id)
            await self._repository.delete(row)
        logger.info("uom_deleted", id=uom_id)

    async def _get_entity(self, uom_id: int) -> Uom:
        row = await self._repository.find_by_id(uom_id)
        if row is None:
            logger.warning("uom_not_found", id=uom_id)
            raise ServiceError.not_found(ENTITY_NAME, "id", uom_id)
        return row

    async def _ensure_name_available(self, name: str) -> None:
        if await self._repository.exists_by_name_ignore_case(name):
            logger.warning("uom_name_conflict", name=name)
            raise ServiceError.conflict(ENTITY_NAME, "name", name)
