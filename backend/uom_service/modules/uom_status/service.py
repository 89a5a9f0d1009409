"""Service layer for unit-of-measure statuses."""

from __future__ import annotations

from uom_service.core.errors import ServiceError
from uom_service.core.logging import get_logger
from uom_service.core.pagination import Page, PageRequest
from uom_service.db.models import UomStatus
from uom_service.db.repository import guarded_write
from uom_service.modules.uom_status.repository import UomStatusRepository
from uom_service.modules.uom_status.schemas import (
    UomStatusRequest,
    UomStatusResponse,
    UomStatusUpdate,
)

logger = get_logger(__name__)

ENTITY_NAME = "UomStatus"


def _to_response(row: UomStatus) -> UomStatusResponse:
    return UomStatusResponse.model_validate(row)


def _to_page(rows: list[UomStatus], page_request: PageRequest, total: int) -> Page[UomStatusResponse]:
    return Page[UomStatusResponse].of([_to_response(row) for row in rows], page_request, total)


class UomStatusService:
    """CRUD, search and usability toggling for statuses."""

    def __init__(self, repository: UomStatusRepository) -> None:
        self._repository = repository

    async def create(self, request: UomStatusRequest) -> UomStatusResponse:
        logger.info("uom_status_create_requested", name=request.name)
        async with guarded_write(self._repository, logger, "uom_status_create_failed", name=request.name):
            await self._ensure_name_available(request.name)
            row = await self._repository.save(
                UomStatus(
                    name=request.name,
                    description=request.description,
                    is_usable=request.is_usable,
                )
            )
        logger.info("uom_status_created", id=row.id, name=row.name)
        return _to_response(row)

    async def find_by_id(self, status_id: int) -> UomStatusResponse:
        return _to_response(await self.get_entity(status_id))

    async def get_entity(self, status_id: int) -> UomStatus:
        """Load the ORM row, raising not-found when it does not exist."""
        row = await self._repository.find_by_id(status_id)
        if row is None:
            logger.warning("uom_status_not_found", id=status_id)
            raise ServiceError.not_found(ENTITY_NAME, "id", status_id)
        return row

    async def find_all(self, page_request: PageRequest) -> Page[UomStatusResponse]:
        rows, total = await self._repository.find_all(page_request)
        logger.debug("uom_status_listed", page=page_request.page, total=total)
        return _to_page(rows, page_request, total)

    async def find_all_by_name(self, name: str, page_request: PageRequest) -> Page[UomStatusResponse]:
        if not name or not name.strip():
            raise ServiceError.invalid_data("Search name must not be blank")
        rows, total = await self._repository.find_all_by_name_containing_ignore_case(
            name, page_request
        )
        logger.debug("uom_status_searched", name=name, total=total)
        return _to_page(rows, page_request, total)

    async def find_all_by_usability(
        self, is_usable: bool, page_request: PageRequest
    ) -> Page[UomStatusResponse]:
        rows, total = await self._repository.find_all_by_is_usable(is_usable, page_request)
        logger.debug("uom_status_filtered", is_usable=is_usable, total=total)
        return _to_page(rows, page_request, total)

    async def is_name_taken(self, name: str) -> bool:
        return await self._repository.exists_by_name(name)

    async def update(self, status_id: int, update: UomStatusUpdate) -> UomStatusResponse:
        changes = update.model_dump(exclude_unset=True)
        async with guarded_write(self._repository, logger, "uom_status_update_failed", id=status_id):
            row = await self.get_entity(status_id)
            new_name = changes.get("name")
            if new_name is not None and new_name != row.name:
                await self._ensure_name_available(new_name)
                row.name = new_name
            if "description" in changes:
                row.description = changes["description"]
            row = await self._repository.save(row)
        logger.info("uom_status_updated", id=row.id, fields=sorted(changes))
        return _to_response(row)

    async def change_usability(self, status_id: int, is_usable: bool) -> None:
        async with guarded_write(
            self._repository, logger, "uom_status_usability_change_failed", id=status_id
        ):
            row = await self.get_entity(status_id)
            row.is_usable = is_usable
            await self._repository.save(row)
        logger.info("uom_status_usability_changed", id=status_id, is_usable=is_usable)

    async def delete_by_id(self, status_id: int) -> None:
        async with guarded_write(self._repository, logger, "uom_status_delete_failed", id=status_id):
            row = await self.get_entity(status_id)
            await self._repository.delete(row)
        logger.info("uom_status_deleted", id=status_id)

    async def _ensure_name_available(self, name: str) -> None:
        if await self._repository.exists_by_name(name):
            logger.warning("uom_status_name_conflict", name=name)
            raise ServiceError.conflict(ENTITY_NAME, "name", name)
