"""Persistence queries for statuses."""

from __future__ import annotations

from sqlalchemy import exists, select

from uom_service.core.pagination import PageRequest
from uom_service.db.models import UomStatus
from uom_service.db.repository import LIKE_ESCAPE, BaseRepository, contains_pattern


class UomStatusRepository(BaseRepository[UomStatus]):
    model = UomStatus
    sortable_fields = {
        "id": "id",
        "name": "name",
        "description": "description",
        "isUsable": "is_usable",
    }

    async def exists_by_name(self, name: str) -> bool:
        """Exact, case-sensitive name match."""
        result = await self._session.execute(select(exists().where(UomStatus.name == name)))
        return bool(result.scalar())

    async def find_all_by_name_containing_ignore_case(
        self, name: str, page_request: PageRequest
    ) -> tuple[list[UomStatus], int]:
        stmt = select(UomStatus).where(
            UomStatus.name.ilike(contains_pattern(name), escape=LIKE_ESCAPE)
        )
        return await self.find_page(stmt, page_request)

    async def find_all_by_is_usable(
        self, is_usable: bool, page_request: PageRequest
    ) -> tuple[list[UomStatus], int]:
        stmt = select(UomStatus).where(UomStatus.is_usable.is_(is_usable))
        return await self.find_page(stmt, page_request)
