"""Persistence queries for units of measure."""

from __future__ import annotations

from sqlalchemy import exists, func, select

from uom_service.core.pagination import PageRequest
from uom_service.db.models import Uom
from uom_service.db.repository import LIKE_ESCAPE, BaseRepository, contains_pattern


class UomRepository(BaseRepository[Uom]):
    model = Uom
    sortable_fields = {
        "id": "id",
        "name": "name",
        "description": "description",
        "conversionFactorToBase": "conversion_factor_to_base",
        "uomStatusId": "uom_status_id",
    }

    async def exists_by_name_ignore_case(self, name: str) -> bool:
        result = await self._session.execute(
            select(exists().where(func.lower(Uom.name) == name.lower()))
        )
        return bool(result.scalar())

    async def find_all_by_name_containing_ignore_case(
        self, name: str, page_request: PageRequest
    ) -> tuple[list[Uom], int]:
        stmt = select(Uom).where(Uom.name.ilike(contains_pattern(name), escape=LIKE_ESCAPE))
        return await self.find_page(stmt, page_request)

    async def find_all_by_uom_status_id(
        self, uom_status_id: int, page_request: PageRequest
    ) -> tuple[list[Uom], int]:
        stmt = select(Uom).where(Uom.uom_status_id == uom_status_id)
        return await self.find_page(stmt, page_request)
