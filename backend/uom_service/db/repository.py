"""Generic async repository on top of an ``AsyncSession``."""

from __future__ import annotations

from collections.abc import AsyncIterator, Mapping, Sequence
from contextlib import asynccontextmanager
from typing import Any, ClassVar, Generic, TypeVar

from sqlalchemy import Select, exists, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from uom_service.core.errors import ServiceError
from uom_service.core.pagination import PageRequest, SortDirection, SortOrder
from uom_service.db.models import Base

ModelT = TypeVar("ModelT", bound=Base)

LIKE_ESCAPE = "\\"


def contains_pattern(term: str) -> str:
    """Build a ``%term%`` LIKE pattern with wildcards in ``term`` escaped."""
    escaped = (
        term.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2).replace("%", f"{LIKE_ESCAPE}%").replace("_", f"{LIKE_ESCAPE}_")
    )
    return f"%{escaped}%"


class BaseRepository(Generic[ModelT]):
    """
    Id-keyed persistence operations shared by every entity repository.

    ``sortable_fields`` maps API sort properties to model attribute names;
    sorting by anything else is rejected as invalid data.
    """

    model: ClassVar[type[Base]]
    sortable_fields: ClassVar[Mapping[str, str]] = {"id": "id"}

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit everything done inside the block, or roll all of it back."""
        try:
            yield
            await self._session.commit()
        except Exception:
            await self._session.rollback()
            raise

    async def find_by_id(self, entity_id: int) -> ModelT | None:
        return await self._session.get(self.model, entity_id)  # type: ignore[return-value]

    async def exists_by_id(self, entity_id: int) -> bool:
        result = await self._session.execute(
            select(exists().where(self.model.id == entity_id))  # type: ignore[attr-defined]
        )
        return bool(result.scalar())

    async def save(self, entity: ModelT) -> ModelT:
        self._session.add(entity)
        await self._session.flush()
        await self._session.refresh(entity)
        return entity

    async def delete(self, entity: ModelT) -> None:
        await self._session.delete(entity)
        await self._session.flush()

    async def find_all(self, page_request: PageRequest) -> tuple[list[ModelT], int]:
        return await self.find_page(select(self.model), page_request)

    async def find_page(
        self, stmt: Select[Any], page_request: PageRequest
    ) -> tuple[list[ModelT], int]:
        """Run ``stmt`` as one page; returns the rows and the unpaged total."""
        order_by = self.order_by(page_request.sort)

        count_stmt = select(func.count()).select_from(stmt.order_by(None).subquery())
        total = (await self._session.execute(count_stmt)).scalar_one()

        result = await self._session.execute(
            stmt.order_by(*order_by).offset(page_request.offset).limit(page_request.size)
        )
        return list(result.scalars().all()), int(total)

    @classmethod
    def resolve_sort_attribute(cls, sort_property: str) -> str:
        attribute = cls.sortable_fields.get(sort_property)
        if attribute is None:
            raise ServiceError.invalid_data(f"Unknown sort property '{sort_property}'")
        return attribute

    @classmethod
    def order_by(cls, orders: Sequence[SortOrder]) -> list[ColumnElement[Any]]:
        clauses: list[ColumnElement[Any]] = []
        for order in orders:
            column = getattr(cls.model, cls.resolve_sort_attribute(order.property))
            clauses.append(column.desc() if order.direction == SortDirection.DESC else column.asc())
        # Stable paging when the requested keys tie.
        clauses.append(cls.model.id.asc())  # type: ignore[attr-defined]
        return clauses


@asynccontextmanager
async def guarded_write(
    repository: BaseRepository[Any],
    logger: Any,
    event: str,
    **context: Any,
) -> AsyncIterator[None]:
    """
    Run a write inside ``repository.transaction()``.

    ``ServiceError`` passes through untouched; any other failure is logged as
    ``event`` and re-raised as an unexpected error carrying the original text.
    """
    try:
        async with repository.transaction():
            yield
    except ServiceError:
        raise
    except SQLAlchemyError as exc:
        logger.error(event, source="database", error=str(exc), exc_info=True, **context)
        raise ServiceError.unexpected(str(exc)) from exc
    except Exception as exc:
        logger.error(event, source="application", error=str(exc), exc_info=True, **context)
        raise ServiceError.unexpected(str(exc)) from exc
