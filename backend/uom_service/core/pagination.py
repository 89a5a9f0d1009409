"""
Offset pagination with Spring-style ``?page=&size=&sort=prop,dir`` parameters.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from math import ceil
from typing import Annotated, Generic, TypeVar

from fastapi import Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from uom_service.core.config import get_settings
from uom_service.core.errors import ServiceError


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


@dataclass(frozen=True)
class SortOrder:
    """One ``property,direction`` pair; ``property`` uses the API field name."""

    property: str
    direction: SortDirection = SortDirection.ASC

    @classmethod
    def parse(cls, raw: str) -> SortOrder:
        parts = [part.strip() for part in raw.split(",")]
        if not parts[0]:
            raise ServiceError.invalid_data(f"Invalid sort expression '{raw}'")
        if len(parts) == 1:
            return cls(parts[0])
        if len(parts) > 2:
            raise ServiceError.invalid_data(f"Invalid sort expression '{raw}'")
        try:
            direction = SortDirection(parts[1].lower())
        except ValueError as exc:
            raise ServiceError.invalid_data(f"Invalid sort direction '{parts[1]}'") from exc
        return cls(parts[0], direction)


DEFAULT_SORT: tuple[SortOrder, ...] = (SortOrder("name"),)


@dataclass(frozen=True)
class PageRequest:
    """Zero-based page number, page size and sort orders."""

    page: int = 0
    size: int = 20
    sort: tuple[SortOrder, ...] = field(default=DEFAULT_SORT)

    @property
    def offset(self) -> int:
        return self.page * self.size

    @classmethod
    def of(cls, page: int = 0, size: int = 20, *sort: str) -> PageRequest:
        orders = tuple(SortOrder.parse(expr) for expr in sort) if sort else DEFAULT_SORT
        return cls(page=page, size=size, sort=orders)


ItemT = TypeVar("ItemT")


class Page(BaseModel, Generic[ItemT]):
    """A slice of results plus totals."""

    model_config = ConfigDict(populate_by_name=True)

    content: list[ItemT]
    page: int
    size: int
    total_elements: int = Field(alias="totalElements")
    total_pages: int = Field(alias="totalPages")
    number_of_elements: int = Field(alias="numberOfElements")
    first: bool
    last: bool
    empty: bool

    @classmethod
    def of(cls, content: list[ItemT], page_request: PageRequest, total: int) -> Page[ItemT]:
        total_pages = ceil(total / page_request.size) if page_request.size else 0
        return cls(
            content=content,
            page=page_request.page,
            size=page_request.size,
            total_elements=total,
            total_pages=total_pages,
            number_of_elements=len(content),
            first=page_request.page == 0,
            last=page_request.page + 1 >= total_pages,
            empty=not content,
        )


def page_params(
    page: int = Query(0, ge=0, description="Zero-based page index"),
    size: int | None = Query(None, ge=1, description="Page size"),
    sort: list[str] | None = Query(
        None, description="Sort expression 'property[,asc|desc]'; may be repeated"
    ),
) -> PageRequest:
    """Build a ``PageRequest`` from query parameters, clamping ``size``."""
    settings = get_settings()
    effective_size = min(size or settings.default_page_size, settings.max_page_size)
    orders = tuple(SortOrder.parse(expr) for expr in sort) if sort else DEFAULT_SORT
    return PageRequest(page=page, size=effective_size, sort=orders)


Pagination = Annotated[PageRequest, Depends(page_params)]
