"""Tests for page requests, sort parsing and page envelopes."""

from __future__ import annotations

import pytest

from uom_service.core.errors import ServiceError
from uom_service.core.pagination import (
    DEFAULT_SORT,
    Page,
    PageRequest,
    SortDirection,
    SortOrder,
    page_params,
)


class TestSortOrder:
    def test_property_only_defaults_to_ascending(self) -> None:
        assert SortOrder.parse("name") == SortOrder("name", SortDirection.ASC)

    def test_direction_is_case_insensitive(self) -> None:
        assert SortOrder.parse("id,DESC") == SortOrder("id", SortDirection.DESC)

    @pytest.mark.parametrize("raw", ["", ",asc", "name,sideways", "name,asc,extra"])
    def test_rejects_malformed_expressions(self, raw: str) -> None:
        with pytest.raises(ServiceError) as exc_info:
            SortOrder.parse(raw)
        assert exc_info.value.code == 1002


class TestPageRequest:
    def test_defaults(self) -> None:
        request = PageRequest()
        assert (request.page, request.size, request.sort) == (0, 20, DEFAULT_SORT)

    def test_offset(self) -> None:
        assert PageRequest.of(3, 25).offset == 75

    def test_of_parses_sort_expressions(self) -> None:
        request = PageRequest.of(0, 10, "isUsable,desc", "name")
        assert request.sort == (
            SortOrder("isUsable", SortDirection.DESC),
            SortOrder("name", SortDirection.ASC),
        )


class TestPage:
    def test_middle_page(self) -> None:
        page = Page[int].of([4, 5], PageRequest.of(1, 2), total=5)
        assert page.total_pages == 3
        assert page.number_of_elements == 2
        assert not page.first
        assert not page.last
        assert not page.empty

    def test_empty_result(self) -> None:
        page = Page[int].of([], PageRequest.of(0, 20), total=0)
        assert page.total_pages == 0
        assert page.first and page.last and page.empty

    def test_serializes_with_camel_case_keys(self) -> None:
        body = Page[int].of([1], PageRequest.of(0, 20), total=1).model_dump(by_alias=True)
        assert set(body) == {
            "content",
            "page",
            "size",
            "totalElements",
            "totalPages",
            "numberOfElements",
            "first",
            "last",
            "empty",
        }


class TestPageParams:
    def test_uses_configured_default_size(self) -> None:
        assert page_params(page=0, size=None, sort=None).size == 20

    def test_clamps_size_to_maximum(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_PAGE_SIZE", "50")
        assert page_params(page=0, size=500, sort=None).size == 50

    def test_default_sort_is_name_ascending(self) -> None:
        assert page_params(page=2, size=5, sort=None).sort == DEFAULT_SORT
