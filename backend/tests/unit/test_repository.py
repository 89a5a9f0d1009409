"""Unit tests for repository helpers that need no database."""

from __future__ import annotations

import pytest

from uom_service.core.errors import ErrorCode, ServiceError
from uom_service.core.pagination import SortDirection, SortOrder
from uom_service.db.repository import contains_pattern
from uom_service.modules.uom.repository import UomRepository
from uom_service.modules.uom_status.repository import UomStatusRepository


class TestContainsPattern:
    def test_plain_term(self) -> None:
        assert contains_pattern("gram") == "%gram%"

    def test_escapes_wildcards_and_escape_character(self) -> None:
        assert contains_pattern("100%_a\\b") == "%100\\%\\_a\\\\b%"


class TestOrderBy:
    def test_appends_id_tiebreaker(self) -> None:
        clauses = UomRepository.order_by([SortOrder("conversionFactorToBase", SortDirection.DESC)])

        assert [str(clause) for clause in clauses] == [
            "uom.conversion_factor_to_base DESC",
            "uom.id ASC",
        ]

    def test_unknown_property_is_invalid(self) -> None:
        with pytest.raises(ServiceError) as exc_info:
            UomStatusRepository.order_by([SortOrder("colour")])

        assert exc_info.value.error_code is ErrorCode.INVALID_DATA
