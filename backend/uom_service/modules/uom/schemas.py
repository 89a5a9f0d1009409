"""Schemas for units of measure."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer, field_validator

from uom_service.core.validators import not_blank
from uom_service.db.models import (
    CONVERSION_FACTOR_PRECISION,
    CONVERSION_FACTOR_SCALE,
    DESCRIPTION_MAX_LENGTH,
    NAME_MAX_LENGTH,
)

ConversionFactor = Annotated[
    Decimal,
    Field(gt=0, max_digits=CONVERSION_FACTOR_PRECISION, decimal_places=CONVERSION_FACTOR_SCALE),
]

# Rendered as a JSON number rather than pydantic's default decimal string.
DecimalNumber = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class UomRequest(BaseModel):
    """Create request for a unit of measure."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    conversion_factor_to_base: ConversionFactor = Field(alias="conversionFactorToBase")
    uom_status_id: int = Field(gt=0, alias="uomStatusId")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str | None:
        return not_blank(value)


class UomUpdate(BaseModel):
    """
    Update request for a unit of measure.

    The status association is changed only through change-status; a
    ``uomStatusId`` in the payload is ignored.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    conversion_factor_to_base: ConversionFactor = Field(alias="conversionFactorToBase")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str | None:
        return not_blank(value)


class UomResponse(BaseModel):
    """Response for unit-of-measure records."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    name: str
    description: str | None = None
    conversion_factor_to_base: DecimalNumber = Field(alias="conversionFactorToBase")
    uom_status_id: int = Field(alias="uomStatusId")
