"""Schemas for unit-of-measure statuses."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator

from uom_service.core.validators import not_blank
from uom_service.db.models import DESCRIPTION_MAX_LENGTH, NAME_MAX_LENGTH


class UomStatusRequest(BaseModel):
    """Create request for a status."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    is_usable: bool = Field(default=True, alias="isUsable")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return not_blank(value)


class UomStatusUpdate(BaseModel):
    """
    Update request for a status.

    Only fields present in the payload are applied. The usability flag has
    its own endpoint and is not accepted here.
    """

    model_config = ConfigDict(populate_by_name=True)

    name: str | None = Field(default=None, min_length=1, max_length=NAME_MAX_LENGTH)
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str | None) -> str | None:
        return not_blank(value)


class UomStatusResponse(BaseModel):
    """Response for status records."""

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: int
    name: str
    description: str | None = None
    is_usable: bool = Field(alias="isUsable")
