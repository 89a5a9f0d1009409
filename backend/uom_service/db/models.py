"""
SQLAlchemy ORM models for the unit-of-measure service.
Identifiers are database-assigned BIGINT identities.
"""

from decimal import Decimal

from sqlalchemy import (
    BigInteger,
    Boolean,
    ForeignKey,
    Identity,
    Index,
    Numeric,
    String,
    UniqueConstraint,
    true,
)
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

NAME_MAX_LENGTH = 50
DESCRIPTION_MAX_LENGTH = 200
CONVERSION_FACTOR_PRECISION = 10
CONVERSION_FACTOR_SCALE = 3


class Base(DeclarativeBase):
    """Base class for all ORM models."""


# =============================================================================
# Status
# =============================================================================


class UomStatus(Base):
    """
    Usability classification shared by units of measure.

    ``is_usable`` only changes through the dedicated change-usability
    operation; the general update path never writes it.
    """

    __tablename__ = "uom_status"

    id: Mapped[int] = mapped_column(
        BigInteger,
        Identity(always=False),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(String(DESCRIPTION_MAX_LENGTH))
    is_usable: Mapped[bool] = mapped_column(
        Boolean,
        nullable=False,
        default=True,
        server_default=true(),
    )

    __table_args__ = (UniqueConstraint("name", name="uq_uom_status_name"),)

    def __repr__(self) -> str:
        return f"<UomStatus(id={self.id}, name={self.name!r}, is_usable={self.is_usable})>"


# =============================================================================
# Unit of Measure
# =============================================================================


class Uom(Base):
    """Unit of measure with its multiplier to the canonical base unit."""

    __tablename__ = "uom"

    id: Mapped[int] = mapped_column(
        BigInteger,
        Identity(always=False),
        primary_key=True,
    )
    name: Mapped[str] = mapped_column(
        String(NAME_MAX_LENGTH),
        nullable=False,
    )
    description: Mapped[str | None] = mapped_column(String(DESCRIPTION_MAX_LENGTH))
    conversion_factor_to_base: Mapped[Decimal] = mapped_column(
        Numeric(CONVERSION_FACTOR_PRECISION, CONVERSION_FACTOR_SCALE),
        nullable=False,
    )
    uom_status_id: Mapped[int] = mapped_column(
        BigInteger,
        ForeignKey("uom_status.id", ondelete="RESTRICT"),
        nullable=False,
    )

    uom_status: Mapped["UomStatus"] = relationship(lazy="joined")

    __table_args__ = (
        UniqueConstraint("name", name="uq_uom_name"),
        Index("ix_uom_uom_status_id", "uom_status_id"),
    )

    def __repr__(self) -> str:
        return (
            f"<Uom(id={self.id}, name={self.name!r}, "
            f"conversion_factor_to_base={self.conversion_factor_to_base}, "
            f"uom_status_id={self.uom_status_id})>"
        )
