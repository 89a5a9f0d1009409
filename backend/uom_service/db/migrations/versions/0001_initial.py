"""Initial schema

Revision ID: 0001_initial
Revises:
Create Date: 2026-10-19
"""

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision = "0001_initial"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "uom_status",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("is_usable", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.UniqueConstraint("name", name="uq_uom_status_name"),
    )

    op.create_table(
        "uom",
        sa.Column("id", sa.BigInteger(), sa.Identity(always=False), primary_key=True),
        sa.Column("name", sa.String(length=50), nullable=False),
        sa.Column("description", sa.String(length=200), nullable=True),
        sa.Column("conversion_factor_to_base", sa.Numeric(precision=10, scale=3), nullable=False),
        sa.Column(
            "uom_status_id",
            sa.BigInteger(),
            sa.ForeignKey("uom_status.id", ondelete="RESTRICT"),
            nullable=False,
        ),
        sa.UniqueConstraint("name", name="uq_uom_name"),
    )
    op.create_index("ix_uom_uom_status_id", "uom", ["uom_status_id"])


def downgrade() -> None:
    op.drop_index("ix_uom_uom_status_id", table_name="uom")
    op.drop_table("uom")
    op.drop_table("uom_status")
