"""Initial schema: pilots table with partial unique index on active callsigns.

Revision ID: 001_create_pilots
Revises: None
Create Date: 2026-10-19

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "001_create_pilots"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "pilots",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("callsign", sa.String(6), nullable=False),
        sa.Column("name", sa.String(100), nullable=False),
        sa.Column("surname", sa.String(100), nullable=False),
        sa.Column("discord", sa.String(100), nullable=True),
        sa.Column("old_flights", sa.Integer, nullable=False, server_default="0"),
        sa.Column("flight_hours", sa.Float, nullable=True),
        sa.Column("suspended", sa.Boolean, nullable=False, server_default=sa.false()),
        sa.Column("suspension_reason", sa.Text, nullable=True),
        sa.Column("suspension_date", sa.DateTime(timezone=True), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.CheckConstraint("old_flights >= 0", name="ck_pilots_old_flights_non_negative"),
    )
    op.create_index(
        "uq_pilots_active_callsign", "pilots", ["callsign"],
        unique=True,
        postgresql_where=sa.text("suspended = false"),
        sqlite_where=sa.text("suspended = 0"),
    )
    op.create_index(
        "ix_pilots_callsign_suspended", "pilots", ["callsign", "suspended"],
    )


def downgrade() -> None:
    op.drop_index("ix_pilots_callsign_suspended", table_name="pilots")
    op.drop_index("uq_pilots_active_callsign", table_name="pilots")
    op.drop_table("pilots")
