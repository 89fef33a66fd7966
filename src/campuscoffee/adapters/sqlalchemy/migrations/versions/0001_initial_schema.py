"""Create user and point-of-sale tables.

Revision ID: 0001
Revises:
Create Date: 2026-10-18
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "campus_user",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("login_name", sa.String(length=64), nullable=False),
        sa.Column("email_address", sa.String(length=255), nullable=False),
        sa.Column("first_name", sa.String(length=255), nullable=False),
        sa.Column("last_name", sa.String(length=255), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_campus_user"),
        sa.UniqueConstraint("login_name", name="uq_campus_user_login_name"),
    )
    op.create_table(
        "pos",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("description", sa.String(), nullable=False),
        sa.Column(
            "pos_type",
            sa.Enum(
                "CAFE",
                "VENDING_MACHINE",
                "BAKERY",
                "CAFETERIA",
                name="postype",
                native_enum=False,
                length=32,
            ),
            nullable=False,
        ),
        sa.Column(
            "campus",
            sa.Enum(
                "NORTH",
                "SOUTH",
                "EAST",
                "WEST",
                "CENTER",
                name="campustype",
                native_enum=False,
                length=32,
            ),
            nullable=False,
        ),
        sa.Column("street", sa.String(length=255), nullable=True),
        sa.Column("house_number", sa.String(length=32), nullable=True),
        sa.Column("postal_code", sa.String(length=32), nullable=True),
        sa.Column("city", sa.String(length=255), nullable=True),
        sa.Column("latitude", sa.Float(), nullable=False),
        sa.Column("longitude", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column("updated_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_pos"),
        sa.UniqueConstraint("name", name="uq_pos_name"),
    )


def downgrade() -> None:
    op.drop_table("pos")
    op.drop_table("campus_user")
