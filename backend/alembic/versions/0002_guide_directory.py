"""Guide directory: useful phones, tips, services, partners, banners.

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    ]


def _listing_columns() -> list[sa.Column]:
    return [
        sa.Column("display_order", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    ]


def upgrade() -> None:
    op.create_table(
        "useful_phones",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.String(255)),
        sa.Column("phone", sa.String(40), nullable=False),
        sa.Column("category", sa.String(80)),
        sa.Column("icon", sa.String(60)),
        sa.Column("is_emergency", sa.Boolean(), nullable=False, server_default=sa.false()),
        *_listing_columns(),
    )

    op.create_table(
        "pilgrim_tips",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column("category", sa.String(80)),
        sa.Column("icon", sa.String(60)),
        *_listing_columns(),
    )

    op.create_table(
        "pilgrim_services",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("icon", sa.String(60)),
        sa.Column("phone", sa.String(40)),
        sa.Column("address", sa.String(255)),
        *_listing_columns(),
    )

    op.create_table(
        "partners",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("logo_url", sa.String(512)),
        sa.Column("website", sa.String(512)),
        *_listing_columns(),
    )

    op.create_table(
        "banners",
        sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("image_url", sa.String(512)),
        sa.Column("link", sa.String(512)),
        sa.Column("position", sa.String(40), nullable=False, server_default="home"),
        sa.Column("start_date", sa.Date()),
        sa.Column("end_date", sa.Date()),
        *_listing_columns(),
    )
    op.create_index("ix_banners_position", "banners", ["position"])


def downgrade() -> None:
    op.drop_index("ix_banners_position", table_name="banners")
    for table in (
        "banners",
        "partners",
        "pilgrim_services",
        "pilgrim_tips",
        "useful_phones",
    ):
        op.drop_table(table)
