"""Initial schema.

Revision ID: 0001
Revises:
Create Date: 2026-10-19
"""

from __future__ import annotations

import sqlalchemy as sa
from sqlalchemy.dialects import postgresql
from alembic import op

revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

USER_ROLE = postgresql.ENUM("ADMIN", "PILGRIM", name="userrole", create_type=False)
ACCOMMODATION_TYPE = postgresql.ENUM(
    "HOTEL", "POUSADA", "HOSTEL", "OTHER", name="accommodationtype", create_type=False
)
NOTIFICATION_TYPE = postgresql.ENUM(
    "GENERAL",
    "NEWS",
    "EVENT",
    "ALERT",
    "PROMOTION",
    name="notificationtype",
    create_type=False,
)
NOTIFICATION_ACTION_TYPE = postgresql.ENUM(
    "NONE", "NAVIGATE", "URL", name="notificationactiontype", create_type=False
)
_ENUMS = (USER_ROLE, ACCOMMODATION_TYPE, NOTIFICATION_TYPE, NOTIFICATION_ACTION_TYPE)


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


def _uuid_pk() -> sa.Column:
    return sa.Column("id", sa.Uuid(as_uuid=True), primary_key=True)


def upgrade() -> None:
    bind = op.get_bind()
    for enum_type in _ENUMS:
        enum_type.create(bind, checkfirst=True)

    op.create_table(
        "users",
        _uuid_pk(),
        sa.Column("name", sa.String(160), nullable=False),
        sa.Column("email", sa.String(320), nullable=False, unique=True),
        sa.Column("phone", sa.String(32)),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("city", sa.String(120)),
        sa.Column("state", sa.String(60)),
        sa.Column("avatar_url", sa.String(512)),
        sa.Column("receive_news", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("accepted_terms", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("role", USER_ROLE, nullable=False, server_default="PILGRIM"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "accommodations",
        _uuid_pk(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("type", ACCOMMODATION_TYPE, nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("address", sa.String(255)),
        sa.Column("neighborhood", sa.String(120)),
        sa.Column("city", sa.String(120)),
        sa.Column("latitude", sa.Float()),
        sa.Column("longitude", sa.Float()),
        sa.Column("phone", sa.String(32)),
        sa.Column("whatsapp", sa.String(32)),
        sa.Column("email", sa.String(320)),
        sa.Column("website", sa.String(255)),
        sa.Column("check_in_time", sa.String(5)),
        sa.Column("check_out_time", sa.String(5)),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("cover_image", sa.String(512)),
        sa.Column("rating", sa.String(8)),
        sa.Column("reviews_count", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "rooms",
        _uuid_pk(),
        sa.Column(
            "accommodation_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("accommodations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("name", sa.String(160), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("max_guests", sa.Integer(), nullable=False, server_default="2"),
        sa.Column("beds", sa.String(160)),
        sa.Column("price_per_night", sa.Integer(), nullable=False),
        sa.Column("quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("amenities", sa.JSON(), nullable=False),
        sa.Column("images", sa.JSON(), nullable=False),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("quantity >= 1", name="ck_room_quantity_positive"),
        sa.CheckConstraint("price_per_night >= 0", name="ck_room_price_non_negative"),
    )
    op.create_index("ix_rooms_accommodation", "rooms", ["accommodation_id"])

    op.create_table(
        "room_blocked_dates",
        _uuid_pk(),
        sa.Column(
            "room_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("rooms.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column("date", sa.String(10), nullable=False),
        sa.Column("booked_quantity", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("reason", sa.String(255)),
        *_timestamps(),
        sa.CheckConstraint("booked_quantity >= 1", name="ck_blocked_quantity_positive"),
    )
    op.create_index(
        "ix_room_blocked_dates_room_date", "room_blocked_dates", ["room_id", "date"]
    )

    op.create_table(
        "basic_accommodations",
        _uuid_pk(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("type", ACCOMMODATION_TYPE, nullable=False),
        sa.Column("phone", sa.String(32)),
        sa.Column("whatsapp", sa.String(32)),
        sa.Column("address", sa.String(255)),
        sa.Column("city", sa.String(120)),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "accommodation_reviews",
        _uuid_pk(),
        sa.Column(
            "accommodation_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("accommodations.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
        ),
        sa.Column("author_name", sa.String(160), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text()),
        sa.Column("approved", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_accommodation_review_rating"),
    )
    op.create_index(
        "ix_accommodation_reviews_accommodation",
        "accommodation_reviews",
        ["accommodation_id"],
    )

    op.create_table(
        "businesses",
        _uuid_pk(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("category", sa.String(80), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("short_description", sa.String(255)),
        sa.Column("address", sa.String(255)),
        sa.Column("neighborhood", sa.String(120)),
        sa.Column("city", sa.String(120)),
        sa.Column("phone", sa.String(32)),
        sa.Column("whatsapp", sa.String(32)),
        sa.Column("website", sa.String(255)),
        sa.Column("instagram", sa.String(255)),
        sa.Column("facebook", sa.String(255)),
        sa.Column("hours", sa.String(255)),
        sa.Column("price_range", sa.String(16)),
        sa.Column("logo_url", sa.String(512)),
        sa.Column("cover_url", sa.String(512)),
        sa.Column("gallery", sa.JSON(), nullable=False),
        sa.Column("rating", sa.String(8)),
        sa.Column("reviews", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "business_reviews",
        _uuid_pk(),
        sa.Column(
            "business_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("businesses.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
        ),
        sa.Column("author_name", sa.String(160), nullable=False),
        sa.Column("rating", sa.Integer(), nullable=False),
        sa.Column("comment", sa.Text()),
        *_timestamps(),
        sa.CheckConstraint("rating BETWEEN 1 AND 5", name="ck_business_review_rating"),
    )
    op.create_index("ix_business_reviews_business", "business_reviews", ["business_id"])

    op.create_table(
        "notifications",
        _uuid_pk(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("type", NOTIFICATION_TYPE, nullable=False),
        sa.Column("action_type", NOTIFICATION_ACTION_TYPE, nullable=False),
        sa.Column("action_data", sa.String(512)),
        sa.Column("send_push", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("sent", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("sent_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )

    op.create_table(
        "user_notifications",
        _uuid_pk(),
        sa.Column(
            "user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="CASCADE"),
            nullable=False,
        ),
        sa.Column(
            "notification_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("notifications.id", ondelete="SET NULL"),
        ),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("body", sa.Text(), nullable=False),
        sa.Column("type", NOTIFICATION_TYPE, nullable=False),
        sa.Column("action_type", NOTIFICATION_ACTION_TYPE, nullable=False),
        sa.Column("action_data", sa.String(512)),
        sa.Column("read", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("read_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.UniqueConstraint(
            "notification_id", "user_id", name="uq_user_notification_delivery"
        ),
    )
    op.create_index("ix_user_notifications_user", "user_notifications", ["user_id"])

    op.create_table(
        "push_devices",
        _uuid_pk(),
        sa.Column(
            "user_id",
            sa.Uuid(as_uuid=True),
            sa.ForeignKey("users.id", ondelete="SET NULL"),
        ),
        sa.Column("push_token", sa.String(255), nullable=False, unique=True),
        sa.Column("platform", sa.String(20)),
        sa.Column("device_name", sa.String(120)),
        sa.Column("active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("last_seen_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )

    op.create_table(
        "news",
        _uuid_pk(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("summary", sa.String(512)),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("category", sa.String(80)),
        sa.Column("image_url", sa.String(512)),
        sa.Column("author", sa.String(160)),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published_at", sa.DateTime(timezone=True)),
        *_timestamps(),
    )

    op.create_table(
        "videos",
        _uuid_pk(),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("youtube_url", sa.String(512), nullable=False),
        sa.Column("thumbnail_url", sa.String(512)),
        sa.Column("category", sa.String(80)),
        sa.Column("duration", sa.String(16)),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "attractions",
        _uuid_pk(),
        sa.Column("name", sa.String(200), nullable=False),
        sa.Column("description", sa.Text()),
        sa.Column("category", sa.String(80)),
        sa.Column("address", sa.String(255)),
        sa.Column("latitude", sa.Float()),
        sa.Column("longitude", sa.Float()),
        sa.Column("opening_hours", sa.String(255)),
        sa.Column("image_url", sa.String(512)),
        sa.Column("featured", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("published", sa.Boolean(), nullable=False, server_default=sa.true()),
        *_timestamps(),
    )

    op.create_table(
        "app_settings",
        sa.Column("key", sa.String(120), primary_key=True),
        sa.Column("value", sa.Text()),
        *_timestamps(),
    )


def downgrade() -> None:
    for table in (
        "app_settings",
        "attractions",
        "videos",
        "news",
        "push_devices",
        "user_notifications",
        "notifications",
        "business_reviews",
        "businesses",
        "accommodation_reviews",
        "basic_accommodations",
        "room_blocked_dates",
        "rooms",
        "accommodations",
        "users",
    ):
        op.drop_table(table)
    bind = op.get_bind()
    for enum_type in reversed(_ENUMS):
        enum_type.drop(bind, checkfirst=True)
