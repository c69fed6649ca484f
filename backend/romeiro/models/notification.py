"""Broadcast notifications, per-user inbox copies and push devices."""

from __future__ import annotations

import enum
import uuid
from datetime import datetime

from sqlalchemy import (
    Boolean,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    String,
    Text,
    UniqueConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from romeiro.db.base import Base
from romeiro.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class NotificationType(str, enum.Enum):
    GENERAL = "general"
    NEWS = "news"
    EVENT = "event"
    ALERT = "alert"
    PROMOTION = "promotion"


class NotificationActionType(str, enum.Enum):
    NONE = "none"
    NAVIGATE = "navigate"
    URL = "url"


class Notification(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Template broadcast to every user's inbox."""

    __tablename__ = "notifications"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[NotificationType] = mapped_column(
        Enum(NotificationType), default=NotificationType.GENERAL, nullable=False
    )
    action_type: Mapped[NotificationActionType] = mapped_column(
        Enum(NotificationActionType), default=NotificationActionType.NONE, nullable=False
    )
    action_data: Mapped[str | None] = mapped_column(String(512))
    send_push: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    sent: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    sent_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))


class UserNotification(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Inbox copy of a notification for one user."""

    __tablename__ = "user_notifications"
    __table_args__ = (
        UniqueConstraint(
            "notification_id", "user_id", name="uq_user_notification_delivery"
        ),
        Index("ix_user_notifications_user", "user_id"),
    )

    user_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    )
    notification_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("notifications.id", ondelete="SET NULL")
    )
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    body: Mapped[str] = mapped_column(Text, nullable=False)
    type: Mapped[NotificationType] = mapped_column(
        Enum(NotificationType), default=NotificationType.GENERAL, nullable=False
    )
    action_type: Mapped[NotificationActionType] = mapped_column(
        Enum(NotificationActionType), default=NotificationActionType.NONE, nullable=False
    )
    action_data: Mapped[str | None] = mapped_column(String(512))
    read: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    read_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    user = relationship("User")


class PushDevice(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A device token registered with the push gateway."""

    __tablename__ = "push_devices"

    user_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL")
    )
    push_token: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    platform: Mapped[str | None] = mapped_column(String(20))
    device_name: Mapped[str | None] = mapped_column(String(120))
    active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)
    last_seen_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
