"""Notification, inbox and push device schemas."""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field

from romeiro.models.notification import NotificationActionType, NotificationType
from romeiro.schemas.base import ApiModel


class NotificationCreate(ApiModel):
    title: str = Field(min_length=1, max_length=255)
    body: str = Field(min_length=1)
    type: NotificationType = NotificationType.GENERAL
    action_type: NotificationActionType = NotificationActionType.NONE
    action_data: str | None = Field(default=None, max_length=512)
    send_push: bool = True


class NotificationUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=1, max_length=255)
    body: str | None = Field(default=None, min_length=1)
    type: NotificationType | None = None
    action_type: NotificationActionType | None = None
    action_data: str | None = Field(default=None, max_length=512)
    send_push: bool | None = None


class NotificationRead(ApiModel):
    id: uuid.UUID
    title: str
    body: str
    type: NotificationType
    action_type: NotificationActionType
    action_data: str | None = None
    send_push: bool
    sent: bool
    sent_at: datetime | None = None
    created_at: datetime


class NotificationStats(ApiModel):
    total: int
    sent: int
    pending: int
    devices: int


class NotificationSendResult(ApiModel):
    user_count: int
    push_sent: int
    push_errors: int
    message: str


class UserNotificationRead(ApiModel):
    id: uuid.UUID
    notification_id: uuid.UUID | None = None
    title: str
    body: str
    type: NotificationType
    action_type: NotificationActionType
    action_data: str | None = None
    read: bool
    read_at: datetime | None = None
    created_at: datetime


class InboxResponse(ApiModel):
    notifications: list[UserNotificationRead]
    unread_count: int


class UnreadCount(ApiModel):
    count: int


class PushDeviceRegister(ApiModel):
    push_token: str = Field(min_length=8, max_length=255)
    user_id: uuid.UUID | None = None
    platform: str | None = Field(default=None, max_length=20)
    device_name: str | None = Field(default=None, max_length=120)


class PushDeviceRead(ApiModel):
    id: uuid.UUID
    user_id: uuid.UUID | None = None
    platform: str | None = None
    device_name: str | None = None
    active: bool
