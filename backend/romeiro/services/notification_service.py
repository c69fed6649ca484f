"""Notification templates, broadcast fan-out, user inbox and push devices.

``broadcast`` copies a template into every user's inbox. Users are walked in
id order, one batch per commit, and users that already hold a copy are
skipped, so a repeated or interrupted send never creates duplicates.
"""

from __future__ import annotations

import logging
import uuid
from datetime import UTC, datetime

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.core.config import get_settings
from romeiro.models.notification import Notification, PushDevice, UserNotification
from romeiro.models.user import User
from romeiro.schemas.notification import (
    NotificationCreate,
    NotificationUpdate,
    PushDeviceRegister,
)

logger = logging.getLogger(__name__)


# Templates


async def list_notifications(session: AsyncSession) -> list[Notification]:
    result = await session.execute(
        select(Notification).order_by(Notification.created_at.desc())
    )
    return list(result.scalars().all())


async def get_notification(
    session: AsyncSession, notification_id: uuid.UUID
) -> Notification | None:
    return await session.get(Notification, notification_id)


async def create_notification(
    session: AsyncSession, payload: NotificationCreate
) -> Notification:
    notification = Notification(**payload.model_dump())
    session.add(notification)
    await session.commit()
    await session.refresh(notification)
    return notification


async def update_notification(
    session: AsyncSession, notification: Notification, payload: NotificationUpdate
) -> Notification:
    for field, value in payload.model_dump(exclude_unset=True).items():
        if value is None and field != "action_data":
            continue
        setattr(notification, field, value)
    await session.commit()
    await session.refresh(notification)
    return notification


async def delete_notification(session: AsyncSession, notification: Notification) -> None:
    """Delete a template; inbox copies survive with a null reference."""
    await session.delete(notification)
    await session.commit()


async def notification_stats(session: AsyncSession) -> dict[str, int]:
    total = (
        await session.execute(select(func.count()).select_from(Notification))
    ).scalar_one()
    sent = (
        await session.execute(
            select(func.count())
            .select_from(Notification)
            .where(Notification.sent.is_(True))
        )
    ).scalar_one()
    devices = (
        await session.execute(
            select(func.count())
            .select_from(PushDevice)
            .where(PushDevice.active.is_(True))
        )
    ).scalar_one()
    return {
        "total": int(total),
        "sent": int(sent),
        "pending": int(total) - int(sent),
        "devices": int(devices),
    }


# Broadcast


async def broadcast(
    session: AsyncSession,
    notification: Notification,
    *,
    batch_size: int | None = None,
) -> int:
    """Deliver ``notification`` to every user's inbox; return rows created."""
    size = batch_size or get_settings().broadcast_batch_size
    if size < 1:
        raise ValueError("batch size must be positive")

    notification_id = notification.id
    template = {
        "title": notification.title,
        "body": notification.body,
        "type": notification.type,
        "action_type": notification.action_type,
        "action_data": notification.action_data,
    }

    if not notification.sent:
        notification.sent = True
        notification.sent_at = datetime.now(UTC)
        await session.commit()

    created = 0
    last_user_id: uuid.UUID | None = None
    while True:
        stmt = select(User.id).order_by(User.id).limit(size)
        if last_user_id is not None:
            stmt = stmt.where(User.id > last_user_id)
        user_ids = list((await session.execute(stmt)).scalars().all())
        if not user_ids:
            break

        delivered = set(
            (
                await session.execute(
                    select(UserNotification.user_id).where(
                        UserNotification.notification_id == notification_id,
                        UserNotification.user_id.in_(user_ids),
                    )
                )
            )
            .scalars()
            .all()
        )
        pending = [user_id for user_id in user_ids if user_id not in delivered]
        session.add_all(
            UserNotification(
                user_id=user_id, notification_id=notification_id, **template
            )
            for user_id in pending
        )
        await session.commit()
        created += len(pending)
        last_user_id = user_ids[-1]

    logger.info(
        "Notification %s delivered to %d new inboxes", notification_id, created
    )
    return created


# Inbox


async def list_inbox(
    session: AsyncSession, user_id: uuid.UUID, *, limit: int = 100
) -> list[UserNotification]:
    result = await session.execute(
        select(UserNotification)
        .where(UserNotification.user_id == user_id)
        .order_by(UserNotification.created_at.desc())
        .limit(limit)
    )
    return list(result.scalars().all())


async def unread_count(session: AsyncSession, user_id: uuid.UUID) -> int:
    result = await session.execute(
        select(func.count())
        .select_from(UserNotification)
        .where(UserNotification.user_id == user_id, UserNotification.read.is_(False))
    )
    return int(result.scalar_one())


async def _inbox_entry(
    session: AsyncSession, user_id: uuid.UUID, entry_id: uuid.UUID
) -> UserNotification:
    entry = await session.get(UserNotification, entry_id)
    if entry is None or entry.user_id != user_id:
        raise LookupError("Notification not found")
    return entry


async def mark_read(
    session: AsyncSession, user_id: uuid.UUID, entry_id: uuid.UUID
) -> UserNotification:
    entry = await _inbox_entry(session, user_id, entry_id)
    if not entry.read:
        entry.read = True
        entry.read_at = datetime.now(UTC)
        await session.commit()
        await session.refresh(entry)
    return entry


async def mark_all_read(session: AsyncSession, user_id: uuid.UUID) -> int:
    result = await session.execute(
        update(UserNotification)
        .where(UserNotification.user_id == user_id, UserNotification.read.is_(False))
        .values(read=True, read_at=datetime.now(UTC))
    )
    await session.commit()
    return int(result.rowcount or 0)


async def delete_inbox_entry(
    session: AsyncSession, user_id: uuid.UUID, entry_id: uuid.UUID
) -> None:
    await _inbox_entry(session, user_id, entry_id)
    await session.execute(delete(UserNotification).where(UserNotification.id == entry_id))
    await session.commit()


# Push devices


async def register_device(
    session: AsyncSession, payload: PushDeviceRegister
) -> PushDevice:
    """Insert or refresh a device by token, re-activating it."""
    result = await session.execute(
        select(PushDevice).where(PushDevice.push_token == payload.push_token)
    )
    device = result.scalar_one_or_none()
    if device is None:
        device = PushDevice(push_token=payload.push_token)
        session.add(device)
    if payload.user_id is not None:
        if await session.get(User, payload.user_id) is None:
            raise LookupError("User not found")
        device.user_id = payload.user_id
    if payload.platform is not None:
        device.platform = payload.platform
    if payload.device_name is not None:
        device.device_name = payload.device_name
    device.active = True
    device.last_seen_at = datetime.now(UTC)
    await session.commit()
    await session.refresh(device)
    return device


async def active_push_tokens(session: AsyncSession) -> list[str]:
    result = await session.execute(
        select(PushDevice.push_token)
        .where(PushDevice.active.is_(True))
        .order_by(PushDevice.created_at)
    )
    return list(result.scalars().all())
