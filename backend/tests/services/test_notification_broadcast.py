"""Notification fan-out into user inboxes."""

from __future__ import annotations

import pytest
from sqlalchemy import func, select

from romeiro.db.session import get_sessionmaker
from romeiro.models import (
    Notification,
    NotificationType,
    PushDevice,
    User,
    UserNotification,
    UserRole,
)
from romeiro.schemas.notification import PushDeviceRegister
from romeiro.services import notification_service

pytestmark = pytest.mark.asyncio


def _users(count: int) -> list[User]:
    return [
        User(
            name=f"Romeiro {index}",
            email=f"romeiro{index}@example.com",
            hashed_password="x",
            role=UserRole.PILGRIM,
        )
        for index in range(count)
    ]


async def _inbox_rows(session, notification_id) -> int:
    result = await session.execute(
        select(func.count())
        .select_from(UserNotification)
        .where(UserNotification.notification_id == notification_id)
    )
    return int(result.scalar_one())


async def test_broadcast_creates_one_copy_per_user(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        session.add_all(_users(7))
        notification = Notification(
            title="Missa campal",
            body="Amanha as 7h no Horto",
            type=NotificationType.EVENT,
        )
        session.add(notification)
        await session.commit()

        created = await notification_service.broadcast(session, notification, batch_size=3)
        assert created == 7
        assert await _inbox_rows(session, notification.id) == 7

        await session.refresh(notification)
        assert notification.sent is True
        first_sent_at = notification.sent_at
        assert first_sent_at is not None

        copy = (
            await session.execute(
                select(UserNotification).where(
                    UserNotification.notification_id == notification.id
                )
            )
        ).scalars().first()
        assert copy.title == "Missa campal"
        assert copy.body == "Amanha as 7h no Horto"
        assert copy.type == NotificationType.EVENT
        assert copy.read is False

        # resending only reaches users that joined since
        session.add_all(
            [
                User(
                    name="Recem chegado",
                    email="novo@example.com",
                    hashed_password="x",
                    role=UserRole.PILGRIM,
                )
            ]
        )
        await session.commit()
        again = await notification_service.broadcast(session, notification, batch_size=3)
        assert again == 1
        assert await _inbox_rows(session, notification.id) == 8
        await session.refresh(notification)
        assert notification.sent_at == first_sent_at


async def test_broadcast_without_users_creates_nothing(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        notification = Notification(title="Aviso", body="Sem destinatarios")
        session.add(notification)
        await session.commit()

        assert await notification_service.broadcast(session, notification) == 0
        assert notification.sent is True


async def test_inbox_operations(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        users = _users(2)
        session.add_all(users)
        first = Notification(title="Um", body="Primeira")
        second = Notification(title="Dois", body="Segunda")
        session.add_all([first, second])
        await session.commit()
        await notification_service.broadcast(session, first)
        await notification_service.broadcast(session, second)

        owner, other = users
        inbox = await notification_service.list_inbox(session, owner.id)
        assert len(inbox) == 2
        assert await notification_service.unread_count(session, owner.id) == 2

        entry = await notification_service.mark_read(session, owner.id, inbox[0].id)
        assert entry.read is True and entry.read_at is not None
        assert await notification_service.unread_count(session, owner.id) == 1

        with pytest.raises(LookupError):
            await notification_service.mark_read(session, other.id, inbox[1].id)

        assert await notification_service.mark_all_read(session, owner.id) == 1
        assert await notification_service.unread_count(session, owner.id) == 0
        assert await notification_service.unread_count(session, other.id) == 2

        await notification_service.delete_inbox_entry(session, owner.id, inbox[1].id)
        assert len(await notification_service.list_inbox(session, owner.id)) == 1


async def test_deleting_template_keeps_inbox_copies(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        (user,) = _users(1)
        notification = Notification(title="Temporaria", body="Sera apagada")
        session.add_all([user, notification])
        await session.commit()
        await notification_service.broadcast(session, notification)

        await notification_service.delete_notification(session, notification)
        session.expire_all()
        inbox = await notification_service.list_inbox(session, user.id)
        assert len(inbox) == 1
        assert inbox[0].notification_id is None
        assert inbox[0].title == "Temporaria"


async def test_register_device_upserts_by_token(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        token = "ExponentPushToken[abc123]"
        device = await notification_service.register_device(
            session, PushDeviceRegister(push_token=token, platform="android")
        )
        device.active = False
        await session.commit()

        again = await notification_service.register_device(
            session, PushDeviceRegister(push_token=token, device_name="Moto G")
        )
        assert again.id == device.id
        assert again.active is True
        assert again.platform == "android"
        assert again.device_name == "Moto G"

        count = (
            await session.execute(select(func.count()).select_from(PushDevice))
        ).scalar_one()
        assert count == 1
        stats = await notification_service.notification_stats(session)
        assert stats["devices"] == 1
