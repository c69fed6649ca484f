"""Admin management and sending of broadcast notifications."""

from __future__ import annotations

import logging
import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.api.deps import HubDep, SessionDep, require_admin
from romeiro.models.notification import Notification
from romeiro.schemas.notification import (
    NotificationCreate,
    NotificationRead,
    NotificationSendResult,
    NotificationStats,
    NotificationUpdate,
)
from romeiro.services import notification_service, push_service
from romeiro.services.updates_hub import UpdateType

router = APIRouter(dependencies=[Depends(require_admin)])

logger = logging.getLogger(__name__)


async def _load(session: AsyncSession, notification_id: uuid.UUID) -> Notification:
    notification = await notification_service.get_notification(session, notification_id)
    if notification is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Notification not found"
        )
    return notification


@router.get("", response_model=list[NotificationRead])
async def list_notifications(session: SessionDep) -> list[NotificationRead]:
    items = await notification_service.list_notifications(session)
    return [NotificationRead.model_validate(item) for item in items]


@router.get("/stats", response_model=NotificationStats)
async def notification_stats(session: SessionDep) -> NotificationStats:
    return NotificationStats(**await notification_service.notification_stats(session))


@router.post("", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
async def create_notification(
    payload: NotificationCreate, session: SessionDep
) -> NotificationRead:
    notification = await notification_service.create_notification(session, payload)
    return NotificationRead.model_validate(notification)


@router.get("/{notification_id}", response_model=NotificationRead)
async def get_notification(
    notification_id: uuid.UUID, session: SessionDep
) -> NotificationRead:
    return NotificationRead.model_validate(await _load(session, notification_id))


@router.put("/{notification_id}", response_model=NotificationRead)
async def update_notification(
    notification_id: uuid.UUID, payload: NotificationUpdate, session: SessionDep
) -> NotificationRead:
    notification = await notification_service.update_notification(
        session, await _load(session, notification_id), payload
    )
    return NotificationRead.model_validate(notification)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(notification_id: uuid.UUID, session: SessionDep) -> None:
    await notification_service.delete_notification(
        session, await _load(session, notification_id)
    )


@router.post("/{notification_id}/send", response_model=NotificationSendResult)
async def send_notification(
    notification_id: uuid.UUID, session: SessionDep, hub: HubDep
) -> NotificationSendResult:
    """Deliver to every inbox, push to registered devices, notify stream clients."""
    notification = await _load(session, notification_id)
    outcome = await push_service.send_notification(session, notification)
    hub.broadcast(UpdateType.NOTIFICATIONS, {"id": str(notification_id)})
    logger.info(
        "Notification %s sent: %d inboxes, %d pushed, %d push errors",
        notification_id,
        outcome.user_count,
        outcome.push_sent,
        outcome.push_errors,
    )
    return NotificationSendResult(
        user_count=outcome.user_count,
        push_sent=outcome.push_sent,
        push_errors=outcome.push_errors,
        message=outcome.message,
    )
