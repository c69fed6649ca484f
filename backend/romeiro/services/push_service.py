"""Push dispatch for broadcast notifications."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.core.config import get_settings
from romeiro.integrations.expo_push import PushClient, PushMessage, PushReport
from romeiro.models.notification import Notification
from romeiro.services import notification_service

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class SendOutcome:
    user_count: int
    push_sent: int
    push_errors: int

    @property
    def message(self) -> str:
        return f"Notification sent to {self.user_count} users"


def get_push_client() -> PushClient:
    """Build a gateway client from settings."""
    settings = get_settings()
    return PushClient(
        settings.push_gateway_url,
        access_token=settings.push_access_token,
        chunk_size=settings.push_chunk_size,
        timeout=settings.push_timeout_seconds,
    )


def build_messages(notification: Notification, tokens: list[str]) -> list[PushMessage]:
    data = {
        "notificationId": str(notification.id),
        "type": notification.type.value,
        "actionType": notification.action_type.value,
        "actionData": notification.action_data,
    }
    return [
        PushMessage(
            to=token, title=notification.title, body=notification.body, data=dict(data)
        )
        for token in tokens
    ]


async def dispatch_push(
    session: AsyncSession,
    notification: Notification,
    *,
    client: PushClient | None = None,
) -> PushReport:
    tokens = await notification_service.active_push_tokens(session)
    if not tokens:
        logger.debug("No active push devices; skipping push for %s", notification.id)
        return PushReport()
    client = client or get_push_client()
    return await client.send(build_messages(notification, tokens))


async def send_notification(
    session: AsyncSession,
    notification: Notification,
    *,
    client: PushClient | None = None,
) -> SendOutcome:
    """Fan a notification out to inboxes, then push it when requested."""
    created = await notification_service.broadcast(session, notification)
    report = PushReport()
    if notification.send_push:
        report = await dispatch_push(session, notification, client=client)
    return SendOutcome(
        user_count=created, push_sent=report.sent, push_errors=report.errors
    )
