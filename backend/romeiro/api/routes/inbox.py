"""Authenticated user's notification inbox."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, status

from romeiro.api.deps import CurrentUser, SessionDep
from romeiro.schemas.base import MessageResponse
from romeiro.schemas.notification import (
    InboxResponse,
    UnreadCount,
    UserNotificationRead,
)
from romeiro.services import notification_service

router = APIRouter()


@router.get("", response_model=InboxResponse, summary="Inbox with unread count")
async def read_inbox(session: SessionDep, current_user: CurrentUser) -> InboxResponse:
    entries = await notification_service.list_inbox(session, current_user.id)
    return InboxResponse(
        notifications=[UserNotificationRead.model_validate(entry) for entry in entries],
        unread_count=await notification_service.unread_count(session, current_user.id),
    )


@router.get("/unread-count", response_model=UnreadCount)
async def read_unread_count(session: SessionDep, current_user: CurrentUser) -> UnreadCount:
    return UnreadCount(
        count=await notification_service.unread_count(session, current_user.id)
    )


@router.put("/read-all", response_model=MessageResponse)
async def mark_all_read(session: SessionDep, current_user: CurrentUser) -> MessageResponse:
    updated = await notification_service.mark_all_read(session, current_user.id)
    return MessageResponse(message=f"{updated} notifications marked as read")


@router.put("/{entry_id}/read", response_model=UserNotificationRead)
async def mark_read(
    entry_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> UserNotificationRead:
    try:
        entry = await notification_service.mark_read(session, current_user.id, entry_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return UserNotificationRead.model_validate(entry)


@router.delete("/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_entry(
    entry_id: uuid.UUID, session: SessionDep, current_user: CurrentUser
) -> None:
    try:
        await notification_service.delete_inbox_entry(session, current_user.id, entry_id)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
