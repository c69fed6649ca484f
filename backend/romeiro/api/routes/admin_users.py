"""Admin user management and dashboard counts."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, Query, status

from romeiro.api.deps import AdminUser, SessionDep, require_admin
from romeiro.schemas.content import AdminStats
from romeiro.schemas.user import UserRead
from romeiro.services import content_service, user_service

router = APIRouter(dependencies=[Depends(require_admin)])


@router.get("/stats", response_model=AdminStats, summary="Dashboard counts")
async def admin_stats(session: SessionDep) -> AdminStats:
    return AdminStats(**await content_service.admin_stats(session))


@router.get("/users", response_model=list[UserRead], summary="List users")
async def list_users(
    session: SessionDep,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=500),
) -> list[UserRead]:
    users = await user_service.list_users(session, skip=skip, limit=limit)
    return [UserRead.model_validate(user) for user in users]


@router.get("/users/{user_id}", response_model=UserRead)
async def get_user(user_id: uuid.UUID, session: SessionDep) -> UserRead:
    user = await user_service.get_user(session, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return UserRead.model_validate(user)


@router.delete("/users/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(
    user_id: uuid.UUID, session: SessionDep, current_user: AdminUser
) -> None:
    if user_id == current_user.id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Cannot delete yourself"
        )
    user = await user_service.get_user(session, user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    await user_service.delete_user(session, user)
