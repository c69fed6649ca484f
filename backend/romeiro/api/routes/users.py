"""Profile endpoints for the authenticated user."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from romeiro.api.deps import CurrentUser, SessionDep
from romeiro.schemas.user import UserProfileUpdate, UserRead
from romeiro.services import user_service

router = APIRouter()


@router.get("/me", response_model=UserRead, summary="Current user profile")
async def read_current_user(current_user: CurrentUser) -> UserRead:
    """Return the authenticated user's profile."""
    return UserRead.model_validate(current_user)


@router.patch("/me", response_model=UserRead, summary="Update profile")
async def update_current_user(
    payload: UserProfileUpdate, session: SessionDep, current_user: CurrentUser
) -> UserRead:
    try:
        user = await user_service.update_profile(session, current_user, payload)
    except user_service.EmailAlreadyRegisteredError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    return UserRead.model_validate(user)
