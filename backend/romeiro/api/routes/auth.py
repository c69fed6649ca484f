"""Authentication endpoints."""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import OAuth2PasswordRequestForm

from romeiro.api.deps import SessionDep
from romeiro.api.rate_limit import DEFAULT_RATE_DEP, LOGIN_RATE_DEP
from romeiro.schemas.auth import Token
from romeiro.schemas.user import RegistrationResponse, UserRead, UserRegister
from romeiro.services import user_service
from romeiro.services.auth_service import authenticate_user, create_access_token_for_user

router = APIRouter()

logger = logging.getLogger(__name__)


@router.post(
    "/token",
    response_model=Token,
    summary="Obtain access token",
    dependencies=[LOGIN_RATE_DEP],
)
async def login_for_access_token(
    form_data: Annotated[OAuth2PasswordRequestForm, Depends()],
    session: SessionDep,
) -> Token:
    """Validate credentials and issue a bearer token."""
    user = await authenticate_user(
        session, email=form_data.username, password=form_data.password
    )
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return Token(access_token=create_access_token_for_user(user))


@router.post(
    "/register",
    response_model=RegistrationResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register pilgrim",
    dependencies=[DEFAULT_RATE_DEP],
)
async def register(payload: UserRegister, session: SessionDep) -> RegistrationResponse:
    try:
        user = await user_service.register_user(session, payload)
    except user_service.EmailAlreadyRegisteredError as exc:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(exc)) from exc
    logger.info("Registered user %s", user.id)
    return RegistrationResponse(
        user=UserRead.model_validate(user), message="Registration successful"
    )
