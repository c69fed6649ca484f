"""User data access helpers."""
from __future__ import annotations

import uuid

from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.core.security import get_password_hash
from romeiro.models.user import User, UserRole
from romeiro.schemas.user import UserProfileUpdate, UserRegister


class EmailAlreadyRegisteredError(ValueError):
    """Raised when an email address is already taken."""


async def get_user_by_email(session: AsyncSession, email: str) -> User | None:
    """Return a user by email address (case-insensitive)."""
    result = await session.execute(select(User).where(User.email == email.lower()))
    return result.scalar_one_or_none()


async def get_user(session: AsyncSession, user_id: uuid.UUID) -> User | None:
    return await session.get(User, user_id)


async def list_users(session: AsyncSession, *, skip: int = 0, limit: int = 50) -> list[User]:
    """Return paginated users, newest first."""
    result = await session.execute(
        select(User).order_by(User.created_at.desc()).offset(skip).limit(limit)
    )
    return list(result.scalars().all())


async def count_users(session: AsyncSession) -> int:
    return int((await session.execute(select(func.count()).select_from(User))).scalar_one())


async def create_user(
    session: AsyncSession,
    *,
    name: str,
    email: str,
    password: str,
    role: UserRole = UserRole.PILGRIM,
    phone: str | None = None,
    city: str | None = None,
    state: str | None = None,
    receive_news: bool = False,
    accepted_terms: bool = False,
) -> User:
    """Persist a new user with a hashed password."""
    if await get_user_by_email(session, email) is not None:
        raise EmailAlreadyRegisteredError("E-mail already registered")
    user = User(
        name=name,
        email=email.lower(),
        hashed_password=get_password_hash(password),
        phone=phone or None,
        city=city or None,
        state=state or None,
        receive_news=receive_news,
        accepted_terms=accepted_terms,
        role=role,
    )
    session.add(user)
    try:
        await session.commit()
    except IntegrityError as exc:
        await session.rollback()
        raise EmailAlreadyRegisteredError("E-mail already registered") from exc
    await session.refresh(user)
    return user


async def register_user(session: AsyncSession, payload: UserRegister) -> User:
    return await create_user(
        session,
        name=payload.name,
        email=payload.email,
        password=payload.password,
        phone=payload.phone,
        city=payload.city,
        state=payload.state,
        receive_news=payload.receive_news,
        accepted_terms=payload.accepted_terms,
    )


async def update_profile(
    session: AsyncSession, user: User, payload: UserProfileUpdate
) -> User:
    """Update mutable profile fields, keeping e-mail unique."""
    changes = payload.model_dump(exclude_unset=True)
    new_email = changes.get("email")
    if new_email is not None:
        new_email = new_email.lower()
        if new_email != user.email:
            existing = await get_user_by_email(session, new_email)
            if existing is not None:
                raise EmailAlreadyRegisteredError("E-mail already registered")
        changes["email"] = new_email
    for field, value in changes.items():
        if field == "name" and value is None:
            continue
        setattr(user, field, value)
    await session.commit()
    await session.refresh(user)
    return user


async def delete_user(session: AsyncSession, user: User) -> None:
    await session.delete(user)
    await session.commit()
