"""Business directory management."""
from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.models.business import Business
from romeiro.schemas.business import BusinessCreate, BusinessUpdate


async def list_businesses(
    session: AsyncSession,
    *,
    published_only: bool = True,
    category: str | None = None,
) -> list[Business]:
    """Return businesses, featured first."""
    stmt = select(Business).order_by(Business.featured.desc(), Business.name)
    if published_only:
        stmt = stmt.where(Business.published.is_(True))
    if category:
        stmt = stmt.where(Business.category == category)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_business(
    session: AsyncSession, business_id: uuid.UUID, *, published_only: bool = False
) -> Business | None:
    business = await session.get(Business, business_id)
    if business is None or (published_only and not business.published):
        return None
    return business


async def create_business(session: AsyncSession, payload: BusinessCreate) -> Business:
    business = Business(**payload.model_dump())
    session.add(business)
    await session.commit()
    await session.refresh(business)
    return business


async def update_business(
    session: AsyncSession, business: Business, payload: BusinessUpdate
) -> Business:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(business, field, value)
    await session.commit()
    await session.refresh(business)
    return business


async def delete_business(session: AsyncSession, business: Business) -> None:
    await session.delete(business)
    await session.commit()
