"""Editorial content, guide directory and settings management.

News, videos, attractions and the directory entries (useful phones, tips,
services, partners, banners) share the same publish-flag CRUD shape, so the
helpers here are generic over the model class.
"""
from __future__ import annotations

import uuid
from datetime import UTC, date, datetime
from typing import TypeVar

from pydantic import BaseModel
from sqlalchemy import func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.models import (
    Accommodation,
    AppSetting,
    Attraction,
    Banner,
    Business,
    News,
    Partner,
    PilgrimService,
    PilgrimTip,
    UsefulPhone,
    User,
    Video,
)

ContentModel = TypeVar(
    "ContentModel",
    News,
    Video,
    Attraction,
    UsefulPhone,
    PilgrimTip,
    PilgrimService,
    Partner,
    Banner,
)

_ORDERING = {
    News: (News.published_at.desc(), News.created_at.desc()),
    Video: (Video.created_at.desc(),),
    Attraction: (Attraction.featured.desc(), Attraction.name),
    UsefulPhone: (
        UsefulPhone.is_emergency.desc(),
        UsefulPhone.display_order,
        UsefulPhone.name,
    ),
    PilgrimTip: (PilgrimTip.display_order, PilgrimTip.title),
    PilgrimService: (PilgrimService.display_order, PilgrimService.name),
    Partner: (Partner.display_order, Partner.name),
    Banner: (Banner.display_order, Banner.created_at.desc()),
}


async def list_items(
    session: AsyncSession,
    model: type[ContentModel],
    *,
    published_only: bool = True,
    category: str | None = None,
    skip: int = 0,
    limit: int = 50,
) -> list[ContentModel]:
    stmt = select(model).order_by(*_ORDERING[model]).offset(skip).limit(limit)
    if published_only:
        stmt = stmt.where(model.published.is_(True))
    if category:
        stmt = stmt.where(model.category == category)
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_item(
    session: AsyncSession,
    model: type[ContentModel],
    item_id: uuid.UUID,
    *,
    published_only: bool = False,
) -> ContentModel | None:
    item = await session.get(model, item_id)
    if item is None or (published_only and not item.published):
        return None
    return item


def _stamp_publication(item: object) -> None:
    # News keeps the first moment it went live
    if isinstance(item, News) and item.published and item.published_at is None:
        item.published_at = datetime.now(UTC)


async def create_item(
    session: AsyncSession, model: type[ContentModel], payload: BaseModel
) -> ContentModel:
    item = model(**payload.model_dump())
    _stamp_publication(item)
    session.add(item)
    await session.commit()
    await session.refresh(item)
    return item


async def update_item(
    session: AsyncSession, item: ContentModel, payload: BaseModel
) -> ContentModel:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(item, field, value)
    _stamp_publication(item)
    await session.commit()
    await session.refresh(item)
    return item


async def delete_item(session: AsyncSession, item: object) -> None:
    await session.delete(item)
    await session.commit()


async def list_active_banners(
    session: AsyncSession, *, position: str | None = None, today: date | None = None
) -> list[Banner]:
    """Published banners whose optional ``[start_date, end_date]`` window covers today."""
    today = today or datetime.now(UTC).date()
    stmt = (
        select(Banner)
        .where(
            Banner.published.is_(True),
            or_(Banner.start_date.is_(None), Banner.start_date <= today),
            or_(Banner.end_date.is_(None), Banner.end_date >= today),
        )
        .order_by(*_ORDERING[Banner])
    )
    if position:
        stmt = stmt.where(Banner.position == position)
    result = await session.execute(stmt)
    return list(result.scalars().all())


# Settings


async def list_settings(session: AsyncSession) -> list[AppSetting]:
    result = await session.execute(select(AppSetting).order_by(AppSetting.key))
    return list(result.scalars().all())


async def get_setting(session: AsyncSession, key: str) -> AppSetting | None:
    return await session.get(AppSetting, key)


async def upsert_settings(
    session: AsyncSession, values: dict[str, str | None]
) -> list[AppSetting]:
    for key, value in values.items():
        setting = await session.get(AppSetting, key)
        if setting is None:
            session.add(AppSetting(key=key, value=value))
        else:
            setting.value = value
    await session.commit()
    return await list_settings(session)


# Dashboard


async def _count(session: AsyncSession, model: type) -> int:
    return int((await session.execute(select(func.count()).select_from(model))).scalar_one())


async def admin_stats(session: AsyncSession) -> dict[str, int]:
    return {
        "users": await _count(session, User),
        "news": await _count(session, News),
        "videos": await _count(session, Video),
        "accommodations": await _count(session, Accommodation),
        "businesses": await _count(session, Business),
    }
