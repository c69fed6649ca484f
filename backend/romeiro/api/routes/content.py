"""Published editorial content: news, videos and attractions."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, Query, status

from romeiro.api.deps import SessionDep
from romeiro.models.content import Attraction, News, Video
from romeiro.schemas.content import AttractionRead, NewsRead, VideoRead
from romeiro.services import content_service

router = APIRouter()


def _not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")


@router.get("/news", response_model=list[NewsRead], tags=["news"])
async def list_news(
    session: SessionDep,
    category: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> list[NewsRead]:
    items = await content_service.list_items(
        session, News, category=category, skip=skip, limit=limit
    )
    return [NewsRead.model_validate(item) for item in items]


@router.get("/news/{news_id}", response_model=NewsRead, tags=["news"])
async def get_news(news_id: uuid.UUID, session: SessionDep) -> NewsRead:
    item = await content_service.get_item(session, News, news_id, published_only=True)
    if item is None:
        raise _not_found("News")
    return NewsRead.model_validate(item)


@router.get("/videos", response_model=list[VideoRead], tags=["videos"])
async def list_videos(
    session: SessionDep,
    category: str | None = None,
    skip: int = Query(0, ge=0),
    limit: int = Query(50, ge=1, le=200),
) -> list[VideoRead]:
    items = await content_service.list_items(
        session, Video, category=category, skip=skip, limit=limit
    )
    return [VideoRead.model_validate(item) for item in items]


@router.get("/videos/{video_id}", response_model=VideoRead, tags=["videos"])
async def get_video(video_id: uuid.UUID, session: SessionDep) -> VideoRead:
    item = await content_service.get_item(session, Video, video_id, published_only=True)
    if item is None:
        raise _not_found("Video")
    return VideoRead.model_validate(item)


@router.get("/attractions", response_model=list[AttractionRead], tags=["attractions"])
async def list_attractions(
    session: SessionDep, category: str | None = None
) -> list[AttractionRead]:
    items = await content_service.list_items(
        session, Attraction, category=category, limit=500
    )
    return [AttractionRead.model_validate(item) for item in items]


@router.get(
    "/attractions/{attraction_id}", response_model=AttractionRead, tags=["attractions"]
)
async def get_attraction(attraction_id: uuid.UUID, session: SessionDep) -> AttractionRead:
    item = await content_service.get_item(
        session, Attraction, attraction_id, published_only=True
    )
    if item is None:
        raise _not_found("Attraction")
    return AttractionRead.model_validate(item)
