"""Editorial content and settings schemas."""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field, field_validator

from romeiro.schemas.base import ApiModel, reject_null


class NewsCreate(ApiModel):
    title: str = Field(min_length=3, max_length=255)
    summary: str | None = Field(default=None, max_length=512)
    content: str = Field(min_length=1)
    category: str | None = None
    image_url: str | None = None
    author: str | None = None
    published: bool = False


class NewsUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=3, max_length=255)
    summary: str | None = Field(default=None, max_length=512)
    content: str | None = Field(default=None, min_length=1)
    category: str | None = None
    image_url: str | None = None
    author: str | None = None
    published: bool | None = None

    check_not_null = field_validator("title", "content", "published")(reject_null)


class NewsRead(NewsCreate):
    id: uuid.UUID
    published_at: datetime | None = None
    created_at: datetime
    updated_at: datetime


class VideoCreate(ApiModel):
    title: str = Field(min_length=3, max_length=255)
    description: str | None = None
    youtube_url: str = Field(min_length=8, max_length=512)
    thumbnail_url: str | None = None
    category: str | None = None
    duration: str | None = Field(default=None, max_length=16)
    published: bool = True


class VideoUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=3, max_length=255)
    description: str | None = None
    youtube_url: str | None = Field(default=None, min_length=8, max_length=512)
    thumbnail_url: str | None = None
    category: str | None = None
    duration: str | None = Field(default=None, max_length=16)
    published: bool | None = None

    check_not_null = field_validator("title", "youtube_url", "published")(reject_null)


class VideoRead(VideoCreate):
    id: uuid.UUID
    created_at: datetime


class AttractionCreate(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    description: str | None = None
    category: str | None = None
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    opening_hours: str | None = None
    image_url: str | None = None
    featured: bool = False
    published: bool = True


class AttractionUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=2, max_length=200)
    description: str | None = None
    category: str | None = None
    address: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    opening_hours: str | None = None
    image_url: str | None = None
    featured: bool | None = None
    published: bool | None = None

    check_not_null = field_validator("name", "featured", "published")(reject_null)


class AttractionRead(AttractionCreate):
    id: uuid.UUID
    created_at: datetime


class SettingRead(ApiModel):
    key: str
    value: str | None = None


class SettingsUpdate(ApiModel):
    """Batch of settings to upsert."""

    values: dict[str, str | None]


class AdminStats(ApiModel):
    users: int
    news: int
    videos: int
    accommodations: int
    businesses: int
