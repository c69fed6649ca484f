"""Business directory schemas."""
from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import Field, field_validator

from romeiro.schemas.base import ApiModel, reject_null


class BusinessBase(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    category: str = Field(min_length=2, max_length=80)
    description: str | None = None
    short_description: str | None = Field(default=None, max_length=255)
    address: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    website: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    hours: str | None = None
    price_range: str | None = Field(default=None, max_length=16)
    logo_url: str | None = None
    cover_url: str | None = None
    gallery: list[str] = Field(default_factory=list)
    featured: bool = False
    published: bool = True


class BusinessCreate(BusinessBase):
    """Payload to create a business listing."""


class BusinessUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=2, max_length=200)
    category: str | None = Field(default=None, min_length=2, max_length=80)
    description: str | None = None
    short_description: str | None = Field(default=None, max_length=255)
    address: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    phone: str | None = None
    whatsapp: str | None = None
    website: str | None = None
    instagram: str | None = None
    facebook: str | None = None
    hours: str | None = None
    price_range: str | None = Field(default=None, max_length=16)
    logo_url: str | None = None
    cover_url: str | None = None
    gallery: list[str] | None = None
    featured: bool | None = None
    published: bool | None = None

    check_not_null = field_validator(
        "name", "category", "gallery", "featured", "published"
    )(reject_null)


class BusinessRead(BusinessBase):
    id: uuid.UUID
    rating: str | None = None
    reviews: int = 0
    created_at: datetime
    updated_at: datetime
