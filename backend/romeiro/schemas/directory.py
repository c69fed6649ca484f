"""Schemas for the pilgrim guide directory."""
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import Field, field_validator, model_validator

from romeiro.schemas.base import ApiModel, reject_null


class UsefulPhoneCreate(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    description: str | None = Field(default=None, max_length=255)
    phone: str = Field(min_length=3, max_length=40)
    category: str | None = Field(default=None, max_length=80)
    icon: str | None = Field(default=None, max_length=60)
    is_emergency: bool = False
    display_order: int = 0
    published: bool = True


class UsefulPhoneUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=2, max_length=200)
    description: str | None = Field(default=None, max_length=255)
    phone: str | None = Field(default=None, min_length=3, max_length=40)
    category: str | None = Field(default=None, max_length=80)
    icon: str | None = Field(default=None, max_length=60)
    is_emergency: bool | None = None
    display_order: int | None = None
    published: bool | None = None

    check_not_null = field_validator(
        "name", "phone", "is_emergency", "display_order", "published"
    )(reject_null)


class UsefulPhoneRead(UsefulPhoneCreate):
    id: uuid.UUID
    created_at: datetime


class PilgrimTipCreate(ApiModel):
    title: str = Field(min_length=3, max_length=255)
    description: str = Field(min_length=1)
    category: str | None = Field(default=None, max_length=80)
    icon: str | None = Field(default=None, max_length=60)
    display_order: int = 0
    published: bool = True


class PilgrimTipUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=3, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    category: str | None = Field(default=None, max_length=80)
    icon: str | None = Field(default=None, max_length=60)
    display_order: int | None = None
    published: bool | None = None

    check_not_null = field_validator(
        "title", "description", "display_order", "published"
    )(reject_null)


class PilgrimTipRead(PilgrimTipCreate):
    id: uuid.UUID
    created_at: datetime


class PilgrimServiceCreate(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=60)
    phone: str | None = Field(default=None, max_length=40)
    address: str | None = Field(default=None, max_length=255)
    display_order: int = 0
    published: bool = True


class PilgrimServiceUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=2, max_length=200)
    description: str | None = None
    icon: str | None = Field(default=None, max_length=60)
    phone: str | None = Field(default=None, max_length=40)
    address: str | None = Field(default=None, max_length=255)
    display_order: int | None = None
    published: bool | None = None

    check_not_null = field_validator("name", "display_order", "published")(reject_null)


class PilgrimServiceRead(PilgrimServiceCreate):
    id: uuid.UUID
    created_at: datetime


class PartnerCreate(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    logo_url: str | None = Field(default=None, max_length=512)
    website: str | None = Field(default=None, max_length=512)
    display_order: int = 0
    published: bool = True


class PartnerUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=2, max_length=200)
    logo_url: str | None = Field(default=None, max_length=512)
    website: str | None = Field(default=None, max_length=512)
    display_order: int | None = None
    published: bool | None = None

    check_not_null = field_validator("name", "display_order", "published")(reject_null)


class PartnerRead(PartnerCreate):
    id: uuid.UUID
    created_at: datetime
    updated_at: datetime


class BannerCreate(ApiModel):
    title: str = Field(min_length=2, max_length=255)
    image_url: str | None = Field(default=None, max_length=512)
    link: str | None = Field(default=None, max_length=512)
    position: str = Field(default="home", min_length=1, max_length=40)
    display_order: int = 0
    published: bool = True
    start_date: date | None = None
    end_date: date | None = None

    @model_validator(mode="after")
    def _check_window(self) -> BannerCreate:
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("endDate must not be before startDate")
        return self


class BannerUpdate(ApiModel):
    title: str | None = Field(default=None, min_length=2, max_length=255)
    image_url: str | None = Field(default=None, max_length=512)
    link: str | None = Field(default=None, max_length=512)
    position: str | None = Field(default=None, min_length=1, max_length=40)
    display_order: int | None = None
    published: bool | None = None
    start_date: date | None = None
    end_date: date | None = None

    check_not_null = field_validator(
        "title", "position", "display_order", "published"
    )(reject_null)


class BannerRead(ApiModel):
    id: uuid.UUID
    title: str
    image_url: str | None = None
    link: str | None = None
    position: str
    display_order: int
    published: bool
    start_date: date | None = None
    end_date: date | None = None
    created_at: datetime
    updated_at: datetime
