"""Schemas for accommodations, rooms, blocked dates and availability."""
from __future__ import annotations

import uuid
from datetime import date, datetime

from pydantic import Field, field_validator

from romeiro.models.accommodation import AccommodationType
from romeiro.schemas.base import ApiModel, reject_null

_TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class AccommodationBase(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    type: AccommodationType = AccommodationType.POUSADA
    description: str | None = None
    address: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    phone: str | None = None
    whatsapp: str | None = None
    email: str | None = None
    website: str | None = None
    check_in_time: str | None = Field(default=None, pattern=_TIME_PATTERN)
    check_out_time: str | None = Field(default=None, pattern=_TIME_PATTERN)
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    cover_image: str | None = None
    featured: bool = False
    published: bool = True


class AccommodationCreate(AccommodationBase):
    """Payload to create an accommodation."""


class AccommodationUpdate(ApiModel):
    """Mutable accommodation fields."""

    name: str | None = Field(default=None, min_length=2, max_length=200)
    type: AccommodationType | None = None
    description: str | None = None
    address: str | None = None
    neighborhood: str | None = None
    city: str | None = None
    latitude: float | None = Field(default=None, ge=-90, le=90)
    longitude: float | None = Field(default=None, ge=-180, le=180)
    phone: str | None = None
    whatsapp: str | None = None
    email: str | None = None
    website: str | None = None
    check_in_time: str | None = Field(default=None, pattern=_TIME_PATTERN)
    check_out_time: str | None = Field(default=None, pattern=_TIME_PATTERN)
    amenities: list[str] | None = None
    images: list[str] | None = None
    cover_image: str | None = None
    featured: bool | None = None
    published: bool | None = None

    check_not_null = field_validator(
        "name", "type", "amenities", "images", "featured", "published"
    )(reject_null)


class AccommodationRead(AccommodationBase):
    id: uuid.UUID
    rating: str | None = None
    reviews_count: int = 0
    created_at: datetime
    updated_at: datetime


class RoomBase(ApiModel):
    name: str = Field(min_length=1, max_length=160)
    description: str | None = None
    max_guests: int = Field(default=2, ge=1)
    beds: str | None = None
    price_per_night: int = Field(ge=0, description="Nightly price in cents")
    quantity: int = Field(default=1, ge=1)
    amenities: list[str] = Field(default_factory=list)
    images: list[str] = Field(default_factory=list)
    published: bool = True


class RoomCreate(RoomBase):
    """Payload to create a room type under an accommodation."""


class RoomUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=1, max_length=160)
    description: str | None = None
    max_guests: int | None = Field(default=None, ge=1)
    beds: str | None = None
    price_per_night: int | None = Field(default=None, ge=0)
    quantity: int | None = Field(default=None, ge=1)
    amenities: list[str] | None = None
    images: list[str] | None = None
    published: bool | None = None

    check_not_null = field_validator(
        "name",
        "max_guests",
        "price_per_night",
        "quantity",
        "amenities",
        "images",
        "published",
    )(reject_null)


class RoomRead(RoomBase):
    id: uuid.UUID
    accommodation_id: uuid.UUID
    created_at: datetime


class AccommodationDetail(AccommodationRead):
    rooms: list[RoomRead] = Field(default_factory=list)


class RoomBlockedDateCreate(ApiModel):
    date: date
    booked_quantity: int = Field(default=1, ge=1)
    reason: str | None = Field(default=None, max_length=255)


class RoomBlockedDateRead(ApiModel):
    id: uuid.UUID
    room_id: uuid.UUID
    date: str
    booked_quantity: int
    reason: str | None = None
    created_at: datetime


class BasicAccommodationBase(ApiModel):
    name: str = Field(min_length=2, max_length=200)
    type: AccommodationType = AccommodationType.POUSADA
    phone: str | None = None
    whatsapp: str | None = None
    address: str | None = None
    city: str | None = None
    published: bool = True


class BasicAccommodationCreate(BasicAccommodationBase):
    """Payload for a contact-only directory listing."""


class BasicAccommodationUpdate(ApiModel):
    name: str | None = Field(default=None, min_length=2, max_length=200)
    type: AccommodationType | None = None
    phone: str | None = None
    whatsapp: str | None = None
    address: str | None = None
    city: str | None = None
    published: bool | None = None

    check_not_null = field_validator("name", "type", "published")(reject_null)


class BasicAccommodationRead(BasicAccommodationBase):
    id: uuid.UUID


class AccommodationWithRooms(AccommodationRead):
    """Search hit: a listing and the room types free for the whole stay."""

    available_rooms: list[RoomRead]


class AccommodationSearchResponse(ApiModel):
    accommodations: list[AccommodationWithRooms]
    basic_accommodations: list[BasicAccommodationRead]
    check_in: date
    check_out: date


class AccommodationAvailabilityResponse(ApiModel):
    accommodation: AccommodationRead
    available_rooms: list[RoomRead]
    check_in: date
    check_out: date
