"""Accommodation inventory: listings, room types and their nightly ledger."""

from __future__ import annotations

import enum
import uuid

from sqlalchemy import (
    JSON,
    Boolean,
    CheckConstraint,
    Enum,
    Float,
    ForeignKey,
    Index,
    Integer,
    String,
    Text,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from romeiro.db.base import Base
from romeiro.models.mixins import TimestampMixin, UUIDPrimaryKeyMixin


class AccommodationType(str, enum.Enum):
    HOTEL = "hotel"
    POUSADA = "pousada"
    HOSTEL = "hostel"
    OTHER = "other"


class Accommodation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A lodging listing with bookable room types."""

    __tablename__ = "accommodations"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[AccommodationType] = mapped_column(
        Enum(AccommodationType), default=AccommodationType.POUSADA, nullable=False
    )
    description: Mapped[str | None] = mapped_column(Text)
    address: Mapped[str | None] = mapped_column(String(255))
    neighborhood: Mapped[str | None] = mapped_column(String(120))
    city: Mapped[str | None] = mapped_column(String(120))
    latitude: Mapped[float | None] = mapped_column(Float)
    longitude: Mapped[float | None] = mapped_column(Float)
    phone: Mapped[str | None] = mapped_column(String(32))
    whatsapp: Mapped[str | None] = mapped_column(String(32))
    email: Mapped[str | None] = mapped_column(String(320))
    website: Mapped[str | None] = mapped_column(String(255))
    check_in_time: Mapped[str | None] = mapped_column(String(5))
    check_out_time: Mapped[str | None] = mapped_column(String(5))
    amenities: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    cover_image: Mapped[str | None] = mapped_column(String(512))
    rating: Mapped[str | None] = mapped_column(String(8))
    reviews_count: Mapped[int] = mapped_column(Integer, default=0, nullable=False)
    featured: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    rooms: Mapped[list["Room"]] = relationship(
        "Room",
        back_populates="accommodation",
        cascade="all, delete-orphan",
        passive_deletes=True,
        order_by="Room.price_per_night",
    )
    reviews: Mapped[list["AccommodationReview"]] = relationship(
        "AccommodationReview",
        back_populates="accommodation",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class Room(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """A room type; ``quantity`` identical physical rooms share one ledger."""

    __tablename__ = "rooms"
    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_room_quantity_positive"),
        CheckConstraint("price_per_night >= 0", name="ck_room_price_non_negative"),
        Index("ix_rooms_accommodation", "accommodation_id"),
    )

    accommodation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"), nullable=False
    )
    name: Mapped[str] = mapped_column(String(160), nullable=False)
    description: Mapped[str | None] = mapped_column(Text)
    max_guests: Mapped[int] = mapped_column(Integer, default=2, nullable=False)
    beds: Mapped[str | None] = mapped_column(String(160))
    price_per_night: Mapped[int] = mapped_column(Integer, nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    amenities: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    images: Mapped[list[str]] = mapped_column(JSON, default=list, nullable=False)
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    accommodation: Mapped[Accommodation] = relationship(
        "Accommodation", back_populates="rooms"
    )
    blocked_dates: Mapped[list["RoomBlockedDate"]] = relationship(
        "RoomBlockedDate",
        back_populates="room",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )


class RoomBlockedDate(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Consumes ``booked_quantity`` units of a room type on one calendar day.

    Several rows may exist for the same ``(room_id, date)``; the day's
    consumption is their sum.
    """

    __tablename__ = "room_blocked_dates"
    __table_args__ = (
        CheckConstraint("booked_quantity >= 1", name="ck_blocked_quantity_positive"),
        Index("ix_room_blocked_dates_room_date", "room_id", "date"),
    )

    room_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("rooms.id", ondelete="CASCADE"), nullable=False
    )
    date: Mapped[str] = mapped_column(String(10), nullable=False)
    booked_quantity: Mapped[int] = mapped_column(Integer, default=1, nullable=False)
    reason: Mapped[str | None] = mapped_column(String(255))

    room: Mapped[Room] = relationship("Room", back_populates="blocked_dates")


class BasicAccommodation(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Free-tier, contact-only directory entry without bookable rooms."""

    __tablename__ = "basic_accommodations"

    name: Mapped[str] = mapped_column(String(200), nullable=False)
    type: Mapped[AccommodationType] = mapped_column(
        Enum(AccommodationType), default=AccommodationType.POUSADA, nullable=False
    )
    phone: Mapped[str | None] = mapped_column(String(32))
    whatsapp: Mapped[str | None] = mapped_column(String(32))
    address: Mapped[str | None] = mapped_column(String(255))
    city: Mapped[str | None] = mapped_column(String(120))
    published: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)


class AccommodationReview(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Guest review; only approved reviews count towards the rating."""

    __tablename__ = "accommodation_reviews"
    __table_args__ = (
        CheckConstraint("rating BETWEEN 1 AND 5", name="ck_accommodation_review_rating"),
        Index("ix_accommodation_reviews_accommodation", "accommodation_id"),
    )

    accommodation_id: Mapped[uuid.UUID] = mapped_column(
        ForeignKey("accommodations.id", ondelete="CASCADE"), nullable=False
    )
    user_id: Mapped[uuid.UUID | None] = mapped_column(
        ForeignKey("users.id", ondelete="SET NULL")
    )
    author_name: Mapped[str] = mapped_column(String(160), nullable=False)
    rating: Mapped[int] = mapped_column(Integer, nullable=False)
    comment: Mapped[str | None] = mapped_column(Text)
    approved: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    accommodation: Mapped[Accommodation] = relationship(
        "Accommodation", back_populates="reviews"
    )
