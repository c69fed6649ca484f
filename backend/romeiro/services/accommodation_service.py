"""Accommodation, room and blocked-date management."""
from __future__ import annotations

import uuid
from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from romeiro.models.accommodation import (
    Accommodation,
    BasicAccommodation,
    Room,
    RoomBlockedDate,
)
from romeiro.schemas.accommodation import (
    AccommodationCreate,
    AccommodationUpdate,
    BasicAccommodationCreate,
    BasicAccommodationUpdate,
    RoomBlockedDateCreate,
    RoomCreate,
    RoomUpdate,
)
from romeiro.services.availability_service import format_stay_date


async def list_accommodations(
    session: AsyncSession, *, published_only: bool = True
) -> list[Accommodation]:
    stmt = select(Accommodation).order_by(
        Accommodation.featured.desc(), Accommodation.name
    )
    if published_only:
        stmt = stmt.where(Accommodation.published.is_(True))
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_accommodation(
    session: AsyncSession,
    accommodation_id: uuid.UUID,
    *,
    published_only: bool = False,
) -> Accommodation | None:
    """Fetch an accommodation, optionally hiding unpublished ones."""
    accommodation = await session.get(Accommodation, accommodation_id)
    if accommodation is None:
        return None
    if published_only and not accommodation.published:
        return None
    return accommodation


async def get_accommodation_detail(
    session: AsyncSession, accommodation_id: uuid.UUID
) -> tuple[Accommodation, list[Room]] | None:
    """Return a published accommodation with its published rooms."""
    result = await session.execute(
        select(Accommodation)
        .options(selectinload(Accommodation.rooms))
        .where(Accommodation.id == accommodation_id, Accommodation.published.is_(True))
    )
    accommodation = result.scalar_one_or_none()
    if accommodation is None:
        return None
    return accommodation, [room for room in accommodation.rooms if room.published]


async def create_accommodation(
    session: AsyncSession, payload: AccommodationCreate
) -> Accommodation:
    accommodation = Accommodation(**payload.model_dump())
    session.add(accommodation)
    await session.commit()
    await session.refresh(accommodation)
    return accommodation


async def update_accommodation(
    session: AsyncSession, accommodation: Accommodation, payload: AccommodationUpdate
) -> Accommodation:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(accommodation, field, value)
    await session.commit()
    await session.refresh(accommodation)
    return accommodation


async def delete_accommodation(
    session: AsyncSession, accommodation: Accommodation
) -> None:
    """Remove an accommodation together with its rooms, ledger and reviews."""
    await session.delete(accommodation)
    await session.commit()


# Rooms


async def list_rooms(
    session: AsyncSession, accommodation_id: uuid.UUID
) -> list[Room]:
    result = await session.execute(
        select(Room)
        .where(Room.accommodation_id == accommodation_id)
        .order_by(Room.price_per_night, Room.name)
    )
    return list(result.scalars().all())


async def get_room(session: AsyncSession, room_id: uuid.UUID) -> Room | None:
    return await session.get(Room, room_id)


async def create_room(
    session: AsyncSession, *, accommodation_id: uuid.UUID, payload: RoomCreate
) -> Room:
    if await session.get(Accommodation, accommodation_id) is None:
        raise LookupError("Accommodation not found")
    room = Room(accommodation_id=accommodation_id, **payload.model_dump())
    session.add(room)
    await session.commit()
    await session.refresh(room)
    return room


async def update_room(session: AsyncSession, room: Room, payload: RoomUpdate) -> Room:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(room, field, value)
    await session.commit()
    await session.refresh(room)
    return room


async def delete_room(session: AsyncSession, room: Room) -> None:
    await session.delete(room)
    await session.commit()


# Blocked dates


async def list_blocked_dates(
    session: AsyncSession, room_id: uuid.UUID
) -> list[RoomBlockedDate]:
    result = await session.execute(
        select(RoomBlockedDate)
        .where(RoomBlockedDate.room_id == room_id)
        .order_by(RoomBlockedDate.date, RoomBlockedDate.created_at)
    )
    return list(result.scalars().all())


async def block_room_date(
    session: AsyncSession, *, room_id: uuid.UUID, payload: RoomBlockedDateCreate
) -> RoomBlockedDate:
    """Record consumption of room units on one day.

    Rows accumulate: blocking the same day twice consumes both quantities.
    """
    if await session.get(Room, room_id) is None:
        raise LookupError("Room not found")
    blocked = RoomBlockedDate(
        room_id=room_id,
        date=format_stay_date(payload.date),
        booked_quantity=payload.booked_quantity,
        reason=payload.reason,
    )
    session.add(blocked)
    await session.commit()
    await session.refresh(blocked)
    return blocked


async def unblock_room_date(
    session: AsyncSession, *, room_id: uuid.UUID, day: date
) -> int:
    """Delete every ledger row of the room on ``day``; return how many went."""
    result = await session.execute(
        delete(RoomBlockedDate).where(
            RoomBlockedDate.room_id == room_id,
            RoomBlockedDate.date == format_stay_date(day),
        )
    )
    await session.commit()
    return int(result.rowcount or 0)


# Basic listings


async def list_basic_accommodations(
    session: AsyncSession, *, published_only: bool = True
) -> list[BasicAccommodation]:
    stmt = select(BasicAccommodation).order_by(BasicAccommodation.name)
    if published_only:
        stmt = stmt.where(BasicAccommodation.published.is_(True))
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def get_basic_accommodation(
    session: AsyncSession, basic_id: uuid.UUID
) -> BasicAccommodation | None:
    return await session.get(BasicAccommodation, basic_id)


async def create_basic_accommodation(
    session: AsyncSession, payload: BasicAccommodationCreate
) -> BasicAccommodation:
    listing = BasicAccommodation(**payload.model_dump())
    session.add(listing)
    await session.commit()
    await session.refresh(listing)
    return listing


async def update_basic_accommodation(
    session: AsyncSession,
    listing: BasicAccommodation,
    payload: BasicAccommodationUpdate,
) -> BasicAccommodation:
    for field, value in payload.model_dump(exclude_unset=True).items():
        setattr(listing, field, value)
    await session.commit()
    await session.refresh(listing)
    return listing


async def delete_basic_accommodation(
    session: AsyncSession, listing: BasicAccommodation
) -> None:
    await session.delete(listing)
    await session.commit()
