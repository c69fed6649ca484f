"""Room availability and accommodation search.

A room type has ``quantity`` identical units. Each :class:`RoomBlockedDate`
row consumes ``booked_quantity`` of them on one calendar day, and a day is
full once the summed consumption reaches ``quantity``. A stay covers the
nights ``[check_in, check_out)``; it is bookable only when none of those
nights is full.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Iterator
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.models.accommodation import (
    Accommodation,
    BasicAccommodation,
    Room,
    RoomBlockedDate,
)

logger = logging.getLogger(__name__)

DATE_FORMAT = "%Y-%m-%d"
_DATE_PATTERN = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")


@dataclass(slots=True)
class AccommodationAvailability:
    """An accommodation together with its rooms free for the whole stay."""

    accommodation: Accommodation
    available_rooms: list[Room]


@dataclass(slots=True)
class SearchResult:
    accommodations: list[AccommodationAvailability]
    basic_accommodations: list[BasicAccommodation]


def parse_stay_date(value: str) -> date:
    """Parse a strict ``YYYY-MM-DD`` string.

    Raises ``ValueError`` for anything else, including ``2024-8-1`` and ISO
    week or ordinal forms such as ``2024-W32-6``.
    """
    if not _DATE_PATTERN.fullmatch(value):
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD")
    try:
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError as exc:
        raise ValueError(f"Invalid date '{value}', expected YYYY-MM-DD") from exc


def format_stay_date(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def validate_stay(check_in: date, check_out: date) -> None:
    """Reject empty or inverted stays."""
    if check_in >= check_out:
        raise ValueError("checkOut must be after checkIn")


def iter_nights(check_in: date, check_out: date) -> Iterator[date]:
    """Yield every night of the half-open range ``[check_in, check_out)``."""
    current = check_in
    while current < check_out:
        yield current
        current += timedelta(days=1)


async def booked_units_by_day(
    session: AsyncSession,
    *,
    room_id: uuid.UUID,
    check_in: date,
    check_out: date,
) -> dict[str, int]:
    """Return summed ``booked_quantity`` per day for the room within the range."""
    result = await session.execute(
        select(RoomBlockedDate.date, func.sum(RoomBlockedDate.booked_quantity))
        .where(
            RoomBlockedDate.room_id == room_id,
            RoomBlockedDate.date >= format_stay_date(check_in),
            RoomBlockedDate.date < format_stay_date(check_out),
        )
        .group_by(RoomBlockedDate.date)
    )
    return {day: int(total or 0) for day, total in result.all()}


async def _room_is_free(
    session: AsyncSession, room: Room, check_in: date, check_out: date
) -> bool:
    capacity = room.quantity or 1
    booked = await booked_units_by_day(
        session, room_id=room.id, check_in=check_in, check_out=check_out
    )
    for night in iter_nights(check_in, check_out):
        if booked.get(format_stay_date(night), 0) >= capacity:
            return False
    return True


async def is_room_available(
    session: AsyncSession,
    room_id: uuid.UUID,
    check_in: date,
    check_out: date,
) -> bool:
    """Return whether a room has a free unit on every night of the stay.

    An unknown room is reported as unavailable. A zero-night stay is
    vacuously available; callers validate the range with
    :func:`validate_stay` first.
    """
    room = await session.get(Room, room_id)
    if room is None:
        return False
    return await _room_is_free(session, room, check_in, check_out)


async def available_rooms_for(
    session: AsyncSession,
    accommodation: Accommodation,
    check_in: date,
    check_out: date,
) -> list[Room]:
    """Return the published rooms free for the stay, cheapest first."""
    result = await session.execute(
        select(Room)
        .where(Room.accommodation_id == accommodation.id, Room.published.is_(True))
        .order_by(Room.price_per_night, Room.name)
    )
    rooms: list[Room] = []
    for room in result.scalars().all():
        if await _room_is_free(session, room, check_in, check_out):
            rooms.append(room)
    return rooms


async def search_available(
    session: AsyncSession, check_in: date, check_out: date
) -> SearchResult:
    """Find published accommodations with at least one room free for the stay.

    Accommodations without a free room are left out. Basic (contact-only)
    listings are returned regardless of the dates.
    """
    validate_stay(check_in, check_out)
    result = await session.execute(
        select(Accommodation)
        .where(Accommodation.published.is_(True))
        .order_by(Accommodation.featured.desc(), Accommodation.name)
    )
    matches: list[AccommodationAvailability] = []
    for accommodation in result.scalars().all():
        rooms = await available_rooms_for(session, accommodation, check_in, check_out)
        if rooms:
            matches.append(AccommodationAvailability(accommodation, rooms))

    basic_result = await session.execute(
        select(BasicAccommodation)
        .where(BasicAccommodation.published.is_(True))
        .order_by(BasicAccommodation.name)
    )
    logger.debug(
        "Search %s..%s matched %d accommodations",
        check_in,
        check_out,
        len(matches),
    )
    return SearchResult(
        accommodations=matches,
        basic_accommodations=list(basic_result.scalars().all()),
    )


async def accommodation_availability(
    session: AsyncSession,
    accommodation_id: uuid.UUID,
    check_in: date,
    check_out: date,
) -> AccommodationAvailability:
    """Return one published accommodation and its rooms free for the stay.

    Raises ``LookupError`` when the accommodation is missing or unpublished.
    """
    validate_stay(check_in, check_out)
    accommodation = await session.get(Accommodation, accommodation_id)
    if accommodation is None or not accommodation.published:
        raise LookupError("Accommodation not found")
    rooms = await available_rooms_for(session, accommodation, check_in, check_out)
    return AccommodationAvailability(accommodation, rooms)
