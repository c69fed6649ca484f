"""Availability rules for room types with several units."""

from __future__ import annotations

import uuid
from datetime import date

import pytest

from romeiro.db.session import get_sessionmaker
from romeiro.models import Accommodation, BasicAccommodation, Room, RoomBlockedDate
from romeiro.services import availability_service

pytestmark = pytest.mark.asyncio


async def _seed(
    session, *, quantity: int = 2, published: bool = True
) -> tuple[Accommodation, Room]:
    accommodation = Accommodation(name="Pousada do Horto", published=published)
    session.add(accommodation)
    await session.flush()
    room = Room(
        accommodation_id=accommodation.id,
        name="Quarto Casal",
        price_per_night=12000,
        quantity=quantity,
    )
    session.add(room)
    await session.commit()
    return accommodation, room


def _block(room: Room, day: str, booked: int = 1) -> RoomBlockedDate:
    return RoomBlockedDate(room_id=room.id, date=day, booked_quantity=booked)


async def test_partial_booking_leaves_room_available(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        _, room = await _seed(session, quantity=2)
        session.add(_block(room, "2024-08-01"))
        await session.commit()

        assert await availability_service.is_room_available(
            session, room.id, date(2024, 8, 1), date(2024, 8, 3)
        )


async def test_accumulated_rows_fill_the_day(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        _, room = await _seed(session, quantity=2)
        session.add_all([_block(room, "2024-08-01"), _block(room, "2024-08-01")])
        await session.commit()

        assert not await availability_service.is_room_available(
            session, room.id, date(2024, 8, 1), date(2024, 8, 3)
        )
        # the full night is the checkout day of this stay, so it does not count
        assert await availability_service.is_room_available(
            session, room.id, date(2024, 7, 30), date(2024, 8, 1)
        )


async def test_overbooked_day_still_counts_as_full(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        _, room = await _seed(session, quantity=1)
        session.add(_block(room, "2024-08-02", booked=3))
        await session.commit()

        assert not await availability_service.is_room_available(
            session, room.id, date(2024, 8, 1), date(2024, 8, 5)
        )


async def test_unknown_room_is_unavailable(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        assert not await availability_service.is_room_available(
            session, uuid.uuid4(), date(2024, 8, 1), date(2024, 8, 2)
        )


async def test_booked_units_by_day_sums_within_range(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        _, room = await _seed(session, quantity=5)
        session.add_all(
            [
                _block(room, "2024-08-01", booked=2),
                _block(room, "2024-08-01", booked=1),
                _block(room, "2024-08-02"),
                _block(room, "2024-08-03"),
            ]
        )
        await session.commit()

        booked = await availability_service.booked_units_by_day(
            session, room_id=room.id, check_in=date(2024, 8, 1), check_out=date(2024, 8, 3)
        )
        assert booked == {"2024-08-01": 3, "2024-08-02": 1}


async def test_search_excludes_full_and_unpublished(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        open_acc, _ = await _seed(session, quantity=1)
        full_acc, full_room = await _seed(session, quantity=1)
        full_acc.name = "Hotel Lotado"
        await _seed(session, quantity=1, published=False)
        session.add(_block(full_room, "2024-08-01"))
        session.add(BasicAccommodation(name="Casa de Romeiros"))
        session.add(BasicAccommodation(name="Rancho Oculto", published=False))
        await session.commit()

        result = await availability_service.search_available(
            session, date(2024, 8, 1), date(2024, 8, 2)
        )

    assert [item.accommodation.id for item in result.accommodations] == [open_acc.id]
    assert [item.name for item in result.basic_accommodations] == ["Casa de Romeiros"]


async def test_unpublished_rooms_are_never_offered(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        accommodation, room = await _seed(session, quantity=3)
        room.published = False
        await session.commit()

        result = await availability_service.accommodation_availability(
            session, accommodation.id, date(2024, 8, 1), date(2024, 8, 2)
        )
        assert result.available_rooms == []


async def test_availability_of_unpublished_accommodation_is_lookup_error(
    reset_database, db_url: str
) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        accommodation, _ = await _seed(session, published=False)
        with pytest.raises(LookupError):
            await availability_service.accommodation_availability(
                session, accommodation.id, date(2024, 8, 1), date(2024, 8, 2)
            )


async def test_two_unit_room_example(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        _, room = await _seed(session, quantity=2)
        session.add_all([_block(room, "2024-08-10", booked=2), _block(room, "2024-08-11")])
        await session.commit()

        assert not await availability_service.is_room_available(
            session, room.id, date(2024, 8, 9), date(2024, 8, 11)
        )
        assert await availability_service.is_room_available(
            session, room.id, date(2024, 8, 11), date(2024, 8, 12)
        )
