"""Seed a few demo accommodations with rooms for local development."""
from __future__ import annotations

import asyncio

from sqlalchemy import select

from romeiro.db.session import get_sessionmaker
from romeiro.models.accommodation import (
    Accommodation,
    AccommodationType,
    BasicAccommodation,
    Room,
)

DEMO_ACCOMMODATIONS = [
    {
        "name": "Pousada Santuario",
        "type": AccommodationType.POUSADA,
        "city": "Juazeiro do Norte",
        "featured": True,
        "rooms": [
            {"name": "Quarto Casal", "max_guests": 2, "price_per_night": 15000, "quantity": 4},
            {"name": "Quarto Familia", "max_guests": 5, "price_per_night": 28000, "quantity": 2},
        ],
    },
    {
        "name": "Hotel Colina do Horto",
        "type": AccommodationType.HOTEL,
        "city": "Juazeiro do Norte",
        "featured": False,
        "rooms": [
            {"name": "Standard", "max_guests": 2, "price_per_night": 22000, "quantity": 10},
            {"name": "Suite", "max_guests": 3, "price_per_night": 39000, "quantity": 1},
        ],
    },
]

DEMO_BASIC = [
    {"name": "Casa de Romeiros Sao Francisco", "phone": "(88) 3511-0000"},
]


async def seed_demo() -> None:
    sessionmaker = get_sessionmaker()
    async with sessionmaker() as session:
        created = 0
        for entry in DEMO_ACCOMMODATIONS:
            existing = await session.execute(
                select(Accommodation).where(Accommodation.name == entry["name"])
            )
            if existing.scalar_one_or_none() is not None:
                continue
            accommodation = Accommodation(
                name=entry["name"],
                type=entry["type"],
                city=entry["city"],
                featured=entry["featured"],
                rooms=[Room(**room) for room in entry["rooms"]],
            )
            session.add(accommodation)
            created += 1
        for entry in DEMO_BASIC:
            existing = await session.execute(
                select(BasicAccommodation).where(BasicAccommodation.name == entry["name"])
            )
            if existing.scalar_one_or_none() is None:
                session.add(BasicAccommodation(**entry))
                created += 1
        if created:
            await session.commit()
        print(f"Seeded {created} listing(s).")


def main() -> None:
    asyncio.run(seed_demo())


if __name__ == "__main__":
    main()
