"""Rating aggregation for businesses and accommodations."""

from __future__ import annotations

import pytest

from romeiro.core.config import get_settings
from romeiro.db.session import get_sessionmaker
from romeiro.models import Accommodation, Business, User, UserRole
from romeiro.services import review_service

pytestmark = pytest.mark.asyncio


@pytest.mark.parametrize(
    ("ratings", "expected"),
    [
        ([], None),
        ([5], "5.0"),
        ([4, 5], "4.5"),
        ([5, 4, 4], "4.3"),
        ([1, 2], "1.5"),
        ([3, 4, 4, 4, 4, 4, 4, 4], "3.9"),
        ([4, 4, 4, 5], "4.3"),
    ],
)
async def test_average_rating_rounds_half_up(ratings, expected) -> None:
    assert review_service.average_rating(ratings) == expected


async def test_business_rating_follows_reviews(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        business = Business(name="Restaurante da Mae Rosa", category="restaurante")
        session.add(business)
        await session.commit()

        first = await review_service.create_business_review(
            session, business_id=business.id, rating=5, comment="Otimo"
        )
        await review_service.create_business_review(
            session, business_id=business.id, rating=4, comment=None
        )
        await session.refresh(business)
        assert business.rating == "4.5"
        assert business.reviews == 2
        assert first.author_name == "Romeiro"

        await review_service.delete_business_review(
            session, business_id=business.id, review_id=first.id
        )
        await session.refresh(business)
        assert business.rating == "4.0"
        assert business.reviews == 1


async def test_deleting_last_review_clears_rating(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        business = Business(name="Farmacia Central", category="farmacia")
        session.add(business)
        await session.commit()

        review = await review_service.create_business_review(
            session, business_id=business.id, rating=3, comment=None
        )
        await review_service.delete_business_review(
            session, business_id=business.id, review_id=review.id
        )
        await session.refresh(business)
        assert business.rating is None
        assert business.reviews == 0


async def test_review_uses_user_name_when_author_missing(
    reset_database, db_url: str
) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        user = User(
            name="Cicero Romao",
            email="cicero@example.com",
            hashed_password="x",
            role=UserRole.PILGRIM,
        )
        accommodation = Accommodation(name="Pousada Padre Cicero")
        session.add_all([user, accommodation])
        await session.commit()

        review = await review_service.create_accommodation_review(
            session, accommodation_id=accommodation.id, rating=5, comment=None, user=user
        )
        assert review.author_name == "Cicero Romao"
        assert review.user_id == user.id


async def test_unpublished_targets_cannot_be_reviewed(reset_database, db_url: str) -> None:
    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        business = Business(name="Oculto", category="loja", published=False)
        accommodation = Accommodation(name="Oculta", published=False)
        session.add_all([business, accommodation])
        await session.commit()

        with pytest.raises(LookupError):
            await review_service.create_business_review(
                session, business_id=business.id, rating=5, comment=None
            )
        with pytest.raises(LookupError):
            await review_service.create_accommodation_review(
                session, accommodation_id=accommodation.id, rating=5, comment=None
            )


async def test_only_approved_accommodation_reviews_count(
    reset_database, db_url: str, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("REVIEWS_REQUIRE_APPROVAL", "true")
    get_settings.cache_clear()

    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        accommodation = Accommodation(name="Hotel Moderado")
        session.add(accommodation)
        await session.commit()

        pending = await review_service.create_accommodation_review(
            session, accommodation_id=accommodation.id, rating=2, comment="Fraco"
        )
        assert pending.approved is False
        await session.refresh(accommodation)
        assert accommodation.rating is None
        assert accommodation.reviews_count == 0

        await review_service.set_accommodation_review_approval(
            session,
            accommodation_id=accommodation.id,
            review_id=pending.id,
            approved=True,
        )
        await session.refresh(accommodation)
        assert accommodation.rating == "2.0"
        assert accommodation.reviews_count == 1

        listed = await review_service.list_accommodation_reviews(session, accommodation.id)
        assert [item.id for item in listed] == [pending.id]

        await review_service.set_accommodation_review_approval(
            session,
            accommodation_id=accommodation.id,
            review_id=pending.id,
            approved=False,
        )
        await session.refresh(accommodation)
        assert accommodation.rating is None
        assert await review_service.list_accommodation_reviews(session, accommodation.id) == []
