"""Review persistence and rating aggregation for businesses and accommodations.

The parent's ``rating`` is the mean of the counted reviews rounded half-up to
one decimal and stored as text; the count goes to ``reviews`` (businesses) or
``reviews_count`` (accommodations). Only approved accommodation reviews are
counted. The review write and the recompute are committed together.
"""

from __future__ import annotations

import uuid
from collections.abc import Sequence
from decimal import ROUND_HALF_UP, Decimal

from sqlalchemy import Select, select
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.core.config import get_settings
from romeiro.models.accommodation import Accommodation, AccommodationReview
from romeiro.models.business import Business, BusinessReview
from romeiro.models.user import User

_ONE_DECIMAL = Decimal("0.1")


def average_rating(ratings: Sequence[int]) -> str | None:
    """Mean of ``ratings`` rounded half-up to one decimal, or ``None`` if empty."""
    if not ratings:
        return None
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return str(mean.quantize(_ONE_DECIMAL, rounding=ROUND_HALF_UP))


async def _summarise(
    session: AsyncSession, stmt: Select[tuple[int]]
) -> tuple[str | None, int]:
    ratings = [int(value) for value in (await session.execute(stmt)).scalars().all()]
    return average_rating(ratings), len(ratings)


async def refresh_business_rating(session: AsyncSession, business: Business) -> None:
    """Recompute a business rating from all its reviews (no commit)."""
    await session.flush()
    business.rating, business.reviews = await _summarise(
        session,
        select(BusinessReview.rating).where(BusinessReview.business_id == business.id),
    )


async def refresh_accommodation_rating(
    session: AsyncSession, accommodation: Accommodation
) -> None:
    """Recompute an accommodation rating from its approved reviews (no commit)."""
    await session.flush()
    accommodation.rating, accommodation.reviews_count = await _summarise(
        session,
        select(AccommodationReview.rating).where(
            AccommodationReview.accommodation_id == accommodation.id,
            AccommodationReview.approved.is_(True),
        ),
    )


def _author_name(author_name: str | None, user: User | None) -> str:
    if author_name:
        return author_name
    if user is not None:
        return user.name
    return "Romeiro"


# Businesses


async def list_business_reviews(
    session: AsyncSession, business_id: uuid.UUID
) -> list[BusinessReview]:
    result = await session.execute(
        select(BusinessReview)
        .where(BusinessReview.business_id == business_id)
        .order_by(BusinessReview.created_at.desc())
    )
    return list(result.scalars().all())


async def create_business_review(
    session: AsyncSession,
    *,
    business_id: uuid.UUID,
    rating: int,
    comment: str | None,
    author_name: str | None = None,
    user: User | None = None,
) -> BusinessReview:
    """Add a review to a published business and refresh its rating."""
    business = await session.get(Business, business_id)
    if business is None or not business.published:
        raise LookupError("Business not found")
    review = BusinessReview(
        business_id=business.id,
        user_id=user.id if user is not None else None,
        author_name=_author_name(author_name, user),
        rating=rating,
        comment=comment,
    )
    session.add(review)
    await refresh_business_rating(session, business)
    await session.commit()
    await session.refresh(review)
    return review


async def delete_business_review(
    session: AsyncSession, *, business_id: uuid.UUID, review_id: uuid.UUID
) -> None:
    review = await session.get(BusinessReview, review_id)
    if review is None or review.business_id != business_id:
        raise LookupError("Review not found")
    business = await session.get(Business, review.business_id)
    await session.delete(review)
    if business is not None:
        await refresh_business_rating(session, business)
    await session.commit()


# Accommodations


async def list_accommodation_reviews(
    session: AsyncSession,
    accommodation_id: uuid.UUID,
    *,
    approved_only: bool = True,
) -> list[AccommodationReview]:
    stmt = (
        select(AccommodationReview)
        .where(AccommodationReview.accommodation_id == accommodation_id)
        .order_by(AccommodationReview.created_at.desc())
    )
    if approved_only:
        stmt = stmt.where(AccommodationReview.approved.is_(True))
    result = await session.execute(stmt)
    return list(result.scalars().all())


async def create_accommodation_review(
    session: AsyncSession,
    *,
    accommodation_id: uuid.UUID,
    rating: int,
    comment: str | None,
    author_name: str | None = None,
    user: User | None = None,
) -> AccommodationReview:
    """Add a review to a published accommodation and refresh its rating.

    Reviews start approved unless moderation is switched on with
    ``REVIEWS_REQUIRE_APPROVAL``.
    """
    accommodation = await session.get(Accommodation, accommodation_id)
    if accommodation is None or not accommodation.published:
        raise LookupError("Accommodation not found")
    review = AccommodationReview(
        accommodation_id=accommodation.id,
        user_id=user.id if user is not None else None,
        author_name=_author_name(author_name, user),
        rating=rating,
        comment=comment,
        approved=not get_settings().reviews_require_approval,
    )
    session.add(review)
    await refresh_accommodation_rating(session, accommodation)
    await session.commit()
    await session.refresh(review)
    return review


async def set_accommodation_review_approval(
    session: AsyncSession,
    *,
    accommodation_id: uuid.UUID,
    review_id: uuid.UUID,
    approved: bool,
) -> AccommodationReview:
    review = await session.get(AccommodationReview, review_id)
    if review is None or review.accommodation_id != accommodation_id:
        raise LookupError("Review not found")
    review.approved = approved
    accommodation = await session.get(Accommodation, accommodation_id)
    if accommodation is not None:
        await refresh_accommodation_rating(session, accommodation)
    await session.commit()
    await session.refresh(review)
    return review


async def delete_accommodation_review(
    session: AsyncSession, *, accommodation_id: uuid.UUID, review_id: uuid.UUID
) -> None:
    review = await session.get(AccommodationReview, review_id)
    if review is None or review.accommodation_id != accommodation_id:
        raise LookupError("Review not found")
    accommodation = await session.get(Accommodation, accommodation_id)
    await session.delete(review)
    if accommodation is not None:
        await refresh_accommodation_rating(session, accommodation)
    await session.commit()

