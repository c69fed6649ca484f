"""Public business directory endpoints."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, HTTPException, status

from romeiro.api.deps import HubDep, OptionalUser, SessionDep
from romeiro.api.rate_limit import DEFAULT_RATE_DEP
from romeiro.schemas.business import BusinessRead
from romeiro.schemas.review import BusinessReviewRead, ReviewCreate
from romeiro.services import business_service, review_service
from romeiro.services.updates_hub import UpdateType

router = APIRouter()


@router.get("", response_model=list[BusinessRead], summary="Published businesses")
async def list_businesses(
    session: SessionDep, category: str | None = None
) -> list[BusinessRead]:
    businesses = await business_service.list_businesses(session, category=category)
    return [BusinessRead.model_validate(item) for item in businesses]


@router.get("/{business_id}", response_model=BusinessRead, summary="Business detail")
async def get_business(business_id: uuid.UUID, session: SessionDep) -> BusinessRead:
    business = await business_service.get_business(
        session, business_id, published_only=True
    )
    if business is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found")
    return BusinessRead.model_validate(business)


@router.get(
    "/{business_id}/reviews",
    response_model=list[BusinessReviewRead],
    summary="Business reviews",
)
async def list_reviews(
    business_id: uuid.UUID, session: SessionDep
) -> list[BusinessReviewRead]:
    if await business_service.get_business(session, business_id, published_only=True) is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found")
    reviews = await review_service.list_business_reviews(session, business_id)
    return [BusinessReviewRead.model_validate(review) for review in reviews]


@router.post(
    "/{business_id}/reviews",
    response_model=BusinessReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Review a business",
    dependencies=[DEFAULT_RATE_DEP],
)
async def create_review(
    business_id: uuid.UUID,
    payload: ReviewCreate,
    session: SessionDep,
    user: OptionalUser,
    hub: HubDep,
) -> BusinessReviewRead:
    try:
        review = await review_service.create_business_review(
            session,
            business_id=business_id,
            rating=payload.rating,
            comment=payload.comment,
            author_name=payload.author_name,
            user=user,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.BUSINESSES, {"id": str(business_id)})
    return BusinessReviewRead.model_validate(review)
