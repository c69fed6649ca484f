"""Admin management of businesses and their reviews."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.api.deps import HubDep, SessionDep, require_admin
from romeiro.models.business import Business
from romeiro.schemas.business import BusinessCreate, BusinessRead, BusinessUpdate
from romeiro.schemas.review import BusinessReviewRead
from romeiro.services import business_service, review_service
from romeiro.services.updates_hub import UpdateType

router = APIRouter(dependencies=[Depends(require_admin)])


async def _load_business(session: AsyncSession, business_id: uuid.UUID) -> Business:
    business = await business_service.get_business(session, business_id)
    if business is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Business not found")
    return business


@router.get("", response_model=list[BusinessRead])
async def list_businesses(session: SessionDep) -> list[BusinessRead]:
    items = await business_service.list_businesses(session, published_only=False)
    return [BusinessRead.model_validate(item) for item in items]


@router.post("", response_model=BusinessRead, status_code=status.HTTP_201_CREATED)
async def create_business(
    payload: BusinessCreate, session: SessionDep, hub: HubDep
) -> BusinessRead:
    business = await business_service.create_business(session, payload)
    hub.broadcast(UpdateType.BUSINESSES, {"id": str(business.id)})
    return BusinessRead.model_validate(business)


@router.get("/{business_id}", response_model=BusinessRead)
async def get_business(business_id: uuid.UUID, session: SessionDep) -> BusinessRead:
    return BusinessRead.model_validate(await _load_business(session, business_id))


@router.put("/{business_id}", response_model=BusinessRead)
async def update_business(
    business_id: uuid.UUID, payload: BusinessUpdate, session: SessionDep, hub: HubDep
) -> BusinessRead:
    business = await business_service.update_business(
        session, await _load_business(session, business_id), payload
    )
    hub.broadcast(UpdateType.BUSINESSES, {"id": str(business.id)})
    return BusinessRead.model_validate(business)


@router.delete("/{business_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_business(business_id: uuid.UUID, session: SessionDep, hub: HubDep) -> None:
    await business_service.delete_business(session, await _load_business(session, business_id))
    hub.broadcast(UpdateType.BUSINESSES, {"id": str(business_id)})


@router.get("/{business_id}/reviews", response_model=list[BusinessReviewRead])
async def list_reviews(
    business_id: uuid.UUID, session: SessionDep
) -> list[BusinessReviewRead]:
    await _load_business(session, business_id)
    reviews = await review_service.list_business_reviews(session, business_id)
    return [BusinessReviewRead.model_validate(review) for review in reviews]


@router.delete(
    "/{business_id}/reviews/{review_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_review(
    business_id: uuid.UUID, review_id: uuid.UUID, session: SessionDep, hub: HubDep
) -> None:
    try:
        await review_service.delete_business_review(
            session, business_id=business_id, review_id=review_id
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.BUSINESSES, {"id": str(business_id)})
