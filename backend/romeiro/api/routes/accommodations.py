"""Public accommodation endpoints: listing, search, availability and reviews."""

from __future__ import annotations

import uuid
from datetime import date
from typing import Annotated

from fastapi import APIRouter, HTTPException, Query, status

from romeiro.api.deps import HubDep, OptionalUser, SessionDep
from romeiro.api.rate_limit import DEFAULT_RATE_DEP
from romeiro.models.accommodation import Accommodation, Room
from romeiro.schemas.accommodation import (
    AccommodationAvailabilityResponse,
    AccommodationDetail,
    AccommodationRead,
    AccommodationSearchResponse,
    AccommodationWithRooms,
    BasicAccommodationRead,
    RoomRead,
)
from romeiro.schemas.review import AccommodationReviewRead, ReviewCreate
from romeiro.services import accommodation_service, availability_service, review_service
from romeiro.services.updates_hub import UpdateType

router = APIRouter()

CheckIn = Annotated[str | None, Query(alias="checkIn", description="YYYY-MM-DD")]
CheckOut = Annotated[str | None, Query(alias="checkOut", description="YYYY-MM-DD")]


def _stay_from_query(check_in: str | None, check_out: str | None) -> tuple[date, date]:
    if not check_in or not check_out:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="checkIn and checkOut are required",
        )
    try:
        start = availability_service.parse_stay_date(check_in)
        end = availability_service.parse_stay_date(check_out)
        availability_service.validate_stay(start, end)
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)
        ) from exc
    return start, end


def _with_rooms(accommodation: Accommodation, rooms: list[Room]) -> AccommodationWithRooms:
    return AccommodationWithRooms(
        **AccommodationRead.model_validate(accommodation).model_dump(),
        available_rooms=[RoomRead.model_validate(room) for room in rooms],
    )


@router.get("", response_model=list[AccommodationRead], summary="Published accommodations")
async def list_accommodations(session: SessionDep) -> list[AccommodationRead]:
    accommodations = await accommodation_service.list_accommodations(session)
    return [AccommodationRead.model_validate(item) for item in accommodations]


@router.get(
    "/search",
    response_model=AccommodationSearchResponse,
    summary="Accommodations with rooms free for a stay",
)
async def search_accommodations(
    session: SessionDep,
    check_in: CheckIn = None,
    check_out: CheckOut = None,
) -> AccommodationSearchResponse:
    start, end = _stay_from_query(check_in, check_out)
    result = await availability_service.search_available(session, start, end)
    return AccommodationSearchResponse(
        accommodations=[
            _with_rooms(match.accommodation, match.available_rooms)
            for match in result.accommodations
        ],
        basic_accommodations=[
            BasicAccommodationRead.model_validate(item)
            for item in result.basic_accommodations
        ],
        check_in=start,
        check_out=end,
    )


@router.get(
    "/{accommodation_id}",
    response_model=AccommodationDetail,
    summary="Accommodation with its rooms",
)
async def get_accommodation(
    accommodation_id: uuid.UUID, session: SessionDep
) -> AccommodationDetail:
    found = await accommodation_service.get_accommodation_detail(session, accommodation_id)
    if found is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Accommodation not found"
        )
    accommodation, rooms = found
    return AccommodationDetail(
        **AccommodationRead.model_validate(accommodation).model_dump(),
        rooms=[RoomRead.model_validate(room) for room in rooms],
    )


@router.get(
    "/{accommodation_id}/availability",
    response_model=AccommodationAvailabilityResponse,
    summary="Rooms of one accommodation free for a stay",
)
async def accommodation_availability(
    accommodation_id: uuid.UUID,
    session: SessionDep,
    check_in: CheckIn = None,
    check_out: CheckOut = None,
) -> AccommodationAvailabilityResponse:
    start, end = _stay_from_query(check_in, check_out)
    try:
        result = await availability_service.accommodation_availability(
            session, accommodation_id, start, end
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return AccommodationAvailabilityResponse(
        accommodation=AccommodationRead.model_validate(result.accommodation),
        available_rooms=[RoomRead.model_validate(room) for room in result.available_rooms],
        check_in=start,
        check_out=end,
    )


@router.get(
    "/{accommodation_id}/reviews",
    response_model=list[AccommodationReviewRead],
    summary="Approved reviews",
)
async def list_reviews(
    accommodation_id: uuid.UUID, session: SessionDep
) -> list[AccommodationReviewRead]:
    if await accommodation_service.get_accommodation(
        session, accommodation_id, published_only=True
    ) is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Accommodation not found"
        )
    reviews = await review_service.list_accommodation_reviews(session, accommodation_id)
    return [AccommodationReviewRead.model_validate(review) for review in reviews]


@router.post(
    "/{accommodation_id}/reviews",
    response_model=AccommodationReviewRead,
    status_code=status.HTTP_201_CREATED,
    summary="Review an accommodation",
    dependencies=[DEFAULT_RATE_DEP],
)
async def create_review(
    accommodation_id: uuid.UUID,
    payload: ReviewCreate,
    session: SessionDep,
    user: OptionalUser,
    hub: HubDep,
) -> AccommodationReviewRead:
    try:
        review = await review_service.create_accommodation_review(
            session,
            accommodation_id=accommodation_id,
            rating=payload.rating,
            comment=payload.comment,
            author_name=payload.author_name,
            user=user,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation_id)})
    return AccommodationReviewRead.model_validate(review)
