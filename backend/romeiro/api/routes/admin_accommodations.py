"""Admin management of accommodations, rooms, blocked dates and reviews."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from romeiro.api.deps import HubDep, SessionDep, require_admin
from romeiro.models.accommodation import Accommodation, Room
from romeiro.schemas.accommodation import (
    AccommodationCreate,
    AccommodationDetail,
    AccommodationRead,
    AccommodationUpdate,
    BasicAccommodationCreate,
    BasicAccommodationRead,
    BasicAccommodationUpdate,
    RoomBlockedDateCreate,
    RoomBlockedDateRead,
    RoomCreate,
    RoomRead,
    RoomUpdate,
)
from romeiro.schemas.base import MessageResponse
from romeiro.schemas.review import AccommodationReviewRead, ReviewApproval
from romeiro.services import accommodation_service, availability_service, review_service
from romeiro.services.updates_hub import UpdateType

router = APIRouter(dependencies=[Depends(require_admin)])


def _not_found(label: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found")


async def _load_accommodation(
    session: AsyncSession, accommodation_id: uuid.UUID
) -> Accommodation:
    accommodation = await accommodation_service.get_accommodation(session, accommodation_id)
    if accommodation is None:
        raise _not_found("Accommodation")
    return accommodation


async def _load_room(session: AsyncSession, room_id: uuid.UUID) -> Room:
    room = await accommodation_service.get_room(session, room_id)
    if room is None:
        raise _not_found("Room")
    return room


# Accommodations


@router.get("/accommodations", response_model=list[AccommodationRead])
async def list_accommodations(session: SessionDep) -> list[AccommodationRead]:
    items = await accommodation_service.list_accommodations(session, published_only=False)
    return [AccommodationRead.model_validate(item) for item in items]


@router.post(
    "/accommodations",
    response_model=AccommodationRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_accommodation(
    payload: AccommodationCreate, session: SessionDep, hub: HubDep
) -> AccommodationRead:
    accommodation = await accommodation_service.create_accommodation(session, payload)
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation.id)})
    return AccommodationRead.model_validate(accommodation)


@router.get("/accommodations/{accommodation_id}", response_model=AccommodationDetail)
async def get_accommodation(
    accommodation_id: uuid.UUID, session: SessionDep
) -> AccommodationDetail:
    accommodation = await _load_accommodation(session, accommodation_id)
    rooms = await accommodation_service.list_rooms(session, accommodation_id)
    return AccommodationDetail(
        **AccommodationRead.model_validate(accommodation).model_dump(),
        rooms=[RoomRead.model_validate(room) for room in rooms],
    )


@router.put("/accommodations/{accommodation_id}", response_model=AccommodationRead)
async def update_accommodation(
    accommodation_id: uuid.UUID,
    payload: AccommodationUpdate,
    session: SessionDep,
    hub: HubDep,
) -> AccommodationRead:
    accommodation = await _load_accommodation(session, accommodation_id)
    accommodation = await accommodation_service.update_accommodation(
        session, accommodation, payload
    )
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation.id)})
    return AccommodationRead.model_validate(accommodation)


@router.delete(
    "/accommodations/{accommodation_id}", status_code=status.HTTP_204_NO_CONTENT
)
async def delete_accommodation(
    accommodation_id: uuid.UUID, session: SessionDep, hub: HubDep
) -> None:
    accommodation = await _load_accommodation(session, accommodation_id)
    await accommodation_service.delete_accommodation(session, accommodation)
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation_id)})


# Rooms


@router.get("/accommodations/{accommodation_id}/rooms", response_model=list[RoomRead])
async def list_rooms(accommodation_id: uuid.UUID, session: SessionDep) -> list[RoomRead]:
    await _load_accommodation(session, accommodation_id)
    rooms = await accommodation_service.list_rooms(session, accommodation_id)
    return [RoomRead.model_validate(room) for room in rooms]


@router.post(
    "/accommodations/{accommodation_id}/rooms",
    response_model=RoomRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_room(
    accommodation_id: uuid.UUID, payload: RoomCreate, session: SessionDep, hub: HubDep
) -> RoomRead:
    try:
        room = await accommodation_service.create_room(
            session, accommodation_id=accommodation_id, payload=payload
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation_id)})
    return RoomRead.model_validate(room)


@router.get("/rooms/{room_id}", response_model=RoomRead)
async def get_room(room_id: uuid.UUID, session: SessionDep) -> RoomRead:
    return RoomRead.model_validate(await _load_room(session, room_id))


@router.put("/rooms/{room_id}", response_model=RoomRead)
async def update_room(
    room_id: uuid.UUID, payload: RoomUpdate, session: SessionDep, hub: HubDep
) -> RoomRead:
    room = await accommodation_service.update_room(
        session, await _load_room(session, room_id), payload
    )
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(room.accommodation_id)})
    return RoomRead.model_validate(room)


@router.delete("/rooms/{room_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_room(room_id: uuid.UUID, session: SessionDep, hub: HubDep) -> None:
    room = await _load_room(session, room_id)
    accommodation_id = room.accommodation_id
    await accommodation_service.delete_room(session, room)
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation_id)})


# Blocked dates


@router.get("/rooms/{room_id}/blocked-dates", response_model=list[RoomBlockedDateRead])
async def list_blocked_dates(
    room_id: uuid.UUID, session: SessionDep
) -> list[RoomBlockedDateRead]:
    await _load_room(session, room_id)
    rows = await accommodation_service.list_blocked_dates(session, room_id)
    return [RoomBlockedDateRead.model_validate(row) for row in rows]


@router.post(
    "/rooms/{room_id}/blocked-dates",
    response_model=RoomBlockedDateRead,
    status_code=status.HTTP_201_CREATED,
)
async def block_date(
    room_id: uuid.UUID,
    payload: RoomBlockedDateCreate,
    session: SessionDep,
    hub: HubDep,
) -> RoomBlockedDateRead:
    try:
        blocked = await accommodation_service.block_room_date(
            session, room_id=room_id, payload=payload
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"roomId": str(room_id)})
    return RoomBlockedDateRead.model_validate(blocked)


@router.delete("/rooms/{room_id}/blocked-dates/{day}", response_model=MessageResponse)
async def unblock_date(
    room_id: uuid.UUID, day: str, session: SessionDep, hub: HubDep
) -> MessageResponse:
    try:
        parsed = availability_service.parse_stay_date(day)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(exc)) from exc
    await _load_room(session, room_id)
    removed = await accommodation_service.unblock_room_date(
        session, room_id=room_id, day=parsed
    )
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"roomId": str(room_id)})
    return MessageResponse(message=f"{removed} blocked entries removed")


# Reviews


@router.get(
    "/accommodations/{accommodation_id}/reviews",
    response_model=list[AccommodationReviewRead],
)
async def list_reviews(
    accommodation_id: uuid.UUID, session: SessionDep
) -> list[AccommodationReviewRead]:
    await _load_accommodation(session, accommodation_id)
    reviews = await review_service.list_accommodation_reviews(
        session, accommodation_id, approved_only=False
    )
    return [AccommodationReviewRead.model_validate(review) for review in reviews]


@router.put(
    "/accommodations/{accommodation_id}/reviews/{review_id}/approval",
    response_model=AccommodationReviewRead,
)
async def set_review_approval(
    accommodation_id: uuid.UUID,
    review_id: uuid.UUID,
    payload: ReviewApproval,
    session: SessionDep,
    hub: HubDep,
) -> AccommodationReviewRead:
    try:
        review = await review_service.set_accommodation_review_approval(
            session,
            accommodation_id=accommodation_id,
            review_id=review_id,
            approved=payload.approved,
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation_id)})
    return AccommodationReviewRead.model_validate(review)


@router.delete(
    "/accommodations/{accommodation_id}/reviews/{review_id}",
    status_code=status.HTTP_204_NO_CONTENT,
)
async def delete_review(
    accommodation_id: uuid.UUID, review_id: uuid.UUID, session: SessionDep, hub: HubDep
) -> None:
    try:
        await review_service.delete_accommodation_review(
            session, accommodation_id=accommodation_id, review_id=review_id
        )
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"id": str(accommodation_id)})


# Basic listings


@router.get("/basic-accommodations", response_model=list[BasicAccommodationRead])
async def list_basic(session: SessionDep) -> list[BasicAccommodationRead]:
    items = await accommodation_service.list_basic_accommodations(
        session, published_only=False
    )
    return [BasicAccommodationRead.model_validate(item) for item in items]


@router.post(
    "/basic-accommodations",
    response_model=BasicAccommodationRead,
    status_code=status.HTTP_201_CREATED,
)
async def create_basic(
    payload: BasicAccommodationCreate, session: SessionDep, hub: HubDep
) -> BasicAccommodationRead:
    listing = await accommodation_service.create_basic_accommodation(session, payload)
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"basicId": str(listing.id)})
    return BasicAccommodationRead.model_validate(listing)


@router.put("/basic-accommodations/{basic_id}", response_model=BasicAccommodationRead)
async def update_basic(
    basic_id: uuid.UUID,
    payload: BasicAccommodationUpdate,
    session: SessionDep,
    hub: HubDep,
) -> BasicAccommodationRead:
    listing = await accommodation_service.get_basic_accommodation(session, basic_id)
    if listing is None:
        raise _not_found("Accommodation")
    listing = await accommodation_service.update_basic_accommodation(
        session, listing, payload
    )
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"basicId": str(listing.id)})
    return BasicAccommodationRead.model_validate(listing)


@router.delete("/basic-accommodations/{basic_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_basic(basic_id: uuid.UUID, session: SessionDep, hub: HubDep) -> None:
    listing = await accommodation_service.get_basic_accommodation(session, basic_id)
    if listing is None:
        raise _not_found("Accommodation")
    await accommodation_service.delete_basic_accommodation(session, listing)
    hub.broadcast(UpdateType.ACCOMMODATIONS, {"basicId": str(basic_id)})
