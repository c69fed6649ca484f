"""Published pilgrim guide directory."""

from __future__ import annotations

from fastapi import APIRouter

from romeiro.api.deps import SessionDep
from romeiro.models.directory import Partner, PilgrimService, PilgrimTip, UsefulPhone
from romeiro.schemas.directory import (
    BannerRead,
    PartnerRead,
    PilgrimServiceRead,
    PilgrimTipRead,
    UsefulPhoneRead,
)
from romeiro.services import content_service

router = APIRouter()

_DIRECTORY_LIMIT = 500


@router.get("/useful-phones", response_model=list[UsefulPhoneRead], tags=["directory"])
async def list_useful_phones(
    session: SessionDep, category: str | None = None
) -> list[UsefulPhoneRead]:
    """Emergency numbers first, then by display order."""
    items = await content_service.list_items(
        session, UsefulPhone, category=category, limit=_DIRECTORY_LIMIT
    )
    return [UsefulPhoneRead.model_validate(item) for item in items]


@router.get("/pilgrim-tips", response_model=list[PilgrimTipRead], tags=["directory"])
async def list_pilgrim_tips(
    session: SessionDep, category: str | None = None
) -> list[PilgrimTipRead]:
    items = await content_service.list_items(
        session, PilgrimTip, category=category, limit=_DIRECTORY_LIMIT
    )
    return [PilgrimTipRead.model_validate(item) for item in items]


@router.get("/services", response_model=list[PilgrimServiceRead], tags=["directory"])
async def list_services(session: SessionDep) -> list[PilgrimServiceRead]:
    items = await content_service.list_items(
        session, PilgrimService, limit=_DIRECTORY_LIMIT
    )
    return [PilgrimServiceRead.model_validate(item) for item in items]


@router.get("/partners", response_model=list[PartnerRead], tags=["directory"])
async def list_partners(session: SessionDep) -> list[PartnerRead]:
    items = await content_service.list_items(session, Partner, limit=_DIRECTORY_LIMIT)
    return [PartnerRead.model_validate(item) for item in items]


@router.get("/banners", response_model=list[BannerRead], tags=["directory"])
async def list_banners(
    session: SessionDep, position: str | None = None
) -> list[BannerRead]:
    """Banners currently inside their display window."""
    items = await content_service.list_active_banners(session, position=position)
    return [BannerRead.model_validate(item) for item in items]
