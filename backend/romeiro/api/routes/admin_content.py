"""Admin management of editorial content, the guide directory and app settings.

News, videos, attractions and the directory resources share one CRUD shape;
``_register_crud`` wires the five routes for each of them.
"""

import uuid
from typing import Any

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from romeiro.api.deps import HubDep, SessionDep, require_admin
from romeiro.models.content import Attraction, News, Video
from romeiro.models.directory import (
    Banner,
    Partner,
    PilgrimService,
    PilgrimTip,
    UsefulPhone,
)
from romeiro.schemas.content import (
    AttractionCreate,
    AttractionRead,
    AttractionUpdate,
    NewsCreate,
    NewsRead,
    NewsUpdate,
    SettingRead,
    SettingsUpdate,
    VideoCreate,
    VideoRead,
    VideoUpdate,
)
from romeiro.schemas.directory import (
    BannerCreate,
    BannerRead,
    BannerUpdate,
    PartnerCreate,
    PartnerRead,
    PartnerUpdate,
    PilgrimServiceCreate,
    PilgrimServiceRead,
    PilgrimServiceUpdate,
    PilgrimTipCreate,
    PilgrimTipRead,
    PilgrimTipUpdate,
    UsefulPhoneCreate,
    UsefulPhoneRead,
    UsefulPhoneUpdate,
)
from romeiro.services import content_service
from romeiro.services.updates_hub import UpdateType

router = APIRouter(dependencies=[Depends(require_admin)])


def _register_crud(
    path: str,
    *,
    model: Any,
    create_schema: type[BaseModel],
    update_schema: type[BaseModel],
    read_schema: type[BaseModel],
    update_type: UpdateType,
    label: str,
) -> None:
    tags = [f"admin-{path}"]

    async def _load(session: SessionDep, item_id: uuid.UUID) -> Any:
        item = await content_service.get_item(session, model, item_id)
        if item is None:
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND, detail=f"{label} not found"
            )
        return item

    @router.get(f"/{path}", response_model=list[read_schema], tags=tags)
    async def list_items(session: SessionDep) -> list[Any]:
        items = await content_service.list_items(
            session, model, published_only=False, limit=1000
        )
        return [read_schema.model_validate(item) for item in items]

    @router.post(
        f"/{path}",
        response_model=read_schema,
        status_code=status.HTTP_201_CREATED,
        tags=tags,
    )
    async def create_item(
        payload: create_schema, session: SessionDep, hub: HubDep  # type: ignore[valid-type]
    ) -> Any:
        item = await content_service.create_item(session, model, payload)
        hub.broadcast(update_type, {"id": str(item.id)})
        return read_schema.model_validate(item)

    @router.get(f"/{path}/{{item_id}}", response_model=read_schema, tags=tags)
    async def get_item(item_id: uuid.UUID, session: SessionDep) -> Any:
        return read_schema.model_validate(await _load(session, item_id))

    @router.put(f"/{path}/{{item_id}}", response_model=read_schema, tags=tags)
    async def update_item(
        item_id: uuid.UUID,
        payload: update_schema,  # type: ignore[valid-type]
        session: SessionDep,
        hub: HubDep,
    ) -> Any:
        item = await content_service.update_item(
            session, await _load(session, item_id), payload
        )
        hub.broadcast(update_type, {"id": str(item.id)})
        return read_schema.model_validate(item)

    @router.delete(
        f"/{path}/{{item_id}}", status_code=status.HTTP_204_NO_CONTENT, tags=tags
    )
    async def delete_item(item_id: uuid.UUID, session: SessionDep, hub: HubDep) -> None:
        await content_service.delete_item(session, await _load(session, item_id))
        hub.broadcast(update_type, {"id": str(item_id)})


_register_crud(
    "news",
    model=News,
    create_schema=NewsCreate,
    update_schema=NewsUpdate,
    read_schema=NewsRead,
    update_type=UpdateType.NEWS,
    label="News",
)
_register_crud(
    "videos",
    model=Video,
    create_schema=VideoCreate,
    update_schema=VideoUpdate,
    read_schema=VideoRead,
    update_type=UpdateType.VIDEOS,
    label="Video",
)
_register_crud(
    "attractions",
    model=Attraction,
    create_schema=AttractionCreate,
    update_schema=AttractionUpdate,
    read_schema=AttractionRead,
    update_type=UpdateType.ATTRACTIONS,
    label="Attraction",
)
_register_crud(
    "useful-phones",
    model=UsefulPhone,
    create_schema=UsefulPhoneCreate,
    update_schema=UsefulPhoneUpdate,
    read_schema=UsefulPhoneRead,
    update_type=UpdateType.USEFUL_PHONES,
    label="Useful phone",
)
_register_crud(
    "pilgrim-tips",
    model=PilgrimTip,
    create_schema=PilgrimTipCreate,
    update_schema=PilgrimTipUpdate,
    read_schema=PilgrimTipRead,
    update_type=UpdateType.PILGRIM_TIPS,
    label="Tip",
)
_register_crud(
    "services",
    model=PilgrimService,
    create_schema=PilgrimServiceCreate,
    update_schema=PilgrimServiceUpdate,
    read_schema=PilgrimServiceRead,
    update_type=UpdateType.SERVICES,
    label="Service",
)
_register_crud(
    "partners",
    model=Partner,
    create_schema=PartnerCreate,
    update_schema=PartnerUpdate,
    read_schema=PartnerRead,
    update_type=UpdateType.PARTNERS,
    label="Partner",
)
_register_crud(
    "banners",
    model=Banner,
    create_schema=BannerCreate,
    update_schema=BannerUpdate,
    read_schema=BannerRead,
    update_type=UpdateType.BANNERS,
    label="Banner",
)


@router.get("/settings", response_model=list[SettingRead], tags=["admin-settings"])
async def list_settings(session: SessionDep) -> list[SettingRead]:
    settings = await content_service.list_settings(session)
    return [SettingRead.model_validate(item) for item in settings]


@router.put("/settings", response_model=list[SettingRead], tags=["admin-settings"])
async def upsert_settings(
    payload: SettingsUpdate, session: SessionDep, hub: HubDep
) -> list[SettingRead]:
    settings = await content_service.upsert_settings(session, payload.values)
    hub.broadcast(UpdateType.STATIC_PAGES, {"keys": sorted(payload.values)})
    return [SettingRead.model_validate(item) for item in settings]
