"""Public read access to app settings."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from romeiro.api.deps import SessionDep
from romeiro.schemas.content import SettingRead
from romeiro.services import content_service

router = APIRouter()


@router.get("/{key}", response_model=SettingRead, summary="Read one setting")
async def get_setting(key: str, session: SessionDep) -> SettingRead:
    setting = await content_service.get_setting(session, key)
    if setting is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Setting not found")
    return SettingRead.model_validate(setting)
