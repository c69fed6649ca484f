"""Push device registration."""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from romeiro.api.deps import SessionDep
from romeiro.api.rate_limit import DEFAULT_RATE_DEP
from romeiro.schemas.notification import PushDeviceRead, PushDeviceRegister
from romeiro.services import notification_service

router = APIRouter()


@router.post(
    "/register",
    response_model=PushDeviceRead,
    summary="Register or refresh a push device",
    dependencies=[DEFAULT_RATE_DEP],
)
async def register_device(
    payload: PushDeviceRegister, session: SessionDep
) -> PushDeviceRead:
    try:
        device = await notification_service.register_device(session, payload)
    except LookupError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return PushDeviceRead.model_validate(device)
