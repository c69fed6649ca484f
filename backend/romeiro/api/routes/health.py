"""Health check endpoints."""

from datetime import UTC, datetime

from fastapi import APIRouter

from romeiro.core.config import get_settings
from romeiro.services.updates_hub import get_updates_hub

router = APIRouter()


@router.get("", summary="Service health status")
async def healthcheck() -> dict[str, str | int]:
    """Return application health metadata."""
    settings = get_settings()
    return {
        "status": "ok",
        "service": settings.app_name,
        "timestamp": datetime.now(UTC).isoformat(),
        "environment": settings.app_env,
        "streamClients": get_updates_hub().client_count(),
    }
