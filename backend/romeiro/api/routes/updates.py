"""Server-sent event stream of content changes."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import StreamingResponse

from romeiro.api.deps import HubDep
from romeiro.core.config import get_settings

router = APIRouter()


@router.get("/stream", summary="Subscribe to content updates")
async def stream_updates(hub: HubDep) -> StreamingResponse:
    client_id, queue = hub.add_client()
    return StreamingResponse(
        hub.stream(
            client_id,
            queue,
            keepalive_seconds=get_settings().sse_keepalive_seconds,
        ),
        media_type="text/event-stream",
        headers={
            "Cache-Control": "no-cache",
            "Connection": "keep-alive",
            "X-Accel-Buffering": "no",
        },
    )
