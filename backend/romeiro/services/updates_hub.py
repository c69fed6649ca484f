"""In-process fan-out of content change events to server-sent-event clients."""

from __future__ import annotations

import asyncio
import enum
import json
import logging
import time
import uuid
from collections.abc import AsyncIterator
from typing import Any

logger = logging.getLogger(__name__)


class UpdateType(str, enum.Enum):
    NEWS = "news"
    VIDEOS = "videos"
    BANNERS = "banners"
    PARTNERS = "partners"
    USEFUL_PHONES = "useful-phones"
    BUSINESSES = "businesses"
    ACCOMMODATIONS = "accommodations"
    STATIC_PAGES = "static-pages"
    NOTIFICATIONS = "notifications"
    ATTRACTIONS = "attractions"
    PILGRIM_TIPS = "pilgrim-tips"
    SERVICES = "services"


def sse_frame(payload: dict[str, Any]) -> str:
    return f"data: {json.dumps(payload, default=str)}\n\n"


KEEPALIVE_FRAME = ": keepalive\n\n"


class UpdatesHub:
    """Registry of connected clients, each with its own bounded queue.

    A client whose queue is full is dropped; it reconnects and refetches.
    """

    def __init__(self, *, queue_size: int = 100) -> None:
        self._queue_size = queue_size
        self._clients: dict[str, asyncio.Queue[str]] = {}

    def add_client(self, client_id: str | None = None) -> tuple[str, asyncio.Queue[str]]:
        client_id = client_id or uuid.uuid4().hex
        queue: asyncio.Queue[str] = asyncio.Queue(maxsize=self._queue_size)
        self._clients[client_id] = queue
        logger.debug("SSE client %s connected (%d total)", client_id, len(self._clients))
        return client_id, queue

    def remove_client(self, client_id: str) -> None:
        if self._clients.pop(client_id, None) is not None:
            logger.debug(
                "SSE client %s disconnected (%d total)", client_id, len(self._clients)
            )

    def client_count(self) -> int:
        return len(self._clients)

    def broadcast(
        self, update_type: UpdateType | str, data: dict[str, Any] | None = None
    ) -> int:
        """Queue an update for every client; return how many received it."""
        type_value = update_type.value if isinstance(update_type, UpdateType) else update_type
        frame = sse_frame(
            {"type": type_value, "timestamp": int(time.time() * 1000), **(data or {})}
        )
        delivered = 0
        for client_id, queue in list(self._clients.items()):
            try:
                queue.put_nowait(frame)
            except asyncio.QueueFull:
                logger.warning("SSE client %s is not draining; dropping it", client_id)
                self.remove_client(client_id)
                continue
            delivered += 1
        return delivered

    async def stream(
        self,
        client_id: str,
        queue: asyncio.Queue[str],
        *,
        keepalive_seconds: float = 25.0,
    ) -> AsyncIterator[str]:
        """Yield SSE frames for one client until it disconnects."""
        try:
            yield sse_frame({"type": "connected", "clientId": client_id})
            while client_id in self._clients:
                try:
                    frame = await asyncio.wait_for(queue.get(), timeout=keepalive_seconds)
                except asyncio.TimeoutError:
                    yield KEEPALIVE_FRAME
                    continue
                yield frame
        finally:
            self.remove_client(client_id)


updates_hub = UpdatesHub()


def get_updates_hub() -> UpdatesHub:
    return updates_hub
