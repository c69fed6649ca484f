"""Client for the Expo push notification gateway."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import httpx

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PushMessage:
    """A single push message addressed to one device token."""

    to: str
    title: str
    body: str
    data: dict[str, Any] = field(default_factory=dict)
    sound: str = "default"

    def as_payload(self) -> dict[str, Any]:
        return {
            "to": self.to,
            "title": self.title,
            "body": self.body,
            "data": self.data,
            "sound": self.sound,
        }


@dataclass(slots=True)
class PushReport:
    """Outcome counts of a dispatch."""

    sent: int = 0
    errors: int = 0

    def merge(self, other: "PushReport") -> None:
        self.sent += other.sent
        self.errors += other.errors


class PushGatewayError(RuntimeError):
    """Raised when the gateway rejects a whole request."""


def chunked(items: Sequence[PushMessage], size: int) -> list[list[PushMessage]]:
    if size < 1:
        raise ValueError("chunk size must be positive")
    return [list(items[start : start + size]) for start in range(0, len(items), size)]


def _tally_tickets(body: Any, expected: int) -> PushReport:
    tickets = body.get("data") if isinstance(body, dict) else None
    if not isinstance(tickets, list):
        raise PushGatewayError("Push gateway response has no ticket list")
    report = PushReport()
    for ticket in tickets:
        if isinstance(ticket, dict) and ticket.get("status") == "ok":
            report.sent += 1
        else:
            report.errors += 1
    # Messages without a ticket did not go out
    report.errors += max(expected - len(tickets), 0)
    return report


class PushClient:
    """Send push messages to the gateway in fixed-size chunks."""

    def __init__(
        self,
        gateway_url: str,
        *,
        access_token: str | None = None,
        chunk_size: int = 100,
        timeout: float = 15.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._gateway_url = gateway_url
        self._chunk_size = chunk_size
        self._timeout = timeout
        self._transport = transport
        self._headers = {
            "Accept": "application/json",
            "Accept-Encoding": "gzip, deflate",
            "Content-Type": "application/json",
        }
        if access_token:
            self._headers["Authorization"] = f"Bearer {access_token}"

    async def _post_chunk(
        self, client: httpx.AsyncClient, chunk: list[PushMessage]
    ) -> PushReport:
        response = await client.post(
            self._gateway_url, json=[message.as_payload() for message in chunk]
        )
        if response.status_code >= 400:
            raise PushGatewayError(
                f"Push gateway returned HTTP {response.status_code}"
            )
        try:
            body = response.json()
        except ValueError as exc:
            raise PushGatewayError("Push gateway returned invalid JSON") from exc
        return _tally_tickets(body, len(chunk))

    async def send(self, messages: Sequence[PushMessage]) -> PushReport:
        """Dispatch ``messages``; a failed chunk counts all of its messages as errors."""
        report = PushReport()
        if not messages:
            return report
        async with httpx.AsyncClient(
            timeout=self._timeout, headers=self._headers, transport=self._transport
        ) as client:
            for chunk in chunked(messages, self._chunk_size):
                try:
                    report.merge(await self._post_chunk(client, chunk))
                except (httpx.HTTPError, PushGatewayError) as exc:
                    logger.warning(
                        "Push chunk of %d messages failed: %s", len(chunk), exc
                    )
                    report.errors += len(chunk)
        logger.info("Push dispatch finished: %d ok, %d errors", report.sent, report.errors)
        return report


__all__ = ["PushClient", "PushGatewayError", "PushMessage", "PushReport", "chunked"]
