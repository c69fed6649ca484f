"""Push gateway dispatch in chunks."""

from __future__ import annotations

import json

import httpx
import pytest

from romeiro.db.session import get_sessionmaker
from romeiro.integrations.expo_push import PushClient, PushMessage, chunked
from romeiro.models import Notification, PushDevice, User, UserRole
from romeiro.services import push_service

pytestmark = pytest.mark.asyncio

GATEWAY = "https://push.test/send"


def _ok_transport(calls: list[list[dict]]) -> httpx.MockTransport:
    def handler(request: httpx.Request) -> httpx.Response:
        messages = json.loads(request.content)
        calls.append(messages)
        return httpx.Response(
            200, json={"data": [{"status": "ok", "id": str(i)} for i in range(len(messages))]}
        )

    return httpx.MockTransport(handler)


def _messages(count: int) -> list[PushMessage]:
    return [
        PushMessage(to=f"ExponentPushToken[{index}]", title="Oi", body="Corpo")
        for index in range(count)
    ]


async def test_chunked_splits_into_fixed_sizes() -> None:
    sizes = [len(chunk) for chunk in chunked(_messages(250), 100)]
    assert sizes == [100, 100, 50]
    with pytest.raises(ValueError):
        chunked(_messages(1), 0)


async def test_send_posts_one_request_per_chunk() -> None:
    calls: list[list[dict]] = []
    client = PushClient(GATEWAY, chunk_size=100, transport=_ok_transport(calls))

    report = await client.send(_messages(250))

    assert [len(call) for call in calls] == [100, 100, 50]
    assert report.sent == 250
    assert report.errors == 0
    assert calls[0][0]["to"] == "ExponentPushToken[0]"
    assert calls[0][0]["sound"] == "default"


async def test_ticket_errors_are_counted() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200,
            json={
                "data": [
                    {"status": "ok"},
                    {"status": "error", "details": {"error": "DeviceNotRegistered"}},
                    {"status": "ok"},
                ]
            },
        )

    client = PushClient(GATEWAY, transport=httpx.MockTransport(handler))
    report = await client.send(_messages(3))
    assert (report.sent, report.errors) == (2, 1)


async def test_failed_chunk_counts_all_its_messages_as_errors() -> None:
    attempts = {"count": 0}

    def handler(request: httpx.Request) -> httpx.Response:
        attempts["count"] += 1
        messages = json.loads(request.content)
        if attempts["count"] == 1:
            return httpx.Response(503, text="unavailable")
        return httpx.Response(200, json={"data": [{"status": "ok"}] * len(messages)})

    client = PushClient(GATEWAY, chunk_size=2, transport=httpx.MockTransport(handler))
    report = await client.send(_messages(3))

    # no retries: the failed chunk is not sent again
    assert attempts["count"] == 2
    assert (report.sent, report.errors) == (1, 2)


async def test_transport_errors_do_not_raise() -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("boom", request=request)

    client = PushClient(GATEWAY, transport=httpx.MockTransport(handler))
    report = await client.send(_messages(2))
    assert (report.sent, report.errors) == (0, 2)


async def test_access_token_is_sent_as_bearer() -> None:
    seen: dict[str, str] = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["auth"] = request.headers.get("Authorization", "")
        return httpx.Response(200, json={"data": [{"status": "ok"}]})

    client = PushClient(
        GATEWAY, access_token="secret", transport=httpx.MockTransport(handler)
    )
    await client.send(_messages(1))
    assert seen["auth"] == "Bearer secret"


async def test_send_notification_pushes_to_active_devices(
    reset_database, db_url: str
) -> None:
    calls: list[list[dict]] = []
    client = PushClient(GATEWAY, transport=_ok_transport(calls))

    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        session.add_all(
            [
                User(
                    name="Ana",
                    email="ana@example.com",
                    hashed_password="x",
                    role=UserRole.PILGRIM,
                ),
                PushDevice(push_token="ExponentPushToken[on]"),
                PushDevice(push_token="ExponentPushToken[off]", active=False),
            ]
        )
        notification = Notification(title="Procissao", body="Saida as 17h")
        session.add(notification)
        await session.commit()

        outcome = await push_service.send_notification(session, notification, client=client)

    assert outcome.user_count == 1
    assert (outcome.push_sent, outcome.push_errors) == (1, 0)
    assert [message["to"] for message in calls[0]] == ["ExponentPushToken[on]"]
    assert calls[0][0]["data"]["notificationId"] == str(notification.id)


async def test_send_notification_skips_push_when_disabled(
    reset_database, db_url: str
) -> None:
    calls: list[list[dict]] = []
    client = PushClient(GATEWAY, transport=_ok_transport(calls))

    sessionmaker = get_sessionmaker(db_url)
    async with sessionmaker() as session:
        session.add(PushDevice(push_token="ExponentPushToken[on]"))
        notification = Notification(title="Sem push", body="Somente caixa", send_push=False)
        session.add(notification)
        await session.commit()

        outcome = await push_service.send_notification(session, notification, client=client)

    assert calls == []
    assert (outcome.user_count, outcome.push_sent, outcome.push_errors) == (0, 0, 0)
