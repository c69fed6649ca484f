"""Guide directory: useful phones, tips, services, partners and banners."""
from __future__ import annotations

from datetime import date, timedelta

import pytest

from romeiro.services.updates_hub import get_updates_hub

pytestmark = pytest.mark.asyncio


async def _create(client, headers, path: str, payload: dict) -> dict:
    response = await client.post(f"/api/admin/{path}", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def test_useful_phones_list_emergencies_first(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    await _create(
        client, headers, "useful-phones",
        {"name": "Rodoviaria", "phone": "8835110000", "category": "transporte"},
    )
    await _create(
        client, headers, "useful-phones",
        {"name": "SAMU", "phone": "192", "category": "emergencia", "isEmergency": True},
    )
    await _create(
        client, headers, "useful-phones",
        {"name": "Rascunho", "phone": "000", "published": False},
    )

    phones = (await client.get("/api/useful-phones")).json()
    assert [item["name"] for item in phones] == ["SAMU", "Rodoviaria"]
    assert phones[0]["isEmergency"] is True

    filtered = (await client.get("/api/useful-phones", params={"category": "transporte"})).json()
    assert [item["name"] for item in filtered] == ["Rodoviaria"]

    admin = (await client.get("/api/admin/useful-phones", headers=headers)).json()
    assert len(admin) == 3


async def test_tips_and_services_follow_display_order(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    await _create(
        client, headers, "pilgrim-tips",
        {"title": "Beba agua", "description": "Leve uma garrafa.", "displayOrder": 2},
    )
    await _create(
        client, headers, "pilgrim-tips",
        {"title": "Use protetor", "description": "O sol e forte.", "displayOrder": 1},
    )
    await _create(client, headers, "services", {"name": "Posto medico", "phone": "192"})

    tips = (await client.get("/api/pilgrim-tips")).json()
    assert [item["title"] for item in tips] == ["Use protetor", "Beba agua"]
    services = (await client.get("/api/services")).json()
    assert services[0]["name"] == "Posto medico"


async def test_banners_respect_position_and_window(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    today = date.today()
    await _create(client, headers, "banners", {"title": "Romaria", "position": "home"})
    await _create(
        client, headers, "banners",
        {"title": "Guia", "position": "guia"},
    )
    await _create(
        client, headers, "banners",
        {
            "title": "Encerrado",
            "endDate": (today - timedelta(days=2)).isoformat(),
        },
    )
    await _create(
        client, headers, "banners",
        {"title": "Em breve", "startDate": (today + timedelta(days=2)).isoformat()},
    )

    home = (await client.get("/api/banners", params={"position": "home"})).json()
    assert [item["title"] for item in home] == ["Romaria"]
    everything = (await client.get("/api/banners")).json()
    assert {item["title"] for item in everything} == {"Romaria", "Guia"}


async def test_banner_window_must_not_be_inverted(app_context) -> None:
    response = await app_context["client"].post(
        "/api/admin/banners",
        json={"title": "Errado", "startDate": "2024-08-10", "endDate": "2024-08-01"},
        headers=app_context["admin_headers"],
    )
    assert response.status_code == 400


async def test_partner_changes_reach_stream_clients(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    hub = get_updates_hub()
    client_id, queue = hub.add_client()
    try:
        partner = await _create(client, headers, "partners", {"name": "Prefeitura"})
        updated = await client.put(
            f"/api/admin/partners/{partner['id']}",
            json={"website": "https://juazeiro.ce.gov.br"},
            headers=headers,
        )
        assert updated.status_code == 200
        deleted = await client.delete(f"/api/admin/partners/{partner['id']}", headers=headers)
        assert deleted.status_code == 204

        frames = [queue.get_nowait() for _ in range(queue.qsize())]
    finally:
        hub.remove_client(client_id)

    assert len(frames) == 3
    assert all('"type": "partners"' in frame for frame in frames)
    assert (await client.get("/api/partners")).json() == []


async def test_null_phone_number_is_rejected(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    phone = await _create(client, headers, "useful-phones", {"name": "Policia", "phone": "190"})
    response = await client.put(
        f"/api/admin/useful-phones/{phone['id']}", json={"phone": None}, headers=headers
    )
    assert response.status_code == 400


async def test_directory_admin_requires_admin(app_context) -> None:
    client = app_context["client"]
    response = await client.post(
        "/api/admin/partners",
        json={"name": "Bazar"},
        headers=app_context["pilgrim_headers"],
    )
    assert response.status_code == 403
