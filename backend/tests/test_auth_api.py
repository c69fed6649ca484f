"""Registration, login and profile endpoints."""
from __future__ import annotations

import pytest

pytestmark = pytest.mark.asyncio


def _registration(**overrides: object) -> dict[str, object]:
    payload: dict[str, object] = {
        "name": "Joao Peregrino",
        "email": "Joao@Example.com",
        "phone": "88999990000",
        "password": "segredo1",
        "confirmPassword": "segredo1",
        "city": "Fortaleza",
        "state": "CE",
        "receiveNews": True,
        "acceptedTerms": True,
    }
    payload.update(overrides)
    return payload


async def test_register_then_login_and_read_profile(app_context) -> None:
    client = app_context["client"]

    response = await client.post("/api/auth/register", json=_registration())
    assert response.status_code == 201, response.text
    body = response.json()
    assert body["user"]["email"] == "joao@example.com"
    assert body["user"]["receiveNews"] is True
    assert body["user"]["role"] == "pilgrim"
    assert "hashedPassword" not in body["user"]

    token_response = await client.post(
        "/api/auth/token",
        data={"username": "joao@example.com", "password": "segredo1"},
    )
    assert token_response.status_code == 200
    token = token_response.json()["access_token"]

    me = await client.get("/api/users/me", headers={"Authorization": f"Bearer {token}"})
    assert me.status_code == 200
    assert me.json()["name"] == "Joao Peregrino"


async def test_register_duplicate_email_conflicts(app_context) -> None:
    client = app_context["client"]
    response = await client.post(
        "/api/auth/register", json=_registration(email="MARIA@example.com")
    )
    assert response.status_code == 409


async def test_register_rejects_mismatched_passwords(app_context) -> None:
    client = app_context["client"]
    response = await client.post(
        "/api/auth/register", json=_registration(confirmPassword="outra-senha")
    )
    assert response.status_code == 400
    assert "Passwords do not match" in response.json()["detail"]


async def test_register_requires_terms(app_context) -> None:
    client = app_context["client"]
    response = await client.post(
        "/api/auth/register", json=_registration(acceptedTerms=False)
    )
    assert response.status_code == 400


async def test_login_with_wrong_password_is_unauthorized(app_context) -> None:
    client = app_context["client"]
    response = await client.post(
        "/api/auth/token",
        data={"username": app_context["pilgrim_email"], "password": "wrong"},
    )
    assert response.status_code == 401


async def test_profile_requires_token(app_context) -> None:
    client = app_context["client"]
    assert (await client.get("/api/users/me")).status_code == 401
    bad = await client.get("/api/users/me", headers={"Authorization": "Bearer nope"})
    assert bad.status_code == 401


async def test_update_profile(app_context) -> None:
    client = app_context["client"]
    response = await client.patch(
        "/api/users/me",
        json={"city": "Juazeiro do Norte", "receiveNews": True},
        headers=app_context["pilgrim_headers"],
    )
    assert response.status_code == 200
    body = response.json()
    assert body["city"] == "Juazeiro do Norte"
    assert body["receiveNews"] is True


async def test_update_profile_to_taken_email_conflicts(app_context) -> None:
    client = app_context["client"]
    response = await client.patch(
        "/api/users/me",
        json={"email": "admin@example.com"},
        headers=app_context["pilgrim_headers"],
    )
    assert response.status_code == 409


async def test_admin_routes_reject_pilgrims(app_context) -> None:
    client = app_context["client"]
    response = await client.get("/api/admin/stats", headers=app_context["pilgrim_headers"])
    assert response.status_code == 403
    response = await client.get("/api/admin/stats", headers=app_context["admin_headers"])
    assert response.status_code == 200
    assert response.json()["users"] == 2
