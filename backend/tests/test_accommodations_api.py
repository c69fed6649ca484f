"""Accommodation search, availability and admin inventory endpoints."""
from __future__ import annotations

import pytest

pytestmark = pytest.mark.asyncio


async def _create_accommodation(client, headers, **overrides) -> dict:
    payload = {"name": "Pousada Mae das Dores", "type": "pousada", "city": "Juazeiro"}
    payload.update(overrides)
    response = await client.post("/api/admin/accommodations", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


async def _create_room(client, headers, accommodation_id: str, **overrides) -> dict:
    payload = {"name": "Quarto", "pricePerNight": 10000, "quantity": 1}
    payload.update(overrides)
    response = await client.post(
        f"/api/admin/accommodations/{accommodation_id}/rooms", json=payload, headers=headers
    )
    assert response.status_code == 201, response.text
    return response.json()


async def _block(client, headers, room_id: str, day: str, booked: int = 1) -> None:
    response = await client.post(
        f"/api/admin/rooms/{room_id}/blocked-dates",
        json={"date": day, "bookedQuantity": booked, "reason": "reserva"},
        headers=headers,
    )
    assert response.status_code == 201, response.text


async def test_search_lists_only_free_rooms(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    full = await _create_room(client, headers, accommodation["id"], name="Suite")
    free = await _create_room(client, headers, accommodation["id"], name="Casal")
    await _block(client, headers, full["id"], "2024-08-10")

    response = await client.get(
        "/api/accommodations/search",
        params={"checkIn": "2024-08-10", "checkOut": "2024-08-12"},
    )
    assert response.status_code == 200
    body = response.json()
    assert body["checkIn"] == "2024-08-10"
    assert body["checkOut"] == "2024-08-12"
    assert len(body["accommodations"]) == 1
    hit = body["accommodations"][0]
    assert hit["id"] == accommodation["id"]
    assert [room["id"] for room in hit["availableRooms"]] == [free["id"]]
    assert body["basicAccommodations"] == []


async def test_search_omits_fully_booked_accommodations(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    room = await _create_room(client, headers, accommodation["id"])
    await _block(client, headers, room["id"], "2024-08-11")
    basic = await client.post(
        "/api/admin/basic-accommodations",
        json={"name": "Casa do Romeiro", "phone": "8830000000"},
        headers=headers,
    )
    assert basic.status_code == 201

    response = await client.get(
        "/api/accommodations/search",
        params={"checkIn": "2024-08-10", "checkOut": "2024-08-12"},
    )
    body = response.json()
    assert body["accommodations"] == []
    assert [item["name"] for item in body["basicAccommodations"]] == ["Casa do Romeiro"]


@pytest.mark.parametrize(
    "params",
    [
        {},
        {"checkIn": "2024-08-10"},
        {"checkIn": "2024-8-10", "checkOut": "2024-08-12"},
        {"checkIn": "2024-W32-6", "checkOut": "2024-08-12"},
        {"checkIn": "2024-08-12", "checkOut": "2024-08-12"},
        {"checkIn": "2024-08-13", "checkOut": "2024-08-12"},
    ],
)
async def test_search_rejects_bad_dates(app_context, params) -> None:
    response = await app_context["client"].get("/api/accommodations/search", params=params)
    assert response.status_code == 400
    assert response.json()["detail"]


async def test_availability_endpoint(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    room = await _create_room(client, headers, accommodation["id"], quantity=2)
    await _block(client, headers, room["id"], "2024-08-10", booked=2)
    await _block(client, headers, room["id"], "2024-08-11")

    url = f"/api/accommodations/{accommodation['id']}/availability"
    blocked = await client.get(url, params={"checkIn": "2024-08-09", "checkOut": "2024-08-11"})
    assert blocked.status_code == 200
    assert blocked.json()["availableRooms"] == []

    open_ = await client.get(url, params={"checkIn": "2024-08-11", "checkOut": "2024-08-12"})
    assert [item["id"] for item in open_.json()["availableRooms"]] == [room["id"]]
    assert open_.json()["accommodation"]["name"] == "Pousada Mae das Dores"


async def test_availability_of_hidden_or_missing_accommodation_is_404(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    hidden = await _create_accommodation(client, headers, published=False)
    params = {"checkIn": "2024-08-09", "checkOut": "2024-08-11"}

    response = await client.get(f"/api/accommodations/{hidden['id']}/availability", params=params)
    assert response.status_code == 404
    response = await client.get(
        "/api/accommodations/00000000-0000-0000-0000-000000000000/availability",
        params=params,
    )
    assert response.status_code == 404
    response = await client.get("/api/accommodations/not-a-uuid/availability", params=params)
    assert response.status_code == 400


async def test_unblocking_a_day_restores_availability(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    room = await _create_room(client, headers, accommodation["id"])
    await _block(client, headers, room["id"], "2024-08-10")
    await _block(client, headers, room["id"], "2024-08-10")

    listed = await client.get(f"/api/admin/rooms/{room['id']}/blocked-dates", headers=headers)
    assert [row["date"] for row in listed.json()] == ["2024-08-10", "2024-08-10"]

    removed = await client.delete(
        f"/api/admin/rooms/{room['id']}/blocked-dates/2024-08-10", headers=headers
    )
    assert removed.status_code == 200
    assert removed.json()["message"].startswith("2 ")

    response = await client.get(
        f"/api/accommodations/{accommodation['id']}/availability",
        params={"checkIn": "2024-08-10", "checkOut": "2024-08-11"},
    )
    assert len(response.json()["availableRooms"]) == 1


async def test_public_detail_hides_unpublished_rooms(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    visible = await _create_room(client, headers, accommodation["id"], pricePerNight=9000)
    await _create_room(client, headers, accommodation["id"], published=False)

    response = await client.get(f"/api/accommodations/{accommodation['id']}")
    assert response.status_code == 200
    assert [room["id"] for room in response.json()["rooms"]] == [visible["id"]]

    admin_view = await client.get(
        f"/api/admin/accommodations/{accommodation['id']}", headers=headers
    )
    assert len(admin_view.json()["rooms"]) == 2


async def test_accommodation_reviews_update_rating(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    url = f"/api/accommodations/{accommodation['id']}/reviews"

    first = await client.post(url, json={"rating": 5, "comment": "Acolhedora"})
    assert first.status_code == 201
    assert first.json()["authorName"] == "Romeiro"
    second = await client.post(
        url, json={"rating": 4}, headers=app_context["pilgrim_headers"]
    )
    assert second.json()["authorName"] == "Maria Romeira"

    detail = (await client.get(f"/api/accommodations/{accommodation['id']}")).json()
    assert detail["rating"] == "4.5"
    assert detail["reviewsCount"] == 2
    assert len((await client.get(url)).json()) == 2

    for review in (first.json(), second.json()):
        deleted = await client.delete(
            f"/api/admin/accommodations/{accommodation['id']}/reviews/{review['id']}",
            headers=headers,
        )
        assert deleted.status_code == 204

    detail = (await client.get(f"/api/accommodations/{accommodation['id']}")).json()
    assert detail["rating"] is None
    assert detail["reviewsCount"] == 0


async def test_review_rating_out_of_range_is_rejected(app_context) -> None:
    client = app_context["client"]
    accommodation = await _create_accommodation(client, app_context["admin_headers"])
    response = await client.post(
        f"/api/accommodations/{accommodation['id']}/reviews", json={"rating": 6}
    )
    assert response.status_code == 400
    assert "rating" in response.json()["detail"]


async def test_deleting_accommodation_removes_rooms(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    room = await _create_room(client, headers, accommodation["id"])
    await _block(client, headers, room["id"], "2024-08-10")

    response = await client.delete(
        f"/api/admin/accommodations/{accommodation['id']}", headers=headers
    )
    assert response.status_code == 204
    assert (await client.get(f"/api/admin/rooms/{room['id']}", headers=headers)).status_code == 404


async def test_update_room_quantity(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    room = await _create_room(client, headers, accommodation["id"])

    response = await client.put(
        f"/api/admin/rooms/{room['id']}", json={"quantity": 3}, headers=headers
    )
    assert response.status_code == 200
    assert response.json()["quantity"] == 3
    bad = await client.put(f"/api/admin/rooms/{room['id']}", json={"quantity": 0}, headers=headers)
    assert bad.status_code == 400


@pytest.mark.parametrize(
    "payload", [{"quantity": None}, {"pricePerNight": None}, {"name": None}]
)
async def test_null_for_required_room_field_is_rejected(app_context, payload) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers)
    room = await _create_room(client, headers, accommodation["id"], quantity=2)

    response = await client.put(f"/api/admin/rooms/{room['id']}", json=payload, headers=headers)
    assert response.status_code == 400
    assert "not null" in response.json()["detail"]

    unchanged = (await client.get(f"/api/admin/rooms/{room['id']}", headers=headers)).json()
    assert unchanged["quantity"] == 2
    assert unchanged["pricePerNight"] == 10000


async def test_nullable_accommodation_field_can_be_cleared(app_context) -> None:
    client = app_context["client"]
    headers = app_context["admin_headers"]
    accommodation = await _create_accommodation(client, headers, description="Perto da Matriz")

    cleared = await client.put(
        f"/api/admin/accommodations/{accommodation['id']}",
        json={"description": None},
        headers=headers,
    )
    assert cleared.status_code == 200
    assert cleared.json()["description"] is None

    rejected = await client.put(
        f"/api/admin/accommodations/{accommodation['id']}",
        json={"published": None},
        headers=headers,
    )
    assert rejected.status_code == 400
