"""Field schedule API tests."""
from __future__ import annotations

import uuid

import pytest
from httpx import AsyncClient

pytestmark = pytest.mark.asyncio


async def _create_field(client: AsyncClient, code: str = "FLD-01") -> str:
    response = await client.post(
        "/api/v1/fields",
        json={"code": code, "name": "Lapangan Futsal A", "price_per_hour": 150000},
    )
    assert response.status_code == 201
    return response.json()["uuid"]


async def _create_time(client: AsyncClient, start: str, end: str) -> str:
    response = await client.post("/api/v1/times", json={"start_time": start, "end_time": end})
    assert response.status_code == 201
    return response.json()["uuid"]


async def test_schedule_lifecycle(client: AsyncClient) -> None:
    field_id = await _create_field(client)
    morning = await _create_time(client, "08:00:00", "09:00:00")
    noon = await _create_time(client, "12:00:00", "13:00:00")

    create_resp = await client.post(
        "/api/v1/field-schedules",
        json={"field_id": field_id, "date": "2025-08-17", "time_ids": [morning, noon]},
    )
    assert create_resp.status_code == 201
    body = create_resp.json()
    assert body["created"] == 2
    first_id, second_id = body["field_schedule_ids"]

    conflict_resp = await client.post(
        "/api/v1/field-schedules",
        json={"field_id": field_id, "date": "2025-08-17", "time_ids": [noon]},
    )
    assert conflict_resp.status_code == 409
    assert conflict_resp.json()["code"] == "SCHEDULE_ALREADY_EXISTS"

    booking_resp = await client.get(
        f"/api/v1/field-schedules/lists/{field_id}", params={"date": "2025-08-17"}
    )
    assert booking_resp.status_code == 200
    rows = booking_resp.json()
    assert [row["time"] for row in rows] == ["08:00:00 - 09:00:00", "12:00:00 - 13:00:00"]
    assert rows[0]["date"] == "17 Agu"
    assert rows[0]["price_per_hour"] == "Rp. 150.000"
    assert rows[0]["status"] == "available"

    status_resp = await client.patch(
        "/api/v1/field-schedules/status",
        json={"field_schedule_ids": [first_id]},
    )
    assert status_resp.status_code == 200
    assert status_resp.json() == [first_id]

    detail_resp = await client.get(f"/api/v1/field-schedules/{first_id}")
    assert detail_resp.status_code == 200
    detail = detail_resp.json()
    assert detail["status"] == "booked"
    assert detail["field_name"] == "Lapangan Futsal A"
    assert detail["date"] == "2025-08-17"

    move_conflict = await client.put(
        f"/api/v1/field-schedules/{first_id}",
        json={"date": "2025-08-17", "time_id": noon},
    )
    assert move_conflict.status_code == 409

    move_resp = await client.put(
        f"/api/v1/field-schedules/{first_id}",
        json={"date": "2025-08-18", "time_id": noon},
    )
    assert move_resp.status_code == 200
    moved = move_resp.json()
    assert moved["date"] == "2025-08-18"
    assert moved["time"] == "12:00:00 - 13:00:00"
    assert moved["status"] == "booked"

    delete_resp = await client.delete(f"/api/v1/field-schedules/{second_id}")
    assert delete_resp.status_code == 204

    missing_resp = await client.get(f"/api/v1/field-schedules/{second_id}")
    assert missing_resp.status_code == 404
    assert missing_resp.json()["code"] == "NOT_FOUND"


async def test_generate_one_month(client: AsyncClient) -> None:
    field_id = await _create_field(client)
    await _create_time(client, "08:00:00", "09:00:00")
    await _create_time(client, "09:00:00", "10:00:00")

    response = await client.post(
        "/api/v1/field-schedules/one-month", json={"field_id": field_id}
    )
    assert response.status_code == 201
    assert response.json()["created"] == 60

    again = await client.post("/api/v1/field-schedules/one-month", json={"field_id": field_id})
    assert again.status_code == 409

    listing = await client.get("/api/v1/field-schedules", params={"page": 2, "limit": 25})
    assert listing.status_code == 200
    page = listing.json()
    assert page["count"] == 60
    assert page["total_page"] == 3
    assert page["current_page"] == 2
    assert len(page["data"]) == 25


async def test_status_update_reports_partial_progress(client: AsyncClient) -> None:
    field_id = await _create_field(client)
    slot = await _create_time(client, "08:00:00", "09:00:00")
    created = await client.post(
        "/api/v1/field-schedules",
        json={"field_id": field_id, "date": "2025-03-01", "time_ids": [slot]},
    )
    booked_id = created.json()["field_schedule_ids"][0]
    missing_id = str(uuid.uuid4())

    response = await client.patch(
        "/api/v1/field-schedules/status",
        json={"field_schedule_ids": [booked_id, missing_id]},
    )
    assert response.status_code == 404
    details = response.json()["details"]
    assert details["uuid"] == missing_id
    assert details["booked"] == [booked_id]


async def test_invalid_input_is_rejected(client: AsyncClient) -> None:
    field_id = await _create_field(client)
    slot = await _create_time(client, "08:00:00", "09:00:00")

    bad_date = await client.post(
        "/api/v1/field-schedules",
        json={"field_id": field_id, "date": "2025-02-30", "time_ids": [slot]},
    )
    assert bad_date.status_code == 400
    assert bad_date.json()["code"] == "INVALID_INPUT"

    empty = await client.post(
        "/api/v1/field-schedules",
        json={"field_id": field_id, "date": "2025-03-01", "time_ids": []},
    )
    assert empty.status_code == 400

    bad_sort = await client.get("/api/v1/field-schedules", params={"sort_column": "secret"})
    assert bad_sort.status_code == 400

    unknown_field = await client.get(
        f"/api/v1/field-schedules/lists/{uuid.uuid4()}", params={"date": "2025-03-01"}
    )
    assert unknown_field.status_code == 404
