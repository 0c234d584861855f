from __future__ import annotations

from datetime import date, timedelta
from typing import Any

from starlette.testclient import TestClient


def _iso(days_from_today: int) -> str:
    return (date.today() + timedelta(days=days_from_today)).isoformat()


def _payload(**overrides: Any) -> dict[str, Any]:
    base = {
        "guestName": "John Doe",
        "hotelName": "Grand Sunset Resort",
        "checkIn": _iso(1),
        "checkOut": _iso(3),
    }
    base.update(overrides)
    return base


def _assert_error_body(body: dict[str, Any], status: int, message: str | None = None) -> None:
    assert set(body) == {"timestamp", "status", "message"}
    assert body["status"] == status
    if message is not None:
        assert body["message"] == message


def test_list_is_empty_array_initially(client: TestClient) -> None:
    r = client.get("/api/reservations")

    assert r.status_code == 200
    assert r.headers["content-type"] == "application/json"
    assert r.json() == []


def test_create_returns_active_reservation(client: TestClient) -> None:
    r = client.post("/api/reservations", json=_payload())

    assert r.status_code == 200
    assert r.json() == {
        "id": 1,
        "guestName": "John Doe",
        "hotelName": "Grand Sunset Resort",
        "checkIn": _iso(1),
        "checkOut": _iso(3),
        "status": "ACTIVE",
    }


def test_get_by_id_and_list(client: TestClient) -> None:
    created = client.post("/api/reservations", json=_payload()).json()

    r = client.get(f"/api/reservations/{created['id']}")
    assert r.status_code == 200
    assert r.json() == created

    listed = client.get("/api/reservations").json()
    assert [item["id"] for item in listed] == [created["id"]]


def test_update_changes_fields(client: TestClient) -> None:
    created = client.post("/api/reservations", json=_payload()).json()

    r = client.put(
        f"/api/reservations/{created['id']}",
        json=_payload(guestName="Doe John", hotelName="Grand Moon Resort", checkIn=_iso(5), checkOut=_iso(11)),
    )

    assert r.status_code == 200
    body = r.json()
    assert body["id"] == created["id"]
    assert body["guestName"] == "Doe John"
    assert body["hotelName"] == "Grand Moon Resort"
    assert body["checkIn"] == _iso(5)
    assert body["status"] == "ACTIVE"


def test_delete_cancels_and_blocks_updates(client: TestClient) -> None:
    created = client.post("/api/reservations", json=_payload()).json()

    r = client.delete(f"/api/reservations/{created['id']}")
    assert r.status_code == 200
    assert r.json()["status"] == "CANCELED"

    assert client.get(f"/api/reservations/{created['id']}").json()["status"] == "CANCELED"

    r_update = client.put(f"/api/reservations/{created['id']}", json=_payload(checkIn=_iso(4), checkOut=_iso(6)))
    assert r_update.status_code == 400
    _assert_error_body(r_update.json(), 400, "Cannot modify a canceled reservation")

    r_again = client.delete(f"/api/reservations/{created['id']}")
    assert r_again.status_code == 200
    assert r_again.json()["status"] == "CANCELED"


def test_check_out_before_check_in_returns_400(client: TestClient) -> None:
    r = client.post("/api/reservations", json=_payload(checkIn=_iso(5), checkOut=_iso(3)))

    assert r.status_code == 400
    _assert_error_body(r.json(), 400, "Check-out must be after check-in")


def test_past_check_in_returns_400(client: TestClient) -> None:
    r = client.post("/api/reservations", json=_payload(checkIn=_iso(-2), checkOut=_iso(2)))

    assert r.status_code == 400
    _assert_error_body(r.json(), 400, "Check-in must be in the future")


def test_null_or_missing_dates_are_rejected_by_the_reservation_rules(client: TestClient) -> None:
    r_null = client.post("/api/reservations", json=_payload(checkIn=None))
    assert r_null.status_code == 400
    _assert_error_body(r_null.json(), 400, "Dates cannot be null")

    payload = _payload()
    del payload["checkOut"]
    r_missing = client.post("/api/reservations", json=payload)
    assert r_missing.status_code == 400
    _assert_error_body(r_missing.json(), 400, "Dates cannot be null")


def test_blank_guest_name_is_rejected_at_the_boundary(client: TestClient) -> None:
    r = client.post("/api/reservations", json=_payload(guestName="   "))

    assert r.status_code == 400
    body = r.json()
    _assert_error_body(body, 400)
    assert "guestName" in body["message"]
    assert client.get("/api/reservations").json() == []


def test_numeric_dates_are_rejected_at_the_boundary(client: TestClient) -> None:
    r = client.post("/api/reservations", json=_payload(checkIn=4102444800, checkOut=4102617600))

    assert r.status_code == 400
    body = r.json()
    _assert_error_body(body, 400)
    assert "checkIn" in body["message"]
    assert "checkOut" in body["message"]
    assert client.get("/api/reservations").json() == []


def test_missing_hotel_name_is_rejected_at_the_boundary(client: TestClient) -> None:
    payload = _payload()
    del payload["hotelName"]

    r = client.post("/api/reservations", json=payload)

    assert r.status_code == 400
    assert "hotelName" in r.json()["message"]


def test_unknown_id_returns_404_for_get_put_delete(client: TestClient) -> None:
    responses = [
        client.get("/api/reservations/99"),
        client.put("/api/reservations/99", json=_payload()),
        client.delete("/api/reservations/99"),
    ]

    for r in responses:
        assert r.status_code == 404
        _assert_error_body(r.json(), 404, "Reservation not found")


def test_non_integer_id_returns_400(client: TestClient) -> None:
    r = client.get("/api/reservations/abc")

    assert r.status_code == 400
    _assert_error_body(r.json(), 400)


def test_cors_allows_front_end_origin(client: TestClient) -> None:
    r = client.get("/api/reservations", headers={"Origin": "http://localhost:5173"})

    assert r.status_code == 200
    assert r.headers.get("access-control-allow-origin") in ("*", "http://localhost:5173")
