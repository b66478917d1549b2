from fastapi.testclient import TestClient

from smartcampus.config import Config
from smartcampus.main import app_factory


ROOM_FIELDS = {
    "id",
    "name",
    "building",
    "floor",
    "capacity",
    "roomType",
    "available",
    "nfcTagId",
}


def test_list_rooms_returns_seed_rooms_in_order(client: TestClient):
    response = client.get("/api/rooms")
    assert response.status_code == 200
    data = response.json()
    assert [room["id"] for room in data] == [1, 2, 3, 4]
    assert set(data[0]) == ROOM_FIELDS
    assert data[0] == {
        "id": 1,
        "name": "305",
        "building": "Корпус 5",
        "floor": 3,
        "capacity": 30,
        "roomType": "LECTURE",
        "available": True,
        "nfcTagId": "NFC001",
    }


def test_list_available_filters_occupied(client: TestClient):
    all_rooms = client.get("/api/rooms").json()
    response = client.get("/api/rooms/available")
    assert response.status_code == 200
    assert response.json() == [room for room in all_rooms if room["available"]]
    assert [room["id"] for room in response.json()] == [1, 3, 4]


def test_get_room(client: TestClient):
    response = client.get("/api/rooms/3")
    assert response.status_code == 200
    assert response.json()["name"] == "401"


def test_get_missing_room_returns_404(client: TestClient):
    response = client.get("/api/rooms/99")
    assert response.status_code == 404
    assert response.json() == {"error": "Room not found", "id": 99}


def test_stats_on_seed_registry(client: TestClient):
    response = client.get("/api/rooms/stats")
    assert response.status_code == 200
    assert response.json() == {
        "total": 4,
        "available": 3,
        "occupied": 1,
        "occupancyRate": 25.0,
    }


def test_health(client: TestClient):
    response = client.get("/api/rooms/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "OK"
    assert data["rooms"] == 4
    assert isinstance(data["timestamp"], int)


def test_open_room_then_conflict(client: TestClient):
    response = client.post("/api/rooms/open/NFC001")
    assert response.status_code == 200
    assert response.json() == {
        "status": "OK",
        "message": "Room 305 opened successfully",
        "roomId": 1,
        "roomName": "305",
    }
    assert client.get("/api/rooms/1").json()["available"] is False

    response = client.post("/api/rooms/open/NFC001")
    assert response.status_code == 409
    assert response.json() == {
        "status": "CONFLICT",
        "message": "Room already occupied",
        "roomId": 1,
    }


def test_open_occupied_room_conflicts_immediately(client: TestClient):
    response = client.post("/api/rooms/open/NFC002")
    assert response.status_code == 409
    assert response.json()["roomId"] == 2
    assert client.get("/api/rooms/2").json()["available"] is False


def test_open_unknown_tag_returns_404(client: TestClient):
    before = client.get("/api/rooms").json()

    response = client.post("/api/rooms/open/nfc001")

    assert response.status_code == 404
    assert response.json() == {
        "status": "NOT_FOUND",
        "message": "NFC tag not linked to any room",
        "nfcTagId": "nfc001",
    }
    assert client.get("/api/rooms").json() == before


def test_update_availability(client: TestClient):
    response = client.patch("/api/rooms/2/availability", params={"isAvailable": "true"})
    assert response.status_code == 200
    assert response.json()["available"] is True

    response = client.patch("/api/rooms/2/availability", params={"isAvailable": "true"})
    assert response.status_code == 200
    assert response.json()["available"] is True


def test_update_availability_missing_room(client: TestClient):
    response = client.patch(
        "/api/rooms/42/availability", params={"isAvailable": "false"}
    )
    assert response.status_code == 404
    assert response.json() == {"error": "Room not found", "id": 42}


def test_update_availability_requires_flag(client: TestClient):
    response = client.patch("/api/rooms/1/availability")
    assert response.status_code == 422


def test_create_room_assigns_next_id(client: TestClient):
    response = client.post("/api/rooms", json={"name": "500"})
    assert response.status_code == 201
    data = response.json()
    assert data["id"] == 5
    assert data["name"] == "500"
    assert data["available"] is True
    assert client.get("/api/rooms/5").json() == data


def test_create_room_ignores_client_id_and_reads_camel_case(client: TestClient):
    response = client.post(
        "/api/rooms",
        json={
            "id": 77,
            "name": "101",
            "building": "Корпус 1",
            "floor": 1,
            "capacity": 12,
            "roomType": "LAB",
            "available": False,
            "nfcTagId": "NFC101",
        },
    )
    assert response.status_code == 201
    assert response.json() == {
        "id": 5,
        "name": "101",
        "building": "Корпус 1",
        "floor": 1,
        "capacity": 12,
        "roomType": "LAB",
        "available": False,
        "nfcTagId": "NFC101",
    }
    assert client.get("/api/rooms/77").status_code == 404


def test_create_room_with_blank_name_is_rejected(client: TestClient):
    for body in ({"name": "   "}, {"name": ""}, {"building": "Корпус 5"}):
        response = client.post("/api/rooms", json=body)
        assert response.status_code == 400
        assert response.json() == {"error": "Room name cannot be empty"}

    assert len(client.get("/api/rooms").json()) == 4


def test_delete_room(client: TestClient):
    response = client.delete("/api/rooms/4")
    assert response.status_code == 200
    assert response.json() == {"status": "OK", "message": "Room deleted", "id": 4}
    assert client.get("/api/rooms/4").status_code == 404
    assert len(client.get("/api/rooms").json()) == 3

    response = client.delete("/api/rooms/4")
    assert response.status_code == 404


def test_create_after_delete_uses_max_id():
    with TestClient(app_factory(Config())) as client:
        client.delete("/api/rooms/2")
        response = client.post("/api/rooms", json={"name": "600"})
        assert response.json()["id"] == 5


def test_empty_registry():
    with TestClient(app_factory(Config(seed_rooms=False))) as client:
        assert client.get("/api/rooms").json() == []
        assert client.get("/api/rooms/stats").json() == {
            "total": 0,
            "available": 0,
            "occupied": 0,
            "occupancyRate": 0.0,
        }
        response = client.post("/api/rooms", json={"name": "1"})
        assert response.json()["id"] == 1


def test_cors_allows_any_origin(client: TestClient):
    response = client.get("/api/rooms", headers={"Origin": "http://example.com"})
    assert response.headers["access-control-allow-origin"] == "*"
