"""API tests: posicoes endpoints."""
import pytest

from repositories.vehicle_repository import create_vehicle

pytestmark = pytest.mark.api


@pytest.fixture
def vehicle_id(db_session):
    """Create vehicle 5 for position tests."""
    create_vehicle(db_session, vehicle_id=5, name="Bus", model="M")
    return 5


def _only_position(client) -> dict:
    data = client.get("/posicoes").json()
    assert len(data) == 1
    return data[0]


def test_create_position_success(client, vehicle_id):
    """POST /posicoes returns 201 and the position gets a generated id."""
    r = client.post("/posicoes", json={"latitude": -19.9, "longitude": -43.9, "vehicleId": vehicle_id})
    assert r.status_code == 201
    assert r.json() == {"message": "Posição adicionada com sucesso!"}
    position = _only_position(client)
    assert isinstance(position["id"], int)
    assert (position["latitude"], position["longitude"], position["vehicle_id"]) == (-19.9, -43.9, vehicle_id)
    assert client.get(f"/posicoes/{position['id']}").json() == position


def test_create_position_unknown_vehicle_400(client):
    """POST /posicoes for an unknown vehicle returns 400 and writes nothing."""
    r = client.post("/posicoes", json={"latitude": 0, "longitude": 0, "vehicleId": 404})
    assert r.status_code == 400
    assert r.json() == {"message": "Veículo não encontrado!"}
    assert client.get("/posicoes").json() == []


def test_create_position_requires_vehicle(client):
    """vehicleId is required on create."""
    r = client.post("/posicoes", json={"latitude": 0, "longitude": 0})
    assert r.status_code == 400
    assert r.json()["message"] == "Validation failed"


def test_update_position_longitude(client, vehicle_id):
    """PUT /posicoes/{id} updates the sent fields, longitude included."""
    client.post("/posicoes", json={"latitude": 1.0, "longitude": 2.0, "vehicleId": vehicle_id})
    position_id = _only_position(client)["id"]
    r = client.put(f"/posicoes/{position_id}", json={"longitude": 3.5})
    assert r.status_code == 200
    assert r.json() == {"message": "Posição atualizada com sucesso!"}
    updated = client.get(f"/posicoes/{position_id}").json()
    assert (updated["latitude"], updated["longitude"]) == (1.0, 3.5)


def test_update_position_unknown_vehicle_400(client, vehicle_id):
    """PUT /posicoes/{id} pointing at an unknown vehicle returns 400."""
    client.post("/posicoes", json={"latitude": 1.0, "longitude": 2.0, "vehicleId": vehicle_id})
    position_id = _only_position(client)["id"]
    r = client.put(f"/posicoes/{position_id}", json={"vehicleId": 404})
    assert r.status_code == 400
    assert client.get(f"/posicoes/{position_id}").json()["vehicle_id"] == vehicle_id


def test_get_position_not_found_400(client):
    """GET /posicoes/{id} for unknown id returns 400."""
    r = client.get("/posicoes/1")
    assert r.status_code == 400
    assert r.json() == {"message": "Posição não encontrada!"}


def test_delete_position(client, vehicle_id):
    """DELETE /posicoes/{id} returns 204; deleting again returns 400."""
    client.post("/posicoes", json={"latitude": 1.0, "longitude": 2.0, "vehicleId": vehicle_id})
    position_id = _only_position(client)["id"]
    assert client.delete(f"/posicoes/{position_id}").status_code == 204
    assert client.delete(f"/posicoes/{position_id}").status_code == 400


def test_create_position_non_finite_400(client, vehicle_id):
    """Non-finite coordinates are validation errors and write nothing."""
    r = client.post(
        "/posicoes",
        content='{"latitude": NaN, "longitude": -Infinity, "vehicleId": 5}',
        headers={"Content-Type": "application/json"},
    )
    assert r.status_code == 400
    assert r.json()["message"] == "Validation failed"
    assert client.get("/posicoes").json() == []


def test_position_ids_out_of_range_400(client):
    """vehicleId and path ids beyond the 64-bit range are validation errors."""
    r = client.post("/posicoes", json={"latitude": 0, "longitude": 0, "vehicleId": 2**70})
    assert r.status_code == 400
    assert client.get(f"/posicoes/{2**70}").status_code == 400
