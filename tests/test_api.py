import pytest
from fastapi.testclient import TestClient

from src.geolocator.main import create_app


@pytest.fixture
def client():
    return TestClient(create_app())


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}
    assert client.get("/api/health/gazetteer").json() == {"regions": 26, "localities": 22}


def test_resolve_locality(client):
    response = client.post("/api/geocode/resolve", json={"address": "Kariakoo Market, Ilala", "region": "Dar es Salaam"})

    assert response.status_code == 200
    body = response.json()
    assert body["matched_name"] == "Ilala"
    assert body["matched_kind"] == "locality"
    assert body["confidence"] == 85
    assert abs(body["latitude"] - -6.8161) <= 0.01
    assert abs(body["longitude"] - 39.2803) <= 0.01


def test_resolve_is_reproducible_with_default_jitter(client):
    payload = {"address": "roadside kiosk", "region": "Katavi"}

    first = client.post("/api/geocode/resolve", json=payload).json()
    second = client.post("/api/geocode/resolve", json=payload).json()

    assert first == second
    assert first["confidence"] == 60


def test_resolve_unresolved_returns_404(client):
    response = client.post("/api/geocode/resolve", json={"address": "kiosk", "region": "Atlantis"})

    assert response.status_code == 404
    assert "UnresolvedLocation" in response.json()["detail"]


def test_resolve_invalid_returns_422(client):
    response = client.post("/api/geocode/resolve", json={"address": " ", "region": ""})

    assert response.status_code == 422


def test_batch_reports_errors_per_index(client):
    payload = {
        "items": [
            {"address": "Kariakoo Market, Ilala", "region": "Dar es Salaam"},
            {"address": "", "region": ""},
            {"address": "kiosk", "region": "Atlantis"},
            {"address": "roadside kiosk", "region": "Katavi"},
        ]
    }

    response = client.post("/api/geocode/batch", json=payload)

    assert response.status_code == 200
    body = response.json()
    assert len(body["results"]) == 4
    assert body["results"][0]["matched_name"] == "Ilala"
    assert body["results"][1] is None
    assert body["results"][2] is None
    assert body["results"][3]["matched_name"] == "Katavi"
    assert list(body["errors"]) == ["1"]
    assert body["resolved"] == 2


def test_reverse_strict_and_approx(client):
    strict = client.get("/api/geocode/reverse", params={"lat": -6.80, "lon": 39.25, "mode": "strict"})
    approx = client.get("/api/geocode/reverse", params={"lat": -6.80, "lon": 39.25})

    assert strict.status_code == 200
    assert strict.json()["region"] == "Dar es Salaam"
    assert strict.json()["confidence"] == 90
    assert approx.json()["confidence"] == 95


def test_reverse_unclassified_returns_404(client):
    response = client.get("/api/geocode/reverse", params={"lat": -15.0, "lon": 39.0})

    assert response.status_code == 404


def test_reverse_rejects_unknown_mode(client):
    response = client.get("/api/geocode/reverse", params={"lat": -6.8, "lon": 39.25, "mode": "fuzzy"})

    assert response.status_code == 422


def test_distance_endpoint(client):
    response = client.get("/api/geocode/distance", params={"lat1": 0, "lon1": 0, "lat2": 0, "lon2": 1})

    assert response.json()["distance_km"] == pytest.approx(111.195, abs=1e-3)


def test_bounds_endpoint(client):
    inside = client.get("/api/geocode/bounds", params={"lat": -6.7924, "lon": 39.2083}).json()
    outside = client.get("/api/geocode/bounds", params={"lat": -15.0, "lon": 39.0}).json()

    assert inside["within_bounds"] is True
    assert outside["within_bounds"] is False
    assert outside["bounds"] == {"south": -11.75, "west": 29.3, "north": -0.95, "east": 40.5}


def test_regions_endpoint_lists_table_order(client):
    regions = client.get("/api/geocode/regions").json()

    assert len(regions) == 26
    assert regions[0] == {"name": "Dar es Salaam", "latitude": -6.7924, "longitude": 39.2083}


@pytest.mark.parametrize(
    "params",
    [
        {"lat1": "nan", "lon1": 0, "lat2": 0, "lon2": 1},
        {"lat1": 0, "lon1": 0, "lat2": 0, "lon2": "inf"},
    ],
)
def test_distance_rejects_non_finite_coordinates(client, params):
    response = client.get("/api/geocode/distance", params=params)

    assert response.status_code == 422


@pytest.mark.parametrize("params", [{"lat": "nan", "lon": 39.0}, {"lat": -6.8, "lon": "-inf"}])
def test_bounds_rejects_non_finite_coordinates(client, params):
    response = client.get("/api/geocode/bounds", params=params)

    assert response.status_code == 422
