import pytest

import static_map
from api import maps
from errors import BoundaryRequestFailed


@pytest.fixture
def api_key(monkeypatch):
    monkeypatch.setattr(maps, "GOOGLE_MAPS_API_KEY", "test-key")
    return "test-key"


@pytest.fixture
def boundary(monkeypatch):
    def install(geojson=None, error=None):
        def fake(location, use_cache=True):
            if error is not None:
                raise error
            return geojson
        monkeypatch.setattr(static_map, "fetch_boundary", fake)
    return install


def test_health(client):
    resp = client.get("/api/health")
    assert resp.status_code == 200
    assert resp.get_json() == {"status": "backend up"}


def test_map_url(client, api_key, boundary, square_geojson):
    boundary(square_geojson)
    resp = client.get("/api/map_url", query_string={"name": "Leeds, England", "type": "City"})

    assert resp.status_code == 200
    url = resp.get_json()["url"]
    assert url.startswith("https://maps.googleapis.com/maps/api/staticmap?size=600x400&scale=2")
    assert "&path=" in url
    assert url.endswith("&key=test-key")


def test_map_url_rejects_unknown_type(client, api_key):
    resp = client.get("/api/map_url", query_string={"name": "Leeds", "type": "Galaxy"})
    assert resp.status_code == 400
    assert "Galaxy" in resp.get_json()["error"]


def test_map_url_requires_type(client, api_key):
    resp = client.get("/api/map_url", query_string={"name": "Leeds"})
    assert resp.status_code == 400
    assert resp.get_json() == {"error": "No location was provided."}


def test_map_url_without_configured_key(client, monkeypatch):
    monkeypatch.setattr(maps, "GOOGLE_MAPS_API_KEY", "")
    resp = client.get("/api/map_url", query_string={"name": "Leeds", "type": "City"})
    assert resp.status_code == 500
    assert resp.get_json() == {"error": "No Google Maps API key was provided."}


def test_map_url_upstream_failure(client, api_key, boundary):
    boundary(error=BoundaryRequestFailed())
    resp = client.get("/api/map_url", query_string={"name": "Leeds", "type": "City"})
    assert resp.status_code == 502
    assert resp.get_json() == {"error": "OpenStreetMap request failed."}


def test_outline(client, boundary, square_geojson):
    boundary(square_geojson)
    resp = client.get("/api/outline", query_string={"name": "Leeds"})

    assert resp.status_code == 200
    body = resp.get_json()
    assert body["points"] == 5
    assert body["rings"][0][0] == {"longitude": 0.0, "latitude": 0.0, "distance": 0.0}


def test_outline_requires_name(client):
    resp = client.get("/api/outline")
    assert resp.status_code == 400
