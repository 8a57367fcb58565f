"""
Tests for the HTTP API.
"""
import pytest
from fastapi.testclient import TestClient

from api_server import app


@pytest.fixture
def client():
    return TestClient(app)


def test_geometry(client):
    body = client.get("/api/geometry").json()
    assert body["map_height_max_zoom_px"] == 364544
    assert body["offset_y"] == 6208
    assert body["default_zoom"] == 8


def test_world_to_projected(client):
    r = client.post("/api/transform/world-to-projected", json={"x": 3222, "y": 3218})
    assert r.status_code == 200
    assert r.json() == {"x": 70344.0, "y": 460224.0}


def test_centered_round_trip(client):
    point = client.post(
        "/api/transform/world-to-projected", json={"x": 3222, "y": 3218, "centered": True}
    ).json()
    r = client.post("/api/transform/projected-to-world", json={**point, "z": 1})
    assert r.json() == {"x": 3222, "y": 3218, "z": 1}


def test_geo_round_trip(client):
    geo = client.post(
        "/api/transform/world-to-geo", json={"x": 3222, "y": 3218, "centered": True}
    ).json()
    r = client.post("/api/transform/geo-to-world", json={"lat": geo["lat"], "lng": geo["lng"]})
    assert r.json() == {"x": 3222, "y": 3218, "z": 0}


def test_projected_to_world_validates_body(client):
    r = client.post("/api/transform/projected-to-world", json={"x": "west"})
    assert r.status_code == 422


def test_region_at(client):
    body = client.get("/api/regions/at", params={"x": 3222, "y": 3218}).json()
    assert body["region"] == {"id": 12850, "x": 3200, "y": 3200}
    assert body["local"] == {"x": 22, "y": 18}


def test_region_by_id(client):
    body = client.get("/api/regions/12850").json()
    assert body["base"] == {"x": 3200, "y": 3200}
    assert body["north_east"] == {"x": 3263, "y": 3263}
    assert body["valid"] is True


def test_negative_region_not_found(client):
    assert client.get("/api/regions/-1").status_code == 404


def test_bounds_check(client):
    body = client.get("/api/bounds/check", params={"x": 500, "y": 500}).json()
    assert body["valid"] is False
    assert body["clamped"] == {"x": 1024, "y": 1216}


def test_distance(client):
    r = client.post("/api/distance", json={"a": {"x": 3200, "y": 3200}, "b": {"x": 3300, "y": 3200}})
    assert r.json() == {"distance": 100.0}


def test_tile_template_by_layer(client):
    body = client.get("/api/tiles/template", params={"layer": "floor1"}).json()
    assert body["plane"] == 1
    assert body["layer"] == "floor1"
    assert "/master/1/{z}/{x}/{y}.png" in body["template"]


def test_tile_template_default_plane(client):
    body = client.get("/api/tiles/template").json()
    assert body["plane"] == 0
    assert body["layer"] == "surface"


def test_tile_template_unknown_layer(client):
    r = client.get("/api/tiles/template", params={"layer": "dungeon"})
    assert r.status_code == 400
    assert "Unknown layer" in r.json()["detail"]


def test_surface_zoom(client):
    body = client.get("/api/surface").json()
    assert body == {"zoom": 8, "max_zoom": 11}


def test_tile_url(client):
    body = client.get("/api/tiles/url", params={"x": 12, "y": 34, "zoom": 9, "layer": "floor2"}).json()
    assert body["plane"] == 2
    assert body["zoom"] == 9
    assert body["url"].endswith("/master/2/9/12/34.png")


def test_tile_url_defaults_to_surface_zoom(client):
    body = client.get("/api/tiles/url", params={"x": 1, "y": 2}).json()
    assert body["zoom"] == 8
    assert body["url"].endswith("/master/0/8/1/2.png")


def test_tile_url_rejects_unsupported_zoom(client):
    assert client.get("/api/tiles/url", params={"x": 1, "y": 2, "zoom": 12}).status_code == 400


def test_main_uses_settings_host_and_port(monkeypatch):
    import api_server

    calls = []
    monkeypatch.setattr(api_server.uvicorn, "run", lambda app, **kwargs: calls.append((app, kwargs)))
    monkeypatch.setitem(api_server.settings, "api_host", "0.0.0.0")
    monkeypatch.setitem(api_server.settings, "api_port", 9001)
    api_server.main()
    assert calls == [(api_server.app, {"host": "0.0.0.0", "port": 9001})]
