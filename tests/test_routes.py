"""Tests for the HTTP API."""

import pytest
from fastapi.testclient import TestClient

from vikings import storage
from vikings.app import create_app

PAYLOAD = {
    "appearance": 15032704,
    "boots": 40, "speed": 5,
    "bottoms": 70, "stamina": 55,
    "helmet": 10, "intelligence": 60,
    "shield": 50, "defence": 91,
    "weapon": 99, "attack": 97,
}


@pytest.fixture
def client(settings) -> TestClient:
    return TestClient(create_app(settings))


def test_health(client):
    assert client.get("/api/health").json() == {"status": "ok"}


# ── Vikings ──────────────────────────────────────────────


def test_create_viking(client):
    resp = client.post("/api/vikings/8", json=PAYLOAD)
    assert resp.status_code == 201
    body = resp.json()
    assert body["number"] == 8
    assert body["boots_name"] == "Basic"
    assert storage.get_viking(8) is not None


def test_create_duplicate_conflicts(client):
    client.post("/api/vikings/8", json=PAYLOAD)
    resp = client.post("/api/vikings/8", json=PAYLOAD)
    assert resp.status_code == 409


def test_create_out_of_range_payload(client):
    resp = client.post("/api/vikings/8", json={**PAYLOAD, "attack": 120})
    assert resp.status_code == 422


def test_create_malformed_appearance(client):
    resp = client.post("/api/vikings/8", json={**PAYLOAD, "appearance": 123456789})
    assert resp.status_code == 422
    assert "appearance" in resp.json()["detail"]


def test_create_missing_assets(settings, tmp_path):
    client = TestClient(create_app(settings.model_copy(update={"parts_root": tmp_path})))
    resp = client.post("/api/vikings/8", json=PAYLOAD)
    assert resp.status_code == 500
    detail = resp.json()["detail"]
    assert any(p.endswith("body_devil.png") for p in detail["paths"])
    assert storage.get_viking(8) is None


def test_get_viking_metadata(client):
    client.post("/api/vikings/8", json=PAYLOAD)
    resp = client.get("/api/vikings/8")
    assert resp.status_code == 200
    body = resp.json()
    assert body["external_link"] == "http://vikings.test/viking/8"
    assert body["attributes"][0] == {"trait_type": "Beard", "value": "01"}
    assert body["attributes"][-1] == {"trait_type": "Attack", "value": 97, "max_value": 99}


def test_get_viking_metadata_select(client):
    client.post("/api/vikings/8", json=PAYLOAD)
    assert set(client.get("/api/vikings/8?select=name,image").json()) == {"name", "image"}
    omitted = client.get("/api/vikings/8?select=-attributes").json()
    assert "attributes" not in omitted
    assert "name" in omitted


def test_get_viking_not_found(client):
    assert client.get("/api/vikings/99").status_code == 404


def test_list_vikings(client):
    client.post("/api/vikings/3", json=PAYLOAD)
    client.post("/api/vikings/1", json=PAYLOAD)
    resp = client.get("/api/vikings?select=number")
    assert resp.json() == [{"number": 1}, {"number": 3}]


def test_static_image_served(client):
    client.post("/api/vikings/8", json=PAYLOAD)
    resp = client.get("/api/static/viking_8.png")
    assert resp.status_code == 200
    assert resp.headers["content-type"] == "image/png"


# ── Admin ────────────────────────────────────────────────


def test_admin_make_and_stats(client):
    resp = client.post("/api/admin/make/12?seed=5")
    assert resp.status_code == 200
    report = resp.json()
    assert sorted(report["created"]) == list(range(12))
    assert report["failed"] == {}

    stats = client.get("/api/admin/stats").json()
    assert stats["total"] == 12
    assert stats["body_names"]["total"]["count"] == 12


def test_admin_make_with_start_offset(client):
    client.post("/api/admin/make/2?start=100&seed=1")
    assert [r["number"] for r in storage.list_vikings()] == [100, 101]


def test_admin_reset(client):
    client.post("/api/admin/make/3?seed=2")
    resp = client.post("/api/admin/reset")
    assert resp.json() == {"ok": True, "deleted": 3}
    assert storage.list_vikings() == []
    assert list(storage.images_dir().iterdir()) == []
