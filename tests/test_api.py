import json

import pytest
from fastapi.testclient import TestClient

from main import app, run_pipeline
from floors import MapData

from .grids import RESTAURANT, UPPER_FLOOR


@pytest.fixture
def client():
    return TestClient(app)


def test_health(client):
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"status": "ok"}


def test_populate_returns_tile_rows(client):
    r = client.post("/populate", json={"layout": RESTAURANT, "floors": {"2": UPPER_FLOOR}, "seed": 4})
    assert r.status_code == 200
    body = r.json()
    assert len(body["layout"]) == 15
    assert body["layout"][14][10] == "E"
    assert len(body["floors"]["2"]) == 7
    assert "seed" not in body


def test_populate_same_seed_same_answer(client):
    payload = {"layout": RESTAURANT, "seed": 11}
    assert client.post("/populate", json=payload).json() == client.post("/populate", json=payload).json()


def test_populate_rejects_malformed_layout(client):
    r = client.post("/populate", json={"layout": ["#X#"]})
    assert r.status_code == 422
    assert "unknown zone symbols" in r.json()["detail"]


def test_populate_can_fall_back(client):
    r = client.post("/populate", json={"layout": ["#X#"], "fallback": True})
    assert r.status_code == 200
    assert r.json()["description"] == "Fallback Map"


def test_populate_requires_layout(client):
    assert client.post("/populate", json={"theme": "empty"}).status_code == 422


def test_run_pipeline_writes_outputs(tmp_path):
    doc = MapData(layout=list(RESTAURANT), floors={"2": list(UPPER_FLOOR)}, theme="yakitori")
    results = run_pipeline(doc, str(tmp_path), seed=5)

    with open(results["tilemap_json"], encoding="utf-8") as f:
        saved = json.load(f)
    assert saved["theme"] == "yakitori"
    assert len(saved["layout"]) == 15
    assert (tmp_path / "tilemap_preview.png").exists()
    assert (tmp_path / "tilemap_preview_floor_2.png").exists()
    assert results["preview_image_2"].endswith("tilemap_preview_floor_2.png")
