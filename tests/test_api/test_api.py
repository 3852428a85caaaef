"""Tests for API endpoints."""

from __future__ import annotations

from fastapi.testclient import TestClient

from svgdraw import __version__
from svgdraw.config import Settings
from svgdraw.dependencies import get_settings
from svgdraw.main import app
from tests.conftest import BROKEN_PATH_SVG, PLAN_SVG, SIGNATURE_SVG, ZERO_EXTENT_SVG


client = TestClient(app)


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["version"] == __version__


def test_parse_signature():
    response = client.post("/api/parse", json={"svg": SIGNATURE_SVG})
    assert response.status_code == 200
    doc = response.json()["document"]
    assert (doc["width"], doc["height"]) == (185, 68)
    assert [seg["cmd"] for seg in doc["paths"][0]] == ["M", "C", "L", "L"]
    assert doc["paths"][0][0]["args"] == [2, 37, 0, 0, 0, 0]


def test_parse_plan_styles_and_texts():
    response = client.post("/api/parse", json={"svg": PLAN_SVG})
    assert response.status_code == 200
    doc = response.json()["document"]
    assert doc["styles"]["wall"]["stroke"] == "#ff0000"
    assert [t["lines"] for t in doc["texts"]] == [["Kitchen"], ["Living", "Room"]]
    assert doc["texts"][1]["rotation"] == 90


def test_parse_broken_path_reported():
    response = client.post("/api/parse", json={"svg": BROKEN_PATH_SVG})
    assert response.status_code == 200
    doc = response.json()["document"]
    assert len(doc["paths"]) == 2
    assert doc["path_errors"][0]["index"] == 1


def test_parse_broken_path_strict():
    response = client.post("/api/parse", json={"svg": BROKEN_PATH_SVG, "strict": True})
    assert response.status_code == 422


def test_parse_zero_extent():
    response = client.post("/api/parse", json={"svg": ZERO_EXTENT_SVG})
    assert response.status_code == 422
    assert "extent" in response.json()["detail"]


def test_parse_not_svg():
    response = client.post("/api/parse", json={"svg": "<not-svg>"})
    assert response.status_code == 422


def test_upload_size_limit():
    app.dependency_overrides[get_settings] = lambda: Settings(svgdraw_max_upload_bytes=10)
    try:
        response = client.post("/api/parse", json={"svg": PLAN_SVG})
    finally:
        app.dependency_overrides.clear()
    assert response.status_code == 413


def test_render_ops():
    response = client.post("/api/render", json={"svg": PLAN_SVG, "origin_x": 10, "origin_y": 20})
    assert response.status_code == 200
    data = response.json()
    assert data["error"] is None
    names = [op["name"] for op in data["ops"]]
    assert names[0] == "set_line_width"
    assert names.count("polygon") == 1
    texts = [op["args"][2] for op in data["ops"] if op["name"] == "text"]
    assert texts == ["Kitchen", "Living", "Room"]


def test_render_reports_skipped_paths():
    response = client.post("/api/render", json={"svg": BROKEN_PATH_SVG})
    assert response.status_code == 200
    assert response.json()["path_errors"] == 1


def test_render_rejects_non_positive_scale():
    response = client.post("/api/render", json={"svg": PLAN_SVG, "scale": 0})
    assert response.status_code == 422


def test_render_pdf():
    response = client.post("/api/render/pdf", json={"svg": PLAN_SVG, "scale": 0.5, "origin_x": 10, "origin_y": 10})
    assert response.status_code == 200
    assert response.headers["content-type"] == "application/pdf"
    assert response.content.startswith(b"%PDF")
    assert "x-render-error" not in response.headers
