"""Tests for API endpoints."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from adcanvas.dependencies import get_text_measurer
from adcanvas.main import app
from tests.conftest import FixedAdvanceMeasurer


client = TestClient(app)

SQUARE = {"width": 1080, "height": 1080}
STORY = {"width": 1080, "height": 1920}
NO_CTA = {"cta_allowed": False}


def _synthesize(variant="left-packshot", canvas=SQUARE, content=None):
    response = client.post("/api/layout/synthesize", json={
        "variant": variant,
        "canvas": canvas,
        "content": content or {},
    })
    assert response.status_code == 200
    return response.json()["nodes"]


@pytest.fixture
def fixed_measurer():
    app.dependency_overrides[get_text_measurer] = lambda: FixedAdvanceMeasurer()
    yield
    app.dependency_overrides.clear()


def test_health():
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["layouts_registered"] == 3


def test_presets_for_platform():
    data = client.get("/api/presets", params={"platform": "TikTok"}).json()
    assert data["platform"] == "tiktok"
    assert len(data["presets"]) == 4
    assert {p["default_layout"] for p in data["presets"]} == {"center-packshot"}


def test_presets_unknown_platform_uses_default():
    data = client.get("/api/presets", params={"platform": "myspace"}).json()
    assert data["platform"] == "instagram"


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def test_synthesize_without_cta():
    nodes = _synthesize(content=NO_CTA)
    assert [n["id"] for n in nodes] == ["packshot", "logo", "brand", "offer", "headline", "subcopy", "legal"]
    headline = next(n for n in nodes if n["id"] == "headline")
    assert headline["fontSize"] == 94
    assert headline["autoFont"] is True
    assert headline["kind"] == "text"


def test_template_overrides_cta_flag():
    nodes = _synthesize(content={"template_id": "tesco_no_cta", "cta_allowed": True})
    assert "cta" not in [n["id"] for n in nodes]


def test_synthesize_rejects_bad_canvas():
    response = client.post("/api/layout/synthesize", json={"canvas": {"width": 0, "height": 100}})
    assert response.status_code == 422


def test_rescale_font():
    response = client.post("/api/layout/rescale", json={
        "nodes": [{"id": "headline", "x": 100, "y": 100, "w": 500, "h": 200, "fontSize": 60}],
        "from_canvas": SQUARE,
        "to_canvas": {"width": 1200, "height": 628},
    })
    assert response.status_code == 200
    (node,) = response.json()["nodes"]
    assert node["fontSize"] == 51
    assert node["kind"] == "text"


def test_reconcile_square_to_story():
    response = client.post("/api/layout/reconcile", json={
        "nodes": _synthesize(variant="right-packshot"),
        "from_canvas": SQUARE,
        "to_canvas": STORY,
    })
    data = response.json()
    assert data["strategy"] == "resynthesize"
    assert data["variant"] == "right-packshot"
    assert data["aspect_ratio_change"] == 0.5625


def test_move_clamps_required_role():
    response = client.post("/api/layout/move", json={
        "nodes": _synthesize(),
        "canvas": SQUARE,
        "role": "headline",
        "x": -500,
        "y": -500,
    })
    headline = next(n for n in response.json()["nodes"] if n["id"] == "headline")
    assert (headline["x"], headline["y"]) == (65, 65)


def test_resize_hands_font_to_user():
    response = client.post("/api/layout/resize", json={
        "nodes": [{"id": "subcopy", "x": 100, "y": 100, "w": 400, "h": 100, "fontSize": 40}],
        "canvas": SQUARE,
        "role": "subcopy",
        "scale_x": 0.5,
        "scale_y": 0.5,
    })
    (node,) = response.json()["nodes"]
    assert node["w"] == 200
    assert node["fontSize"] == 20
    assert node["autoFont"] is False


def test_suggest_premium():
    response = client.post("/api/layout/suggest", json={"kind": "premium", "canvas": SQUARE})
    data = response.json()
    assert data["variant"] == "center-packshot"
    assert data["style"] == "Minimal & premium"


# ---------------------------------------------------------------------------
# Compliance
# ---------------------------------------------------------------------------

def test_audit_and_fix():
    nodes = _synthesize(content=NO_CTA)
    for node in nodes:
        if node["id"] == "headline":
            node["x"] = -100
    payload = {"nodes": nodes, "canvas": SQUARE, "content": NO_CTA}

    audit = client.post("/api/compliance/audit", json=payload).json()
    assert audit["compliant"] is False
    assert [i["message"] for i in audit["issues"]] == ["headline outside safe area"]

    fix = client.post("/api/compliance/fix", json=payload).json()
    assert fix["touched"] == ["headline"]
    assert fix["issues_before"][0]["kind"] == "outside safe area"
    assert fix["issues_after"] == []


def test_audit_reports_missing():
    response = client.post("/api/compliance/audit", json={"nodes": [], "canvas": SQUARE, "content": NO_CTA})
    messages = [i["message"] for i in response.json()["issues"]]
    assert messages == ["logo missing", "brand missing", "headline missing", "subcopy missing"]


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------

def test_variants_for_platform():
    response = client.post("/api/variants", json={"platform": "IG"})
    assert response.status_code == 200
    data = response.json()
    assert data["platform"] == "instagram"
    assert len(data["variants"]) == 4
    assert {v["status"] for v in data["variants"]} == {"Compliant"}


def test_variants_from_source_with_template():
    response = client.post("/api/variants", json={
        "preset_ids": ["ig_square", "fb_feed"],
        "source_nodes": _synthesize(content=NO_CTA),
        "source_canvas": SQUARE,
        "content": {"template_id": "tesco_no_cta"},
    })
    square, feed = response.json()["variants"]
    assert square["strategy"] == "rescale"
    assert feed["strategy"] == "resynthesize"
    assert "CTA disabled by template" in square["notes"]


def test_variants_source_without_canvas_rejected():
    response = client.post("/api/variants", json={
        "preset_ids": ["ig_square"],
        "source_nodes": _synthesize(),
    })
    assert response.status_code == 422


def test_variants_default_platform_presets():
    data = client.post("/api/variants", json={"platform": "linkedin"}).json()
    assert data["platform"] == "instagram"
    assert [v["preset_id"] for v in data["variants"]] == ["ig_square", "ig_story", "ig_portrait", "fb_feed"]


def test_variants_unknown_preset():
    response = client.post("/api/variants", json={"preset_ids": ["ig_square", "nope"]})
    assert response.status_code == 404


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------

def test_fit_text(fixed_measurer):
    response = client.post("/api/text/fit", json={
        "text": "Hello world",
        "width": 500,
        "height": 100,
        "start_size": 40,
    })
    assert response.json() == {"font_size": 40, "at_floor": False}


def test_fit_text_floor(fixed_measurer):
    response = client.post("/api/text/fit", json={
        "text": "Fresh deals every week across the whole store",
        "width": 50,
        "height": 20,
        "start_size": 80,
        "min_size": 18,
    })
    assert response.json() == {"font_size": 18, "at_floor": True}
