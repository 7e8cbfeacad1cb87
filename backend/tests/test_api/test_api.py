"""Tests for API endpoints."""

from __future__ import annotations

import io

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from questbanner.dependencies import get_compositor
from questbanner.main import app


@pytest.fixture
def client(compositor):
    app.dependency_overrides[get_compositor] = lambda: compositor
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def textless_client(textless_compositor):
    app.dependency_overrides[get_compositor] = lambda: textless_compositor
    yield TestClient(app)
    app.dependency_overrides.clear()


def test_health(client):
    response = client.get("/api/health")
    assert response.status_code == 200
    data = response.json()
    assert data["status"] == "ok"
    assert data["font_loaded"] is True


def test_health_without_font(textless_client):
    response = textless_client.get("/api/health")
    assert response.status_code == 200
    assert response.json()["font_loaded"] is False


def test_render_header(client):
    response = client.post("/api/header", json={"day": 2, "channel_name": "warroom", "role_name": "aq-team"})
    assert response.status_code == 200
    assert response.headers["content-type"] == "image/png"
    assert 'filename="aq_header.png"' in response.headers["content-disposition"]
    assert Image.open(io.BytesIO(response.content)).size == (700, 150)


def test_render_header_custom_size(client):
    response = client.post(
        "/api/header",
        json={"day": 1, "channel_name": "a", "role_name": "b", "width": 400, "height": 100},
    )
    assert response.status_code == 200
    assert Image.open(io.BytesIO(response.content)).size == (400, 100)


def test_render_header_without_font(textless_client):
    response = textless_client.post("/api/header", json={"day": 3, "channel_name": "x", "role_name": "y"})
    assert response.status_code == 200
    assert Image.open(io.BytesIO(response.content)).size == (700, 150)


@pytest.mark.parametrize(
    "body",
    [
        {"day": -1, "channel_name": "a", "role_name": "b"},
        {"day": 1, "channel_name": "a", "role_name": "b", "width": 0},
        {"day": 1, "channel_name": "a"},
    ],
)
def test_render_header_rejects_invalid_input(client, body):
    response = client.post("/api/header", json=body)
    assert response.status_code == 422
