import asyncio

import pytest
from fastapi.testclient import TestClient

from noise_api.core.database import DatabaseManager
from noise_api import main
from noise_api.main import app


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


def test_root_returns_hello_world(client):
    response = client.get("/")
    assert response.status_code == 200
    assert response.text == "Hello World!"


@pytest.mark.parametrize(
    "kwargs",
    [
        {},
        {"json": {"anything": [1, 2, 3]}},
        {"content": b"\x00\xff not json"},
        {"files": {"file": ("street.mp3", b"ID3\x03", "audio/mpeg")}, "data": {"location": "Park"}},
    ],
)
def test_upload_always_returns_201(client, kwargs):
    response = client.post("/upload", **kwargs)
    assert response.status_code == 201
    assert response.json() == {"message": "File uploaded successfully"}


def test_health_reports_database_state(client):
    response = client.get("/health")
    assert response.status_code == 200
    body = response.json()
    assert body["status"] == "healthy"
    assert body["services"]["database"] in {"connected", "unavailable"}


def test_startup_opens_database_handle(client):
    assert app.state.db is not None


def test_database_connects_off_the_event_loop(monkeypatch):
    seen = {}

    def fake_connect_db():
        try:
            asyncio.get_running_loop()
            seen["in_loop"] = True
        except RuntimeError:
            seen["in_loop"] = False
        return DatabaseManager(None)

    monkeypatch.setattr(main, "connect_db", fake_connect_db)

    with TestClient(app):
        pass

    assert seen == {"in_loop": False}
