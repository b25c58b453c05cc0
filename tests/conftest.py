# tests/conftest.py
from datetime import datetime

import pytest
from fastapi.testclient import TestClient

from tennisbot_api.app.core.config import settings
from tennisbot_api.app.core.db import init_db
from tennisbot_api.app.main import app

API = settings.api_prefix


@pytest.fixture(autouse=True)
def database(tmp_path, monkeypatch):
    """Point the key-value store at a fresh SQLite file for every test."""
    monkeypatch.setattr(settings, "database_url", str(tmp_path / "tennisbot-test.db"))
    monkeypatch.setattr(settings, "admin_token", "")
    init_db()
    yield


@pytest.fixture
def client():
    # Entering the context runs the startup handler (migrations).
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def order_payload():
    return {
        "name": "Serena Smith",
        "email": "serena@example.com",
        "phone": "+1 555 0100",
        "organization": "Riverside Tennis Club",
        "message": "Two units if possible.",
    }


@pytest.fixture
def place_order(client, order_payload):
    """Create an order through the API and return its id."""

    def _place(**overrides):
        response = client.post(f"{API}/orders", json={**order_payload, **overrides})
        assert response.status_code == 201, response.text
        return response.json()["orderId"]

    return _place


def parse_timestamp(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00"))
