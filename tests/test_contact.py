# tests/test_contact.py

from tennisbot_api.app.core import kv_store
from tennisbot_api.app.core.config import settings

API = settings.api_prefix


def test_create_inquiry_defaults_subject(client) -> None:
    response = client.post(
        f"{API}/contact",
        json={"name": "Rafael", "email": "rafael@example.com", "message": "Do you ship to Spain?"},
    )
    assert response.status_code == 201
    data = response.json()
    assert data["success"] is True
    assert data["inquiryId"].startswith("inquiry_")

    stored = kv_store.get_value(f"inquiry:{data['inquiryId']}")
    assert stored["subject"] == "General Inquiry"
    assert stored["status"] == "new"
    assert kv_store.get_value("inquiries:all") == [data["inquiryId"]]


def test_create_inquiry_keeps_subject(client) -> None:
    response = client.post(
        f"{API}/contact",
        json={
            "name": "Rafael",
            "email": "rafael@example.com",
            "subject": "Bulk pricing",
            "message": "Ten units?",
        },
    )
    stored = kv_store.get_value(f"inquiry:{response.json()['inquiryId']}")
    assert stored["subject"] == "Bulk pricing"


def test_create_inquiry_requires_message(client) -> None:
    response = client.post(
        f"{API}/contact",
        json={"name": "Rafael", "email": "rafael@example.com"},
    )
    assert response.status_code == 400
    assert response.json() == {"error": "Missing required fields: name, email, message"}
    assert kv_store.get_value("inquiries:all") is None


def test_blank_subject_defaults(client) -> None:
    response = client.post(
        f"{API}/contact",
        json={
            "name": "Rafael",
            "email": "rafael@example.com",
            "subject": "   ",
            "message": "Hello",
        },
    )
    assert response.status_code == 201
    stored = kv_store.get_value(f"inquiry:{response.json()['inquiryId']}")
    assert stored["subject"] == "General Inquiry"
