"""Chat Session API Tests (FastAPI TestClient)."""

import httpx
import pytest
from fastapi.testclient import TestClient

from raid_chat.infrastructure.integrations.raid_api import RAIDApiHttpClient
from raid_chat.infrastructure.session import InMemorySessionStore
from raid_chat.main import create_app
from raid_chat.setup.dependencies import get_raid_api_client, get_session_store

BASE = "/api/v1/chat/sessions"


def _backend(request: httpx.Request) -> httpx.Response:
    if request.method == "POST" and request.url.path == "/projects/PRJ/raid":
        return httpx.Response(
            201,
            json={
                "id": "raid-9",
                "type": "risk",
                "title": "Vendor delay",
                "description": "Supplier may slip",
                "status": "open",
                "priority": "medium",
            },
        )
    if request.method == "GET" and request.url.path == "/projects/PRJ/raid":
        return httpx.Response(200, json={"items": [], "total": 0})
    return httpx.Response(404, json={"detail": "Not found"})


@pytest.fixture
def client(monkeypatch) -> TestClient:
    monkeypatch.setenv("RAID_CHAT_COLLECT_OPTIONAL_FIELDS", "false")
    store = InMemorySessionStore()
    api_client = RAIDApiHttpClient(base_url="http://raid.test", transport=httpx.MockTransport(_backend))

    app = create_app()
    app.dependency_overrides[get_session_store] = lambda: store
    app.dependency_overrides[get_raid_api_client] = lambda: api_client

    with TestClient(app) as test_client:
        yield test_client


def _open_session(client: TestClient) -> str:
    response = client.post(BASE, json={"project_key": "PRJ"})
    assert response.status_code == 201
    return response.json()["session_id"]


class TestSessions:
    def test_create_session_greets(self, client: TestClient) -> None:
        response = client.post(BASE, json={"project_key": "PRJ"})

        assert response.status_code == 201
        body = response.json()
        assert body["project_key"] == "PRJ"
        assert len(body["messages"]) == 1
        assert body["messages"][0]["role"] == "assistant"
        assert "**PRJ**" in body["messages"][0]["content"]
        assert body["conversation"] is None

    def test_create_session_requires_project_key(self, client: TestClient) -> None:
        response = client.post(BASE, json={"project_key": ""})
        assert response.status_code == 422

    def test_unknown_session(self, client: TestClient) -> None:
        response = client.get(f"{BASE}/missing")

        assert response.status_code == 404
        assert response.json() == {"detail": "Session not found", "code": "SESSION_NOT_FOUND"}


class TestMessages:
    def test_empty_message(self, client: TestClient) -> None:
        session_id = _open_session(client)

        response = client.post(f"{BASE}/{session_id}/messages", json={"message": "  "})

        assert response.status_code == 400
        assert response.json()["code"] == "MESSAGE_REQUIRED"

    def test_message_to_unknown_session(self, client: TestClient) -> None:
        response = client.post(f"{BASE}/missing/messages", json={"message": "hi"})
        assert response.status_code == 404

    def test_create_flow(self, client: TestClient) -> None:
        session_id = _open_session(client)
        url = f"{BASE}/{session_id}/messages"

        first = client.post(url, json={"message": "Create a new risk"}).json()
        assert [m["role"] for m in first["messages"]] == ["user", "assistant"]
        assert first["messages"][1]["content"] == "What is the title?"
        assert first["conversation"]["command"] == "CREATE_RAID"
        assert first["conversation"]["next_field"] == "title"

        client.post(url, json={"message": "Vendor delay"})
        last = client.post(url, json={"message": "Supplier may slip"}).json()

        reply = last["messages"][-1]
        assert reply["content"].startswith("✅ **Created Risk raid-9**")
        assert reply["metadata"]["raid_id"] == "raid-9"
        assert reply["metadata"]["raid_item"]["title"] == "Vendor delay"
        assert last["conversation"] is None

        detail = client.get(f"{BASE}/{session_id}").json()
        assert len(detail["messages"]) == 7

    def test_list(self, client: TestClient) -> None:
        session_id = _open_session(client)

        body = client.post(f"{BASE}/{session_id}/messages", json={"message": "show all raid"}).json()

        assert body["messages"][-1]["content"] == "No RAID items found."


class TestCancel:
    def test_cancel_active_conversation(self, client: TestClient) -> None:
        session_id = _open_session(client)
        client.post(f"{BASE}/{session_id}/messages", json={"message": "Create a new risk"})

        response = client.delete(f"{BASE}/{session_id}/conversation")

        assert response.status_code == 200
        assert "cancelled" in response.json()["message"]["content"]
        assert client.get(f"{BASE}/{session_id}").json()["conversation"] is None

    def test_cancel_without_conversation(self, client: TestClient) -> None:
        session_id = _open_session(client)

        response = client.delete(f"{BASE}/{session_id}/conversation")

        assert "no active conversation" in response.json()["message"]["content"]


class TestHealth:
    def test_health(self, client: TestClient) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json()["status"] == "healthy"
