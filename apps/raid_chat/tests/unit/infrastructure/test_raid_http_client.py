"""RAIDApiHttpClient Unit Tests (httpx.MockTransport)."""

import json

import httpx
import pytest

from raid_chat.application.conversation.ports import (
    RAIDItemCreate,
    RAIDItemUpdate,
    WorkflowStateUpdate,
)
from raid_chat.domain import RAIDStatus, RAIDType, WorkflowState
from raid_chat.infrastructure.integrations.raid_api import RAIDApiHttpClient
from raid_chat.infrastructure.integrations.raid_api.raid_http_client import (
    ERR_NO_RESPONSE,
    format_http_error,
)

ITEM = {
    "id": "raid-1",
    "type": "risk",
    "title": "T",
    "description": "D",
    "status": "open",
    "priority": "medium",
    "owner": "",
}


def _client(handler, api_key: str | None = None) -> RAIDApiHttpClient:
    return RAIDApiHttpClient(
        base_url="http://raid.test/",
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


class TestRequests:
    """Request shape."""

    @pytest.mark.asyncio
    async def test_create_posts_payload(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json=ITEM)

        client = _client(handler, api_key="secret")
        response = await client.create_raid_item(
            "PRJ",
            RAIDItemCreate(type=RAIDType.RISK, title="T", description="D"),
        )
        await client.close()

        assert response.success is True
        assert response.data.id == "raid-1"
        request = seen[0]
        assert request.method == "POST"
        assert request.url.path == "/projects/PRJ/raid"
        assert request.headers["Authorization"] == "Bearer secret"
        body = json.loads(request.content)
        assert body == {
            "type": "risk",
            "title": "T",
            "description": "D",
            "status": "open",
            "owner": "",
            "priority": "medium",
        }

    @pytest.mark.asyncio
    async def test_no_auth_header_without_key(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"items": [], "total": 0})

        client = _client(handler)
        await client.list_raid_items("PRJ")

        assert "Authorization" not in seen[0].headers

    @pytest.mark.asyncio
    async def test_update_sends_changed_fields_only(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={**ITEM, "status": "closed"})

        client = _client(handler)
        response = await client.update_raid_item(
            "PRJ", "RAID-1", RAIDItemUpdate(status=RAIDStatus.CLOSED, updated_by="bot")
        )

        assert response.data.status == RAIDStatus.CLOSED
        assert seen[0].method == "PUT"
        assert seen[0].url.path == "/projects/PRJ/raid/RAID-1"
        assert json.loads(seen[0].content) == {"status": "closed", "updated_by": "bot"}

    @pytest.mark.asyncio
    async def test_list_with_filters(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"items": [ITEM], "total": 1})

        client = _client(handler)
        response = await client.list_raid_items("PRJ", {"type": "risk", "owner": ""})

        assert response.data.total == 1
        assert response.data.items[0].type == RAIDType.RISK
        assert dict(seen[0].url.params) == {"type": "risk"}

    @pytest.mark.asyncio
    async def test_transition_patches_workflow(self) -> None:
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(
                200,
                json={
                    "current_state": "executing",
                    "previous_state": "planning",
                    "transition_history": [],
                },
            )

        client = _client(handler)
        response = await client.transition_workflow_state(
            "PRJ",
            WorkflowStateUpdate(to_state=WorkflowState.EXECUTING, actor="bot"),
        )

        assert response.data.current_state is WorkflowState.EXECUTING
        assert seen[0].method == "PATCH"
        assert seen[0].url.path == "/projects/PRJ/workflow/state"
        assert json.loads(seen[0].content) == {"to_state": "executing", "actor": "bot"}


class TestErrorFolding:
    """Errors come back as ApiResponse(success=False)."""

    @pytest.mark.asyncio
    async def test_detail_is_used(self) -> None:
        client = _client(lambda request: httpx.Response(404, json={"detail": "Project 'PRJ' not found"}))

        response = await client.create_raid_item(
            "PRJ", RAIDItemCreate(type=RAIDType.RISK, title="T", description="D")
        )

        assert response.success is False
        assert response.error == "Project 'PRJ' not found"

    @pytest.mark.asyncio
    async def test_message_is_used(self) -> None:
        client = _client(lambda request: httpx.Response(409, json={"message": "Conflict"}))

        response = await client.list_raid_items("PRJ")

        assert response.error == "Conflict"

    @pytest.mark.asyncio
    async def test_status_fallback(self) -> None:
        client = _client(lambda request: httpx.Response(500, text="boom"))

        response = await client.list_raid_items("PRJ")

        assert response.error == "API Error: 500"

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        response = await _client(handler).list_raid_items("PRJ")

        assert response.success is False
        assert response.error == ERR_NO_RESPONSE

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        response = await _client(handler).list_raid_items("PRJ")

        assert response.error == ERR_NO_RESPONSE

    @pytest.mark.asyncio
    async def test_invalid_json(self) -> None:
        client = _client(lambda request: httpx.Response(200, text="<html>"))

        response = await client.list_raid_items("PRJ")

        assert response.success is False
        assert response.error.startswith("Invalid response from server")

    @pytest.mark.asyncio
    async def test_unexpected_body(self) -> None:
        client = _client(lambda request: httpx.Response(201, json={"id": "raid-1"}))

        response = await client.create_raid_item(
            "PRJ", RAIDItemCreate(type=RAIDType.RISK, title="T", description="D")
        )

        assert response.success is False
        assert "validation error" in response.error


class TestFormatHttpError:
    def test_empty_detail_falls_back(self) -> None:
        response = httpx.Response(400, json={"detail": ""})
        assert format_http_error(response) == "API Error: 400"

    def test_non_string_detail_falls_back(self) -> None:
        response = httpx.Response(422, json={"detail": [{"loc": ["body"]}]})
        assert format_http_error(response) == "API Error: 422"


class TestLifecycle:
    @pytest.mark.asyncio
    async def test_client_is_lazy_and_closable(self) -> None:
        client = _client(lambda request: httpx.Response(200, json={"items": []}))
        assert client._client is None

        await client.list_raid_items("PRJ")
        assert client._client is not None

        await client.close()
        assert client._client is None
