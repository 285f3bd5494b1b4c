"""RAID API HTTP Client.

HTTP implementation of the RAID register and workflow state APIs.
- RAID list:    GET  /projects/{project_key}/raid
- RAID create:  POST /projects/{project_key}/raid
- RAID update:  PUT  /projects/{project_key}/raid/{raid_id}
- Workflow:     PATCH /projects/{project_key}/workflow/state
- Auth:         Authorization: Bearer {API_KEY} (optional)

Clean Architecture:
- Port: RAIDClientPort, WorkflowClientPort (application/conversation/ports)
- Adapter: RAIDApiHttpClient (this file)

Every call returns an ApiResponse. Transport and HTTP errors are folded
into `ApiResponse(success=False, error=...)`; nothing is raised to the
caller.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from raid_chat.application.conversation.ports import (
    ApiResponse,
    RAIDClientPort,
    RAIDItem,
    RAIDItemCreate,
    RAIDItemList,
    RAIDItemUpdate,
    WorkflowClientPort,
    WorkflowStateInfo,
    WorkflowStateUpdate,
)

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:8000"
DEFAULT_TIMEOUT = 30.0

ERR_NO_RESPONSE = "No response from server. Please check if the API is running."

M = TypeVar("M", bound=BaseModel)


def format_http_error(response: httpx.Response) -> str:
    """Human-readable error for a non-2xx response.

    Prefers the backend's `detail`, then `message`, then the status code.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict):
        for key in ("detail", "message"):
            value = body.get(key)
            if isinstance(value, str) and value:
                return value
    return f"API Error: {response.status_code}"


class RAIDApiHttpClient(RAIDClientPort, WorkflowClientPort):
    """RAID register / workflow HTTP client.

    Async HTTP client built on httpx AsyncClient.

    Features:
    - Lazy connection (created on first call)
    - Timeout
    - Structured logging
    - Error folding into ApiResponse

    Usage:
        client = RAIDApiHttpClient(base_url="http://localhost:8000")
        response = await client.list_raid_items("PRJ")
        await client.close()
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        api_key: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize.

        Args:
            base_url: backend base URL
            api_key: bearer token (optional)
            timeout: request timeout (seconds)
            transport: custom httpx transport (tests)
        """
        self._base_url = base_url.rstrip("/")
        self._api_key = api_key
        self._timeout = timeout
        self._transport = transport
        self._client: httpx.AsyncClient | None = None

    async def _get_client(self) -> httpx.AsyncClient:
        """Lazy HTTP client creation."""
        if self._client is None:
            headers = {"Content-Type": "application/json"}
            if self._api_key:
                headers["Authorization"] = f"Bearer {self._api_key}"
            self._client = httpx.AsyncClient(
                base_url=self._base_url,
                headers=headers,
                timeout=self._timeout,
                transport=self._transport,
            )
            logger.info("RAID API HTTP client created", extra={"base_url": self._base_url})
        return self._client

    async def close(self) -> None:
        """Close the HTTP client."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None
            logger.info("RAID API HTTP client closed")

    # ─────────────────────────────────────────────────────────────
    # RAID register
    # ─────────────────────────────────────────────────────────────

    async def list_raid_items(
        self,
        project_key: str,
        filters: dict[str, str] | None = None,
    ) -> ApiResponse[RAIDItemList]:
        params = {k: v for k, v in (filters or {}).items() if v}
        return await self._request(
            "GET",
            f"/projects/{project_key}/raid",
            RAIDItemList.model_validate,
            params=params or None,
        )

    async def create_raid_item(
        self,
        project_key: str,
        payload: RAIDItemCreate,
    ) -> ApiResponse[RAIDItem]:
        return await self._request(
            "POST",
            f"/projects/{project_key}/raid",
            RAIDItem.model_validate,
            json=payload.model_dump(mode="json", exclude_none=True),
        )

    async def update_raid_item(
        self,
        project_key: str,
        raid_id: str,
        updates: RAIDItemUpdate,
    ) -> ApiResponse[RAIDItem]:
        return await self._request(
            "PUT",
            f"/projects/{project_key}/raid/{raid_id}",
            RAIDItem.model_validate,
            json=updates.model_dump(mode="json", exclude_none=True),
        )

    # ─────────────────────────────────────────────────────────────
    # Workflow state
    # ─────────────────────────────────────────────────────────────

    async def transition_workflow_state(
        self,
        project_key: str,
        update: WorkflowStateUpdate,
    ) -> ApiResponse[WorkflowStateInfo]:
        return await self._request(
            "PATCH",
            f"/projects/{project_key}/workflow/state",
            WorkflowStateInfo.model_validate,
            json=update.model_dump(mode="json", exclude_none=True),
        )

    async def _request(
        self,
        method: str,
        path: str,
        parse: Callable[[Any], M],
        **kwargs: Any,
    ) -> ApiResponse[M]:
        """Send one request and fold the outcome into an ApiResponse.

        Args:
            method: HTTP method
            path: path relative to the base URL
            parse: response body -> model
            **kwargs: passed to httpx (params, json)

        Returns:
            ApiResponse
        """
        client = await self._get_client()

        try:
            response = await client.request(method, path, **kwargs)
            response.raise_for_status()
            data = parse(response.json())

            logger.debug(
                "RAID API call completed",
                extra={"method": method, "path": path, "status_code": response.status_code},
            )
            return ApiResponse.ok(data)

        except httpx.HTTPStatusError as e:
            error = format_http_error(e.response)
            logger.error(
                "RAID API HTTP error",
                extra={
                    "method": method,
                    "path": path,
                    "status_code": e.response.status_code,
                    "detail": error,
                },
            )
            return ApiResponse.fail(error)
        except httpx.TimeoutException:
            logger.error(
                "RAID API timeout",
                extra={"method": method, "path": path, "timeout": self._timeout},
            )
            return ApiResponse.fail(ERR_NO_RESPONSE)
        except httpx.RequestError as e:
            logger.error(
                "RAID API request failed",
                extra={"method": method, "path": path, "error": str(e)},
            )
            return ApiResponse.fail(ERR_NO_RESPONSE)
        except ValidationError as e:
            logger.error(
                "RAID API response validation failed",
                extra={"method": method, "path": path, "error_count": e.error_count()},
            )
            return ApiResponse.fail(f"Invalid response from server: {e.error_count()} validation error(s)")
        except ValueError as e:
            logger.error(
                "RAID API returned invalid JSON",
                extra={"method": method, "path": path, "error": str(e)},
            )
            return ApiResponse.fail("Invalid response from server: malformed JSON")
