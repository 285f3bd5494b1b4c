"""RAID Client Port - RAID register API abstraction.

Clean Architecture:
- Port: this file (abstract interface + models)
- Adapter: infrastructure/integrations/raid_api/raid_http_client.py

The API follows a result-object convention: expected failures come back
as `ApiResponse(success=False, error=...)`, not as exceptions.

Endpoints:
- GET  /projects/{project_key}/raid
- POST /projects/{project_key}/raid
- PUT  /projects/{project_key}/raid/{raid_id}
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field

from raid_chat.domain.enums import RAIDPriority, RAIDStatus, RAIDType

T = TypeVar("T")


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Result object returned by every API call.

    Attributes:
        success: call succeeded
        data: response payload on success
        error: human-readable error on failure
    """

    success: bool
    data: T | None = None
    error: str | None = None

    @classmethod
    def ok(cls, data: T) -> "ApiResponse[T]":
        return cls(success=True, data=data)

    @classmethod
    def fail(cls, error: str) -> "ApiResponse[T]":
        return cls(success=False, error=error)


class RAIDItem(BaseModel):
    """RAID register item (backend entity).

    Field names use snake_case to match the backend JSON contract.
    """

    model_config = ConfigDict(extra="ignore")

    id: str
    type: RAIDType
    title: str
    description: str = ""
    status: RAIDStatus = RAIDStatus.OPEN
    owner: str = ""
    priority: RAIDPriority = RAIDPriority.MEDIUM
    impact: str | None = None
    likelihood: str | None = None
    mitigation_plan: str = ""
    next_actions: list[str] = Field(default_factory=list)
    linked_decisions: list[str] = Field(default_factory=list)
    linked_change_requests: list[str] = Field(default_factory=list)
    created_at: str | None = None
    updated_at: str | None = None
    created_by: str | None = None
    updated_by: str | None = None
    target_resolution_date: str | None = None


class RAIDItemCreate(BaseModel):
    """Request payload for creating a RAID item."""

    type: RAIDType
    title: str
    description: str
    status: RAIDStatus = RAIDStatus.OPEN
    owner: str = ""
    priority: RAIDPriority = RAIDPriority.MEDIUM
    created_by: str | None = None


class RAIDItemUpdate(BaseModel):
    """Request payload for updating a RAID item (partial)."""

    title: str | None = None
    description: str | None = None
    status: RAIDStatus | None = None
    owner: str | None = None
    priority: RAIDPriority | None = None
    updated_by: str | None = None


class RAIDItemList(BaseModel):
    """List response."""

    model_config = ConfigDict(extra="ignore")

    items: list[RAIDItem] = Field(default_factory=list)
    total: int = 0
    filtered_by: dict[str, Any] | None = None


class RAIDClientPort(ABC):
    """RAID register API Port."""

    @abstractmethod
    async def list_raid_items(
        self,
        project_key: str,
        filters: dict[str, str] | None = None,
    ) -> ApiResponse[RAIDItemList]:
        """List RAID items of a project.

        Args:
            project_key: project key
            filters: optional type/status/owner/priority filters

        Returns:
            ApiResponse with RAIDItemList
        """
        ...

    @abstractmethod
    async def create_raid_item(
        self,
        project_key: str,
        payload: RAIDItemCreate,
    ) -> ApiResponse[RAIDItem]:
        """Create a RAID item.

        Args:
            project_key: project key
            payload: creation payload

        Returns:
            ApiResponse with the created RAIDItem
        """
        ...

    @abstractmethod
    async def update_raid_item(
        self,
        project_key: str,
        raid_id: str,
        updates: RAIDItemUpdate,
    ) -> ApiResponse[RAIDItem]:
        """Update a RAID item.

        Args:
            project_key: project key
            raid_id: item id
            updates: changed fields only

        Returns:
            ApiResponse with the updated RAIDItem
        """
        ...


__all__ = [
    "ApiResponse",
    "RAIDClientPort",
    "RAIDItem",
    "RAIDItemCreate",
    "RAIDItemList",
    "RAIDItemUpdate",
]
