"""Workflow Client Port - project workflow state API abstraction.

Clean Architecture:
- Port: this file
- Adapter: infrastructure/integrations/raid_api/raid_http_client.py

Endpoints:
- PATCH /projects/{project_key}/workflow/state
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pydantic import BaseModel, ConfigDict, Field

from raid_chat.application.conversation.ports.raid_client import ApiResponse
from raid_chat.domain.enums import WorkflowState


class WorkflowTransition(BaseModel):
    """One recorded transition."""

    model_config = ConfigDict(extra="ignore")

    from_state: WorkflowState
    to_state: WorkflowState
    timestamp: str
    actor: str
    reason: str | None = None


class WorkflowStateInfo(BaseModel):
    """Current workflow state of a project."""

    model_config = ConfigDict(extra="ignore")

    current_state: WorkflowState
    previous_state: WorkflowState | None = None
    transition_history: list[WorkflowTransition] = Field(default_factory=list)
    updated_at: str | None = None
    updated_by: str | None = None


class WorkflowStateUpdate(BaseModel):
    """Transition request."""

    to_state: WorkflowState
    actor: str | None = None
    reason: str | None = None


class WorkflowClientPort(ABC):
    """Workflow state API Port."""

    @abstractmethod
    async def transition_workflow_state(
        self,
        project_key: str,
        update: WorkflowStateUpdate,
    ) -> ApiResponse[WorkflowStateInfo]:
        """Transition the project workflow.

        Args:
            project_key: project key
            update: target state, actor, reason

        Returns:
            ApiResponse with the new WorkflowStateInfo
        """
        ...


__all__ = [
    "WorkflowClientPort",
    "WorkflowStateInfo",
    "WorkflowStateUpdate",
    "WorkflowTransition",
]
