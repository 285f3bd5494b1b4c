"""Execute Command - completed conversation -> one backend call.

Clean Architecture:
- Command(UseCase): this file - Port call, error normalisation
- Service: completion_checker / response_formatter - pure logic
- Port: RAIDClientPort, WorkflowClientPort - HTTP API calls

Contract:
- Incomplete or missing state: fail fast, no backend call.
- Exactly one backend call per execution, awaited sequentially.
- Exactly one ChatMessage per outcome.
- Never raises: port exceptions are folded into success=False.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Awaitable, Callable

from raid_chat.application.conversation.dto import CommandExecutionResult
from raid_chat.application.conversation.ports import (
    ApiResponse,
    RAIDItemCreate,
    RAIDItemUpdate,
    WorkflowStateUpdate,
)
from raid_chat.application.conversation.services.completion_checker import (
    is_conversation_complete,
    missing_fields,
)
from raid_chat.application.conversation.services.response_formatter import (
    MSG_INCOMPLETE,
    MSG_MISSING_FIELDS,
    MSG_UNSUPPORTED,
    format_failure,
    format_raid_created,
    format_raid_updated,
    format_workflow_transitioned,
)
from raid_chat.domain import (
    ChatMessage,
    CommandType,
    ConversationState,
    CreateRAIDState,
    EditRAIDState,
    MessageMetadata,
    RAIDPriority,
    RAIDStatus,
    TransitionWorkflowState,
)

if TYPE_CHECKING:
    from raid_chat.application.conversation.ports import (
        RAIDClientPort,
        WorkflowClientPort,
    )

logger = logging.getLogger(__name__)

ERR_INCOMPLETE = "Incomplete conversation"
ERR_MISSING_FIELDS = "Missing required fields"
ERR_MISSING_RAID_ID = "Missing RAID ID"
ERR_UNSUPPORTED = "Unsupported command"
ERR_UNKNOWN = "Unknown error"

Handler = Callable[[ConversationState], Awaitable[CommandExecutionResult]]


def _rejected(content: str, error: str) -> CommandExecutionResult:
    """Local (pre-dispatch) failure: assistant message, no backend call."""
    return CommandExecutionResult(
        success=False,
        message=ChatMessage.assistant(content, metadata=MessageMetadata(error=error)),
        error=error,
    )


def _failed(action: str, error: str | None) -> CommandExecutionResult:
    """Backend failure: error message with the raw error text."""
    error = error or ERR_UNKNOWN
    return CommandExecutionResult(
        success=False,
        message=ChatMessage.error(format_failure(action, error), metadata=MessageMetadata(error=error)),
        error=error,
    )


def _error_text(exc: Exception) -> str:
    return str(exc) or type(exc).__name__


class ExecuteCommandCommand:
    """Completed conversation executor (UseCase).

    Usage:
        command = ExecuteCommandCommand(raid_client=client, workflow_client=client)
        result = await command.execute(state)
    """

    def __init__(
        self,
        raid_client: "RAIDClientPort",
        workflow_client: "WorkflowClientPort | None" = None,
        actor: str | None = None,
    ) -> None:
        """Initialize.

        Args:
            raid_client: RAID register API (Port)
            workflow_client: workflow state API (Port), optional
            actor: name recorded as creator/updater on the backend
        """
        self._raid_client = raid_client
        self._workflow_client = workflow_client
        self._actor = actor
        self._handlers: dict[CommandType, Handler] = {
            CommandType.CREATE_RAID: self._execute_create,
            CommandType.EDIT_RAID: self._execute_edit,
        }
        if workflow_client is not None:
            self._handlers[CommandType.TRANSITION_WORKFLOW] = self._execute_transition

    async def execute(self, state: ConversationState) -> CommandExecutionResult:
        """Execute a completed conversation.

        Args:
            state: completed conversation state

        Returns:
            CommandExecutionResult (never raises)
        """
        if state is None or not is_conversation_complete(state):
            return _rejected(MSG_INCOMPLETE, ERR_INCOMPLETE)

        intent = getattr(state, "intent", None)
        handler = self._handlers.get(intent)
        if handler is None:
            command = intent.value if isinstance(intent, CommandType) else str(intent)
            logger.warning("Unsupported command", extra={"command": command})
            return _rejected(MSG_UNSUPPORTED.format(command=command), ERR_UNSUPPORTED)

        logger.info(
            "Executing command",
            extra={"command": intent.value, "project_key": state.project_key},
        )
        try:
            return await handler(state)
        except Exception as e:
            logger.exception(
                "Command execution error",
                extra={"command": intent.value, "project_key": state.project_key},
            )
            return _failed(_ACTIONS[intent], _error_text(e))

    async def _execute_create(self, state: CreateRAIDState) -> CommandExecutionResult:
        missing = missing_fields(state)
        if missing:
            return _rejected(MSG_MISSING_FIELDS.format(fields=", ".join(missing)), ERR_MISSING_FIELDS)

        data = state.collected_data
        payload = RAIDItemCreate(
            type=data["type"],
            title=data["title"],
            description=data["description"],
            status=data.get("status") or RAIDStatus.OPEN,
            priority=data.get("priority") or RAIDPriority.MEDIUM,
            owner=data.get("owner") or "",
            created_by=self._actor,
        )

        response = await self._raid_client.create_raid_item(state.project_key, payload)
        return self._raid_result(
            response, state.project_key, CommandType.CREATE_RAID, format_raid_created
        )

    async def _execute_edit(self, state: EditRAIDState) -> CommandExecutionResult:
        if not state.raid_id:
            return _rejected("No RAID item ID specified for editing.", ERR_MISSING_RAID_ID)

        missing = missing_fields(state)
        if missing:
            return _rejected(MSG_MISSING_FIELDS.format(fields=", ".join(missing)), ERR_MISSING_FIELDS)

        updates = RAIDItemUpdate(**state.updates, updated_by=self._actor)
        response = await self._raid_client.update_raid_item(
            state.project_key,
            state.raid_id,
            updates,
        )
        return self._raid_result(
            response, state.project_key, CommandType.EDIT_RAID, format_raid_updated
        )

    async def _execute_transition(self, state: TransitionWorkflowState) -> CommandExecutionResult:
        missing = missing_fields(state)
        if missing:
            return _rejected(MSG_MISSING_FIELDS.format(fields=", ".join(missing)), ERR_MISSING_FIELDS)

        update = WorkflowStateUpdate(
            to_state=state.target_state,
            actor=self._actor,
            reason=state.reason,
        )
        response = await self._workflow_client.transition_workflow_state(state.project_key, update)
        if not response.success or response.data is None:
            self._log_rejection(CommandType.TRANSITION_WORKFLOW, state.project_key, response)
            return _failed(_ACTIONS[CommandType.TRANSITION_WORKFLOW], response.error)

        info = response.data
        return CommandExecutionResult(
            success=True,
            message=ChatMessage.assistant(format_workflow_transitioned(info)),
            data=info,
        )

    def _raid_result(
        self,
        response: ApiResponse,
        project_key: str,
        command: CommandType,
        formatter: Callable[..., str],
    ) -> CommandExecutionResult:
        if not response.success or response.data is None:
            self._log_rejection(command, project_key, response)
            return _failed(_ACTIONS[command], response.error)

        item = response.data
        logger.info(
            "RAID item saved",
            extra={"command": command.value, "project_key": project_key, "raid_id": item.id},
        )
        return CommandExecutionResult(
            success=True,
            message=ChatMessage.assistant(
                formatter(item),
                metadata=MessageMetadata(raid_id=item.id, raid_item=item),
            ),
            data=item,
        )

    @staticmethod
    def _log_rejection(command: CommandType, project_key: str | None, response: ApiResponse) -> None:
        logger.warning(
            "Backend rejected command",
            extra={
                "command": command.value,
                "project_key": project_key,
                "error": response.error,
            },
        )


_ACTIONS: dict[CommandType, str] = {
    CommandType.CREATE_RAID: "create RAID item",
    CommandType.EDIT_RAID: "update RAID item",
    CommandType.TRANSITION_WORKFLOW: "transition workflow",
}


async def execute_command(
    state: ConversationState,
    raid_client: "RAIDClientPort",
    workflow_client: "WorkflowClientPort | None" = None,
    actor: str | None = None,
) -> CommandExecutionResult:
    """One-shot execution without keeping an ExecuteCommandCommand around."""
    command = ExecuteCommandCommand(raid_client, workflow_client=workflow_client, actor=actor)
    return await command.execute(state)


__all__ = ["ExecuteCommandCommand", "execute_command"]
