"""Domain Enums."""

from raid_chat.domain.enums.command_type import CommandType
from raid_chat.domain.enums.message_role import MessageRole
from raid_chat.domain.enums.raid import RAIDPriority, RAIDStatus, RAIDType
from raid_chat.domain.enums.workflow_state import WorkflowState

__all__ = [
    "CommandType",
    "MessageRole",
    "RAIDPriority",
    "RAIDStatus",
    "RAIDType",
    "WorkflowState",
]
