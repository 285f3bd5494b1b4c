"""RAID Chat Domain Layer.

Business concepts of the conversational command engine.

- enums: CommandType, MessageRole, RAIDType, RAIDStatus, RAIDPriority, WorkflowState
- value_objects: CommandIntent, ConversationStep, ChatMessage, MessageMetadata
- entities: ChatSession, CreateRAIDState, EditRAIDState, TransitionWorkflowState
- services: field schema (step templates + required fields)
- exceptions: DomainError, InvalidConversationStateError, UnsupportedCommandError
"""

from raid_chat.domain.entities import (
    ChatSession,
    ConversationState,
    CreateRAIDState,
    EditRAIDState,
    TransitionWorkflowState,
)
from raid_chat.domain.enums import (
    CommandType,
    MessageRole,
    RAIDPriority,
    RAIDStatus,
    RAIDType,
    WorkflowState,
)
from raid_chat.domain.exceptions import (
    DomainError,
    InvalidConversationStateError,
    UnsupportedCommandError,
)
from raid_chat.domain.value_objects import (
    ChatMessage,
    CommandIntent,
    ConversationStep,
    MessageMetadata,
)

__all__ = [
    # Enums
    "CommandType",
    "MessageRole",
    "RAIDPriority",
    "RAIDStatus",
    "RAIDType",
    "WorkflowState",
    # Value Objects
    "ChatMessage",
    "CommandIntent",
    "ConversationStep",
    "MessageMetadata",
    # Entities
    "ChatSession",
    "ConversationState",
    "CreateRAIDState",
    "EditRAIDState",
    "TransitionWorkflowState",
    # Exceptions
    "DomainError",
    "InvalidConversationStateError",
    "UnsupportedCommandError",
]
