"""Domain Entities."""

from raid_chat.domain.entities.chat_session import ChatSession
from raid_chat.domain.entities.conversation_state import (
    BaseConversationState,
    ConversationState,
    CreateRAIDState,
    EditRAIDState,
    TransitionWorkflowState,
)

__all__ = [
    "BaseConversationState",
    "ChatSession",
    "ConversationState",
    "CreateRAIDState",
    "EditRAIDState",
    "TransitionWorkflowState",
]
