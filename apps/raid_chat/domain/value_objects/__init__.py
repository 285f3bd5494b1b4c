"""Domain Value Objects."""

from raid_chat.domain.value_objects.chat_message import ChatMessage, MessageMetadata
from raid_chat.domain.value_objects.command_intent import CommandIntent
from raid_chat.domain.value_objects.conversation_step import ConversationStep, Validator

__all__ = [
    "ChatMessage",
    "CommandIntent",
    "ConversationStep",
    "MessageMetadata",
    "Validator",
]
