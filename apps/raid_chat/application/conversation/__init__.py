"""Conversation Application Layer."""

from .commands import ExecuteCommandCommand, HandleChatMessageCommand, ListRAIDItemsCommand
from .dto import CommandExecutionResult, ConversationProgress, ConversationTurn

__all__ = [
    "CommandExecutionResult",
    "ConversationProgress",
    "ConversationTurn",
    "ExecuteCommandCommand",
    "HandleChatMessageCommand",
    "ListRAIDItemsCommand",
]
