"""Conversation DTOs."""

from .conversation_turn import ConversationProgress, ConversationTurn
from .execution_result import CommandExecutionResult

__all__ = ["CommandExecutionResult", "ConversationProgress", "ConversationTurn"]
