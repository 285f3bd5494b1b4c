"""Conversation Commands."""

from .execute_command import ExecuteCommandCommand, execute_command
from .handle_chat_message import HandleChatMessageCommand
from .list_raid_items import ListRAIDItemsCommand

__all__ = [
    "ExecuteCommandCommand",
    "HandleChatMessageCommand",
    "ListRAIDItemsCommand",
    "execute_command",
]
