"""RAID chat domain exceptions."""

from raid_chat.domain.exceptions.base import DomainError
from raid_chat.domain.exceptions.conversation import (
    InvalidConversationStateError,
    UnsupportedCommandError,
)

__all__ = [
    "DomainError",
    "InvalidConversationStateError",
    "UnsupportedCommandError",
]
