"""MessageRole Enum - author of a chat message."""

from __future__ import annotations

from enum import Enum


class MessageRole(str, Enum):
    """Chat message role."""

    USER = "user"
    ASSISTANT = "assistant"
    SYSTEM = "system"
    ERROR = "error"
