"""ChatMessage Value Objects.

Messages are append-only within a session and never mutated; an edit
is modeled as a new message.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any
from uuid import uuid4

from raid_chat.domain.enums import MessageRole
from raid_chat.domain.value_objects.command_intent import CommandIntent


def _new_id() -> str:
    return str(uuid4())


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class MessageMetadata:
    """Extra data stamped on a message.

    Attributes:
        command: intent that triggered the message
        raid_id: id of the RAID item created/updated
        raid_item: backend entity returned by the API
        error: raw error string for failures
    """

    command: CommandIntent | None = None
    raid_id: str | None = None
    raid_item: Any = None
    error: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to a JSON-friendly dict, skipping empty keys."""
        data: dict[str, Any] = {}
        if self.command is not None:
            data["command"] = self.command.to_dict()
        if self.raid_id is not None:
            data["raid_id"] = self.raid_id
        if self.raid_item is not None:
            item = self.raid_item
            data["raid_item"] = item.model_dump(mode="json") if hasattr(item, "model_dump") else item
        if self.error is not None:
            data["error"] = self.error
        return data


@dataclass(frozen=True)
class ChatMessage:
    """A single chat message.

    Attributes:
        role: author role
        content: markdown-flavored text
        id: unique message id (UUID)
        timestamp: creation instant (UTC)
        metadata: optional metadata
    """

    role: MessageRole
    content: str
    id: str = field(default_factory=_new_id)
    timestamp: datetime = field(default_factory=_now)
    metadata: MessageMetadata | None = None

    @classmethod
    def user(cls, content: str, metadata: MessageMetadata | None = None) -> "ChatMessage":
        return cls(role=MessageRole.USER, content=content, metadata=metadata)

    @classmethod
    def assistant(cls, content: str, metadata: MessageMetadata | None = None) -> "ChatMessage":
        return cls(role=MessageRole.ASSISTANT, content=content, metadata=metadata)

    @classmethod
    def error(cls, content: str, metadata: MessageMetadata | None = None) -> "ChatMessage":
        return cls(role=MessageRole.ERROR, content=content, metadata=metadata)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict."""
        return {
            "id": self.id,
            "role": self.role.value,
            "content": self.content,
            "timestamp": self.timestamp.isoformat(),
            "metadata": self.metadata.to_dict() if self.metadata else None,
        }
