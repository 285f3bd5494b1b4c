"""ChatSession Entity - one user's chat with the assistant.

Owns the append-only message log and the (at most one) active
conversation. Never shared across sessions.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import uuid4

from raid_chat.domain.entities.conversation_state import ConversationState
from raid_chat.domain.value_objects import ChatMessage


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class ChatSession:
    """Chat session entity.

    Attributes:
        project_key: project the session is scoped to
        id: session id (UUID)
        messages: message log (append-only)
        conversation: active conversation, None when idle
        created_at: creation time
        updated_at: last change time
    """

    project_key: str
    id: str = field(default_factory=lambda: str(uuid4()))
    messages: list[ChatMessage] = field(default_factory=list)
    conversation: ConversationState = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @property
    def has_active_conversation(self) -> bool:
        return self.conversation is not None

    def append(self, message: ChatMessage) -> ChatMessage:
        """Append a message to the log."""
        self.messages.append(message)
        self.updated_at = _now()
        return message

    def set_conversation(self, state: ConversationState) -> None:
        self.conversation = state
        self.updated_at = _now()

    def reset_conversation(self) -> None:
        """Drop the active conversation (success, cancel or abandon)."""
        self.set_conversation(None)
