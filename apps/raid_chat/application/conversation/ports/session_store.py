"""Session Store Port.

Holds chat sessions for the lifetime of the process. Conversation state
is never persisted beyond the session.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from raid_chat.domain.entities.chat_session import ChatSession


class SessionStorePort(ABC):
    """Chat session store Port."""

    @abstractmethod
    async def get(self, session_id: str) -> "ChatSession | None":
        """Look up a session, None when unknown."""
        ...

    @abstractmethod
    async def save(self, session: "ChatSession") -> None:
        """Store (or replace) a session."""
        ...

    @abstractmethod
    async def delete(self, session_id: str) -> bool:
        """Drop a session.

        Returns:
            True if the session existed
        """
        ...
