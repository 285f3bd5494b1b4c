"""In-memory Session Store.

Sessions live for the lifetime of the process only.
"""

from __future__ import annotations

import logging

from raid_chat.application.conversation.ports import SessionStorePort
from raid_chat.domain import ChatSession

logger = logging.getLogger(__name__)


class InMemorySessionStore(SessionStorePort):
    """dict-backed SessionStorePort."""

    def __init__(self) -> None:
        self._sessions: dict[str, ChatSession] = {}

    async def get(self, session_id: str) -> ChatSession | None:
        return self._sessions.get(session_id)

    async def save(self, session: ChatSession) -> None:
        self._sessions[session.id] = session

    async def delete(self, session_id: str) -> bool:
        removed = self._sessions.pop(session_id, None)
        if removed is not None:
            logger.info("Session deleted", extra={"session_id": session_id})
        return removed is not None

    def __len__(self) -> int:
        return len(self._sessions)
