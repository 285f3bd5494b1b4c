"""Session store adapters."""

from raid_chat.infrastructure.session.in_memory_session_store import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
