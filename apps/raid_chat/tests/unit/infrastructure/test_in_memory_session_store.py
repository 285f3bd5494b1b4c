"""InMemorySessionStore Unit Tests."""

import pytest

from raid_chat.domain import ChatSession
from raid_chat.infrastructure.session import InMemorySessionStore


class TestInMemorySessionStore:
    @pytest.mark.asyncio
    async def test_save_and_get(self) -> None:
        store = InMemorySessionStore()
        session = ChatSession(project_key="PRJ")

        await store.save(session)

        assert await store.get(session.id) is session
        assert len(store) == 1

    @pytest.mark.asyncio
    async def test_unknown_session(self) -> None:
        assert await InMemorySessionStore().get("missing") is None

    @pytest.mark.asyncio
    async def test_delete(self) -> None:
        store = InMemorySessionStore()
        session = ChatSession(project_key="PRJ")
        await store.save(session)

        assert await store.delete(session.id) is True
        assert await store.delete(session.id) is False
        assert await store.get(session.id) is None
