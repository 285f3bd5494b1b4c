"""RAID Chat Dependencies - DI factories.

Singletons:
- RAID API HTTP client (RAIDClientPort + WorkflowClientPort)
- intent parser
- session store (in-memory)

Per request:
- HandleChatMessageCommand (stateless, built from the singletons)
"""

from __future__ import annotations

import logging
from typing import Annotated

from fastapi import Depends

from raid_chat.application.conversation.commands import (
    ExecuteCommandCommand,
    HandleChatMessageCommand,
    ListRAIDItemsCommand,
)
from raid_chat.application.conversation.ports import IntentParserPort, SessionStorePort
from raid_chat.infrastructure.integrations.raid_api import RAIDApiHttpClient
from raid_chat.infrastructure.parsing import RuleBasedIntentParser
from raid_chat.infrastructure.session import InMemorySessionStore
from raid_chat.setup.config import get_settings

logger = logging.getLogger(__name__)

# Singleton
_raid_api_client: RAIDApiHttpClient | None = None
_intent_parser: IntentParserPort | None = None
_session_store: SessionStorePort | None = None


def get_raid_api_client() -> RAIDApiHttpClient:
    """RAID API client singleton."""
    global _raid_api_client
    if _raid_api_client is None:
        settings = get_settings()
        _raid_api_client = RAIDApiHttpClient(
            base_url=settings.api_base_url,
            api_key=settings.api_key,
            timeout=settings.request_timeout,
        )
        logger.info("RAID API client initialized: %s", settings.api_base_url)
    return _raid_api_client


def get_intent_parser() -> IntentParserPort:
    """Intent parser singleton."""
    global _intent_parser
    if _intent_parser is None:
        _intent_parser = RuleBasedIntentParser()
    return _intent_parser


def get_session_store() -> SessionStorePort:
    """Session store singleton."""
    global _session_store
    if _session_store is None:
        _session_store = InMemorySessionStore()
    return _session_store


def build_handle_message_command(
    raid_api_client: RAIDApiHttpClient,
    intent_parser: IntentParserPort,
) -> HandleChatMessageCommand:
    """Wire the chat turn use case around one API client."""
    settings = get_settings()
    executor = ExecuteCommandCommand(
        raid_client=raid_api_client,
        workflow_client=raid_api_client,
        actor=settings.actor,
    )
    return HandleChatMessageCommand(
        intent_parser=intent_parser,
        executor=executor,
        lister=ListRAIDItemsCommand(raid_client=raid_api_client),
        include_optional=settings.collect_optional_fields,
    )


def get_handle_message_command(
    raid_api_client: RAIDApiHttpClient = Depends(get_raid_api_client),
    intent_parser: IntentParserPort = Depends(get_intent_parser),
) -> HandleChatMessageCommand:
    """HandleChatMessageCommand factory."""
    return build_handle_message_command(raid_api_client, intent_parser)


# Type aliases for FastAPI Depends
SessionStoreDep = Annotated[SessionStorePort, Depends(get_session_store)]
HandleMessageDep = Annotated[HandleChatMessageCommand, Depends(get_handle_message_command)]


# ============================================================
# Container (Lifecycle)
# ============================================================


class Container:
    """Resource container (lifecycle management)."""

    async def close(self):
        """Release resources."""
        global _raid_api_client, _intent_parser, _session_store

        if _raid_api_client:
            await _raid_api_client.close()
            _raid_api_client = None

        _intent_parser = None
        _session_store = None


_container: Container | None = None


def get_container() -> Container:
    """Container singleton."""
    global _container
    if _container is None:
        _container = Container()
    return _container
