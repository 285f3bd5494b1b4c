"""List RAID Items Command.

LIST_RAID never opens a conversation; it runs as soon as it is parsed.
Same result contract as the executor: one message, never raises.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from raid_chat.application.conversation.dto import CommandExecutionResult
from raid_chat.application.conversation.services.field_parser import parse_field_value
from raid_chat.application.conversation.services.response_formatter import (
    format_failure,
    format_raid_list,
)
from raid_chat.domain import ChatMessage, CommandIntent, MessageMetadata, RAIDType

if TYPE_CHECKING:
    from raid_chat.application.conversation.ports import RAIDClientPort

logger = logging.getLogger(__name__)

ACTION = "list RAID items"


class ListRAIDItemsCommand:
    """RAID item listing (UseCase)."""

    def __init__(self, raid_client: "RAIDClientPort") -> None:
        self._raid_client = raid_client

    @staticmethod
    def build_filters(intent: CommandIntent | None) -> dict[str, str]:
        """Query filters taken from the intent params."""
        if intent is None:
            return {}
        raw_type = intent.params.get("raidType")
        if raw_type is None:
            return {}
        try:
            raid_type = RAIDType(parse_field_value("type", raw_type))
        except ValueError:
            return {}
        return {"type": raid_type.value}

    async def execute(
        self,
        project_key: str,
        intent: CommandIntent | None = None,
    ) -> CommandExecutionResult:
        """List the project's RAID items.

        Args:
            project_key: project key
            intent: LIST_RAID intent (type filter in params.raidType)

        Returns:
            CommandExecutionResult
        """
        filters = self.build_filters(intent)
        try:
            response = await self._raid_client.list_raid_items(project_key, filters or None)
        except Exception as e:
            logger.exception("RAID list error", extra={"project_key": project_key})
            error = str(e) or type(e).__name__
            return CommandExecutionResult(
                success=False,
                message=ChatMessage.error(format_failure(ACTION, error), metadata=MessageMetadata(error=error)),
                error=error,
            )

        if not response.success or response.data is None:
            error = response.error or "Unknown error"
            logger.warning(
                "Backend rejected RAID list",
                extra={"project_key": project_key, "error": error},
            )
            return CommandExecutionResult(
                success=False,
                message=ChatMessage.error(format_failure(ACTION, error), metadata=MessageMetadata(error=error)),
                error=error,
            )

        logger.info(
            "RAID items listed",
            extra={"project_key": project_key, "count": len(response.data.items), "filters": filters},
        )
        return CommandExecutionResult(
            success=True,
            message=ChatMessage.assistant(
                format_raid_list(response.data),
                metadata=MessageMetadata(command=intent),
            ),
            data=response.data,
        )


__all__ = ["ListRAIDItemsCommand"]
