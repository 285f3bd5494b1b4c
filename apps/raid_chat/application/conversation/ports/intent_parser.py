"""Intent Parser Port.

Turns raw chat text into a CommandIntent. The engine consumes the
result as-is and never re-parses text.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from raid_chat.domain import CommandIntent


class IntentParserPort(ABC):
    """Upstream intent classifier/extractor."""

    @abstractmethod
    async def parse(self, message: str) -> CommandIntent:
        """Parse a user message.

        Args:
            message: raw user text

        Returns:
            CommandIntent (UNKNOWN when nothing matched)
        """
        ...
