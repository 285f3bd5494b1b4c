"""Command execution result DTO."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from raid_chat.domain import ChatMessage


@dataclass(frozen=True)
class CommandExecutionResult:
    """Output contract of the executor.

    Exactly one ChatMessage is produced for every outcome.

    Attributes:
        success: backend call succeeded
        message: chat message to display
        data: backend entity on success
        error: error string on failure
    """

    success: bool
    message: ChatMessage
    data: Any = None
    error: str | None = None
