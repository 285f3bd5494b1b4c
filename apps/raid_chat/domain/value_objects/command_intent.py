"""CommandIntent Value Object.

Structured interpretation of a user's chat message, produced by the
upstream intent parser and consumed as-is by the conversation engine.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from raid_chat.domain.enums import CommandType


@dataclass(frozen=True, slots=True)
class CommandIntent:
    """Parsed command intent (Immutable).

    Attributes:
        type: recognised command
        params: extracted parameters (raidType, raidId, targetState, ...)
        confidence: parser confidence (0.0 ~ 1.0), informational only
        original_message: raw user text
    """

    type: CommandType
    params: dict[str, Any] = field(default_factory=dict)
    confidence: float = 1.0
    original_message: str = ""

    def __post_init__(self) -> None:
        """Validation."""
        if not 0.0 <= self.confidence <= 1.0:
            object.__setattr__(self, "confidence", max(0.0, min(1.0, self.confidence)))

    @property
    def is_unknown(self) -> bool:
        return self.type == CommandType.UNKNOWN

    @classmethod
    def unknown(cls, message: str) -> "CommandIntent":
        """Intent for an unrecognised message."""
        return cls(type=CommandType.UNKNOWN, confidence=0.0, original_message=message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to a dict."""
        return {
            "type": self.type.value,
            "params": dict(self.params),
            "confidence": self.confidence,
            "original_message": self.original_message,
        }
