"""Conversation turn DTOs."""

from __future__ import annotations

from dataclasses import dataclass

from raid_chat.domain import ConversationState


@dataclass(frozen=True)
class ConversationTurn:
    """Result of feeding one answer to the sequencer.

    Attributes:
        state: state after the answer (unchanged on rejection)
        next_prompt: prompt to show next, None when complete
        is_complete: every step answered
        error: rejection reason, None when accepted
    """

    state: ConversationState
    next_prompt: str | None
    is_complete: bool
    error: str | None = None

    @property
    def accepted(self) -> bool:
        return self.error is None


@dataclass(frozen=True)
class ConversationProgress:
    """Step progress of a conversation."""

    current_step: int
    total_steps: int
    percent_complete: int

    @property
    def label(self) -> str:
        """Progress suffix, e.g. "(2/5)"; empty before the first answer."""
        if self.total_steps == 0 or self.current_step == 0:
            return ""
        return f"({self.current_step}/{self.total_steps})"
