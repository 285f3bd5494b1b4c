"""Conversation domain exceptions."""

from raid_chat.domain.exceptions.base import DomainError


class InvalidConversationStateError(DomainError):
    """Conversation state violates its step invariant."""

    def __init__(self, current_step: int, total_steps: int) -> None:
        super().__init__(
            f"current_step {current_step} out of range 0..{total_steps}"
        )
        self.current_step = current_step
        self.total_steps = total_steps


class UnsupportedCommandError(DomainError):
    """Command has no conversation template."""

    def __init__(self, command: str) -> None:
        super().__init__(f"Command type \"{command}\" is not supported")
        self.command = command
