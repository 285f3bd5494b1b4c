"""Validation related application exceptions."""

from raid_chat.application.common.exceptions.base import ApplicationError


class MessageRequiredError(ApplicationError):
    """Empty chat message."""

    def __init__(self) -> None:
        super().__init__("message is required")
