"""RAID chat application exceptions."""

from raid_chat.application.common.exceptions.base import ApplicationError
from raid_chat.application.common.exceptions.session import SessionNotFoundError
from raid_chat.application.common.exceptions.validation import MessageRequiredError

__all__ = [
    "ApplicationError",
    "MessageRequiredError",
    "SessionNotFoundError",
]
