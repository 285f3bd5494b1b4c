"""Session related application exceptions."""

from raid_chat.application.common.exceptions.base import ApplicationError


class SessionNotFoundError(ApplicationError):
    """Chat session does not exist."""

    def __init__(self, session_id: str | None = None) -> None:
        super().__init__("Session not found")
        self.session_id = session_id
