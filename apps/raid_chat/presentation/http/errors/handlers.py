"""Exception Handlers.

Map domain/application exceptions to HTTP responses.
"""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from raid_chat.application.common.exceptions.base import ApplicationError
from raid_chat.application.common.exceptions.session import SessionNotFoundError
from raid_chat.application.common.exceptions.validation import MessageRequiredError
from raid_chat.domain.exceptions.base import DomainError
from raid_chat.domain.exceptions.conversation import (
    InvalidConversationStateError,
    UnsupportedCommandError,
)


def register_exception_handlers(app: FastAPI) -> None:
    """Register exception handlers."""

    @app.exception_handler(SessionNotFoundError)
    async def session_not_found_handler(request: Request, exc: SessionNotFoundError):
        return JSONResponse(
            status_code=404,
            content={"detail": exc.message, "code": "SESSION_NOT_FOUND"},
        )

    @app.exception_handler(MessageRequiredError)
    async def message_required_handler(request: Request, exc: MessageRequiredError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "MESSAGE_REQUIRED"},
        )

    @app.exception_handler(UnsupportedCommandError)
    async def unsupported_command_handler(request: Request, exc: UnsupportedCommandError):
        return JSONResponse(
            status_code=422,
            content={"detail": exc.message, "code": "UNSUPPORTED_COMMAND"},
        )

    @app.exception_handler(InvalidConversationStateError)
    async def invalid_state_handler(request: Request, exc: InvalidConversationStateError):
        return JSONResponse(
            status_code=409,
            content={"detail": exc.message, "code": "INVALID_CONVERSATION_STATE"},
        )

    @app.exception_handler(DomainError)
    async def domain_error_handler(request: Request, exc: DomainError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "DOMAIN_ERROR"},
        )

    @app.exception_handler(ApplicationError)
    async def application_error_handler(request: Request, exc: ApplicationError):
        return JSONResponse(
            status_code=400,
            content={"detail": exc.message, "code": "APPLICATION_ERROR"},
        )
