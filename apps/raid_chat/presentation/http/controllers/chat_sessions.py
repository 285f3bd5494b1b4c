"""Chat Session API Controller.

RESTful endpoints:
- POST   /chat/sessions                      new session (+ greeting)
- GET    /chat/sessions/{id}                 session detail + messages
- POST   /chat/sessions/{id}/messages        one chat turn
- DELETE /chat/sessions/{id}/conversation    cancel the active conversation
"""

from __future__ import annotations

import logging
from datetime import datetime
from typing import Any

from fastapi import APIRouter
from pydantic import BaseModel, Field

from raid_chat.application.common.exceptions import MessageRequiredError, SessionNotFoundError
from raid_chat.application.conversation.ports import SessionStorePort
from raid_chat.application.conversation.services.response_formatter import MSG_GREETING
from raid_chat.application.conversation.services.step_sequencer import get_conversation_progress
from raid_chat.domain import ChatMessage, ChatSession
from raid_chat.setup.dependencies import HandleMessageDep, SessionStoreDep

router = APIRouter(prefix="/chat/sessions", tags=["chat"])
logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Schemas
# ─────────────────────────────────────────────────────────────────────────────


class MessageResponse(BaseModel):
    """Chat message."""

    id: str = Field(description="Message ID")
    role: str = Field(description="Role (user/assistant/system/error)")
    content: str = Field(description="Markdown content")
    timestamp: datetime = Field(description="Creation time")
    metadata: dict[str, Any] | None = Field(default=None, description="Metadata")

    @classmethod
    def from_entity(cls, message: ChatMessage) -> "MessageResponse":
        return cls(
            id=message.id,
            role=message.role.value,
            content=message.content,
            timestamp=message.timestamp,
            metadata=message.metadata.to_dict() if message.metadata else None,
        )


class ConversationResponse(BaseModel):
    """Active conversation summary."""

    command: str = Field(description="Command being collected")
    current_step: int = Field(description="Answered steps")
    total_steps: int = Field(description="Total steps")
    percent_complete: int = Field(description="Progress (0~100)")
    next_field: str | None = Field(default=None, description="Field awaiting an answer")

    @classmethod
    def from_session(cls, session: ChatSession) -> "ConversationResponse | None":
        state = session.conversation
        if state is None:
            return None
        progress = get_conversation_progress(state)
        return cls(
            command=state.intent.value,
            current_step=progress.current_step,
            total_steps=progress.total_steps,
            percent_complete=progress.percent_complete,
            next_field=state.current.field if state.current else None,
        )


class CreateSessionRequest(BaseModel):
    """New session request."""

    project_key: str = Field(min_length=1, description="Project key")


class SessionResponse(BaseModel):
    """Session detail."""

    session_id: str = Field(description="Session ID")
    project_key: str = Field(description="Project key")
    messages: list[MessageResponse] = Field(description="Message log")
    conversation: ConversationResponse | None = Field(default=None, description="Active conversation")
    created_at: datetime = Field(description="Creation time")

    @classmethod
    def from_entity(cls, session: ChatSession) -> "SessionResponse":
        return cls(
            session_id=session.id,
            project_key=session.project_key,
            messages=[MessageResponse.from_entity(m) for m in session.messages],
            conversation=ConversationResponse.from_session(session),
            created_at=session.created_at,
        )


class SendMessageRequest(BaseModel):
    """Chat turn request."""

    message: str = Field(description="User message")


class SendMessageResponse(BaseModel):
    """Messages produced by one turn."""

    session_id: str = Field(description="Session ID")
    messages: list[MessageResponse] = Field(description="New messages (user message first)")
    conversation: ConversationResponse | None = Field(default=None, description="Active conversation")


class CancelConversationResponse(BaseModel):
    """Cancel result."""

    session_id: str
    message: MessageResponse


# ─────────────────────────────────────────────────────────────────────────────
# Endpoints
# ─────────────────────────────────────────────────────────────────────────────


async def _load_session(store: SessionStorePort, session_id: str) -> ChatSession:
    session = await store.get(session_id)
    if session is None:
        raise SessionNotFoundError(session_id)
    return session


@router.post("", response_model=SessionResponse, status_code=201)
async def create_session(
    request: CreateSessionRequest,
    store: SessionStoreDep,
) -> SessionResponse:
    """Open a chat session scoped to one project."""
    session = ChatSession(project_key=request.project_key)
    session.append(ChatMessage.assistant(MSG_GREETING.format(project_key=request.project_key)))
    await store.save(session)

    logger.info(
        "Chat session created",
        extra={"session_id": session.id, "project_key": session.project_key},
    )
    return SessionResponse.from_entity(session)


@router.get("/{session_id}", response_model=SessionResponse)
async def get_session(session_id: str, store: SessionStoreDep) -> SessionResponse:
    """Session detail with the full message log."""
    session = await _load_session(store, session_id)
    return SessionResponse.from_entity(session)


@router.post("/{session_id}/messages", response_model=SendMessageResponse)
async def send_message(
    session_id: str,
    request: SendMessageRequest,
    store: SessionStoreDep,
    command: HandleMessageDep,
) -> SendMessageResponse:
    """Run one chat turn."""
    if not request.message.strip():
        raise MessageRequiredError()

    session = await _load_session(store, session_id)
    messages = await command.execute(session, request.message)
    await store.save(session)

    return SendMessageResponse(
        session_id=session.id,
        messages=[MessageResponse.from_entity(m) for m in messages],
        conversation=ConversationResponse.from_session(session),
    )


@router.delete("/{session_id}/conversation", response_model=CancelConversationResponse)
async def cancel_conversation(
    session_id: str,
    store: SessionStoreDep,
    command: HandleMessageDep,
) -> CancelConversationResponse:
    """Cancel the active conversation."""
    session = await _load_session(store, session_id)
    message = command.cancel(session)
    await store.save(session)

    return CancelConversationResponse(
        session_id=session.id,
        message=MessageResponse.from_entity(message),
    )
