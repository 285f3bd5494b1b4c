"""Handle Chat Message Command - one session turn.

Flow:
1. No active conversation: parse the text into an intent.
   - UNKNOWN     -> help text
   - LIST_RAID   -> immediate execution
   - otherwise   -> start a conversation, ask the first question
2. Active conversation: cancel / back / retry keywords; "skip" answers
   an optional step with nothing. Other text goes to the sequencer
   (rejected answers are re-prompted).
3. Complete conversation: eligibility check, then exactly one execution.
   The state resets on success or on an unsupported command; after any
   other failure it is kept so the call can be retried without
   re-answering validated fields.

Every turn is processed to completion before the next one is accepted.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from raid_chat.application.conversation.commands.execute_command import ERR_UNSUPPORTED
from raid_chat.application.conversation.services.completion_checker import (
    can_execute_command,
    is_conversation_complete,
    missing_fields,
)
from raid_chat.application.conversation.services.response_formatter import (
    MARK_ERROR,
    MSG_AWAITING_RETRY,
    MSG_CANCELLED,
    MSG_CANNOT_HANDLE,
    MSG_FIRST_STEP,
    MSG_MISSING_FIELDS,
    MSG_NOT_UNDERSTOOD,
    MSG_NOTHING_TO_CANCEL,
    format_api_error,
    format_prompt,
)
from raid_chat.application.conversation.services.step_sequencer import (
    get_conversation_progress,
    go_back,
    process_response,
    start_conversation,
)
from raid_chat.domain import ChatMessage, ChatSession, CommandType, MessageMetadata

if TYPE_CHECKING:
    from raid_chat.application.conversation.commands.execute_command import ExecuteCommandCommand
    from raid_chat.application.conversation.commands.list_raid_items import ListRAIDItemsCommand
    from raid_chat.application.conversation.ports import IntentParserPort

logger = logging.getLogger(__name__)

CANCEL_WORDS = frozenset(["cancel", "stop", "abort", "quit"])
BACK_WORDS = frozenset(["back", "go back", "previous"])
RETRY_WORDS = frozenset(["retry", "try again"])
SKIP_WORDS = frozenset(["skip", "-"])


class HandleChatMessageCommand:
    """Chat session turn (UseCase).

    Usage:
        command = HandleChatMessageCommand(intent_parser, executor, lister)
        new_messages = await command.execute(session, "Create a risk")
    """

    def __init__(
        self,
        intent_parser: "IntentParserPort",
        executor: "ExecuteCommandCommand",
        lister: "ListRAIDItemsCommand",
        include_optional: bool = True,
    ) -> None:
        """Initialize.

        Args:
            intent_parser: upstream intent parser (Port)
            executor: completed conversation executor
            lister: LIST_RAID executor
            include_optional: ask optional fields in new conversations
        """
        self._intent_parser = intent_parser
        self._executor = executor
        self._lister = lister
        self._include_optional = include_optional

    async def execute(self, session: ChatSession, text: str) -> list[ChatMessage]:
        """Process one user message.

        Args:
            session: chat session (mutated in place)
            text: raw user input

        Returns:
            Messages appended during this turn, user message first
        """
        if not text or not text.strip():
            return []

        start = len(session.messages)
        session.append(ChatMessage.user(text))

        if session.has_active_conversation:
            await self._continue(session, text)
        else:
            await self._start(session, text)

        return session.messages[start:]

    def cancel(self, session: ChatSession) -> ChatMessage:
        """Cancel the active conversation (explicit, synchronous)."""
        if not session.has_active_conversation:
            return session.append(ChatMessage.assistant(MSG_NOTHING_TO_CANCEL))

        logger.info(
            "Conversation cancelled",
            extra={"session_id": session.id, "command": session.conversation.intent.value},
        )
        session.reset_conversation()
        return session.append(ChatMessage.assistant(MSG_CANCELLED))

    # ─────────────────────────────────────────────────────────────
    # New command
    # ─────────────────────────────────────────────────────────────

    async def _start(self, session: ChatSession, text: str) -> None:
        try:
            intent = await self._intent_parser.parse(text)
        except Exception as e:
            logger.exception("Intent parsing failed", extra={"session_id": session.id})
            session.append(format_api_error(str(e) or type(e).__name__))
            return

        logger.info(
            "Intent parsed",
            extra={
                "session_id": session.id,
                "command": intent.type.value,
                "confidence": intent.confidence,
            },
        )
        metadata = MessageMetadata(command=intent)

        if intent.is_unknown:
            session.append(ChatMessage.assistant(MSG_NOT_UNDERSTOOD, metadata=metadata))
            return

        if intent.type == CommandType.LIST_RAID:
            result = await self._lister.execute(session.project_key, intent)
            session.append(result.message)
            return

        started = start_conversation(intent, session.project_key, self._include_optional)
        if started is None:
            session.append(ChatMessage.assistant(MSG_CANNOT_HANDLE, metadata=metadata))
            return

        state, prompt = started
        session.set_conversation(state)
        if prompt is not None:
            session.append(ChatMessage.assistant(prompt, metadata=metadata))
            return

        await self._try_execute(session)

    # ─────────────────────────────────────────────────────────────
    # Active conversation
    # ─────────────────────────────────────────────────────────────

    async def _continue(self, session: ChatSession, text: str) -> None:
        word = text.strip().lower()
        state = session.conversation

        if word in CANCEL_WORDS:
            self.cancel(session)
            return

        if word in BACK_WORDS:
            self._back(session)
            return

        if is_conversation_complete(state):
            if word in RETRY_WORDS:
                await self._try_execute(session)
            else:
                session.append(ChatMessage.assistant(MSG_AWAITING_RETRY))
            return

        turn = process_response(state, "" if word in SKIP_WORDS else text)
        if not turn.accepted:
            session.append(ChatMessage.assistant(f"{MARK_ERROR} {turn.error}\n\n{turn.next_prompt}"))
            return

        session.set_conversation(turn.state)
        if turn.is_complete:
            await self._try_execute(session)
            return

        progress = get_conversation_progress(turn.state)
        session.append(ChatMessage.assistant(format_prompt(turn.next_prompt, progress.label)))

    def _back(self, session: ChatSession) -> None:
        state = session.conversation
        previous = go_back(state)
        if previous.current_step == state.current_step:
            content = MSG_FIRST_STEP
            if previous.current is not None:
                content = f"{content} {previous.current.prompt}"
            session.append(ChatMessage.assistant(content))
            return

        session.set_conversation(previous)
        progress = get_conversation_progress(previous)
        session.append(ChatMessage.assistant(format_prompt(previous.current.prompt, progress.label)))

    async def _try_execute(self, session: ChatSession) -> None:
        state = session.conversation
        if not can_execute_command(state):
            fields = ", ".join(missing_fields(state)) or "unknown"
            session.append(
                ChatMessage.assistant(
                    f"{MSG_MISSING_FIELDS.format(fields=fields)} "
                    "Type back to change an answer or cancel to stop."
                )
            )
            return

        result = await self._executor.execute(state)
        session.append(result.message)
        if result.success or result.error == ERR_UNSUPPORTED:
            session.reset_conversation()

        logger.info(
            "Command executed",
            extra={
                "session_id": session.id,
                "command": state.intent.value,
                "success": result.success,
                "error": result.error,
            },
        )


__all__ = ["HandleChatMessageCommand"]
