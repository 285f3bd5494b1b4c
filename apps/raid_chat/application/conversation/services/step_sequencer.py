"""Conversation Step Sequencer - pure business logic.

Builds the step list for a newly recognised intent and advances the
state one answer at a time. A linear automaton: steps are asked in
declaration order and never re-ordered by earlier answers.

Flow:
1. init_conversation(intent, project_key) -> state (None for LIST/UNKNOWN)
2. answer_current_step(state, raw) -> new state, or the same state when
   the answer is rejected (caller re-prompts)
3. go_back(state) -> previous step, stored value dropped
"""

from __future__ import annotations

import logging
from typing import Any

from raid_chat.application.conversation.dto import ConversationProgress, ConversationTurn
from raid_chat.application.conversation.services.field_parser import parse_field_value
from raid_chat.domain import (
    CommandIntent,
    CommandType,
    ConversationState,
    CreateRAIDState,
    EditRAIDState,
    RAIDType,
    TransitionWorkflowState,
    UnsupportedCommandError,
    WorkflowState,
)
from raid_chat.domain.services.field_schema import build_steps

logger = logging.getLogger(__name__)

ERR_NO_CONVERSATION = "No active conversation"
ERR_INVALID_STEP = "Invalid conversation step"
ERR_VALIDATION = "Validation failed"
ERR_REQUIRED = "Required field"


def _enum_param(enum_cls: type, field: str, raw: Any) -> Any:
    if raw is None:
        return None
    try:
        return enum_cls(parse_field_value(field, raw))
    except ValueError:
        return None


def init_conversation(
    intent: CommandIntent,
    project_key: str,
    include_optional: bool = True,
) -> ConversationState:
    """Create the conversation state for an intent.

    Args:
        intent: parsed command intent
        project_key: project the conversation is scoped to
        include_optional: also ask for optional fields (priority, owner, ...)

    Returns:
        New state, or None for commands without a conversation
    """
    if not intent.type.is_conversational:
        return None

    params = intent.params or {}

    if intent.type == CommandType.CREATE_RAID:
        raid_type = _enum_param(RAIDType, "type", params.get("raidType"))
        prefilled = {"type"} if raid_type else set()
        return CreateRAIDState(
            project_key=project_key,
            collected_data={"type": raid_type.value} if raid_type else {},
            steps=build_steps(intent.type, prefilled, include_optional),
        )

    if intent.type == CommandType.EDIT_RAID:
        raid_id = params.get("raidId")
        raid_id = raid_id.strip().upper() if isinstance(raid_id, str) else ""
        prefilled = {"raid_id"} if raid_id else set()
        return EditRAIDState(
            project_key=project_key,
            raid_id=raid_id,
            steps=build_steps(intent.type, prefilled, include_optional),
        )

    if intent.type == CommandType.TRANSITION_WORKFLOW:
        target = _enum_param(WorkflowState, "target_state", params.get("targetState"))
        prefilled = {"target_state"} if target else set()
        return TransitionWorkflowState(
            project_key=project_key,
            target_state=target,
            steps=build_steps(intent.type, prefilled, include_optional),
        )

    raise UnsupportedCommandError(intent.type.value)


def start_conversation(
    intent: CommandIntent,
    project_key: str,
    include_optional: bool = True,
) -> tuple[ConversationState, str | None] | None:
    """Start a conversation and return it with its first prompt.

    Returns:
        (state, initial prompt) or None when the intent opens no
        conversation. The prompt is None for a zero-step conversation.
    """
    state = init_conversation(intent, project_key, include_optional)
    if state is None:
        return None

    logger.info(
        "Conversation started",
        extra={
            "command": intent.type.value,
            "project_key": project_key,
            "steps": len(state.steps),
            "confidence": intent.confidence,
        },
    )
    step = state.current
    return state, step.prompt if step else None


def _is_blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _evaluate(state, raw_value: Any) -> tuple[ConversationState, str | None]:
    step = state.current
    if step is None:
        return state, ERR_INVALID_STEP

    value = parse_field_value(step.field, raw_value)

    if _is_blank(value):
        if step.required:
            return state, ERR_REQUIRED
        return state.advance(), None

    if not step.accepts(value):
        return state, ERR_VALIDATION

    return state.advance(step.field, value), None


def answer_current_step(state: ConversationState, raw_value: Any) -> ConversationState:
    """Apply one answer to the current step.

    Rejected answers (failed validator, blank required step) return the
    state unchanged; the caller is responsible for re-prompting.

    Args:
        state: current conversation state
        raw_value: user answer (None / blank skips an optional step)

    Returns:
        Advanced state, or the same state on rejection
    """
    if state is None:
        return None
    new_state, _ = _evaluate(state, raw_value)
    return new_state


def process_response(state: ConversationState, user_response: str) -> ConversationTurn:
    """Apply one answer and describe the resulting turn."""
    if state is None:
        return ConversationTurn(
            state=None,
            next_prompt=None,
            is_complete=True,
            error=ERR_NO_CONVERSATION,
        )

    step = state.current
    new_state, error = _evaluate(state, user_response)

    if error == ERR_INVALID_STEP:
        return ConversationTurn(state=state, next_prompt=None, is_complete=True, error=error)

    if error is not None:
        prefix = "Invalid value." if error == ERR_VALIDATION else "This field is required."
        logger.debug(
            "Answer rejected",
            extra={"field": step.field, "reason": error},
        )
        return ConversationTurn(
            state=state,
            next_prompt=f"{prefix} {step.prompt}",
            is_complete=False,
            error=error,
        )

    next_step = new_state.current
    return ConversationTurn(
        state=new_state,
        next_prompt=next_step.prompt if next_step else None,
        is_complete=next_step is None,
    )


def go_back(state: ConversationState) -> ConversationState:
    """Return to the previous step (no-op on the first step)."""
    if state is None:
        return None
    return state.retreat()


def get_conversation_progress(state: ConversationState) -> ConversationProgress:
    """Current step progress."""
    if state is None:
        return ConversationProgress(current_step=0, total_steps=0, percent_complete=0)

    total = len(state.steps)
    percent = 100 if total == 0 else round(state.current_step / total * 100)
    return ConversationProgress(
        current_step=state.current_step,
        total_steps=total,
        percent_complete=percent,
    )


__all__ = [
    "answer_current_step",
    "get_conversation_progress",
    "go_back",
    "init_conversation",
    "process_response",
    "start_conversation",
]
