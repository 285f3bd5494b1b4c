"""Completion & Eligibility Checker - pure predicates.

Completion looks at the step index only; eligibility re-checks the
payload shape against the field schema, independent of step count.
"""

from __future__ import annotations

from typing import Any

from raid_chat.domain import (
    ConversationState,
    CreateRAIDState,
    EditRAIDState,
    TransitionWorkflowState,
)
from raid_chat.domain.services.field_schema import required_fields


def _present(value: Any) -> bool:
    if value is None:
        return False
    if isinstance(value, str):
        return bool(value.strip())
    return True


def is_conversation_complete(state: ConversationState) -> bool:
    """Every step has been answered."""
    return state is not None and state.current_step >= len(state.steps)


def missing_fields(state: ConversationState) -> list[str]:
    """Required payload entries that are absent or empty.

    EDIT_RAID additionally reports `updates` when nothing changes.
    """
    if state is None:
        return []

    missing: list[str] = []
    if not _present(state.project_key):
        missing.append("project_key")

    missing.extend(
        name for name in required_fields(state.intent) if not _present(state.value_of(name))
    )

    if isinstance(state, EditRAIDState) and not state.updates:
        missing.append("updates")

    return missing


def can_execute_command(state: ConversationState) -> bool:
    """Conversation is complete and its payload is structurally valid."""
    if not is_conversation_complete(state):
        return False
    if not isinstance(state, (CreateRAIDState, EditRAIDState, TransitionWorkflowState)):
        return False
    return not missing_fields(state)


__all__ = ["can_execute_command", "is_conversation_complete", "missing_fields"]
