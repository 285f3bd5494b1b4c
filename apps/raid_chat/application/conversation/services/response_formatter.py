"""Response Formatter - deterministic chat text rendering.

Field order is fixed and never depends on dict ordering or locale.
Omitted fields are skipped, never rendered empty.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from raid_chat.application.conversation.ports import (
    RAIDItem,
    RAIDItemList,
    WorkflowStateInfo,
)
from raid_chat.domain import ChatMessage, MessageMetadata

MARK_SUCCESS = "✅"
MARK_ERROR = "❌"

MSG_GREETING = (
    "👋 Hello! I can help you manage RAID items for project **{project_key}**.\n\n"
    "You can:\n"
    '- Create a new RAID item: "Create a risk about..."\n'
    '- Edit an existing item: "Update RAID-001"\n'
    '- List items: "Show all risks"\n'
    '- Move the workflow: "Transition to executing"\n\n'
    "What would you like to do?"
)
MSG_NOT_UNDERSTOOD = (
    "I didn't quite understand that. Try commands like:\n"
    "- Create a risk about data security\n"
    "- Update RAID-001\n"
    "- Show all assumptions"
)
MSG_CANNOT_HANDLE = "Sorry, I cannot handle that type of command yet."
MSG_INCOMPLETE = "Conversation is not complete yet. Please answer all questions first."
MSG_CANCELLED = "Conversation cancelled. How can I help you?"
MSG_NOTHING_TO_CANCEL = "There is no active conversation to cancel."
MSG_FIRST_STEP = "Already at the first question."
MSG_AWAITING_RETRY = "The last attempt failed. Type retry to try again, back to change an answer, or cancel."
MSG_NO_ITEMS = "No RAID items found."
MSG_UNSUPPORTED = 'Command type "{command}" is not yet supported.'
MSG_MISSING_FIELDS = "Missing required fields: {fields}."


def _text(value: Any) -> str:
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def _type_label(value: Any) -> str:
    return _text(value).replace("_", " ").capitalize()


def _lines(header: str, fields: list[tuple[str, Any]]) -> str:
    body = [f"**{label}:** {_text(value)}" for label, value in fields]
    return "\n".join([header, "", *body])


def format_raid_created(item: RAIDItem) -> str:
    """Creation confirmation.

    Order: marker, kind + id, Title, Description, Priority, Status, Owner.
    """
    fields: list[tuple[str, Any]] = [
        ("Title", item.title),
        ("Description", item.description),
        ("Priority", item.priority),
        ("Status", item.status),
    ]
    if item.owner:
        fields.append(("Owner", item.owner))
    return _lines(f"{MARK_SUCCESS} **Created {_type_label(item.type)} {item.id}**", fields)


def format_raid_updated(item: RAIDItem) -> str:
    """Update confirmation.

    Order: marker, kind + id, Title, Status, Priority, Owner.
    """
    fields: list[tuple[str, Any]] = [
        ("Title", item.title),
        ("Status", item.status),
        ("Priority", item.priority),
    ]
    if item.owner:
        fields.append(("Owner", item.owner))
    return _lines(f"{MARK_SUCCESS} **Updated {_type_label(item.type)} {item.id}**", fields)


def format_workflow_transitioned(info: WorkflowStateInfo) -> str:
    """Workflow transition confirmation."""
    fields: list[tuple[str, Any]] = []
    if info.previous_state is not None:
        fields.append(("Previous State", info.previous_state))
    fields.append(("Current State", info.current_state))
    return _lines(
        f"{MARK_SUCCESS} **Workflow transitioned to {_type_label(info.current_state)}**",
        fields,
    )


def format_raid_list(result: RAIDItemList) -> str:
    """RAID item listing, one line per item in backend order."""
    if not result.items:
        return MSG_NO_ITEMS

    total = result.total or len(result.items)
    lines = [f"**{total} RAID item{'s' if total != 1 else ''}**", ""]
    lines.extend(
        f"- **{item.id}** [{_type_label(item.type)}] {item.title} "
        f"({_text(item.status)}, {_text(item.priority)})"
        for item in result.items
    )
    return "\n".join(lines)


def format_failure(action: str, error: str) -> str:
    """Backend failure text; the error string is kept verbatim."""
    return f"{MARK_ERROR} **Failed to {action}:** {error}"


def format_api_error(error: str) -> ChatMessage:
    """Render an API error as a chat message (error text kept verbatim)."""
    return ChatMessage.error(
        f"{MARK_ERROR} **Error:** {error}",
        metadata=MessageMetadata(error=error),
    )


def format_prompt(prompt: str, progress_label: str = "") -> str:
    """Prompt with optional progress suffix, e.g. "What is the title? (1/4)"."""
    return f"{prompt} {progress_label}" if progress_label else prompt


__all__ = [
    "MARK_ERROR",
    "MARK_SUCCESS",
    "format_api_error",
    "format_failure",
    "format_prompt",
    "format_raid_created",
    "format_raid_list",
    "format_raid_updated",
    "format_workflow_transitioned",
]
