"""Conversation Services (pure logic, no Port calls)."""

from .completion_checker import can_execute_command, is_conversation_complete, missing_fields
from .field_parser import parse_field_value
from .response_formatter import (
    format_api_error,
    format_raid_created,
    format_raid_list,
    format_raid_updated,
    format_workflow_transitioned,
)
from .step_sequencer import (
    answer_current_step,
    get_conversation_progress,
    go_back,
    init_conversation,
    process_response,
    start_conversation,
)

__all__ = [
    "answer_current_step",
    "can_execute_command",
    "format_api_error",
    "format_raid_created",
    "format_raid_list",
    "format_raid_updated",
    "format_workflow_transitioned",
    "get_conversation_progress",
    "go_back",
    "init_conversation",
    "is_conversation_complete",
    "missing_fields",
    "parse_field_value",
    "process_response",
    "start_conversation",
]
