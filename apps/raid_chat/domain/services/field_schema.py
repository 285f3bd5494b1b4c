"""Field Schema - single source of truth for conversation fields.

Step templates (sequencer) and required-field checks (completion
checker, executor) are both derived from COMMAND_FIELDS, so the two
can not drift apart.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterable

from raid_chat.domain.enums import (
    CommandType,
    RAIDPriority,
    RAIDStatus,
    RAIDType,
    WorkflowState,
)
from raid_chat.domain.exceptions import UnsupportedCommandError
from raid_chat.domain.value_objects import ConversationStep, Validator


def non_empty_text(value: Any) -> bool:
    return isinstance(value, str) and len(value.strip()) > 0


def one_of(enum_cls: type[Enum]) -> Validator:
    """Validator accepting only values of the given enum."""

    def _validate(value: Any) -> bool:
        try:
            enum_cls(value)
        except ValueError:
            return False
        return True

    return _validate


@dataclass(frozen=True)
class FieldSpec:
    """Declarative description of one collected field.

    Attributes:
        field: payload key
        prompt: question shown to the user
        required: must be present before execution
        validate: predicate over the parsed value
        param: intent param that pre-fills the field (step is skipped)
    """

    field: str
    prompt: str
    required: bool
    validate: Validator | None = None
    param: str | None = None

    def to_step(self) -> ConversationStep:
        return ConversationStep(
            field=self.field,
            prompt=self.prompt,
            required=self.required,
            validate=self.validate,
        )


_PRIORITY = FieldSpec(
    field="priority",
    prompt="What is the priority? (critical, high, medium, low) - type skip to leave empty",
    required=False,
    validate=one_of(RAIDPriority),
)

_OWNER = FieldSpec(
    field="owner",
    prompt="Who is the owner/assignee? - type skip to leave empty",
    required=False,
    validate=non_empty_text,
)

COMMAND_FIELDS: dict[CommandType, tuple[FieldSpec, ...]] = {
    CommandType.CREATE_RAID: (
        FieldSpec(
            field="type",
            prompt="What type of RAID item? (risk, assumption, issue, dependency)",
            required=True,
            validate=one_of(RAIDType),
            param="raidType",
        ),
        FieldSpec(
            field="title",
            prompt="What is the title?",
            required=True,
            validate=non_empty_text,
        ),
        FieldSpec(
            field="description",
            prompt="Please provide a description:",
            required=True,
            validate=non_empty_text,
        ),
        _PRIORITY,
        _OWNER,
    ),
    CommandType.EDIT_RAID: (
        FieldSpec(
            field="raid_id",
            prompt="Which RAID item should be updated? (e.g. RAID-001)",
            required=True,
            validate=non_empty_text,
            param="raidId",
        ),
        FieldSpec(
            field="title",
            prompt="New title? - type skip to keep the current one",
            required=False,
            validate=non_empty_text,
        ),
        FieldSpec(
            field="status",
            prompt="New status? (open, in_progress, mitigated, closed, accepted) - type skip to leave empty",
            required=False,
            validate=one_of(RAIDStatus),
        ),
        _PRIORITY,
        _OWNER,
    ),
    CommandType.TRANSITION_WORKFLOW: (
        FieldSpec(
            field="target_state",
            prompt=(
                "Which workflow state should the project move to? "
                "(initiating, planning, executing, monitoring, closing, closed)"
            ),
            required=True,
            validate=one_of(WorkflowState),
            param="targetState",
        ),
        FieldSpec(
            field="reason",
            prompt="Reason for the transition? - type skip to leave empty",
            required=False,
            validate=non_empty_text,
        ),
    ),
}


def field_specs(command_type: CommandType) -> tuple[FieldSpec, ...]:
    """Field specs for a command, empty for non-conversational commands."""
    return COMMAND_FIELDS.get(command_type, ())


def required_fields(command_type: CommandType) -> tuple[str, ...]:
    """Names of the fields that must be present before execution."""
    return tuple(spec.field for spec in field_specs(command_type) if spec.required)


def build_steps(
    command_type: CommandType,
    prefilled: Iterable[str] = (),
    include_optional: bool = True,
) -> tuple[ConversationStep, ...]:
    """Build the step sequence for a new conversation.

    Steps keep declaration order. Fields already known from the intent
    are dropped; optional fields are dropped when include_optional is off.

    Args:
        command_type: command to build steps for
        prefilled: field names already filled from the intent
        include_optional: whether to ask for optional fields

    Returns:
        Immutable step tuple

    Raises:
        UnsupportedCommandError: command opens no conversation
    """
    if command_type not in COMMAND_FIELDS:
        raise UnsupportedCommandError(command_type.value)

    known = set(prefilled)
    return tuple(
        spec.to_step()
        for spec in field_specs(command_type)
        if spec.field not in known and (spec.required or include_optional)
    )


__all__ = [
    "COMMAND_FIELDS",
    "FieldSpec",
    "build_steps",
    "field_specs",
    "non_empty_text",
    "one_of",
    "required_fields",
]
