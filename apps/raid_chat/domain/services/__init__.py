"""Domain Services."""

from raid_chat.domain.services.field_schema import (
    COMMAND_FIELDS,
    FieldSpec,
    build_steps,
    field_specs,
    required_fields,
)

__all__ = [
    "COMMAND_FIELDS",
    "FieldSpec",
    "build_steps",
    "field_specs",
    "required_fields",
]
