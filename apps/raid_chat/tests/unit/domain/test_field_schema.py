"""Field schema Unit Tests."""

import pytest

from raid_chat.domain import CommandType, RAIDPriority, UnsupportedCommandError
from raid_chat.domain.services.field_schema import (
    build_steps,
    non_empty_text,
    one_of,
    required_fields,
)


def _fields(steps) -> list[str]:
    return [step.field for step in steps]


class TestValidators:
    @pytest.mark.parametrize("value,expected", [("x", True), ("  ", False), ("", False), (3, False)])
    def test_non_empty_text(self, value, expected: bool) -> None:
        assert non_empty_text(value) is expected

    def test_one_of(self) -> None:
        validate = one_of(RAIDPriority)

        assert validate("high") is True
        assert validate("urgent") is False


class TestRequiredFields:
    def test_create(self) -> None:
        assert required_fields(CommandType.CREATE_RAID) == ("type", "title", "description")

    def test_edit(self) -> None:
        assert required_fields(CommandType.EDIT_RAID) == ("raid_id",)

    def test_transition(self) -> None:
        assert required_fields(CommandType.TRANSITION_WORKFLOW) == ("target_state",)

    def test_list_has_none(self) -> None:
        assert required_fields(CommandType.LIST_RAID) == ()


class TestBuildSteps:
    def test_create_full_template(self) -> None:
        steps = build_steps(CommandType.CREATE_RAID)

        assert _fields(steps) == ["type", "title", "description", "priority", "owner"]
        assert [s.required for s in steps] == [True, True, True, False, False]

    def test_prefilled_field_is_skipped(self) -> None:
        steps = build_steps(CommandType.CREATE_RAID, prefilled={"type"})
        assert _fields(steps) == ["title", "description", "priority", "owner"]

    def test_optional_fields_can_be_left_out(self) -> None:
        steps = build_steps(CommandType.CREATE_RAID, include_optional=False)
        assert _fields(steps) == ["type", "title", "description"]

    def test_edit_template(self) -> None:
        steps = build_steps(CommandType.EDIT_RAID)
        assert _fields(steps) == ["raid_id", "title", "status", "priority", "owner"]

    def test_fully_prefilled_transition_has_no_steps(self) -> None:
        steps = build_steps(
            CommandType.TRANSITION_WORKFLOW,
            prefilled={"target_state"},
            include_optional=False,
        )
        assert steps == ()

    @pytest.mark.parametrize("command", [CommandType.LIST_RAID, CommandType.UNKNOWN])
    def test_non_conversational_command_rejected(self, command: CommandType) -> None:
        with pytest.raises(UnsupportedCommandError):
            build_steps(command)
