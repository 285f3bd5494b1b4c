"""CommandIntent / enum Unit Tests."""

import pytest

from raid_chat.domain import CommandIntent, CommandType, RAIDType, WorkflowState


class TestCommandType:
    """CommandType tests."""

    @pytest.mark.parametrize(
        "command,expected",
        [
            (CommandType.CREATE_RAID, True),
            (CommandType.EDIT_RAID, True),
            (CommandType.TRANSITION_WORKFLOW, True),
            (CommandType.LIST_RAID, False),
            (CommandType.UNKNOWN, False),
        ],
    )
    def test_is_conversational(self, command: CommandType, expected: bool) -> None:
        assert command.is_conversational is expected


class TestLabels:
    def test_raid_type_label(self) -> None:
        assert RAIDType.DEPENDENCY.label == "Dependency"

    def test_workflow_state_label(self) -> None:
        assert WorkflowState.EXECUTING.label == "Executing"


class TestCommandIntent:
    """CommandIntent tests."""

    def test_defaults(self) -> None:
        intent = CommandIntent(type=CommandType.LIST_RAID)

        assert intent.params == {}
        assert intent.confidence == 1.0
        assert intent.original_message == ""
        assert intent.is_unknown is False

    @pytest.mark.parametrize("raw,expected", [(1.7, 1.0), (-0.2, 0.0), (0.4, 0.4)])
    def test_confidence_is_clamped(self, raw: float, expected: float) -> None:
        intent = CommandIntent(type=CommandType.CREATE_RAID, confidence=raw)
        assert intent.confidence == expected

    def test_unknown_factory(self) -> None:
        intent = CommandIntent.unknown("hello there")

        assert intent.is_unknown is True
        assert intent.confidence == 0.0
        assert intent.original_message == "hello there"

    def test_is_immutable(self) -> None:
        intent = CommandIntent(type=CommandType.CREATE_RAID)
        with pytest.raises(AttributeError):
            intent.confidence = 0.5  # type: ignore[misc]

    def test_to_dict(self) -> None:
        intent = CommandIntent(
            type=CommandType.EDIT_RAID,
            params={"raidId": "RAID-001"},
            confidence=0.9,
            original_message="update RAID-001",
        )

        assert intent.to_dict() == {
            "type": "EDIT_RAID",
            "params": {"raidId": "RAID-001"},
            "confidence": 0.9,
            "original_message": "update RAID-001",
        }
