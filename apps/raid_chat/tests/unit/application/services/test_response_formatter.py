"""Response Formatter Unit Tests."""

from raid_chat.application.conversation.ports import RAIDItem, RAIDItemList, WorkflowStateInfo
from raid_chat.application.conversation.services.response_formatter import (
    format_api_error,
    format_failure,
    format_prompt,
    format_raid_created,
    format_raid_list,
    format_raid_updated,
    format_workflow_transitioned,
)
from raid_chat.domain import MessageRole


def _item(**overrides) -> RAIDItem:
    data = {
        "id": "raid-1",
        "type": "risk",
        "title": "T",
        "description": "D",
        "status": "open",
        "priority": "medium",
    }
    data.update(overrides)
    return RAIDItem.model_validate(data)


class TestFormatRaidCreated:
    def test_field_order(self) -> None:
        text = format_raid_created(_item())

        assert text == (
            "✅ **Created Risk raid-1**\n"
            "\n"
            "**Title:** T\n"
            "**Description:** D\n"
            "**Priority:** medium\n"
            "**Status:** open"
        )

    def test_owner_only_when_present(self) -> None:
        text = format_raid_created(_item(owner="alice"))

        assert text.endswith("**Owner:** alice")
        assert "Owner" not in format_raid_created(_item())


class TestFormatRaidUpdated:
    def test_field_order(self) -> None:
        text = format_raid_updated(_item(type="issue", status="in_progress", priority="high"))

        lines = text.split("\n")
        assert lines[0] == "✅ **Updated Issue raid-1**"
        assert lines[2:] == [
            "**Title:** T",
            "**Status:** in_progress",
            "**Priority:** high",
        ]


class TestFormatWorkflowTransitioned:
    def test_previous_and_current(self) -> None:
        info = WorkflowStateInfo.model_validate(
            {"current_state": "planning", "previous_state": "initiating"}
        )

        text = format_workflow_transitioned(info)

        assert text.startswith("✅ **Workflow transitioned to Planning**")
        assert "**Previous State:** initiating" in text
        assert text.endswith("**Current State:** planning")


class TestFormatRaidList:
    def test_empty(self) -> None:
        assert format_raid_list(RAIDItemList()) == "No RAID items found."

    def test_lines_keep_backend_order(self) -> None:
        result = RAIDItemList(
            items=[_item(id="raid-2", title="B"), _item(id="raid-1", type="dependency", title="A")],
            total=2,
        )

        lines = format_raid_list(result).split("\n")

        assert lines[0] == "**2 RAID items**"
        assert lines[2] == "- **raid-2** [Risk] B (open, medium)"
        assert lines[3] == "- **raid-1** [Dependency] A (open, medium)"


class TestErrors:
    def test_failure_keeps_error_verbatim(self) -> None:
        error = "  Project 'X' not found: <detail>  "
        assert format_failure("create RAID item", error) == (
            f"❌ **Failed to create RAID item:** {error}"
        )

    def test_api_error_message(self) -> None:
        message = format_api_error("Network error")

        assert message.role == MessageRole.ERROR
        assert message.content == "❌ **Error:** Network error"
        assert message.metadata.error == "Network error"


class TestFormatPrompt:
    def test_with_label(self) -> None:
        assert format_prompt("What is the title?", "(1/5)") == "What is the title? (1/5)"

    def test_without_label(self) -> None:
        assert format_prompt("What is the title?") == "What is the title?"
