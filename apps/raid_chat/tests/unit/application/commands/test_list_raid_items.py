"""ListRAIDItemsCommand Unit Tests."""

from unittest.mock import AsyncMock

import pytest

from raid_chat.application.conversation.commands.list_raid_items import ListRAIDItemsCommand
from raid_chat.application.conversation.ports import ApiResponse, RAIDItem, RAIDItemList
from raid_chat.domain import CommandIntent, CommandType, MessageRole


@pytest.fixture
def mock_raid_client() -> AsyncMock:
    client = AsyncMock()
    client.list_raid_items = AsyncMock(
        return_value=ApiResponse.ok(
            RAIDItemList(
                items=[
                    RAIDItem(id="raid-1", type="risk", title="Vendor delay", priority="high"),
                ],
                total=1,
            )
        )
    )
    return client


class TestBuildFilters:
    def test_no_intent(self) -> None:
        assert ListRAIDItemsCommand.build_filters(None) == {}

    def test_type_filter(self) -> None:
        intent = CommandIntent(type=CommandType.LIST_RAID, params={"raidType": "Risks"})
        assert ListRAIDItemsCommand.build_filters(intent) == {"type": "risk"}

    def test_unknown_type_ignored(self) -> None:
        intent = CommandIntent(type=CommandType.LIST_RAID, params={"raidType": "banana"})
        assert ListRAIDItemsCommand.build_filters(intent) == {}


class TestListRAIDItemsCommand:
    @pytest.mark.asyncio
    async def test_lists_items(self, mock_raid_client) -> None:
        command = ListRAIDItemsCommand(raid_client=mock_raid_client)

        result = await command.execute("PRJ")

        assert result.success is True
        assert result.message.role == MessageRole.ASSISTANT
        assert "- **raid-1** [Risk] Vendor delay (open, high)" in result.message.content
        mock_raid_client.list_raid_items.assert_awaited_once_with("PRJ", None)

    @pytest.mark.asyncio
    async def test_passes_type_filter(self, mock_raid_client) -> None:
        command = ListRAIDItemsCommand(raid_client=mock_raid_client)
        intent = CommandIntent(type=CommandType.LIST_RAID, params={"raidType": "issue"})

        await command.execute("PRJ", intent)

        mock_raid_client.list_raid_items.assert_awaited_once_with("PRJ", {"type": "issue"})

    @pytest.mark.asyncio
    async def test_empty(self, mock_raid_client) -> None:
        mock_raid_client.list_raid_items.return_value = ApiResponse.ok(RAIDItemList())
        command = ListRAIDItemsCommand(raid_client=mock_raid_client)

        result = await command.execute("PRJ")

        assert result.success is True
        assert result.message.content == "No RAID items found."

    @pytest.mark.asyncio
    async def test_backend_rejection(self, mock_raid_client) -> None:
        mock_raid_client.list_raid_items.return_value = ApiResponse.fail("Project not found")
        command = ListRAIDItemsCommand(raid_client=mock_raid_client)

        result = await command.execute("PRJ")

        assert result.success is False
        assert result.error == "Project not found"
        assert result.message.role == MessageRole.ERROR
        assert "Project not found" in result.message.content

    @pytest.mark.asyncio
    async def test_exception_is_folded(self, mock_raid_client) -> None:
        mock_raid_client.list_raid_items.side_effect = ConnectionError("refused")
        command = ListRAIDItemsCommand(raid_client=mock_raid_client)

        result = await command.execute("PRJ")

        assert result.success is False
        assert result.error == "refused"
