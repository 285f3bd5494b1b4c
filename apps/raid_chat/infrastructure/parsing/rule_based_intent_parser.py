"""Rule-based Intent Parser.

Regex classifier turning chat text into a CommandIntent. Patterns are
checked in a fixed order: create, edit, list, transition. The first
match wins.

Confidence:
- 0.9 when the key parameter (type, id, target state) was extracted
- 0.7 when only the command was recognised
- 0.0 for UNKNOWN
"""

from __future__ import annotations

import logging
import re
from typing import Any

from raid_chat.application.conversation.ports import IntentParserPort
from raid_chat.domain import CommandIntent, CommandType, RAIDType

logger = logging.getLogger(__name__)

CONFIDENCE_WITH_PARAMS = 0.9
CONFIDENCE_COMMAND_ONLY = 0.7

_RAID_NOUN = r"(raid|risk|assumption|issue|dependency)"
_RAID_PLURAL = r"(raid|risks|assumptions|issues|dependencies)"

CREATE_PATTERNS = (
    re.compile(rf"create\s+(a\s+)?(new\s+)?{_RAID_NOUN}", re.IGNORECASE),
    re.compile(rf"add\s+(a\s+)?(new\s+)?{_RAID_NOUN}", re.IGNORECASE),
    re.compile(rf"new\s+{_RAID_NOUN}", re.IGNORECASE),
    re.compile(r"log\s+(a\s+|an\s+)?(new\s+)?(risk|assumption|issue|dependency)", re.IGNORECASE),
)

EDIT_PATTERNS = (
    re.compile(rf"edit\s+{_RAID_NOUN}", re.IGNORECASE),
    re.compile(r"update\s+(raid|risk|assumption|issue|dependency|[raid]-\d+)", re.IGNORECASE),
    re.compile(rf"modify\s+{_RAID_NOUN}", re.IGNORECASE),
    re.compile(rf"change\s+{_RAID_NOUN}", re.IGNORECASE),
)

LIST_PATTERNS = (
    re.compile(rf"list\s+(all\s+)?{_RAID_PLURAL}", re.IGNORECASE),
    re.compile(rf"show\s+(all\s+)?{_RAID_PLURAL}", re.IGNORECASE),
    re.compile(rf"view\s+(all\s+)?{_RAID_PLURAL}", re.IGNORECASE),
    re.compile(rf"get\s+(all\s+)?{_RAID_PLURAL}", re.IGNORECASE),
)

TRANSITION_PATTERNS = (
    re.compile(r"transition\s+to\s+\w+", re.IGNORECASE),
    re.compile(r"move\s+to\s+\w+", re.IGNORECASE),
    re.compile(r"change\s+state\s+to\s+\w+", re.IGNORECASE),
    re.compile(r"set\s+state\s+to\s+\w+", re.IGNORECASE),
)

# (pattern, type) in match order
RAID_TYPE_PATTERNS = (
    (re.compile(r"\b(risk|risks)\b", re.IGNORECASE), RAIDType.RISK),
    (re.compile(r"\b(assumption|assumptions)\b", re.IGNORECASE), RAIDType.ASSUMPTION),
    (re.compile(r"\b(issue|issues)\b", re.IGNORECASE), RAIDType.ISSUE),
    (re.compile(r"\b(dependency|dependencies)\b", re.IGNORECASE), RAIDType.DEPENDENCY),
)

RAID_ID_PATTERN = re.compile(r"\b(RAID|R|A|I|D)-(\d+)\b", re.IGNORECASE)
TARGET_STATE_PATTERN = re.compile(r"to\s+(\w+)", re.IGNORECASE)


def _matches(patterns: tuple[re.Pattern[str], ...], text: str) -> bool:
    return any(pattern.search(text) for pattern in patterns)


def extract_raid_type(text: str) -> RAIDType | None:
    """RAID type mentioned in the text, if any."""
    for pattern, raid_type in RAID_TYPE_PATTERNS:
        if pattern.search(text):
            return raid_type
    return None


def extract_raid_id(text: str) -> str | None:
    """RAID item id such as RAID-001 or R-42 (uppercased)."""
    match = RAID_ID_PATTERN.search(text)
    return match.group(0).upper() if match else None


def extract_target_state(text: str) -> str | None:
    """Word following "to" (lowercased), not validated here."""
    match = TARGET_STATE_PATTERN.search(text)
    return match.group(1).lower() if match else None


def parse_command(message: str) -> CommandIntent:
    """Classify a chat message.

    Args:
        message: raw user text

    Returns:
        CommandIntent (UNKNOWN when no pattern matches)
    """
    text = message.lower().strip()

    if _matches(CREATE_PATTERNS, text):
        raid_type = extract_raid_type(text)
        return _intent(CommandType.CREATE_RAID, message, raidType=raid_type.value if raid_type else None)

    if _matches(EDIT_PATTERNS, text):
        return _intent(CommandType.EDIT_RAID, message, raidId=extract_raid_id(text))

    if _matches(LIST_PATTERNS, text):
        raid_type = extract_raid_type(text)
        return CommandIntent(
            type=CommandType.LIST_RAID,
            params={"raidType": raid_type.value} if raid_type else {},
            confidence=CONFIDENCE_WITH_PARAMS,
            original_message=message,
        )

    if _matches(TRANSITION_PATTERNS, text):
        return _intent(CommandType.TRANSITION_WORKFLOW, message, targetState=extract_target_state(text))

    return CommandIntent.unknown(message)


def _intent(command_type: CommandType, message: str, **params: Any) -> CommandIntent:
    extracted = {key: value for key, value in params.items() if value is not None}
    return CommandIntent(
        type=command_type,
        params=extracted,
        confidence=CONFIDENCE_WITH_PARAMS if extracted else CONFIDENCE_COMMAND_ONLY,
        original_message=message,
    )


class RuleBasedIntentParser(IntentParserPort):
    """IntentParserPort backed by regular expressions.

    Usage:
        parser = RuleBasedIntentParser()
        intent = await parser.parse("Create a new risk")
    """

    async def parse(self, message: str) -> CommandIntent:
        intent = parse_command(message)
        logger.debug(
            "Message classified",
            extra={
                "command": intent.type.value,
                "params": intent.params,
                "confidence": intent.confidence,
            },
        )
        return intent
