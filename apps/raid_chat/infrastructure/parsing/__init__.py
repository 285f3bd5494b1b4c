"""Intent parsing adapters."""

from raid_chat.infrastructure.parsing.rule_based_intent_parser import (
    RuleBasedIntentParser,
    parse_command,
)

__all__ = ["RuleBasedIntentParser", "parse_command"]
