"""ConversationStep Value Object."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable

Validator = Callable[[Any], bool]


@dataclass(frozen=True)
class ConversationStep:
    """One field-collection unit of a conversation.

    Attributes:
        field: field being collected (e.g. 'title')
        prompt: question shown to the user
        required: whether the step may be skipped with an empty answer
        validate: optional predicate over the parsed value
    """

    field: str
    prompt: str
    required: bool = True
    validate: Validator | None = None

    def accepts(self, value: Any) -> bool:
        """Run the validator, if any."""
        if self.validate is None:
            return True
        return bool(self.validate(value))
