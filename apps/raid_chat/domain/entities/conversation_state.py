"""Conversation State - per-command dialog state.

A tagged union over the in-progress command types. `None` stands for
"no active conversation".

States are immutable: the sequencer returns a new state for every
accepted answer, so a rejected answer leaves the caller's state as is.

Invariant:
    0 <= current_step <= len(steps)
    complete  <=>  current_step == len(steps)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field, replace
from typing import Any, ClassVar, Optional, Union

from raid_chat.domain.enums import CommandType, WorkflowState
from raid_chat.domain.exceptions import InvalidConversationStateError
from raid_chat.domain.value_objects import ConversationStep


@dataclass(frozen=True, kw_only=True)
class BaseConversationState(ABC):
    """Fields shared by every conversation variant.

    Attributes:
        project_key: project every conversation is scoped to
        current_step: index of the next step to answer
        steps: immutable step sequence built at initialization
    """

    intent: ClassVar[CommandType]

    project_key: str
    current_step: int = 0
    steps: tuple[ConversationStep, ...] = ()

    def __post_init__(self) -> None:
        if not 0 <= self.current_step <= len(self.steps):
            raise InvalidConversationStateError(self.current_step, len(self.steps))

    @property
    def current(self) -> ConversationStep | None:
        """Step awaiting an answer, None once every step is answered."""
        if self.current_step < len(self.steps):
            return self.steps[self.current_step]
        return None

    @property
    def is_complete(self) -> bool:
        return self.current_step >= len(self.steps)

    @abstractmethod
    def value_of(self, field_name: str) -> Any:
        """Collected value for a field, None when absent."""

    @abstractmethod
    def _store(self, field_name: str, value: Any) -> dict[str, Any]:
        """Replacement fields that merge value under field_name."""

    @abstractmethod
    def _discard(self, field_name: str) -> dict[str, Any]:
        """Replacement fields that drop the value under field_name."""

    def advance(self, field_name: str | None = None, value: Any = None):
        """Merge a value (when given) and move to the next step."""
        changes = self._store(field_name, value) if field_name is not None else {}
        return replace(self, current_step=self.current_step + 1, **changes)

    def retreat(self):
        """Move back one step, dropping the value stored by that step."""
        if self.current_step == 0:
            return self
        previous = self.steps[self.current_step - 1]
        return replace(
            self,
            current_step=self.current_step - 1,
            **self._discard(previous.field),
        )


@dataclass(frozen=True, kw_only=True)
class CreateRAIDState(BaseConversationState):
    """Conversation state for creating a RAID item.

    Attributes:
        collected_data: partial RAID item gathered so far
    """

    intent: ClassVar[CommandType] = CommandType.CREATE_RAID

    collected_data: dict[str, Any] = field(default_factory=dict)

    def value_of(self, field_name: str) -> Any:
        return self.collected_data.get(field_name)

    def _store(self, field_name: str, value: Any) -> dict[str, Any]:
        return {"collected_data": {**self.collected_data, field_name: value}}

    def _discard(self, field_name: str) -> dict[str, Any]:
        data = {k: v for k, v in self.collected_data.items() if k != field_name}
        return {"collected_data": data}


@dataclass(frozen=True, kw_only=True)
class EditRAIDState(BaseConversationState):
    """Conversation state for editing a RAID item.

    Attributes:
        raid_id: item being edited
        updates: partial RAID item with the changed fields
    """

    intent: ClassVar[CommandType] = CommandType.EDIT_RAID

    raid_id: str = ""
    updates: dict[str, Any] = field(default_factory=dict)

    def value_of(self, field_name: str) -> Any:
        if field_name == "raid_id":
            return self.raid_id or None
        return self.updates.get(field_name)

    def _store(self, field_name: str, value: Any) -> dict[str, Any]:
        if field_name == "raid_id":
            return {"raid_id": str(value).upper()}
        return {"updates": {**self.updates, field_name: value}}

    def _discard(self, field_name: str) -> dict[str, Any]:
        if field_name == "raid_id":
            return {"raid_id": ""}
        return {"updates": {k: v for k, v in self.updates.items() if k != field_name}}


@dataclass(frozen=True, kw_only=True)
class TransitionWorkflowState(BaseConversationState):
    """Conversation state for a workflow transition.

    Attributes:
        target_state: workflow state to move to
        reason: optional justification recorded with the transition
    """

    intent: ClassVar[CommandType] = CommandType.TRANSITION_WORKFLOW

    target_state: WorkflowState | None = None
    reason: str | None = None

    def value_of(self, field_name: str) -> Any:
        if field_name == "target_state":
            return self.target_state
        if field_name == "reason":
            return self.reason
        return None

    def _store(self, field_name: str, value: Any) -> dict[str, Any]:
        if field_name == "target_state":
            return {"target_state": WorkflowState(value)}
        if field_name == "reason":
            return {"reason": value}
        return {}

    def _discard(self, field_name: str) -> dict[str, Any]:
        if field_name in ("target_state", "reason"):
            return {field_name: None}
        return {}


ConversationState = Optional[
    Union[CreateRAIDState, EditRAIDState, TransitionWorkflowState]
]

__all__ = [
    "BaseConversationState",
    "ConversationState",
    "CreateRAIDState",
    "EditRAIDState",
    "TransitionWorkflowState",
]
