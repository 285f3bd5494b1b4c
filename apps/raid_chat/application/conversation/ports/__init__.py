"""Conversation Ports."""

from .intent_parser import IntentParserPort
from .raid_client import (
    ApiResponse,
    RAIDClientPort,
    RAIDItem,
    RAIDItemCreate,
    RAIDItemList,
    RAIDItemUpdate,
)
from .session_store import SessionStorePort
from .workflow_client import (
    WorkflowClientPort,
    WorkflowStateInfo,
    WorkflowStateUpdate,
    WorkflowTransition,
)

__all__ = [
    "ApiResponse",
    "IntentParserPort",
    "RAIDClientPort",
    "RAIDItem",
    "RAIDItemCreate",
    "RAIDItemList",
    "RAIDItemUpdate",
    "SessionStorePort",
    "WorkflowClientPort",
    "WorkflowStateInfo",
    "WorkflowStateUpdate",
    "WorkflowTransition",
]
