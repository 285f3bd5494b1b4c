"""WorkflowState Enum.

Project lifecycle states known to the workflow API.
"""

from enum import Enum


class WorkflowState(str, Enum):
    """Project workflow state."""

    INITIATING = "initiating"
    PLANNING = "planning"
    EXECUTING = "executing"
    MONITORING = "monitoring"
    CLOSING = "closing"
    CLOSED = "closed"

    @property
    def label(self) -> str:
        return self.value.capitalize()
