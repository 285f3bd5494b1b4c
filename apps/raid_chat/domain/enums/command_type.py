"""CommandType Enum.

Closed vocabulary of chat commands the engine understands.
"""

from enum import Enum


class CommandType(str, Enum):
    """Command discriminant.

    Produced by the intent parser and carried by every conversation
    state as its `intent` tag.
    """

    CREATE_RAID = "CREATE_RAID"
    """Create a new RAID item (multi-turn)."""

    EDIT_RAID = "EDIT_RAID"
    """Update fields of an existing RAID item (multi-turn)."""

    LIST_RAID = "LIST_RAID"
    """List RAID items. Executes immediately, no conversation."""

    TRANSITION_WORKFLOW = "TRANSITION_WORKFLOW"
    """Move the project workflow to another state (multi-turn)."""

    UNKNOWN = "UNKNOWN"
    """Message was not recognised as a command."""

    @property
    def is_conversational(self) -> bool:
        """Whether this command collects data over several turns."""
        return self in {
            CommandType.CREATE_RAID,
            CommandType.EDIT_RAID,
            CommandType.TRANSITION_WORKFLOW,
        }
