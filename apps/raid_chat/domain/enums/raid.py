"""RAID Enums.

Values match the JSON contract of the project RAID register API.
"""

from enum import Enum


class RAIDType(str, Enum):
    """RAID item type."""

    RISK = "risk"
    ASSUMPTION = "assumption"
    ISSUE = "issue"
    DEPENDENCY = "dependency"

    @property
    def label(self) -> str:
        """Title-cased display label (e.g. "Risk")."""
        return self.value.capitalize()


class RAIDStatus(str, Enum):
    """RAID item status."""

    OPEN = "open"
    IN_PROGRESS = "in_progress"
    MITIGATED = "mitigated"
    CLOSED = "closed"
    ACCEPTED = "accepted"


class RAIDPriority(str, Enum):
    """RAID item priority/severity."""

    CRITICAL = "critical"
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


__all__ = ["RAIDType", "RAIDStatus", "RAIDPriority"]
