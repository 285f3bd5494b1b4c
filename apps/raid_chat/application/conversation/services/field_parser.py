"""Field Parser - normalises loose user answers.

Enum-valued fields accept free text ("crit", "high risk", "in progress")
and map it to the canonical value. Unrecognised text is returned as-is
so the step validator rejects it.
"""

from __future__ import annotations

from typing import Any, Callable

from raid_chat.domain import RAIDPriority, RAIDStatus, RAIDType, WorkflowState

# (substring, value) in match order
RAID_TYPE_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("risk", RAIDType.RISK.value),
    ("assumption", RAIDType.ASSUMPTION.value),
    ("issue", RAIDType.ISSUE.value),
    ("depend", RAIDType.DEPENDENCY.value),
)

PRIORITY_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("crit", RAIDPriority.CRITICAL.value),
    ("high", RAIDPriority.HIGH.value),
    ("med", RAIDPriority.MEDIUM.value),
    ("low", RAIDPriority.LOW.value),
)

STATUS_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("open", RAIDStatus.OPEN.value),
    ("progress", RAIDStatus.IN_PROGRESS.value),
    ("mitigat", RAIDStatus.MITIGATED.value),
    ("clos", RAIDStatus.CLOSED.value),
    ("accept", RAIDStatus.ACCEPTED.value),
)

# "closing" must win over "closed"
WORKFLOW_KEYWORDS: tuple[tuple[str, str], ...] = (
    ("initiat", WorkflowState.INITIATING.value),
    ("plan", WorkflowState.PLANNING.value),
    ("execut", WorkflowState.EXECUTING.value),
    ("monitor", WorkflowState.MONITORING.value),
    ("closing", WorkflowState.CLOSING.value),
    ("close", WorkflowState.CLOSED.value),
)


def _keyword_parser(keywords: tuple[tuple[str, str], ...]) -> Callable[[str], str]:
    def _parse(text: str) -> str:
        lower = text.lower()
        for keyword, value in keywords:
            if keyword in lower:
                return value
        return text

    return _parse


_FIELD_PARSERS: dict[str, Callable[[str], str]] = {
    "type": _keyword_parser(RAID_TYPE_KEYWORDS),
    "priority": _keyword_parser(PRIORITY_KEYWORDS),
    "status": _keyword_parser(STATUS_KEYWORDS),
    "target_state": _keyword_parser(WORKFLOW_KEYWORDS),
}


def parse_field_value(field: str, value: Any) -> Any:
    """Parse a raw answer for the given field.

    Args:
        field: field being answered
        value: raw answer (usually text)

    Returns:
        Normalised value
    """
    if not isinstance(value, str):
        return value

    trimmed = value.strip()
    parser = _FIELD_PARSERS.get(field)
    if parser is None or not trimmed:
        return trimmed
    return parser(trimmed)


__all__ = ["parse_field_value"]
