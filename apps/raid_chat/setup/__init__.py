"""RAID Chat Setup."""

from .config import Settings, get_settings
from .dependencies import HandleMessageDep, SessionStoreDep, get_handle_message_command, get_session_store

__all__ = [
    "HandleMessageDep",
    "SessionStoreDep",
    "Settings",
    "get_handle_message_command",
    "get_session_store",
    "get_settings",
]
