"""RAID register API integration."""

from raid_chat.infrastructure.integrations.raid_api.raid_http_client import RAIDApiHttpClient

__all__ = ["RAIDApiHttpClient"]
