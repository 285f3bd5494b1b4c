"""RAID Chat Configuration."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """RAID chat assistant settings."""

    # Service
    service_name: str = "raid-chat"
    environment: str = "local"
    debug: bool = False
    host: str = "0.0.0.0"
    port: int = 8010

    # RAID register / workflow API
    api_base_url: str = "http://localhost:8000"
    api_key: str | None = None
    request_timeout: float = 30.0

    # Conversation
    # priority/owner (create) and title/status/priority/owner (edit) steps
    collect_optional_fields: bool = True
    actor: str = "chat-assistant"

    # CORS
    cors_origins: list[str] = ["*"]

    # Logging
    log_level: str = "INFO"

    class Config:
        env_prefix = "RAID_CHAT_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    """Settings singleton."""
    return Settings()
