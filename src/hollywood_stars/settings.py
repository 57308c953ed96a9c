"""
hollywood_stars.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide env-driven settings for the API, the store and the page client.
- Accept the conventional `PORT` variable for the listening port.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Read once at startup; every layer receives the same instance.
    """

    model_config = SettingsConfigDict(env_prefix="STARS_", case_sensitive=False)

    # `env` decides whether tables are created on startup (dev/test only).
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "hollywood-stars"
    log_level: str = "INFO"
    json_logs: bool = True

    api_host: str = "0.0.0.0"
    api_port: int = Field(default=3001, validation_alias=AliasChoices("PORT", "STARS_API_PORT"))

    # Browser clients are served from another origin.
    cors_allow_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./stars.db"

    # Listing
    default_page: int = 1
    default_page_limit: int = 6
    max_page_limit: int = 100

    # Page client
    frontend_api_base_url: str = "http://localhost:3001"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly instead of going through the cache.
