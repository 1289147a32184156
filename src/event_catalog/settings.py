"""
event_catalog.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Select the event source backing the `/events` listing.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Env-driven configuration, prefixed with `EVENTS_`.

    `event_source` picks where event names come from:
    - "static": the built-in literal list (timestamp on by default)
    - "model": the `events` table via `EventRepo.all` (timestamp off by default)
    """

    model_config = SettingsConfigDict(env_prefix="EVENTS_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "event-catalog"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 8080

    # Persistence
    database_url: str = "sqlite+aiosqlite:///./events.db"

    # Listing
    event_source: Literal["static", "model"] = "static"
    include_timestamp: bool | None = None

    @property
    def timestamp_enabled(self) -> bool:
        if self.include_timestamp is not None:
            return self.include_timestamp
        return self.event_source == "static"


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# Tests construct `Settings(...)` directly and pass it to `create_app`; only the
# process entrypoint goes through `get_settings()`.
