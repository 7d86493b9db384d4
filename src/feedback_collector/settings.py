"""
feedback_collector.settings

Central configuration model (Pydantic Settings).

Responsibilities:
- Provide strongly-typed, env-driven settings for all layers.
- Accept the legacy `DATABASE_URL` variable alongside the prefixed one.
- Offer a cached settings instance for dependency injection.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    - Strict env-driven configuration
    - Defaults safe for local dev (file-backed SQLite next to the process)
    - Single settings object injected across layers
    """

    model_config = SettingsConfigDict(env_prefix="FEEDBACK_", case_sensitive=False)

    # Environment controls toggle behavior like auto-init DB tables.
    env: Literal["dev", "test", "prod"] = "dev"
    service_name: str = "feedback-collector"
    log_level: str = "INFO"

    api_host: str = "0.0.0.0"
    api_port: int = 3000

    # Persistence
    database_url: str = Field(
        default="sqlite+aiosqlite:///./feedback.db",
        validation_alias=AliasChoices("FEEDBACK_DATABASE_URL", "DATABASE_URL", "database_url"),
    )
    # SQLite only enforces REFERENCES clauses when this pragma is on.
    sqlite_foreign_keys: bool = False


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    # Cache avoids re-parsing env vars for each request dependency.
    return Settings()


# --- Module Notes -----------------------------------------------------------
# There is exactly one storage setting that matters for behavior (`database_url`);
# everything else is process plumbing.
