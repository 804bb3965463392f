"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - All connection strings come from environment variables or .env (never hardcoded credentials)
    - get_settings() is cached (lru_cache) - single instance per process

Design Decisions:
    - Defaults provided for all settings: works out-of-the-box with docker-compose
    - Seeding is opt-in (seed_on_startup) so production restarts never re-import fixtures
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://vocabulary:vocabulary@db:5432/vocabulary"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms provide postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10
    create_schema_on_startup: bool = False

    # Seeding
    seed_file: str | None = None
    seed_on_startup: bool = False

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_sqlite(self) -> bool:
        return self.database_url.startswith("sqlite")


@lru_cache
def get_settings() -> Settings:
    return Settings()
