"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - APP_ENV selects one of the named DATABASE_PROFILES
    - DATABASE_URL, when set, overrides the profile (production requires it)
    - get_settings() is cached (lru_cache): single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with a local Postgres
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DATABASE_PROFILES: dict[str, str | None] = {
    "development": "postgresql+asyncpg://localhost:5432/palette_picker",
    "test": "postgresql+asyncpg://localhost:5432/palette_picker_test",
    "production": None,
}


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    app_env: Literal["development", "test", "production"] = "development"

    # Database
    database_url: str | None = Field(default=None)

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str | None) -> str | None:
        """Hosted Postgres hands out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v or None

    database_pool_size: int = 10
    database_max_overflow: int = 5

    # API
    cors_origins: list[str] = ["*"]
    static_dir: str = "public"

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def resolved_database_url(self) -> str:
        """DATABASE_URL if given, otherwise the profile for app_env."""
        url = self.database_url or DATABASE_PROFILES[self.app_env]
        if not url:
            raise RuntimeError(
                f"DATABASE_URL must be set when APP_ENV={self.app_env}",
            )
        return url


@lru_cache
def get_settings() -> Settings:
    return Settings()
