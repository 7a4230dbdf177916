"""
Application Configuration

Settings class using pydantic-settings for environment variable loading.
The settings object is built once at process start and handed to
``create_app``; nothing else reads the environment directly.
"""

from functools import lru_cache
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    DATABASE_URL and SECRET_KEY have no defaults: a process started without
    them fails with a validation error instead of running on a shared secret.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="VibeTune API", description="Application name")
    version: str = Field(default="1.0.0", description="API version")
    host: str = Field(default="0.0.0.0", description="Listen address")
    port: int = Field(default=3000, ge=1, le=65535, description="Listen port")
    log_level: str = Field(default="INFO", description="Root log level")

    # Security
    secret_key: str = Field(
        ...,
        min_length=32,
        description="Secret key for JWT signing (min 32 characters)",
    )
    access_token_expire_hours: Optional[int] = Field(
        default=None,
        ge=1,
        description="Access token lifetime in hours; tokens never expire when unset",
    )

    # Database
    database_url: str = Field(
        ...,
        description="Async SQLAlchemy database URL, e.g. sqlite+aiosqlite:///./vibetune.db",
    )
    sql_echo: bool = Field(default=False, description="Echo SQL statements")

    # Song library and frontend
    songs_path: str = Field(
        default="./Frontend/Songs",
        min_length=1,
        description="Root directory of the song library served under /Songs",
    )
    frontend_path: str = Field(
        default="./Frontend",
        min_length=1,
        description="Directory holding index.html and static assets",
    )

    # CORS
    cors_origins: str = Field(
        default="*",
        description="Comma-separated list of allowed CORS origins",
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """Parse CORS origins from comma-separated string to list."""
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache()
def get_settings() -> Settings:
    """
    Get cached application settings instance.

    Uses lru_cache to ensure settings are only loaded once per process.

    Raises:
        pydantic.ValidationError: If DATABASE_URL or SECRET_KEY is missing
    """
    return Settings()
