"""Application settings loaded from environment variables or a `.env` file"""
from functools import lru_cache
from typing import List

from fastapi import Request
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-backed settings for the API service."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    # Database
    database_url: str = Field(
        default="postgresql+asyncpg://localhost:5432/student_feedback"
    )
    db_echo: bool = Field(default=False)

    # HTTP server
    host: str = Field(default="0.0.0.0")
    port: int = Field(default=5000)
    # Comma-separated, e.g. "http://localhost:3000,https://school.example"
    cors_origins: str = Field(default="*")

    log_level: str = Field(default="INFO")

    # Password hashing cost (bcrypt log rounds, 4-31)
    bcrypt_rounds: int = Field(default=10, ge=4, le=31)

    # Trailing window for the mood tally
    stats_window_days: int = Field(default=7, ge=1)

    @property
    def cors_origin_list(self) -> List[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return cached settings instance."""
    return Settings()


def get_app_settings(request: Request) -> Settings:
    """Dependency returning the settings the running app was created with."""
    return request.app.state.settings
