"""Application configuration loaded from the environment.

Variables use the BETBOARD_ prefix, e.g. BETBOARD_DATABASE_URL.
A local .env file is read when present.
"""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="BETBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Server
    database_url: str = "sqlite:///data/betboard.db"
    cors_origins: list[str] = [
        "http://localhost:5173",  # Vite dev server
        "http://127.0.0.1:5173",
        "http://localhost:3000",
    ]

    # Client
    api_base_url: str = "http://localhost:3001"
    request_timeout: float = 10.0


@lru_cache()
def get_settings() -> Settings:
    """Return the cached settings instance."""
    return Settings()
