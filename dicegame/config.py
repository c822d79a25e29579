"""Application configuration using Pydantic Settings."""

from typing import List

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from dicegame.constants import LOG_LEVELS, MIN_KEY_BYTES


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", case_sensitive=False
    )

    # Commit-reveal
    key_bytes: int = MIN_KEY_BYTES

    # Console
    log_level: str = "WARNING"
    help_table_format: str = "simple"

    # Application
    app_env: str = "dev"
    app_version: str = "1"

    # CORS (verification API)
    cors_origins: str = "http://localhost:3000,http://127.0.0.1:3000"

    @field_validator("key_bytes")
    @classmethod
    def _key_has_enough_entropy(cls, value: int) -> int:
        if value < MIN_KEY_BYTES:
            raise ValueError(f"key_bytes must be at least {MIN_KEY_BYTES}")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @property
    def cors_origins_list(self) -> List[str]:
        """Parse CORS origins into a list."""
        return [origin.strip() for origin in self.cors_origins.split(",")]


# Global settings instance
settings = Settings()
