"""Application settings using Pydantic Settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="REPOLINK_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Logging goes to stderr; stdout carries only the link
    log_level: str = "WARNING"

    # Git
    default_remote: str = "origin"
    git_executable: str = "git"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
