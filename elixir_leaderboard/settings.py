"""Application settings loaded from environment variables and .env file."""

from functools import lru_cache

from pydantic import NonNegativeFloat, PositiveFloat, PositiveInt
from pydantic_settings import BaseSettings, SettingsConfigDict

from .models import (
    DEFAULT_PAGE_SIZE,
    DEFAULT_PROGRESS_EVERY,
    DEFAULT_REQUEST_INTERVAL,
    DEFAULT_REQUEST_TIMEOUT,
    SCORES_API_URL,
)


class Settings(BaseSettings):
    """Settings for the leaderboard collector."""

    model_config = SettingsConfigDict(
        env_prefix="LEADERBOARD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_url: str = SCORES_API_URL
    page_size: PositiveInt = DEFAULT_PAGE_SIZE
    request_interval: NonNegativeFloat = DEFAULT_REQUEST_INTERVAL
    request_timeout: PositiveFloat = DEFAULT_REQUEST_TIMEOUT
    progress_every: PositiveInt = DEFAULT_PROGRESS_EVERY
    verify_count: bool = True


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
