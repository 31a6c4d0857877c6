"""Application configuration via pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables and .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    # Request gate
    forwarded_for_header: str = "x-vercel-forwarded-for"

    # Events with no notification recipe: dispatch a bare embed (False) or skip (True)
    skip_unhandled_events: bool = False

    # App
    environment: str = "production"
    log_level: str = "INFO"
    port: int = 8080

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings. Lazy initialization to avoid import-time errors."""
    return Settings()
