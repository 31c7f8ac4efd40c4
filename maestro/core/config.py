"""Application configuration loaded from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "maestro"
    debug: bool = False

    # Gemini API
    gemini_api_key: str = ""

    # Agent defaults
    default_model: str = "gemini-2.5-flash-lite"
    default_temperature: float = 0.0
    default_reasoning_effort: str = "low"

    # File uploads (poll cadence in seconds)
    upload_poll_interval: float = 2.0
    upload_max_poll_attempts: int = 150
    upload_display_name: str = "My file"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


settings = get_settings()
