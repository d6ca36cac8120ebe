"""Application configuration."""

import os

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    openai_api_key: str | None = None
    openai_model: str = "gpt-4"
    openai_base_url: str | None = None
    edamam_app_id: str | None = None
    edamam_app_key: str | None = None
    edamam_base_url: str = "https://api.edamam.com/api/food-database/v2"
    debug: bool = False
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def llm_enabled(settings: Settings) -> bool:
    """Return True when an LLM credential is configured."""
    return bool(settings.openai_api_key and settings.openai_api_key.strip())


def food_database_enabled(settings: Settings) -> bool:
    """Return True when both food-database credentials are configured."""
    return bool(
        settings.edamam_app_id
        and settings.edamam_app_id.strip()
        and settings.edamam_app_key
        and settings.edamam_app_key.strip()
    )
