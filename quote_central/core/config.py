"""Application configuration loaded via Pydantic settings."""

from __future__ import annotations

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_SKILL_ID = "amzn1.ask.skill.20c4816b-39f0-47f9-841c-fc18ee0b6d76"
DEFAULT_QUOTE_AUDIO_URL = (
    "https://s3.amazonaws.com/silver-giggle-bucket/"
    "Bpm095_F%23m_SpaceWasteland_Pad_firstfile.mp3"
)


class Settings(BaseSettings):
    """Typed configuration sourced from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    SKILL_ID: str = Field(default=DEFAULT_SKILL_ID)
    VERIFY_SKILL_ID: bool = Field(default=True)
    CARD_TITLE: str = Field(default="QuoteCentral")
    QUOTE_AUDIO_URL: str = Field(default=DEFAULT_QUOTE_AUDIO_URL)
    QUOTE_CENTRAL_LOG_LEVEL: str = Field(default="info")
    QUOTE_CENTRAL_LOG_DIR: Path | None = Field(default=None)
    QUOTE_CENTRAL_LOG_SCHEMA_VERSION: str = Field(default="1.0.0")
    HEALTHCHECK_API_TOKEN: str | None = Field(default=None)
    ENABLE_HEALTHCHECK_AUTH: bool = Field(default=True)


settings = Settings()
config = settings  # Alias for backward compatibility


__all__ = ["Settings", "settings", "config", "DEFAULT_SKILL_ID", "DEFAULT_QUOTE_AUDIO_URL"]
