from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

HOST = "0.0.0.0"  # Listen on all interfaces for Docker


class Settings(BaseSettings):
    PORT: int = Field(default=3000, ge=1, le=65535)
    LOG_LEVEL: str = "INFO"
    LOG_FORMAT: str = "console"  # console or json

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )


def get_settings(**overrides) -> Settings:
    """Load settings from the environment.

    Built fresh on every call; a non-numeric or out-of-range ``PORT`` raises
    ``pydantic.ValidationError`` here, before anything is bound.
    """
    return Settings(**overrides)
