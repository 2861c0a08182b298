"""Configuration management for the translate client."""

from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Client settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    # Endpoint used when a descriptor is converted to an httpx request
    translate_endpoint: Optional[str] = None

    # Logging
    log_level: str = "INFO"


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the client settings."""
    return settings
