"""
metagen Configuration
"""
from __future__ import annotations
from typing import List, Optional
from pydantic_settings import BaseSettings
from functools import lru_cache

from metagen.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # AI Configuration
    openai_api_key: str = ""
    ai_model: str = "gpt-4o-mini"
    # Any OpenAI-compatible server; None means api.openai.com
    ai_base_url: Optional[str] = None
    upstream_timeout_seconds: float = 60.0

    # Application Configuration
    app_name: str = "metagen"
    debug: bool = False
    log_level: str = "INFO"

    # Server Configuration
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS Configuration
    cors_origins: List[str] = ["*"]

    # Composer (client) Configuration
    composer_base_url: str = "http://localhost:8000"
    composer_timeout_seconds: float = 60.0

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"


def require_credentials(settings: Settings) -> None:
    """Raise ConfigurationError if the upstream credential is missing."""
    if not settings.openai_api_key.strip():
        raise ConfigurationError("OPENAI_API_KEY is required")


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
