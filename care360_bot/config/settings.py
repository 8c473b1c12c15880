"""
Application settings and configuration.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables (prefix ``CARE360_``)."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="CARE360_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Care360 Bot"
    app_version: str = "1.0.0"

    # Upstream clinic API
    api_base_url: str = "https://app.future-it-pro.ru/api"
    upstream_timeout: float = 10.0

    # Local files
    tokens_file: str = "tokens.json"
    users_file: str = "name.json"

    # Booking
    reserve_on_confirm: bool = False

    # Bot identities
    restart_delay: float = 5.0
    poll_timeout: int = 60

    # Logging
    log_level: str = "INFO"
    event_log_path: Optional[str] = None


@lru_cache
def get_settings() -> Settings:
    """Get application settings instance."""
    return Settings()
