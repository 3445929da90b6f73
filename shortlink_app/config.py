from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List, Optional


class Settings(BaseSettings):
    """
    Application settings loaded from environment variables.

    Loading priority (highest to lowest):
    1. Environment variables
    2. .env file
    3. Default values below
    """

    # Environment
    environment: str = "development"
    debug: bool = True
    log_level: str = "INFO"

    # Application
    app_name: str = "Short Link Service"
    app_version: str = "1.0.0"

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Public base for generated short links.
    # When unset, the base URL of the incoming request is used.
    base_url: Optional[str] = None

    # Short code generation
    short_code_length: int = 6
    max_retries: int = 10

    # Expiration
    default_expiration: str = "24h"  # Same syntax as the expires_in field
    reaper_interval_seconds: int = 300  # Sweep expired links every 5 minutes

    # Access control
    api_key: str = "change-me"  # Checked against the X-API-Key header
    allowed_referers: List[str] = [
        "http://localhost:8000/",
        "https://localhost:8000/",
    ]

    # Pydantic v2 configuration
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Create settings instance
settings = Settings()
