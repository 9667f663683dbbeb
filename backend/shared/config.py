"""
Centralized configuration for the Roster backend.

All settings are loaded from environment variables with sensible defaults.
Variables are prefixed with ROSTER_ (e.g. ROSTER_JWT_SECRET, ROSTER_PORT).
"""

from functools import lru_cache
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="ROSTER_",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = "Roster API"
    app_version: str = "0.1.0"
    debug: bool = False
    log_level: str = "INFO"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000
    reload: bool = False

    # CORS settings
    cors_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]
    cors_allow_credentials: bool = True
    cors_allow_methods: list[str] = ["*"]
    cors_allow_headers: list[str] = ["*"]

    # Token signing. An empty secret means one is generated at startup.
    jwt_secret: str = ""
    jwt_algorithm: str = "HS256"
    token_lifetime_minutes: int = 60
    token_subject: str = "user"

    # Feature Flags
    auth_enabled: bool = True
    validation_enabled: bool = True


@lru_cache
def get_settings() -> Settings:
    """
    Get cached settings instance.

    Uses lru_cache to ensure settings are only loaded once.
    """
    return Settings()
