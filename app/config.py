# =============================================================================
# app/config.py - Application Settings
# =============================================================================
# Server, CORS and user-store settings for the User Registry API.
#
# Every value has a default, so the service starts with no configuration.
# Overrides come from the process environment or a .env file next to the
# working directory, e.g.:
#
#   API_PORT=8081
#   SEED_DEMO_USERS=true
#
# Usage:
#   from app.config import settings
#   settings.API_PORT
# =============================================================================

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the User Registry API.

    Read once at import time; the rest of the code uses the module-level
    `settings` object.
    """

    # -------------------------------------------------------------------------
    # Runtime
    # -------------------------------------------------------------------------

    ENVIRONMENT: Literal["development", "staging", "production"] = Field(
        default="development",
        description="Deployment stage; production restricts CORS to CORS_ORIGINS"
    )

    DEBUG: bool = Field(
        default=False,
        description="Log at DEBUG level instead of INFO"
    )

    # -------------------------------------------------------------------------
    # HTTP Server (python -m app.main)
    # -------------------------------------------------------------------------

    API_HOST: str = Field(
        default="0.0.0.0",
        description="Interface uvicorn listens on"
    )

    API_PORT: int = Field(
        default=8000,
        ge=1,
        le=65535,
        description="Port uvicorn listens on"
    )

    # Only applied in production; other stages allow any origin
    CORS_ORIGINS: str = Field(
        default="http://localhost:3000",
        description="Comma-separated browser origins allowed to call /users"
    )

    # -------------------------------------------------------------------------
    # User Store
    # -------------------------------------------------------------------------

    SEED_DEMO_USERS: bool = Field(
        default=False,
        description="Preload Naruto, Sasuke and Kakashi into the in-memory store"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        case_sensitive=True,
    )

    @property
    def cors_origins_list(self) -> list[str]:
        """CORS_ORIGINS split on commas, blanks dropped."""
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]

    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT == "production"


@lru_cache
def get_settings() -> Settings:
    """Build the settings once per process."""
    return Settings()


settings = get_settings()
