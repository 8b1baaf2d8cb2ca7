"""Application configuration loaded from environment variables."""
from functools import lru_cache
from typing import Optional

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # API configuration
    api_host: str = "127.0.0.1"
    api_port: int = 8083

    # CORS
    cors_origins: list[str] = ["http://localhost:3000", "http://127.0.0.1:3000"]

    # Firebase
    firebase_api_key: Optional[str] = None
    firebase_project_id: Optional[str] = None
    firebase_credentials_path: Optional[str] = None
    identity_timeout: float = 10.0

    # Gemini
    gemini_api_key: Optional[str] = Field(
        default=None,
        validation_alias=AliasChoices("COMPANION_GEMINI_API_KEY", "GEMINI_API_KEY"),
    )
    gemini_model: str = "gemini-1.5-flash"

    # Calendar days for practice statistics; system zone when unset
    timezone: Optional[str] = None

    class Config:
        env_prefix = "COMPANION_"
        env_file = ".env"
        extra = "ignore"


@lru_cache
def get_settings() -> Settings:
    return Settings()
