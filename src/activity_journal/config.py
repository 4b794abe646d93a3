"""Application configuration."""

import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    data_dir: Path = Path(".activity_journal")
    storage_key: str = "activities"
    listing_route: str = "/recent-activities"
    redirect_delay_seconds: float = Field(default=1.0, ge=0.0)
    notification_duration_seconds: float = Field(default=5.0, gt=0.0)
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="ACTIVITY_JOURNAL_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
