"""Application configuration."""

import os
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    storage_path: Path = Path.home() / ".vitalife" / "storage.json"
    water_target_ml: int = 2500
    exercise_goal_minutes: int = 30
    calorie_deficit: int = 500
    environment: str = _ENVIRONMENT

    model_config = SettingsConfigDict(
        env_prefix="VITALIFE_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )
