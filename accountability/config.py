"""Configuration management for the application."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_CATEGORIES = ["Follow-through", "Consistency", "Trust-building", "Patience"]

DEFAULT_ACTIVITIES = [
    "Work - Deep Focus",
    "Work - Meetings",
    "Personal - Exercise",
    "Personal - Reading",
    "Personal - Learning",
    "Household",
    "Family Time",
    "Social",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    # Storage
    storage_backend: Literal["native", "memory"] = Field(default="native")
    database_path: Path = Field(default=Path("accountability.db"))

    # Blob store for the in-memory backend
    blob_store: Literal["file", "redis"] = Field(default="file")
    blob_path: Path = Field(default=Path(".accountability_blob"))
    blob_key: str = Field(default="accountability_db")
    redis_url: str = Field(default="redis://localhost:6379/0")

    log_level: str = Field(default="INFO")


class AppConfig:
    """Application configuration loaded from config.yaml."""

    def __init__(self, config_path: Path | None = None) -> None:
        if config_path is None:
            config_path = Path("config.yaml")

        self._config: dict[str, Any] = {}
        if config_path.exists():
            with open(config_path) as f:
                self._config = yaml.safe_load(f) or {}

    @property
    def categories(self) -> list[str]:
        """Category names seeded into an empty database."""
        return self._config.get("categories", DEFAULT_CATEGORIES)

    @property
    def activities(self) -> list[str]:
        """Activity names seeded into an empty database."""
        return self._config.get("activities", DEFAULT_ACTIVITIES)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@lru_cache
def get_app_config() -> AppConfig:
    """Get cached app config instance."""
    return AppConfig()
