"""Configuration management for the Culinary Haven recipe service."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_RECIPES_FILE = Path(__file__).parent / "data" / "recipes.json"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class Settings(BaseSettings):
    """Service settings, read from ``CULINARY_*`` variables and ``.env``."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CULINARY_",
        case_sensitive=False,
        extra="ignore",
    )

    host: str = "127.0.0.1"
    port: int = Field(default=8000, ge=1, le=65535)
    debug: bool = Field(default=False, description="Auto-reload and human-readable logs")
    log_level: LogLevel = "INFO"

    # Catalog
    recipes_file: Path = Field(
        default=DEFAULT_RECIPES_FILE,
        description="JSON array of recipes served by the catalog",
    )
    default_page_size: int = Field(default=20, ge=1, le=100)
    max_page_size: int = Field(default=100, ge=10, le=500)
    suggestion_limit: int = Field(
        default=8,
        ge=1,
        le=50,
        description="Most suggestions returned for one query",
    )

    @field_validator("log_level", mode="before")
    @classmethod
    def upper_log_level(cls, v):
        return v.upper() if isinstance(v, str) else v

    @field_validator("recipes_file", mode="after")
    @classmethod
    def recipes_file_exists(cls, v: Path) -> Path:
        if not v.is_file():
            raise ValueError(f"Recipes file not found: {v}")
        return v


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


def reload_settings() -> Settings:
    """Drop the cached settings and read them again."""
    get_settings.cache_clear()
    return get_settings()
