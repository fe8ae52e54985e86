"""Client configuration."""

from functools import lru_cache
from pathlib import Path

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class ClientSettings(BaseSettings):
    """Terminal client settings with environment variable support."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="CULINARY_CLI_",
        case_sensitive=False,
        extra="ignore",
    )

    # ==========================================================================
    # Service Configuration
    # ==========================================================================
    api_url: str = Field(
        default="http://127.0.0.1:8000",
        description="Base URL of the recipe service",
    )
    request_timeout: float = Field(
        default=10.0,
        gt=0,
        description="HTTP timeout in seconds",
    )

    # ==========================================================================
    # Search Configuration
    # ==========================================================================
    url_sync_delay_ms: int = Field(
        default=500,
        ge=0,
        description="Quiet period before the search query is written to the address",
    )
    discard_stale_suggestions: bool = Field(
        default=False,
        description="Drop suggestion responses superseded by a newer keystroke",
    )
    page_size: int = Field(
        default=20,
        ge=1,
        le=100,
        description="Recipes per page",
    )

    # ==========================================================================
    # Path Configuration
    # ==========================================================================
    data_dir: Path = Field(
        default_factory=lambda: Path.home() / ".culinary",
        description="Directory for preferences and logs",
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @property
    def theme_file(self) -> Path:
        """Persisted theme preference."""
        return self.data_dir / "theme.json"

    @property
    def log_file(self) -> Path:
        """Client log file."""
        return self.data_dir / "culinary-cli.log"

    # ==========================================================================
    # Validators
    # ==========================================================================
    @field_validator("data_dir", mode="after")
    @classmethod
    def ensure_data_dir_exists(cls, v: Path) -> Path:
        """Ensure data directory exists."""
        v.mkdir(parents=True, exist_ok=True)
        return v

    @field_validator("log_level", mode="after")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level."""
        valid_levels = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        v = v.upper()
        if v not in valid_levels:
            raise ValueError(f"Invalid log level. Must be one of: {valid_levels}")
        return v


@lru_cache
def get_settings() -> ClientSettings:
    """Get cached settings instance."""
    return ClientSettings()

