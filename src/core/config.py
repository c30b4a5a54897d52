"""Centralized configuration management using Pydantic Settings."""

from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Application environment."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Application
    app_name: str = Field(default="WebFacade", description="Application name")
    app_env: Environment = Field(default=Environment.DEVELOPMENT, description="Environment")
    debug: bool = Field(default=True, description="Debug mode")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO", description="Logging level"
    )
    log_to_file: bool = Field(default=False, description="Also write logs under ./logs")

    # Waiting
    wait_timeout: float = Field(
        default=30.0, ge=0.1, description="Default explicit wait timeout in seconds"
    )
    poll_frequency: float = Field(
        default=0.5, gt=0, description="Polling interval for explicit waits in seconds"
    )

    # Interaction
    alert_grace_period: float = Field(
        default=0.5, ge=0, description="Pause before looking for an alert, in seconds"
    )
    typing_delay: float = Field(
        default=0.0, ge=0, description="Pause between simulated keystrokes, in seconds"
    )

    @field_validator("poll_frequency")
    @classmethod
    def validate_poll_frequency(cls, v: float, info) -> float:
        """Ensure polling does not exceed the wait timeout."""
        timeout = info.data.get("wait_timeout", 30.0)
        if v > timeout:
            raise ValueError("poll_frequency must be <= wait_timeout")
        return v

    @property
    def logs_dir(self) -> Path:
        """Get logs directory path."""
        path = Path("./logs")
        path.mkdir(parents=True, exist_ok=True)
        return path


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
