"""
Application settings using Pydantic Settings.
"""

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Decoder configuration loaded from environment variables."""

    model_config = SettingsConfigDict(
        # Prefer local overrides while keeping .env as the default source
        env_file=(".env.local", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Digit matching
    max_avg_variance: float = Field(
        0.48, gt=0.0, le=1.0, description="Max average run deviation for a digit"
    )
    max_individual_variance: float = Field(
        0.7, gt=0.0, le=1.0, description="Max deviation of a single run, in modules"
    )

    # Guard matching
    guard_max_avg_variance: float = Field(
        0.25, gt=0.0, le=1.0, description="Max average run deviation for a guard"
    )
    guard_max_individual_variance: float = Field(
        0.5, gt=0.0, le=1.0, description="Max deviation of a single guard run, in modules"
    )

    # Rendering
    quiet_zone_modules: int = Field(9, ge=0, description="Light modules around a rendered symbol")

    # Logging
    log_level: str = "INFO"
    log_format: Literal["json", "text"] = "json"


@lru_cache
def get_settings() -> Settings:
    """Get cached application settings."""
    return Settings()
