"""
config.py — Engine settings and logging setup.

Uses pydantic-settings for type-safe environment variable handling. Every
variable is prefixed with GRIDENGINE_ (nested values use a double underscore,
e.g. GRIDENGINE_THRESHOLDS__MAX_COUNT=120).

Computation functions never read settings on their own; callers pass
thresholds or schemes explicitly, or build them from get_settings().
"""

import logging
from functools import lru_cache
from typing import Literal

from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class ValidationThresholds(BaseModel):
    """Limits used by GridValidator."""

    # Structural (errors)
    min_count: int = 1
    max_count: int = 100  # host editors cap layout grids at 100 tracks
    min_baseline_height: float = 1.0

    # Advisory (warnings)
    min_track_size: float = 10.0
    high_column_count: int = 24
    max_margin_ratio: float = 0.25
    small_baseline_height: float = 4.0
    large_baseline_height: float = 48.0


class EngineSettings(BaseSettings):
    """Grid engine settings loaded from environment."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="GRIDENGINE_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    # Logging
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Defaults for new grids and previews
    color_scheme: Literal["default", "mono", "vibrant"] = "default"
    preview_width: float = 240.0
    preview_height: float = 320.0

    thresholds: ValidationThresholds = Field(default_factory=ValidationThresholds)


@lru_cache()
def get_settings() -> EngineSettings:
    """Get cached settings instance."""
    return EngineSettings()


def configure_logging(settings: EngineSettings | None = None) -> None:
    """Configure root logging for scripts embedding the engine.

    The library itself only creates module loggers; handlers are left to the
    application unless it calls this.
    """
    settings = settings or get_settings()
    level = getattr(logging, settings.log_level)
    logging.basicConfig(level=level, format=settings.log_format)
    # basicConfig is a no-op once the root logger has handlers
    logging.getLogger().setLevel(level)
