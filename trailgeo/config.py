"""
Engine Configuration

Uses Pydantic Settings for type-safe configuration.
Every tunable can be overridden with a TRAILGEO_* environment variable.
"""

import logging

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Engine settings with validation."""

    # === Core ===
    log_level: str = Field(default="INFO", description="Logging level")

    # === Track metrics ===
    loop_threshold_m: float = Field(
        default=15.0,
        description="Max start/end distance for a track to count as a loop"
    )
    max_distance_markers: int = Field(
        default=100,
        description="Cap on distance markers returned for one track"
    )

    # === Zoom adaptation ===
    marker_min_track_km: float = Field(
        default=5.0,
        description="Shortest track that still gets 5 km markers at zoom 12"
    )

    # === Charts ===
    chart_max_points: int = Field(
        default=300,
        description="Max points handed to a profile chart"
    )

    # === Slope profile ===
    slope_smoothing_window_m: float = Field(
        default=50.0,
        description="Half-window for distance-based elevation smoothing"
    )
    slope_window_m: float = Field(
        default=25.0,
        description="Half-window for distance-based slope calculation"
    )

    @field_validator('log_level')
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Upper-case the level and reject names logging does not know."""
        level = v.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {v}")
        return level

    @field_validator(
        'loop_threshold_m',
        'max_distance_markers',
        'marker_min_track_km',
        'chart_max_points',
        'slope_smoothing_window_m',
        'slope_window_m',
    )
    @classmethod
    def must_be_positive(cls, v):
        if v <= 0:
            raise ValueError("must be positive")
        return v

    model_config = SettingsConfigDict(
        env_prefix="TRAILGEO_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


# Global settings instance
settings = Settings()
