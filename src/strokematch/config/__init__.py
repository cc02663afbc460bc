"""Configuration management for strokematch.

This module provides configuration management using Pydantic models.
Configuration can be provided via CLI arguments or defaults.

Key classes:
- MatchConfig: Decision gate thresholds
- NormalizationConfig: Curve normalization settings
- BuildConfig: Glyph building settings (coordinate convention)
- LoggingConfig: Logging settings
- StrokeMatchSettings: Main application settings
"""

from strokematch.config.settings import (
    DEFAULT_SHAPE_FIT_ROTATIONS,
    BuildConfig,
    CoordinateConvention,
    LoggingConfig,
    MatchConfig,
    NormalizationConfig,
    StrokeMatchSettings,
    get_default_settings,
)

__all__ = [
    "DEFAULT_SHAPE_FIT_ROTATIONS",
    "BuildConfig",
    "CoordinateConvention",
    "LoggingConfig",
    "MatchConfig",
    "NormalizationConfig",
    "StrokeMatchSettings",
    "get_default_settings",
]
