"""Configuration settings for strokematch."""

import math
from enum import Enum
from pathlib import Path

from pydantic import BaseModel, Field


class CoordinateConvention(str, Enum):
    """How raw glyph coordinates map onto the unit square."""

    STANDARD = "standard"
    LEGACY_INVERTED = "legacy_inverted"


DEFAULT_SHAPE_FIT_ROTATIONS: tuple[float, ...] = (
    math.pi / 16,
    math.pi / 32,
    0.0,
    -math.pi / 32,
    -math.pi / 16,
)


class MatchConfig(BaseModel):
    """Thresholds of the stroke decision gates.

    Distances are measured in the glyph's unit square, except the Fréchet
    threshold which applies to normalized curves.
    """

    min_length_ratio: float = Field(
        default=0.55,
        gt=0.0,
        description="Minimum smoothed user/canonical length ratio",
    )
    length_smoothing: float = Field(
        default=0.024,
        ge=0.0,
        description="Added to both lengths before taking the ratio",
    )
    frechet_threshold: float = Field(
        default=0.4,
        gt=0.0,
        description="Shape-fit distance at or above which the stroke is rejected",
    )
    avg_distance_threshold: float = Field(
        default=0.1,
        gt=0.0,
        description="Average nearest-point distance at or above which the stroke is rejected",
    )
    endpoint_threshold: float = Field(
        default=0.15,
        gt=0.0,
        description="Maximum distance between matching start/end points",
    )
    min_direction_similarity: float = Field(
        default=0.0,
        ge=-1.0,
        le=1.0,
        description="Average tangent cosine similarity must be strictly above this",
    )
    shape_fit_rotations: tuple[float, ...] = Field(
        default=DEFAULT_SHAPE_FIT_ROTATIONS,
        min_length=1,
        description="Rotations (radians) of the canonical stroke tried during shape fit",
    )
    compare_true_end_points: bool = Field(
        default=True,
        description="Compare last points in the end gate (False repeats the start comparison)",
    )


class NormalizationConfig(BaseModel):
    """Configuration for curve normalization."""

    num_points: int = Field(
        default=30,
        ge=2,
        le=1000,
        description="Points emitted by arc-length resampling",
    )
    max_segment_length: float = Field(
        default=0.05,
        gt=0.0,
        description="Maximum segment length after re-subdivision (normalized frame)",
    )


class BuildConfig(BaseModel):
    """Configuration for building glyph models from raw records."""

    convention: CoordinateConvention = Field(
        default=CoordinateConvention.STANDARD,
        description="Coordinate remapping convention of the source dataset",
    )
    default_scale: float = Field(
        default=1024.0,
        gt=0.0,
        description="Width/height used when the record declares none",
    )
    legacy_baseline: float = Field(
        default=900.0,
        description="Y baseline subtracted from in the legacy inverted-axis convention",
    )
    drop_unsupported_outlines: bool = Field(
        default=False,
        description="Keep strokes with unsupported arcs, with an empty outline",
    )


class LoggingConfig(BaseModel):
    """Logging configuration."""

    log_file: Path | None = Field(
        default=None,
        description="Path to log file",
    )
    log_level: str = Field(
        default="WARNING",
        description="Console log level",
    )
    file_log_level: str = Field(
        default="DEBUG",
        description="File log level (more verbose)",
    )


class StrokeMatchSettings(BaseModel):
    """Main application settings."""

    match: MatchConfig = Field(default_factory=MatchConfig)
    normalization: NormalizationConfig = Field(default_factory=NormalizationConfig)
    build: BuildConfig = Field(default_factory=BuildConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)


def get_default_settings() -> StrokeMatchSettings:
    """Get default application settings."""
    return StrokeMatchSettings()
