"""Domain models for strokematch.

This module contains the core domain models representing glyph records,
parsed glyphs, strokes and outline commands. All models are designed to be:

- Immutable (frozen dataclasses)
- Free of parsing or matching logic

Key classes:
- Point: A 2D point
- PathCommand: Union of MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ArcTo, ClosePath
- ResolvedArc: Arc with center and angles worked out
- StrokeRecord: One graphical stroke (outline + medians)
- GlyphModel: A parsed character
- RawGlyphRecord: Dataset entry a GlyphModel is built from
"""

from strokematch.domain.glyph import GlyphModel, StrokeRecord
from strokematch.domain.path import (
    ArcTo,
    ClosePath,
    CubicCurveTo,
    LineTo,
    MoveTo,
    PathCommand,
    Point,
    QuadCurveTo,
    ResolvedArc,
)
from strokematch.domain.record import RawGlyphRecord

__all__: list[str] = [
    # Outline commands
    "ArcTo",
    "ClosePath",
    "CubicCurveTo",
    "LineTo",
    "MoveTo",
    "PathCommand",
    "QuadCurveTo",
    # Core types
    "Point",
    "ResolvedArc",
    "StrokeRecord",
    "GlyphModel",
    "RawGlyphRecord",
]
