"""Core geometric types for glyph outlines.

This module defines the fundamental types used throughout strokematch:
- Point: A 2D point
- PathCommand: Closed union of outline drawing commands
- ResolvedArc: An arc command with its circle center and angles worked out
"""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True, slots=True)
class Point:
    """A point in 2D space.

    Immutable and hashable for use in sets/dicts.

    Attributes:
        x: X coordinate
        y: Y coordinate
    """

    x: float
    y: float

    def to_tuple(self) -> tuple[float, float]:
        """Convert to simple (x, y) tuple.

        Returns:
            Tuple of (x, y) coordinates
        """
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary.

        Returns:
            Dictionary with x and y fields
        """
        return {"x": self.x, "y": self.y}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Point":
        """Deserialize from dictionary.

        Args:
            data: Dictionary with x and y fields

        Returns:
            Point instance
        """
        return cls(x=data["x"], y=data["y"])


@dataclass(frozen=True, slots=True)
class MoveTo:
    """Start a new subpath at ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class LineTo:
    """Straight line to ``to``."""

    to: Point


@dataclass(frozen=True, slots=True)
class QuadCurveTo:
    """Quadratic Bezier curve to ``to``."""

    to: Point
    control: Point


@dataclass(frozen=True, slots=True)
class CubicCurveTo:
    """Cubic Bezier curve to ``to``."""

    to: Point
    control1: Point
    control2: Point


@dataclass(frozen=True, slots=True)
class ArcTo:
    """Circular arc to ``to``.

    Only circular arcs without rotation exist in the model, so the arc
    carries a single radius.

    Attributes:
        radius: Circle radius, in the same frame as ``to``
        large_arc: SVG large-arc flag
        sweep: SVG sweep flag
        to: End point of the arc
    """

    radius: float
    large_arc: bool
    sweep: bool
    to: Point


@dataclass(frozen=True, slots=True)
class ClosePath:
    """Close the current subpath."""


PathCommand = Union[MoveTo, LineTo, QuadCurveTo, CubicCurveTo, ArcTo, ClosePath]


@dataclass(frozen=True, slots=True)
class ResolvedArc:
    """Arc command with its circle worked out.

    Attributes:
        start: Point the arc starts from
        end: Point the arc ends at
        center: Center of the circle the arc lies on
        radius: Circle radius
        start_angle: Angle of ``start`` around ``center`` in radians
        end_angle: Angle of ``end`` around ``center`` in radians
        clockwise: Traversal direction from start to end angle
    """

    start: Point
    end: Point
    center: Point
    radius: float
    start_angle: float
    end_angle: float
    clockwise: bool
