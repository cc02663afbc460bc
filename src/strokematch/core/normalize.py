"""Curve normalization for shape comparison.

Two strokes can only be compared by shape once point density, position and
size stop mattering. Normalization runs three steps:

1. Resample to a fixed number of points evenly spaced by arc length
2. Move the centroid to the origin and scale by the endpoints' RMS radius
3. Subdivide any segment still longer than a maximum length

The scale estimate only uses the first and last points, not every point.
"""

import math
from bisect import bisect_left
from collections.abc import Sequence
from itertools import accumulate

from strokematch.core.metrics import distance
from strokematch.domain import Point
from strokematch.exceptions import DegenerateStrokeError

DEFAULT_NUM_POINTS = 30
DEFAULT_MAX_SEGMENT_LENGTH = 0.05


def _lerp(p1: Point, p2: Point, t: float) -> Point:
    return Point(p1.x + (p2.x - p1.x) * t, p1.y + (p2.y - p1.y) * t)


def outline_curve(curve: Sequence[Point], num_points: int = DEFAULT_NUM_POINTS) -> list[Point]:
    """Resample a polyline to points evenly spaced along its length.

    The first and last points are kept as they are; the points in between
    are linearly interpolated on the original segments.

    Args:
        curve: Polyline with at least two points
        num_points: Number of points to emit (at least 2)

    Returns:
        Exactly ``num_points`` points

    Raises:
        ValueError: If ``num_points`` < 2 or the curve has fewer than two points
        DegenerateStrokeError: If the curve has zero length
    """
    if num_points < 2:
        raise ValueError(f"num_points must be at least 2, got {num_points}")
    if len(curve) < 2:
        raise ValueError("outline_curve needs at least two points")

    cumulative = list(accumulate((distance(a, b) for a, b in zip(curve, curve[1:])), initial=0.0))
    total = cumulative[-1]
    if total == 0:
        raise DegenerateStrokeError("Cannot resample a zero-length curve")

    step = total / (num_points - 1)
    result = [curve[0]]
    for k in range(1, num_points - 1):
        target = k * step
        # First vertex at or beyond target; the segment ending there contains it
        idx = max(1, bisect_left(cumulative, target))
        seg_len = cumulative[idx] - cumulative[idx - 1]
        t = (target - cumulative[idx - 1]) / seg_len if seg_len else 0.0
        result.append(_lerp(curve[idx - 1], curve[idx], t))
    result.append(curve[-1])
    return result


def center_and_scale(curve: Sequence[Point]) -> list[Point]:
    """Center a curve on its centroid and scale it by its endpoints.

    After scaling, the root-mean-square distance of the first and last
    points from the origin is 1.

    Raises:
        DegenerateStrokeError: If both endpoints sit on the centroid
    """
    mean_x = sum(p.x for p in curve) / len(curve)
    mean_y = sum(p.y for p in curve) / len(curve)
    translated = [Point(p.x - mean_x, p.y - mean_y) for p in curve]

    first, last = translated[0], translated[-1]
    scale = math.sqrt(
        ((first.x**2 + first.y**2) + (last.x**2 + last.y**2)) / 2.0
    )
    if scale == 0:
        raise DegenerateStrokeError("Curve endpoints coincide with its centroid")
    return [Point(p.x / scale, p.y / scale) for p in translated]


def subdivide_curve(
    curve: Sequence[Point], max_len: float = DEFAULT_MAX_SEGMENT_LENGTH
) -> list[Point]:
    """Split long segments into equal pieces no longer than ``max_len``.

    Args:
        curve: Polyline to subdivide
        max_len: Maximum segment length

    Returns:
        Polyline through the same vertices with extra points inserted
    """
    if not curve:
        return []
    result = [curve[0]]
    for prev, point in zip(curve, curve[1:]):
        seg_len = distance(prev, point)
        if seg_len > max_len:
            pieces = math.ceil(seg_len / max_len)
            for i in range(1, pieces):
                result.append(_lerp(prev, point, i / pieces))
        result.append(point)
    return result


def normalize_curve(
    curve: Sequence[Point],
    num_points: int = DEFAULT_NUM_POINTS,
    max_segment_length: float = DEFAULT_MAX_SEGMENT_LENGTH,
) -> list[Point]:
    """Resample, center, scale and subdivide a curve.

    Args:
        curve: Stroke medians or a user-drawn stroke
        num_points: Points used for arc-length resampling
        max_segment_length: Segment bound in the normalized frame

    Returns:
        Normalized polyline

    Raises:
        DegenerateStrokeError: If the curve has no usable extent
    """
    resampled = outline_curve(curve, num_points)
    return subdivide_curve(center_and_scale(resampled), max_segment_length)
