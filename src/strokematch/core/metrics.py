"""Similarity and distance metrics between point sequences.

This module provides the measurements the stroke matcher combines:
- Curve length and point distances
- Average nearest-point distance (directional)
- Tangent-vector cosine similarity (stroke direction)
- Discrete Fréchet distance (shape)
- Rigid rotation about the origin

All functions are pure and stateless.
"""

import math
from collections.abc import Sequence

from strokematch.domain import Point


def distance(p1: Point, p2: Point) -> float:
    """Euclidean distance between two points."""
    return math.hypot(p2.x - p1.x, p2.y - p1.y)


def curve_length(curve: Sequence[Point]) -> float:
    """Sum of the distances between consecutive points.

    Returns:
        Polyline length, 0.0 for fewer than two points
    """
    return sum(distance(a, b) for a, b in zip(curve, curve[1:]))


def average_distance(from_curve: Sequence[Point], to_curve: Sequence[Point]) -> float:
    """Average distance from each point of ``to_curve`` to its nearest point of ``from_curve``.

    The measure is directional: every point of ``to_curve`` has to be close
    to ``from_curve``, not the other way round.

    Args:
        from_curve: Points searched for the nearest neighbour
        to_curve: Points averaged over

    Returns:
        Mean nearest-point distance

    Raises:
        ValueError: If either curve is empty
    """
    if not from_curve or not to_curve:
        raise ValueError("average_distance needs two non-empty curves")
    total = 0.0
    for point in to_curve:
        total += min(distance(other, point) for other in from_curve)
    return total / len(to_curve)


def get_vectors(curve: Sequence[Point]) -> list[Point]:
    """Consecutive difference vectors of a polyline."""
    return [Point(b.x - a.x, b.y - a.y) for a, b in zip(curve, curve[1:])]


def cosine_similarity(v1: Point, v2: Point) -> float:
    """Cosine of the angle between two vectors, 0.0 if either has no length."""
    magnitude1 = math.hypot(v1.x, v1.y)
    magnitude2 = math.hypot(v2.x, v2.y)
    if magnitude1 == 0 or magnitude2 == 0:
        return 0.0
    return (v1.x * v2.x + v1.y * v2.y) / (magnitude1 * magnitude2)


def avg_cosine_similarity(user_stroke: Sequence[Point], canonical_stroke: Sequence[Point]) -> float:
    """Average direction agreement of two strokes.

    For every segment vector of the canonical stroke, take the best cosine
    similarity against any segment vector of the user stroke, then average.
    A stroke drawn backwards scores negative.

    Raises:
        ValueError: If either stroke has fewer than two points
    """
    user_vectors = get_vectors(user_stroke)
    canonical_vectors = get_vectors(canonical_stroke)
    if not user_vectors or not canonical_vectors:
        raise ValueError("avg_cosine_similarity needs at least two points per stroke")

    similarities = [
        max(cosine_similarity(user_vector, canonical_vector) for user_vector in user_vectors)
        for canonical_vector in canonical_vectors
    ]
    return sum(similarities) / len(similarities)


def frechet_distance(curve1: Sequence[Point], curve2: Sequence[Point]) -> float:
    """Discrete Fréchet distance between two point sequences.

    Uses the dynamic-programming recurrence over a (long x short) grid,
    keeping only one column of the shorter curve at a time:

        f(0, 0) = d(p0, q0)
        f(i, 0) = max(f(i-1, 0), d(pi, q0))
        f(0, j) = max(f(0, j-1), d(p0, qj))
        f(i, j) = max(min(f(i-1, j), f(i-1, j-1), f(i, j-1)), d(pi, qj))

    Args:
        curve1: First point sequence
        curve2: Second point sequence

    Returns:
        Fréchet distance; the argument order does not change the result

    Raises:
        ValueError: If either curve is empty

    Examples:
        >>> line = [Point(0.0, 0.0), Point(1.0, 0.0)]
        >>> frechet_distance(line, line)
        0.0
    """
    if not curve1 or not curve2:
        raise ValueError("frechet_distance needs two non-empty curves")

    if len(curve1) >= len(curve2):
        long_curve, short_curve = curve1, curve2
    else:
        long_curve, short_curve = curve2, curve1

    prev_col: list[float] = []
    for i, p in enumerate(long_curve):
        cur_col: list[float] = []
        for j, q in enumerate(short_curve):
            d = distance(p, q)
            if i == 0 and j == 0:
                value = d
            elif j == 0:
                value = max(prev_col[0], d)
            elif i == 0:
                value = max(cur_col[j - 1], d)
            else:
                value = max(min(prev_col[j], prev_col[j - 1], cur_col[j - 1]), d)
            cur_col.append(value)
        prev_col = cur_col

    return prev_col[-1]


def rotate(curve: Sequence[Point], theta: float) -> list[Point]:
    """Rotate points about the origin by ``theta`` radians (counter-clockwise)."""
    cos_t = math.cos(theta)
    sin_t = math.sin(theta)
    return [Point(cos_t * p.x - sin_t * p.y, sin_t * p.x + cos_t * p.y) for p in curve]
