"""Circle-center inference for circular arc commands.

An arc command only stores its end point, radius and the two SVG flags. Two
circles of that radius pass through both end points; this module finds both
centers and picks the one the flags ask for.

All functions are pure and return None instead of raising when no circle
exists, so callers decide whether to drop the arc or the whole outline.
"""

import math
from collections.abc import Sequence
from enum import Enum, auto

from strokematch.domain import (
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


class Quadrant(Enum):
    """Quadrant of the displacement from an arc's start to its end.

    Zero displacement along an axis counts as positive.
    """

    FIRST = auto()
    SECOND = auto()
    THIRD = auto()
    FOURTH = auto()


def get_quadrant(start: Point, end: Point) -> Quadrant:
    """Classify the direction of the chord from ``start`` to ``end``."""
    dx = end.x - start.x
    dy = end.y - start.y
    if dy >= 0:
        return Quadrant.FIRST if dx >= 0 else Quadrant.SECOND
    return Quadrant.FOURTH if dx >= 0 else Quadrant.THIRD


def find_arc_centers(start: Point, end: Point, radius: float) -> tuple[Point, Point] | None:
    """Find both centers of circles with ``radius`` through two points.

    The centers lie on the perpendicular bisector of the chord, at
    ``sqrt(r² - (chord/2)²)`` from its midpoint. The first center is the
    one offset towards positive x; for a horizontal chord, where both share
    the midpoint's x, it is the one offset towards negative y.

    Args:
        start: First point on the circle
        end: Second point on the circle
        radius: Circle radius

    Returns:
        Pair of centers, or None when the points coincide or the radius is
        shorter than half the chord

    Examples:
        >>> find_arc_centers(Point(0.0, 0.0), Point(6.0, 0.0), 5.0)
        (Point(x=3.0, y=-4.0), Point(x=3.0, y=4.0))
    """
    mid_x = (start.x + end.x) / 2.0
    mid_y = (start.y + end.y) / 2.0
    dx = end.x - start.x
    dy = end.y - start.y

    half_chord_sq = (dx / 2.0) ** 2 + (dy / 2.0) ** 2
    if half_chord_sq == 0.0:
        return None

    offset_sq = radius**2 - half_chord_sq
    if offset_sq < 0.0:
        # Remapped semicircles land a rounding error below zero
        if not math.isclose(radius**2, half_chord_sq, rel_tol=1e-9):
            return None
        offset_sq = 0.0
    offset = math.sqrt(offset_sq)

    if dx == 0.0:
        # Vertical chord: the bisector is horizontal
        ux, uy = 1.0, 0.0
    else:
        chord = math.hypot(dx, dy)
        ux, uy = -dy / chord, dx / chord
        if ux < 0.0 or (ux == 0.0 and uy > 0.0):
            ux, uy = -ux, -uy

    center1 = Point(mid_x + offset * ux, mid_y + offset * uy)
    center2 = Point(mid_x - offset * ux, mid_y - offset * uy)
    return center1, center2


def resolve_arc(start: Point, arc: ArcTo) -> ResolvedArc | None:
    """Work out the circle and angles of an arc drawn from ``start``.

    The center is chosen from the chord's quadrant and the sweep flag; the
    large-arc flag flips the traversal direction.

    Args:
        start: Current point when the arc command is drawn
        arc: The arc command

    Returns:
        ResolvedArc, or None when no circle with the arc's radius exists
    """
    centers = find_arc_centers(start, arc.to, arc.radius)
    if centers is None:
        return None

    quadrant = get_quadrant(start, arc.to)
    if quadrant in (Quadrant.FIRST, Quadrant.SECOND):
        center = centers[1] if arc.sweep else centers[0]
    else:
        center = centers[0] if arc.sweep else centers[1]

    clockwise = not arc.sweep
    if arc.large_arc:
        clockwise = not clockwise

    return ResolvedArc(
        start=start,
        end=arc.to,
        center=center,
        radius=arc.radius,
        start_angle=math.atan2(start.y - center.y, start.x - center.x),
        end_angle=math.atan2(arc.to.y - center.y, arc.to.x - center.x),
        clockwise=clockwise,
    )


def resolve_outline_arcs(outline: Sequence[PathCommand]) -> list[ResolvedArc | None]:
    """Resolve every arc of an outline in drawing order.

    Args:
        outline: Parsed outline commands

    Returns:
        One entry per ArcTo in the outline, None where no circle exists
    """
    resolved: list[ResolvedArc | None] = []
    current: Point | None = None
    subpath_start: Point | None = None

    for command in outline:
        match command:
            case MoveTo(to=p):
                subpath_start = current = p
            case ArcTo(to=p):
                resolved.append(resolve_arc(current, command) if current is not None else None)
                current = p
            case ClosePath():
                current = subpath_start
            case LineTo(to=p) | QuadCurveTo(to=p) | CubicCurveTo(to=p):
                current = p

    return resolved
