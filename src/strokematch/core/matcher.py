"""Stroke matching decision procedure.

A user stroke is accepted when it passes every gate of an ordered chain.
The first failing gate rejects the stroke and names the reason:

1. dedup: at least two distinct consecutive points remain
2. length: the user stroke is not much shorter than the canonical one
3. shape_fit: normalized shapes are close under a few small rotations
4. average_distance: every canonical point has a user point nearby
5. start_distance / end_distance: the strokes start and end in the same place
6. direction: the stroke is not drawn backwards

Degenerate strokes are ordinary rejections, never errors. The matcher is a
pure function of its inputs and configuration.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from strokematch.config import MatchConfig, NormalizationConfig
from strokematch.core.metrics import (
    average_distance,
    avg_cosine_similarity,
    curve_length,
    distance,
    frechet_distance,
    rotate,
)
from strokematch.core.normalize import normalize_curve
from strokematch.domain import Point
from strokematch.exceptions import DegenerateStrokeError

logger = logging.getLogger(__name__)


def dedup(stroke: Sequence[Point]) -> list[Point]:
    """Drop points identical to the point just before them."""
    result: list[Point] = []
    for point in stroke:
        if not result or point != result[-1]:
            result.append(point)
    return result


def length_ratio(
    user_stroke: Sequence[Point],
    canonical_stroke: Sequence[Point],
    smoothing: float = 0.024,
) -> float:
    """Smoothed ratio of user stroke length to canonical stroke length.

    The additive smoothing keeps the ratio stable for very short strokes.
    """
    return (curve_length(user_stroke) + smoothing) / (curve_length(canonical_stroke) + smoothing)


def shape_fit_distance(
    user_stroke: Sequence[Point],
    canonical_stroke: Sequence[Point],
    rotations: Sequence[float],
    normalization: NormalizationConfig | None = None,
) -> float:
    """Minimum Fréchet distance between normalized strokes over candidate rotations.

    The canonical stroke is rotated, the user stroke is not.

    Raises:
        DegenerateStrokeError: If either stroke cannot be normalized
    """
    normalization = normalization or NormalizationConfig()
    norm_user = normalize_curve(
        user_stroke, normalization.num_points, normalization.max_segment_length
    )
    norm_canonical = normalize_curve(
        canonical_stroke, normalization.num_points, normalization.max_segment_length
    )
    return min(frechet_distance(norm_user, rotate(norm_canonical, theta)) for theta in rotations)


@dataclass
class MatchContext:
    """State shared by the gates of one match attempt.

    Attributes:
        user_stroke: User points; replaced by the deduplicated points in the first gate
        canonical_stroke: Canonical points (merged medians of a logical stroke)
        config: Gate thresholds
        normalization: Curve normalization settings
    """

    user_stroke: list[Point]
    canonical_stroke: list[Point]
    config: MatchConfig
    normalization: NormalizationConfig


@dataclass(frozen=True)
class GateOutcome:
    """Result of one gate.

    Attributes:
        name: Gate name
        passed: Whether the stroke may proceed
        value: Measured value, None when nothing could be measured
        threshold: Value compared against
    """

    name: str
    passed: bool
    value: float | None
    threshold: float | None


@dataclass
class MatchResult:
    """Verdict of a match attempt with the gate outcomes that led to it.

    Truthy when the stroke was accepted.

    Attributes:
        accepted: Final verdict
        rejected_by: Name of the first failing gate, None when accepted
        outcomes: Outcome of every gate that ran, in order
    """

    accepted: bool
    rejected_by: str | None = None
    outcomes: list[GateOutcome] = field(default_factory=list)

    def __bool__(self) -> bool:
        return self.accepted

    @property
    def metrics(self) -> dict[str, float]:
        """Measured value of every gate that produced one."""
        return {o.name: o.value for o in self.outcomes if o.value is not None}


Gate = Callable[[MatchContext], GateOutcome]


def check_dedup(ctx: MatchContext) -> GateOutcome:
    ctx.user_stroke = dedup(ctx.user_stroke)
    count = len(ctx.user_stroke)
    return GateOutcome("dedup", count > 1, float(count), 2.0)


def check_length(ctx: MatchContext) -> GateOutcome:
    ratio = length_ratio(ctx.user_stroke, ctx.canonical_stroke, ctx.config.length_smoothing)
    threshold = ctx.config.min_length_ratio
    return GateOutcome("length", ratio >= threshold, ratio, threshold)


def check_shape_fit(ctx: MatchContext) -> GateOutcome:
    threshold = ctx.config.frechet_threshold
    try:
        fit = shape_fit_distance(
            ctx.user_stroke,
            ctx.canonical_stroke,
            ctx.config.shape_fit_rotations,
            ctx.normalization,
        )
    except DegenerateStrokeError as e:
        logger.debug("Shape fit impossible: %s", e)
        return GateOutcome("shape_fit", False, None, threshold)
    return GateOutcome("shape_fit", fit < threshold, fit, threshold)


def check_average_distance(ctx: MatchContext) -> GateOutcome:
    avg = average_distance(ctx.user_stroke, ctx.canonical_stroke)
    threshold = ctx.config.avg_distance_threshold
    return GateOutcome("average_distance", avg < threshold, avg, threshold)


def check_start_distance(ctx: MatchContext) -> GateOutcome:
    start = distance(ctx.user_stroke[0], ctx.canonical_stroke[0])
    threshold = ctx.config.endpoint_threshold
    return GateOutcome("start_distance", start <= threshold, start, threshold)


def check_end_distance(ctx: MatchContext) -> GateOutcome:
    if ctx.config.compare_true_end_points:
        end = distance(ctx.user_stroke[-1], ctx.canonical_stroke[-1])
    else:
        end = distance(ctx.user_stroke[0], ctx.canonical_stroke[0])
    threshold = ctx.config.endpoint_threshold
    return GateOutcome("end_distance", end <= threshold, end, threshold)


def check_direction(ctx: MatchContext) -> GateOutcome:
    similarity = avg_cosine_similarity(ctx.user_stroke, ctx.canonical_stroke)
    threshold = ctx.config.min_direction_similarity
    return GateOutcome("direction", similarity > threshold, similarity, threshold)


GATES: tuple[Gate, ...] = (
    check_dedup,
    check_length,
    check_shape_fit,
    check_average_distance,
    check_start_distance,
    check_end_distance,
    check_direction,
)


class StrokeMatcher:
    """Runs the gate chain for user strokes against canonical strokes.

    Example:
        matcher = StrokeMatcher(MatchConfig(frechet_threshold=0.35))
        result = matcher.match(user_points, glyph.merged_medians(0))
        if result:
            ...
        else:
            print(result.rejected_by, result.metrics)
    """

    def __init__(
        self,
        config: MatchConfig | None = None,
        normalization: NormalizationConfig | None = None,
        gates: Sequence[Gate] = GATES,
    ) -> None:
        """Initialize the matcher.

        Args:
            config: Gate thresholds (defaults used if None)
            normalization: Curve normalization settings (defaults used if None)
            gates: Ordered gate chain
        """
        self.config = config or MatchConfig()
        self.normalization = normalization or NormalizationConfig()
        self.gates = tuple(gates)

    def match(self, user_stroke: Sequence[Point], canonical_stroke: Sequence[Point]) -> MatchResult:
        """Decide whether a user stroke matches a canonical stroke.

        Args:
            user_stroke: Points drawn by the user, in the glyph's unit square
            canonical_stroke: Canonical median points, possibly merged from
                several graphical strokes

        Returns:
            MatchResult with the verdict and every gate outcome computed

        Raises:
            ValueError: If the canonical stroke has fewer than two points
        """
        if len(canonical_stroke) < 2:
            raise ValueError("canonical stroke needs at least two points")

        ctx = MatchContext(
            user_stroke=list(user_stroke),
            canonical_stroke=list(canonical_stroke),
            config=self.config,
            normalization=self.normalization,
        )
        result = MatchResult(accepted=True)

        for gate in self.gates:
            outcome = gate(ctx)
            result.outcomes.append(outcome)
            logger.debug(
                "Gate %s: value=%s threshold=%s passed=%s",
                outcome.name,
                outcome.value,
                outcome.threshold,
                outcome.passed,
            )
            if not outcome.passed:
                result.accepted = False
                result.rejected_by = outcome.name
                break

        return result


def strokes_match(
    user_stroke: Sequence[Point],
    canonical_stroke: Sequence[Point],
    config: MatchConfig | None = None,
) -> bool:
    """Check whether a user stroke matches a canonical stroke.

    Args:
        user_stroke: Points drawn by the user
        canonical_stroke: Canonical median points
        config: Gate thresholds (defaults used if None)

    Returns:
        True if every gate passes
    """
    return StrokeMatcher(config).match(user_stroke, canonical_stroke).accepted
