"""Glyph model construction from raw dataset records.

The builder validates a RawGlyphRecord, remaps every coordinate into the unit
square and parses each outline. Malformed records raise a GlyphDataError and
no partial glyph is ever returned.

Two coordinate conventions exist:
- STANDARD: ``((x + xOffset) / width, (y + yOffset) / height)``
- LEGACY_INVERTED: ``((x + xOffset) / 1024, (900 - y - yOffset) / 1024)``,
  the y-up layout of the makemeahanzi graphics data

The legacy convention mirrors the y axis, so arc sweep flags are inverted
with it.

The convention is chosen by the caller, never guessed from the data.
"""

import logging
from collections.abc import Sequence

from strokematch.config import BuildConfig, CoordinateConvention
from strokematch.core.parser import Remapper, parse_path
from strokematch.domain import GlyphModel, PathCommand, Point, RawGlyphRecord, StrokeRecord
from strokematch.exceptions import (
    MedianFormatError,
    MediansMismatchError,
    RecordFormatError,
    ScaleMismatchError,
    StrokeMapMismatchError,
    UnsupportedGeometryError,
)

logger = logging.getLogger(__name__)

LEGACY_SCALE = 1024.0


def make_remapper(record: RawGlyphRecord, config: BuildConfig) -> tuple[Remapper, float]:
    """Build the coordinate remapping for a record.

    Args:
        record: Raw glyph record
        config: Build configuration selecting the convention

    Returns:
        Tuple of (remap function, scale), where scale is the divisor applied
        to lengths so arc radii can follow the points

    Raises:
        ScaleMismatchError: If width and height are both given and differ
    """
    if record.width is not None and record.height is not None and record.width != record.height:
        raise ScaleMismatchError(record.width, record.height)

    x_offset = record.x_offset or 0.0
    y_offset = record.y_offset or 0.0

    if config.convention == CoordinateConvention.LEGACY_INVERTED:
        baseline = config.legacy_baseline

        def remap_legacy(point: Point) -> Point:
            return Point(
                (point.x + x_offset) / LEGACY_SCALE,
                (baseline - point.y - y_offset) / LEGACY_SCALE,
            )

        return remap_legacy, LEGACY_SCALE

    # A single declared dimension applies to both axes
    declared = record.width if record.width is not None else record.height
    scale = declared if declared is not None else config.default_scale
    if scale == 0:
        raise RecordFormatError("width and height must be non-zero")

    def remap(point: Point) -> Point:
        return Point((point.x + x_offset) / scale, (point.y + y_offset) / scale)

    return remap, scale


def parse_medians(
    medians: Sequence[Sequence[float]],
    remap: Remapper,
    character: str = "",
    stroke_index: int = 0,
) -> tuple[Point, ...]:
    """Remap a stroke's raw ``[x, y]`` median pairs.

    Raises:
        MedianFormatError: If an entry is not a pair or fewer than two points exist
    """
    points: list[Point] = []
    for pair in medians:
        if not isinstance(pair, (list, tuple)) or len(pair) != 2:
            raise MedianFormatError(
                character, stroke_index, f"expected [x, y] pairs, got {pair!r}"
            )
        try:
            point = Point(float(pair[0]), float(pair[1]))
        except (TypeError, ValueError):
            raise MedianFormatError(
                character, stroke_index, f"non-numeric coordinates {pair!r}"
            ) from None
        points.append(remap(point))

    if len(points) < 2:
        raise MedianFormatError(
            character, stroke_index, f"need at least 2 points, got {len(points)}"
        )
    return tuple(points)


class GlyphModelBuilder:
    """Builds immutable GlyphModels from raw records.

    The builder is stateless apart from its configuration and safe to share.

    Example:
        builder = GlyphModelBuilder(BuildConfig(convention=CoordinateConvention.STANDARD))
        glyph = builder.build(RawGlyphRecord.from_dict(data))
    """

    def __init__(self, config: BuildConfig | None = None) -> None:
        """Initialize the builder.

        Args:
            config: Build configuration (defaults to the standard convention)
        """
        self.config = config or BuildConfig()

    def build(self, record: RawGlyphRecord) -> GlyphModel:
        """Build a glyph model from a raw record.

        Args:
            record: Decoded dataset record

        Returns:
            Parsed GlyphModel

        Raises:
            GlyphDataError: If the record is malformed
            UnsupportedGeometryError: If an outline uses unsupported arcs and
                ``drop_unsupported_outlines`` is off
        """
        remap, scale = make_remapper(record, self.config)

        if len(record.medians) != len(record.strokes):
            raise MediansMismatchError(
                record.character, len(record.strokes), len(record.medians)
            )

        strokes: list[StrokeRecord] = []
        for idx, (path, medians) in enumerate(zip(record.strokes, record.medians)):
            outline = self._parse_outline(record.character, idx, path, remap, scale)
            strokes.append(
                StrokeRecord(
                    id=idx,
                    outline=outline,
                    medians=parse_medians(medians, remap, record.character, idx),
                )
            )

        if record.stroke_map is None:
            stroke_map = tuple(range(len(strokes)))
        elif len(record.stroke_map) != len(strokes):
            raise StrokeMapMismatchError(
                record.character, len(record.stroke_map), len(strokes)
            )
        else:
            stroke_map = tuple(record.stroke_map)

        logger.debug(
            "Built glyph %s: %d strokes, %d logical",
            record.character,
            len(strokes),
            len(set(stroke_map)),
        )
        return GlyphModel(
            character=record.character,
            strokes=tuple(strokes),
            stroke_map=stroke_map,
        )

    def _parse_outline(
        self,
        character: str,
        stroke_index: int,
        path: str,
        remap: Remapper,
        scale: float,
    ) -> tuple[PathCommand, ...]:
        try:
            return tuple(
                parse_path(
                    path,
                    remap=remap,
                    radius_scale=1.0 / scale,
                    flip_sweep=self.config.convention == CoordinateConvention.LEGACY_INVERTED,
                )
            )
        except UnsupportedGeometryError as e:
            if not self.config.drop_unsupported_outlines:
                raise
            logger.warning(
                "Dropping outline of %s stroke %d: %s", character, stroke_index, e
            )
            return ()


def build_glyph(
    record: RawGlyphRecord,
    convention: CoordinateConvention = CoordinateConvention.STANDARD,
) -> GlyphModel:
    """Build a glyph model with default settings and the given convention."""
    return GlyphModelBuilder(BuildConfig(convention=convention)).build(record)
