"""Unit tests for glyph model construction."""

import logging

import pytest

from strokematch.config import BuildConfig, CoordinateConvention
from strokematch.core.arc import resolve_outline_arcs
from strokematch.core.builder import GlyphModelBuilder, build_glyph, make_remapper, parse_medians
from strokematch.domain import ArcTo, ClosePath, LineTo, MoveTo, Point, RawGlyphRecord
from strokematch.exceptions import (
    GlyphDataError,
    MedianFormatError,
    MediansMismatchError,
    PathSyntaxError,
    RecordFormatError,
    ScaleMismatchError,
    StrokeMapMismatchError,
    UnequalRadiusError,
)


def make_record(**overrides) -> RawGlyphRecord:
    """Create a small one-stroke record with optional field overrides."""
    fields = {
        "character": "一",
        "strokes": ["M 0 0 L 1024 0"],
        "medians": [[[0, 0], [1024, 0]]],
        "width": 1024,
        "height": 1024,
    }
    fields.update(overrides)
    return RawGlyphRecord(**fields)


class TestMakeRemapper:
    """Tests for the coordinate conventions."""

    def test_standard_convention(self):
        """Test remapping with the standard convention."""
        remap, scale = make_remapper(make_record(), BuildConfig())
        assert scale == 1024
        assert remap(Point(512.0, 256.0)) == Point(0.5, 0.25)

    def test_offsets_added_before_scaling(self):
        """Test that offsets are added before dividing by the scale."""
        remap, _ = make_remapper(
            make_record(width=100, height=100, x_offset=10, y_offset=-20), BuildConfig()
        )
        assert remap(Point(40.0, 70.0)) == Point(0.5, 0.5)

    def test_default_scale(self):
        """Test the scale used when no dimensions are declared."""
        remap, scale = make_remapper(make_record(width=None, height=None), BuildConfig())
        assert scale == 1024.0
        assert remap(Point(1024.0, 0.0)) == Point(1.0, 0.0)

    def test_single_dimension_scales_both_axes(self):
        """Test that one declared dimension scales both axes."""
        remap, scale = make_remapper(make_record(width=None, height=200), BuildConfig())
        assert scale == 200
        assert remap(Point(100.0, 50.0)) == Point(0.5, 0.25)

    def test_asymmetric_scale_rejected(self):
        """Test that differing width and height are rejected."""
        with pytest.raises(ScaleMismatchError) as exc_info:
            make_remapper(make_record(width=1024, height=512), BuildConfig())
        assert exc_info.value.width == 1024
        assert exc_info.value.height == 512

    def test_zero_scale_rejected(self):
        """Test that a zero scale is rejected."""
        with pytest.raises(RecordFormatError):
            make_remapper(make_record(width=0, height=0), BuildConfig())

    def test_legacy_convention(self):
        """Test remapping with the legacy inverted convention."""
        config = BuildConfig(convention=CoordinateConvention.LEGACY_INVERTED)
        remap, scale = make_remapper(make_record(width=None, height=None), config)
        assert scale == 1024.0
        assert remap(Point(512.0, 388.0)) == Point(0.5, 0.5)

    def test_legacy_convention_with_offsets(self):
        """Test legacy remapping with offsets."""
        config = BuildConfig(convention=CoordinateConvention.LEGACY_INVERTED)
        remap, _ = make_remapper(make_record(x_offset=512, y_offset=388), config)
        assert remap(Point(0.0, 0.0)) == Point(0.5, 0.5)


class TestParseMedians:
    """Tests for median remapping."""

    def test_remaps_pairs(self):
        """Test that median pairs are remapped to points."""
        points = parse_medians([[0, 0], [512, 1024]], lambda p: Point(p.x / 1024, p.y / 1024))
        assert points == (Point(0.0, 0.0), Point(0.5, 1.0))

    def test_not_a_pair(self):
        """Test that an entry that is not a pair is rejected."""
        with pytest.raises(MedianFormatError) as exc_info:
            parse_medians([[0, 0], [1, 2, 3]], lambda p: p, "字", 4)
        assert exc_info.value.character == "字"
        assert exc_info.value.stroke_index == 4

    def test_not_numeric(self):
        """Test that non-numeric coordinates are rejected."""
        with pytest.raises(MedianFormatError):
            parse_medians([[0, 0], ["a", 1]], lambda p: p)

    def test_too_few_points(self):
        """Test that a median needs at least two points."""
        with pytest.raises(MedianFormatError):
            parse_medians([[0, 0]], lambda p: p)


class TestGlyphModelBuilder:
    """Tests for building glyph models."""

    def test_builds_unit_square_glyph(self, shi_record):
        """Test building a glyph into the unit square."""
        glyph = GlyphModelBuilder().build(shi_record)

        assert glyph.character == "十"
        assert len(glyph.strokes) == 2
        assert glyph.stroke_map == (0, 1)
        assert [s.id for s in glyph.strokes] == [0, 1]
        assert glyph.strokes[0].medians == (
            Point(100 / 1024, 520 / 1024),
            Point(900 / 1024, 520 / 1024),
        )
        assert glyph.strokes[0].outline[0] == MoveTo(Point(100 / 1024, 500 / 1024))
        assert isinstance(glyph.strokes[0].outline[-1], ClosePath)

    def test_outline_points_inside_unit_square(self, shi_record):
        """Test that outline points land inside the unit square."""
        glyph = GlyphModelBuilder().build(shi_record)
        for stroke in glyph.strokes:
            for command in stroke.outline:
                if isinstance(command, (MoveTo, LineTo)):
                    assert 0.0 <= command.to.x <= 1.0
                    assert 0.0 <= command.to.y <= 1.0

    def test_explicit_stroke_map(self, ding_record):
        """Test that an explicit stroke map is kept."""
        glyph = GlyphModelBuilder().build(ding_record)
        assert glyph.stroke_map == (0, 1, 1)
        assert glyph.logical_stroke_count() == 2

    def test_arc_radius_follows_scale(self):
        """Test that arc radii are scaled with the points."""
        record = make_record(strokes=["M 0 0 A 512 512 0 0 1 1024 0"])
        glyph = GlyphModelBuilder().build(record)
        arc = glyph.strokes[0].outline[1]
        assert arc == ArcTo(radius=0.5, large_arc=False, sweep=True, to=Point(1.0, 0.0))

    def test_semicircles_resolve_after_uneven_scaling(self):
        """Test that exact semicircles survive remapping by a non power of two."""
        unresolved = []
        for x0 in range(0, 90, 5):
            for w in range(1, 30):
                record = make_record(
                    strokes=[f"M {x0} 500 A {w / 2} {w / 2} 0 0 1 {x0 + w} 500 Z"],
                    medians=[[[x0, 500], [x0 + w, 500]]],
                    width=109,
                    height=109,
                )
                glyph = GlyphModelBuilder().build(record)
                if resolve_outline_arcs(glyph.strokes[0].outline) == [None]:
                    unresolved.append((x0, w))
        assert unresolved == []

    def test_legacy_convention_flips_sweep(self):
        """Test that mirroring the y axis inverts the arc sweep flag."""
        record = make_record(
            strokes=["M 0 900 A 640 640 0 0 1 768 900"],
            medians=[[[0, 900], [768, 900]]],
            width=None,
            height=None,
        )
        glyph = build_glyph(record, CoordinateConvention.LEGACY_INVERTED)

        arc = glyph.strokes[0].outline[1]
        assert arc == ArcTo(radius=0.625, large_arc=False, sweep=False, to=Point(0.75, 0.0))
        (resolved,) = resolve_outline_arcs(glyph.strokes[0].outline)
        assert resolved is not None
        # Source center (384, 1412) mirrored through the legacy baseline
        assert resolved.center == Point(0.375, -0.5)

    def test_standard_convention_keeps_sweep(self):
        """Test that the standard convention leaves the sweep flag alone."""
        record = make_record(strokes=["M 0 900 A 640 640 0 0 1 768 900"])
        arc = build_glyph(record).strokes[0].outline[1]
        assert arc.sweep is True

    def test_medians_count_mismatch(self):
        """Test that medians must match the stroke count."""
        record = make_record(medians=[])
        with pytest.raises(MediansMismatchError) as exc_info:
            GlyphModelBuilder().build(record)
        assert exc_info.value.stroke_count == 1
        assert exc_info.value.median_count == 0

    def test_stroke_map_mismatch(self):
        """Test that a stroke map of the wrong length is rejected."""
        record = make_record(stroke_map=[0, 1])
        with pytest.raises(StrokeMapMismatchError):
            GlyphModelBuilder().build(record)

    def test_bad_path_aborts_build(self):
        """Test that a malformed path aborts the build."""
        record = make_record(strokes=["M 0 0 L 1 x"])
        with pytest.raises(PathSyntaxError):
            GlyphModelBuilder().build(record)

    def test_bad_medians_abort_build(self):
        """Test that malformed medians abort the build."""
        record = make_record(medians=[[[0, 0]]])
        with pytest.raises(GlyphDataError):
            GlyphModelBuilder().build(record)

    def test_unsupported_arc_aborts_by_default(self):
        """Test that unsupported arcs abort the build by default."""
        record = make_record(strokes=["M 0 0 A 10 20 0 0 1 100 0"])
        with pytest.raises(UnequalRadiusError):
            GlyphModelBuilder().build(record)

    def test_unsupported_arc_dropped_when_configured(self, caplog):
        """Test that unsupported outlines can be dropped with a warning."""
        record = make_record(strokes=["M 0 0 A 10 20 0 0 1 100 0"])
        builder = GlyphModelBuilder(BuildConfig(drop_unsupported_outlines=True))

        with caplog.at_level(logging.WARNING, logger="strokematch.core.builder"):
            glyph = builder.build(record)

        assert glyph.strokes[0].outline == ()
        assert len(glyph.strokes[0].medians) == 2
        assert "Dropping outline" in caplog.text

    def test_legacy_record(self, yi_legacy_record):
        """Test building a record in the legacy convention."""
        glyph = build_glyph(yi_legacy_record, CoordinateConvention.LEGACY_INVERTED)

        start, end = glyph.strokes[0].medians
        assert start == Point(100 / 1024, 520 / 1024)
        assert end == Point(900 / 1024, 520 / 1024)
