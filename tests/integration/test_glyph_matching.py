"""End-to-end tests: dataset record to match verdict.

Records are read from the JSON fixtures, built into glyph models and
matched against user strokes the way an application would do it.
"""

import pytest

from strokematch.config import CoordinateConvention
from strokematch.core import GlyphModelBuilder, StrokeMatcher, build_glyph, resolve_outline_arcs
from strokematch.domain import ArcTo, Point
from strokematch.io import read_glyph_record, read_points


@pytest.fixture
def horizontal_user_stroke(fixtures_dir):
    return read_points(fixtures_dir / "stroke_horizontal.json")


@pytest.fixture
def vertical_user_stroke(fixtures_dir):
    return read_points(fixtures_dir / "stroke_vertical.json")


class TestShi:
    """Matching against the two crossing strokes of 十."""

    @pytest.fixture
    def glyph(self, fixtures_dir):
        return GlyphModelBuilder().build(read_glyph_record(fixtures_dir / "glyph_shi.json"))

    def test_horizontal_stroke(self, glyph, horizontal_user_stroke):
        """Test matching the horizontal stroke."""
        result = StrokeMatcher().match(horizontal_user_stroke, glyph.merged_medians(0))
        assert result.accepted, result.outcomes

    def test_vertical_stroke(self, glyph, vertical_user_stroke):
        """Test matching the vertical stroke."""
        result = StrokeMatcher().match(vertical_user_stroke, glyph.merged_medians(1))
        assert result.accepted, result.outcomes

    def test_wrong_stroke_rejected(self, glyph, vertical_user_stroke):
        """Test that a stroke is rejected against the other stroke."""
        result = StrokeMatcher().match(vertical_user_stroke, glyph.merged_medians(0))
        assert not result.accepted
        assert result.rejected_by == "shape_fit"

    def test_each_user_stroke_matches_one_canonical_stroke(
        self, glyph, horizontal_user_stroke, vertical_user_stroke
    ):
        """Test that each user stroke matches only its own stroke."""
        matcher = StrokeMatcher()
        verdicts = {
            (name, logical_id): matcher.match(user, glyph.merged_medians(logical_id)).accepted
            for name, user in (
                ("horizontal", horizontal_user_stroke),
                ("vertical", vertical_user_stroke),
            )
            for logical_id in glyph.logical_ids()
        }
        assert verdicts == {
            ("horizontal", 0): True,
            ("horizontal", 1): False,
            ("vertical", 0): False,
            ("vertical", 1): True,
        }


class TestDing:
    """Logical strokes made of several graphical strokes."""

    @pytest.fixture
    def glyph(self, ding_record):
        return build_glyph(ding_record)

    def test_merged_logical_stroke(self, glyph):
        """Test matching against merged medians."""
        canonical = glyph.merged_medians(glyph.logical_id_at(2))
        assert len(canonical) == 4
        assert canonical[0] == Point(500 / 1024, 220 / 1024)
        assert canonical[-1] == Point(500 / 1024, 880 / 1024)

    def test_full_vertical_stroke_accepted(self, glyph):
        """Test that the full merged stroke is accepted."""
        user = [Point(500 / 1024, y / 1024) for y in (220, 380, 550, 720, 880)]
        result = StrokeMatcher().match(user, glyph.merged_medians(1))
        assert result.accepted, result.outcomes

    def test_half_stroke_rejected(self, glyph):
        """Test that half of a merged stroke is rejected."""
        user = [Point(500 / 1024, y / 1024) for y in (550, 720, 880)]
        result = StrokeMatcher().match(user, glyph.merged_medians(1))
        assert result.rejected_by == "length"

    def test_hook_arc_resolves(self, glyph):
        """Test that the hook's arc resolves to a center."""
        outline = glyph.strokes[2].outline
        arcs = [command for command in outline if isinstance(command, ArcTo)]
        assert len(arcs) == 1
        assert arcs[0].radius == pytest.approx(25 / 1024)

        (resolved,) = resolve_outline_arcs(outline)
        assert resolved is not None
        assert resolved.start == Point(520 / 1024, 880 / 1024)
        assert resolved.end == Point(480 / 1024, 880 / 1024)
        assert resolved.center.x == pytest.approx(500 / 1024)


class TestLegacyConvention:
    """Records in the inverted-axis layout."""

    def test_legacy_horizontal_stroke(self, yi_legacy_record, horizontal_user_stroke):
        """Test matching a legacy record."""
        glyph = build_glyph(yi_legacy_record, CoordinateConvention.LEGACY_INVERTED)
        result = StrokeMatcher().match(horizontal_user_stroke, glyph.merged_medians(0))
        assert result.accepted, result.outcomes

    def test_standard_convention_misplaces_legacy_record(
        self, yi_legacy_record, horizontal_user_stroke
    ):
        """Test that the wrong convention misplaces a legacy record."""
        glyph = build_glyph(yi_legacy_record, CoordinateConvention.STANDARD)
        result = StrokeMatcher().match(horizontal_user_stroke, glyph.merged_medians(0))
        assert result.rejected_by == "average_distance"
