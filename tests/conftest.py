"""Shared fixtures for strokematch tests."""

import json
from pathlib import Path
from typing import Any

import pytest

from strokematch.domain import Point, RawGlyphRecord

FIXTURES_DIR = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> Any:
    """Load a JSON fixture by file name."""
    return json.loads((FIXTURES_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def fixtures_dir() -> Path:
    """Directory holding the JSON fixtures."""
    return FIXTURES_DIR


@pytest.fixture
def shi_record() -> RawGlyphRecord:
    """Two-stroke glyph 十 in a 1024 unit space."""
    return RawGlyphRecord.from_dict(load_fixture("glyph_shi.json"))


@pytest.fixture
def ding_record() -> RawGlyphRecord:
    """Glyph 丁 whose vertical stroke is split into two graphical strokes."""
    return RawGlyphRecord.from_dict(load_fixture("glyph_ding.json"))


@pytest.fixture
def yi_legacy_record() -> RawGlyphRecord:
    """Glyph 一 in the legacy inverted-axis layout."""
    return RawGlyphRecord.from_dict(load_fixture("glyph_yi_legacy.json"))


@pytest.fixture
def horizontal_line() -> list[Point]:
    """Straight canonical stroke, left to right, through several medians."""
    return [Point(0.1 + 0.2 * i, 0.5) for i in range(5)]


@pytest.fixture
def curved_stroke() -> list[Point]:
    """Bent polyline used for invariance checks."""
    return [Point(0.0, 0.0), Point(1.0, 0.2), Point(1.5, 1.0), Point(1.6, 2.0)]
