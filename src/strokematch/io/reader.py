"""Readers for single glyph records and user strokes stored as JSON.

A glyph record file holds one decoded dataset entry (the same object a line
of a character dataset holds). A stroke file holds a JSON list of ``[x, y]``
pairs already expressed in the glyph's unit square.
"""

import json
from pathlib import Path
from typing import Any

from strokematch.domain import Point, RawGlyphRecord
from strokematch.exceptions import RecordFormatError


def _load_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")
    try:
        return json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise RecordFormatError(f"{path} is not valid JSON: {e}") from e


def read_glyph_record(path: Path) -> RawGlyphRecord:
    """Load one glyph record.

    Args:
        path: JSON file holding a single record object

    Returns:
        RawGlyphRecord

    Raises:
        FileNotFoundError: If the file does not exist
        RecordFormatError: If the file is not a record object
    """
    data = _load_json(path)
    if not isinstance(data, dict):
        raise RecordFormatError(f"{path} must hold a JSON object")
    try:
        return RawGlyphRecord.from_dict(data)
    except KeyError as e:
        raise RecordFormatError(f"{path} is missing key {e}") from e


def read_points(path: Path) -> list[Point]:
    """Load a user stroke.

    Args:
        path: JSON file holding a list of [x, y] pairs

    Returns:
        Points in file order

    Raises:
        FileNotFoundError: If the file does not exist
        RecordFormatError: If the file is not a list of pairs
    """
    data = _load_json(path)
    if not isinstance(data, list):
        raise RecordFormatError(f"{path} must hold a list of [x, y] pairs")

    points: list[Point] = []
    for idx, pair in enumerate(data):
        if not isinstance(pair, list) or len(pair) != 2:
            raise RecordFormatError(f"{path}: entry {idx} is not an [x, y] pair")
        try:
            points.append(Point(float(pair[0]), float(pair[1])))
        except (TypeError, ValueError) as e:
            raise RecordFormatError(f"{path}: entry {idx} is not numeric") from e
    return points
