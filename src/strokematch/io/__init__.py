"""I/O layer for strokematch.

This module reads single JSON documents for the command line: one glyph
record, or one user stroke. Dataset loading and merging live outside
strokematch.

Key functions:
- read_glyph_record: Load a RawGlyphRecord
- read_points: Load a user stroke
"""

from strokematch.io.reader import read_glyph_record, read_points

__all__ = [
    "read_glyph_record",
    "read_points",
]
